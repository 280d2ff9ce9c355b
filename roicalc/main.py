"""FastAPI application for the AI agent ROI calculator."""

from __future__ import annotations

import logging
from dataclasses import asdict
from functools import lru_cache
from typing import Any, AsyncIterator, Optional, Union

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field, field_validator
import uvicorn

from roicalc import __version__
from roicalc.config.settings import Settings, get_settings
from roicalc.costs import CostTables, load_cost_tables
from roicalc.engine import CalculationEngine, CalculationResult
from roicalc.hooks import log_calculation
from roicalc.messaging import (
    TelegramAPIError,
    TelegramClient,
    TelegramNotConfiguredError,
    TelegramTransportError,
    build_phone_deep_link,
)
from roicalc.models.enums import AIProvider, ComplexityTier, RoiStatus
from roicalc.models.inputs import InputParameters
from roicalc.reporting import build_chart_data, build_summary_message, format_result

settings = get_settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="AI Agent ROI Calculator API", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class CalculateRequest(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    requests_per_month: int = Field(default=5000, ge=0)
    processing_time_minutes: float = Field(default=10, ge=0)
    monthly_salary: float = Field(default=100_000, ge=0)
    complexity: str = ComplexityTier.MEDIUM.value
    provider: str = AIProvider.YANDEX.value

    def to_inputs(self) -> InputParameters:
        return InputParameters(
            requests_per_month=self.requests_per_month,
            processing_time_minutes=self.processing_time_minutes,
            monthly_salary=self.monthly_salary,
            complexity=self.complexity,
            provider=self.provider,
        )


class SummaryRequest(CalculateRequest):
    phone: Optional[str] = None


class TelegramSendRequest(CalculateRequest):
    chat_id: Union[int, str]

    @field_validator("chat_id")
    @classmethod
    def chat_id_not_blank(cls, v: Union[int, str]) -> Union[int, str]:
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("chat_id must not be empty")
        return v


class FormattedResponse(BaseModel):
    hourly_rate: str
    implementation_cost: str
    monthly_ai_cost: str
    time_saved: str
    money_saved: str
    net_saved: str
    payback_period: str
    roi: str


class ChartResponse(BaseModel):
    labels: list[int]
    values: list[float]
    breakeven_month: Optional[int]
    tooltip_titles: list[str]
    tooltip_labels: list[str]
    show_zero_line: bool


class CalculateResponse(BaseModel):
    complexity: ComplexityTier
    provider: AIProvider
    hourly_rate: float
    implementation_cost: float
    monthly_ai_cost: float
    time_saved_hours: float
    money_saved_per_month: float
    net_saved_per_month: float
    payback_period_months: Optional[float]
    payback_never: bool
    roi_percent_first_year: float
    roi_status: RoiStatus
    net_saved_negative: bool
    formatted: FormattedResponse
    chart: ChartResponse


class SummaryResponse(BaseModel):
    message: str
    phone_deep_link: Optional[str] = None


class TelegramSendResponse(BaseModel):
    status: str
    message_id: Optional[int] = None


@lru_cache
def get_engine() -> CalculationEngine:
    return CalculationEngine(cost_tables=load_cost_tables(get_settings().cost_tables_path))


async def get_telegram_client() -> AsyncIterator[TelegramClient]:
    """Per-request Telegram client, closed once the response is done."""
    client = TelegramClient(settings=get_settings())
    try:
        yield client
    finally:
        await client.aclose()


def _run(
    body: CalculateRequest,
    engine: CalculationEngine,
    active_settings: Settings,
) -> tuple[InputParameters, CalculationResult]:
    """Validate categories if required, then run the engine."""
    if active_settings.strict_categories:
        if body.complexity not in {t.value for t in ComplexityTier}:
            logger.info("Rejected unknown complexity %r", body.complexity)
            raise HTTPException(status_code=422, detail=f"Unknown complexity '{body.complexity}'")
        if body.provider not in {p.value for p in AIProvider}:
            logger.info("Rejected unknown provider %r", body.provider)
            raise HTTPException(status_code=422, detail=f"Unknown provider '{body.provider}'")

    inputs = body.to_inputs()
    return inputs, engine.calculate(inputs)


def _to_response(result: CalculationResult) -> CalculateResponse:
    formatted = format_result(result)
    chart = build_chart_data(result)
    formatted_fields = asdict(formatted)
    roi_status = formatted_fields.pop("roi_status")
    net_saved_negative = formatted_fields.pop("net_saved_negative")
    return CalculateResponse(
        complexity=result.complexity,
        provider=result.provider,
        hourly_rate=result.hourly_rate,
        implementation_cost=result.implementation_cost,
        monthly_ai_cost=result.monthly_ai_cost,
        time_saved_hours=result.time_saved_hours,
        money_saved_per_month=result.money_saved_per_month,
        net_saved_per_month=result.net_saved_per_month,
        payback_period_months=result.payback_period.months,
        payback_never=result.payback_period.is_never,
        roi_percent_first_year=result.roi_percent_first_year,
        roi_status=roi_status,
        net_saved_negative=net_saved_negative,
        formatted=FormattedResponse(**formatted_fields),
        chart=ChartResponse(**asdict(chart)),
    )


@app.post("/api/calculate", response_model=CalculateResponse)
async def calculate(
    body: CalculateRequest,
    engine: CalculationEngine = Depends(get_engine),
    active_settings: Settings = Depends(get_settings),
):
    """Run the ROI calculation and return raw, formatted and chart data."""
    inputs, result = _run(body, engine, active_settings)
    log_calculation(inputs, result, channel="api")
    return _to_response(result)


@app.post("/api/summary", response_model=SummaryResponse)
async def summary(
    body: SummaryRequest,
    engine: CalculationEngine = Depends(get_engine),
    active_settings: Settings = Depends(get_settings),
):
    """Build the shareable summary text, plus a Telegram phone link if asked."""
    inputs, result = _run(body, engine, active_settings)
    deep_link = build_phone_deep_link(body.phone) if body.phone else None
    return SummaryResponse(
        message=build_summary_message(result, inputs),
        phone_deep_link=deep_link,
    )


@app.post("/api/summary/telegram", response_model=TelegramSendResponse)
async def send_summary_to_telegram(
    body: TelegramSendRequest,
    engine: CalculationEngine = Depends(get_engine),
    active_settings: Settings = Depends(get_settings),
    client: TelegramClient = Depends(get_telegram_client),
):
    """Send the summary to a Telegram chat through the configured bot."""
    inputs, result = _run(body, engine, active_settings)
    log_calculation(inputs, result, channel="telegram")
    message = build_summary_message(result, inputs)
    try:
        sent: dict[str, Any] = await client.send_message(body.chat_id, message)
    except TelegramNotConfiguredError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e
    except TelegramAPIError as e:
        raise HTTPException(status_code=502, detail=f"Telegram error: {e.description}") from e
    except TelegramTransportError as e:
        raise HTTPException(status_code=502, detail=f"Network error: {e}") from e

    return TelegramSendResponse(status="sent", message_id=sent.get("message_id"))


@app.get("/api/cost-tables", response_model=CostTables)
async def cost_tables(engine: CalculationEngine = Depends(get_engine)):
    """Return the cost assumptions the engine is running with."""
    return engine.cost_tables


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


def run() -> None:
    """Serve the API with uvicorn."""
    uvicorn.run("roicalc.main:app", host="0.0.0.0", port=8000)
