"""Plain-text summary of a calculation for sharing through a messenger."""

from __future__ import annotations

from roicalc.engine.result import CalculationResult
from roicalc.models.enums import AIProvider, ComplexityTier
from roicalc.models.inputs import InputParameters
from roicalc.reporting.formatting import format_currency, format_number, format_result

COMPLEXITY_LABELS: dict[ComplexityTier, str] = {
    ComplexityTier.LOW: "Низкая",
    ComplexityTier.MEDIUM: "Средняя",
    ComplexityTier.HIGH: "Высокая",
}

PROVIDER_LABELS: dict[AIProvider, str] = {
    AIProvider.YANDEX: "YandexGPT",
    AIProvider.GIGACHAT: "GigaChat",
    AIProvider.ONPREM: "On-Premise",
}

SUMMARY_HEADER = "📊 Результаты расчёта ROI ИИ-агента"
SUMMARY_FOOTER = "Рассчитано в калькуляторе ROI ИИ-агентов"


def _plain_number(value: float) -> str:
    # 10.0 -> "10", 2.5 -> "2.5"
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def build_summary_message(result: CalculationResult, inputs: InputParameters) -> str:
    """Build the shareable summary text.

    Kept free of markup so it survives any chat client. Category labels
    follow the resolved tier and provider, not the raw input strings.
    """
    formatted = format_result(result)
    lines = [
        SUMMARY_HEADER,
        "",
        "Входные параметры:",
        f"• Запросов в месяц: {format_number(inputs.requests_per_month)}",
        f"• Время обработки: {_plain_number(inputs.processing_time_minutes)} мин",
        f"• ЗП сотрудника: {format_currency(inputs.monthly_salary)}",
        f"• Сложность: {COMPLEXITY_LABELS[result.complexity]}",
        f"• Провайдер: {PROVIDER_LABELS[result.provider]}",
        "",
        "Результаты:",
        f"⏱ Экономия времени: {formatted.time_saved}",
        f"💰 Экономия денег: {formatted.money_saved}",
        f"📈 Чистая экономия: {formatted.net_saved}",
        f"📅 Срок окупаемости: {formatted.payback_period}",
        f"🎯 ROI за год: {formatted.roi}",
        "",
        SUMMARY_FOOTER,
    ]
    return "\n".join(lines)
