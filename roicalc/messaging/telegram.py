"""Telegram transport -- delivers calculation summaries via the Bot API."""

from __future__ import annotations

import logging
import re
from typing import Any, Optional, Union

import httpx

from roicalc.config.settings import Settings

logger = logging.getLogger(__name__)


class TelegramError(Exception):
    """Base class for Telegram delivery failures."""


class TelegramNotConfiguredError(TelegramError):
    """Raised when no bot token is configured."""


class TelegramAPIError(TelegramError):
    """Raised when the Bot API answers with ok=false."""

    def __init__(self, description: str, error_code: Optional[int] = None):
        super().__init__(description)
        self.description = description
        self.error_code = error_code


class TelegramTransportError(TelegramError):
    """Raised when the Bot API could not be reached."""


def build_phone_deep_link(phone: str) -> Optional[str]:
    """Return a tg:// link opening a chat by phone number, or None if no digits."""
    digits = re.sub(r"\D", "", phone or "")
    if not digits:
        return None
    return f"tg://resolve?phone={digits}"


class TelegramClient:
    """Sends text messages through a Telegram bot."""

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or Settings()
        self._client = httpx.AsyncClient(timeout=self._settings.telegram_timeout)

    @property
    def is_configured(self) -> bool:
        return bool(self._settings.telegram_bot_token)

    def _method_url(self, method: str) -> str:
        base = self._settings.telegram_api_base.rstrip("/")
        return f"{base}/bot{self._settings.telegram_bot_token}/{method}"

    async def send_message(self, chat_id: Union[int, str], text: str) -> dict[str, Any]:
        """Send ``text`` to ``chat_id`` and return the sent message payload."""
        if not self.is_configured:
            raise TelegramNotConfiguredError("Telegram bot token is not configured")

        try:
            response = await self._client.post(
                self._method_url("sendMessage"),
                json={"chat_id": chat_id, "text": text},
            )
            data = response.json()
        except httpx.HTTPError as e:
            logger.error("Telegram request failed: %s", e)
            raise TelegramTransportError(str(e)) from e
        except ValueError as e:
            logger.error("Telegram returned a non-JSON body (HTTP %s)", response.status_code)
            raise TelegramTransportError(
                f"Unexpected response from Telegram (HTTP {response.status_code})"
            ) from e

        if not data.get("ok"):
            description = data.get("description", "Unknown Telegram error")
            logger.error("Telegram API error: %s", data)
            raise TelegramAPIError(description, error_code=data.get("error_code"))

        logger.info("Summary delivered to Telegram chat %s", chat_id)
        return data.get("result", {})

    async def aclose(self) -> None:
        await self._client.aclose()
