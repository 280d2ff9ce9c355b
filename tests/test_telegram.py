"""Tests for the Telegram transport -- all mocked, no bot token needed."""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from roicalc.config.settings import Settings
from roicalc.messaging.telegram import (
    TelegramAPIError,
    TelegramClient,
    TelegramNotConfiguredError,
    TelegramTransportError,
    build_phone_deep_link,
)


def _make_client(token: str = "123:abc") -> tuple[TelegramClient, AsyncMock]:
    client = TelegramClient(settings=Settings(telegram_bot_token=token))
    mock_http = AsyncMock()
    client._client = mock_http
    return client, mock_http


def _make_response(payload, status_code: int = 200):
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = payload
    return resp


class TestPhoneDeepLink:
    def test_strips_formatting(self):
        assert build_phone_deep_link("+7 (912) 345-67-89") == "tg://resolve?phone=79123456789"

    def test_no_digits_returns_none(self):
        assert build_phone_deep_link("call me") is None
        assert build_phone_deep_link("") is None


class TestTelegramClient:
    @pytest.mark.asyncio
    async def test_sends_message(self):
        client, mock_http = _make_client()
        mock_http.post = AsyncMock(
            return_value=_make_response({"ok": True, "result": {"message_id": 42}})
        )

        result = await client.send_message(1001, "hello")

        assert result == {"message_id": 42}
        url = mock_http.post.call_args.args[0]
        assert url == "https://api.telegram.org/bot123:abc/sendMessage"
        assert mock_http.post.call_args.kwargs["json"] == {"chat_id": 1001, "text": "hello"}

    @pytest.mark.asyncio
    async def test_custom_api_base(self):
        client = TelegramClient(
            settings=Settings(telegram_bot_token="t", telegram_api_base="http://tg.local/")
        )
        mock_http = AsyncMock()
        mock_http.post = AsyncMock(return_value=_make_response({"ok": True, "result": {}}))
        client._client = mock_http

        await client.send_message("@channel", "hi")

        assert mock_http.post.call_args.args[0] == "http://tg.local/bott/sendMessage"

    @pytest.mark.asyncio
    async def test_missing_token_raises(self):
        client, mock_http = _make_client(token="")
        assert not client.is_configured
        with pytest.raises(TelegramNotConfiguredError):
            await client.send_message(1, "hello")
        mock_http.post.assert_not_called()

    @pytest.mark.asyncio
    async def test_api_error_carries_description(self):
        client, mock_http = _make_client()
        mock_http.post = AsyncMock(
            return_value=_make_response(
                {"ok": False, "error_code": 400, "description": "Bad Request: chat not found"},
                status_code=400,
            )
        )

        with pytest.raises(TelegramAPIError) as exc_info:
            await client.send_message(1, "hello")

        assert exc_info.value.description == "Bad Request: chat not found"
        assert exc_info.value.error_code == 400

    @pytest.mark.asyncio
    async def test_network_failure_wrapped(self):
        client, mock_http = _make_client()
        mock_http.post = AsyncMock(side_effect=httpx.ConnectError("Network error"))

        with pytest.raises(TelegramTransportError, match="Network error"):
            await client.send_message(1, "hello")

    @pytest.mark.asyncio
    async def test_non_json_body_wrapped(self):
        client, mock_http = _make_client()
        resp = _make_response(None, status_code=502)
        resp.json.side_effect = ValueError("not json")
        mock_http.post = AsyncMock(return_value=resp)

        with pytest.raises(TelegramTransportError, match="HTTP 502"):
            await client.send_message(1, "hello")

    @pytest.mark.asyncio
    async def test_aclose_closes_http_client(self):
        client, mock_http = _make_client()
        await client.aclose()
        mock_http.aclose.assert_awaited_once()
