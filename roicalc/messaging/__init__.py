from .telegram import (
    TelegramAPIError,
    TelegramClient,
    TelegramError,
    TelegramNotConfiguredError,
    TelegramTransportError,
    build_phone_deep_link,
)

__all__ = [
    "TelegramAPIError",
    "TelegramClient",
    "TelegramError",
    "TelegramNotConfiguredError",
    "TelegramTransportError",
    "build_phone_deep_link",
]
