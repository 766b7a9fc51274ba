# src/testbridge/telemetry/logger/processors.py

"""
structlog processors shared by the console and file renderers.
"""

import logging
from typing import Any

from structlog.typing import EventDict, WrappedLogger

LOG_EMOJIS = {
    logging.DEBUG: "🐛",
    logging.INFO: "ℹ️",
    logging.WARNING: "⚠️",
    logging.ERROR: "❌",
    logging.CRITICAL: "💥",
    "compile": "🔧",
    "reject": "🚫",
    "run": "🧪",
    "config": "📄",
    "general": "➡️",
}

# Keys callers may pass to pick an emoji without it reaching the renderer.
_INTERNAL_KEYS = ("emoji_key",)


def add_emoji_processor(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Prefix the event with an emoji chosen by ``emoji_key`` or by level."""
    emoji_key: Any = event_dict.get("emoji_key")
    if emoji_key in LOG_EMOJIS:
        emoji = LOG_EMOJIS[emoji_key]
    else:
        level = logging.getLevelName(method_name.upper())
        emoji = LOG_EMOJIS.get(level, LOG_EMOJIS["general"])
    event = event_dict.get("event")
    if isinstance(event, str):
        event_dict["event"] = f"{emoji} {event}"
    return event_dict


def remove_extra_keys_processor(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Drop keys that only steer other processors."""
    for key in _INTERNAL_KEYS:
        event_dict.pop(key, None)
    return event_dict


# 🔼⚙️
