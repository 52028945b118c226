from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Mapping

logger = logging.getLogger(__name__)

EventHandler = Callable[[Mapping[str, Any]], Awaitable[None]]


class EventType(str, Enum):
    MESSAGE_RECEIVED = "MESSAGE_RECEIVED"
    VOICE_MESSAGE_RECEIVED = "VOICE_MESSAGE_RECEIVED"
    WORLD_CONNECTED = "WORLD_CONNECTED"
    WORLD_JOINED = "WORLD_JOINED"


def _payload_logger(event: EventType, key: str, label: str) -> EventHandler:
    async def _handle(params: Mapping[str, Any]) -> None:
        logger.debug("%s event received", event.value)
        logger.debug("%s: %s", label, (params or {}).get(key))

    _handle.__name__ = f"on_{event.value.lower()}"
    return _handle


def build_event_handlers() -> Dict[str, List[EventHandler]]:
    return {
        EventType.MESSAGE_RECEIVED.value: [
            _payload_logger(EventType.MESSAGE_RECEIVED, "message", "Message")
        ],
        EventType.VOICE_MESSAGE_RECEIVED.value: [
            _payload_logger(EventType.VOICE_MESSAGE_RECEIVED, "message", "Message")
        ],
        EventType.WORLD_CONNECTED.value: [
            _payload_logger(EventType.WORLD_CONNECTED, "world", "World")
        ],
        EventType.WORLD_JOINED.value: [
            _payload_logger(EventType.WORLD_JOINED, "world", "World")
        ],
    }
