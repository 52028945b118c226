"""Placeholder text-model handlers registered alongside the video action."""

from __future__ import annotations

from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Optional

from falvideo.app.ports.agent_runtime import AgentRuntime

ModelHandler = Callable[..., Awaitable[str]]


class ModelType(str, Enum):
    TEXT_SMALL = "TEXT_SMALL"
    TEXT_LARGE = "TEXT_LARGE"


async def text_small(
    runtime: AgentRuntime,
    *,
    prompt: str,
    stop_sequences: Optional[List[str]] = None,
    **_: Any,
) -> str:
    return "Never gonna give you up, never gonna let you down, never gonna run around and desert you..."


async def text_large(
    runtime: AgentRuntime,
    *,
    prompt: str,
    stop_sequences: Optional[List[str]] = None,
    max_tokens: int = 8192,
    temperature: float = 0.7,
    frequency_penalty: float = 0.7,
    presence_penalty: float = 0.7,
    **_: Any,
) -> str:
    return "Never gonna make you cry, never gonna say goodbye, never gonna tell a lie and hurt you..."


MODEL_HANDLERS: Dict[str, ModelHandler] = {
    ModelType.TEXT_SMALL.value: text_small,
    ModelType.TEXT_LARGE.value: text_large,
}
