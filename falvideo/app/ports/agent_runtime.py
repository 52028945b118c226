from __future__ import annotations

from typing import Any, Awaitable, Callable, List, Optional, Protocol

from falvideo.app.domain.text_to_video import Content, Memory

# Live notification sink passed per call; returns the memories it created, if any.
HandlerCallback = Callable[[Content], Awaitable[Optional[List[Memory]]]]


class AgentRuntime(Protocol):
    """Subset of the host agent runtime the plugin talks to."""

    def get_setting(self, key: str) -> Any:
        ...

    def get_service(self, service_type: str) -> Any:
        ...
