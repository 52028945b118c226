from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Protocol


@dataclass
class GeneratedVideo:
    url: str
    meta: Dict[str, Any] = field(default_factory=dict)


class VideoGenProvider(Protocol):
    async def generate(self, prompt: str) -> GeneratedVideo:
        """Return the generated clip or raise ProviderError."""
        ...
