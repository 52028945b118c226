from __future__ import annotations

from typing import Any, Dict, Optional

from falvideo.app.domain.text_to_video import Memory, ProviderResult
from falvideo.app.ports.agent_runtime import AgentRuntime


class QuickProvider:
    name = "QUICK_PROVIDER"
    description = "A simple example provider"

    async def get(
        self,
        runtime: AgentRuntime,
        message: Memory,
        state: Optional[Dict[str, Any]] = None,
    ) -> ProviderResult:
        return ProviderResult(text="I am a provider", values={}, data={})


quick_provider = QuickProvider()
