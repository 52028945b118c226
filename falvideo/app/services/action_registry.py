from __future__ import annotations

from typing import Iterable, Optional

from falvideo.app.services.text_to_video import TextToVideoAction


def _normalize(name: str | None) -> str:
    return (name or "").strip().upper().replace("-", "_")


def resolve_action(
    actions: Iterable[TextToVideoAction],
    name: str | None,
) -> Optional[TextToVideoAction]:
    """Find an action by its name, falling back to its similes."""
    key = _normalize(name)
    if not key:
        return None
    candidates = list(actions)
    for action in candidates:
        if action.name == key:
            return action
    for action in candidates:
        if key in action.similes:
            return action
    return None
