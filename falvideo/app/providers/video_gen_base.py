from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class ProviderError(Exception):
    """
    Failure raised by a video provider before or during a fal.ai call.

    code is one of fal_key_missing, fal_subscribe_failed or fal_no_video_url;
    raw keeps the underlying exception or the unusable result payload.
    """

    code: str
    message: str
    raw: Optional[object] = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"
