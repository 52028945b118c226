from __future__ import annotations

from falvideo.app import config
from falvideo.app.ports.video_gen_provider import VideoGenProvider
from falvideo.app.providers.fal_hailuo import FalHailuoProvider


def get_video_gen_provider(fal_key: str) -> VideoGenProvider:
    return FalHailuoProvider(
        fal_key=fal_key,
        model_id=config.FAL_HAILUO_MODEL_ID,
        duration=config.FAL_HAILUO_DURATION,
    )
