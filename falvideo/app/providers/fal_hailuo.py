from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional

import fal_client

from falvideo.app import config
from falvideo.app.ports.video_gen_provider import GeneratedVideo, VideoGenProvider
from falvideo.app.providers.video_gen_base import ProviderError

log = logging.getLogger(__name__)


class FalHailuoProvider(VideoGenProvider):
    """
    fal.ai provider wrapper for MiniMax Hailuo-02 text-to-video.
    subscribe() waits on the fal queue until the job is terminal; nothing else
    (retry, timeout, polling) is added here.
    """

    def __init__(
        self,
        *,
        fal_key: str,
        model_id: str = config.FAL_HAILUO_MODEL_ID,
        duration: str = config.FAL_HAILUO_DURATION,
    ) -> None:
        self.fal_key = fal_key
        self.model_id = model_id
        self.duration = duration
        if not self.fal_key:
            raise ProviderError("fal_key_missing", "FAL_KEY is required")

    async def generate(self, prompt: str) -> GeneratedVideo:
        arguments: Dict[str, Any] = {
            "prompt": prompt,
            "duration": self.duration,
        }

        start = time.time()
        log.info("[FalVideo] fal subscribe start model_id=%s", self.model_id)
        client = fal_client.AsyncClient(key=self.fal_key)
        try:
            result = await client.subscribe(
                self.model_id,
                arguments=arguments,
                with_logs=True,
                on_queue_update=_log_queue_update,
            )
        except Exception as exc:
            raise ProviderError("fal_subscribe_failed", "fal subscribe failed", raw=exc) from exc

        video_url = _extract_video_url(result)
        if not video_url:
            raise ProviderError("fal_no_video_url", "fal result missing video url", raw=result)

        elapsed = int((time.time() - start) * 1000)
        log.info("[FalVideo] fal subscribe done model_id=%s elapsed_ms=%s", self.model_id, elapsed)
        request_id = result.get("request_id") if isinstance(result, dict) else None
        return GeneratedVideo(
            url=video_url,
            meta={"request_id": request_id or "fal-unknown", "model_id": self.model_id},
        )


def _log_queue_update(update: Any) -> None:
    if not isinstance(update, fal_client.InProgress):
        return
    for entry in update.logs or []:
        message = entry.get("message") if isinstance(entry, dict) else entry
        if message:
            log.info("[FalVideo] fal log: %s", message)


def _extract_video_url(result: Any) -> Optional[str]:
    if not isinstance(result, dict):
        return None
    # the JS client wraps the payload in "data"; fal_client returns it bare
    wrapped = result.get("data")
    for payload in (wrapped, result):
        if not isinstance(payload, dict):
            continue
        video = payload.get("video")
        if isinstance(video, dict):
            url = video.get("url")
            if isinstance(url, str) and url:
                return url
    return None
