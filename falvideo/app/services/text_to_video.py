"""TEXT_TO_VIDEO action: prompt in, fal.ai clip URL out."""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Dict, List, Optional, Union

from falvideo.app import config
from falvideo.app.domain.text_to_video import (
    ActionExample,
    ActionResult,
    Content,
    FailureReason,
    GenerationFailure,
    GenerationOutcome,
    GenerationRequest,
    GenerationSuccess,
    Memory,
)
from falvideo.app.ports.agent_runtime import AgentRuntime, HandlerCallback
from falvideo.app.ports.video_gen_provider import VideoGenProvider
from falvideo.app.providers.video_gen_registry import get_video_gen_provider

logger = logging.getLogger(__name__)

ACTION_NAME = "TEXT_TO_VIDEO"
DESCRIPTION_PROMPT = "I need a description"

_COMMAND_PREFIX = re.compile(r"^(create video:|make video:)", re.IGNORECASE)


def normalize_prompt(text: str) -> str:
    return _COMMAND_PREFIX.sub("", text, count=1).strip()


def build_generation_request(
    text: Optional[str],
) -> Union[GenerationRequest, GenerationFailure]:
    if not text:
        return GenerationFailure(reason=FailureReason.MISSING_TEXT)
    prompt = normalize_prompt(text)
    if not prompt:
        return GenerationFailure(reason=FailureReason.EMPTY_PROMPT)
    return GenerationRequest(raw_text=text, cleaned_prompt=prompt)


async def invoke_generation(
    request: GenerationRequest,
    provider: VideoGenProvider,
) -> GenerationOutcome:
    try:
        video = await provider.generate(request.cleaned_prompt)
    except Exception as exc:
        logger.exception("[FalVideo] text-to-video generation failed")
        return GenerationFailure(reason=FailureReason.PROVIDER_ERROR, detail=exc)
    return GenerationSuccess(video_url=video.url, prompt=request.cleaned_prompt)


async def report_outcome(
    outcome: GenerationOutcome,
    message: Memory,
    callback: Optional[HandlerCallback] = None,
) -> ActionResult:
    if isinstance(outcome, GenerationSuccess):
        if callback is not None:
            await callback(Content(text=f"✅ Video ready! {outcome.video_url}"))
        return ActionResult(
            success=True,
            text="Video generated",
            data={"videoUrl": outcome.video_url, "prompt": outcome.prompt},
        )
    return _failure_result(outcome, message)


def _failure_result(failure: GenerationFailure, message: Memory) -> ActionResult:
    data = {
        "actions": [ACTION_NAME],
        "source": message.content.source,
        "reason": failure.reason.value,
    }
    if failure.reason == FailureReason.PROVIDER_ERROR:
        error = failure.detail if failure.detail is not None else RuntimeError("provider error")
        return ActionResult(success=False, error=error, data=data)
    return ActionResult(success=False, text=DESCRIPTION_PROMPT, data=data)


class TextToVideoAction:
    name = ACTION_NAME
    similes = ["CREATE_VIDEO", "MAKE_VIDEO", "GENERATE_VIDEO", "VIDEO_FROM_TEXT"]
    description = "Generate a video from text using MiniMax Hailuo-02"
    examples: List[List[ActionExample]] = [
        [
            ActionExample(
                name="{{user}}",
                content=Content(text="Create video: dolphins jumping"),
            ),
            ActionExample(
                name="{{agent}}",
                content=Content(text="Creating video!", actions=[ACTION_NAME]),
            ),
        ]
    ]

    def __init__(
        self,
        provider_factory: Callable[[str], VideoGenProvider] = get_video_gen_provider,
    ) -> None:
        self._provider_factory = provider_factory

    async def validate(
        self,
        runtime: AgentRuntime,
        message: Memory,
        state: Optional[Dict[str, Any]] = None,
    ) -> bool:
        if not runtime.get_setting(config.FAL_KEY_SETTING):
            logger.error("FAL_KEY not found in environment variables")
            return False
        return True

    async def handler(
        self,
        runtime: AgentRuntime,
        message: Memory,
        state: Optional[Dict[str, Any]] = None,
        options: Optional[Dict[str, Any]] = None,
        callback: Optional[HandlerCallback] = None,
        responses: Optional[List[Memory]] = None,
    ) -> ActionResult:
        request = build_generation_request(message.content.text)
        if isinstance(request, GenerationFailure):
            logger.info("TEXT_TO_VIDEO rejected input reason=%s", request.reason.value)
            return await report_outcome(request, message, callback)

        try:
            provider = self._provider_factory(runtime.get_setting(config.FAL_KEY_SETTING) or "")
        except Exception as exc:
            logger.exception("[FalVideo] provider setup failed")
            outcome: GenerationOutcome = GenerationFailure(
                reason=FailureReason.PROVIDER_ERROR,
                detail=exc,
            )
        else:
            outcome = await invoke_generation(request, provider)

        try:
            return await report_outcome(outcome, message, callback)
        except Exception as exc:
            # a failing callback must not leak into the host
            logger.exception("TEXT_TO_VIDEO callback delivery failed")
            return _failure_result(
                GenerationFailure(reason=FailureReason.PROVIDER_ERROR, detail=exc),
                message,
            )


text_to_video_action = TextToVideoAction()
