"""Plugin descriptor handed to the host agent framework."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from fastapi import APIRouter

from falvideo.app import config
from falvideo.app.routers.status import router as status_router
from falvideo.app.services.action_registry import resolve_action
from falvideo.app.services.model_handlers import MODEL_HANDLERS, ModelHandler
from falvideo.app.services.plugin_events import EventHandler, build_event_handlers
from falvideo.app.services.quick_provider import QuickProvider, quick_provider
from falvideo.app.services.starter_service import StarterService
from falvideo.app.services.text_to_video import TextToVideoAction, text_to_video_action

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Plugin:
    name: str
    description: str
    config: Dict[str, Optional[str]]
    actions: List[TextToVideoAction] = field(default_factory=list)
    providers: List[QuickProvider] = field(default_factory=list)
    services: List[type] = field(default_factory=list)
    routes: List[APIRouter] = field(default_factory=list)
    events: Dict[str, List[EventHandler]] = field(default_factory=dict)
    models: Dict[str, ModelHandler] = field(default_factory=dict)

    async def init(self, plugin_config: Mapping[str, Any]) -> Dict[str, Optional[str]]:
        """Validate the config map and export the values that are set."""
        logger.info("Initializing %s", self.name)
        validated = config.validate_plugin_config(plugin_config)
        for key, value in validated.items():
            if value:
                os.environ[key] = value
        return validated

    def get_action(self, name: str | None) -> Optional[TextToVideoAction]:
        """Action registered under `name` or one of its similes."""
        return resolve_action(self.actions, name)


def build_plugin(settings: config.Settings | None = None) -> Plugin:
    settings = settings or config.get_settings()
    return Plugin(
        name=config.PLUGIN_NAME,
        description=config.PLUGIN_DESCRIPTION,
        config=settings.plugin_config(),
        actions=[text_to_video_action],
        providers=[quick_provider],
        services=[StarterService],
        routes=[status_router],
        events=build_event_handlers(),
        models=dict(MODEL_HANDLERS),
    )
