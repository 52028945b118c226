from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from falvideo.app.config import Settings, get_settings
from falvideo.app.plugin import build_plugin


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)
    plugin = build_plugin(settings)

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        await plugin.init(plugin.config)
        yield

    app = FastAPI(title=plugin.name, description=plugin.description, lifespan=lifespan)
    for router in plugin.routes:
        app.include_router(router, prefix=settings.api_prefix)
    app.state.plugin = plugin
    return app


app = create_app()
