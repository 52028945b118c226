from __future__ import annotations

import logging

from falvideo.app.ports.agent_runtime import AgentRuntime

logger = logging.getLogger(__name__)


class ServiceNotFoundError(RuntimeError):
    pass


class StarterService:
    """
    Service attached to the agent through the plugin. It holds no resources;
    start/stop only log.
    """

    service_type = "starter"
    capability_description = (
        "This is a starter service which is attached to the agent through the starter plugin."
    )

    def __init__(self, runtime: AgentRuntime) -> None:
        self.runtime = runtime

    @classmethod
    async def start(cls, runtime: AgentRuntime) -> "StarterService":
        logger.info("Starting starter service")
        return cls(runtime)

    @classmethod
    async def stop_service(cls, runtime: AgentRuntime) -> None:
        logger.info("Stopping starter service")
        service = runtime.get_service(cls.service_type)
        if not service:
            raise ServiceNotFoundError("Starter service not found")
        stop = getattr(service, "stop", None)
        if callable(stop):
            await stop()

    async def stop(self) -> None:
        logger.info("Starter service stopped")
