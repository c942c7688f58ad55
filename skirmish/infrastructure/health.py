from __future__ import annotations

import logging

from aiohttp import web

logger = logging.getLogger(__name__)

HEALTHY_TEXT = "healthy"


async def _health(_request: web.Request) -> web.Response:
    return web.Response(text=HEALTHY_TEXT)


def build_health_app() -> web.Application:
    app = web.Application()
    app.router.add_get("/", _health)
    app.router.add_get("/health", _health)
    return app


class HealthServer:
    """Static liveness endpoint for hosting platforms that probe over HTTP."""

    def __init__(self, *, host: str = "0.0.0.0", port: int = 8080):
        self.host = host
        self.port = port
        self._runner: web.AppRunner | None = None

    async def start(self) -> None:
        if self._runner is not None:
            return
        runner = web.AppRunner(build_health_app(), access_log=None)
        await runner.setup()
        site = web.TCPSite(runner, self.host, self.port)
        await site.start()
        self._runner = runner
        logger.info("Health endpoint listening on %s:%s", self.host, self.port)

    async def stop(self) -> None:
        if self._runner is None:
            return
        await self._runner.cleanup()
        self._runner = None
