"""FastAPI application factory."""

from __future__ import annotations
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from walldraw.api.routes import router
from walldraw.config import Settings, settings
from walldraw.core.bus import SignalBus
from walldraw.core.picking import GroundPicker
from walldraw.logging_config import setup_logging
from walldraw.models import CursorChange, PlacementRejected, PreviewUpdate, WallCommitted
from walldraw.services.draw_service import DrawService

logger = logging.getLogger(__name__)


def _log_signal(signal) -> None:
    logger.debug("Signal: %s", signal.type)


def watch_signals(bus: SignalBus) -> None:
    """Log every session signal at DEBUG."""
    for kind in (CursorChange, PreviewUpdate, WallCommitted, PlacementRejected):
        bus.on(kind, _log_signal)


def create_app(config: Settings | None = None) -> FastAPI:
    config = config or settings
    setup_logging(config.log_level)

    app = FastAPI(
        title="Wall Draw Engine",
        description="Constrained wall drawing on the ground plane",
        version="0.1.0",
    )

    # CORS — allow the Vite dev server
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """422 without echoing the rejected input, which may be NaN and not JSON-safe."""
        detail = [
            {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
            for err in exc.errors()
        ]
        return JSONResponse(status_code=422, content={"detail": detail})

    picker = GroundPicker(config.camera(), config.viewport(), config.ground_height)
    app.state.draw_service = DrawService(config.draw_params(), resolver=picker)
    watch_signals(app.state.draw_service.bus)

    app.include_router(router, prefix="/api")

    return app


app = create_app()
