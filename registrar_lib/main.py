"""Composition helpers for Registrar.

This module exposes `create_container(config)` and `create_app(config)`.
Both perform their setup (logging, wiring, router registration) when
called, never at import time, so tests can build isolated instances.

    from registrar_lib.main import create_app, Config
    app = create_app(Config(wiring_path='wiring.yml'))
"""
from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from registrar_lib.config.wiring import WiringConfig, apply_wiring, load_wiring
from registrar_lib.logging_config import configure_logging
from registrar_lib.services import Container, ContainerError


@dataclass
class Config:
    wiring_path: Optional[str] = None
    # If None, take `thread_safe` from the wiring file (default True)
    thread_safe: Optional[bool] = None
    configure_logging: bool = True


def create_container(config: Config) -> Container:
    """Create a container and apply the configured wiring file, if any."""
    wiring = load_wiring(Path(config.wiring_path)) if config.wiring_path else WiringConfig()
    if config.configure_logging:
        logger = configure_logging(wiring.log_level)
    else:
        logger = logging.getLogger(__name__)

    thread_safe = config.thread_safe if config.thread_safe is not None else wiring.thread_safe

    container = Container(thread_safe=thread_safe)
    apply_wiring(container, wiring)
    logger.info("Container ready with %d services (thread_safe=%s)", len(container), thread_safe)
    return container


def create_app(config: Config, container: Optional[Container] = None) -> FastAPI:
    """Create a FastAPI app exposing `container` on `app.state.container`.

    When no container is passed one is built from `config`.
    """
    if container is None:
        container = create_container(config)

    app = FastAPI(title="Registrar")
    app.state.container = container

    @app.exception_handler(ContainerError)
    async def container_error_handler(request: Request, exc: ContainerError):
        return JSONResponse(
            status_code=500,
            content={'error': type(exc).__name__, 'message': str(exc), 'name': exc.name},
        )

    from registrar_lib.server.api import router as server_router
    app.include_router(server_router, prefix='/api')

    return app
