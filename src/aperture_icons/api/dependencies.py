"""Dependency injection configuration for the FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - No global mutable state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from aperture_icons.handlers import IconHandler
from aperture_icons.services import IconService

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> IconHandler:
    """Dependency injection for IconHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "icon_handler", None)
    if handler is None:
        raise RuntimeError("IconHandler not initialized. Check lifespan setup.")
    return handler


def build_lifespan(icon_service: IconService | None = None):
    """Build a lifespan context manager for the icon app.

    Args:
        icon_service: Service to install. If None, one is created from settings
            at startup.

    Returns:
        A lifespan callable for FastAPI
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        service = icon_service or IconService.create()

        app.state.icon_service = service
        app.state.icon_handler = IconHandler(icon_service=service)

        logger.info("Icon service initialized with %r", service.handler)
        if not service.is_healthy():
            logger.warning("Icon base path is not readable: %r", service.handler)

        yield

        del app.state.icon_handler
        del app.state.icon_service
        logger.info("Icon service shut down")

    return lifespan


# Type alias for cleaner dependency injection
HandlerDep = Annotated[IconHandler, Depends(get_handler)]
