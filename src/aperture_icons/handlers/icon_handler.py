"""HTTP handlers for icon operations.

Handlers convert service results into HTTP responses. They handle HTTP
concerns like status codes and media types.
"""

from collections.abc import Mapping

from fastapi import HTTPException, Response, status
from fastapi.concurrency import run_in_threadpool

from aperture_icons.dto import HealthCheckResponse
from aperture_icons.services import IconService

SVG_MEDIA_TYPE = "image/svg+xml"


class IconHandler:
    """HTTP handlers for icon operations.

    Example:
        ```python
        icon_service = IconService.create()
        handler = IconHandler(icon_service=icon_service)

        @app.get("/icons/{type_name}")
        async def get_icon(type_name: str, request: Request):
            return await handler.get_icon(type_name, dict(request.query_params))
        ```
    """

    def __init__(self, icon_service: IconService) -> None:
        """Initialize the icon handler.

        Args:
            icon_service: The icon service for resolution (required).
        """
        self._icons = icon_service

    async def get_icon(self, type_name: str, attributes: Mapping[str, str]) -> Response:
        """Handle GET /icons/{type_name} requests.

        Args:
            type_name: The requested icon type
            attributes: Query parameters, passed to the handler as attributes

        Returns:
            Response with the SVG content

        Raises:
            HTTPException: 400 for an invalid type name, 404 if no icon exists
        """
        try:
            resource = self._icons.describe(type_name)
            # File reads block, keep them off the event loop
            content = await run_in_threadpool(self._icons.read_icon, type_name, attributes)
        except ValueError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Invalid icon type: {e}",
            ) from e

        if content is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"No icon found for type {type_name!r}",
            )

        return Response(
            content=content,
            media_type=SVG_MEDIA_TYPE,
            headers={"Content-Disposition": f'inline; filename="{resource.filename}"'},
        )

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        is_healthy = self._icons.is_healthy()
        handler = self._icons.handler

        return HealthCheckResponse(
            status="healthy" if is_healthy else "unhealthy",
            icons_healthy=is_healthy,
            handler=type(handler).__name__,
            base_path=getattr(handler, "base_path", None),
        )
