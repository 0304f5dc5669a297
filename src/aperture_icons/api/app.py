"""FastAPI application serving SVG icons by type."""

from fastapi import FastAPI, Request, Response

from aperture_icons import __version__
from aperture_icons.api.dependencies import HandlerDep, build_lifespan
from aperture_icons.dto import HealthCheckResponse, ServiceInfoResponse
from aperture_icons.services import IconService

DESCRIPTION = "Serves SVG icons resolved from icon type names"


def create_app(icon_service: IconService | None = None) -> FastAPI:
    """Create the icon application.

    Args:
        icon_service: Service to serve icons from. If None, one is created
            from settings when the app starts.

    Returns:
        The FastAPI application
    """
    app = FastAPI(
        title="Aperture Icons API",
        description=DESCRIPTION,
        version=__version__,
        lifespan=build_lifespan(icon_service),
    )

    @app.get("/", response_model=ServiceInfoResponse)
    async def root() -> ServiceInfoResponse:
        """Root endpoint with API information."""
        return ServiceInfoResponse(
            name="Aperture Icons API",
            version=__version__,
            description=DESCRIPTION,
            endpoints={
                "icons": "/icons/{type_name}",
                "health": "/health",
                "docs": "/docs",
            },
        )

    @app.get("/health", response_model=HealthCheckResponse)
    async def health(handler: HandlerDep) -> HealthCheckResponse:
        """Health check endpoint."""
        return await handler.health_check()

    @app.get("/icons/{type_name}", response_class=Response)
    async def get_icon(type_name: str, request: Request, handler: HandlerDep) -> Response:
        """Get the SVG icon for a type. Query parameters are icon attributes."""
        return await handler.get_icon(type_name, dict(request.query_params))

    return app


app = create_app()
