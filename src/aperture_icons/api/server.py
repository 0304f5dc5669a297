"""Server entry point.

Constructs the icon application once, wraps it in the request forwarder
and serves the forwarder with uvicorn.
"""

import logging

from aperture_icons.api.app import app as icon_app
from aperture_icons.config import configure_logging, settings
from aperture_icons.rest import ForwarderContext, RestForwarder

logger = logging.getLogger(__name__)

forwarder = RestForwarder(icon_app, ForwarderContext(mount_path=settings.forwarder_mount_path))
forwarder.init()


def main() -> None:
    """Run the forwarder under uvicorn."""
    import uvicorn

    configure_logging()
    logger.info("Serving icons from %s on %s:%s", settings.icon_base_path, settings.api_host, settings.api_port)
    uvicorn.run(
        "aperture_icons.api.server:forwarder",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        root_path=settings.forwarder_mount_path,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
