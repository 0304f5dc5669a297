"""Aperture Icons - SVG icon resolution and REST request forwarding.

This package provides a layered architecture for serving icons:

Layers:
    - protocols: Interface contracts (TypeHandler)
    - repositories: Type handler implementations
    - services: Icon resolution logic
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)
    - rest: Request forwarder in front of the REST application

Usage:
    ```python
    from aperture_icons.repositories import BasicTypeHandler

    handler = BasicTypeHandler("/icons/basic")
    stream = handler.get_stream("Person-Node")
    ```

For HTTP API:
    ```python
    from aperture_icons.api.server import forwarder
    ```
"""

__version__ = "0.1.0"

from aperture_icons.config import settings  # noqa: E402
from aperture_icons.entities import IconResourceEntity  # noqa: E402
from aperture_icons.handlers import IconHandler  # noqa: E402
from aperture_icons.protocols import TypeHandler  # noqa: E402
from aperture_icons.repositories import BasicTypeHandler, create_type_handler  # noqa: E402
from aperture_icons.rest import ForwarderContext, ForwardingAdapter, RestForwarder  # noqa: E402
from aperture_icons.services import IconService  # noqa: E402
from aperture_icons.utils import load, shortform  # noqa: E402

__all__ = [
    "__version__",
    # Configuration
    "settings",
    # Protocols (interfaces)
    "TypeHandler",
    # Repositories (type handlers)
    "BasicTypeHandler",
    "create_type_handler",
    # Services
    "IconService",
    # Handlers (HTTP)
    "IconHandler",
    # Forwarding
    "RestForwarder",
    "ForwardingAdapter",
    "ForwarderContext",
    # Entities
    "IconResourceEntity",
    # Utilities
    "load",
    "shortform",
]
