"""Repository layer for icon resources.

Type handlers live here. They are protocol-based (structural typing), not
inheritance-based: any class with a matching ``get_stream`` satisfies
TypeHandler. The variant in use is selected by configuration.
"""

from aperture_icons.config import settings
from aperture_icons.protocols import TypeHandler

from .basic_type_handler import BasicTypeHandler

TYPE_HANDLERS: dict[str, type] = {
    "basic": BasicTypeHandler,
}


def create_type_handler(kind: str | None = None, base_path: str | None = None) -> TypeHandler:
    """Create the configured type handler variant.

    Args:
        kind: Handler kind. If None, uses settings.icon_handler.
        base_path: Base path for the handler. If None, uses settings.

    Returns:
        A TypeHandler implementation

    Raises:
        ValueError: If the kind is not registered
    """
    kind = kind or settings.icon_handler
    try:
        handler_cls = TYPE_HANDLERS[kind]
    except KeyError:
        raise ValueError(
            f"Unknown icon handler {kind!r}, expected one of {sorted(TYPE_HANDLERS)}"
        ) from None
    return handler_cls.create(base_path=base_path)


__all__ = [
    "TypeHandler",
    "BasicTypeHandler",
    "TYPE_HANDLERS",
    "create_type_handler",
]
