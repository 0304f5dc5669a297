"""Request forwarding from the hosting server to a REST application."""

from .servlet import ASGIApp, ForwarderContext, ForwardingAdapter, RestForwarder

__all__ = [
    "ASGIApp",
    "ForwarderContext",
    "ForwardingAdapter",
    "RestForwarder",
]
