"""Services package: DI container and resolver used by the routers."""
from .container import ServiceContainer
from .resolver import resolve_service

__all__ = [
    "ServiceContainer",
    "resolve_service",
]
