"""Server configuration helpers."""
from .settings import DEFAULT_PORT, load_server_config, resolve_port

__all__ = ["DEFAULT_PORT", "load_server_config", "resolve_port"]
