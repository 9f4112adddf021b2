"""Server configuration: optional YAML file plus the PORT environment variable.

The YAML file lives at `<data_dir>/config/server_config.yml` and may define
`log_level`, `host` and `port`. Every key is optional and so is the file.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from ratings_lib.storage.serializer import YAMLSerializer

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"


def default_config_path(data_dir: str | Path = "data") -> Path:
    return Path(data_dir) / "config" / "server_config.yml"


def load_server_config(path: Optional[Path] = None) -> dict:
    """Return the parsed server config, or {} when absent or unreadable."""
    cfg_path = Path(path) if path else default_config_path()
    if not cfg_path.exists():
        return {}
    try:
        cfg = YAMLSerializer().load(cfg_path.read_bytes())
    except Exception:
        logger.exception('Failed to load server configuration from %s', cfg_path)
        return {}
    if not isinstance(cfg, dict):
        logger.warning('Server configuration %s is not a mapping; ignoring it', cfg_path)
        return {}
    return cfg


def resolve_port(cfg: Mapping[str, Any], environ: Mapping[str, str]) -> int:
    """PORT from the environment wins, then the config file, then 3000."""
    raw = environ.get("PORT") or cfg.get("port") or DEFAULT_PORT
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"Port must be numeric, got {raw!r}") from None


def resolve_host(cfg: Mapping[str, Any]) -> str:
    return str(cfg.get("host") or DEFAULT_HOST)
