from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

from ratings_lib.config.settings import load_server_config

LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s]: %(message)s'


def configure_logging(config_path: Optional[Path] = None) -> logging.Logger:
    """Configure root logging for the application.

    Reads `log_level` from the server config (default WARNING), replaces the
    root handlers and returns a module logger for the caller.
    """
    level = logging.WARNING
    lvl = load_server_config(config_path).get('log_level')
    if isinstance(lvl, str):
        numeric = getattr(logging, lvl.upper(), None)
        if isinstance(numeric, int):
            level = numeric

    logging.log(100, f'[ratings]: Log level set to: {logging.getLevelName(level)}')

    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger = logging.getLogger(__name__)

    # Keep known noisy libraries quiet by default
    logging.getLogger('uvicorn.access').setLevel(logging.WARNING)
    logging.getLogger('multipart').setLevel(logging.WARNING)
    logger.info("Starting food ratings server")

    return logger
