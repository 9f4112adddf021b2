"""Production entry point for the food ratings server.

    python ratings.py

Listens on the PORT environment variable (default 3000).
"""
import os

import uvicorn

from ratings_lib.config.settings import load_server_config, resolve_host, resolve_port
from ratings_lib.main import create_app, Config

config = Config()
app = create_app(config)

if __name__ == "__main__":
    server_cfg = load_server_config()
    uvicorn.run(app, host=resolve_host(server_cfg), port=resolve_port(server_cfg, os.environ))
