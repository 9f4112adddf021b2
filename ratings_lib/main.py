"""Application factory for the food ratings FastAPI app.

This module exposes `create_app(config: Config) -> FastAPI` which performs
all setup (logging, storage/service composition, middleware, router and
static file registration). Nothing happens at import time so tests can
construct isolated apps.

To create an app for production or local runs:

    from ratings_lib.main import create_app, Config
    app = create_app(Config())
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from ratings_lib.config.settings import default_config_path
from ratings_lib.logging_config import configure_logging
from ratings_lib.storage import create_storage


@dataclass
class Config:
    data_dir: str = "data"
    db_file: str = "db.json"
    storage_backend: str = "file"
    static_dir: str = "frontend"
    # If None, <data_dir>/config/server_config.yml
    config_path: Optional[str] = None
    cors_origins: List[str] = field(default_factory=lambda: ["*"])


def create_app(config: Config) -> FastAPI:
    """Create and return a configured FastAPI application."""
    config_path = Path(config.config_path) if config.config_path else default_config_path(config.data_dir)
    logger = configure_logging(config_path)

    # Compose storage and services
    store = create_storage(
        backend=config.storage_backend,
        data_dir=config.data_dir,
        file_name=config.db_file,
    )

    from ratings_lib.persons import PersonService
    from ratings_lib.ratings import RatingService
    person_service = PersonService(store=store)
    rating_service = RatingService(store=store)

    from ratings_lib.services import ServiceContainer
    container = ServiceContainer()
    container.register_singleton("document_store", store)
    container.register_singleton("person_service", person_service)
    container.register_singleton("rating_service", rating_service)

    app = FastAPI(title="Food Ratings Server")
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    static_dir = Path(config.static_dir)
    index_file = static_dir / "index.html"

    # Exception handlers
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        detail = {'error': 'validation_error', 'message': 'Request body must be a JSON object'}
        return JSONResponse(status_code=400, content={'detail': detail})

    @app.exception_handler(StarletteHTTPException)
    async def starlette_http_exception_handler(request: Request, exc: StarletteHTTPException):
        path = request.url.path
        is_api = path == '/api' or path.startswith('/api/')
        # Only GET reaches the frontend; other methods on non-API paths are unknown routes
        if exc.status_code == 405 and not is_api:
            exc = StarletteHTTPException(status_code=404)
        if exc.status_code == 404:
            if not is_api and request.method == 'GET' and index_file.is_file():
                return FileResponse(index_file)
            if not isinstance(exc.detail, dict):
                error_code = {'error': 'not_found', 'message': 'The requested resource was not found.'}
                return JSONResponse(status_code=404, content={'detail': error_code})
        return JSONResponse(status_code=exc.status_code, content={'detail': exc.detail}, headers=exc.headers)

    # Router registration: import routers here to avoid import-time side-effects
    from ratings_lib.persons.api import router as persons_router
    from ratings_lib.ratings.api import router as ratings_router
    from ratings_lib.server.api import router as server_router

    app.include_router(persons_router, prefix='/api')
    app.include_router(ratings_router, prefix='/api')
    app.include_router(server_router, prefix='/api')

    # Everything else is the static frontend, mounted last so API routes win
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(static_dir), html=True), name="static")
    else:
        logger.info("Static directory %s not found; serving the API only", static_dir)

    return app
