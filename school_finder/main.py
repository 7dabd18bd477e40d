import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from school_finder.api.routes import router
from school_finder.api.schemas import error_response
from school_finder.core.config import Settings, get_settings
from school_finder.core.errors import ConfigurationError
from school_finder.core.logging_config import setup_logging
from school_finder.services.store import SchoolStore


"""FastAPI application entrypoint.
Provides create_app and the module-level ASGI app instance.

The record store is opened in the lifespan from settings unless one is
injected, and every error leaves the service as {"success": false, "error"}.
"""

logger = logging.getLogger(__name__)


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(error_response(str(exc.detail)), status_code=exc.status_code)


async def _request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors and errors[0].get("type") == "json_invalid":
        message = "Request body is not valid JSON"
    elif errors:
        first = errors[0]
        where = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{where}: {first.get('msg')}" if where else "Request body must be a JSON object"
    else:
        message = "Invalid request"
    return JSONResponse(error_response(message), status_code=400)


def create_app(settings: Optional[Settings] = None, store: Optional[SchoolStore] = None) -> FastAPI:
    """Build the application. - create_app

    When ``store`` is given it is used as is and left open on shutdown;
    otherwise the lifespan builds one from settings, which fails fast with
    ConfigurationError when no database is configured.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = None
        if app.state.store is None:
            try:
                database_url = settings.resolve_database_url()
            except ConfigurationError as exc:
                logger.error("Refusing to start: %s", exc)
                raise
            owned = SchoolStore(database_url, echo=settings.db_echo)
            await owned.open()
            app.state.store = owned
        logger.info("School Finder started")
        try:
            yield
        finally:
            if owned is not None:
                await owned.close()
                app.state.store = None

    app = FastAPI(title="School Finder", lifespan=lifespan)
    app.state.store = store
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _request_validation_error)
    app.include_router(router)

    # Simple root
    @app.get("/", tags=["root"])
    async def root():
        """Root endpoint. - root"""
        return {"status": "ok", "service": "school-finder"}

    return app


app = create_app()
