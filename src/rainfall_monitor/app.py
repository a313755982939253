"""FastAPI application factory for the rainfall monitoring service.

Builds the app, mounts the v1 router under ``/api/v1``, configures CORS for
the dashboard clients and maps service exceptions to the
``{"error": ..., "message": ...}`` JSON bodies the dashboard expects.
"""

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from rainfall_monitor import __version__
from rainfall_monitor.api.v1.routes import api_router
from rainfall_monitor.config import settings
from rainfall_monitor.errors import InvalidPayloadError, RecordNotFoundError
from rainfall_monitor.logger import get_logger

log = get_logger(__name__)


def _error_body(error: str, message: str = None) -> dict:
    body = {"error": error}
    if message:
        body["message"] = message
    return body


async def _not_found_handler(request: Request, exc: RecordNotFoundError):
    return JSONResponse(status_code=404, content=_error_body("Data not found", str(exc)))


async def _invalid_payload_handler(request: Request, exc: InvalidPayloadError):
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.error, exc.message))


async def _validation_handler(request: Request, exc: RequestValidationError):
    if any(err.get("type") == "json_invalid" for err in exc.errors()):
        return JSONResponse(status_code=400, content=_error_body("Invalid JSON in request body"))
    return await request_validation_exception_handler(request, exc)


async def _storage_error_handler(request: Request, exc: PyMongoError):
    log.error(f"Storage failure on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content=_error_body("Internal server error", str(exc)))


def create_app(lifespan=None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    lifespan : callable, optional
        Startup/shutdown context manager (see ``main.py``).

    Returns
    -------
    FastAPI
        Application with the API router mounted at ``/api/v1``.
    """
    app = FastAPI(title=settings.APP_NAME, version=__version__, lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["GET", "PUT", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    app.add_exception_handler(RecordNotFoundError, _not_found_handler)
    app.add_exception_handler(InvalidPayloadError, _invalid_payload_handler)
    app.add_exception_handler(RequestValidationError, _validation_handler)
    app.add_exception_handler(PyMongoError, _storage_error_handler)
    app.include_router(api_router, prefix="/api/v1")

    @app.get("/health", tags=["health"])
    def health():
        return {"status": "ok", "service": settings.APP_NAME}

    return app
