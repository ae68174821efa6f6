from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from ..utils.logging_tools import debug, error, info


def _request_line(request: Request) -> str:
    return f"{request.method} {request.url.path}"


def register_error_handlers(app: FastAPI):
    """
    Register global error handlers:
    - HTTPException: status/detail passed through; lookups that miss log at debug
    - RequestValidationError: 422 with validation errors
    - Exception: 500 with exception message
    """
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        # misses are routine for template lookups
        level_log = debug if exc.status_code == 404 else info
        level_log("%s -> %s %s", _request_line(request), exc.status_code, exc.detail, category="http")
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        info("%s -> 422 %s", _request_line(request), exc.errors(), category="http")
        return JSONResponse(status_code=422, content={"detail": exc.errors()})

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        error("%s -> 500 %s", _request_line(request), exc, category="http", exc_info=True)
        return JSONResponse(status_code=500, content={"detail": str(exc)})
