"""Exception handlers turning service errors into JSON error responses.

Every error response has the shape {"error": <message>, "details"?: <any>}.
"""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from playlist_viewer.core import PlaylistViewerError, log_error, log_warning


async def handle_service_error(_request: Request, exc: PlaylistViewerError) -> JSONResponse:
    if exc.status_code >= 500:
        log_error(f"{type(exc).__name__}: {exc.message}")
    else:
        log_warning(f"{type(exc).__name__} ({exc.status_code}): {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def handle_request_validation_error(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body", "details": jsonable_encoder(exc.errors())},
    )


async def handle_unexpected_error(_request: Request, exc: Exception) -> JSONResponse:
    log_error(f"Unhandled error: {exc!r}")
    return JSONResponse(
        status_code=500,
        content={"error": "Internal Server Error", "details": str(exc)},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PlaylistViewerError, handle_service_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
