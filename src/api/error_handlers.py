"""Global exception handlers.

- StoreUnavailableError → 503 plain text
- RequestValidationError (malformed body) → 400 with field-level details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from domain.model.errors import StoreUnavailableError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(StoreUnavailableError)
    async def store_unavailable_handler(request: Request, exc: StoreUnavailableError):
        logger.error("Store unavailable", extra={"path": request.url.path, "error": str(exc)})
        return PlainTextResponse("Database unavailable", status_code=status.HTTP_503_SERVICE_UNAVAILABLE)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("Malformed request", extra={"path": request.url.path})
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": [
                {"field": ".".join(str(loc) for loc in err.get("loc", [])), "message": err.get("msg", "")}
                for err in exc.errors()
            ]},
        )
