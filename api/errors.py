"""Global exception handlers for FastAPI."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.responses import JSONResponse

from api.base import error_response, ErrorCodes
from core.exceptions import InvalidServiceConfiguration, PreviewEditError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers on the app."""

    @app.exception_handler(InvalidServiceConfiguration)
    async def invalid_service_handler(request: Request, exc: InvalidServiceConfiguration):
        logger.info(f"Rejected service configuration: {exc}")
        return JSONResponse(
            status_code=400,
            content=error_response(
                ErrorCodes.INVALID_SERVICE_CONFIGURATION, str(exc), request, field=exc.field
            ),
        )

    @app.exception_handler(PreviewEditError)
    async def preview_edit_handler(request: Request, exc: PreviewEditError):
        return JSONResponse(
            status_code=400,
            content=error_response(ErrorCodes.PREVIEW_EDIT_FAILED, str(exc), request),
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        message = str(exc)
        if "not found" in message.lower():
            return JSONResponse(
                status_code=404,
                content=error_response(ErrorCodes.NOT_FOUND, message, request),
            )
        if "not editable" in message.lower():
            return JSONResponse(
                status_code=409,
                content=error_response(ErrorCodes.PROPOSAL_NOT_EDITABLE, message, request),
            )
        return JSONResponse(
            status_code=400,
            content=error_response(ErrorCodes.INVALID_REQUEST, message, request),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=422,
            content=error_response(
                ErrorCodes.VALIDATION_ERROR,
                str(exc.errors()),
                request,
            ),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception")
        return JSONResponse(
            status_code=500,
            content=error_response(
                ErrorCodes.INTERNAL_ERROR,
                "An internal error occurred",
                request,
            ),
        )
