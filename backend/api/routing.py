import logging
from typing import Callable

from fastapi import Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute

from api.schemas import ErrorResponse
from core.exceptions import ErrorKind, VideoCallError

logger = logging.getLogger(__name__)


def error_response(error: VideoCallError, status_code: int) -> JSONResponse:
    """Build the failure envelope returned by every call handler"""
    body = ErrorResponse(error=error.message, errorKind=error.kind)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def describe_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg')}")
    return "; ".join(parts)


class EnvelopeRoute(APIRoute):
    """Route class that logs requests and wraps body validation failures in an envelope"""

    def get_route_handler(self) -> Callable:
        original_route_handler = super().get_route_handler()

        async def custom_route_handler(request: Request) -> Response:
            logger.info(f"Request: {request.method} {request.url.path}")
            try:
                return await original_route_handler(request)
            except RequestValidationError as exc:
                detail = describe_validation_error(exc)
                logger.warning(f"Rejected {request.method} {request.url.path}: {detail}")
                return error_response(
                    VideoCallError(f"Invalid request: {detail}", kind=ErrorKind.VALIDATION),
                    status_code=400,
                )

        return custom_route_handler
