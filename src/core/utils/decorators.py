"""
Common decorators and helpers for API Gateway Lambda handlers.
"""

from __future__ import annotations

import traceback
from collections.abc import Callable
from functools import wraps
from http import HTTPStatus
from typing import Any

from aws_lambda_powertools import Logger

from core.models.errors import NotFoundError, ProductServiceError, ValidationError
from core.utils.constants import SERVICE_NAME
from core.utils.response import ResponseBuilder

logger = Logger(service=SERVICE_NAME, UTC=True)

JsonDict = dict[str, Any]


def _get_user_friendly_message(exc: ValueError) -> str:
    """Keep query-parameter messages, hide anything else."""
    exc_str = str(exc)

    if exc_str.startswith(("Invalid", "Page", "Size", "Sort")):
        return exc_str

    return "The provided data is invalid. Please check your input and try again."


def _log_error(
    message: str,
    *,
    handler_name: str,
    request_id: str | None,
    exc: Exception,
    level: str = "warning",
) -> None:
    """
    Log error with consistent structure and full context.

    Args:
        message: Log message
        handler_name: Name of the handler function
        request_id: AWS request ID
        exc: Exception that was raised
        level: Log level ('warning' or 'exception')
    """
    log_extra = {
        "handler": handler_name,
        "request_id": request_id,
        "error": str(exc),
        "error_type": type(exc).__name__,
    }

    if level == "exception":
        # logger.exception automatically includes traceback
        logger.exception(message, extra=log_extra)
    else:
        log_extra["traceback"] = traceback.format_exc()
        logger.warning(message, extra=log_extra)


def _service_error_response(
    exc: ProductServiceError,
    *,
    request_id: str | None,
    cors_origin: str | None,
) -> JsonDict:
    """Map a domain error to its HTTP response."""
    if isinstance(exc, ValidationError):
        status = HTTPStatus.BAD_REQUEST
    elif isinstance(exc, NotFoundError):
        status = HTTPStatus.NOT_FOUND
    else:
        status = HTTPStatus.INTERNAL_SERVER_ERROR

    return ResponseBuilder.error(
        status=status,
        error=exc.error_code,
        message=exc.message,
        details=exc.details if status != HTTPStatus.INTERNAL_SERVER_ERROR else None,
        request_id=request_id,
        cors_origin=cors_origin,
    )


def api_gateway_handler(
    func: Callable[..., JsonDict],
) -> Callable[..., JsonDict]:
    """
    Decorator for API Gateway Lambda handlers.

    Provides:
    - Automatic CORS preflight (OPTIONS) handling
    - Centralized exception handling and error responses
    - Request ID tracking and structured logging
    - User-friendly error messages

    Example:
        @api_gateway_handler
        def lambda_handler(event, context):
            return {"statusCode": 200, "body": "Success"}
    """

    @wraps(func)
    def wrapper(
        event: Any,
        context: Any,
        *,
        cors_origin: str | None = None,
    ) -> JsonDict:
        if event.get("httpMethod") == "OPTIONS":
            return ResponseBuilder.no_content(cors_origin=cors_origin)

        request_id = getattr(context, "aws_request_id", None)

        try:
            return func(event, context)

        # Domain errors carry their own code and message
        except ProductServiceError as exc:
            _log_error(
                "Service error in handler",
                handler_name=func.__name__,
                request_id=request_id,
                exc=exc,
                level="warning" if isinstance(exc, (ValidationError, NotFoundError)) else "exception",
            )
            return _service_error_response(
                exc,
                request_id=request_id,
                cors_origin=cors_origin,
            )

        # Bad query values that escaped request validation
        except ValueError as exc:
            _log_error(
                "Validation error in handler",
                handler_name=func.__name__,
                request_id=request_id,
                exc=exc,
            )
            return ResponseBuilder.bad_request(
                _get_user_friendly_message(exc),
                request_id=request_id,
                cors_origin=cors_origin,
            )

        # Server errors (5xx) - Timeout
        except TimeoutError as exc:
            _log_error(
                "Request timeout",
                handler_name=func.__name__,
                request_id=request_id,
                exc=exc,
                level="exception",
            )
            return ResponseBuilder.error(
                message="The request took too long to process. Please try again.",
                status=HTTPStatus.GATEWAY_TIMEOUT,
                request_id=request_id,
                cors_origin=cors_origin,
            )

        # Server errors (5xx) - Connection/Network issues
        except ConnectionError as exc:
            _log_error(
                "Connection error",
                handler_name=func.__name__,
                request_id=request_id,
                exc=exc,
                level="exception",
            )
            return ResponseBuilder.error(
                message="Unable to connect to required services. Please try again later.",
                status=HTTPStatus.SERVICE_UNAVAILABLE,
                request_id=request_id,
                cors_origin=cors_origin,
            )

        # Catch-all for unexpected errors
        except Exception as exc:
            _log_error(
                "Unexpected error in handler",
                handler_name=func.__name__,
                request_id=request_id,
                exc=exc,
                level="exception",
            )
            return ResponseBuilder.internal_error(
                "We're experiencing technical difficulties. Please try again in a few moments.",
                request_id=request_id,
                cors_origin=cors_origin,
            )

    return wrapper
