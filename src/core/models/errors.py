"""Custom exception classes for the product catalog service."""

from typing import Any

from core.utils.constants import (
    ERROR_CODE_DYNAMODB,
    ERROR_CODE_INVALID_PARAMETER,
    ERROR_CODE_PRODUCT_LIST_FAILED,
    ERROR_CODE_RESOURCE_NOT_FOUND,
    ERROR_CODE_VALIDATION_FAILED,
)


class ProductServiceError(Exception):
    """
    Base exception for all product service errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class ValidationError(ProductServiceError):
    """Raised when request validation fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_VALIDATION_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class InvalidParameterError(ValidationError):
    """Raised when page, size or sort parameters are malformed or out of range."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INVALID_PARAMETER,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class NotFoundError(ProductServiceError):
    """Raised when a requested resource is not found."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_RESOURCE_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class DynamoDBError(ProductServiceError):
    """Raised when a DynamoDB operation fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_DYNAMODB,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class ProductListFailedError(ProductServiceError):
    """Raised when the product collection cannot be read."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_PRODUCT_LIST_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
