"""Global constants used throughout the application.

This module centralizes all magic numbers, string literals, and configuration
values that are used across multiple modules. Using constants prevents hardcoding
values and makes it easy to change them globally.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================


# Validation Errors
ERROR_CODE_VALIDATION_FAILED = "VALIDATION_FAILED"
ERROR_CODE_INVALID_PARAMETER = "INVALID_PARAMETER"

# Not Found Errors
ERROR_CODE_RESOURCE_NOT_FOUND = "NOT_FOUND"

# Product / DynamoDB Errors
ERROR_CODE_DYNAMODB = "DYNAMODB_ERROR"
ERROR_CODE_PRODUCT_LIST_FAILED = "PRODUCT_LIST_FAILED"
ERROR_CODE_PRODUCT_INVALID_FORMAT = "PRODUCT_INVALID_FORMAT"
ERROR_CODE_PRODUCT_CREATE_FAILED = "PRODUCT_CREATE_FAILED"

# ============================================================================
# Pagination Constraints
# ============================================================================

DEFAULT_PAGE = 0
DEFAULT_PAGE_SIZE = 100
MIN_PAGE_SIZE = 1

# ============================================================================
# Sort Constraints
# ============================================================================

SORT_SEPARATOR: Final[str] = ","
DEFAULT_SORT_DIRECTION: Final[str] = "ASC"

# ============================================================================
# API Gateway Configuration
# ============================================================================

CORS_ORIGIN = "*"
CORS_METHODS = "GET,OPTIONS"
CORS_HEADERS = "Content-Type,Authorization,X-Api-Key"
EXPOSE_HEADERS = "Content-Type,Content-Length"
DEFAULT_CONTENT_TYPE = "application/json"

# ============================================================================
# Observability
# ============================================================================

SERVICE_NAME = "product-catalog"
METRICS_NAMESPACE = "ProductCatalog"
METRIC_PRODUCTS_LISTED = "ProductsListed"

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_AWS_ENDPOINT_URL = "AWS_ENDPOINT_URL"
ENV_PRODUCTS_TABLE_NAME = "PRODUCTS_TABLE_NAME"
ENV_AWS_REGION = "AWS_REGION"
DEFAULT_AWS_REGION = "us-east-1"
