"""
Lambda handler responsible for listing products with pagination and sorting.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.utils.constants import METRIC_PRODUCTS_LISTED, METRICS_NAMESPACE, SERVICE_NAME
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import validate_request

from .models import ListProductsRequest
from .service import ListProductsService

logger = Logger(service=SERVICE_NAME, UTC=True)
tracer = Tracer(service=SERVICE_NAME)
metrics = Metrics(namespace=METRICS_NAMESPACE, service=SERVICE_NAME)


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle ``GET /products``.

    Supports:
    - Page-number pagination (page, size)
    - Single-field sorting (sort=<field>,<ASC|DESC>)

    Args:
        event: API Gateway Lambda proxy event
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response whose body is the page envelope
    """
    request_id = getattr(context, "aws_request_id", None)

    logger.info(
        "Received product list request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "query_params": event.get("queryStringParameters"),
            "request_id": request_id,
        },
    )

    params = event.get("queryStringParameters") or {}

    is_valid, result = validate_request(
        ListProductsRequest,
        params,
        request_id=request_id,
    )
    if not is_valid:
        logger.warning(
            "Request validation failed",
            extra={"query_params": params, "request_id": request_id},
        )
        return result

    request: ListProductsRequest = result
    service = ListProductsService()

    page = service.list_products(
        page=request.page,
        size=request.size,
        sort=request.sort_order,
    )

    metrics.add_metric(name=METRIC_PRODUCTS_LISTED, unit=MetricUnit.Count, value=1)

    return ResponseBuilder.ok(page.to_response())
