"""
Fixtures for the LocalStack end-to-end suite.

The suite is skipped when no deployed Product Catalog API is reachable.
"""

import logging
from decimal import Decimal

import boto3
from botocore.exceptions import BotoCoreError, ClientError
import pytest
import requests

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)

DYNAMODB_TABLE_NAME = "product-catalog-products-snd"
ENDPOINT_BASE_URL = "http://localhost:4566"

SEED_PRODUCTS = [
    {"product_id": "prd_a", "position": 0, "name": "product_A", "price": Decimal("1.0")},
    {"product_id": "prd_b", "position": 1, "name": "product_B", "price": Decimal("2.0")},
    {"product_id": "prd_c", "position": 2, "name": "product_C", "price": Decimal("3.0")},
    {"product_id": "prd_d", "position": 3, "name": "product_D", "price": Decimal("4.0")},
]


class E2EAPIClient:
    """Wrapper for making HTTP requests to the API"""

    def __init__(self, endpoint, headers):
        self.endpoint = endpoint
        self.headers = headers

    def get(self, path, params=None, headers=None):
        """Make GET request"""
        url = f"{self.endpoint}{path}"
        h = self.headers.copy()
        if headers:
            h.update(headers)
        return requests.get(url, params=params, headers=h, timeout=30)


@pytest.fixture(scope="session")
def api_details():
    """Get API Gateway details from LocalStack"""
    try:
        apigateway = boto3.client("apigateway", endpoint_url=ENDPOINT_BASE_URL)

        apis = apigateway.get_rest_apis()
        api = next(api for api in apis["items"] if "product-catalog" in api["name"])
        api_id = api["id"]

        endpoint = f"{ENDPOINT_BASE_URL}/restapis/{api_id}/snd/_user_request_"

        return {"api_id": api_id, "endpoint": endpoint, "stage": "snd"}
    except (BotoCoreError, ClientError, StopIteration) as e:
        logger.warning("Could not get API details from LocalStack: %s", e)
        pytest.skip(f"Could not get API details from LocalStack: {e}")


@pytest.fixture(scope="session")
def api_headers():
    """Default HTTP headers for API requests"""
    return {"Accept": "application/json"}


@pytest.fixture(scope="session")
def products_table(api_details):
    """Seed the reference products once per session and remove them afterwards."""
    dynamodb = boto3.resource("dynamodb", endpoint_url=ENDPOINT_BASE_URL)
    table = dynamodb.Table(DYNAMODB_TABLE_NAME)

    with table.batch_writer() as batch:
        for item in SEED_PRODUCTS:
            batch.put_item(Item=item)

    logger.info("Seeded %d products into %s", len(SEED_PRODUCTS), DYNAMODB_TABLE_NAME)

    yield table

    try:
        with table.batch_writer() as batch:
            for item in SEED_PRODUCTS:
                batch.delete_item(Key={"product_id": item["product_id"]})
    except ClientError as err:
        logger.error("Failed to cleanup DynamoDB table: %s", DYNAMODB_TABLE_NAME, exc_info=err)


@pytest.fixture
def api_client(api_details, api_headers, products_table):
    """HTTP client wrapper for E2E API testing"""
    return E2EAPIClient(api_details["endpoint"], api_headers)
