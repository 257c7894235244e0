"""
Pytest configuration and fixtures for product catalog tests.
Provides AWS mocking, the DynamoDB products table and sample products.
"""

import os
from collections.abc import Callable
from decimal import Decimal
from types import SimpleNamespace
from typing import Any

import boto3
import pytest
from botocore.exceptions import ClientError
from moto import mock_aws

from core.models.product import Product

os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("PRODUCTS_TABLE_NAME", "product-catalog-products-test")
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "true")


@pytest.fixture(scope="function")
def aws_mock():
    with mock_aws():
        yield


@pytest.fixture(scope="function")
def dynamodb_resource(aws_mock):
    return boto3.resource("dynamodb", region_name=os.getenv("AWS_REGION"))


def _create_products_table(dynamodb_resource):
    """Helper to create the products table."""
    return dynamodb_resource.create_table(
        TableName=os.getenv("PRODUCTS_TABLE_NAME"),
        BillingMode="PAY_PER_REQUEST",
        KeySchema=[{"AttributeName": "product_id", "KeyType": "HASH"}],
        AttributeDefinitions=[
            {"AttributeName": "product_id", "AttributeType": "S"},
        ],
    )


@pytest.fixture(scope="function")
def dynamodb_table(dynamodb_resource):
    """
    Create the DynamoDB products table for testing.

    moto discards the table when the mock context exits.
    """
    try:
        table = dynamodb_resource.Table(os.getenv("PRODUCTS_TABLE_NAME"))
        table.load()
    except ClientError:
        table = _create_products_table(dynamodb_resource)
        table.wait_until_exists()

    return table


@pytest.fixture
def dynamodb_put_multiple_items(
    dynamodb_table,
) -> Callable[[list[dict[str, Any]]], list[dict[str, Any]]]:
    """
    Helper to insert multiple items into DynamoDB.

    Usage:
        items = dynamodb_put_multiple_items([item1, item2, item3])
    """

    def _put(items: list[dict[str, Any]]) -> list[dict[str, Any]]:
        with dynamodb_table.batch_writer() as batch:
            for item in items:
                batch.put_item(Item=item)
        return items

    return _put


@pytest.fixture
def sample_products() -> list[Product]:
    """The four reference products in natural order."""
    return [
        Product(name="product_A", price=1.0),
        Product(name="product_B", price=2.0),
        Product(name="product_C", price=3.0),
        Product(name="product_D", price=4.0),
    ]


@pytest.fixture
def sample_product_items() -> list[dict[str, Any]]:
    """Raw DynamoDB items for the reference products.

    Inserted in an order unrelated to ``position`` so tests prove the
    natural order comes from the attribute, not from the scan.
    """
    return [
        {"product_id": "prd_c", "position": 2, "name": "product_C", "price": Decimal("3.0")},
        {"product_id": "prd_a", "position": 0, "name": "product_A", "price": Decimal("1.0")},
        {"product_id": "prd_d", "position": 3, "name": "product_D", "price": Decimal("4.0")},
        {"product_id": "prd_b", "position": 1, "name": "product_B", "price": Decimal("2.0")},
    ]


@pytest.fixture
def dynamodb_with_products(
    dynamodb_put_multiple_items,
    sample_product_items,
) -> list[dict[str, Any]]:
    """DynamoDB table pre-populated with the reference products."""
    items: list[dict[str, Any]] = dynamodb_put_multiple_items(sample_product_items)
    return items


@pytest.fixture
def lambda_context():
    return SimpleNamespace(
        aws_request_id="test-request-id",
        function_name="test-function",
        memory_limit_in_mb=256,
        invoked_function_arn="arn:aws:lambda:us-east-1:000000000000:function:test",
        log_group_name="/aws/lambda/test-function",
        log_stream_name="2024/01/01/[$LATEST]test",
    )
