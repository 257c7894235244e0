#!/usr/bin/env python3
"""
Seed script to populate the products table.

Run:
    poetry run python seed/seed_products.py \
      --table <TABLE-NAME> \
      --endpoint-url http://localhost:4566 \
      --api-id <API-ID>
"""

import argparse
import json
import os
from pathlib import Path
import sys
from typing import Any, cast

from aws_lambda_powertools import Logger
import requests

from core.infrastructure.adapters.dynamodb_adapter import DynamoDBAdapter
from core.infrastructure.aws.dynamodb_products import DynamoDBProducts
from core.models.product import Product
from core.utils.constants import ENV_AWS_ENDPOINT_URL

logger = Logger(service="seed")


LIST_API_URL = "http://localhost:4566/restapis/{0}/snd/_user_request_/products"


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed products into the Product Catalog table")

    parser.add_argument(
        "--table",
        required=True,
        help="DynamoDB products table name",
    )
    parser.add_argument(
        "--endpoint-url",
        default=None,
        help="DynamoDB endpoint URL (e.g. LocalStack)",
    )
    parser.add_argument(
        "--api-id",
        default=None,
        help="API Gateway ID used to verify the seeded listing (optional)",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=4,
        help="Number of products to seed",
    )

    return parser.parse_args()


def load_sample_data() -> dict[str, Any]:
    data_file = Path(__file__).parent / "data" / "products.json"
    with open(data_file, encoding="utf-8") as f:
        return cast(dict[str, Any], json.load(f))


def seed_products() -> None:
    try:
        args = parse_args()
        data = load_sample_data()

        if args.endpoint_url:
            os.environ[ENV_AWS_ENDPOINT_URL] = args.endpoint_url

        repository = DynamoDBProducts(DynamoDBAdapter(table_name=args.table))

        logger.info("Starting seeding process", extra={"table": args.table})

        items = cast(list[dict[str, Any]], data.get("products", []))[: args.limit]
        for position, item in enumerate(items):
            repository.put_product(
                product_id=item["product_id"],
                product=Product(name=item["name"], price=item["price"]),
                position=position,
            )
            logger.info("Seeded product", extra={"product_id": item["product_id"]})

        logger.info("Seeding completed", extra={"count": len(items)})

        if not args.api_id:
            return

        list_response = requests.get(
            LIST_API_URL.format(args.api_id),
            timeout=30,
        )

        logger.info(
            "List products response",
            extra={
                "status": list_response.status_code,
                "response": list_response.json() if list_response.ok else list_response.text,
            },
        )

    except Exception as exc:
        logger.exception("Seeding failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    seed_products()
