#!/usr/bin/env python3
"""
Cleanup script to remove every product from the products table.

Run:
    poetry run python seed/cleanup_products.py \
      --table <TABLE-NAME> \
      --endpoint-url http://localhost:4566
"""

import argparse
import sys

from aws_lambda_powertools import Logger
import boto3

logger = Logger(service="cleanup")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Remove seeded products")

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

    return parser.parse_args()


def cleanup_products() -> None:
    try:
        args = parse_args()

        table = boto3.resource("dynamodb", endpoint_url=args.endpoint_url).Table(args.table)

        logger.info("Starting cleanup process", extra={"table": args.table})

        deleted = 0
        scan_kwargs: dict = {"ProjectionExpression": "product_id"}

        while True:
            response = table.scan(**scan_kwargs)

            with table.batch_writer() as batch:
                for item in response.get("Items", []):
                    batch.delete_item(Key={"product_id": item["product_id"]})
                    deleted += 1

            start_key = response.get("LastEvaluatedKey")
            if not start_key:
                break
            scan_kwargs["ExclusiveStartKey"] = start_key

        logger.info("Cleanup completed successfully", extra={"deleted": deleted})

    except Exception as exc:
        logger.exception("Cleanup failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    cleanup_products()
