"""Product Catalog Service Package."""

__version__ = "1.0.0"
__description__ = (
    "Serverless paginated product catalog using AWS Lambda and DynamoDB"
)

__all__ = ["handlers", "core"]
