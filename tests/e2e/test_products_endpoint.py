"""
E2E Tests for List Endpoint: GET /products
"""

import pytest

pytestmark = pytest.mark.e2e


class TestProductsEndpointPagination:
    def test_default_request_returns_products_with_pagination(self, api_client) -> None:
        response = api_client.get("/products")
        assert response.status_code == 200

        body = response.json()

        assert body["totalElements"] == 4
        assert body["totalPages"] == 1
        assert body["last"] is True
        assert body["first"] is True
        assert body["size"] == 100
        assert body["numberOfElements"] == 4
        assert body["pageable"]["offset"] == 0
        assert body["pageable"]["pageNumber"] == 0
        assert body["pageable"]["pageSize"] == 100
        assert body["pageable"]["paged"] is True
        assert [(p["name"], p["price"]) for p in body["content"]] == [
            ("product_A", 1.0),
            ("product_B", 2.0),
            ("product_C", 3.0),
            ("product_D", 4.0),
        ]

    def test_page_size_two_sorted_by_price_desc_skips_two_products(self, api_client) -> None:
        response = api_client.get("/products", {"page": 1, "size": 2, "sort": "price,DESC"})
        assert response.status_code == 200

        body = response.json()

        assert body["totalElements"] == 4
        assert body["totalPages"] == 2
        assert body["last"] is True
        assert body["first"] is False
        assert body["size"] == 2
        assert body["numberOfElements"] == 2
        assert body["pageable"]["offset"] == 2
        assert body["pageable"]["pageNumber"] == 1
        assert body["pageable"]["pageSize"] == 2
        assert body["pageable"]["paged"] is True
        assert [(p["name"], p["price"]) for p in body["content"]] == [
            ("product_B", 2.0),
            ("product_A", 1.0),
        ]


class TestProductsEndpointErrors:
    def test_unknown_sort_field_returns_400(self, api_client) -> None:
        response = api_client.get("/products", {"sort": "weight,DESC"})

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_PARAMETER"

    def test_negative_page_returns_400(self, api_client) -> None:
        response = api_client.get("/products", {"page": -1})

        assert response.status_code == 400
