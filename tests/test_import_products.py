"""Tests for the CSV product import script."""
import json

import httpx
import pytest

from import_products import (
    normalize_price,
    csv_row_to_product,
    read_csv_products,
    import_products,
)


class TestRowParsing:
    """Tests for CSV row conversion."""

    def test_normalize_price(self):
        assert normalize_price("9.989") == "9.99"
        assert normalize_price(" 5 ") == "5.00"

    @pytest.mark.parametrize("price", ["0", "-1.50", "abc"])
    def test_normalize_price_rejects_invalid(self, price):
        with pytest.raises(ValueError):
            normalize_price(price)

    def test_csv_row_to_product(self):
        row = {
            "CategoryCode": "ELECTRONICS",
            "CategoryName": "Electronics",
            "Code": "PROD001",
            "Name": "Laptop",
            "Description": "",
            "Price": "999.99",
            "Stock": "10",
        }
        result = csv_row_to_product(row)
        assert result["category_code"] == "ELECTRONICS"
        assert result["product"] == {
            "code": "PROD001",
            "name": "Laptop",
            "description": None,
            "price": "999.99",
            "stock": 10,
        }

    def test_missing_code_rejected(self):
        with pytest.raises(ValueError):
            csv_row_to_product({"CategoryCode": "C", "Name": "X", "Price": "1"})

    def test_read_csv_skips_invalid_rows(self, tmp_path):
        csv_file = tmp_path / "products.csv"
        csv_file.write_text(
            "CategoryCode,CategoryName,Code,Name,Description,Price,Stock\n"
            "ELEC,Electronics,P1,Laptop,Fast,999.99,10\n"
            "ELEC,Electronics,P2,Mouse,,-3,5\n"
            "HOME,Home,P3,Lamp,,19.90,2\n",
            encoding="utf-8",
        )
        rows = read_csv_products(csv_file)
        assert [r["product"]["code"] for r in rows] == ["P1", "P3"]

        assert len(read_csv_products(csv_file, limit=1)) == 1


class TestImport:
    """Tests for the API calls made by the importer."""

    def test_import_creates_missing_categories_and_skips_existing_products(self):
        posted = []

        def handler(request: httpx.Request) -> httpx.Response:
            if request.method == "GET" and request.url.path == "/product-categories":
                return httpx.Response(200, json=[{"id": "cat-elec", "code": "ELEC"}])
            body = json.loads(request.content)
            posted.append((request.url.path, body))
            if request.url.path == "/product-categories":
                return httpx.Response(201, json={"id": "cat-home", "code": body["code"]})
            if body["code"] == "P1":
                return httpx.Response(409, json={"detail": "exists"})
            return httpx.Response(201, json={"id": "new"})

        rows = [
            csv_row_to_product(
                {"CategoryCode": "ELEC", "Code": "P1", "Name": "Laptop", "Price": "1", "Stock": "1"}
            ),
            csv_row_to_product(
                {"CategoryCode": "HOME", "Code": "P3", "Name": "Lamp", "Price": "2", "Stock": "1"}
            ),
        ]
        with httpx.Client(transport=httpx.MockTransport(handler), base_url="http://test") as client:
            result = import_products(client, rows)

        assert result == {"created": 1, "skipped": 1}
        assert posted[0] == ("/product-categories", {"code": "HOME", "name": "HOME"})
        assert posted[2][1]["categoryId"] == "cat-home"
