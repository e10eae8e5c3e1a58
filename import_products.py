#!/usr/bin/env python
"""
CSV Product Import Script

Loads product categories and products from a CSV file into the Sales API.
Categories are created on first sight of their code; existing ones are reused.

Expected columns:
    CategoryCode, CategoryName, Code, Name, Description, Price, Stock

Usage:
    python import_products.py data/products.csv
    python import_products.py data/products.csv --url http://localhost:8000
    python import_products.py data/products.csv --limit 100
"""
import argparse
import csv
import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import List, Dict, Any, Optional

import httpx


def normalize_price(price_str: str) -> str:
    """
    Normalize price to 2 decimal places.

    Args:
        price_str: Price as string

    Returns:
        Price string with 2 decimal places

    Raises:
        ValueError: If the price is not a positive number
    """
    try:
        price = Decimal(price_str.strip()).quantize(Decimal("0.01"))
    except InvalidOperation:
        raise ValueError(f"invalid price {price_str!r}")
    if price <= 0:
        raise ValueError(f"price must be positive, got {price_str!r}")
    return str(price)


def csv_row_to_product(row: Dict[str, str]) -> Dict[str, Any]:
    """
    Convert CSV row to a product record plus its category fields.

    Args:
        row: Dictionary with CSV column headers as keys

    Returns:
        Dictionary with category_code, category_name and the product payload
    """
    code = (row.get("Code") or "").strip()
    name = (row.get("Name") or "").strip()
    category_code = (row.get("CategoryCode") or "").strip()
    if not code or not name or not category_code:
        raise ValueError("Code, Name and CategoryCode are required")

    stock = int(row.get("Stock") or 0)
    if stock < 0:
        raise ValueError(f"stock must not be negative, got {stock}")

    return {
        "category_code": category_code[:50],
        "category_name": (row.get("CategoryName") or category_code).strip()[:256],
        "product": {
            "code": code[:50],
            "name": name[:256],
            "description": (row.get("Description") or "").strip() or None,
            "price": normalize_price(row["Price"]),
            "stock": stock,
        },
    }


def read_csv_products(file_path: Path, limit: Optional[int] = None) -> List[Dict[str, Any]]:
    """
    Read product rows from CSV file, skipping invalid ones.

    Args:
        file_path: Path to CSV file
        limit: Optional limit on number of rows to read

    Returns:
        List of parsed rows
    """
    rows = []
    with open(file_path, "r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        for i, row in enumerate(reader):
            if limit and i >= limit:
                break
            try:
                rows.append(csv_row_to_product(row))
            except (ValueError, KeyError) as e:
                print(f"Skipping row {i + 2}: {e}", file=sys.stderr)
    return rows


def ensure_categories(client: httpx.Client, rows: List[Dict[str, Any]]) -> Dict[str, str]:
    """
    Make sure every category referenced by the rows exists.

    Returns:
        Mapping of category code to category id
    """
    response = client.get("/product-categories")
    response.raise_for_status()
    category_ids = {c["code"]: c["id"] for c in response.json()}

    for row in rows:
        code = row["category_code"]
        if code in category_ids:
            continue
        response = client.post(
            "/product-categories",
            json={"code": code, "name": row["category_name"]},
        )
        response.raise_for_status()
        category_ids[code] = response.json()["id"]
        print(f"   Created category {code}")

    return category_ids


def import_products(client: httpx.Client, rows: List[Dict[str, Any]]) -> Dict[str, int]:
    """
    Create categories and products through the API.

    Products whose code already exists (409) are counted as skipped.

    Args:
        client: HTTP client whose base URL points at the API
        rows: Parsed CSV rows

    Returns:
        Counts of created and skipped products
    """
    created = 0
    skipped = 0
    category_ids = ensure_categories(client, rows)
    for row in rows:
        payload = dict(row["product"], categoryId=category_ids[row["category_code"]])
        response = client.post("/products", json=payload)
        if response.status_code == httpx.codes.CONFLICT:
            skipped += 1
            continue
        response.raise_for_status()
        created += 1
    return {"created": created, "skipped": skipped}


def main():
    """Main entry point for the script."""
    parser = argparse.ArgumentParser(
        description="Import product categories and products from CSV to the Sales API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s data/products.csv
  %(prog)s data/products.csv --limit 100 --url http://localhost:8000
        """
    )
    parser.add_argument(
        "csv_file",
        type=Path,
        help="Path to CSV file with product data"
    )
    parser.add_argument(
        "--url",
        type=str,
        default="http://localhost:8000",
        help="Base API URL (default: http://localhost:8000)"
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of rows to import (default: all)"
    )
    parser.add_argument(
        "--timeout",
        type=int,
        default=30,
        help="Request timeout in seconds (default: 30)"
    )
    args = parser.parse_args()

    if not args.csv_file.is_file():
        print(f"Error: File not found: {args.csv_file}", file=sys.stderr)
        sys.exit(1)

    print(f"Reading products from {args.csv_file}")
    rows = read_csv_products(args.csv_file, args.limit)
    if not rows:
        print("No valid products found in CSV", file=sys.stderr)
        sys.exit(1)
    print(f"Loaded {len(rows)} product(s)")

    try:
        with httpx.Client(base_url=args.url, timeout=args.timeout) as client:
            result = import_products(client, rows)
    except httpx.HTTPStatusError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(f"   API Response: {e.response.text}", file=sys.stderr)
        sys.exit(1)
    except httpx.HTTPError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(
        f"\nImport complete! Created {result['created']} product(s), "
        f"skipped {result['skipped']} existing"
    )


if __name__ == "__main__":
    main()
