"""
Print the live users/customers/orders schema and report which column links
an order to the field agent who recorded it.

Usage: DATABASE_URL=postgresql://... python check_schema.py
"""
import os
import sys
from typing import Dict, List, Optional
from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Engine
from app.database import normalize_database_url

TABLES = ("users", "customers", "orders")
ORDER_CREATOR_COLUMNS = ("recharge_by_id", "order_created_by_id")


def describe_tables(engine: Engine, tables=TABLES) -> Dict[str, List[dict]]:
    """Column name/type/nullable/default for each table that exists"""
    inspector = inspect(engine)
    existing = set(inspector.get_table_names())

    schema = {}
    for table_name in tables:
        if table_name not in existing:
            continue
        schema[table_name] = [
            {
                "name": col["name"],
                "type": str(col["type"]),
                "nullable": col.get("nullable", True),
                "default": col.get("default"),
            }
            for col in inspector.get_columns(table_name)
        ]
    return schema


def detect_order_creator_column(order_columns: List[dict]) -> Optional[str]:
    names = {col["name"] for col in order_columns}
    for candidate in ORDER_CREATOR_COLUMNS:
        if candidate in names:
            return candidate
    return None


def main() -> int:
    database_url = os.environ.get("DATABASE_URL")
    if not database_url:
        print("DATABASE_URL is not set")
        return 1

    engine = create_engine(normalize_database_url(database_url))
    try:
        schema = describe_tables(engine)
    finally:
        engine.dispose()

    print("=" * 80)
    print("DATABASE SCHEMA")
    print("=" * 80)
    for table_name in TABLES:
        print(f"\n{'=' * 80}")
        print(f"TABLE: {table_name}")
        print(f"{'=' * 80}")
        if table_name not in schema:
            print("  (missing)")
            continue

        print(f"{'Column Name':<30} {'Data Type':<20} {'Nullable':<10} {'Default'}")
        print("-" * 80)
        for col in schema[table_name]:
            nullable = "YES" if col["nullable"] else "NO"
            default_val = str(col["default"]) if col["default"] else ""
            print(f"{col['name']:<30} {col['type']:<20} {nullable:<10} {default_val}")

    creator = detect_order_creator_column(schema.get("orders", []))
    print("\n" + "=" * 80)
    if creator is None:
        print("Field agent column: NOT FOUND (expected one of "
              f"{', '.join(ORDER_CREATOR_COLUMNS)})")
        return 2
    print(f"Field agent column: {creator}")
    print("=" * 80)
    return 0


if __name__ == "__main__":
    sys.exit(main())
