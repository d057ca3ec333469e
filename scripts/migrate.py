"""Apply or drop the book table schema.

Usage: python scripts/migrate.py up|down
"""
import argparse
import asyncio
import sys
from pathlib import Path

# Add parent directory to path to import bookstock modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from bookstock.config import get_settings
from bookstock.db.connection import close_pool, create_pool, drop_schema, ensure_schema_exists


async def migrate(action: str) -> None:
    pool = await create_pool(get_settings())
    try:
        if action == "up":
            await ensure_schema_exists(pool)
        else:
            await drop_schema(pool)
    finally:
        await close_pool(pool)
    print(f"✅ Migration '{action}' applied")


def main() -> None:
    parser = argparse.ArgumentParser(description="Manage the book table schema")
    parser.add_argument("action", choices=["up", "down"])
    args = parser.parse_args()

    asyncio.run(migrate(args.action))


if __name__ == "__main__":
    main()
