"""Ingest books from a CSV file into the database.

Expected columns: isbn, title, author, publisher, published_at, stock.
"""
import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional, Tuple

import pandas as pd
from fastapi import HTTPException
from pydantic import ValidationError

# Add parent directory to path to import bookstock modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from bookstock.config import get_settings
from bookstock.db.connection import close_pool, create_pool
from bookstock.models.book_model import CreateBookRequest
from bookstock.repositories.book_repository import BookRepository
from bookstock.services.book_service import BookService

CSV_COLUMNS = ["isbn", "title", "author", "publisher", "published_at", "stock"]


def parse_rows(df: pd.DataFrame) -> Tuple[List[CreateBookRequest], List[str]]:
    """Validate each CSV row, returning the valid requests and one message per rejected row."""
    missing = [column for column in CSV_COLUMNS if column not in df.columns]
    if missing:
        return [], [f"missing columns: {', '.join(missing)}"]

    requests: List[CreateBookRequest] = []
    errors: List[str] = []
    for idx, row in df.iterrows():
        values = {column: row[column] for column in CSV_COLUMNS if pd.notna(row[column])}
        try:
            requests.append(CreateBookRequest.model_validate(values))
        except ValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err.get("loc"))
            errors.append(f"row {idx + 2}: invalid {fields}")
    return requests, errors


async def ingest_books(csv_path: Path, limit: Optional[int] = None) -> None:
    if not csv_path.exists():
        print(f"❌ CSV file not found: {csv_path}")
        return

    print(f"📚 Starting book ingestion from {csv_path}")
    df = pd.read_csv(csv_path, nrows=limit, dtype=str)
    print(f"   Loaded {len(df)} rows from CSV")

    requests, errors = parse_rows(df)
    for message in errors:
        print(f"   ⚠️  Skipping {message}")

    settings = get_settings()
    pool = await create_pool(settings)
    service = BookService(BookRepository(pool, query_timeout=settings.db_query_timeout))

    total_inserted = 0
    try:
        for request in requests:
            try:
                await service.create(request)
            except HTTPException as e:
                print(f"   ❌ {request.isbn}: {e.detail}")
                errors.append(request.isbn)
                continue
            total_inserted += 1
    finally:
        await close_pool(pool)

    print("\n✅ Book ingestion complete!")
    print(f"   Total books inserted: {total_inserted}")
    if errors:
        print(f"   Errors: {len(errors)}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Ingest books from CSV into the database")
    parser.add_argument("--csv", type=Path, default=Path("books.csv"), help="Path to the CSV file")
    parser.add_argument("--limit", type=int, default=None, help="Maximum number of rows to read")
    args = parser.parse_args()

    asyncio.run(ingest_books(csv_path=args.csv, limit=args.limit))


if __name__ == "__main__":
    main()
