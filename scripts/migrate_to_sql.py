"""One-off migration script: JSON store (data.json) -> SQL engine."""
from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

# Ensure the datastore package is importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from datastore.core.config import get_settings
from datastore.core.errors import KeyFoundError
from datastore.engines.json_engine import JsonDataEngine
from datastore.engines.sql_engine import SqlDataEngine


async def migrate(source: JsonDataEngine, target: SqlDataEngine) -> tuple[int, int]:
    """Copy every resource from source into target; returns (copied, skipped)."""
    copied = skipped = 0
    for resource_id, data in await source.get():
        try:
            await target.put(resource_id, data)
        except KeyFoundError:
            skipped += 1
        else:
            copied += 1
    return copied, skipped


def main(argv: list[str] | None = None) -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Copy a JSON store into the SQL backend")
    ap.add_argument("--file", default=settings.data_file, help="Source JSON file")
    ap.add_argument("--database-url", default=settings.database_url, help="Target database URL")
    args = ap.parse_args(argv)

    if not Path(args.file).exists():
        raise SystemExit(f"File not found: {args.file}")
    source = JsonDataEngine(args.file)
    target = SqlDataEngine(args.database_url)
    try:
        copied, skipped = asyncio.run(migrate(source, target))
    finally:
        target.close()
    print(f"JSON data migrated to SQL: {copied} copied, {skipped} skipped.")


if __name__ == "__main__":
    main()
