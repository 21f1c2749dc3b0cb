#!/usr/bin/env python3
"""
Insert one resource into a JSON store.

Usage:
  python scripts/add_resource.py --id user:42 --data '{"name": "Ana"}' [--file data.json]
"""
from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from datastore.core.config import get_settings
from datastore.core.errors import InvalidResourceIdError, KeyFoundError, UnserializableDataError
from datastore.engines.json_engine import JsonDataEngine


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Insert a resource into a JSON store")
    ap.add_argument("--id", required=True, help="Resource id (ex.: user:42)")
    ap.add_argument("--data", required=True, help="JSON value to store")
    ap.add_argument("--file", help="Backing file (default: DATA_FILE or data.json)")
    args = ap.parse_args(argv)

    resource_id = (args.id or "").strip()
    try:
        data = json.loads(args.data)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid JSON for --data: {exc}")

    engine = JsonDataEngine(args.file or get_settings().data_file)
    try:
        asyncio.run(engine.put(resource_id, data))
    except KeyFoundError:
        raise SystemExit(f"Resource '{resource_id}' already exists in {engine.path}")
    except InvalidResourceIdError:
        raise SystemExit("Resource id must be a non-empty string")
    except UnserializableDataError as exc:
        raise SystemExit(str(exc))
    print("OK: resource stored")
    print(f"  ID: {resource_id}")
    print(f"  File: {engine.path}")
    print(f"  Size: {engine.size}")


if __name__ == "__main__":
    try:
        main()
    except SystemExit:
        raise
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
