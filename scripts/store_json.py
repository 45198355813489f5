"""
Store a JSON file in the vault without going through HTTP.

Usage:
    python scripts/store_json.py payload.json
    python scripts/store_json.py payload.json --key my-config

Writes to the store configured by DATA_FILE (.env is honoured). Prints
the key and the access URL.
"""

import argparse
import os
import sys
from pathlib import Path

# Allow imports from the project root when running as a script
_root_dir = os.path.join(os.path.dirname(__file__), "..")
sys.path.insert(0, _root_dir)

from dotenv import load_dotenv
load_dotenv(os.path.join(_root_dir, ".env"))

from config import get_settings
from exceptions import AppError
from services.data_service import DataService
from services.mapping_store import MappingStore
from utils.key_utils import generate_key


def store_file(path: Path, key: str, service: DataService):
    """Read path and store its text under key."""
    return service.put(key, path.read_text(encoding="utf-8"))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Store a JSON file under a key")
    parser.add_argument("file", type=Path, help="JSON file to store")
    parser.add_argument("--key", help="Key to store under (random when omitted)")
    args = parser.parse_args(argv)

    settings = get_settings()
    key = args.key or generate_key(settings.key_length)
    service = DataService(MappingStore(settings.data_file))

    try:
        result = store_file(args.file, key, service)
    except OSError as e:
        print(f"[ERROR] Cannot read {args.file}: {e}", file=sys.stderr)
        return 1
    except AppError as e:
        print(f"[ERROR] {e.message}", file=sys.stderr)
        return 1

    print(f"[OK] Stored under key: {result.key}")
    print(f"[OK] Access URL: {result.access_url}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
