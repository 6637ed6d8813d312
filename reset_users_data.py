#!/usr/bin/env python3
"""
Reset the Users API data file to an empty collection.

Overwrites the backing JSON file with ``[]``, creating it (and missing
parent directories) when it does not exist.  Every stored user is lost.

Usage:
    python reset_users_data.py                  # file from DATA_FILE, default users.json
    python reset_users_data.py --file ./data/users.json
"""

import argparse
import sys

from users_api.app.core.storage import JsonFileStore, get_data_path


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Truncate the Users API data file to an empty JSON array.")
    ap.add_argument("--file", help="Path to the data file (default: DATA_FILE or ./users.json)")
    args = ap.parse_args(argv)

    store = JsonFileStore(args.file or get_data_path())
    try:
        store.reset()
    except OSError as exc:
        print(f"[!] Cannot reset {store.path}: {exc}", file=sys.stderr)
        return 1
    print(f"[+] Data file reset: {store.path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
