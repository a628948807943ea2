#!/usr/bin/env python3
"""
cli.py

Validate package metadata descriptors from the command line.

Usage:
    prefab-metadata path/to/package path/to/other/prefab.json
    prefab-metadata -v --env-file .env packages/*/prefab.json

Each path is either a descriptor file or a package directory holding
prefab.json. Prints one OK/FAIL line per descriptor and exits 1 if any
descriptor is invalid.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from prefab_metadata.config import load_settings
from prefab_metadata.loader import descriptor_path, scan_package_metadata
from prefab_metadata.utils.logger_util import configure


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="prefab-metadata",
        description="Strictly validate package metadata descriptors (schema version 1).",
    )
    ap.add_argument("paths", nargs="+", help="descriptor files or package directories")
    ap.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    ap.add_argument("--env-file", default=None, help="load settings from this .env file")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings(args.env_file)
    configure(logging.DEBUG if args.verbose else settings.log_level, settings.log_dir)

    failed = 0
    # one path at a time so output follows argument order
    for path in args.paths:
        p = descriptor_path(path)
        if not p.is_file():
            print(f"FAIL {p}: no such descriptor file")
            failed += 1
            continue
        [(p, result)] = scan_package_metadata([p])
        if result.ok:
            meta = result.metadata
            print(f"OK {p}: {meta.name} ({len(meta.dependencies)} dependencies)")
        else:
            print(f"FAIL {p}: {result.error}")
            failed += 1

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
