#!/usr/bin/env python3
"""Check that the package version and pyproject.toml version agree."""

import re
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent

SOURCES = {
    "eddywatch/__init__.py": re.compile(r'^__version__\s*=\s*"([^"]+)"', re.MULTILINE),
    "pyproject.toml": re.compile(r'^version\s*=\s*"([^"]+)"', re.MULTILINE),
}


def main() -> int:
    versions = {}
    for name, pattern in SOURCES.items():
        match = pattern.search((ROOT / name).read_text())
        if not match:
            print(f"ERROR: no version found in {name}")
            return 1
        versions[name] = match.group(1)

    if len(set(versions.values())) != 1:
        details = ", ".join(f"{name}={ver}" for name, ver in versions.items())
        print(f"VERSION MISMATCH: {details}")
        return 1

    print(f"version OK: {next(iter(versions.values()))}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
