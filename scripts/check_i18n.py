#!/usr/bin/env python3
"""Validate that the string tables define the same keys and placeholders.

Exit code 0 = all OK, 1 = mismatches found.
"""

import ast
import string
import sys
from pathlib import Path

BASE = Path(__file__).resolve().parent.parent / "eddywatch"
TABLES = ("strings_en.py", "strings_fi.py")


def extract_strings(filepath: Path) -> dict[str, object]:
    """Map STRINGS keys to their literal value (None for non-literal values)."""
    tree = ast.parse(filepath.read_text(), filename=str(filepath))

    for node in ast.walk(tree):
        if isinstance(node, ast.AnnAssign):
            target, value = node.target, node.value
        elif isinstance(node, ast.Assign) and len(node.targets) == 1:
            target, value = node.targets[0], node.value
        else:
            continue

        if isinstance(target, ast.Name) and target.id == "STRINGS" and isinstance(value, ast.Dict):
            result = {}
            for key, val in zip(value.keys, value.values):
                if isinstance(key, ast.Constant) and isinstance(key.value, str):
                    result[key.value] = val.value if isinstance(val, ast.Constant) else None
            return result

    return {}


def placeholders(template: object) -> set[str]:
    if not isinstance(template, str):
        return set()
    return {field for _, field, _, _ in string.Formatter().parse(template) if field}


def main() -> int:
    tables = {name: extract_strings(BASE / name) for name in TABLES}
    reference_name, reference = next(iter(tables.items()))
    ok = bool(reference)

    for name, table in tables.items():
        if name == reference_name:
            continue
        for key in sorted(reference.keys() - table.keys()):
            ok = False
            print(f"{name}: missing key {key}")
        for key in sorted(table.keys() - reference.keys()):
            ok = False
            print(f"{reference_name}: missing key {key}")
        for key in sorted(reference.keys() & table.keys()):
            if placeholders(reference[key]) != placeholders(table[key]):
                ok = False
                print(f"{name}: placeholders of {key} differ from {reference_name}")

    if ok:
        print(f"i18n OK: {len(reference)} keys in sync")

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
