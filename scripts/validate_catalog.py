#!/usr/bin/env python3
"""Validation script for section catalog JSON files.

Validates every file given on the command line (or every *.json file under
the repository's catalogs/ directory) against the section catalog schema.
Exits with error code if any invalid files are found.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

from membership_engine.adapters.catalog.file_section_catalog import validate_catalog_data
from membership_engine.application.errors import SectionCatalogError


def find_repo_root() -> Path:
    """Find the repository root by looking for pyproject.toml."""
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / "pyproject.toml").exists():
            return parent
    # Fallback to current working directory
    return Path.cwd()


def validate_catalog_file(file_path: Path) -> tuple[bool, str | None]:
    """Validate a catalog file against the schema."""
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        return False, f"Invalid JSON: {e}"

    try:
        validate_catalog_data(data)
        return True, None
    except SectionCatalogError as e:
        return False, str(e)


def main(argv: list[str] | None = None) -> int:
    """Main validation function."""
    args = sys.argv[1:] if argv is None else argv
    if args:
        files = [Path(a) for a in args]
    else:
        catalogs_dir = find_repo_root() / "catalogs"
        files = sorted(catalogs_dir.glob("*.json")) if catalogs_dir.exists() else []

    if not files:
        print("No catalog files to validate")
        return 0

    errors: list[str] = []
    for file_path in files:
        if not file_path.exists():
            errors.append(f"{file_path}: file not found")
            continue
        ok, error = validate_catalog_file(file_path)
        if not ok:
            errors.append(f"{file_path}: {error}")

    if errors:
        print("Validation errors found:", file=sys.stderr)
        for error in errors:
            print(f"  {error}", file=sys.stderr)
        return 1

    print(f"All {len(files)} catalog file(s) are valid")
    return 0


if __name__ == "__main__":
    sys.exit(main())
