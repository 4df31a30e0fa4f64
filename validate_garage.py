#!/usr/bin/env python3
"""Validate saved garage documents against the vehicle record schema."""
import json
import sys
from pathlib import Path

from garage.config import Settings
from garage.constants import STORAGE_KEY
from garage.kind import VehicleKind
from garage.loader import validate_record

CATEGORY_KEYS = {kind.value for kind in VehicleKind}


def validate_document(data) -> list[str]:
    """Validate a parsed garage document. Returns list of errors."""
    if not isinstance(data, dict):
        return [f"Garage document must be an object, got {type(data).__name__}"]

    errors = []
    for key in sorted(set(data) - CATEGORY_KEYS):
        errors.append(f"Unknown category: {key}")
    for key in sorted(CATEGORY_KEYS - set(data)):
        errors.append(f"Missing category: {key}")

    for kind in VehicleKind:
        record = data.get(kind.value)
        if record is None:
            continue
        for error in validate_record(record):
            errors.append(f"{kind.value}: {error}")
        if isinstance(record, dict) and record.get("kind") not in (None, kind.value):
            errors.append(f"{kind.value}: slot holds a '{record.get('kind')}' record")
    return errors


def validate_document_file(filepath: Path) -> list[str]:
    """Validate a single saved garage file. Returns list of errors."""
    try:
        with open(filepath) as f:
            data = json.load(f)
    except ValueError as e:
        return [f"JSON parse error: {e}"]
    except OSError as e:
        return [f"Error: {e}"]
    return validate_document(data)


def main(argv=None):
    """Validate the given garage files, or the saved garage by default."""
    args = sys.argv[1:] if argv is None else argv
    if args:
        paths = [Path(a) for a in args]
    else:
        paths = [Settings.from_env().data_dir / f"{STORAGE_KEY}.json"]

    all_valid = True
    for filepath in paths:
        if not filepath.exists():
            print(f"FAIL: {filepath.name}")
            print(f"  File not found: {filepath}")
            all_valid = False
            continue
        errors = validate_document_file(filepath)
        if errors:
            print(f"FAIL: {filepath.name}")
            for error in errors:
                print(f"  {error}")
            all_valid = False
        else:
            print(f"OK: {filepath.name}")

    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
