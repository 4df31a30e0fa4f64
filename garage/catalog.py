"""Static vehicle catalog, consulted by catalog id for extra display details."""

import json
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union


class CatalogError(Exception):
    """The catalog file is missing or malformed, or the id is invalid."""


class Catalog:
    """A list of catalog entries, each a dict with an integer ``id``."""

    def __init__(self, entries: List[Dict[str, Any]]):
        self.entries = entries

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Catalog":
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as fp:
                data = json.load(fp)
        except FileNotFoundError:
            raise CatalogError(f"Catalog file not found: {path}") from None
        except OSError as e:
            raise CatalogError(f"Cannot read catalog {path}: {e}") from e
        except ValueError as e:
            raise CatalogError(f"Catalog {path} is not valid JSON: {e}") from e
        if not isinstance(data, list):
            raise CatalogError(f"Catalog {path} must contain a JSON array")
        return cls([entry for entry in data if isinstance(entry, dict)])

    def lookup(self, catalog_id: Any) -> Optional[Dict[str, Any]]:
        """Find the entry with the given id, or None."""
        if isinstance(catalog_id, bool):
            raise CatalogError(f"Invalid catalog id: {catalog_id!r}")
        try:
            wanted = int(catalog_id)
        except (TypeError, ValueError, OverflowError):
            raise CatalogError(f"Invalid catalog id: {catalog_id!r}") from None
        if isinstance(catalog_id, float) and wanted != catalog_id:
            raise CatalogError(f"Invalid catalog id: {catalog_id!r}")
        for entry in self.entries:
            if entry.get("id") == wanted:
                return entry
        return None


def humanize_key(key: str) -> str:
    """'topSpeed' / 'top_speed' -> 'Top speed'."""
    words = re.sub(r"([a-z0-9])([A-Z])", r"\1 \2", key).replace("_", " ").split()
    text = " ".join(words).lower()
    return text[:1].upper() + text[1:]


def format_details(entry: Dict[str, Any]) -> List[Tuple[str, str]]:
    """Label/value pairs for a catalog entry, without its id."""
    rows = []
    for key, value in entry.items():
        if key == "id":
            continue
        if isinstance(value, bool):
            shown = "Yes" if value else "No"
        elif value is None or value == "":
            shown = "Not provided"
        else:
            shown = str(value)
        rows.append((humanize_key(key), shown))
    return rows
