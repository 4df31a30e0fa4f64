"""Read-only lookup lists served by the backend: maintenance tips and featured vehicles."""

from pathlib import Path
from typing import Any, Dict, List, Union

import yaml
from jsonschema import ValidationError, validate

SCHEMA_PATH = Path(__file__).parent / "lookup_schema.yaml"

GENERAL = "general"


class LookupDataError(Exception):
    """The lookup data file is missing or invalid."""


class LookupStore:
    """Tips and featured vehicles loaded once at startup."""

    def __init__(self, tips: List[Dict[str, Any]], featured: List[Dict[str, Any]]):
        self._tips = [
            {"tip": t["tip"], "vehicleType": (t.get("vehicleType") or GENERAL).lower()}
            for t in tips
        ]
        self._featured = featured

    @classmethod
    def from_yaml(cls, filename: Union[str, Path]) -> "LookupStore":
        try:
            with open(filename, "r") as fp:
                data = yaml.safe_load(fp)
            with open(SCHEMA_PATH) as fp:
                schema = yaml.safe_load(fp)
            validate(instance=data, schema=schema)
        except OSError as e:
            raise LookupDataError(f"Cannot read lookup data {filename}: {e}") from e
        except yaml.YAMLError as e:
            raise LookupDataError(f"YAML parse error in {filename}: {e}") from e
        except ValidationError as e:
            where = ".".join(str(p) for p in e.path)
            raise LookupDataError(f"Invalid lookup data in {filename} at {where}: {e.message}") from e
        return cls(data["tips"], data["featured"])

    def tips(self, vehicle_type: str = GENERAL) -> List[Dict[str, str]]:
        wanted = vehicle_type.lower()
        return [{"tip": t["tip"]} for t in self._tips if t["vehicleType"] == wanted]

    def featured(self) -> List[Dict[str, Any]]:
        return [
            {k: v[k] for k in ("model", "year", "highlight", "imageUrl")}
            for v in self._featured
        ]
