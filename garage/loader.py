"""Vehicle construction and reconstruction, dispatched on VehicleKind."""

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Type

import yaml
from jsonschema import Draft7Validator

from .bicycle import Bicycle
from .car import Car, SportsCar
from .kind import VehicleKind
from .motorcycle import Motorcycle
from .plane import Plane
from .truck import Truck
from .vehicle import Vehicle

SCHEMA_PATH = Path(__file__).parent / "schema.yaml"

VEHICLE_CLASSES: Dict[VehicleKind, Type[Vehicle]] = {
    VehicleKind.CAR: Car,
    VehicleKind.SPORTSCAR: SportsCar,
    VehicleKind.TRUCK: Truck,
    VehicleKind.PLANE: Plane,
    VehicleKind.MOTORCYCLE: Motorcycle,
    VehicleKind.BICYCLE: Bicycle,
}


class PersistenceError(ValueError):
    """A persisted vehicle record cannot be turned back into a vehicle."""


@lru_cache(maxsize=None)
def load_schema() -> Dict[str, Any]:
    """Load the vehicle record JSON schema from schema.yaml."""
    with open(SCHEMA_PATH) as f:
        return yaml.safe_load(f)


def validate_record(data: Any) -> List[str]:
    """Schema errors for one persisted vehicle record, empty when valid."""
    validator = Draft7Validator(load_schema())
    errors = []
    for error in sorted(validator.iter_errors(data), key=lambda e: list(e.path)):
        where = ".".join(str(p) for p in error.path)
        errors.append(f"{where}: {error.message}" if where else error.message)
    return errors


def build_vehicle(kind: VehicleKind, model: str, color: str, **fields) -> Vehicle:
    """
    Create a new vehicle of the given kind.

    Kind-specific fields (cargo_capacity, wingspan, bike_type, ...) are
    passed through as keyword arguments. The catalog id defaults to the
    kind's entry in the static catalog.
    """
    fields.setdefault("catalog_id", kind.default_catalog_id)
    return VEHICLE_CLASSES[kind](model, color, **fields)


def vehicle_from_persistable(data: Any) -> Vehicle:
    """
    Rebuild a vehicle from a persisted record.

    Raises PersistenceError when the variant tag is missing or unknown,
    when the record fails schema validation, or when the stored state
    breaks a vehicle invariant.
    """
    if not isinstance(data, dict):
        raise PersistenceError(f"Vehicle record must be an object, got {type(data).__name__}")
    tag = data.get("kind")
    if not tag:
        raise PersistenceError("Vehicle record has no 'kind'")
    try:
        kind = VehicleKind(tag)
    except ValueError:
        raise PersistenceError(f"Unknown vehicle kind '{tag}'") from None

    errors = validate_record(data)
    if errors:
        raise PersistenceError("; ".join(errors))

    try:
        return VEHICLE_CLASSES[kind].from_persistable(data)
    except (TypeError, ValueError) as e:
        raise PersistenceError(f"Invalid {kind.value} record: {e}") from e
