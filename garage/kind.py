"""Vehicle kinds: the fixed garage categories and their variant tags."""

from enum import Enum
from typing import Tuple


class VehicleKind(Enum):
    """Garage category. The value is both the slot key and the persisted tag."""

    CAR = "car"
    SPORTSCAR = "sportscar"
    TRUCK = "truck"
    PLANE = "plane"
    MOTORCYCLE = "motorcycle"
    BICYCLE = "bicycle"

    @classmethod
    def parse(cls, text: str) -> "VehicleKind":
        """Look up a kind by its key, case-insensitively."""
        try:
            return cls(str(text).strip().lower())
        except ValueError:
            valid = ", ".join(k.value for k in cls)
            raise ValueError(f"Unknown vehicle kind '{text}' (expected one of: {valid})") from None

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def default_catalog_id(self) -> int:
        """Id of this kind's entry in the static catalog."""
        return _CATALOG_IDS[self]

    @property
    def motorized(self) -> bool:
        return self is not VehicleKind.BICYCLE

    @property
    def fields(self) -> Tuple[str, ...]:
        """Kind-specific form fields shown when creating or modifying."""
        return _FIELDS.get(self, ())

    @property
    def actions(self) -> Tuple[str, ...]:
        """Action names the UI offers for this kind."""
        if self is VehicleKind.BICYCLE:
            return ("accelerate", "brake", "honk")
        common = ("turn_on", "turn_off", "accelerate", "brake", "honk", "refuel")
        return common + _EXTRA_ACTIONS.get(self, ())


class BikeType(Enum):
    """Bicycle style."""

    URBAN = "urban"
    MOUNTAIN = "mountain"
    SPEED = "speed"


_LABELS = {
    VehicleKind.CAR: "Car",
    VehicleKind.SPORTSCAR: "Sports car",
    VehicleKind.TRUCK: "Truck",
    VehicleKind.PLANE: "Plane",
    VehicleKind.MOTORCYCLE: "Motorcycle",
    VehicleKind.BICYCLE: "Bicycle",
}

_CATALOG_IDS = {
    VehicleKind.CAR: 1,
    VehicleKind.TRUCK: 2,
    VehicleKind.PLANE: 3,
    VehicleKind.SPORTSCAR: 4,
    VehicleKind.MOTORCYCLE: 5,
    VehicleKind.BICYCLE: 6,
}

_FIELDS = {
    VehicleKind.TRUCK: ("cargo_capacity",),
    VehicleKind.PLANE: ("wingspan",),
    VehicleKind.BICYCLE: ("bike_type",),
}

_EXTRA_ACTIONS = {
    VehicleKind.SPORTSCAR: ("activate_turbo", "deactivate_turbo"),
    VehicleKind.TRUCK: ("load_cargo", "unload_cargo"),
    VehicleKind.PLANE: ("take_off", "land"),
}
