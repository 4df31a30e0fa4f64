"""Plane class: a motorized vehicle that can fly."""

from typing import Any, Dict, List, Tuple

from .constants import TAKEOFF_ALTITUDE
from .kind import VehicleKind
from .outcome import ActionResult, Level, accepted, rejected
from .vehicle import MotorizedVehicle, parse_amount


class Plane(MotorizedVehicle):
    """Altitude is positive only while flying."""

    kind = VehicleKind.PLANE
    MAX_SPEED = 900
    HONK = "Attention passengers, this is your captain speaking."

    def __init__(
        self, *args, wingspan: float = 0, altitude: float = 0, flying: bool = False, **kwargs
    ):
        super().__init__(*args, **kwargs)
        span = parse_amount(wingspan)
        height = parse_amount(altitude)
        if span is None or span < 0:
            raise ValueError(f"Invalid wingspan: {wingspan!r}")
        if height is None or height < 0:
            raise ValueError(f"Invalid altitude: {altitude!r}")
        if height > 0 and not flying:
            raise ValueError("A plane on the ground cannot have altitude")
        self.wingspan = wingspan if isinstance(wingspan, (int, float)) else span
        self.altitude = altitude if isinstance(altitude, (int, float)) else height
        self.flying = bool(flying)

    def _describe_extra(self) -> List[Tuple[str, str]]:
        return super()._describe_extra() + [
            ("Wingspan", f"{self.wingspan:g} m"),
            ("Altitude", f"{self.altitude:g} m"),
            ("Flying", "Yes" if self.flying else "No"),
        ]

    def take_off(self) -> ActionResult:
        if not self.ignition:
            return rejected(f"Turn on {self.identifier} before taking off.")
        if self.flying:
            return rejected(f"{self.identifier} is already flying.", Level.INFO)
        self.flying = True
        self.altitude = TAKEOFF_ALTITUDE
        return accepted(f"{self.identifier} took off and is climbing to {TAKEOFF_ALTITUDE} m.")

    def land(self) -> ActionResult:
        if not self.flying:
            return rejected(f"{self.identifier} is not flying.", Level.INFO)
        self.flying = False
        self.altitude = 0
        self.speed = 0
        return accepted(f"{self.identifier} landed.")

    def turn_off(self) -> ActionResult:
        if self.flying:
            return rejected(f"Land {self.identifier} before turning it off.", Level.ERROR)
        return super().turn_off()

    def _persistable_extra(self) -> Dict[str, Any]:
        d = super()._persistable_extra()
        d.update(wingspan=self.wingspan, altitude=self.altitude, flying=self.flying)
        return d

    @classmethod
    def _init_kwargs(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        kwargs = super()._init_kwargs(data)
        kwargs.update(
            wingspan=data.get("wingspan", 0),
            altitude=data.get("altitude", 0),
            flying=data.get("flying", False),
        )
        return kwargs
