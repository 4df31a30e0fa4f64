"""Car and SportsCar classes."""

from typing import Any, Dict, List, Tuple

from .constants import TURBO_BOOST
from .kind import VehicleKind
from .outcome import ActionResult, Level, accepted, rejected
from .vehicle import MotorizedVehicle


class Car(MotorizedVehicle):
    """A regular passenger car."""

    kind = VehicleKind.CAR
    MAX_SPEED = 180
    HONK = "Beep beep!"


class SportsCar(Car):
    """A car with a turbo that can only be toggled while the engine runs."""

    kind = VehicleKind.SPORTSCAR
    MAX_SPEED = 300
    HONK = "VROOOM!"

    def __init__(self, *args, turbo_active: bool = False, **kwargs):
        super().__init__(*args, **kwargs)
        self.turbo_active = bool(turbo_active)
        if self.turbo_active and not self.ignition:
            raise ValueError("Turbo cannot be active with the ignition off")

    def _describe_extra(self) -> List[Tuple[str, str]]:
        return super()._describe_extra() + [("Turbo", "On" if self.turbo_active else "Off")]

    def _speed_gain(self, amount: float) -> float:
        return amount * TURBO_BOOST if self.turbo_active else amount

    def activate_turbo(self) -> ActionResult:
        if not self.ignition:
            return rejected(f"Turn on {self.identifier} before activating the turbo.")
        if self.turbo_active:
            return rejected("Turbo is already active.", Level.INFO)
        self.turbo_active = True
        return accepted(f"Turbo activated on {self.identifier}!")

    def deactivate_turbo(self) -> ActionResult:
        if not self.ignition:
            return rejected(f"Turn on {self.identifier} before changing the turbo.")
        if not self.turbo_active:
            return rejected("Turbo is not active.", Level.INFO)
        self.turbo_active = False
        return accepted(f"Turbo deactivated on {self.identifier}.")

    def turn_off(self) -> ActionResult:
        result = super().turn_off()
        if result.accepted:
            self.turbo_active = False
        return result

    def _persistable_extra(self) -> Dict[str, Any]:
        d = super()._persistable_extra()
        d["turboActive"] = self.turbo_active
        return d

    @classmethod
    def _init_kwargs(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        kwargs = super()._init_kwargs(data)
        kwargs["turbo_active"] = data.get("turboActive", False)
        return kwargs
