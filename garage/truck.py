"""Truck class: a motorized vehicle that carries cargo."""

from typing import Any, Dict, List, Tuple

from .kind import VehicleKind
from .outcome import ActionResult, Level, accepted, rejected
from .vehicle import MotorizedVehicle, parse_amount


class Truck(MotorizedVehicle):
    """Keeps 0 <= current_cargo <= cargo_capacity at all times."""

    kind = VehicleKind.TRUCK
    MAX_SPEED = 120
    HONK = "HOOOONK!"

    def __init__(self, *args, cargo_capacity: float = 0, current_cargo: float = 0, **kwargs):
        super().__init__(*args, **kwargs)
        capacity = parse_amount(cargo_capacity)
        cargo = parse_amount(current_cargo)
        if capacity is None or capacity < 0:
            raise ValueError(f"Invalid cargo capacity: {cargo_capacity!r}")
        if cargo is None or cargo < 0 or cargo > capacity:
            raise ValueError(f"Invalid current cargo {current_cargo!r} for capacity {capacity:g}")
        self.cargo_capacity = cargo_capacity if isinstance(cargo_capacity, (int, float)) else capacity
        self.current_cargo = current_cargo if isinstance(current_cargo, (int, float)) else cargo

    @property
    def free_capacity(self) -> float:
        return self.cargo_capacity - self.current_cargo

    @property
    def cargo_text(self) -> str:
        return f"{self.current_cargo:g}kg / {self.cargo_capacity:g}kg"

    def _describe_extra(self) -> List[Tuple[str, str]]:
        return super()._describe_extra() + [("Cargo", self.cargo_text)]

    def load_cargo(self, amount: Any) -> ActionResult:
        weight = parse_amount(amount)
        if weight is None or weight <= 0:
            return rejected(f"Invalid cargo amount: {amount!r}", Level.ERROR)
        if weight > self.free_capacity:
            return rejected(
                f"Cannot load {weight:g}kg: only {self.free_capacity:g}kg of capacity left."
            )
        self.current_cargo += weight
        return accepted(f"Loaded {weight:g}kg. Cargo: {self.cargo_text}.")

    def unload_cargo(self, amount: Any) -> ActionResult:
        weight = parse_amount(amount)
        if weight is None or weight <= 0:
            return rejected(f"Invalid cargo amount: {amount!r}", Level.ERROR)
        if weight > self.current_cargo:
            return rejected(
                f"Cannot unload {weight:g}kg: only {self.current_cargo:g}kg on board."
            )
        self.current_cargo -= weight
        return accepted(f"Unloaded {weight:g}kg. Cargo: {self.cargo_text}.")

    def _persistable_extra(self) -> Dict[str, Any]:
        d = super()._persistable_extra()
        d["cargoCapacity"] = self.cargo_capacity
        d["currentCargo"] = self.current_cargo
        return d

    @classmethod
    def _init_kwargs(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        kwargs = super()._init_kwargs(data)
        kwargs["cargo_capacity"] = data.get("cargoCapacity", 0)
        kwargs["current_cargo"] = data.get("currentCargo", 0)
        return kwargs
