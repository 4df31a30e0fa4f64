"""Motorcycle class."""

from .kind import VehicleKind
from .vehicle import MotorizedVehicle


class Motorcycle(MotorizedVehicle):
    """Two wheels and an engine; no behavior beyond the motorized base."""

    kind = VehicleKind.MOTORCYCLE
    MAX_SPEED = 200
    HONK = "Meep meep!"
