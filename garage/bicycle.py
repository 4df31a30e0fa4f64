"""Bicycle class: no ignition, no fuel, always ready to ride."""

from typing import Any, Dict, List, Optional, Tuple, Union

from .kind import BikeType, VehicleKind
from .maintenance import MaintenanceRecord
from .vehicle import Vehicle


class Bicycle(Vehicle):
    kind = VehicleKind.BICYCLE
    MAX_SPEED = 40
    HONK = "Ring ring!"
    has_ignition = False

    def __init__(
        self,
        model: str,
        color: str,
        nickname: Optional[str] = None,
        image: Optional[str] = None,
        speed: float = 0,
        maintenance: Optional[List[MaintenanceRecord]] = None,
        catalog_id: Optional[int] = None,
        bike_type: Union[BikeType, str] = BikeType.URBAN,
    ):
        super().__init__(model, color, nickname, image, False, speed, maintenance, catalog_id)
        self.bike_type = BikeType(bike_type)

    @property
    def ready(self) -> bool:
        return True

    @property
    def status_text(self) -> str:
        return "Ready"

    def _describe_extra(self) -> List[Tuple[str, str]]:
        return [("Type", self.bike_type.value.capitalize())]

    def _persistable_extra(self) -> Dict[str, Any]:
        return {"bikeType": self.bike_type.value}

    @classmethod
    def _init_kwargs(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        kwargs = super()._init_kwargs(data)
        kwargs["bike_type"] = data.get("bikeType", BikeType.URBAN.value)
        return kwargs
