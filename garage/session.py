"""GarageSession: the application state behind the user interface."""

import base64
import logging
import mimetypes
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .constants import MAX_VISUAL_SPEED
from .garage import Garage, LoadReport
from .kind import BikeType, VehicleKind
from .loader import PersistenceError, build_vehicle, vehicle_from_persistable
from .maintenance import MaintenanceRecord, MaintenanceValidationError
from .outcome import ActionResult, Level, accepted, rejected
from .plane import Plane
from .storage import StorageError
from .truck import Truck
from .vehicle import MotorizedVehicle, Vehicle

logger = logging.getLogger(__name__)

# Actions that take a quantity, with the step used when none is given
AMOUNT_ACTIONS = {
    "accelerate": 10,
    "brake": 10,
    "refuel": None,
    "load_cargo": None,
    "unload_cargo": None,
}


@dataclass
class VehicleForm:
    """Values entered in the create/modify form."""

    model: Optional[str] = None
    color: Optional[str] = None
    nickname: Optional[str] = None
    image: Optional[str] = None
    cargo_capacity: Optional[Any] = None
    wingspan: Optional[Any] = None
    bike_type: Optional[str] = None


class GarageSession:
    """
    Owns the garage, the current selection and the edit-mode flag.

    Every mutating call persists the whole garage and queues an
    ActionResult in ``notifications`` for the UI to show.
    """

    def __init__(self, storage, garage: Optional[Garage] = None, today: Optional[date] = None):
        self.storage = storage
        self.garage = garage or Garage()
        self.selected: Optional[VehicleKind] = None
        self.edit_mode = False
        self.notifications: List[ActionResult] = []
        self._today = today

    @property
    def today(self) -> date:
        return self._today or date.today()

    @property
    def vehicle(self) -> Optional[Vehicle]:
        """The vehicle in the selected slot, if any."""
        if self.selected is None:
            return None
        return self.garage.get(self.selected)

    def notify(self, result: ActionResult) -> ActionResult:
        self.notifications.append(result)
        return result

    def drain_notifications(self) -> List[ActionResult]:
        notes, self.notifications = self.notifications, []
        return notes

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load(self) -> LoadReport:
        try:
            report = self.garage.load_all(self.storage)
        except StorageError as e:
            logger.error("Cannot read saved garage: %s", e)
            self.notify(rejected("Could not access saved data.", Level.ERROR))
            return LoadReport(warnings=[str(e)])
        for warning in report.warnings:
            self.notify(rejected(warning, Level.ERROR))
        return report

    def save(self) -> bool:
        try:
            self.garage.save_all(self.storage)
        except (StorageError, TypeError, ValueError) as e:
            logger.error("Cannot save garage: %s", e)
            self.notify(rejected("Could not save garage data!", Level.ERROR))
            return False
        return True

    def _commit(self, result: ActionResult) -> ActionResult:
        if result.accepted:
            self.save()
        return self.notify(result)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select(self, kind: Union[VehicleKind, str]) -> Optional[Vehicle]:
        kind = kind if isinstance(kind, VehicleKind) else VehicleKind.parse(kind)
        if kind is not self.selected:
            self.selected = kind
            self.edit_mode = False
            vehicle = self.vehicle
            if vehicle is not None:
                for note in vehicle.reminders(self.today):
                    self.notify(note)
        return self.vehicle

    def start_edit(self) -> ActionResult:
        if self.vehicle is None:
            return self.notify(rejected("There is no vehicle to modify.", Level.WARNING))
        self.edit_mode = True
        return accepted(f"Editing {self.vehicle.identifier}.", Level.INFO)

    def cancel_edit(self) -> None:
        self.edit_mode = False

    # ------------------------------------------------------------------
    # Create / modify
    # ------------------------------------------------------------------

    def save_vehicle(self, form: VehicleForm) -> ActionResult:
        """Create a vehicle in the selected slot, or modify it in edit mode."""
        kind = self.selected
        if kind is None:
            return self.notify(rejected("Select a vehicle kind first!"))
        model = (form.model or "").strip()
        color = (form.color or "").strip()
        if not model or not color:
            return self.notify(rejected("Model and color are required!", Level.ERROR))
        try:
            extra = _kind_fields(kind, form)
        except ValueError as e:
            return self.notify(rejected(f"Error: {e}", Level.ERROR))

        existing = self.garage.get(kind)
        modifying = existing is not None and self.edit_mode
        try:
            if modifying:
                vehicle = self._modified(existing, model, color, form, extra)
            else:
                vehicle = build_vehicle(
                    kind, model, color, nickname=form.nickname, image=form.image, **extra
                )
        except (PersistenceError, ValueError) as e:
            return self.notify(rejected(f"Error: {e}", Level.ERROR))

        music = existing.music if modifying and isinstance(existing, MotorizedVehicle) else None
        was_playing = music is not None and music.playing
        self.garage.set(kind, vehicle)
        if music is not None:
            vehicle.music = music
            if was_playing:
                music.play()

        self.edit_mode = False
        action = "modified" if modifying else "created"
        return self._commit(accepted(f"{kind.label} {action}!"))

    def _modified(
        self, existing: Vehicle, model: str, color: str, form: VehicleForm, extra: Dict[str, Any]
    ) -> Vehicle:
        data = existing.to_persistable()
        data.update(model=model, color=color, nickname=form.nickname or None)
        if form.image:
            data["image"] = form.image
        if "cargo_capacity" in extra:
            data["cargoCapacity"] = extra["cargo_capacity"]
        if "wingspan" in extra:
            data["wingspan"] = extra["wingspan"]
        if "bike_type" in extra:
            data["bikeType"] = extra["bike_type"].value
        if isinstance(existing, Truck) and extra["cargo_capacity"] < existing.current_cargo:
            raise ValueError(
                f"capacity {extra['cargo_capacity']}kg is below the current cargo "
                f"({existing.current_cargo:g}kg)"
            )
        return vehicle_from_persistable(data)

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------

    def load_image(self, path: Union[str, Path]) -> Optional[str]:
        """Read an image file into a data URL for the form's image field."""
        try:
            return _read_data_url(Path(path), "image")
        except ValueError as e:
            self.notify(rejected(str(e), Level.ERROR))
            return None

    def load_music(self, path: Union[str, Path]) -> ActionResult:
        vehicle = self.vehicle
        if not isinstance(vehicle, MotorizedVehicle):
            return self.notify(rejected("Select a motorized vehicle."))
        path = Path(path)
        try:
            source = _read_data_url(path, "audio")
        except ValueError as e:
            return self.notify(rejected(str(e), Level.ERROR))
        return self._commit(vehicle.set_music(source, path.name))

    def play_music(self) -> ActionResult:
        vehicle = self.vehicle
        if not isinstance(vehicle, MotorizedVehicle):
            return self.notify(rejected("Only motorized vehicles play music.", Level.INFO))
        return self.notify(vehicle.play_music())

    def stop_music(self) -> ActionResult:
        vehicle = self.vehicle
        if not isinstance(vehicle, MotorizedVehicle):
            return self.notify(rejected("Only motorized vehicles play music.", Level.INFO))
        return self.notify(vehicle.stop_music())

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def perform(self, action: str, amount: Any = None) -> ActionResult:
        """Run a named action on the selected vehicle."""
        vehicle = self.vehicle
        if vehicle is None:
            return self.notify(rejected("No vehicle selected!"))
        if action not in vehicle.kind.actions:
            return self.notify(rejected(
                f"Action '{action}' is not available for a {vehicle.kind.label.lower()}."
            ))
        method = getattr(vehicle, action)
        if action in AMOUNT_ACTIONS:
            if amount is None:
                amount = AMOUNT_ACTIONS[action]
            if amount is None:
                return self.notify(rejected(f"Action '{action}' needs an amount.", Level.ERROR))
            result = method(amount)
        else:
            result = method()
        return self._commit(result)

    def add_maintenance(
        self,
        service_date: Any,
        service_type: Optional[str],
        cost: Any,
        description: Optional[str] = None,
    ) -> ActionResult:
        vehicle = self.vehicle
        if vehicle is None:
            return self.notify(rejected("Select a vehicle."))
        if not service_date or not service_type or cost is None or cost == "":
            return self.notify(rejected("Date, type and cost are required.", Level.ERROR))
        try:
            record = MaintenanceRecord(service_date, service_type, cost, description)
        except MaintenanceValidationError as e:
            return self.notify(rejected(f"Maintenance error: {e}", Level.ERROR))
        return self._commit(vehicle.add_maintenance_record(record))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def view(self) -> Dict[str, Any]:
        """Snapshot of the selected slot for the UI to render."""
        kind = self.selected
        if kind is None:
            return {"kind": None}
        vehicle = self.vehicle
        base = {"kind": kind.value, "label": kind.label, "edit_mode": self.edit_mode}
        if vehicle is None:
            return {**base, "exists": False, "fields": list(kind.fields)}

        view = {
            **base,
            "exists": True,
            "identifier": vehicle.identifier,
            "details": vehicle.describe(),
            "status": vehicle.status_text,
            "speed": vehicle.speed,
            "speed_percent": min(100, round(vehicle.speed / MAX_VISUAL_SPEED * 100)),
            "fuel_percent": None,
            "fuel_band": None,
            "cargo": None,
            "altitude": None,
            "music": None,
            "image": vehicle.image,
            "catalog_id": vehicle.catalog_id,
            "actions": _visible_actions(vehicle),
            "history": [r.format() for r in vehicle.history(self.today)],
            "upcoming": [r.format() for r in vehicle.upcoming(self.today)],
        }
        if isinstance(vehicle, MotorizedVehicle):
            percent = vehicle.fuel_percent
            view["fuel_percent"] = percent
            view["fuel_band"] = "low" if percent < 20 else "medium" if percent < 50 else "ok"
            view["music"] = vehicle.music_name or "None"
        if isinstance(vehicle, Truck):
            view["cargo"] = vehicle.cargo_text
        if isinstance(vehicle, Plane):
            view["altitude"] = f"{vehicle.altitude:g} m"
        return view


def _kind_fields(kind: VehicleKind, form: VehicleForm) -> Dict[str, Any]:
    """Validate and convert the kind-specific form fields."""
    if kind is VehicleKind.TRUCK:
        try:
            capacity = int(str(form.cargo_capacity).strip())
        except ValueError:
            raise ValueError("Invalid cargo capacity.") from None
        if capacity < 0:
            raise ValueError("Invalid cargo capacity.")
        return {"cargo_capacity": capacity}
    if kind is VehicleKind.PLANE:
        try:
            wingspan = float(str(form.wingspan).strip())
        except ValueError:
            raise ValueError("Invalid wingspan.") from None
        if not wingspan > 0:
            raise ValueError("Invalid wingspan.")
        return {"wingspan": wingspan}
    if kind is VehicleKind.BICYCLE:
        try:
            return {"bike_type": BikeType((form.bike_type or "").strip().lower())}
        except ValueError:
            raise ValueError("Select the bicycle type.") from None
    return {}


def _visible_actions(vehicle: Vehicle) -> List[str]:
    actions = list(vehicle.kind.actions)
    if getattr(vehicle, "turbo_active", False):
        actions.remove("activate_turbo")
    return actions


def _read_data_url(path: Path, media: str) -> str:
    """Read a user-selected file into memory as a data URL."""
    mime, _ = mimetypes.guess_type(path.name)
    if not mime or not mime.startswith(f"{media}/"):
        raise ValueError(f"'{path.name}' is not an {media} file.")
    try:
        content = path.read_bytes()
    except OSError as e:
        logger.warning("Cannot read %s: %s", path, e)
        raise ValueError(f"Error reading {media} file '{path.name}'.") from e
    return f"data:{mime};base64,{base64.b64encode(content).decode('ascii')}"
