"""Garage class: one slot per vehicle kind, persisted as a single document."""

import json
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from .constants import STORAGE_KEY
from .kind import VehicleKind
from .loader import PersistenceError, vehicle_from_persistable
from .vehicle import Vehicle

logger = logging.getLogger(__name__)


@dataclass
class LoadReport:
    """What happened while loading the persisted garage."""

    loaded: List[VehicleKind] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    reset: bool = False

    @property
    def ok(self) -> bool:
        return not self.warnings and not self.reset


class Garage:
    """Fixed mapping from every VehicleKind to at most one vehicle."""

    def __init__(self, storage_key: str = STORAGE_KEY):
        self.storage_key = storage_key
        self._slots: Dict[VehicleKind, Optional[Vehicle]] = {kind: None for kind in VehicleKind}

    def get(self, kind: VehicleKind) -> Optional[Vehicle]:
        return self._slots[VehicleKind(kind)]

    def set(self, kind: VehicleKind, vehicle: Optional[Vehicle]) -> None:
        """Replace the slot's occupant, releasing the previous one's audio."""
        kind = VehicleKind(kind)
        if vehicle is not None and vehicle.kind is not kind:
            raise ValueError(f"A {vehicle.kind.value} cannot be parked in the {kind.value} slot")
        previous = self._slots[kind]
        if previous is not None and previous is not vehicle:
            previous.release()
        self._slots[kind] = vehicle

    def clear(self) -> None:
        for kind in VehicleKind:
            self.set(kind, None)

    def items(self) -> Iterator[Tuple[VehicleKind, Optional[Vehicle]]]:
        return iter(self._slots.items())

    def occupied(self) -> List[Tuple[VehicleKind, Vehicle]]:
        return [(kind, v) for kind, v in self._slots.items() if v is not None]

    def __len__(self) -> int:
        return len(self.occupied())

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def to_document(self) -> Dict[str, Optional[dict]]:
        """Every category key, with None for empty slots."""
        return {
            kind.value: vehicle.to_persistable() if vehicle is not None else None
            for kind, vehicle in self._slots.items()
        }

    def save_all(self, storage) -> None:
        """Serialize the whole garage and replace the stored document."""
        storage.set_item(self.storage_key, json.dumps(self.to_document()))

    def _read_document(self, storage) -> Optional[dict]:
        """
        The stored document, or None when nothing is stored.

        Raises ValueError (including UnicodeDecodeError from the store) when
        the document cannot be decoded or is not a JSON object.
        """
        raw = storage.get_item(self.storage_key)
        if not raw:
            return None
        document = json.loads(raw)
        if not isinstance(document, dict):
            raise ValueError(f"expected an object, got {type(document).__name__}")
        return document

    def load_all(self, storage) -> LoadReport:
        """
        Replace the garage contents with the stored document.

        A slot that is malformed or has an unknown variant tag is left empty
        and reported; the other slots still load. An unparseable document is
        discarded and the garage stays empty.
        """
        report = LoadReport()
        self.clear()

        try:
            document = self._read_document(storage)
        except ValueError as e:
            logger.warning("Stored garage document is corrupt (%s); resetting", e)
            storage.remove_item(self.storage_key)
            report.reset = True
            report.warnings.append("Saved garage data was corrupt and has been reset.")
            return report
        if document is None:
            return report

        for kind in VehicleKind:
            data = document.get(kind.value)
            if data is None:
                continue
            try:
                vehicle = vehicle_from_persistable(data)
                if vehicle.kind is not kind:
                    raise PersistenceError(
                        f"slot holds a '{vehicle.kind.value}' record"
                    )
            except PersistenceError as e:
                logger.warning("Skipping %s slot: %s", kind.value, e)
                report.warnings.append(f"Could not load {kind.value}: {e}")
                continue
            self._slots[kind] = vehicle
            report.loaded.append(kind)
        return report
