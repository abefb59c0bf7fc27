# entities/request.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Dict, Any

from Entities.location import Location
from Entities.vehicle import Vehicle


class RequestType(Enum):
    BREAKDOWN = auto()
    FUEL = auto()


class RequestStatus(Enum):
    PENDING = auto()
    DISPATCHED = auto()
    RESOLVED = auto()


@dataclass
class AssistanceRequest:
    id: int
    type: RequestType
    vehicle: Vehicle
    location: Location
    status: RequestStatus = RequestStatus.PENDING
    assignedHelperId: Optional[str] = None   # handle into the store's helpers
    litersNeeded: float = 0.0                # only read for FUEL requests

    def assign_helper(self, helper_id: str) -> None:
        self.assignedHelperId = helper_id
        self.status = RequestStatus.DISPATCHED

    def mark_resolved(self) -> None:
        self.status = RequestStatus.RESOLVED

    # ========== Domain logic for request state ==========

    def is_pending(self) -> bool:
        """Waiting for a helper (never dispatched and not resolved)."""
        return self.status == RequestStatus.PENDING

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type.name,
            "regNo": self.vehicle.regNo,
            "model": self.vehicle.model,
            "fuelType": self.vehicle.fuelType,
            "lat": self.location.lat,
            "lon": self.location.lon,
            "status": self.status.name,
            "assignedHelperId": self.assignedHelperId,
            "litersNeeded": self.litersNeeded,
        }
