# services/dispatcher.py
"""
Assistance service: creates requests, dispatches the nearest capable helper,
resolves requests and reports history.
"""
from typing import Dict, List, Optional, Tuple

import pandas as pd

from Store import DataStore
from Entities.helper import Capability, Helper
from Entities.location import Location
from Entities.Request import AssistanceRequest, RequestType
from Entities.vehicle import Vehicle
from services.notifier import Notifier
from utils.Helpers import DISTANCE_FMT, nearest_index, rows_to_frame

# TOW is never required by any request type.
REQUIRED_CAPABILITY: Dict[RequestType, Capability] = {
    RequestType.BREAKDOWN: Capability.MECHANIC,
    RequestType.FUEL: Capability.FUEL,
}

HISTORY_COLUMNS = [
    "id", "type", "regNo", "model", "fuelType", "lat", "lon",
    "status", "assignedHelperId", "litersNeeded", "helperName",
]


class AssistanceService:
    """Service for creating, dispatching and resolving assistance requests."""

    def __init__(self, db: DataStore, notifier: Notifier):
        self.db = db
        self.notifier = notifier

    def create_request(
        self,
        req_type: RequestType,
        vehicle: Vehicle,
        location: Location,
        liters_needed: float = 0.0,
    ) -> AssistanceRequest:
        # liters are stored as given; BREAKDOWN callers normally pass 0
        r = AssistanceRequest(
            id=self.db.next_request_id(),
            type=req_type,
            vehicle=vehicle,
            location=location,
            litersNeeded=liters_needed,
        )
        self.db.add_request(r)
        self.notifier.notify(f"Request created: {self.format_request(r)}")
        self.dispatch(r)
        return r

    def dispatch(self, r: AssistanceRequest) -> Optional[Helper]:
        """
        Assign the nearest helper whose capability matches the request type.

        Helpers are scanned in store order, so when two candidates sit at the
        same distance the earlier one wins. With no candidate the request
        stays PENDING and nothing is retried. Requests that already left
        PENDING are left untouched.

        Returns:
            The assigned helper, or None
        """
        if not r.is_pending():
            return None

        needed = REQUIRED_CAPABILITY[r.type]
        candidates = [h for h in self.db.helpers if h.can_serve(needed)]
        dists = [h.distance_to(r.location) for h in candidates]

        best_i = nearest_index(dists)
        if best_i < 0:
            self.notifier.notify(f"No helper available for request #{r.id}")
            return None

        best = candidates[best_i]
        r.assign_helper(best.id)
        self.notifier.notify(
            f"Dispatched {best.name} to request #{r.id} (dist={DISTANCE_FMT.format(dists[best_i])})"
        )
        return best

    def dispatch_pending(self) -> List[Tuple[int, str]]:
        """Retry dispatch for every PENDING request, oldest first."""
        assignments: List[Tuple[int, str]] = []
        for r in self.db.history:
            if not r.is_pending():
                continue
            h = self.dispatch(r)
            if h is not None:
                assignments.append((r.id, h.id))
        return assignments

    def resolve_request(self, request_id: int) -> None:
        r = self.db.get_request(request_id)
        if r is None:
            self.notifier.notify(f"Request not found: {request_id}")
            return
        # any status may jump to RESOLVED
        r.mark_resolved()
        self.notifier.notify(f"Request resolved: {self.format_request(r)}")

    def list_helpers(self) -> List[Helper]:
        return self.db.helpers

    def print_history(self) -> None:
        print("=== Request History ===")
        for r in self.db.history:
            print(self.format_request(r))

    # ========== Formatting / export ==========

    def format_request(self, r: AssistanceRequest) -> str:
        line = f"Req#{r.id} [{r.type.name}] {r.vehicle} at {r.location} -> {r.status.name}"
        helper = self.db.get_helper(r.assignedHelperId)
        if helper is not None:
            line += f" | Helper: {helper.name}"
        return line

    def history_frame(self) -> pd.DataFrame:
        rows = []
        for r in self.db.history:
            row = r.to_dict()
            helper = self.db.get_helper(r.assignedHelperId)
            row["helperName"] = helper.name if helper is not None else None
            rows.append(row)
        return rows_to_frame(rows, HISTORY_COLUMNS)
