# Store.py
"""
In-memory store for the assistance prototype.

DataStore keeps:
1. The helper set, seeded once and never changed afterwards
2. The request history, append-only and in creation order
3. The request id counter (ids start at 1 and are never reused)

Only AssistanceService writes to it.
"""
from typing import Dict, List, Optional, Sequence

from Entities.helper import Helper
from Entities.Request import AssistanceRequest
from utils.Helpers import build_seed_helpers, check_unique_ids, load_helpers_csv


class DataStore:

    def __init__(self, helpers: Optional[Sequence[Helper]] = None):
        """Seed helpers; the default set is used when none are given."""
        self.helpers: List[Helper] = list(helpers) if helpers is not None else build_seed_helpers()
        check_unique_ids(self.helpers)
        self.history: List[AssistanceRequest] = []
        self._requestCounter = 0

    # ========== HELPERS ==========

    def init_helpers(self, csv_path: str) -> None:
        """Replace the seeded helpers with the ones listed in a CSV file."""
        if self.history:
            raise RuntimeError("Helpers can only be loaded before any request is created")

        self.helpers = load_helpers_csv(csv_path)
        print(f"[Store] Helpers loaded: {len(self.helpers)} from {csv_path}")

        counts: Dict[str, int] = {}
        for h in self.helpers:
            counts[h.capability.name] = counts.get(h.capability.name, 0) + 1
        for cap, n in counts.items():
            print(f"  {cap}: {n}")

    def get_helper(self, helper_id: Optional[str]) -> Optional[Helper]:
        if helper_id is None:
            return None
        for h in self.helpers:
            if h.id == helper_id:
                return h
        return None

    # ========== REQUESTS ==========

    def next_request_id(self) -> int:
        self._requestCounter += 1
        return self._requestCounter

    def add_request(self, r: AssistanceRequest) -> None:
        self.history.append(r)

    def get_request(self, request_id: int) -> Optional[AssistanceRequest]:
        for r in self.history:
            if r.id == request_id:
                return r
        return None
