# utils/Helpers.py
from typing import Tuple, List, Dict, Any

import numpy as np
import pandas as pd

from Entities.helper import Capability, Helper
from Entities.location import Location

# -------------------------------------------------------------
# Constants
# -------------------------------------------------------------
NOTIFY_PREFIX = "[NOTIFICATION]"
DISTANCE_FMT = "{:.4f}"
HELPER_CSV_COLUMNS = ["id", "name", "capability", "lat", "lon", "rating"]

# id, name, capability, (lat, lon), rating
SEED_HELPERS: List[Tuple[str, str, str, Tuple[float, float], float]] = [
    ("H1", "Speedy Tow", "TOW", (12.9712, 77.5936), 4.5),
    ("H2", "FuelBuddy", "FUEL", (12.9720, 77.5900), 4.2),
    ("H3", "Ramesh Mechanic", "MECHANIC", (12.9700, 77.5950), 4.7),
    ("H4", "Express Fuel", "FUEL", (12.9750, 77.5920), 4.0),
]


# -------------------------------------------------------------
# HELPER SEEDING
# -------------------------------------------------------------
def build_seed_helpers() -> List[Helper]:
    return [
        Helper(id=hid, name=name, capability=Capability.parse(cap),
               location=Location(lat, lon), rating=rating)
        for hid, name, cap, (lat, lon), rating in SEED_HELPERS
    ]


def load_helpers_csv(csv_path: str) -> List[Helper]:
    """Read helpers from a CSV with columns id,name,capability,lat,lon,rating."""
    df = pd.read_csv(csv_path)
    missing = [c for c in HELPER_CSV_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing helper columns: {'/'.join(missing)}")

    helpers = []
    for i, row in df.iterrows():
        lat, lon, rating = (float(row[c]) for c in ("lat", "lon", "rating"))
        if not np.isfinite([lat, lon, rating]).all():
            raise ValueError(f"Helper row {i}: lat/lon/rating must be finite numbers")
        helpers.append(Helper(
            id=str(row["id"]).strip(),
            name=str(row["name"]).strip(),
            capability=Capability.parse(row["capability"]),
            location=Location(lat, lon),
            rating=rating,
        ))
    check_unique_ids(helpers)
    return helpers


def check_unique_ids(helpers: List[Helper]) -> None:
    """Requests refer to helpers by id, so ids must not repeat."""
    seen = set()
    for h in helpers:
        if h.id in seen:
            raise ValueError(f"Duplicate helper id: {h.id!r}")
        seen.add(h.id)


# -------------------------------------------------------------
# NEAREST SELECTION
# -------------------------------------------------------------
def nearest_index(distances: List[float]) -> int:
    """
    Index of the smallest finite distance, or -1 when there is none.
    np.argmin returns the first occurrence, so ties go to the earliest entry.
    """
    arr = np.asarray(distances, dtype=float)
    arr = np.where(np.isfinite(arr), arr, np.inf)
    if arr.size == 0 or np.isinf(arr).all():
        return -1
    return int(np.argmin(arr))


# -------------------------------------------------------------
# BOUNDARY INPUT PARSING
# -------------------------------------------------------------
def parse_float(text: str, field: str = "value") -> float:
    try:
        val = float(str(text).strip())
    except ValueError:
        raise ValueError(f"{field} must be a number, got {text!r}") from None
    if not np.isfinite(val):
        raise ValueError(f"{field} must be finite, got {text!r}")
    return val


def parse_int(text: str, field: str = "value") -> int:
    try:
        return int(str(text).strip())
    except ValueError:
        raise ValueError(f"{field} must be a whole number, got {text!r}") from None


def rows_to_frame(rows: List[Dict[str, Any]], columns: List[str]) -> pd.DataFrame:
    if not rows:
        return pd.DataFrame(columns=columns)
    return pd.DataFrame(rows, columns=columns)
