# entities/location.py
from __future__ import annotations
from dataclasses import dataclass
import math


@dataclass(frozen=True)
class Location:
    """
    A (lat, lon) pair in coordinate-degree space.
    Distances are planar (degrees), only used to rank helpers.
    """
    lat: float
    lon: float

    def distance_to(self, other: Location) -> float:
        dx = self.lat - other.lat
        dy = self.lon - other.lon
        return math.sqrt(dx * dx + dy * dy)

    def __str__(self) -> str:
        return f"({self.lat:.4f}, {self.lon:.4f})"


def distance(a: Location, b: Location) -> float:
    return a.distance_to(b)
