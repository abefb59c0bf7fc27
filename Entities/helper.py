# entities/helper.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Any

from Entities.location import Location


class Capability(Enum):
    MECHANIC = auto()
    TOW = auto()
    FUEL = auto()

    @classmethod
    def parse(cls, text: str) -> Capability:
        """Case-insensitive lookup, e.g. "fuel" -> Capability.FUEL."""
        key = str(text).strip().upper()
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown helper capability: {text!r}") from None


@dataclass(frozen=True)
class Helper:
    id: str
    name: str
    capability: Capability
    location: Location
    rating: float = 0.0

    def can_serve(self, needed: Capability) -> bool:
        return self.capability == needed

    def distance_to(self, loc: Location) -> float:
        return self.location.distance_to(loc)

    def __str__(self) -> str:
        return f"{self.name} ({self.capability.name}) @ {self.location} r={self.rating:.1f}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "capability": self.capability.name,
            "lat": self.location.lat,
            "lon": self.location.lon,
            "rating": self.rating,
        }
