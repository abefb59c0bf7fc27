# entities/vehicle.py
from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Vehicle:
    regNo: str
    model: str
    fuelType: str   # Petrol / Diesel / ...

    def __str__(self) -> str:
        return f"{self.regNo} | {self.model} | {self.fuelType}"
