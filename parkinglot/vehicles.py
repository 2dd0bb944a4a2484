"""Vehicle kinds and their parking tariffs."""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from parkinglot.pricing import FeeCalculator, ceil_hours


def _tiered_fee(entry_time: int, exit_time: int, first_hour: float, extra_hour: float) -> float:
    hours = ceil_hours(entry_time, exit_time)
    if hours <= 1:
        return first_hour
    return first_hour + (hours - 1) * extra_hour


@dataclass(frozen=True)
class Vehicle(FeeCalculator):
    """A vehicle identified by its registration number."""

    number: str
    vehicle_type: ClassVar[str]

    @abstractmethod
    def calculate_fee(self, entry_time: int, exit_time: int) -> float:
        """Return the fee this vehicle owes for the given stay."""


@dataclass(frozen=True)
class Car(Vehicle):
    """A car: 20 for the first hour, 15 for each further hour."""

    vehicle_type: ClassVar[str] = "Car"

    def calculate_fee(self, entry_time: int, exit_time: int) -> float:
        return _tiered_fee(entry_time, exit_time, 20.0, 15.0)


@dataclass(frozen=True)
class Bike(Vehicle):
    """A bike: 20 for the first hour, 10 for each further hour."""

    vehicle_type: ClassVar[str] = "Bike"

    def calculate_fee(self, entry_time: int, exit_time: int) -> float:
        return _tiered_fee(entry_time, exit_time, 20.0, 10.0)


@dataclass(frozen=True)
class Truck(Vehicle):
    """A truck: 15 for the first hour, 10 for each further hour."""

    vehicle_type: ClassVar[str] = "Truck"

    def calculate_fee(self, entry_time: int, exit_time: int) -> float:
        return _tiered_fee(entry_time, exit_time, 15.0, 10.0)


@dataclass(frozen=True)
class ElectricCar(Vehicle):
    """An electric car: 40 for the first hour, 25 for each further hour."""

    vehicle_type: ClassVar[str] = "Electric Car"

    def calculate_fee(self, entry_time: int, exit_time: int) -> float:
        return _tiered_fee(entry_time, exit_time, 40.0, 25.0)