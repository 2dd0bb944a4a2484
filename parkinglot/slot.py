"""Parking slots and their sizes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SlotType(str, Enum):
    """Size class of a parking slot."""

    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"

    def __str__(self) -> str:
        return self.value


@dataclass(eq=False)
class ParkingSlot:
    """A numbered slot of a given size that is either free or occupied."""

    slot_id: int
    slot_type: SlotType
    occupied: bool = False

    def __post_init__(self) -> None:
        self.slot_type = SlotType(self.slot_type)

    def occupy(self) -> None:
        """Mark the slot as taken."""
        self.occupied = True

    def free(self) -> None:
        """Mark the slot as available."""
        self.occupied = False