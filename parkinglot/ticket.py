"""Tickets issued when a vehicle is parked."""

from __future__ import annotations

from dataclasses import dataclass

from parkinglot.slot import ParkingSlot
from parkinglot.vehicles import Vehicle


@dataclass(frozen=True)
class Ticket:
    """Record of a vehicle parked in a slot since ``entry_time``."""

    ticket_id: int
    entry_time: int
    slot: ParkingSlot
    vehicle: Vehicle