"""A parking lot that hands out slots by vehicle size and settles fees."""

from __future__ import annotations

import os
import sys
import time
from collections import deque

from parkinglot.receipt import write_receipt
from parkinglot.slot import ParkingSlot, SlotType
from parkinglot.ticket import Ticket
from parkinglot.vehicles import Vehicle

_SLOT_FOR_VEHICLE = {
    "Car": SlotType.MEDIUM,
    "Electric Car": SlotType.MEDIUM,
    "Bike": SlotType.SMALL,
    "Truck": SlotType.LARGE,
}


class InvalidTicketError(LookupError):
    """Raised when a ticket id does not belong to a parked vehicle."""


class ParkingLot:
    """A lot with a fixed number of small, medium and large slots.

    Free slots of each size are handed out first-in, first-out; a released
    slot joins the back of its queue. Receipts are written to
    ``receipt_dir`` on every unpark, or not at all when it is ``None``.
    """

    def __init__(
        self,
        small: int,
        medium: int,
        large: int,
        receipt_dir: str | os.PathLike | None = "receipts",
    ) -> None:
        self.capacities = {
            SlotType.SMALL: small,
            SlotType.MEDIUM: medium,
            SlotType.LARGE: large,
        }
        self.receipt_dir = receipt_dir
        self.active_tickets: dict[int, Ticket] = {}
        self._free: dict[SlotType, deque[ParkingSlot]] = {kind: deque() for kind in SlotType}
        self._next_ticket_id = 1

        slot_id = 1
        for kind in (SlotType.SMALL, SlotType.MEDIUM, SlotType.LARGE):
            for _ in range(self.capacities[kind]):
                self._free[kind].append(ParkingSlot(slot_id, kind))
                slot_id += 1

    def acquire_slot_for(self, vehicle_type: str) -> ParkingSlot | None:
        """Take and occupy the next free slot suited to ``vehicle_type``, if any."""
        kind = _SLOT_FOR_VEHICLE.get(vehicle_type)
        if kind is None:
            return None
        queue = self._free[kind]
        if not queue:
            return None
        slot = queue.popleft()
        slot.occupy()
        return slot

    def park(self, vehicle: Vehicle | None, entry_time: int | None = None) -> Ticket | None:
        """Park ``vehicle`` and return its ticket, or ``None`` when no slot fits."""
        if vehicle is None:
            return None
        if entry_time is None:
            entry_time = int(time.time())
        slot = self.acquire_slot_for(vehicle.vehicle_type)
        if slot is None:
            return None
        ticket = Ticket(self._next_ticket_id, entry_time, slot, vehicle)
        self._next_ticket_id += 1
        self.active_tickets[ticket.ticket_id] = ticket
        return ticket

    def release_slot(self, slot: ParkingSlot) -> None:
        """Free ``slot`` and return it to the back of its size's queue."""
        slot.free()
        self._free[slot.slot_type].append(slot)

    def unpark(self, ticket_id: int, exit_time: int | None = None) -> float:
        """Settle ``ticket_id`` at ``exit_time``, free its slot and return the fee."""
        ticket = self.active_tickets.get(ticket_id)
        if ticket is None:
            raise InvalidTicketError("Invalid ticket id")
        if exit_time is None:
            exit_time = int(time.time())

        amount = ticket.vehicle.calculate_fee(ticket.entry_time, exit_time)

        if self.receipt_dir is not None:
            try:
                write_receipt(ticket, amount, exit_time, self.receipt_dir)
            except OSError as exc:
                print(f"Receipt write failed: {exc}", file=sys.stderr)

        self.release_slot(ticket.slot)
        del self.active_tickets[ticket_id]
        return amount