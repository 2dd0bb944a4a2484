"""Plain-text receipts for finished parking stays."""

from __future__ import annotations

import os
import time

from parkinglot.files import TIMESTAMP_FORMAT, now_iso, write_text
from parkinglot.ticket import Ticket


def format_time(timestamp: int) -> str:
    """Format a UNIX timestamp as local ``YYYY-MM-DD HH:MM:SS``."""
    return time.strftime(TIMESTAMP_FORMAT, time.localtime(timestamp))


def format_fee(fee: float) -> str:
    """Format a fee with six significant digits and no trailing zeros."""
    return f"{fee:g}"


def build_receipt_text(ticket: Ticket, fee: float, exit_time: int) -> str:
    """Return the receipt for ``ticket`` settled at ``exit_time`` for ``fee``."""
    vehicle = ticket.vehicle
    slot = ticket.slot
    lines = [
        "========== PARKING RECEIPT ==========",
        f"Ticket ID      : {ticket.ticket_id}",
        f"Vehicle        : {vehicle.vehicle_type} [{vehicle.number}]",
        f"Slot           : {slot.slot_id} ({slot.slot_type.value})",
        f"Entry Time     : {format_time(ticket.entry_time)}",
        f"Exit  Time     : {format_time(exit_time)}",
        "-------------------------------------",
        f"Total Fee (INR): {format_fee(fee)}",
        f"Generated At   : {now_iso()}",
        "=====================================",
    ]
    return "\n".join(lines) + "\n"


def write_receipt(
    ticket: Ticket,
    fee: float,
    exit_time: int,
    directory: str | os.PathLike = "receipts",
) -> str:
    """Write the receipt to ``<directory>/ticket_<id>.txt`` and return that path."""
    path = os.path.join(os.fspath(directory), f"ticket_{ticket.ticket_id}.txt")
    write_text(path, build_receipt_text(ticket, fee, exit_time))
    return path