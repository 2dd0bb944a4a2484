"""Parking lot model with slot allocation, tickets, hourly fees and receipts."""

__version__ = "0.1.0"
__all__ = ["cli", "files", "lot", "pricing", "receipt", "slot", "ticket", "vehicles"]