"""Command-line demonstration of parking, pricing and unparking."""

from __future__ import annotations

import argparse
import sys
import time

from parkinglot.lot import InvalidTicketError, ParkingLot
from parkinglot.receipt import format_fee
from parkinglot.ticket import Ticket
from parkinglot.vehicles import Bike, Car, ElectricCar, Truck

HOUR = 3600
MINUTE = 60


def print_ticket(tag: str, ticket: Ticket | None) -> None:
    """Print a one-line summary of ``ticket`` under ``tag``."""
    if ticket is None:
        print(f"{tag}: (no ticket)")
        return
    print(
        f"{tag} -> Ticket#{ticket.ticket_id} | Slot#{ticket.slot.slot_id} "
        f"({ticket.slot.slot_type.value}) | Vehicle: {ticket.vehicle.vehicle_type} "
        f"[{ticket.vehicle.number}]"
    )


def _unpark(lot: ParkingLot, label: str, ticket: Ticket, duration: int) -> None:
    fee = lot.unpark(ticket.ticket_id, ticket.entry_time + duration)
    print(f"Unpark {label} (Ticket#{ticket.ticket_id}): Fee = Rs{format_fee(fee)}")


def _run_demo(receipt_dir: str) -> None:
    lot = ParkingLot(1, 2, 1, receipt_dir=receipt_dir)
    base = int(time.time())

    car1 = Car("DEMO-CAR-0001")
    bike1 = Bike("DEMO-BIKE-0002")
    truck1 = Truck("DEMO-TRUCK-0003")
    ev1 = ElectricCar("DEMO-EV-0004")
    truck2 = Truck("DEMO-TRUCK-0005")

    t_car1 = lot.park(car1, base)
    t_bike1 = lot.park(bike1, base + 2 * MINUTE)
    t_truck1 = lot.park(truck1, base + 5 * MINUTE)
    t_ev1 = lot.park(ev1, base + 7 * MINUTE)

    print("=== After Parking ===")
    print_ticket("Car1 ", t_car1)
    print_ticket("Bike1", t_bike1)
    print_ticket("Truck1", t_truck1)
    print_ticket("EV1  ", t_ev1)

    if lot.park(truck2, base + 10 * MINUTE) is None:
        print("Truck2: No Large slot available")

    if t_car1:
        _unpark(lot, "Car1", t_car1, 2 * HOUR + 30 * MINUTE)
    if t_bike1:
        _unpark(lot, "Bike1", t_bike1, 45 * MINUTE)
    if t_ev1:
        _unpark(lot, "EV1", t_ev1, 1 * HOUR + 10 * MINUTE)
    if t_truck1:
        _unpark(lot, "Truck1", t_truck1, 3 * HOUR)

    t_truck2 = lot.park(truck2, base + 12 * MINUTE)
    print_ticket("Truck2 (2nd attempt)", t_truck2)
    if t_truck2:
        _unpark(lot, "Truck2", t_truck2, 30 * MINUTE)
    else:
        print("Unexpected: Truck2 still couldn't park.")

    try:
        lot.unpark(999999, base + 1000)
        print("Unexpected: unpark(999999) succeeded")
    except InvalidTicketError as exc:
        print(f"invalid unpark: {exc}")

    print("=== Demo complete ===")


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration and return the process exit status."""
    parser = argparse.ArgumentParser(
        prog="parkinglot", description="Demonstrate a small parking lot."
    )
    parser.add_argument(
        "--receipt-dir",
        default="receipts",
        help="directory receipts are written to (default: receipts)",
    )
    args = parser.parse_args(argv)
    try:
        _run_demo(args.receipt_dir)
    except Exception as exc:  # noqa: BLE001 - top-level report of any failure
        print(f"Fatal error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())