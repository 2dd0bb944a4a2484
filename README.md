# parkinglot

A small parking lot model. The lot has small, medium and large slots. Each
vehicle type goes into one slot size. Parking hands out a ticket. Leaving
charges a fee for each started hour and writes a text receipt.

| Vehicle       | Slot   | First hour | Each further hour |
|---------------|--------|------------|-------------------|
| Bike          | Small  | 20         | 10                |
| Car           | Medium | 20         | 15                |
| Electric Car  | Medium | 40         | 25                |
| Truck         | Large  | 15         | 10                |

A stay is rounded up to whole hours, with a minimum of one hour. If the exit
time comes before the entry time, the stay counts as zero hours and is
charged the first-hour rate.

Free slots of each size are handed out in first-in, first-out order. A
released slot goes to the back of its queue. Slots are numbered from 1: the
small slots come first, then the medium slots, then the large ones.

## Installation

```
pip install .
```

## Command line

```
parkinglot [--receipt-dir DIR]
```

This runs a demonstration:

1. It sets up a lot with one small, two medium and one large slot.
2. It parks a car, a bike, a truck and an electric car.
3. A second truck is turned away because no large slot is free.
4. Each parked vehicle leaves and its fee is printed.
5. The second truck then parks in the freed large slot.
6. Last, it shows the error that an unknown ticket raises.

Receipts are written as `ticket_<id>.txt` in the directory given by
`--receipt-dir`. The default is `receipts`. The command exits with status 0
on success. On any failure it prints `Fatal error: ...` to standard error and
exits with status 1.

## Library use

```python
from parkinglot.lot import ParkingLot, InvalidTicketError
from parkinglot.vehicles import Car

lot = ParkingLot(1, 2, 1, receipt_dir=None)   # small, medium, large; no receipts
ticket = lot.park(Car("TEST-CAR-0001"), entry_time=0)
fee = lot.unpark(ticket.ticket_id, exit_time=2 * 3600 + 30 * 60)
print(fee)                                    # 50.0: three started hours

try:
    lot.unpark(999999, exit_time=0)
except InvalidTicketError as exc:
    print(exc)                                # Invalid ticket id
```

- `ParkingLot(small, medium, large, receipt_dir="receipts")` writes a receipt
  to `receipt_dir` on every `unpark`. Pass `receipt_dir=None` to write none.
  If a receipt cannot be written, the lot reports this on standard error, and
  the unpark still completes.
- `ParkingLot.park(vehicle, entry_time=None)` returns a `Ticket`. It returns
  `None` when no slot of the right size is free. When `entry_time` is left
  out, the current time is used.
- `ParkingLot.unpark(ticket_id, exit_time=None)` returns the fee and frees
  the slot. It raises `InvalidTicketError` for a ticket that is not active.
- `ParkingLot.active_tickets` maps ticket ids to the tickets still parked.
- A `Ticket` has `ticket_id`, `entry_time`, `slot` and `vehicle`. A
  `ParkingSlot` has `slot_id`, `slot_type` (a `SlotType`) and `occupied`.
- Vehicles (`Car`, `Bike`, `Truck`, `ElectricCar` in `parkinglot.vehicles`)
  have a `number` and a `vehicle_type`. Any vehicle can price a stay without
  a lot, through `calculate_fee(entry_time, exit_time)`.
- The hour rounding is `parkinglot.pricing.ceil_hours`.
- Receipt text comes from `parkinglot.receipt.build_receipt_text`. To write a
  receipt yourself, use `parkinglot.receipt.write_receipt`.

Times are UNIX timestamps in seconds. Receipts show them in local time.

## What it does not do

The lot keeps its state in memory only. Tickets and slot occupancy are not
saved between runs. The receipts are the only files it writes. The
`parkinglot` command runs the fixed demonstration described above. It is not
an interactive tool for running a real lot.

## Tests

```
pip install .[test]
pytest
```