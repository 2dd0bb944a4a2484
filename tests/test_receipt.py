import os
import time

import pytest

from parkinglot.receipt import build_receipt_text, format_fee, format_time, write_receipt
from parkinglot.slot import ParkingSlot, SlotType
from parkinglot.ticket import Ticket
from parkinglot.vehicles import Truck

ENTRY = 1_700_000_000
EXIT = ENTRY + 3 * 3600


def _ticket():
    return Ticket(7, ENTRY, ParkingSlot(4, SlotType.LARGE), Truck("TEST-TRUCK-01"))


def _without_generated_line(text):
    return [line for line in text.splitlines() if not line.startswith("Generated At")]


@pytest.mark.parametrize("fee, expected", [(20.0, "20"), (57.5, "57.5"), (1234567.0, "1.23457e+06")])
def test_format_fee(fee, expected):
    assert format_fee(fee) == expected


@pytest.mark.parametrize("stamp", [0, 86_400, ENTRY, EXIT])
def test_format_time_round_trip(stamp):
    text = format_time(stamp)
    assert int(time.mktime(time.strptime(text, "%Y-%m-%d %H:%M:%S"))) == stamp


def test_receipt_frame():
    lines = build_receipt_text(_ticket(), 35.0, EXIT).splitlines()
    assert lines[0] == "========== PARKING RECEIPT =========="
    assert lines[-1] == "====================================="
    assert "-------------------------------------" in lines


def test_receipt_fields():
    text = build_receipt_text(_ticket(), 35.0, EXIT)
    lines = text.splitlines()
    assert "Ticket ID      : 7" in lines
    assert "Vehicle        : Truck [TEST-TRUCK-01]" in lines
    assert "Slot           : 4 (Large)" in lines
    assert f"Entry Time     : {format_time(ENTRY)}" in lines
    assert f"Exit  Time     : {format_time(EXIT)}" in lines
    assert f"Total Fee (INR): {format_fee(35.0)}" in lines
    assert text.endswith("\n")


def test_receipt_generated_at_is_a_timestamp():
    lines = build_receipt_text(_ticket(), 35.0, EXIT).splitlines()
    generated = [line for line in lines if line.startswith("Generated At   : ")]
    assert len(generated) == 1
    stamp = generated[0].split(" : ", 1)[1]
    parsed = time.mktime(time.strptime(stamp, "%Y-%m-%d %H:%M:%S"))
    assert abs(parsed - time.time()) < 5


def test_write_receipt_creates_file(tmp_path):
    directory = tmp_path / "receipts"
    path = write_receipt(_ticket(), 35.0, EXIT, str(directory))
    assert os.path.basename(path) == "ticket_7.txt"
    with open(path, encoding="utf-8") as handle:
        written = handle.read()
    expected = build_receipt_text(_ticket(), 35.0, EXIT)
    assert _without_generated_line(written) == _without_generated_line(expected)


def test_write_receipt_default_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = write_receipt(_ticket(), 35.0, EXIT)
    assert (tmp_path / "receipts" / "ticket_7.txt").is_file()
    assert os.path.normpath(path) == os.path.join("receipts", "ticket_7.txt")