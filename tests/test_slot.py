import pytest

from parkinglot.slot import ParkingSlot, SlotType


@pytest.mark.parametrize("name", ["Small", "Medium", "Large"])
def test_slot_type_round_trips_through_its_name(name):
    assert str(SlotType(name)) == name


def test_slot_type_from_string_is_converted():
    slot = ParkingSlot(3, "Medium")
    assert slot.slot_type is SlotType.MEDIUM
    assert slot.slot_id == 3


def test_new_slot_is_free():
    assert ParkingSlot(1, SlotType.SMALL).occupied is False


def test_occupy_and_free():
    slot = ParkingSlot(1, SlotType.LARGE)
    slot.occupy()
    assert slot.occupied is True
    slot.free()
    assert slot.occupied is False


def test_occupy_is_idempotent():
    slot = ParkingSlot(1, SlotType.SMALL)
    slot.occupy()
    slot.occupy()
    assert slot.occupied is True


def test_unknown_slot_type_is_rejected():
    with pytest.raises(ValueError):
        ParkingSlot(1, "Huge")


def test_slots_compare_by_identity():
    first = ParkingSlot(1, SlotType.SMALL)
    second = ParkingSlot(1, SlotType.SMALL)
    assert (first == second) is False
    assert first == first