"""Fee calculation interface and the hour-rounding rule shared by all tariffs."""

from __future__ import annotations

from abc import ABC, abstractmethod

SECONDS_PER_HOUR = 3600


class FeeCalculator(ABC):
    """Anything that can price a stay between two UNIX timestamps."""

    @abstractmethod
    def calculate_fee(self, entry_time: int, exit_time: int) -> float:
        """Return the fee for a stay from ``entry_time`` to ``exit_time``."""


def ceil_hours(entry_time: int, exit_time: int) -> int:
    """Return the number of started hours in a stay, at least one.

    A stay that ends before it starts counts as zero hours.
    """
    if exit_time < entry_time:
        return 0
    seconds = int(exit_time - entry_time)
    hours, remainder = divmod(seconds, SECONDS_PER_HOUR)
    if remainder:
        hours += 1
    return max(hours, 1)