"""Timestamp source interface."""

from abc import ABC, abstractmethod


class Clock(ABC):
    """
    Abstract source of monotonically increasing integer timestamps.

    Timestamps are only stamped on records (last_updated, applied_at,
    approved_at, disbursed_at); no logic depends on wall-clock meaning.
    """

    @abstractmethod
    def now(self) -> int:
        """
        Get the current timestamp.

        Returns:
            A value never smaller than any value previously returned
        """
        ...
