"""Time operations abstraction for testing.

This module provides an ABC for clock reads so provenance stamps can be
generated with a fixed date in tests.
"""

from abc import ABC, abstractmethod
from datetime import date


class Time(ABC):
    """Abstract time operations for dependency injection."""

    @abstractmethod
    def today(self) -> date:
        """Get the current local calendar date."""
        ...
