"""Real time implementation using the system clock."""

from datetime import date

from skillsync.core.time.abc import Time


class RealTime(Time):
    """Production implementation using actual wall-clock time."""

    def today(self) -> date:
        return date.today()
