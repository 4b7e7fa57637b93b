from skillsync.core.time.abc import Time
from skillsync.core.time.real import RealTime

__all__ = ["RealTime", "Time"]
