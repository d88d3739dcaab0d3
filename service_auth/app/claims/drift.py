"""
Clock drift tolerance for timestamp claims.
"""

import time
from typing import Any, Optional, Protocol

from shared.config import default_config_accessor


class Clock(Protocol):
    """Source of the current time in epoch seconds."""

    def now(self) -> int:
        ...


class ConfigAccessor(Protocol):
    """Resolves a configuration value for a verification context."""

    def __call__(self, context: Any, key: str, default: Any = None) -> Any:
        ...


class SystemClock:
    """Wall clock, truncated to whole seconds."""

    def now(self) -> int:
        return int(time.time())


class DriftChecker:
    """Decides whether a timestamp is within the allowed drift of now.

    The check is advisory: it returns a boolean and never raises. A missing
    or non-integer timestamp is treated as within drift, so callers that
    want rejection must turn ``False`` into their own error.
    """

    def __init__(self, config: Optional[ConfigAccessor] = None, clock: Optional[Clock] = None):
        self.config = config or default_config_accessor()
        self.clock = clock or SystemClock()

    def allowed_drift_seconds(self, context: Any) -> float:
        return self.config(context, "allowed_drift", 0) / 1000

    def is_within_drift(self, context: Any, timestamp: Any) -> bool:
        if not isinstance(timestamp, int) or isinstance(timestamp, bool):
            return True

        diff = abs(timestamp - self.clock.now())
        return diff <= self.allowed_drift_seconds(context)
