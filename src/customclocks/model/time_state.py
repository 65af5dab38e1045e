"""
Time State
==========
The elapsed-seconds counter behind all three hands, and the angles derived
from it.

The counter only ever moves by whole seconds: one tick adds exactly one,
regardless of how much wall time really passed between ticks.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
import logging
import time
from typing import Optional

from customclocks.config import DATE_FORMAT_PATTERN
from customclocks.model.hands import HandKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HandAngles:
    """Clockwise angles from 12 o'clock, in degrees."""
    second: int
    minute: int
    hour: int

    def for_kind(self, kind: HandKind) -> int:
        return getattr(self, kind.value)


def parse_initial_time(text: str) -> int:
    """
    Convert a `yyyy/MM/dd HH:mm:ss` string to epoch seconds.

    The string is read as a UTC wall time, so a clock started from it shows
    exactly the typed time.

    Raises:
        ValueError: If the text does not match the pattern.
        TypeError: If `text` is not a string.
    """
    parsed = datetime.strptime(text, DATE_FORMAT_PATTERN)
    return int(parsed.replace(tzinfo=timezone.utc).timestamp())


def wall_clock_seconds() -> int:
    return int(time.time())


class TimeState:
    def __init__(self, starting_epoch_seconds: Optional[int] = None) -> None:
        if starting_epoch_seconds is None:
            starting_epoch_seconds = wall_clock_seconds()
        self._elapsed_seconds: int = max(0, int(starting_epoch_seconds))

    @classmethod
    def from_date_string(cls, text: Optional[str]) -> TimeState:
        """
        Start from an initial-time string, falling back to the current time
        when it is missing or malformed.
        """
        if text is None:
            return cls()
        try:
            seconds = parse_initial_time(text)
        except (ValueError, TypeError) as e:
            logger.warning(f"Could not parse initial time {text!r} ({e}), using current time.")
            return cls()
        return cls(seconds)

    @property
    def elapsed_seconds(self) -> int:
        return self._elapsed_seconds

    def tick(self) -> None:
        self._elapsed_seconds += 1

    def current_angles(self) -> HandAngles:
        s = self._elapsed_seconds
        within_hour = s % 3600
        return HandAngles(
            second=s % 60 * 6,
            minute=within_hour // 60 * 6,
            hour=s // 3600 % 12 * 30 + within_hour // 60 // 12 * 6,
        )

    def snapshot(self) -> int:
        return self._elapsed_seconds

    def restore(self, elapsed_seconds: int) -> None:
        """Replace the counter. Negative values are clamped to 0."""
        if elapsed_seconds < 0:
            logger.warning(f"Restored elapsed seconds {elapsed_seconds} is negative, clamping to 0.")
        self._elapsed_seconds = max(0, int(elapsed_seconds))
