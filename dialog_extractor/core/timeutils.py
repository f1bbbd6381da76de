"""Pure time helpers: fixed-width timestamps, gap checks and thresholds."""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal, InvalidOperation
from typing import Union

from .errors import MalformedTimestamp

TIMESTAMP_PATTERN = re.compile(r'^(\d{2}):(\d{2}):(\d{2})\.(\d{3})$')

MAX_MILLIS = 100 * 3600 * 1000 - 1

_THRESHOLD_PATTERN = re.compile(r'^([0-9]*\.?[0-9]+)\s*(ms|s)?$')


@dataclass(frozen=True, order=True)
class Timestamp:
    """A point on a video timeline, stored as whole milliseconds."""

    millis: int

    def __post_init__(self):
        if isinstance(self.millis, bool) or not isinstance(self.millis, int):
            raise MalformedTimestamp(f"Timestamp needs integer milliseconds, got {self.millis!r}")
        if not 0 <= self.millis <= MAX_MILLIS:
            raise MalformedTimestamp(f"Timestamp out of range: {self.millis}ms")

    def __str__(self) -> str:
        return format_timestamp(self)

    def __sub__(self, other: "Timestamp") -> timedelta:
        return timedelta(milliseconds=self.millis - other.millis)


ZERO = Timestamp(0)


def parse_timestamp(text: str) -> Timestamp:
    """Parse ``HH:MM:SS.mmm`` into a :class:`Timestamp`.

    Only the exact fixed-width shape is accepted: ``"00:01:02.345"`` is
    valid, ``"0:01:02.345"`` and ``"00:01:02,345"`` are not. Raises
    ``MalformedTimestamp`` otherwise.
    """
    if not isinstance(text, str):
        raise MalformedTimestamp(f"Timestamp must be a string, got {type(text).__name__}")
    match = TIMESTAMP_PATTERN.match(text)
    if not match:
        raise MalformedTimestamp(f"Invalid timestamp {text!r}: expected HH:MM:SS.mmm")
    hours, minutes, seconds, millis = map(int, match.groups())
    if minutes >= 60 or seconds >= 60:
        raise MalformedTimestamp(f"Invalid timestamp {text!r}: minutes and seconds must be < 60")
    return Timestamp(((hours * 60 + minutes) * 60 + seconds) * 1000 + millis)


def format_timestamp(ts: Timestamp) -> str:
    """Format a :class:`Timestamp` as zero padded ``HH:MM:SS.mmm``."""
    total_seconds, millis = divmod(ts.millis, 1000)
    minutes_total, seconds = divmod(total_seconds, 60)
    hours, minutes = divmod(minutes_total, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{millis:03d}"


def gap_exceeds(a: Timestamp, b: Timestamp, threshold: timedelta) -> bool:
    """Return True if the distance between ``a`` and ``b`` is over ``threshold``.

    The distance is absolute, so the argument order does not matter.
    """
    return timedelta(milliseconds=abs(a.millis - b.millis)) > threshold


def seconds_to_timestamp(value: Union[str, int, float, Decimal]) -> Timestamp:
    """Convert fractional seconds (e.g. ``"125.400000"``) to a Timestamp.

    Sub-millisecond digits are truncated, matching how the value is
    rendered with a three digit fraction.
    """
    if isinstance(value, bool):
        raise MalformedTimestamp(f"Invalid seconds value: {value!r}")
    try:
        seconds = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise MalformedTimestamp(f"Invalid seconds value: {value!r}")
    if not seconds.is_finite() or seconds < 0:
        raise MalformedTimestamp(f"Invalid seconds value: {value!r}")
    return Timestamp(int(seconds * 1000))


def parse_threshold(value) -> timedelta:
    """Normalize a gap threshold to a ``timedelta``.

    Accepts a ``timedelta``, a number of seconds, or a string such as
    ``"1.5"``, ``"1.5s"`` or ``"250ms"``. Raises ``ValueError`` for
    negative or unparsable values.
    """
    if isinstance(value, timedelta):
        threshold = value
    elif isinstance(value, bool):
        raise ValueError(f"Invalid threshold: {value!r}")
    elif isinstance(value, (int, float, str)):
        try:
            threshold = _threshold_to_timedelta(value)
        except OverflowError:
            raise ValueError(f"Invalid threshold: {value!r}")
    else:
        raise ValueError(f"Unsupported threshold type: {type(value).__name__}")

    if threshold < timedelta(0):
        raise ValueError(f"Threshold must not be negative: {value!r}")
    return threshold


def _threshold_to_timedelta(value) -> timedelta:
    if not isinstance(value, str):
        return timedelta(seconds=value)
    match = _THRESHOLD_PATTERN.match(value.strip().lower())
    if not match:
        raise ValueError(f"Invalid threshold: {value!r}")
    number, unit = match.groups()
    if unit == 'ms':
        return timedelta(milliseconds=float(number))
    return timedelta(seconds=float(number))
