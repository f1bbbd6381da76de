"""Interval value type and the cue consolidator.

Subtitle cues arrive as raw, possibly unsorted and overlapping spans. The
consolidator folds them into the minimal sorted list of disjoint dialog
intervals, bridging gaps that are not longer than a threshold.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Iterable, List, Optional

from .errors import NoIntervalsError
from .timeutils import Timestamp, gap_exceeds, parse_timestamp


@dataclass(frozen=True)
class Interval:
    """A ``(start, end)`` span of the timeline.

    ``title`` is only set for chapter-derived intervals and is never used
    when merging.
    """

    start: Timestamp
    end: Timestamp
    title: Optional[str] = None

    @classmethod
    def from_strings(cls, start: str, end: str, title: Optional[str] = None) -> "Interval":
        return cls(parse_timestamp(start), parse_timestamp(end), title)

    @property
    def duration(self) -> timedelta:
        if self.end <= self.start:
            return timedelta(0)
        return self.end - self.start

    @property
    def is_degenerate(self) -> bool:
        return not self.start < self.end

    def as_strings(self):
        return str(self.start), str(self.end)

    def __str__(self) -> str:
        label = f" [{self.title}]" if self.title else ""
        return f"{self.start} - {self.end}{label}"


def total_duration(intervals: Iterable[Interval]) -> timedelta:
    """Sum of the durations of ``intervals``."""
    return sum((i.duration for i in intervals), timedelta(0))


def consolidate(intervals: Iterable[Interval], threshold: timedelta,
                logger: Optional[logging.Logger] = None) -> List[Interval]:
    """Merge raw cue intervals into sorted, disjoint, non-empty intervals.

    Two neighbours are merged when they overlap or when the gap between the
    pending end and the next start is not longer than ``threshold``.
    Zero-length results are dropped. Raises ``NoIntervalsError`` if
    ``intervals`` is empty.
    """
    ordered = sorted(intervals, key=lambda i: i.start)
    if not ordered:
        raise NoIntervalsError("No subtitles were found. Nothing to extract.")

    combined: List[Interval] = []
    pending = Interval(ordered[0].start, ordered[0].end)
    for cur in ordered[1:]:
        if cur.start < pending.end or not gap_exceeds(pending.end, cur.start, threshold):
            if cur.end >= pending.end:
                pending = Interval(pending.start, cur.end)
        else:
            _finalize(combined, pending, logger)
            pending = Interval(cur.start, cur.end)
    _finalize(combined, pending, logger)

    if logger is not None:
        logger.debug("Consolidated %d cues into %d intervals (threshold %s)",
                     len(ordered), len(combined), threshold)
    return combined


def _finalize(combined: List[Interval], pending: Interval,
              logger: Optional[logging.Logger]) -> None:
    # Reversed cues (end before start) are dropped along with empty ones.
    if not pending.is_degenerate:
        combined.append(pending)
    elif logger is not None:
        logger.debug("Dropping empty interval %s", pending)
