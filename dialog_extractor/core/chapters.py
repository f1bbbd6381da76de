"""Chapter records and chapter exclusion.

Chapters (openings, endings, previews...) come from container metadata as
fractional seconds. They are turned into titled intervals and cut out of
the consolidated dialog intervals.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

from .intervals import Interval
from .timeutils import Timestamp, seconds_to_timestamp


@dataclass(frozen=True)
class Chapter:
    """A chapter as reported by the container, times in seconds."""

    start_time: str
    end_time: str
    title: str = ""


@dataclass(frozen=True)
class ChapterSummary:
    """How one chapter title shows up across a batch of videos."""

    title: str
    count: int
    median_start: Timestamp
    median_end: Timestamp

    @property
    def description(self) -> str:
        return f"({self.median_start} - {self.median_end}) found in {self.count} videos"


def chapter_to_interval(chapter: Chapter) -> Interval:
    return Interval(
        seconds_to_timestamp(chapter.start_time),
        seconds_to_timestamp(chapter.end_time),
        chapter.title,
    )


def select_chapters_by_title(chapters: Iterable[Chapter], titles: Iterable[str]) -> List[Chapter]:
    """Keep the chapters whose title is listed in ``titles``, in order."""
    wanted = set(titles)
    return [c for c in chapters if c.title in wanted]


def summarize_chapters(chapter_lists: Iterable[Sequence[Chapter]]) -> List[ChapterSummary]:
    """Group the chapters of several videos by title.

    Each summary carries the number of occurrences and the upper median of
    the start and end times. Summaries are sorted by median start.
    """
    starts: Dict[str, List[Timestamp]] = {}
    ends: Dict[str, List[Timestamp]] = {}
    for chapters in chapter_lists:
        for chapter in chapters:
            interval = chapter_to_interval(chapter)
            starts.setdefault(chapter.title, []).append(interval.start)
            ends.setdefault(chapter.title, []).append(interval.end)

    summaries = [
        ChapterSummary(
            title=title,
            count=len(starts[title]),
            median_start=_upper_median(starts[title]),
            median_end=_upper_median(ends[title]),
        )
        for title in starts
    ]
    summaries.sort(key=lambda s: (s.median_start, s.title))
    return summaries


def _upper_median(values: List[Timestamp]) -> Timestamp:
    ordered = sorted(values)
    return ordered[len(ordered) // 2]


def subtract(intervals: Sequence[Interval], exclusions: Sequence[Interval],
             logger: Optional[logging.Logger] = None) -> List[Interval]:
    """Cut excluded ranges out of the dialog intervals.

    Exclusions are applied one after another over the whole working set.
    An exclusion that strictly straddles an interval's start moves the start
    to the exclusion's end; one that strictly straddles the end moves the
    end to the exclusion's start. Both checks look at the interval as it was
    before the pass. Empty results are dropped.

    An exclusion lying inside an interval, or spanning exactly the same
    range, straddles neither boundary and leaves the interval untouched.
    """
    if not exclusions:
        return intervals

    working = list(intervals)
    for chap in exclusions:
        result: List[Interval] = []
        for cur in working:
            start, end = cur.start, cur.end
            if chap.start < cur.start < chap.end:
                start = chap.end
            if chap.start < cur.end < chap.end:
                end = chap.start
            if start < end:
                result.append(Interval(start, end, cur.title))
            elif logger is not None:
                logger.debug("Chapter %s removed interval %s", chap, cur)
        working = result

    if logger is not None:
        logger.debug("Applied %d exclusions: %d -> %d intervals",
                     len(exclusions), len(intervals), len(working))
    return working
