"""
Core logic of the dialog extractor.

Pure, side-effect-free helpers: timestamps, cue consolidation, chapter
exclusion and selection parsing. Nothing here touches files or processes.
"""

__all__ = [
    "MalformedTimestamp",
    "NoIntervalsError",
    "Timestamp",
    "parse_timestamp",
    "format_timestamp",
    "gap_exceeds",
    "seconds_to_timestamp",
    "parse_threshold",
    "Interval",
    "consolidate",
    "total_duration",
    "Chapter",
    "ChapterSummary",
    "chapter_to_interval",
    "select_chapters_by_title",
    "summarize_chapters",
    "subtract",
    "parse_chapter_selection",
    "fragment_names",
    "render_concat_list",
]

from .errors import MalformedTimestamp, NoIntervalsError
from .timeutils import (
    Timestamp,
    parse_timestamp,
    format_timestamp,
    gap_exceeds,
    seconds_to_timestamp,
    parse_threshold,
)
from .intervals import Interval, consolidate, total_duration
from .chapters import (
    Chapter,
    ChapterSummary,
    chapter_to_interval,
    select_chapters_by_title,
    summarize_chapters,
    subtract,
)
from .selections import parse_chapter_selection
from .fragments import fragment_names, render_concat_list
