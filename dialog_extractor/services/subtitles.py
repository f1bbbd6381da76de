"""Subtitle cue reading.

Split between file I/O (read_srt_cues) and a pure parser operating on SRT
text, so the parser can be tested offline by supplying strings directly.
Only the timing line of each cue is used; cue text is ignored.
"""
from __future__ import annotations

from typing import List
import re
import logging

from dialog_extractor.core import Interval
from .errors import SubtitleReadError

logger = logging.getLogger(__name__)

# 00:00:01,500 --> 00:00:03,250 [optional cue settings]
SRT_TIMING_PATTERN = re.compile(
    r'^\s*(\d{2}:\d{2}:\d{2})[,.](\d{3})\s*-->\s*(\d{2}:\d{2}:\d{2})[,.](\d{3})(?:\s.*)?$'
)


def parse_srt_cues(srt_text: str) -> List[Interval]:
    """Return one raw interval per timing line in ``srt_text``.

    Lines containing ``-->`` are timing lines. Their timestamps are
    normalized from ``HH:MM:SS,mmm`` to ``HH:MM:SS.mmm``; a timing line that
    does not match raises ``MalformedTimestamp``. Cues keep file order.
    """
    cues: List[Interval] = []
    if not srt_text:
        return cues

    for line in srt_text.splitlines():
        if '-->' not in line:
            continue
        match = SRT_TIMING_PATTERN.match(line)
        if match:
            start = f"{match.group(1)}.{match.group(2)}"
            end = f"{match.group(3)}.{match.group(4)}"
        else:
            # Let the timestamp parser report the offending value
            start, _, end = line.partition('-->')
            start, end = start.strip(), end.strip()
        cues.append(Interval.from_strings(start, end))

    logger.debug("Parsed %d cues", len(cues))
    return cues


def read_srt_cues(path: str) -> List[Interval]:
    """Read an SRT file and return its raw cue intervals.

    Raises ``SubtitleReadError`` if the file cannot be read or decoded.
    """
    logger.info("Reading subtitles: %s", path)
    try:
        with open(path, 'r', encoding='utf-8-sig') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to read subtitles from %s: %s", path, e)
        raise SubtitleReadError(str(e))

    cues = parse_srt_cues(text)
    logger.info("Found %d subtitle cues in %s", len(cues), path)
    return cues
