"""Chapter metadata services.

Chapters are read from the JSON that ``ffprobe -show_chapters -print_format
json`` produces. The probe itself is run elsewhere; this module only decodes
its output.
"""
from __future__ import annotations

import json
import logging
from typing import List

from dialog_extractor.core import Chapter
from .errors import ChapterMetadataError

logger = logging.getLogger(__name__)


def parse_chapters_json(text: str) -> List[Chapter]:
    """Decode ffprobe JSON into :class:`Chapter` records.

    A document without a ``chapters`` key has no chapters. Raises
    ``ChapterMetadataError`` on invalid JSON or on chapters lacking
    ``start_time``/``end_time``.
    """
    try:
        data = json.loads(text)
    except ValueError as e:
        logger.error("Invalid chapter JSON: %s", e)
        raise ChapterMetadataError(f"Invalid chapter JSON: {e}")
    if not isinstance(data, dict):
        logger.error("Chapter JSON is a %s, not an object", type(data).__name__)
        raise ChapterMetadataError("Chapter JSON must be an object")

    raw_chapters = data.get('chapters')
    if raw_chapters is None:
        raw_chapters = []
    if not isinstance(raw_chapters, list):
        logger.error("Chapter JSON 'chapters' is a %s, not a list", type(raw_chapters).__name__)
        raise ChapterMetadataError("'chapters' must be a list")

    chapters: List[Chapter] = []
    for i, raw in enumerate(raw_chapters):
        if not isinstance(raw, dict) or 'start_time' not in raw or 'end_time' not in raw:
            logger.error("Chapter %d has no start_time/end_time: %r", i, raw)
            raise ChapterMetadataError(f"Chapter {i} is missing start_time/end_time")
        tags = raw.get('tags')
        if not isinstance(tags, dict):
            tags = {}
        chapters.append(Chapter(
            start_time=str(raw['start_time']),
            end_time=str(raw['end_time']),
            title=str(tags.get('title') or ''),
        ))
    return chapters


def read_chapters(path: str) -> List[Chapter]:
    """Read chapter metadata from an ffprobe JSON file."""
    logger.info("Reading chapters: %s", path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to read chapters from %s: %s", path, e)
        raise ChapterMetadataError(str(e))

    chapters = parse_chapters_json(text)
    logger.debug("Found %d chapters in %s", len(chapters), path)
    return chapters
