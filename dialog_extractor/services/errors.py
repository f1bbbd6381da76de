"""Custom exceptions for service layer operations."""


class SubtitleReadError(Exception):
    """Raised when reading subtitle cues from a file fails."""


class ChapterMetadataError(Exception):
    """Raised when chapter metadata cannot be read or decoded."""
