"""Service layer modules (file I/O and external metadata formats).

Includes subtitle cue reading and ffprobe chapter metadata parsing.
"""

__all__ = [
    "subtitles",
    "chapters",
    "errors",
]
