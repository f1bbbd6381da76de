"""Fragment naming and the concat manifest for the external transcoder."""
from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from .intervals import Interval


def fragment_names(intervals: Sequence[Interval], extension: str = "mp3") -> List[Tuple[str, Interval]]:
    """Pair every interval with its fragment file name (``shard-<n>.<ext>``)."""
    ext = extension.lstrip('.')
    return [(f"shard-{i}.{ext}", interval) for i, interval in enumerate(intervals)]


def render_concat_list(names: Iterable[str]) -> str:
    """Render an ffmpeg concat demuxer list, one ``file '<name>'`` per line."""
    return ''.join(f"file '{name}'\n" for name in names)
