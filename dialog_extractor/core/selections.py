"""Pure parser for chapter selections typed by the user.

Chapters are listed as ``Option 0``, ``Option 1``... so indices are 0-based.
"""
from __future__ import annotations
from typing import List


def parse_chapter_selection(value, chapter_count: int) -> List[int]:
    """Parse a chapter selection: int, comma list, 'all'/'a', or blank.

    Returns 0-based chapter indices without duplicates, in the order given.
    ``None`` and blank strings select nothing. Raises ``ValueError`` for
    non-numeric or out-of-range values.
    """
    if value is None:
        return []
    if isinstance(value, bool):
        raise ValueError('Unsupported chapter selection format')
    if isinstance(value, int):
        if 0 <= value < chapter_count:
            return [value]
        raise ValueError(f'Chapter index out of range: {value}')
    if isinstance(value, str):
        v = value.strip().lower()
        if not v:
            return []
        if v in ('all', 'a'):
            return list(range(chapter_count))
        parts = [p.strip() for p in v.split(',')]
        nums: List[int] = []
        for p in parts:
            if not p.isdigit():
                raise ValueError(f'Non-numeric chapter index: {p!r}')
            n = int(p)
            if not (0 <= n < chapter_count):
                raise ValueError(f'Chapter index out of range: {n}')
            if n not in nums:
                nums.append(n)
        return nums
    raise ValueError('Unsupported chapter selection format')
