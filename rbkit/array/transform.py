from __future__ import annotations
from typing import Any, List, Optional, Sequence


class _NotFound:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __bool__(self) -> bool:
        return False


NOT_FOUND = _NotFound()


def transpose(rows: Sequence[Sequence[Any]]) -> Optional[List[List[Any]]]:
    """
    rows: m x n rectangular sequence of sequences.
    Returns the n x m transpose, [] for empty input, None for ragged rows.
    """
    if len(rows) == 0:
        return []
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        return None
    return [[row[j] for row in rows] for j in range(width)]


def zip(receiver: Sequence[Any], *others: Sequence[Any]) -> List[List[Any]]:
    # truncates to the shortest of receiver and others
    length = min([len(receiver)] + [len(o) for o in others])
    return [[receiver[i]] + [o[i] for o in others] for i in range(length)]


def rotate(seq: Sequence[Any], count: int = 1) -> List[Any]:
    items = list(seq)
    if not items:
        return items
    shift = count % len(items)
    return items[shift:] + items[:shift]


def dig(seq: Any, *path: int) -> Any:
    """
    Follows `path` through nested sequences, e.g. dig([[1, 2], [3]], 0, 1) -> 2.
    Returns NOT_FOUND when an index is out of range, not an int, or the path
    goes deeper than the structure.
    """
    current = seq
    for idx in path:
        if isinstance(idx, bool) or not isinstance(idx, int):
            return NOT_FOUND
        if isinstance(current, (str, bytes)) or not isinstance(current, Sequence):
            return NOT_FOUND
        if not (-len(current) <= idx < len(current)):
            return NOT_FOUND
        current = current[idx]
    return current
