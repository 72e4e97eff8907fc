from __future__ import annotations
from dataclasses import dataclass
import re
from typing import List, Optional, Tuple, Union

Range = Tuple[int, int]  # (location, length)
Pattern = Union[str, "re.Pattern[str]"]

NO_RANGE: Range = (-1, 0)


@dataclass(frozen=True)
class MatchData:
    match: str
    range: Range
    captures: Tuple[str, ...] = ()
    ranges: Tuple[Range, ...] = ()

    @property
    def size(self) -> int:
        return len(self.to_a)

    @property
    def to_a(self) -> List[str]:
        return [self.match] + list(self.captures)

    @property
    def to_s(self) -> str:
        return self.match

    def __str__(self) -> str:
        return self.match

    @classmethod
    def from_match(cls, m: "re.Match[str]") -> "MatchData":
        """Groups that did not take part in the match become "" with range (-1, 0)."""
        captures: List[str] = []
        ranges: List[Range] = []
        for g in range(1, (m.re.groups or 0) + 1):
            start, end = m.span(g)
            if start < 0:
                captures.append("")
                ranges.append(NO_RANGE)
            else:
                captures.append(m.group(g))
                ranges.append((start, end - start))
        start, end = m.span()
        return cls(
            match=m.group(0),
            range=(start, end - start),
            captures=tuple(captures),
            ranges=tuple(ranges),
        )


def match(pattern: Pattern, string: str, flags: int = 0) -> Optional[MatchData]:
    m = _compile(pattern, flags).search(string)
    return MatchData.from_match(m) if m is not None else None


def scan(pattern: Pattern, string: str, flags: int = 0) -> List[MatchData]:
    return [MatchData.from_match(m) for m in _compile(pattern, flags).finditer(string)]


def _compile(pattern: Pattern, flags: int) -> "re.Pattern[str]":
    if isinstance(pattern, re.Pattern):
        if flags:
            raise ValueError("cannot pass flags together with a compiled pattern")
        return pattern
    return re.compile(pattern, flags)
