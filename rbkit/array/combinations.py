from __future__ import annotations
from math import comb
from typing import Any, Iterable, Iterator, List, Optional, Tuple

from rbkit.array.combinations_conf import CombinationConfig
from rbkit.errors import InvalidArityError


def _resolve_arity(k: int, cfg: CombinationConfig) -> int:
    if k >= 0:
        return k
    if cfg.negative_arity == "raise":
        raise InvalidArityError(f"k must be >= 0, got {k}")
    return 0


class LazyCombinations:
    """
    Lazily enumerates the k-combinations of `data` in lexicographic order of
    the index tuples. With repeated=True the index tuples are non-decreasing
    instead of strictly increasing (multicombinations).

    Edge cases:
      - k == 0              -> nothing
      - k > len(data)       -> a single empty tuple (cfg.oversized_arity)
      - repeated, empty src -> nothing
    """

    def __init__(self, data: Iterable[Any], k: int, repeated: bool = False,
                 cfg: Optional[CombinationConfig] = None):
        self.cfg = cfg if cfg is not None else CombinationConfig()
        self.cfg.validate()
        self.data: List[Any] = list(data)
        self.k: int = _resolve_arity(k, self.cfg)
        self.repeated: bool = repeated

    def __len__(self) -> int:
        return count_combinations(len(self.data), self.k, repeated=self.repeated, cfg=self.cfg)

    def __iter__(self) -> Iterator[Tuple[Any, ...]]:
        k = self.k
        arr = self.data
        m = len(arr)

        if k == 0:
            return
        if not self.repeated and k > m:
            if self.cfg.oversized_arity == "single_empty":
                yield ()
            return
        if m == 0:
            return

        r = [0] * k if self.repeated else list(range(k))

        yield tuple(arr[i] for i in r)

        while True:
            i = k - 1
            while i >= 0 and r[i] == self._last_index(i, m):
                i -= 1
            if i < 0:
                break
            r[i] += 1
            for j in range(i + 1, k):
                r[j] = r[j - 1] if self.repeated else r[j - 1] + 1
            yield tuple(arr[i] for i in r)

    def _last_index(self, pos: int, m: int) -> int:
        # highest index position `pos` may take while the suffix still fits
        if self.repeated:
            return m - 1
        return pos + (m - self.k)


def count_combinations(n: int, k: int, repeated: bool = False,
                       cfg: Optional[CombinationConfig] = None) -> int:
    cfg = cfg if cfg is not None else CombinationConfig()
    cfg.validate()
    k = _resolve_arity(k, cfg)
    if k == 0:
        return 0
    if repeated:
        return comb(n + k - 1, k)
    if k > n:
        return 1 if cfg.oversized_arity == "single_empty" else 0
    return comb(n, k)


def combinations(source: Iterable[Any], k: int,
                 cfg: Optional[CombinationConfig] = None) -> List[Tuple[Any, ...]]:
    return list(LazyCombinations(source, k, repeated=False, cfg=cfg))


def combinations_with_repetition(source: Iterable[Any], k: int,
                                 cfg: Optional[CombinationConfig] = None) -> List[Tuple[Any, ...]]:
    return list(LazyCombinations(source, k, repeated=True, cfg=cfg))
