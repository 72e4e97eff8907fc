from __future__ import annotations
from dataclasses import dataclass
from typing import Literal

NEGATIVE_ARITY_POLICIES = ("empty", "raise")
OVERSIZED_ARITY_POLICIES = ("single_empty", "empty")


@dataclass
class CombinationConfig:
    negative_arity: Literal["empty", "raise"] = "raise"  # "empty" -> same as k == 0
    oversized_arity: Literal["single_empty", "empty"] = "single_empty"  # k > n without repetition

    def validate(self) -> None:
        if self.negative_arity not in NEGATIVE_ARITY_POLICIES:
            raise ValueError(f"negative_arity must be one of {NEGATIVE_ARITY_POLICIES}, got {self.negative_arity!r}")
        if self.oversized_arity not in OVERSIZED_ARITY_POLICIES:
            raise ValueError(f"oversized_arity must be one of {OVERSIZED_ARITY_POLICIES}, got {self.oversized_arity!r}")
