# FILE: forcing_core/distribution.py
from __future__ import annotations
from typing import List, Sequence


def split_evenly(total: int, parts: int) -> List[int]:
    """Floor share for every slot + remainder to the first slots.

    Works for negative totals too: the floor share rounds down and the
    (non-negative) remainder is still handed out from the front.
    """
    if parts <= 0:
        return []
    base = total // parts
    remainder = total % parts
    shares = [base] * parts
    for i in range(remainder):
        shares[i] += 1
    return shares


def spread_over(values: Sequence[int], total: int, slots: Sequence[int]) -> List[int]:
    """Add `total` to the given slot indices of `values` via split_evenly."""
    out = list(values)
    for idx, share in zip(slots, split_evenly(total, len(slots))):
        out[idx] += share
    return out


def check_evenness(values: Sequence[int]) -> bool:
    return not values or (max(values) - min(values) <= 1)
