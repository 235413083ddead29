"""Sorting strategies that solve the puzzle using the stack operations."""

from __future__ import annotations

from itertools import pairwise
from typing import Iterable, Sequence

from pushswap.parsing import INT_MAX, INT_MIN
from pushswap.stacks import Stacks


def is_sorted(values: Iterable[int]) -> bool:
    """True when the values never decrease from first to last."""
    return all(a <= b for a, b in pairwise(values))


def next_above(values: Iterable[int], floor: int) -> int:
    """Smallest value strictly above ``floor``; INT_MAX when there is none."""
    return min((v for v in values if floor < v < INT_MAX), default=INT_MAX)


def next_below(values: Iterable[int], ceiling: int) -> int:
    """Largest value strictly below ``ceiling``; INT_MIN when there is none."""
    return max((v for v in values if INT_MIN < v < ceiling), default=INT_MIN)


def rank_indices(values: Sequence[int]) -> list[int]:
    """The position each value would take in sorted order."""
    items = list(values)
    ranks = [0] * len(items)
    for rank, position in enumerate(sorted(range(len(items)), key=items.__getitem__)):
        ranks[position] = rank
    return ranks


def sort_three(stacks: Stacks) -> None:
    """Sort stack ``a`` holding at most three values, using only ``ra`` and ``sa``."""
    a = stacks.a
    while not is_sorted(a):
        if len(a) == 2:
            stacks.sa()
            continue
        if len(a) != 3:
            raise ValueError("sort_three needs at most three values")
        top, second, third = a
        if (top > second and top > third) or (top < second and top > third):
            stacks.ra()
        else:
            stacks.sa()


def _bring_smallest_to_top(stacks: Stacks) -> None:
    smallest = min(stacks.a)
    while stacks.a[0] != smallest:
        stacks.ra()


def sort_four(stacks: Stacks) -> None:
    """Sort four values: park the smallest on ``b``, sort three, bring it back."""
    _bring_smallest_to_top(stacks)
    stacks.pb()
    sort_three(stacks)
    stacks.pa()


def sort_five(stacks: Stacks) -> None:
    """Sort five values: park the smallest on ``b``, sort four, bring it back."""
    _bring_smallest_to_top(stacks)
    stacks.pb()
    sort_four(stacks)
    sort_three(stacks)
    stacks.pa()
    stacks.pa()


def radix_sort(stacks: Stacks) -> None:
    """Binary radix sort of ``a`` on the ranks of its values, using ``b`` as scratch."""
    ranks = dict(zip(stacks.a, rank_indices(stacks.a)))
    shift = 0
    while not is_sorted(stacks.a):
        for _ in range(len(stacks.a)):
            if (ranks[stacks.a[0]] >> shift) & 1:
                stacks.ra()
            else:
                stacks.pb()
        while stacks.b:
            stacks.pa()
        shift += 1


def sort_stacks(stacks: Stacks, count: int) -> None:
    """Pick the strategy for ``count`` values and sort stack ``a``."""
    if count == 2:
        stacks.sa()
    elif count == 3:
        sort_three(stacks)
    elif count == 4:
        sort_four(stacks)
    elif count == 5:
        sort_five(stacks)
    elif count > 5:
        radix_sort(stacks)