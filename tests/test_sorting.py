import io
import random
from itertools import permutations

import pytest

from pushswap.parsing import INT_MAX, INT_MIN
from pushswap.sorting import (
    is_sorted,
    next_above,
    next_below,
    radix_sort,
    rank_indices,
    sort_five,
    sort_four,
    sort_stacks,
    sort_three,
)
from pushswap.stacks import Stacks

_ALLOWED = {"sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"}


def _stacks(values):
    return Stacks(values, out=io.StringIO())


def _replay(values, operations):
    replayed = _stacks(values)
    for name in operations:
        getattr(replayed, name)()
    return replayed


def _check_solved(values, stacks):
    assert list(stacks.a) == sorted(values)
    assert not stacks.b
    assert set(stacks.operations) <= _ALLOWED
    assert list(_replay(values, stacks.operations).a) == sorted(values)
    assert stacks._out.getvalue() == "".join(op + "\n" for op in stacks.operations)


def test_is_sorted():
    assert is_sorted([])
    assert is_sorted([1, 2, 3])
    assert is_sorted([1, 1, 2])
    assert not is_sorted([2, 1])


def test_next_above_and_below():
    assert next_above([5, 1, 3], 1) == 3
    assert next_above([5, 1, 3], 5) == INT_MAX
    assert next_below([5, 1, 3], 5) == 3
    assert next_below([1], 1) == INT_MIN


def test_rank_indices_value():
    assert rank_indices([30, 10, 20]) == [2, 0, 1]


def test_rank_indices_is_permutation_preserving_order():
    values = random.Random(7).sample(range(-1000, 1000), 50)
    ranks = rank_indices(values)
    assert sorted(ranks) == list(range(len(values)))
    ordered = [v for _, v in sorted(zip(ranks, values))]
    assert ordered == sorted(values)


@pytest.mark.parametrize("values", list(permutations([1, 2, 3])))
def test_sort_three_all_orders(values):
    stacks = _stacks(values)
    sort_three(stacks)
    _check_solved(values, stacks)
    assert len(stacks.operations) <= 2


def test_sort_three_rejects_four_unsorted():
    with pytest.raises(ValueError):
        sort_three(_stacks([4, 3, 2, 1]))


@pytest.mark.parametrize("values", list(permutations([8, -2, 5, 0])))
def test_sort_four_all_orders(values):
    stacks = _stacks(values)
    sort_four(stacks)
    _check_solved(values, stacks)


@pytest.mark.parametrize("values", list(permutations([3, 1, 4, 5, 9])))
def test_sort_five_all_orders(values):
    stacks = _stacks(values)
    sort_five(stacks)
    _check_solved(values, stacks)


@pytest.mark.parametrize("seed", range(8))
def test_radix_sort_random(seed):
    rng = random.Random(seed)
    values = rng.sample(range(-500, 500), rng.randint(6, 120))
    stacks = _stacks(values)
    radix_sort(stacks)
    _check_solved(values, stacks)


def test_radix_sort_with_extremes():
    values = [INT_MAX, 0, INT_MIN, -1, 1, 42, -42]
    stacks = _stacks(values)
    radix_sort(stacks)
    _check_solved(values, stacks)


def test_radix_sort_already_sorted_does_nothing():
    stacks = _stacks(list(range(10)))
    radix_sort(stacks)
    assert stacks.operations == []


def test_sort_stacks_two():
    stacks = _stacks([2, 1])
    sort_stacks(stacks, 2)
    assert stacks.operations == ["sa"]
    assert list(stacks.a) == [1, 2]


def test_sort_stacks_three_swap_case():
    stacks = _stacks([2, 1, 3])
    sort_stacks(stacks, 3)
    assert stacks.operations == ["sa"]


@pytest.mark.parametrize("size", [3, 4, 5, 6, 30])
def test_sort_stacks_dispatch_sorts(size):
    values = list(range(size, 0, -1))
    stacks = _stacks(values)
    sort_stacks(stacks, size)
    _check_solved(values, stacks)