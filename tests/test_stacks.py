import io

import pytest

from pushswap.stacks import Stacks


def make(values=()):
    out = io.StringIO()
    return Stacks(values, out), out


def test_initial_state():
    stacks, out = make([3, 1, 2])
    assert list(stacks.a) == [3, 1, 2]
    assert list(stacks.b) == []
    assert out.getvalue() == ""


def test_sa_swaps_and_prints():
    stacks, out = make([2, 1, 3])
    stacks.sa()
    assert list(stacks.a) == [1, 2, 3]
    assert out.getvalue() == "sa\n"


def test_sa_on_single_is_silent():
    stacks, out = make([5])
    stacks.sa()
    assert list(stacks.a) == [5]
    assert out.getvalue() == ""
    assert stacks.operations == []


def test_sb_on_empty_is_silent():
    stacks, out = make([1, 2])
    stacks.sb()
    assert out.getvalue() == ""


def test_ss_always_prints():
    stacks, out = make([1])
    stacks.ss()
    assert list(stacks.a) == [1]
    assert out.getvalue() == "ss\n"


def test_pb_then_pa_restores():
    stacks, out = make([4, 5, 6])
    stacks.pb()
    assert list(stacks.a) == [5, 6]
    assert list(stacks.b) == [4]
    stacks.pa()
    assert list(stacks.a) == [4, 5, 6]
    assert list(stacks.b) == []
    assert out.getvalue() == "pb\npa\n"


def test_pa_with_empty_b_is_silent():
    stacks, out = make([1, 2])
    stacks.pa()
    assert list(stacks.a) == [1, 2]
    assert out.getvalue() == ""


def test_pb_with_empty_a_is_silent():
    stacks, out = make()
    stacks.pb()
    assert stacks.operations == []


def test_ra_moves_top_to_bottom():
    stacks, out = make([1, 2, 3])
    stacks.ra()
    assert list(stacks.a) == [2, 3, 1]
    assert out.getvalue() == "ra\n"


def test_rra_moves_bottom_to_top():
    stacks, _ = make([1, 2, 3])
    stacks.rra()
    assert list(stacks.a) == [3, 1, 2]


def test_rotations_on_empty_still_print():
    stacks, out = make()
    stacks.ra()
    stacks.rrb()
    assert list(stacks.a) == []
    assert out.getvalue() == "ra\nrrb\n"


@pytest.mark.parametrize("values", [[1], [1, 2], [9, 8, 7, 6, 5]])
def test_rotate_round_trips(values):
    stacks, _ = make(values)
    for _ in values:
        stacks.pb()
    stacks.pa()
    stacks.ra()
    stacks.rra()
    stacks.rb()
    stacks.rrb()
    stacks.rr()
    stacks.rrr()
    assert list(stacks.a) + list(stacks.b) == [values[-1]] + list(reversed(values[:-1]))


def test_operations_preserve_multiset():
    stacks, _ = make([5, 3, 8, 1])
    for op in (stacks.pb, stacks.pb, stacks.ss, stacks.rr, stacks.rrr, stacks.pa):
        op()
    assert sorted(list(stacks.a) + list(stacks.b)) == [1, 3, 5, 8]


def test_operations_log_matches_output():
    stacks, out = make([3, 2, 1])
    stacks.pb()
    stacks.sa()
    stacks.rb()
    stacks.rrr()
    assert out.getvalue() == "".join(name + "\n" for name in stacks.operations)
    assert stacks.operations == ["pb", "sa", "rb", "rrr"]


def test_default_output_is_stdout(capsys):
    stacks = Stacks([2, 1])
    stacks.sa()
    assert capsys.readouterr().out == "sa\n"