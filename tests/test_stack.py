import io

import pytest

from pushswap.stack import OperationCounts, PushSwapError, Stacks


def quiet(values):
    return Stacks(values, show=False)


def test_initial_state():
    stacks = quiet([3, 1, 2])
    assert list(stacks.a) == [3, 1, 2]
    assert list(stacks.b) == []
    assert stacks.counts == OperationCounts()


def test_push_b_then_push_a_round_trip():
    stacks = quiet([5, 6, 7])
    stacks.push_b()
    assert list(stacks.a) == [6, 7]
    assert list(stacks.b) == [5]
    stacks.push_a()
    assert list(stacks.a) == [5, 6, 7]
    assert list(stacks.b) == []
    assert stacks.counts.pa == 1
    assert stacks.counts.pb == 1
    assert stacks.counts.all == 2


def test_push_from_empty_is_not_counted():
    stacks = quiet([])
    stacks.push_a()
    stacks.push_b()
    assert stacks.counts.all == 0
    assert list(stacks.a) == []


def test_swap_a_twice_is_identity():
    stacks = quiet([4, 8, 9])
    stacks.swap_a()
    assert list(stacks.a) == [8, 4, 9]
    stacks.swap_a()
    assert list(stacks.a) == [4, 8, 9]
    assert stacks.counts.sa == 2


def test_swap_single_element_not_counted():
    stacks = quiet([1])
    stacks.swap_a()
    stacks.swap_b()
    assert list(stacks.a) == [1]
    assert stacks.counts.all == 0


def test_rotate_and_reverse_rotate_are_inverse():
    values = [10, 20, 30, 40]
    stacks = quiet(values)
    stacks.rotate_a()
    assert list(stacks.a) == [20, 30, 40, 10]
    stacks.reverse_rotate_a()
    assert list(stacks.a) == values
    assert stacks.counts.ra == 1
    assert stacks.counts.rra == 1


def test_full_rotation_returns_to_start():
    values = [1, 2, 3, 4, 5]
    stacks = quiet(values)
    for _ in values:
        stacks.rotate_a()
    assert list(stacks.a) == values
    assert stacks.counts.all == len(values)


def test_rotate_b_and_reverse_rotate_b():
    stacks = quiet([1, 2, 3])
    stacks.push_b()
    stacks.push_b()
    assert list(stacks.b) == [2, 1]
    stacks.rotate_b()
    assert list(stacks.b) == [1, 2]
    stacks.reverse_rotate_b()
    assert list(stacks.b) == [2, 1]


def test_combined_operations_count_even_without_effect():
    stacks = quiet([])
    stacks.swap_both()
    stacks.rotate_both()
    stacks.reverse_rotate_both()
    assert stacks.counts.ss == 1
    assert stacks.counts.rr == 1
    assert stacks.counts.rrr == 1
    assert stacks.counts.all == 3


def test_rotate_both_moves_both_stacks():
    stacks = quiet([1, 2, 3, 4])
    stacks.push_b()
    stacks.push_b()
    stacks.rotate_both()
    assert list(stacks.a) == [4, 3]
    assert list(stacks.b) == [1, 2]


def test_output_is_written_when_shown():
    buffer = io.StringIO()
    stacks = Stacks([2, 1], show=True, output=buffer)
    stacks.swap_a()
    stacks.push_b()
    stacks.push_a()
    assert buffer.getvalue() == "sa\npb\npa\n"


def test_no_output_when_hidden():
    buffer = io.StringIO()
    stacks = Stacks([2, 1], show=False, output=buffer)
    stacks.swap_a()
    assert buffer.getvalue() == ""
    assert list(stacks.a) == [1, 2]


def test_skipped_operation_writes_nothing():
    buffer = io.StringIO()
    stacks = Stacks([7], show=True, output=buffer)
    stacks.rotate_a()
    assert buffer.getvalue() == ""


@pytest.mark.parametrize("name", ["", "pc", "pa\n", "RA", "rrrr"])
def test_apply_unknown_raises(name):
    stacks = quiet([1, 2])
    with pytest.raises(PushSwapError):
        stacks.apply(name)


def test_counts_as_dict_tracks_all():
    stacks = quiet([1, 2, 3])
    stacks.apply("ra")
    stacks.apply("pb")
    counts = stacks.counts.as_dict()
    assert counts["all"] == 2
    assert counts["ra"] == 1
    assert counts["pb"] == 1
    assert sum(v for k, v in counts.items() if k != "all") == counts["all"]