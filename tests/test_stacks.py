import io

import pytest

from pushswap.stacks import Node, Stacks, find_max, find_min, is_sorted


def test_from_values_fills_a_only():
    stacks = Stacks.from_values([3, 1, 2])
    assert stacks.values("a") == [3, 1, 2]
    assert stacks.values("b") == []


def test_values_rejects_unknown_name():
    stacks = Stacks.from_values([1])
    with pytest.raises(ValueError):
        stacks.values("c")


def test_sa_swaps_top_two():
    stacks = Stacks.from_values([5, 7, 9])
    stacks.sa()
    assert stacks.values("a") == [7, 5, 9]
    assert stacks.operations == ["sa"]


def test_sa_on_single_element_does_nothing():
    stacks = Stacks.from_values([5])
    stacks.sa()
    assert stacks.values("a") == [5]
    assert stacks.operations == []


def test_pb_then_pa_restores():
    stacks = Stacks.from_values([4, 8, 6])
    stacks.pb()
    assert stacks.values("b") == [4]
    assert stacks.values("a") == [8, 6]
    stacks.pa()
    assert stacks.values("a") == [4, 8, 6]
    assert stacks.values("b") == []
    assert stacks.operations == ["pb", "pa"]


def test_pa_with_empty_b_does_nothing():
    stacks = Stacks.from_values([1, 2])
    stacks.pa()
    assert stacks.values("a") == [1, 2]
    assert stacks.operations == []


def test_ra_moves_top_to_bottom_and_rra_undoes():
    stacks = Stacks.from_values([1, 2, 3, 4])
    stacks.ra()
    assert stacks.values("a") == [2, 3, 4, 1]
    stacks.rra()
    assert stacks.values("a") == [1, 2, 3, 4]
    assert stacks.operations == ["ra", "rra"]


def test_rb_and_rrb_round_trip():
    stacks = Stacks.from_values([1, 2, 3])
    stacks.pb()
    stacks.pb()
    stacks.pb()
    before = stacks.values("b")
    stacks.rb()
    assert stacks.values("b") == before[1:] + before[:1]
    stacks.rrb()
    assert stacks.values("b") == before


def test_rr_rotates_both():
    stacks = Stacks.from_values([1, 2, 3, 4, 5])
    stacks.pb()
    stacks.pb()
    a_before = stacks.values("a")
    b_before = stacks.values("b")
    stacks.rr()
    assert stacks.values("a") == a_before[1:] + a_before[:1]
    assert stacks.values("b") == b_before[1:] + b_before[:1]
    assert stacks.operations[-1] == "rr"


def test_rr_with_both_short_does_nothing():
    stacks = Stacks.from_values([1])
    stacks.rr()
    assert stacks.operations == []


def test_rrr_rotates_both():
    stacks = Stacks.from_values([1, 2, 3, 4, 5, 6])
    for _ in range(3):
        stacks.pb()
    a_before = stacks.values("a")
    b_before = stacks.values("b")
    stacks.rrr()
    assert stacks.values("a") == a_before[-1:] + a_before[:-1]
    assert stacks.values("b") == b_before[-1:] + b_before[:-1]
    assert stacks.operations[-1] == "rrr"


def test_rrr_with_short_b_rotates_a_silently():
    stacks = Stacks.from_values([1, 2, 3])
    stacks.rrr()
    assert stacks.values("a") == [3, 1, 2]
    assert stacks.operations == []


def test_operations_written_to_stream():
    out = io.StringIO()
    stacks = Stacks.from_values([2, 1, 3])
    stacks.out = out
    stacks.sa()
    stacks.ra()
    assert out.getvalue() == "sa\nra\n"


def test_is_sorted():
    assert is_sorted([Node(1), Node(2), Node(3)]) is True
    assert is_sorted([Node(1), Node(1)]) is False
    assert is_sorted([Node(2), Node(1)]) is False
    assert is_sorted([]) is False
    assert is_sorted([Node(7)]) is True


def test_find_min_and_max():
    nodes = [Node(4), Node(-2), Node(9), Node(0)]
    assert find_min(nodes) is nodes[1]
    assert find_max(nodes) is nodes[2]
    assert find_min([]) is None
    assert find_max([]) is None


def test_find_min_prefers_first_on_tie():
    nodes = [Node(3), Node(1), Node(1)]
    assert find_min(nodes) is nodes[1]


def test_operations_preserve_multiset():
    stacks = Stacks.from_values([9, 3, 7, 1, 5])
    for op in (stacks.pb, stacks.ra, stacks.sa, stacks.pb, stacks.rr,
               stacks.rrr, stacks.rrb, stacks.pa, stacks.rra):
        op()
    assert sorted(stacks.values("a") + stacks.values("b")) == [1, 3, 5, 7, 9]