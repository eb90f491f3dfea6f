import functools

from hypothesis import given
from hypothesis import strategies as st

from scenic_local.chain import merge, merge_degenerated, mergesort


def by_key(a, b):
    return (a[0] > b[0]) - (a[0] < b[0])


pairs = st.lists(st.tuples(st.integers(-5, 5), st.integers()), max_size=200)


def test_merge_ties_prefer_first():
    first = [(1, "a"), (2, "a")]
    second = [(1, "b"), (2, "b")]
    assert merge(first, second, by_key) == [(1, "a"), (1, "b"), (2, "a"), (2, "b")]


def test_merge_degenerated_ordered_inputs():
    assert merge_degenerated([(1, 0), (2, 0)], [(3, 0)], by_key) == [(1, 0), (2, 0), (3, 0)]
    assert merge_degenerated([(3, 0)], [(1, 0), (2, 0)], by_key) == [(1, 0), (2, 0), (3, 0)]


def test_merge_degenerated_equal_stays_stable():
    assert merge_degenerated([(1, "a")], [(1, "b")], by_key) == [(1, "a"), (1, "b")]


@given(pairs, pairs)
def test_merge_matches_stable_sort(a, b):
    a = sorted(a, key=lambda p: p[0])
    b = sorted(b, key=lambda p: p[0])
    expected = sorted(a + b, key=lambda p: p[0])
    assert merge(a, b, by_key) == expected
    assert merge_degenerated(a, b, by_key) == expected


def test_mergesort_empty():
    assert mergesort([], by_key) == []


def test_mergesort_single():
    assert mergesort([(4, 1)], by_key) == [(4, 1)]


@given(pairs)
def test_mergesort_is_stable_sort(items):
    assert mergesort(items, by_key) == sorted(items, key=lambda p: p[0])


@given(pairs)
def test_mergesort_accepts_iterator(items):
    assert mergesort(iter(items), by_key) == sorted(items, key=lambda p: p[0])


@given(st.lists(st.integers(), max_size=300))
def test_mergesort_integers_with_reverse_cmp(values):
    def desc(a, b):
        return (b > a) - (b < a)

    assert mergesort(values, desc) == sorted(values, key=functools.cmp_to_key(desc))