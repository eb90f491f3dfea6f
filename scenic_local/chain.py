"""Stable merging and merge sort of sequences with a three-way comparator."""

from collections.abc import Callable, Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")

Comparator = Callable[[Any, Any], int]


def merge(first: Sequence[T], second: Sequence[T], cmp: Comparator) -> list[T]:
    """Merge two sorted sequences into a new sorted list.

    On ties, elements of ``first`` come before elements of ``second``.
    """
    result: list[T] = []
    first_iter = iter(first)
    second_iter = iter(second)
    sentinel = object()
    a = next(first_iter, sentinel)
    b = next(second_iter, sentinel)
    while a is not sentinel and b is not sentinel:
        if cmp(a, b) > 0:
            result.append(b)
            b = next(second_iter, sentinel)
        else:
            result.append(a)
            a = next(first_iter, sentinel)
    if a is not sentinel:
        result.append(a)
        result.extend(first_iter)
    if b is not sentinel:
        result.append(b)
        result.extend(second_iter)
    return result


def merge_degenerated(
    first: Sequence[T], second: Sequence[T], cmp: Comparator
) -> list[T]:
    """Merge like :func:`merge`, short-cutting already ordered inputs."""
    if not first:
        return list(second)
    if not second:
        return list(first)
    if cmp(first[-1], second[0]) <= 0:
        return [*first, *second]
    # strict comparison keeps the merge stable
    if cmp(second[-1], first[0]) < 0:
        return [*second, *first]
    return merge(first, second, cmp)


def mergesort(items: Iterable[T], cmp: Comparator) -> list[T]:
    """Return a stably sorted list of ``items`` using power-of-two buckets."""
    buckets: list[list[T] | None] = []
    counter = 0
    for item in items:
        carry: list[T] = [item]
        i = 0
        mask = counter
        while mask & 1:
            bucket = buckets[i]
            assert bucket is not None
            carry = merge_degenerated(bucket, carry, cmp)
            buckets[i] = None
            mask >>= 1
            i += 1
        if i == len(buckets):
            buckets.append(carry)
        else:
            buckets[i] = carry
        counter += 1

    if counter == 0:
        return []

    result: list[T] | None = None
    # higher buckets hold earlier elements, so they go first in each merge
    for bucket in buckets:
        if bucket is None:
            continue
        result = bucket if result is None else merge_degenerated(bucket, result, cmp)
    assert result is not None
    return result