from __future__ import annotations
from ..types import *
from .core import map, select
from .terminal import any, contains, every


def uniq(sequence: Collection[T]) -> List[T]:
    """return distinct elements (strict equality). preserves order of first appearance."""
    # (type, value) keeps 1, 1.0 and True apart in the hashed lookup
    seen = set()
    unhashable = []

    def first_appearance(value):
        try:
            marker = (type(value), value)
            if marker in seen:
                return False
            seen.add(marker)
            return True
        except TypeError:
            # lists, dicts and friends fall back to a linear scan
            if contains(unhashable, value):
                return False
            unhashable.append(value)
            return True

    return select(map(sequence, lambda x: x), first_appearance)


def _materialize(sequences: Tuple[Collection[T], ...]) -> List[List[T]]:
    return map(sequences, lambda sequence: map(sequence, lambda x: x))


def intersection(sequence: Collection[T], *others: Collection[T]) -> List[T]:
    """
    elements of the first sequence found in every other sequence.
    keeps the first sequence's order and its duplicates.
    """
    candidates = _materialize(others)
    return select(sequence, lambda value: every(candidates, lambda other: contains(other, value)))


def difference(sequence: Collection[T], *others: Collection[T]) -> List[T]:
    """elements of the first sequence found in none of the other sequences"""
    candidates = _materialize(others)
    return select(sequence, lambda value: not any(candidates, lambda other: contains(other, value)))
