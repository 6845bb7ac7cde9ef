from __future__ import annotations
from ..types import *
from ..factories import range
from .core import last, map, pluck


def zip(*sequences: Collection[Any]) -> List[List[Any]]:
    """
    group elements by position across sequences. the result is as long as the
    longest input; shorter inputs are padded with None.
    """
    if not sequences:
        return []
    columns = map(sequences, lambda sequence: map(sequence, lambda x: x))
    longest = last(sorted(map(columns, len)))[0]
    return map(range(longest), lambda position: pluck(columns, position))
