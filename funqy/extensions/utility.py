from __future__ import annotations
import numpy as np
from ..types import *
from ..traversal import reduce
from .core import map, sort_by


def _is_nested(item: Any) -> bool:
    # strings, bytes and mappings are leaves, never expanded
    if isinstance(item, np.ndarray):
        return item.ndim > 0
    return isinstance(item, (list, tuple))


def _children(item: Any) -> List[Any]:
    return item.tolist() if isinstance(item, np.ndarray) else list(item)


def flatten(nested: Collection[Any]) -> List[Any]:
    """flatten nested lists/tuples/arrays completely, at any depth"""
    def expand(result, item):
        if not _is_nested(item):
            result.append(item)
            return result
        # an explicit stack keeps deep nesting off the call stack
        stack = [iter(_children(item))]
        while stack:
            child = next(stack[-1], MISSING)
            if child is MISSING:
                stack.pop()
            elif _is_nested(child):
                stack.append(iter(_children(child)))
            else:
                result.append(child)
        return result

    return reduce(nested, expand, [])


def shuffle(sequence: Collection[T], random_state: Optional[int] = None) -> List[T]:
    """
    return a shuffled copy; the input is left untouched.
    each element draws one random sort key, which gives a uniform permutation.
    pass random_state for a reproducible order.
    """
    rng = np.random.default_rng(random_state)
    return sort_by(map(sequence, lambda x: x), lambda _: rng.random())
