from __future__ import annotations
from ..types import *
from ..traversal import each, reduce


def extend(target: MutableMapping[K, V], *sources: Collection[V]) -> MutableMapping[K, V]:
    """
    copy every entry of each source into target, in argument order.
    later sources win on key collisions. mutates and returns target.
    """
    def merge(result, source):
        def assign(value, key):
            result[key] = value
        each(source, assign)
        return result

    return reduce(sources, merge, target)


def defaults(target: MutableMapping[K, V], *sources: Collection[V]) -> MutableMapping[K, V]:
    """
    fill in keys that target does not have yet, in argument order.
    existing keys are never overwritten, so the first source to fill a gap wins.
    mutates and returns target.
    """
    def merge(result, source):
        def fill(value, key):
            if key not in result: result[key] = value
        each(source, fill)
        return result

    return reduce(sources, merge, target)
