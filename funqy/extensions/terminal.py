from __future__ import annotations
from ..types import *
from ..traversal import adapt_callback, reduce


def _truthiness(predicate: Optional[Predicate]) -> Callable[..., bool]:
    """without a predicate an element is tested for its own truthiness"""
    if predicate is None:
        return lambda value, key, source: bool(value)
    call = adapt_callback(predicate, 3)
    return lambda value, key, source: bool(call(value, key, source))


def every(collection: Collection[T], predicate: Optional[Predicate] = None) -> bool:
    """check if all elements satisfy predicate. true for an empty collection."""
    test = _truthiness(predicate)
    return reduce(collection, lambda passed, value, key, source: test(value, key, source) and passed, True)


def any(collection: Collection[T], predicate: Optional[Predicate] = None) -> bool:
    """check if any element satisfies predicate. false for an empty collection."""
    test = _truthiness(predicate)
    return reduce(collection, lambda passed, value, key, source: test(value, key, source) or passed, False)


def contains(collection: Collection[T], target: Any) -> bool:
    """check if some element is strictly equal to target"""
    return reduce(collection, lambda found, value: strictly_equal(target, value) or found, False)
