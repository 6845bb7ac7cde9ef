from __future__ import annotations
from functools import cmp_to_key
from ..types import *
from ..traversal import adapt_callback, property_of, reduce


def map(collection: Optional[Collection[T]], selector: Selector[U]) -> List[U]:
    """project each element to a new form. None maps to an empty list."""
    if collection is None:
        return []
    call = adapt_callback(selector, 3)

    def project(result, value, key, source):
        result.append(call(value, key, source))
        return result

    return reduce(collection, project, [])


def pluck(collection: Optional[Collection[T]], name: Any) -> List[Any]:
    """extract one property from every element (None where it is missing)"""
    return map(collection, lambda element: property_of(element, name))


def select(collection: Collection[T], predicate: Predicate) -> List[T]:
    """keep elements for which predicate(value, index, collection) is truthy"""
    call = adapt_callback(predicate, 3)

    def keep(result, value, key, source):
        if call(value, key, source): result.append(value)
        return result

    return reduce(collection, keep, [])


def reject(collection: Collection[T], predicate: Predicate) -> List[T]:
    """drop elements for which predicate is truthy; the complement of select"""
    call = adapt_callback(predicate, 3)

    def keep(result, value, key, source):
        if not call(value, key, source): result.append(value)
        return result

    return reduce(collection, keep, [])


def first(sequence: Optional[Collection[T]], n: Optional[int] = None) -> Optional[List[T]]:
    """
    the first n elements as a new list. without n, a one-element list.
    None gives None, n < 1 gives [], n past the end clamps.
    """
    if sequence is None:
        return None
    if n is None:
        n = 1
    if n < 1:
        return []
    return map(sequence, lambda x: x)[:n]


def last(sequence: Optional[Collection[T]], n: Optional[int] = None) -> Optional[List[T]]:
    """the last n elements as a new list, with the same edge cases as first()"""
    if sequence is None:
        return None
    if n is None:
        n = 1
    if n < 1:
        return []
    return map(sequence, lambda x: x)[-n:]


def sort_by(sequence: List[T], key: Union[str, KeySelector[T, K]]) -> List[T]:
    """
    sort a list IN PLACE by a key and return the same list.
    a string key names a property of each element, anything else is called on
    each element. equal keys may come out in any order, and keys that cannot be
    compared with each other (None against a number) count as equal.
    """
    if not isinstance(sequence, list):
        raise TypeError(f"sort_by sorts in place and needs a list, got '{type(sequence).__name__}'")
    selector = (lambda element: property_of(element, key)) if isinstance(key, str) else key
    # one key per element, computed up front
    keyed = [(selector(element), element) for element in sequence]
    keyed.sort(key=cmp_to_key(lambda a, b: _compare(a[0], b[0])))
    sequence[:] = [element for _, element in keyed]
    return sequence


def _compare(a: Any, b: Any) -> int:
    """three-way comparison: 1 when a sorts after b, -1 before, 0 otherwise"""
    try:
        if a > b: return 1
        if a < b: return -1
    except TypeError:
        pass
    return 0
