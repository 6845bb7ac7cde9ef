from __future__ import annotations
import inspect
from collections.abc import Mapping as MappingABC, Sequence as SequenceABC, Iterable as IterableABC
from functools import singledispatch
from typing import NamedTuple

import numpy as np
import pandas as pd
from .types import *


class _Traversal(NamedTuple):
    shape: Shape
    source: Any
    entries: Iterable[Tuple[Any, Any]]


# --- shape dispatch ---

@singledispatch
def _traverse(collection) -> _Traversal:
    raise TypeError(f"'{type(collection).__name__}' object is not a collection")


@_traverse.register(MappingABC)
def _(collection):
    # snapshot items so callbacks may write back into the mapping while we walk it
    return _Traversal(Shape.KEYED, collection, list(collection.items()))


@_traverse.register(pd.Series)
@_traverse.register(pd.DataFrame)
def _(collection):
    # series: index label -> value, dataframe: column label -> column series
    return _Traversal(Shape.KEYED, collection, list(collection.items()))


@_traverse.register(SequenceABC)
def _(collection):
    return _Traversal(Shape.SEQUENCE, collection, enumerate(collection))


@_traverse.register(np.ndarray)
def _(collection):
    # walk the first axis as native python values (rows become lists)
    return _Traversal(Shape.SEQUENCE, collection, enumerate(collection.tolist()))


@_traverse.register(IterableABC)
def _(collection):
    # sets, generators, dict views: materialize once, then treat positionally
    materialized = list(collection)
    return _Traversal(Shape.SEQUENCE, materialized, enumerate(materialized))


def shape_of(collection: Collection[T]) -> Shape:
    """
    resolve which shape a collection is traversed as.
    one-shot iterators are consumed by this call.
    """
    return _traverse(collection).shape


# --- property lookup ---

@singledispatch
def property_of(element: Any, name: Any) -> Any:
    """read a named property of an element, or None when it has none"""
    return getattr(element, name, None) if isinstance(name, str) else None


@property_of.register(MappingABC)
@property_of.register(pd.Series)
def _(element, name):
    return element.get(name)


@property_of.register(SequenceABC)
@property_of.register(np.ndarray)
def _(element, name):
    if isinstance(name, str):
        return getattr(element, name, None)
    if isinstance(name, int) and 0 <= name < len(element):
        value = element[name]
        return value.tolist() if isinstance(value, (np.ndarray, np.generic)) else value
    return None


# --- callbacks ---

def adapt_callback(fn: Callable[..., U], max_args: int, min_args: int = 1) -> Callable[..., U]:
    """
    trims the arguments passed to fn down to what its signature accepts, so a
    one-parameter lambda works where (value, key, collection) is supplied.
    callables without an inspectable signature receive min_args arguments.
    """
    try:
        parameters = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        accepted = min_args
    else:
        accepted = 0
        for parameter in parameters:
            if parameter.kind is parameter.VAR_POSITIONAL:
                return fn
            if parameter.kind in (parameter.POSITIONAL_ONLY, parameter.POSITIONAL_OR_KEYWORD):
                accepted += 1

    if accepted >= max_args:
        return fn
    return lambda *args: fn(*args[:accepted])


# --- primitives ---

def each(collection: Collection[T], iterator: Iteratee) -> None:
    """
    call iterator(value, index_or_key, collection) for every element.
    sequences are walked by ascending position, keyed collections in their own
    key order. anything that is not a collection raises TypeError.
    """
    traversal = _traverse(collection)
    call = adapt_callback(iterator, 3)
    for key, value in traversal.entries:
        call(value, key, traversal.source)


def reduce(collection: Collection[T], iterator: Accumulator[U], initial: Any = MISSING) -> Optional[U]:
    """
    fold a collection into one value.

    when initial is supplied (None counts as supplied) it seeds the
    accumulator; otherwise the first element does and folding starts at the
    second. an empty collection gives back the seed, or None without one.
    """
    call = adapt_callback(iterator, 4, min_args=2)
    accumulator = initial
    seeded = initial is not MISSING

    def fold(value, key, source):
        nonlocal accumulator, seeded
        if not seeded:
            accumulator, seeded = value, True
            return
        accumulator = call(accumulator, value, key, source)

    each(collection, fold)
    return None if accumulator is MISSING else accumulator
