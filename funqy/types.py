from enum import Enum

import numpy as np
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Mapping, MutableMapping, Sequence
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

# callbacks receive (value, index_or_key, collection) but may declare fewer parameters
Iteratee = Callable[..., Any]
Predicate = Callable[..., Any]
Selector = Callable[..., U]
Accumulator = Callable[..., U]
KeySelector = Callable[[T], K]

Collection = Union[Sequence[T], Mapping[Any, T], Iterable[T]]


class Shape(Enum):
    """the two collection shapes every operation understands"""
    SEQUENCE = 'sequence'
    KEYED = 'keyed'


class _Missing:
    """marks an optional argument that was not supplied (distinct from None)"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool: return False

    def __repr__(self) -> str: return "MISSING"


MISSING = _Missing()


def strictly_equal(a: Any, b: Any) -> bool:
    """
    equality without coercion: 1, 1.0 and True are three different values.
    containers of the same type compare by value, not identity, so [1, 2]
    equals a separately built [1, 2].
    """
    if a is b:
        return True
    if type(a) is not type(b):
        return False
    if isinstance(a, np.ndarray):
        # elementwise == would give an array, not a truth value
        return a.shape == b.shape and bool((a == b).all())
    return bool(a == b)
