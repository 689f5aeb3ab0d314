from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple
)

import numpy as np

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Key = Union[str, int, float, bool]
Pair = Tuple[Any, Any]

# callbacks receive the value first, then its key
Predicate = Callable[[V, K], Any]
Transform = Callable[[V, K], U]
Combiner = Callable[[U, V], U]

Number = Union[int, float]

_SCALAR_KEY_TYPES = (str, int, float, np.integer)  # bool is an int
_NUMERIC_TYPES = (int, float, np.integer, np.floating)


def is_scalar_key(key: Any) -> bool:
    """true for keys usable as a pair key: str, int (numpy integers included), bool or float"""
    return isinstance(key, _SCALAR_KEY_TYPES)


def is_numeric(value: Any) -> bool:
    """true for integers and floats, numpy scalars included. bools are not numbers here."""
    return isinstance(value, _NUMERIC_TYPES) and not isinstance(value, (bool, np.bool_))


def is_index_key(key: Any) -> bool:
    """true for integer keys that take part in positional numbering"""
    return isinstance(key, (int, np.integer)) and not isinstance(key, (bool, np.bool_))


def strict_equals(left: Any, right: Any) -> bool:
    """same type and equal value, so 1, 1.0 and True never match each other"""
    return type(left) is type(right) and left == right


def loose_equals(left: Any, right: Any) -> bool:
    return left == right
