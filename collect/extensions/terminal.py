from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from functools import reduce
from ..types import *
from ..config import resolve_strict

if typing.TYPE_CHECKING:
    from ..collection import Collect

_MISSING = object()


class _TerminalOperations(Generic[K, V]):
    def to_array(self: 'Collect[K, V]') -> Dict[K, V]:
        """drain into a dict. when keys repeat, the last pair wins."""
        return dict(self._producer)

    def size(self: 'Collect[K, V]') -> int:
        """drain and count the pairs, repeated keys included"""
        return sum(1 for _ in self._producer)

    def is_empty(self: 'Collect[K, V]') -> bool:
        """pulls at most one pair"""
        return next(self._producer, _MISSING) is _MISSING

    def is_not_empty(self: 'Collect[K, V]') -> bool:
        return not self.is_empty()

    def contains(self: 'Collect[K, V]', value: Any, strict: Optional[bool] = None) -> bool:
        """
        scan for value, stopping at the first match. strict compares type and value,
        loose uses ==. strict=None falls back to the configured default.
        """
        equals = strict_equals if resolve_strict(strict, 'strict_contains') else loose_equals
        return any(equals(current, value) for _, current in self._producer)

    def every(self: 'Collect[K, V]', predicate: Predicate[V, K]) -> bool:
        """true when predicate(value, key) holds for all pairs, and for no pairs"""
        return all(predicate(value, key) for key, value in self._producer)

    def some(self: 'Collect[K, V]', predicate: Predicate[V, K]) -> bool:
        """true when predicate(value, key) holds for at least one pair"""
        return any(predicate(value, key) for key, value in self._producer)

    def reduce(self: 'Collect[K, V]', combiner: Combiner[U, V], initial: Optional[U] = None) -> Optional[U]:
        """left fold over the values with combiner(accumulator, value)"""
        return reduce(combiner, (value for _, value in self._producer), initial)


class TerminalAccessor(Generic[K, V]):
    def __init__(self, collection_instance: 'Collect[K, V]'):
        self._collection = collection_instance

    def list(self) -> List[V]:
        """drain the values into a list"""
        return [value for _, value in self._collection._producer]

    def dict(self) -> Dict[K, V]:
        """convert to dictionary, last pair wins"""
        return self._collection.to_array()

    def pairs(self) -> List[Tuple[K, V]]:
        """drain into a list of (key, value) tuples, repeated keys kept"""
        return list(self._collection._producer)

    def array(self) -> np.ndarray:
        """convert the values to a numpy array"""
        return np.array(self.list())

    def series(self) -> pd.Series:
        """convert to a pandas series indexed by key, repeated keys kept"""
        pairs = self.pairs()
        keys = [key for key, _ in pairs]
        values = [value for _, value in pairs]
        # an empty series would otherwise default to float64
        return pd.Series(values, index=keys, dtype=None if pairs else object)

    def df(self) -> pd.DataFrame:
        """convert to a pandas dataframe with key and value columns"""
        return pd.DataFrame(self.pairs(), columns=['key', 'value'])
