from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from itertools import tee

from .types import *
from .sources import ProducerSource, GeneratorSource, as_source

# --- operator groups ---
from .extensions.core import _CoreOperations
from .extensions.terminal import _TerminalOperations, TerminalAccessor
from .extensions.stats import _NumericOperations

logger = logging.getLogger(__name__)

# --- abstract base class ---

class ICollect(ABC, Generic[K, V]):
    @abstractmethod
    def _take_producer(self) -> Iterator[Tuple[K, V]]:
        """hand over the underlying pair iterator"""
        pass

# --- base collection implementation ---

class _BaseCollect(ICollect[K, V]):
    def __init__(self, data: Any):
        """init from a container, a generator callable, an iterator or another collection"""
        source = as_source(data)
        self._source_kind = type(source).__name__
        self._positional = source.positional
        self._producer: Iterator[Tuple[K, V]] = source.open()

    def _take_producer(self) -> Iterator[Tuple[K, V]]:
        """
        move the producer out of this instance. the cursor is never shared, so
        after this call the instance behaves as an exhausted, empty sequence.
        """
        producer, self._producer = self._producer, iter(())
        logger.debug(f"{self._source_kind} producer handed over")
        return producer

    def _derive(self, pairs_func: Callable[[], Iterator[Pair]], positional: Optional[bool] = None) -> 'Collect':
        """wrap a pair generator function in a new collection of the same type"""
        derived = type(self)(GeneratorSource(pairs_func, keyed=True))
        derived._positional = self._positional if positional is None else positional
        return derived

    def clone(self) -> 'Collect[K, V]':
        """
        fork the cursor. this instance and the clone continue independently from
        the current position; pairs pulled by only one side are buffered for the other.
        """
        mine, theirs = tee(self._producer)
        self._producer = mine
        logger.debug(f"forked {self._source_kind} cursor")
        return type(self)(ProducerSource(theirs, keyed=True, positional=self._positional))

    def __copy__(self) -> 'Collect[K, V]':
        return self.clone()

    def __deepcopy__(self, memo: Dict[int, Any]) -> 'Collect[K, V]':
        # values are shared, only the cursor position is duplicated
        return self.clone()

    def __iter__(self) -> Iterator[Tuple[K, V]]:
        return self._producer

    def __repr__(self) -> str:
        return f"{type(self).__name__}(source={self._source_kind}, positional={self._positional})"

# --- main collection class ---

class Collect(
    _BaseCollect[K, V],
    _CoreOperations[K, V],
    _TerminalOperations[K, V],
    _NumericOperations[K, V]
):
    """a lazy, single-pass sequence of (key, value) pairs with chainable operators."""
    def __init__(self, data: Any):
        super().__init__(data)
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)
