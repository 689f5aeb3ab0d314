from __future__ import annotations
import typing
import logging
from itertools import islice
from ..types import *
from ..errors import InvalidKey, InvalidRange, ContractViolation
from ..sources import iterable_source

if typing.TYPE_CHECKING:
    from ..collection import Collect

logger = logging.getLogger(__name__)


def _next_index(current: int, key: Any) -> int:
    """the positional index that follows key, never moving backwards"""
    if is_index_key(key):
        return max(current, int(key) + 1)
    return current


def _check_key(key: Any) -> None:
    if key is not None and not is_scalar_key(key):
        raise InvalidKey(f"element key of type {type(key).__name__} is not scalar.")


def _check_position(value: Any, name: str) -> None:
    if not is_index_key(value) or value < 0:
        raise InvalidRange(f"{name} must be a non-negative integer, got {value!r}.")


class _CoreOperations(Generic[K, V]):
    def append(self: 'Collect[K, V]', value: V, key: Optional[Key] = None) -> 'Collect[K, V]':
        """
        emit every pair, then (key, value). without a key the value gets the index
        after the largest integer key seen.
        """
        _check_key(key)
        upstream = self._take_producer()
        def append_pairs():
            next_index = 0
            for current_key, current_value in upstream:
                next_index = _next_index(next_index, current_key)
                yield current_key, current_value
            yield (next_index if key is None else key), value
        return self._derive(append_pairs, positional=self._positional and key is None)

    def prepend(self: 'Collect[K, V]', value: V, key: Optional[Key] = None) -> 'Collect[K, V]':
        """
        emit (key, value), then every pair. without a key the value gets index 0,
        which collides with a positional source's first key once materialized.
        """
        _check_key(key)
        upstream = self._take_producer()
        def prepend_pairs():
            yield (0 if key is None else key), value
            yield from upstream
        return self._derive(prepend_pairs, positional=self._positional and key is None)

    def concat(self: 'Collect[K, V]', items: Any) -> 'Collect[K, V]':
        """
        emit every pair, then the pairs of items. keyed items pass through as-is,
        collisions included; positional items continue this sequence's numbering.
        """
        source = iterable_source(items)
        upstream = self._take_producer()
        other = source.open()
        def concat_pairs():
            next_index = 0
            for key, value in upstream:
                next_index = _next_index(next_index, key)
                yield key, value
            if not source.positional:
                yield from other
                return
            for _, value in other:
                yield next_index, value
                next_index += 1
        return self._derive(concat_pairs, positional=self._positional and source.positional)

    def filter(self: 'Collect[K, V]', predicate: Predicate[V, K]) -> 'Collect[K, V]':
        """
        drop the pairs the predicate matches. note the polarity: a pair is kept
        when predicate(value, key) is falsy.
        """
        upstream = self._take_producer()
        def filter_pairs():
            for key, value in upstream:
                if not predicate(value, key):
                    yield key, value
        return self._derive(filter_pairs)

    def filter_numeric(self: 'Collect[K, V]') -> 'Collect[K, V]':
        """keep only int and float values, original keys preserved"""
        # filter() drops matches, so match the non-numeric values
        return self.filter(lambda value, key: not is_numeric(value))

    def map(self: 'Collect[K, V]', transform: Transform[V, K, U]) -> 'Collect[K, U]':
        """replace each value with transform(value, key)"""
        upstream = self._take_producer()
        def map_pairs():
            for key, value in upstream:
                yield key, transform(value, key)
        return self._derive(map_pairs)

    def flip(self: 'Collect[K, V]') -> 'Collect[V, K]':
        """swap keys and values"""
        upstream = self._take_producer()
        def flip_pairs():
            for key, value in upstream:
                yield value, key
        return self._derive(flip_pairs, positional=False)

    def keys(self: 'Collect[K, V]') -> 'Collect[int, K]':
        """the keys as values, re-indexed from 0"""
        upstream = self._take_producer()
        def key_pairs():
            for index, (key, _) in enumerate(upstream):
                yield index, key
        return self._derive(key_pairs, positional=True)

    def replace(self: 'Collect[K, V]', search: Any, replacement: Any, strict: bool = False) -> 'Collect[int, Any]':
        """
        swap values equal to search for replacement, re-indexing from 0.
        values are always compared strictly (same type and equal), whatever the
        strict flag says, so replace(1, ...) leaves 1.0 and True alone.
        """
        if not strict:
            logger.debug("replace compares strictly even when strict=False")
        upstream = self._take_producer()
        def replace_pairs():
            for index, (_, value) in enumerate(upstream):
                yield index, (replacement if strict_equals(value, search) else value)
        return self._derive(replace_pairs, positional=True)

    def slice(self: 'Collect[K, V]', start: int, end: int) -> 'Collect[K, V]':
        """pairs at positions start <= p < end, pulling no more than end pairs upstream"""
        _check_position(start, "start position")
        if not is_index_key(end) or end < start:
            raise InvalidRange(f"end position must be an integer no smaller than {start}, got {end!r}.")
        upstream = self._take_producer()
        def slice_pairs():
            # islice stops after the end-th pull without touching the next pair
            yield from islice(upstream, start, end)
        return self._derive(slice_pairs)

    def take(self: 'Collect[K, V]', amount: int) -> 'Collect[K, V]':
        """the first amount pairs"""
        _check_position(amount, "amount")
        return self.slice(0, amount)

    def limit(self: 'Collect[K, V]', amount: int) -> 'Collect[K, V]':
        """alias of take"""
        return self.take(amount)

    def apply(self: 'Collect[K, V]', transform: Callable[['Collect[K, V]'], 'Collect']) -> 'Collect':
        """run a reusable chain of operators over this collection"""
        from ..collection import Collect
        result = transform(self)
        if not isinstance(result, Collect):
            raise ContractViolation(
                f"apply callback returned {type(result).__name__}, expected a Collect.")
        return result

    def apply_flattening(self: 'Collect[K, V]', transform: Callable[['Collect[K, V]'], U]) -> U:
        """like apply, but the callback may return anything, e.g. a terminal result"""
        return transform(self)
