from __future__ import annotations
import typing
import math
import logging
from ..types import *
from ..config import resolve_strict
from ..errors import NonNumericValue

if typing.TYPE_CHECKING:
    from ..collection import Collect

logger = logging.getLogger(__name__)


class _NumericOperations(Generic[K, V]):
    def _numbers(self: 'Collect[K, V]', strict: Optional[bool], operation: str) -> Iterator[Number]:
        """the numeric values, skipping the rest or raising on them in strict mode."""
        is_strict = resolve_strict(strict, 'strict_numeric')
        for key, value in self._producer:
            if is_numeric(value):
                yield value
                continue
            if is_strict:
                logger.debug(f"{operation} hit non-numeric {type(value).__name__} at key {key!r}")
                raise NonNumericValue(
                    f"collection contains a non-numeric value of type {type(value).__name__} "
                    f"at key {key!r} (must be integer or float).")

    def max(self: 'Collect[K, V]', strict: Optional[bool] = None) -> Number:
        """
        largest numeric value. in lenient mode, when nothing numeric is found,
        the seed -inf is returned unchanged.
        """
        result = -math.inf
        for value in self._numbers(strict, 'max'):
            result = max(result, value)
        return result

    def min(self: 'Collect[K, V]', strict: Optional[bool] = None) -> Number:
        """
        smallest numeric value. in lenient mode, when nothing numeric is found,
        the seed inf is returned unchanged.
        """
        result = math.inf
        for value in self._numbers(strict, 'min'):
            result = min(result, value)
        return result

    def sum(self: 'Collect[K, V]', strict: Optional[bool] = None) -> float:
        """total of the numeric values, starting from 0.0"""
        total = 0.0
        for value in self._numbers(strict, 'sum'):
            total += value
        return total
