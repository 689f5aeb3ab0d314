"""
the closed set of shapes a collection can be built from.

raw input is classified once, at the api boundary, by `as_source`. every
variant knows how to `open()` itself into a single-pass iterator of
(key, value) pairs and whether its keys are positional list indices.
"""
from __future__ import annotations

import inspect
import logging
import typing
from collections.abc import Iterable as IterableABC, Iterator as IteratorABC, Mapping, Sequence
from dataclasses import dataclass

import numpy as np
import pandas as pd

from .errors import InvalidInput
from .types import *

if typing.TYPE_CHECKING:
    from .collection import Collect

logger = logging.getLogger(__name__)


def _keyed(items: Iterable[Any]) -> Iterator[Pair]:
    """unpack (key, value) tuples, failing on anything else"""
    for item in items:
        key, value = item
        yield key, value


@dataclass(frozen=True)
class ContainerSource:
    """a concrete container, snapshotted when the source is built"""
    pairs: Tuple[Pair, ...]
    positional: bool

    def open(self) -> Iterator[Pair]:
        return iter(self.pairs)


@dataclass(frozen=True)
class GeneratorSource:
    """a generator function, checked before it is ever called"""
    factory: Callable[[], Iterator[Any]]
    keyed: bool = False

    def __post_init__(self):
        if not inspect.isgeneratorfunction(self.factory):
            raise InvalidInput(
                f"{getattr(self.factory, '__name__', type(self.factory).__name__)} is not a generator function.")

    @property
    def positional(self) -> bool:
        return not self.keyed

    def open(self) -> Iterator[Pair]:
        # calling a generator function does not run its body, so nothing is consumed here
        produced = self.factory()
        return _keyed(produced) if self.keyed else enumerate(produced)


@dataclass(frozen=True)
class ProducerSource:
    """an iterator that is already running, or the pairs taken from another collection"""
    producer: Iterator[Any]
    keyed: bool = False
    positional: bool = True

    def open(self) -> Iterator[Pair]:
        return _keyed(self.producer) if self.keyed else enumerate(self.producer)


Source = Union[ContainerSource, GeneratorSource, ProducerSource]
SOURCE_TYPES = (ContainerSource, GeneratorSource, ProducerSource)


def container_source(data: Any) -> Optional[ContainerSource]:
    """snapshot a concrete container, or None when data is not one"""
    if isinstance(data, pd.Series):
        return ContainerSource(tuple(data.items()), positional=False)
    if isinstance(data, np.ndarray):
        return ContainerSource(tuple(enumerate(data.tolist())), positional=True)
    if isinstance(data, Mapping):
        return ContainerSource(tuple(data.items()), positional=False)
    if isinstance(data, (str, bytes, bytearray)):
        return None
    if isinstance(data, Sequence):
        return ContainerSource(tuple(enumerate(data)), positional=True)
    return None


def producer_source(data: Any) -> Optional[ProducerSource]:
    """wrap an iterator or any other iterable, or take over another collection's pairs"""
    from .collection import Collect
    if isinstance(data, Collect):
        return ProducerSource(data._take_producer(), keyed=True, positional=data._positional)
    if isinstance(data, IteratorABC):
        return ProducerSource(data)
    if isinstance(data, IterableABC) and not isinstance(data, (str, bytes, bytearray)):
        return ProducerSource(iter(data))
    return None


def as_source(data: Any) -> Source:
    """classify raw input into one of the source variants"""
    if isinstance(data, SOURCE_TYPES):
        return data

    source = container_source(data)
    if source is None:
        source = producer_source(data)
    if source is None and callable(data):
        source = GeneratorSource(data)
    if source is None:
        raise InvalidInput(f"cannot use {type(data).__name__} as a collection.")

    logger.debug(f"classified {type(data).__name__} input as {type(source).__name__}")
    return source


def iterable_source(data: Any) -> Source:
    """like as_source, but for concat arguments, which may not be callables"""
    source = None
    if isinstance(data, SOURCE_TYPES):
        source = data
    if source is None:
        source = container_source(data)
    if source is None:
        source = producer_source(data)
    if source is None:
        raise InvalidInput(f"items of type {type(data).__name__} are not iterable.")
    return source
