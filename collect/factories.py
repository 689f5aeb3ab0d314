import typing
from itertools import repeat as _repeat
from .types import *
from .sources import GeneratorSource, ProducerSource

if typing.TYPE_CHECKING:
    from .collection import Collect

def from_iterable(data: Any) -> 'Collect[Any, Any]':
    """create a collection from a container, generator callable, iterator or collection"""
    from .collection import Collect
    return Collect(data)

def from_pairs(pairs: Iterable[Tuple[K, V]]) -> 'Collect[K, V]':
    """create a collection from (key, value) tuples, pulled lazily"""
    from .collection import Collect
    return Collect(ProducerSource(iter(pairs), keyed=True, positional=False))

def from_generator(generator_func: Callable[[], Iterator[Any]], keyed: bool = False) -> 'Collect[Any, Any]':
    """
    create a collection from a zero-argument callable returning a generator.
    keyed generators yield (key, value) tuples, the others plain values.
    """
    from .collection import Collect
    return Collect(GeneratorSource(generator_func, keyed=keyed))

def from_range(start: int, count: int) -> 'Collect[int, int]':
    """create collection from range"""
    from .collection import Collect
    return Collect(iter(range(start, start + count)))

def repeat(item: T, count: int) -> 'Collect[int, T]':
    """create collection with repeated item"""
    from .collection import Collect
    return Collect(_repeat(item, count))

def empty() -> 'Collect[Any, Any]':
    """create empty collection"""
    from .collection import Collect
    return Collect([])

# --- aliases ---
collect = from_iterable
C = from_iterable
