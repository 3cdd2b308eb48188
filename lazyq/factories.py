import typing
from itertools import count as _count
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """
    wrap an iterable without copying it.
    a one-shot iterator (e.g. a generator) can only be traversed once.
    """
    from .enumerable import Enumerable
    return Enumerable(lambda: data)

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable from range"""
    from .enumerable import Enumerable
    return Enumerable(lambda: range(start, start + count))

def repeat(item: T, count: int) -> 'Enumerable[T]':
    """create enumerable with repeated item"""
    from .enumerable import Enumerable
    return Enumerable(lambda: (item for _ in range(count)))

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: ())

def generate(generator_func: Callable[[], T], count: Optional[int] = None) -> 'Enumerable[T]':
    """generate a sequence by calling a function; unbounded when count is None"""
    from .enumerable import Enumerable
    def generate_data():
        calls = _count() if count is None else range(count)
        for _ in calls:
            yield generator_func()
    return Enumerable(generate_data)

# --- aliases ---
lazyq = from_iterable
Q = from_iterable
