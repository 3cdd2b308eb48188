from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], int]
Accumulator = Callable[[U, T], U]
Combiner = Callable[[T, U], V]


class Grouping(Generic[K, T]):
    """an immutable key paired with the elements that share it"""

    __slots__ = ('_key', '_items')

    def __init__(self, key: K, items: Iterable[T]):
        self._key = key
        self._items = tuple(items)

    @property
    def key(self) -> K: return self._key

    @property
    def items(self) -> Tuple[T, ...]: return self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Grouping):
            return NotImplemented
        return self._key == other._key and self._items == other._items

    def __hash__(self) -> int:
        return hash((self._key, self._items))

    def __repr__(self) -> str:
        return f"Grouping(key={self._key!r}, items={len(self._items)})"
