from __future__ import annotations
import typing
from itertools import chain
from ..types import *
from ..ordering import equality_from
from .core import _contains

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class SetAccessor(Generic[T]):
    """
    set-theoretic operations over sequences.

    containment is a linear scan over an accumulator list (o(n*m) overall),
    which keeps these usable with unhashable elements. equality is == unless
    a comparer is given, in which case comparer(a, b) == 0 means equal.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def union(self, other: Iterable[T], comparer: Optional[Comparer[T]] = None) -> 'Enumerable[T]':
        """return the order-preserving union of two sequences (distinct elements)."""
        from ..enumerable import Enumerable
        equals = equality_from(comparer)
        result = []
        for item in chain(self._enumerable, other):
            if not _contains(result, item, equals):
                result.append(item)
        return Enumerable(lambda: result)

    def intersect(self, other: Iterable[T], comparer: Optional[Comparer[T]] = None) -> 'Enumerable[T]':
        """return distinct elements of this sequence that also occur in other, in this sequence's order."""
        from ..enumerable import Enumerable
        equals = equality_from(comparer)
        other_data = list(other)
        result = []
        for item in self._enumerable._materialize('intersect'):
            if _contains(other_data, item, equals) and not _contains(result, item, equals):
                result.append(item)
        return Enumerable(lambda: result)

    def except_(self, predicate: Predicate[T]) -> 'Enumerable[T]':
        """
        lazily drop the elements that satisfy predicate; those failing it pass through.
        this takes a predicate, not a second sequence.
        """
        from ..enumerable import Enumerable
        def except_data():
            for item in self._enumerable:
                if not predicate(item):
                    yield item
        return Enumerable(except_data)
