from __future__ import annotations
import typing
from functools import reduce
from operator import add
from ..types import *
from ..errors import EmptySequenceError
from ..ordering import natural_order

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class StatsAccessor(Generic[T]):
    """
    accumulating aggregates.

    sum() and average() return their zero value on an empty sequence, while
    min() and max() raise EmptySequenceError. the asymmetry is intentional.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _get_values(self, selector: Optional[Selector[T, Any]] = None) -> 'Enumerable[Any]':
        return self._enumerable.select(selector) if selector else self._enumerable

    def sum(self, selector: Optional[Selector[T, Any]] = None, zero: Any = 0) -> Any:
        """
        add up the elements (or their projections) starting from zero.
        zero is the additive identity of the element type, e.g. 0.0, Decimal(0) or ''.
        """
        return reduce(add, self._get_values(selector), zero)

    def average(self, selector: Optional[Selector[T, Any]] = None, zero: Any = 0) -> Any:
        """calc average, or zero for an empty sequence"""
        total, count = zero, 0
        for value in self._get_values(selector):
            total += value
            count += 1
        if count == 0: return zero
        return total / count

    def _extreme(self, direction: int, predicate: Optional[Predicate[T]],
                 comparer: Optional[Comparer[T]], name: str) -> T:
        compare = comparer or natural_order
        iterator = iter(self._enumerable)
        try:
            # the first element seeds the search even if it fails the predicate
            best = next(iterator)
        except StopIteration:
            raise EmptySequenceError(f"cannot find {name} of empty sequence") from None
        for item in iterator:
            if compare(item, best) * direction > 0 and (predicate is None or predicate(item)):
                best = item
        return best

    def min(self, predicate: Optional[Predicate[T]] = None, comparer: Optional[Comparer[T]] = None) -> T:
        """
        find minimum. with a predicate, the unfiltered first element is still the
        starting candidate; only later elements are tested against the predicate.
        """
        return self._extreme(-1, predicate, comparer, 'minimum')

    def max(self, predicate: Optional[Predicate[T]] = None, comparer: Optional[Comparer[T]] = None) -> T:
        """find maximum. seeded with the unfiltered first element, like min()."""
        return self._extreme(1, predicate, comparer, 'maximum')
