"""
the ordering engine: an in-place partition-exchange sort (quicksort) over a
list buffer, driven by a comparer or by keys taken from a key selector.

the sort is NOT stable. elements with equal keys may come out in a different
relative order than they went in. worst-case time is o(n^2) on input that is
already sorted or reverse sorted, since the pivot is always the last element
of the active range.
"""
import logging
from .types import *

logger = logging.getLogger(__name__)


def natural_order(a: Any, b: Any) -> int:
    """compare two values using their own < and > operators"""
    return (a > b) - (a < b)


def equality_from(comparer: Optional[Comparer[T]] = None) -> Callable[[T, T], bool]:
    """build an equality test from a comparer, falling back to =="""
    if comparer is None:
        return lambda a, b: a == b
    return lambda a, b: comparer(a, b) == 0


def _partition(buffer: List[T], low: int, high: int, comparer: Comparer[T]) -> int:
    pivot = buffer[high]
    i = low - 1
    for j in range(low, high):
        if comparer(buffer[j], pivot) < 0:
            i += 1
            buffer[i], buffer[j] = buffer[j], buffer[i]
    buffer[i + 1], buffer[high] = buffer[high], buffer[i + 1]
    return i + 1


def quick_sort(buffer: List[T], comparer: Comparer[T] = natural_order,
               low: int = 0, high: Optional[int] = None) -> List[T]:
    """
    sort buffer[low:high + 1] in place and return the buffer.

    the pivot is the last element of the range; elements strictly less than
    it are swapped to its left. only the smaller partition is recursed into,
    the larger one is handled by the loop, which keeps the stack depth at
    o(log n) even when the running time degrades to o(n^2).
    """
    if high is None:
        high = len(buffer) - 1
    while low < high:
        pi = _partition(buffer, low, high, comparer)
        if pi - low < high - pi:
            quick_sort(buffer, comparer, low, pi - 1)
            low = pi + 1
        else:
            quick_sort(buffer, comparer, pi + 1, high)
            high = pi - 1
    return buffer


def sort_by(items: Iterable[T], key_selector: Optional[KeySelector[T, K]] = None,
            comparer: Optional[Comparer[K]] = None) -> List[T]:
    """materialize items and return them ordered by key (or by themselves)"""
    compare = comparer or natural_order
    if key_selector is None:
        buffer = list(items)
        logger.debug("sorting %d elements", len(buffer))
        return quick_sort(buffer, compare)

    # keys are computed once per element, then the pairs are sorted on them
    pairs = [(key_selector(item), item) for item in items]
    logger.debug("sorting %d elements by key", len(pairs))
    quick_sort(pairs, lambda a, b: compare(a[0], b[0]))
    return [item for _, item in pairs]
