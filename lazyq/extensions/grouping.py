from __future__ import annotations
import typing
from ..types import *
from ..ordering import equality_from

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class GroupingAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def group_by(self, key_selector: KeySelector[T, K],
                 element_selector: Optional[Selector[T, U]] = None,
                 comparer: Optional[Comparer[K]] = None) -> 'Enumerable[Grouping[K, T]]':
        """
        partition the sequence by computed key.

        groups come out in order of first key appearance and each holds its
        elements in source order. keys are found with distinct() over the
        projected keys and every key then takes one pass over the buffer,
        so the cost is o(k*n) for k distinct keys. evaluated immediately.
        """
        from ..enumerable import Enumerable
        equals = equality_from(comparer)
        # key_selector runs a single time per element
        pairs = [(key_selector(item), item) for item in self._enumerable._materialize('group_by')]
        keyed = Enumerable(lambda: pairs)
        keys = keyed.select(lambda pair: pair[0]).distinct(comparer=comparer).to.list()

        project = element_selector or (lambda item: item)
        groups = [
            Grouping(key, keyed.where(lambda pair, k=key: equals(pair[0], k))
                               .select(lambda pair: project(pair[1])))
            for key in keys
        ]
        return Enumerable(lambda: groups)

    def group_by_with_aggregate(self, key_selector: KeySelector[T, K],
                                element_selector: Selector[T, U],
                                result_selector: Callable[[K, Tuple[U, ...]], V],
                                comparer: Optional[Comparer[K]] = None) -> 'Enumerable[V]':
        """group by key then transform each group"""
        groups = self.group_by(key_selector, element_selector, comparer)
        return groups.select(lambda group: result_selector(group.key, group.items))

    def partition(self, predicate: Predicate[T]) -> Tuple[List[T], List[T]]:
        """partition elements based on predicate"""
        true_items, false_items = [], []
        for item in self._enumerable:
            (true_items if predicate(item) else false_items).append(item)
        return true_items, false_items
