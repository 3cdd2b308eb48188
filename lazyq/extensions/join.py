from __future__ import annotations
import typing
from ..types import *
from ..errors import CardinalityError
from ..ordering import equality_from

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class JoinAccessor(Generic[T]):
    """
    equality correlation between this (outer) sequence and an inner one.
    the inner sequence is buffered once per traversal and scanned linearly
    for every outer element.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _matches(self, inner_data: List[U], inner_key_selector: KeySelector[U, K],
                 outer_key: K, equals: Callable[[K, K], bool]) -> List[U]:
        from ..enumerable import Enumerable
        return Enumerable(lambda: inner_data).where(lambda u: equals(inner_key_selector(u), outer_key)).to.list()

    def join(self, inner: Iterable[U], outer_key_selector: KeySelector[T, K],
             inner_key_selector: KeySelector[U, K],
             result_selector: Combiner[T, U, V],
             comparer: Optional[Comparer[K]] = None,
             strict: bool = False) -> 'Enumerable[V]':
        """
        single-match inner join.

        an outer element may correlate with at most one inner element: several
        matches raise CardinalityError when the result is iterated. outer
        elements without a match are dropped, or also raise when strict=True.
        """
        from ..enumerable import Enumerable
        equals = equality_from(comparer)
        def join_data():
            inner_data = list(inner)
            for outer_item in self._enumerable:
                outer_key = outer_key_selector(outer_item)
                matched = self._matches(inner_data, inner_key_selector, outer_key, equals)
                if not matched and not strict:
                    continue
                if len(matched) != 1:
                    raise CardinalityError(
                        f"join expected exactly one inner element for key {outer_key!r}, found {len(matched)}",
                        count=len(matched))
                yield result_selector(outer_item, matched[0])
        return Enumerable(join_data)

    def group_join(self, inner: Iterable[U], outer_key_selector: KeySelector[T, K],
                   inner_key_selector: KeySelector[U, K],
                   result_selector: Callable[[T, Tuple[U, ...]], V],
                   comparer: Optional[Comparer[K]] = None) -> 'Enumerable[V]':
        """group join - pairs each outer element with all (zero or more) matching inner elements"""
        from ..enumerable import Enumerable
        equals = equality_from(comparer)
        def group_join_data():
            inner_data = list(inner)
            for outer_item in self._enumerable:
                matched = self._matches(inner_data, inner_key_selector, outer_key_selector(outer_item), equals)
                yield result_selector(outer_item, tuple(matched))
        return Enumerable(group_join_data)
