from __future__ import annotations
import typing
from collections import deque
from itertools import chain, islice, takewhile, dropwhile
from ..types import *
from ..errors import ConversionError
from ..ordering import equality_from, sort_by

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


def _contains(buffer: List[T], value: T, equals: Callable[[T, T], bool]) -> bool:
    """linear containment search, o(len(buffer))"""
    for existing in buffer:
        if equals(existing, value):
            return True
    return False


class _CoreOperations(Generic[T]):
    def where(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        from ..enumerable import Enumerable
        def filter_data():
            for item in self:
                if predicate(item):
                    yield item
        return Enumerable(filter_data)

    def select(self: 'Enumerable[T]', selector: Selector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form"""
        from ..enumerable import Enumerable
        def map_data():
            for item in self:
                yield selector(item)
        return Enumerable(map_data)

    def select_with_index(self: 'Enumerable[T]', selector: Callable[[T, int], U]) -> 'Enumerable[U]':
        """project each element to a new form, using the element's index"""
        from ..enumerable import Enumerable
        def map_with_index_data():
            for index, item in enumerate(self):
                yield selector(item, index)
        return Enumerable(map_with_index_data)

    def select_many(self: 'Enumerable[T]', selector: Selector[T, Iterable[U]]) -> 'Enumerable[U]':
        """project and flatten sequences, outer then inner order"""
        from ..enumerable import Enumerable
        def flat_map_data():
            for item in self:
                yield from selector(item)
        return Enumerable(flat_map_data)

    # --- slicing ---

    def take(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """take the first 'count' elements"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: islice(self, max(count, 0)))

    def skip(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """skip the first 'count' elements. skipping past the end yields nothing."""
        from ..enumerable import Enumerable
        return Enumerable(lambda: islice(self, max(count, 0), None))

    def take_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """take elements while predicate is true"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: takewhile(predicate, self))

    def skip_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """skip elements while predicate is true, then yield the rest including the first failure"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: dropwhile(predicate, self))

    def skip_last(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """
        drop the final 'count' elements.
        streams through a window of depth count, so output lags the source by count elements.
        """
        from ..enumerable import Enumerable
        def skip_last_data():
            if count <= 0:
                yield from self
                return
            window = deque()
            for item in self:
                window.append(item)
                if len(window) > count:
                    yield window.popleft()
        return Enumerable(skip_last_data)

    def take_last(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """keep only the final 'count' elements"""
        from ..enumerable import Enumerable
        def take_last_data():
            if count <= 0:
                return iter(())
            return iter(deque(self, maxlen=count))
        return Enumerable(take_last_data)

    # --- combining ---

    def concat(self: 'Enumerable[T]', other: Iterable[T]) -> 'Enumerable[T]':
        """concatenate with another sequence, preserving all elements and order"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: chain(self, other))

    def append(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """appends a value to the end of the sequence"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: chain(self, (element,)))

    def prepend(self: 'Enumerable[T]', element: T) -> 'Enumerable[T]':
        """adds a value to the beginning of the sequence"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: chain((element,), self))

    def default_if_empty(self: 'Enumerable[T]', default_value: T) -> 'Enumerable[T]':
        """returns the elements of a sequence, or a default value in a singleton collection if the sequence is empty"""
        from ..enumerable import Enumerable
        def default_data():
            is_empty = True
            for item in self:
                is_empty = False
                yield item
            if is_empty:
                yield default_value
        return Enumerable(default_data)

    # --- eager operators ---

    def reverse(self: 'Enumerable[T]') -> 'Enumerable[T]':
        """inverts the order of the elements. materializes the source immediately."""
        from ..enumerable import Enumerable
        buffer = self._materialize('reverse')
        buffer.reverse()
        return Enumerable(lambda: buffer)

    def distinct(self: 'Enumerable[T]', key_selector: Optional[KeySelector[T, K]] = None,
                 comparer: Optional[Comparer[K]] = None) -> 'Enumerable[T]':
        """
        return distinct elements, preserving order of first appearance.

        every new element is checked against the ones already kept with a
        linear scan, so this is o(n^2) but works for unhashable values such as
        dicts and lists. materializes the source immediately.
        """
        from ..enumerable import Enumerable
        equals = equality_from(comparer)
        seen_keys, result = [], []
        for item in self._materialize('distinct'):
            key = key_selector(item) if key_selector else item
            if not _contains(seen_keys, key, equals):
                seen_keys.append(key)
                result.append(item)
        return Enumerable(lambda: result)

    def order_by(self: 'Enumerable[T]', key_selector: Optional[KeySelector[T, K]] = None,
                 comparer: Optional[Comparer[K]] = None) -> 'Enumerable[T]':
        """
        sort elements ascending by key (or by the elements themselves).
        uses quicksort, which is not stable: equal keys may swap places.
        """
        from ..enumerable import Enumerable
        ordered = sort_by(self._iter_source(), key_selector, comparer)
        return Enumerable(lambda: ordered)

    def order_by_descending(self: 'Enumerable[T]', key_selector: Optional[KeySelector[T, K]] = None,
                            comparer: Optional[Comparer[K]] = None) -> 'Enumerable[T]':
        """sort elements descending: an ascending sort followed by a reversal"""
        return self.order_by(key_selector, comparer).reverse()

    # --- typing ---

    def cast(self: 'Enumerable[Any]', target_type: Type[U],
             converter: Optional[Callable[[Any], U]] = None) -> 'Enumerable[U]':
        """
        convert every element to target_type. elements that already are
        instances pass through untouched; the rest go through converter
        (default: target_type itself). a failed conversion (including decimal and
        overflow errors) raises ConversionError.
        """
        from ..enumerable import Enumerable
        convert = converter or target_type
        def cast_data():
            for item in self:
                if isinstance(item, target_type):
                    yield item
                    continue
                try:
                    converted = convert(item)
                except (TypeError, ValueError, ArithmeticError) as e:
                    raise ConversionError(item, target_type) from e
                yield converted
        return Enumerable(cast_data)

    def of_type(self: 'Enumerable[Any]', type_filter: Type[U]) -> 'Enumerable[U]':
        """filters the elements of a sequence based on a specified type"""
        # note: bool is a subclass of int, so of_type(int) keeps True/False
        return self.where(lambda item: isinstance(item, type_filter))
