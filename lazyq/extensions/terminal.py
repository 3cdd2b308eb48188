from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from functools import reduce
from ..types import *
from ..errors import EmptySequenceError, CardinalityError
from ..ordering import equality_from

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

_MISSING = object()

class TerminalAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _filtered(self, predicate: Optional[Predicate[T]]) -> 'Enumerable[T]':
        return self._enumerable.where(predicate) if predicate else self._enumerable

    # --- conversions ---

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._enumerable)

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._enumerable)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._enumerable}

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self.list())

    # --- counting & quantifiers ---

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        return sum(1 for _ in self._filtered(predicate))

    def long_count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """same as count(); python ints do not overflow"""
        return self.count(predicate)

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition. false when empty."""
        for _ in self._filtered(predicate):
            return True
        return False

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition. true when empty."""
        for item in self._enumerable:
            if not predicate(item):
                return False
        return True

    def contains(self, element: T, comparer: Optional[Comparer[T]] = None) -> bool:
        """linear search for an element"""
        equals = equality_from(comparer)
        return any(equals(item, element) for item in self._enumerable)

    # --- element access ---

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element"""
        for item in self._filtered(predicate):
            return item
        if predicate is None: raise EmptySequenceError()
        raise EmptySequenceError("no element satisfies the condition")

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        try: return self.first(predicate)
        except EmptySequenceError: return default

    def last(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get last element"""
        result = _MISSING
        for item in self._filtered(predicate):
            result = item
        if result is _MISSING:
            if predicate is None: raise EmptySequenceError()
            raise EmptySequenceError("no element satisfies the condition")
        return result

    def last_or_default(self, predicate: Optional[Predicate[T]] = None,
                        default: Optional[T] = None) -> Optional[T]:
        """get last element or default"""
        try: return self.last(predicate)
        except EmptySequenceError: return default

    def single(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get single element, erroring if not exactly one"""
        # two elements are enough to tell "one" from "more than one"
        data = self._filtered(predicate).take(2).to.list()
        if len(data) == 0: raise CardinalityError("sequence contains no matching elements", count=0)
        if len(data) > 1: raise CardinalityError("sequence contains more than one matching element", count=len(data))
        return data[0]

    def single_or_default(self, predicate: Optional[Predicate[T]] = None,
                          default: Optional[T] = None) -> Optional[T]:
        """get the single matching element, or default when there are none or several"""
        try: return self.single(predicate)
        except CardinalityError: return default

    def element_at(self, index: int) -> T:
        """get the element at a zero-based position"""
        if index >= 0:
            for position, item in enumerate(self._enumerable):
                if position == index:
                    return item
        raise EmptySequenceError(f"index {index} is out of range")

    def element_at_or_default(self, index: int, default: Optional[T] = None) -> Optional[T]:
        """get the element at a position, or default when out of range"""
        try: return self.element_at(index)
        except EmptySequenceError: return default

    # --- folding ---

    def aggregate(self, accumulator: Accumulator[T, T], seed: Any = _MISSING) -> T:
        """applies accumulator function over sequence"""
        if seed is not _MISSING:
            return reduce(accumulator, self._enumerable, seed)
        iterator = iter(self._enumerable)
        try:
            first = next(iterator)
        except StopIteration:
            raise EmptySequenceError("cannot aggregate empty sequence without seed") from None
        return reduce(accumulator, iterator, first)

    def aggregate_with_selector(self, seed: U, accumulator: Accumulator[U, T],
                                result_selector: Selector[U, V]) -> V:
        """aggregate with seed and final transformation"""
        return result_selector(reduce(accumulator, self._enumerable, seed))
