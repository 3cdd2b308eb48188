from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.join import JoinAccessor
from .extensions.grouping import GroupingAccessor
from .extensions.stats import StatsAccessor
from .extensions.terminal import TerminalAccessor

logger = logging.getLogger(__name__)

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def _iter_source(self) -> Iterator[T]:
        """start a fresh traversal of the underlying source"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, source_func: Callable[[], Iterable[T]]):
        """init with a function that returns an iterable when called"""
        self._source_func = source_func

    def _iter_source(self) -> Iterator[T]:
        """nothing is cached: every traversal re-runs the upstream pipeline"""
        return iter(self._source_func())

    def _materialize(self, operation: str) -> List[T]:
        """consume the source once into a list buffer owned by the caller"""
        buffer = list(self._iter_source())
        logger.debug("%s materialized %d elements", operation, len(buffer))
        return buffer

    def __iter__(self) -> Iterator[T]:
        return self._iter_source()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._source_func!r})"

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """a linq-style enumerable over any python iterable, evaluated on demand."""
    def __init__(self, source_func: Callable[[], Iterable[T]]):
        super().__init__(source_func)
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.join = JoinAccessor(self)
        self.group = GroupingAccessor(self)
        self.stats = StatsAccessor(self)
        self.to = TerminalAccessor(self)
