"""
exceptions raised by lazyq operators.

each error also derives from the built-in exception that describes the same
condition, so `except ValueError` / `except TypeError` keep working.
"""


class LazyqError(Exception):
    """base class for every error raised by an operator."""
    pass


class EmptySequenceError(LazyqError, ValueError):
    """no qualifying element exists (first, last, min, max, element_at...)."""

    def __init__(self, message: str = "sequence contains no elements"):
        super().__init__(message)


class CardinalityError(LazyqError, ValueError):
    """exactly one matching element was required but zero or several were found."""

    def __init__(self, message: str = "sequence must contain exactly one matching element", count: int = None):
        super().__init__(message)
        self.count = count


class ConversionError(LazyqError, TypeError):
    """an element could not be converted by cast()."""

    def __init__(self, item, target_type: type):
        super().__init__(f"cannot convert {item!r} of type {type(item).__name__} to {target_type.__name__}")
        self.item = item
        self.target_type = target_type
