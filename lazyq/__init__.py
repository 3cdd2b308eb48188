"""
'    .__
'    |  | _____  ___________.__. ______
'    |  | \__  \ \___   <   |  |/ ____/
'    |  |__/ __ \_/    / \___  < <_|  |
'    |____(____  /_____ \/ ____|\__   |
'              \/      \/\/        |__|
"""

# expose the main class
from .enumerable import Enumerable

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    generate,
    lazyq,
    Q
)

# expose the ordering engine
from .ordering import natural_order, equality_from, quick_sort, sort_by

# expose supporting data classes
from .types import Grouping

# expose the error taxonomy
from .errors import (
    LazyqError,
    EmptySequenceError,
    CardinalityError,
    ConversionError
)

# define what `import *` does
__all__ = [
    "Enumerable",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "lazyq",
    "Q",
    "natural_order",
    "equality_from",
    "quick_sort",
    "sort_by",
    "Grouping",
    "LazyqError",
    "EmptySequenceError",
    "CardinalityError",
    "ConversionError"
]
