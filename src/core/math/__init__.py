"""
Core math modules для детерминированного леджера

Десятичная арифметика с фиксированной точкой и гарантией побайтной
воспроизводимости между репликами.
"""

# Errors
from src.core.math.errors import (
    DecFault,
    DecInputError,
    DivideByZero,
    Overflow,
    ParseError,
    PrecisionExceeded,
)

# Int (256-bit bounded)
from src.core.math.int256 import (
    MAX_ABS_RAW,
    MAX_BIT_LEN,
    Int,
    check_range,
    is_valid_raw,
)

# Dec
from src.core.math.dec import (
    DEC_STRING_PATTERN,
    MAX_APPROX_ROOT_ITERATIONS,
    PRECISION,
    PRECISION_MULTIPLIER,
    Dec,
    Rounding,
    chop,
    decs_equal,
    max_dec,
    min_dec,
)

# Sortable encoding
from src.core.math.sortable import (
    SORTABLE_FRACTION_WIDTH,
    SORTABLE_INTEGER_WIDTH,
    SORTABLE_LIMIT_RAW,
    SORTABLE_MAX,
    SORTABLE_MIN,
    parse_sortable_dec_bytes,
    sortable_dec_bytes,
)

# Sequence utilities
from src.core.math.sequences import (
    all_of,
    contains,
    filter_index,
    filter_items,
    first_match,
    map_items,
)

__all__ = [
    # Errors: recoverable input
    "DecInputError",
    "ParseError",
    "PrecisionExceeded",
    # Errors: unrecoverable faults
    "DecFault",
    "DivideByZero",
    "Overflow",
    # Int: Constants
    "MAX_ABS_RAW",
    "MAX_BIT_LEN",
    # Int: Types
    "Int",
    # Int: Functions
    "check_range",
    "is_valid_raw",
    # Dec: Constants
    "DEC_STRING_PATTERN",
    "MAX_APPROX_ROOT_ITERATIONS",
    "PRECISION",
    "PRECISION_MULTIPLIER",
    # Dec: Types
    "Dec",
    "Rounding",
    # Dec: Functions
    "chop",
    "decs_equal",
    "max_dec",
    "min_dec",
    # Sortable: Constants
    "SORTABLE_FRACTION_WIDTH",
    "SORTABLE_INTEGER_WIDTH",
    "SORTABLE_LIMIT_RAW",
    "SORTABLE_MAX",
    "SORTABLE_MIN",
    # Sortable: Functions
    "parse_sortable_dec_bytes",
    "sortable_dec_bytes",
    # Sequences
    "all_of",
    "contains",
    "filter_index",
    "filter_items",
    "first_match",
    "map_items",
]
