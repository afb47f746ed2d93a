"""Utility functions for lookupsql.

Shared helpers for normalizing caller input before it reaches the compiler
and the clause builders.
"""

import datetime
from decimal import Decimal
from typing import Any, Iterable, List, Mapping, Tuple

from .types import Columns, FilterInput, LookupPair

# ===========================================================================
# Value classification
# ===========================================================================

# Values a DB-API driver binds directly. bool is covered by int.
SCALAR_TYPES: Tuple[type, ...] = (
    str,
    bytes,
    int,
    float,
    Decimal,
    datetime.date,
    datetime.datetime,
    datetime.time,
)

# Ordered collections. Sets are rejected since their order is not stable.
COLLECTION_TYPES: Tuple[type, ...] = (list, tuple)


def is_scalar(value: Any) -> bool:
    """Whether value can be bound as a single positional parameter."""
    return isinstance(value, SCALAR_TYPES)


def is_collection(value: Any) -> bool:
    """Whether value is an ordered list/tuple of parameters."""
    return isinstance(value, COLLECTION_TYPES)


# ===========================================================================
# Input normalization
# ===========================================================================


def normalize_filter_input(*filters: FilterInput, **lookups: Any) -> List[LookupPair]:
    """Flatten filter batch inputs into one ordered list of (key, value) pairs.

    Accepts mappings (iterated in insertion order), iterables of (key, value)
    pairs and keyword lookups. Keywords come last, after all positional inputs.

    Raises:
        TypeError: If an input is neither a mapping nor an iterable of pairs
    """
    pairs: List[LookupPair] = []
    for item in filters:
        if isinstance(item, Mapping):
            pairs.extend(item.items())
        elif isinstance(item, (str, bytes)) or not isinstance(item, Iterable):
            raise TypeError(f"filter input must be a mapping or an iterable of pairs, got {type(item).__name__}")
        else:
            for pair in item:
                if not isinstance(pair, tuple) or len(pair) != 2:
                    raise TypeError(f"filter pairs must be (key, value) tuples, got {pair!r}")
                pairs.append(pair)
    pairs.extend(lookups.items())
    for key, _ in pairs:
        if not isinstance(key, str):
            raise TypeError(f"lookup keys must be strings, got {type(key).__name__}")
    return pairs


def split_columns(*columns: Columns) -> List[str]:
    """Flatten column arguments into a list of stripped names.

    Strings are split on commas, so ``"a, b"`` and ``["a", "b"]`` are equivalent.
    Blank entries are skipped.

    Raises:
        TypeError: If an argument or list item is not a string
    """
    names: List[str] = []
    for col in columns:
        if isinstance(col, str):
            parts = col.split(",")
        elif isinstance(col, (list, tuple)):
            parts = []
            for item in col:
                if not isinstance(item, str):
                    raise TypeError(f"column names must be strings, got {type(item).__name__}")
                parts.extend(item.split(","))
        else:
            raise TypeError(f"columns must be a string, list or tuple of strings, got {type(col).__name__}")
        names.extend(p.strip() for p in parts if p.strip())
    return names
