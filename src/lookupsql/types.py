"""Type aliases for lookupsql package.

This module provides reusable type definitions to ensure consistency
across the codebase and improve code readability.
"""

from typing import Any, Iterable, List, Mapping, Sequence, Tuple, Union

# One lookup: ("age__gte", 18)
LookupPair = Tuple[str, Any]

# A filter batch input: a mapping (insertion ordered) or an iterable of pairs
FilterInput = Union[Mapping[str, Any], Iterable[LookupPair]]

# Column arguments: "a,b", ["a", "b"] or ("a", "b")
Columns = Union[str, Sequence[str]]

# Compiled SQL text plus its positional arguments
SQLWithArgs = Tuple[str, List[Any]]
