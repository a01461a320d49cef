"""
TL1 parsing components.

This package provides quote-aware splitting and the parser that turns format
descriptions into node trees.
"""

from tl1.parsing.grammar import (
    classify_segment,
    from_json,
    from_structured,
    parse_message_format,
    variable_name,
)
from tl1.parsing.splitter import remove_quotes, split

__all__ = [
    "classify_segment",
    "from_json",
    "from_structured",
    "parse_message_format",
    "remove_quotes",
    "split",
    "variable_name",
]
