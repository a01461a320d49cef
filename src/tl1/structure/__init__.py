"""
TL1 format tree structure.

This package provides the immutable node kinds that make up a format tree
and their structured (JSON-like) representation.
"""

from tl1.structure.nodes import (
    NODES_BY_NAME,
    ColonSeparatedVariables,
    CommaSeparatedKeywordVariables,
    CommaSeparatedVariables,
    Literal,
    Node,
    Variable,
    collect_field_names,
    iter_variables,
)
from tl1.structure.serialization import (
    StructuredNode,
    as_structured,
    to_json,
    to_structured,
)

__all__ = [
    "NODES_BY_NAME",
    "ColonSeparatedVariables",
    "CommaSeparatedKeywordVariables",
    "CommaSeparatedVariables",
    "Literal",
    "Node",
    "Variable",
    "collect_field_names",
    "iter_variables",
    "StructuredNode",
    "as_structured",
    "to_json",
    "to_structured",
]
