"""
Rendering of format trees into TL1 input text.
"""

from tl1.core.types import ValueMapping
from tl1.exceptions import UnknownNodeKind
from tl1.structure.nodes import (
    ColonSeparatedVariables,
    CommaSeparatedKeywordVariables,
    CommaSeparatedVariables,
    Literal,
    Node,
    Variable,
)


def render(node: Node, values: ValueMapping) -> str:
    """
    Render a node tree with the given field values.

    Missing variables render as an empty string. Keyword pairs are only
    emitted for fields present in `values`, in definition order.

    Params:
        node: Root of the format tree
        values: Field name to value mapping

    Returns:
        Rendered text, without the terminating semicolon

    Raises:
        UnknownNodeKind: If the tree contains an object that is not a node
    """
    if isinstance(node, Literal):
        return node.fields
    if isinstance(node, Variable):
        return _render_value(values.get(node.fields))
    if isinstance(node, ColonSeparatedVariables):
        return ":".join(render(child, values) for child in node.fields)
    if isinstance(node, CommaSeparatedVariables):
        return ",".join(render(child, values) for child in node.fields)
    if isinstance(node, CommaSeparatedKeywordVariables):
        return ",".join(
            f"{keyword}={_render_value(values[variable.fields])}"
            for keyword, variable in node.fields.items()
            if variable.fields in values
        )
    raise UnknownNodeKind(type(node).__name__)


def _render_value(value) -> str:
    return "" if value is None else str(value)
