"""
Structured (JSON-like) representation of format trees.

Every node serializes to `{"node": <tag>, "fields": <payload>}` where the
payload is a string for `Literal`/`Variable`, a list for the ordered groups
and a keyword mapping for `CommaSeparatedKeywordVariables`. The reverse
direction lives in `tl1.parsing.grammar.from_structured`, which validates
incoming data through `StructuredNode` first.
"""

from pydantic import BaseModel, ConfigDict

from tl1.core.types import StructuredForm
from tl1.exceptions import UnknownNodeKind
from tl1.structure.nodes import (
    ColonSeparatedVariables,
    CommaSeparatedKeywordVariables,
    CommaSeparatedVariables,
    Literal,
    Node,
    Variable,
)


class StructuredNode(BaseModel):
    """Validated structured form of a single node and its children."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    node: str
    fields: str | list["StructuredNode"] | dict[str, "StructuredNode"]


StructuredNode.model_rebuild()


def as_structured(node: Node) -> StructuredNode:
    """
    Convert a node tree to its validated structured form.

    Params:
        node: Root of the tree to convert

    Returns:
        `StructuredNode` mirroring the tree

    Raises:
        UnknownNodeKind: If the tree contains an object that is not a node
    """
    if isinstance(node, (Literal, Variable)):
        return StructuredNode(node=node.kind, fields=node.fields)
    if isinstance(node, (ColonSeparatedVariables, CommaSeparatedVariables)):
        return StructuredNode(
            node=node.kind, fields=[as_structured(child) for child in node.fields]
        )
    if isinstance(node, CommaSeparatedKeywordVariables):
        return StructuredNode(
            node=node.kind,
            fields={
                keyword: as_structured(variable)
                for keyword, variable in node.fields.items()
            },
        )
    raise UnknownNodeKind(type(node).__name__)


def to_structured(node: Node) -> StructuredForm:
    """Convert a node tree to nested plain dicts, lists and strings."""
    return as_structured(node).model_dump()


def to_json(node: Node) -> str:
    """Serialize a node tree to compact JSON text."""
    return as_structured(node).model_dump_json()
