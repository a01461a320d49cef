"""
Immutable AST nodes for TL1 input and output formats.

A format is a tree of five node kinds. `ColonSeparatedVariables` is the root
of every input message and every output record; its children are literals,
single variables, or comma groups (positional or keyword-tagged). Nodes are
plain data: rendering, matching and serialization live in
`tl1.templates.formatter`, `tl1.templates.matcher` and
`tl1.structure.serialization`, each dispatching over the closed `Node` union.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import ClassVar, Union

from attrs import field, frozen

from tl1.core.types import FieldName
from tl1.exceptions import DuplicateFieldError, UnknownNodeKind


@frozen
class Literal:
    """Fixed text. Never appears in parsed output, but must match exactly."""

    kind: ClassVar[str] = "Literal"

    fields: str


@frozen
class Variable:
    """A named field. Rendered from, and parsed into, the value mapping."""

    kind: ClassVar[str] = "Variable"

    fields: FieldName


def _as_tuple(children) -> tuple:
    return tuple(children)


def _as_read_only_mapping(keywords) -> Mapping[str, Variable]:
    return MappingProxyType(dict(keywords))


@frozen
class CommaSeparatedKeywordVariables:
    """
    A group of `KEYWORD=value` pairs separated by commas.

    Pairs may appear in any order in a message. The mapping keeps definition
    order, which is the order used when rendering, and is read-only.
    """

    kind: ClassVar[str] = "CommaSeparatedKeywordVariables"

    fields: Mapping[str, Variable] = field(
        converter=_as_read_only_mapping, hash=False
    )

    def __hash__(self) -> int:
        return hash((type(self), frozenset(self.fields.items())))


@frozen
class CommaSeparatedVariables:
    """A fixed-arity sequence of variables separated by commas."""

    kind: ClassVar[str] = "CommaSeparatedVariables"

    fields: tuple[Variable, ...] = field(converter=_as_tuple)

    def __init__(self, *fields: Variable):
        self.__attrs_init__(fields)


@frozen
class ColonSeparatedVariables:
    """
    A sequence of fields or groups of fields separated by colons.

    This is the root node for every input message and every record in an
    output message.
    """

    kind: ClassVar[str] = "ColonSeparatedVariables"

    fields: tuple["Node", ...] = field(converter=_as_tuple)

    def __init__(self, *fields: "Node"):
        self.__attrs_init__(fields)


Node = Union[
    ColonSeparatedVariables,
    CommaSeparatedVariables,
    CommaSeparatedKeywordVariables,
    Literal,
    Variable,
]

NODES_BY_NAME: dict[str, type] = {
    node_class.kind: node_class
    for node_class in (
        ColonSeparatedVariables,
        CommaSeparatedKeywordVariables,
        CommaSeparatedVariables,
        Literal,
        Variable,
    )
}


def iter_variables(node: Node) -> Iterator[Variable]:
    """Yield every `Variable` in the tree, in definition order."""
    if isinstance(node, Variable):
        yield node
    elif isinstance(node, Literal):
        return
    elif isinstance(node, (ColonSeparatedVariables, CommaSeparatedVariables)):
        for child in node.fields:
            yield from iter_variables(child)
    elif isinstance(node, CommaSeparatedKeywordVariables):
        yield from node.fields.values()
    else:
        raise UnknownNodeKind(type(node).__name__)


def collect_field_names(node: Node, source: object = None) -> tuple[FieldName, ...]:
    """
    List the field names of a format, rejecting duplicates.

    Params:
        node: Root of the format tree
        source: Original description, only used in the error message

    Returns:
        Field names in definition order

    Raises:
        DuplicateFieldError: If a field name is declared more than once
    """
    names: list[FieldName] = []
    for variable in iter_variables(node):
        if variable.fields in names:
            raise DuplicateFieldError(variable.fields, source)
        names.append(variable.fields)
    return tuple(names)
