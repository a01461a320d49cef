"""
Parser for TL1 format descriptions.

A format description is a colon-separated sequence of segments. Each segment
is classified by its syntax:

- contains `=`: comma-separated `KEYWORD=<field>` pairs
- contains `,`: comma-separated positional fields
- wrapped in `<...>`: a single named field
- anything else: literal text that must match exactly

Formats may also be given in structured form (see
`tl1.structure.serialization`), in which case node kinds are read from the
`node` tag instead of being inferred.
"""

import logging
import re
from collections.abc import Mapping, Sequence

from pydantic import ValidationError

from tl1.exceptions import (
    FormatSyntaxError,
    StructuredFormError,
    UnknownNodeKind,
)
from tl1.parsing.splitter import split
from tl1.structure.nodes import (
    NODES_BY_NAME,
    ColonSeparatedVariables,
    CommaSeparatedKeywordVariables,
    CommaSeparatedVariables,
    Literal,
    Node,
    Variable,
    collect_field_names,
)
from tl1.structure.serialization import StructuredNode

logger = logging.getLogger(__name__)

VARIABLE_PATTERN = re.compile(r"<(.*)>", re.DOTALL)

FormatSource = str | Mapping | StructuredNode | Sequence


def parse_message_format(source: FormatSource) -> ColonSeparatedVariables:
    """
    Parse a complete message or record format.

    Params:
        source: Either a description string, a structured root (mapping or
            `StructuredNode`), or a sequence of colon segments where each
            segment is a description string or a structured node

    Returns:
        The `ColonSeparatedVariables` root of the format tree

    Raises:
        FormatSyntaxError: If a segment cannot be parsed
        StructuredFormError: If structured input has the wrong shape
        UnknownNodeKind: If structured input names an unknown node kind
        DuplicateFieldError: If a field name is declared more than once
    """
    if isinstance(source, str):
        segments = split(source, ":")
        root = ColonSeparatedVariables(*(classify_segment(s) for s in segments))
    elif isinstance(source, (Mapping, StructuredNode)):
        root = from_structured(source)
        if not isinstance(root, ColonSeparatedVariables):
            raise FormatSyntaxError(
                source, f"root node must be ColonSeparatedVariables, got {root.kind}"
            )
    elif isinstance(source, Sequence):
        root = ColonSeparatedVariables(*(classify_segment(s) for s in source))
    else:
        raise FormatSyntaxError(source, "expected a string or a structured description")

    collect_field_names(root, source)
    logger.debug("Parsed format %r into %d segments", source, len(root.fields))
    return root


def classify_segment(segment: str | Mapping | StructuredNode) -> Node:
    """
    Turn one colon-separated segment into a node.

    Params:
        segment: Segment text, or a structured node description

    Returns:
        The node matching the segment's syntax

    Raises:
        FormatSyntaxError: If the segment is neither text nor a structured node
    """
    if isinstance(segment, (Mapping, StructuredNode)):
        return from_structured(segment)
    if not isinstance(segment, str):
        raise FormatSyntaxError(segment, "expected a string or a structured description")

    if "=" in segment:
        return _parse_keyword_group(segment)
    if "," in segment:
        return CommaSeparatedVariables(
            *(Variable(variable_name(part)) for part in split(segment, ","))
        )
    if segment.startswith("<") and segment.endswith(">"):
        return Variable(variable_name(segment))
    return Literal(segment)


def variable_name(token: str) -> str:
    """Unwrap `<name>` to `name`; any other token is used as the name as-is."""
    match = VARIABLE_PATTERN.fullmatch(token)
    return match.group(1) if match else token


def _parse_keyword_group(segment: str) -> CommaSeparatedKeywordVariables:
    variables = {}
    for pair in split(segment, ","):
        if "=" not in pair:
            raise FormatSyntaxError(segment, f"keyword pair {pair!r} has no '='")
        keyword, value = pair.split("=", 1)
        variables[keyword] = Variable(variable_name(value))
    return CommaSeparatedKeywordVariables(variables)


def from_structured(source: Mapping | StructuredNode) -> Node:
    """
    Build a node tree from its structured form.

    Params:
        source: Structured description, as produced by `to_structured`

    Returns:
        The equivalent node tree

    Raises:
        StructuredFormError: If the description has the wrong shape
        UnknownNodeKind: If a `node` tag is not a known node kind
        DuplicateFieldError: If a field name is declared more than once
    """
    if not isinstance(source, StructuredNode):
        try:
            source = StructuredNode.model_validate(source)
        except ValidationError as e:
            raise StructuredFormError(str(e)) from e
    node = _build(source)
    collect_field_names(node, source)
    return node


def from_json(text: str | bytes) -> Node:
    """Parse JSON text produced by `to_json` back into a node tree."""
    try:
        structured = StructuredNode.model_validate_json(text)
    except ValidationError as e:
        raise StructuredFormError(str(e)) from e
    node = _build(structured)
    collect_field_names(node, text)
    return node


def _build(structured: StructuredNode) -> Node:
    node_class = NODES_BY_NAME.get(structured.node)
    if node_class is None:
        raise UnknownNodeKind(structured.node)

    fields = structured.fields
    if node_class in (Literal, Variable):
        if not isinstance(fields, str):
            raise StructuredFormError(f"{structured.node} fields must be a string")
        return node_class(fields)

    if node_class is CommaSeparatedKeywordVariables:
        if not isinstance(fields, dict):
            raise StructuredFormError(f"{structured.node} fields must be a mapping")
        return CommaSeparatedKeywordVariables(
            {keyword: _build_variable(child) for keyword, child in fields.items()}
        )

    if not isinstance(fields, list):
        raise StructuredFormError(f"{structured.node} fields must be a list")
    if node_class is CommaSeparatedVariables:
        return CommaSeparatedVariables(*(_build_variable(child) for child in fields))
    return ColonSeparatedVariables(*(_build(child) for child in fields))


def _build_variable(structured: StructuredNode) -> Variable:
    node = _build(structured)
    if not isinstance(node, Variable):
        raise StructuredFormError(
            f"comma groups may only hold Variable nodes, got {structured.node}"
        )
    return node
