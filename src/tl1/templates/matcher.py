"""
Matching of TL1 record text against format trees.

Matching walks the tree alongside the text, splitting on each group's
delimiter, and writes every variable it meets into one output mapping.
Literals must match exactly; segment counts of ordered groups must equal the
number of child nodes.
"""

from tl1.core.types import Record
from tl1.exceptions import (
    ArityMismatch,
    LiteralMismatch,
    UnknownKeyword,
    UnknownNodeKind,
)
from tl1.parsing.splitter import remove_quotes, split
from tl1.structure.nodes import (
    ColonSeparatedVariables,
    CommaSeparatedKeywordVariables,
    CommaSeparatedVariables,
    Literal,
    Node,
    Variable,
)


def match_record(node: Node, text: str) -> Record:
    """Match one record against a format, starting from an empty mapping."""
    return match(node, text, {})


def match(node: Node, text: str, record: Record) -> Record:
    """
    Match text against a node, accumulating fields into `record`.

    Params:
        node: Format node to match
        text: Message fragment for this node
        record: Output mapping, updated in place

    Returns:
        The same `record` mapping

    Raises:
        LiteralMismatch: If text differs from an expected literal
        UnknownKeyword: If a keyword pair names a keyword the format lacks
        ArityMismatch: If an ordered group splits into the wrong number of segments
        UnterminatedQuotedSpan: If a quoted span in the text is never closed
    """
    if isinstance(node, Literal):
        if text != node.fields:
            raise LiteralMismatch(node.fields, text)
    elif isinstance(node, Variable):
        record[node.fields] = remove_quotes(text)
    elif isinstance(node, ColonSeparatedVariables):
        _match_ordered(node, text, ":", record)
    elif isinstance(node, CommaSeparatedVariables):
        _match_ordered(node, text, ",", record)
    elif isinstance(node, CommaSeparatedKeywordVariables):
        _match_keywords(node, text, record)
    else:
        raise UnknownNodeKind(type(node).__name__)
    return record


def _match_ordered(node, text: str, delimiter: str, record: Record) -> None:
    segments = split(text, delimiter)
    if len(segments) != len(node.fields):
        raise ArityMismatch(delimiter, len(node.fields), len(segments), text)
    for segment, child in zip(segments, node.fields):
        match(child, segment, record)


def _match_keywords(node: CommaSeparatedKeywordVariables, text: str, record: Record) -> None:
    for pair in split(text, ","):
        if not pair:
            continue
        keyword, _, value = pair.partition("=")
        variable = node.fields.get(keyword)
        if variable is None:
            raise UnknownKeyword(keyword, tuple(node.fields))
        record[variable.fields] = remove_quotes(value)
