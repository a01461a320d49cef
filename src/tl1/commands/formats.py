"""
Input and output message formats.

Both wrap a format source (description text or structured form) and parse it
into a tree when constructed, so a malformed format fails where the command is
defined. The tree is then reused for every message.
"""

from tl1.core.types import Record, StructuredForm
from tl1.parsing.grammar import FormatSource, parse_message_format
from tl1.structure.nodes import ColonSeparatedVariables
from tl1.structure.serialization import to_structured
from tl1.templates.formatter import render
from tl1.templates.matcher import match_record


class _MessageFormat:
    def __init__(self, source: FormatSource):
        self.source = source
        self.ast: ColonSeparatedVariables = parse_message_format(source)

    def as_structured(self) -> StructuredForm:
        return to_structured(self.ast)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.source!r})"


class InputFormat(_MessageFormat):
    """A format for an input message."""

    def format(self, /, **values) -> str:
        """Render the message body (without the terminating semicolon)."""
        return render(self.ast, values)


class OutputFormat(_MessageFormat):
    """A format for records appearing in output messages."""

    def parse(self, record_source: str) -> Record:
        """Parse one record into a field name to value mapping."""
        return match_record(self.ast, record_source)
