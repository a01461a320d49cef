"""
TL1 command definitions.

A command pairs an input format with an optional output format. It renders
input messages from keyword values and turns raw output messages into
records.
"""

import logging

from tl1.commands.formats import InputFormat, OutputFormat
from tl1.commands.scanner import extract_records
from tl1.core.types import Record, ValueMapping
from tl1.parsing.grammar import FormatSource

logger = logging.getLogger(__name__)

MESSAGE_TERMINATOR = ";"


class Command:
    """
    A representation of a TL1 interaction.

    Params:
        input: Input message format source
        output: Optional output record format source. Without it, responses
            are returned unparsed.
    """

    def __init__(self, input: FormatSource, output: FormatSource | None = None):
        self.input_format = InputFormat(input)
        self.output_format = OutputFormat(output) if output is not None else None

    def render_input(self, values: ValueMapping) -> str:
        """Render the input message, terminated by a semicolon."""
        return self.input_format.format(**values) + MESSAGE_TERMINATOR

    def input(self, /, **values) -> str:
        return self.render_input(values)

    def extract_records(self, output: str) -> list[str]:
        """Extract the raw record texts of an output message."""
        return extract_records(output)

    record_sources = extract_records

    def parse_response(self, output: str) -> list[Record] | str:
        """
        Parse an output message into records.

        Params:
            output: Raw output message

        Returns:
            One mapping per record, in message order, or the raw output when
            the command has no output format

        Raises:
            MatchError: If a record does not fit the output format
            ScanError: If the message cannot be split into records
        """
        if self.output_format is None:
            return output

        records = [
            self.output_format.parse(source) for source in self.extract_records(output)
        ]
        logger.debug("Parsed %d records for %r", len(records), self.input_format.source)
        return records

    parse_output = parse_response

    def __repr__(self) -> str:
        return f"Command({self.input_format.source!r}, {self.output_format and self.output_format.source!r})"
