"""
Extraction of quoted records from raw TL1 output messages.

An output message is one or more blocks. Each block starts after an
`M <ctag> COMPLD` status line and holds double-quoted records, one per line.
A `>` after the records announces another block, and `;` ends the message.
Inside a record `\\"` opens and closes an embedded quoted string, which is
returned with plain quote characters.
"""

import logging
import re

from tl1.exceptions import StartMarkerNotFound, UnexpectedCharacter, UnterminatedQuotedSpan

logger = logging.getLogger(__name__)

START_MARKER = re.compile(r"^M\s+\d+\s+COMPLD\r?$", re.MULTILINE)
WHITESPACE = re.compile(r"\s*")

CONTINUATION = ">"
TERMINATOR = ";"
QUOTE = '"'
BACKSLASH = "\\"


class OutputScanner:
    """
    Scanner over a single output message.

    The scanner is a cursor over the message text; `records` runs it from the
    start every time it is called.
    """

    def __init__(self, message: str):
        self.message = message
        self.position = 0

    def records(self) -> list[str]:
        """
        Extract every record in the message, in order of appearance.

        Returns:
            Record texts with outer quotes removed and embedded quotes unescaped

        Raises:
            StartMarkerNotFound: If a block has no COMPLD status line
            UnexpectedCharacter: If a block holds something other than records
            UnterminatedQuotedSpan: If the message ends inside a record
        """
        self.position = 0
        self.scan_begin()

        records = []
        while (record := self.scan_next_record()) is not None:
            records.append(record)

        logger.debug("Extracted %d records from output message", len(records))
        return records

    def scan_begin(self) -> None:
        """Move the cursor past the next COMPLD status line."""
        match = START_MARKER.search(self.message, self.position)
        if match is None:
            raise StartMarkerNotFound(self.position)
        self.position = match.end()

    def scan_next_record(self) -> str | None:
        """Return the next record, or None when the message is done."""
        while True:
            self.position = WHITESPACE.match(self.message, self.position).end()
            char = self.getch()

            if char is None or char == TERMINATOR:
                return None
            if char == CONTINUATION:
                logger.debug("Continuation marker at offset %d", self.position - 1)
                self.scan_begin()
                continue
            if char == QUOTE:
                return self.scan_record()
            raise UnexpectedCharacter(char, self.position - 1)

    def scan_record(self) -> str:
        """Scan the body of a record whose opening quote was just consumed."""
        start = self.position - 1
        record = ""

        while True:
            char = self.getch_in_quotes(start)
            if char == BACKSLASH:
                next_char = self.getch_in_quotes(start)
                if next_char == QUOTE:
                    record += QUOTE + self.scan_embedded_string(start)
                else:
                    record += char + next_char
            elif char == QUOTE:
                return record
            else:
                record += char

    def scan_embedded_string(self, start: int) -> str:
        """Scan an embedded string up to and including its closing `\\"`."""
        string = ""

        while True:
            char = self.getch_in_quotes(start)
            if char == BACKSLASH:
                next_char = self.getch_in_quotes(start)
                if next_char == QUOTE:
                    return string + QUOTE
                string += char + next_char
            else:
                string += char

    def getch(self) -> str | None:
        if self.position >= len(self.message):
            return None
        char = self.message[self.position]
        self.position += 1
        return char

    def getch_in_quotes(self, start: int) -> str:
        char = self.getch()
        if char is None:
            raise UnterminatedQuotedSpan(
                self.message, start, "Unexpected end of message"
            )
        return char


def extract_records(message: str) -> list[str]:
    """Extract the record texts of an output message."""
    return OutputScanner(message).records()
