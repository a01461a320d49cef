"""
Exception classes for TL1 format processing.

This module defines specific exception types for the different error
conditions that can occur while parsing format descriptions, rendering input
messages, matching output records and scanning raw responses.
"""


class TL1Error(Exception):
    """Base exception for all TL1-related errors."""

    pass


class FormatSyntaxError(TL1Error):
    """Raised when a format description cannot be turned into a node tree."""

    def __init__(self, source: object, reason: str):
        """
        Initialize the exception.

        Params:
            source: The offending format description or fragment
            reason: Why the fragment could not be parsed
        """
        self.source = source
        self.reason = reason
        super().__init__(f"Unparseable format element {source!r}: {reason}")


class DuplicateFieldError(TL1Error):
    """Raised when the same field name appears twice within one format."""

    def __init__(self, field_name: str, source: object = None):
        """
        Initialize the exception.

        Params:
            field_name: The field name declared more than once
            source: The format description where the duplicate was found
        """
        self.field_name = field_name
        self.source = source
        message = f"Field '{field_name}' is declared more than once"
        if source is not None:
            message += f" in format {source!r}"
        super().__init__(message)


class UnknownNodeKind(TL1Error):
    """Raised when a node tag or node object is not one of the known kinds."""

    def __init__(self, kind: object):
        """
        Initialize the exception.

        Params:
            kind: The unrecognized tag (or the type of a foreign object)
        """
        self.kind = kind
        super().__init__(f"Unknown node type {kind!r}")


class StructuredFormError(TL1Error):
    """Raised when a structured (JSON-like) node description has the wrong shape."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid structured node description: {reason}")


class MatchError(TL1Error):
    """Base exception for failures while matching a record against a format."""

    pass


class LiteralMismatch(MatchError):
    """Raised when message text does not equal the literal expected by the format."""

    def __init__(self, expected: str, actual: str):
        """
        Initialize the exception.

        Params:
            expected: The literal text declared in the format
            actual: The text found in the message
        """
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Message literal {actual!r} does not match format literal {expected!r}"
        )


class UnknownKeyword(MatchError):
    """Raised when a keyword in a message has no field in the format."""

    def __init__(self, keyword: str, known: tuple[str, ...] = ()):
        """
        Initialize the exception.

        Params:
            keyword: The keyword found in the message
            known: Keywords declared by the format
        """
        self.keyword = keyword
        self.known = known
        super().__init__(
            f"Unknown keyword {keyword!r}. Known keywords are: {', '.join(known)}"
        )


class ArityMismatch(MatchError):
    """Raised when a message splits into a different number of segments than the format declares."""

    def __init__(self, delimiter: str, expected: int, actual: int, source: str):
        """
        Initialize the exception.

        Params:
            delimiter: The delimiter used for splitting
            expected: Number of child nodes in the format
            actual: Number of segments found in the message
            source: The message fragment that was split
        """
        self.delimiter = delimiter
        self.expected = expected
        self.actual = actual
        self.source = source
        super().__init__(
            f"Expected {expected} {delimiter!r}-separated segments, got {actual} in {source!r}"
        )


class ScanError(TL1Error):
    """Base exception for failures while scanning text character by character."""

    pass


class UnterminatedQuotedSpan(ScanError):
    """Raised when input ends inside a quoted region."""

    def __init__(self, source: str, position: int, message: str = "Unexpected end of quoted string"):
        """
        Initialize the exception.

        Params:
            source: The text being scanned
            position: Offset where the quoted region started
            message: Specific error message
        """
        self.source = source
        self.position = position
        super().__init__(f"{message} (opened at offset {position})")


class StartMarkerNotFound(ScanError):
    """Raised when a response has no `M <ctag> COMPLD` status line where one is required."""

    def __init__(self, position: int):
        self.position = position
        super().__init__(f"No COMPLD status line found after offset {position}")


class UnexpectedCharacter(ScanError):
    """Raised when a response block contains something other than a record, `>` or `;`."""

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(
            f"Unexpected character {char!r} at offset {position} while looking for a record"
        )


class SessionError(TL1Error):
    """Base exception for session-level failures."""

    pass


class UnsupportedIOError(SessionError):
    """Raised when a connection object offers neither `expect` nor `waitfor`."""

    def __init__(self, io: object):
        self.io = io
        super().__init__(
            f"the given IO ({type(io).__name__}) doesn't respond to expect or waitfor"
        )


class ResponseTimeout(SessionError):
    """Raised when the expected terminator pattern is not seen in the response."""

    def __init__(self, pattern: str, timeout: float | None = None):
        self.pattern = pattern
        self.timeout = timeout
        message = f"Pattern {pattern!r} does not match the next output"
        if timeout is not None:
            message += f" within {timeout}s"
        super().__init__(message)
