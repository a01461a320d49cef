"""
TL1 exception classes.

This package provides all exception types used throughout the TL1 package
for consistent error handling and reporting.
"""

from tl1.exceptions.core import (
    ArityMismatch,
    DuplicateFieldError,
    FormatSyntaxError,
    LiteralMismatch,
    MatchError,
    ResponseTimeout,
    ScanError,
    SessionError,
    StartMarkerNotFound,
    StructuredFormError,
    TL1Error,
    UnexpectedCharacter,
    UnknownKeyword,
    UnknownNodeKind,
    UnsupportedIOError,
    UnterminatedQuotedSpan,
)

__all__ = [
    "TL1Error",
    "FormatSyntaxError",
    "DuplicateFieldError",
    "UnknownNodeKind",
    "StructuredFormError",
    "MatchError",
    "LiteralMismatch",
    "UnknownKeyword",
    "ArityMismatch",
    "ScanError",
    "UnterminatedQuotedSpan",
    "StartMarkerNotFound",
    "UnexpectedCharacter",
    "SessionError",
    "UnsupportedIOError",
    "ResponseTimeout",
]
