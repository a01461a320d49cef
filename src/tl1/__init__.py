"""
TL1 - Encoding and decoding of TL1 command/response messages

TL1 provides a small declarative grammar for describing TL1 input messages
and output records, plus helpers for extracting records from raw responses
and issuing commands over an existing connection.
"""

from importlib.metadata import version

from tl1.commands import Command, InputFormat, OutputFormat
from tl1.execution import COMPLD, Session
from tl1.parsing import parse_message_format

__version__ = version("tl1")

__all__ = [
    "__version__",
    "COMPLD",
    "Command",
    "InputFormat",
    "OutputFormat",
    "Session",
    "parse_message_format",
]
