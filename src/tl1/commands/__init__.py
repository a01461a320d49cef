"""
TL1 command definitions.

This package provides input/output formats, the command abstraction and the
scanner that splits raw output messages into records.
"""

from tl1.commands.command import Command
from tl1.commands.formats import InputFormat, OutputFormat
from tl1.commands.scanner import OutputScanner, extract_records

__all__ = [
    "Command",
    "InputFormat",
    "OutputFormat",
    "OutputScanner",
    "extract_records",
]
