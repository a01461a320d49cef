"""
TL1 command execution over an established connection.
"""

from tl1.execution.scripted_io import ScriptedIO
from tl1.execution.session import (
    COMPLD,
    ExpectIO,
    Session,
    SessionConfig,
    WaitforWrapper,
)

__all__ = [
    "COMPLD",
    "ExpectIO",
    "ScriptedIO",
    "Session",
    "SessionConfig",
    "WaitforWrapper",
]
