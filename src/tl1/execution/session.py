"""
Session wrapper around a connection to a TL1-capable network element.

The session never talks to a transport directly. It needs an object with a
`write(message)` method and an `expect(pattern, timeout)` method that blocks
until the received text matches `pattern` and returns that text. Objects
that only offer a telnet-style `waitfor(options)` are adapted by
`WaitforWrapper`. Commands must be issued one at a time; TL1 responses carry
no request identifier the session could use to demultiplex them.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from tl1.commands.command import Command
from tl1.core.types import Record
from tl1.exceptions import UnsupportedIOError

logger = logging.getLogger(__name__)

COMPLD = re.compile(r"COMPLD[\n\r]{1,2}.*;", re.DOTALL)


@runtime_checkable
class ExpectIO(Protocol):
    """Capability needed from a connection: send text, then wait for a pattern."""

    def write(self, message: str) -> Any: ...

    def expect(self, pattern: re.Pattern, timeout: float | None) -> str: ...


@dataclass
class SessionConfig:
    """Configuration for session behavior."""

    timeout: float = 10
    completion_pattern: re.Pattern = COMPLD

    @classmethod
    def from_dict(cls, config: dict | None = None) -> "SessionConfig":
        """Factory method to create config from dict with defaults."""
        if config is None:
            config = {}
        config = dict(config)
        pattern = config.get("completion_pattern")
        if isinstance(pattern, str):
            config["completion_pattern"] = re.compile(pattern, re.DOTALL)
        return cls(**config)


class WaitforWrapper:
    """
    Adapts objects that support `waitfor` but not `expect`.

    `Session` applies it automatically, so it rarely needs to be used
    directly. `waitfor` receives a mapping with `Match` and `Timeout` keys.
    """

    def __init__(self, io):
        self.io = io

    def expect(self, pattern: re.Pattern, timeout: float | None) -> str:
        return self.io.waitfor({"Match": pattern, "Timeout": timeout})

    def write(self, message: str) -> Any:
        return self.io.write(message)


class Session:
    """
    A TL1 session over an established connection.

    Params:
        io: Connection object with `write` and either `expect` or `waitfor`
        config: A `SessionConfig`, or a default timeout in seconds

    Raises:
        UnsupportedIOError: If `io` offers neither `expect` nor `waitfor`
    """

    def __init__(self, io, config: SessionConfig | float | None = None):
        if config is None:
            config = SessionConfig()
        elif not isinstance(config, SessionConfig):
            config = SessionConfig(timeout=config)
        self.config = config

        if isinstance(io, ExpectIO):
            self.io = io
        elif hasattr(io, "waitfor"):
            self.io = WaitforWrapper(io)
        else:
            raise UnsupportedIOError(io)

    def cmd(self, command: Command, /, **values) -> list[Record] | str:
        """Execute a command and return its parsed output."""
        output = self.raw_cmd(command.render_input(values))
        return command.parse_response(output)

    def expect(self, pattern: re.Pattern, timeout: float | None = None) -> str:
        """Receive data until the given pattern is matched."""
        if timeout is None:
            timeout = self.config.timeout
        return self.io.expect(pattern, timeout)

    def raw_cmd(self, message: str, timeout: float | None = None) -> str:
        """Send a message and return the unprocessed response."""
        self.write(message)
        return self.expect(self.config.completion_pattern, timeout)

    def write(self, message: str) -> Any:
        logger.debug("Sending %r", message)
        return self.io.write(message)
