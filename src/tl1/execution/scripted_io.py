"""
In-memory connection replaying canned responses.

`ScriptedIO` satisfies the `ExpectIO` capability used by `Session`, which
makes it useful for tests and for dry runs against captured output.
"""

import re

from tl1.exceptions import ResponseTimeout
from tl1.execution.session import COMPLD


class ScriptedIO:
    """
    A connection that answers each exact input message with a fixed output.

    Params:
        commands: Mapping of input message to the output it produces
        first_output: Output available before any message is written

    Raises:
        ValueError: If a canned output never completes a command
    """

    def __init__(self, commands: dict[str, str], first_output: str = ""):
        for message, output in commands.items():
            if not COMPLD.search(output):
                raise ValueError(f"incomplete output for {message!r}")

        self.commands = dict(commands)
        self.next_output = first_output
        self.written: list[str] = []

    def expect(self, pattern: re.Pattern, timeout: float | None = None) -> str:
        if not pattern.search(self.next_output):
            raise ResponseTimeout(pattern.pattern, timeout)
        return self.next_output

    def write(self, message: str) -> bool:
        """Select the output for `message`; unknown messages raise KeyError."""
        self.next_output = self.commands[message]
        self.written.append(message)
        return True
