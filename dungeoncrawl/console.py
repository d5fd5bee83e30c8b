"""Terminal input and output used by the views and controllers."""

import sys
from typing import TextIO

_CLEAR_SCREEN = "\033[2J\033[1;1H"


class Console:
    """Line-oriented access to an input and an output text stream."""

    def __init__(self, input: TextIO | None = None, output: TextIO | None = None) -> None:
        self.input = input if input is not None else sys.stdin
        self.output = output if output is not None else sys.stdout

    def write(self, text: str) -> None:
        """Write ``text`` as it is, without a line break."""
        self.output.write(text)
        self.output.flush()

    def write_line(self, text: str = "") -> None:
        """Write ``text`` followed by a line break."""
        self.write(f"{text}\n")

    def read_line(self) -> str:
        """Read one line without its line break; raise EOFError at end of input."""
        line = self.input.readline()
        if not line:
            raise EOFError("end of input")
        return line.removesuffix("\n")

    def print_dashes(self, count: int) -> None:
        """Write a rule of ``count`` dashes."""
        self.write_line("-" * max(0, count))

    def clear_screen(self) -> None:
        """Clear the terminal and move the cursor to the top left."""
        self.write(_CLEAR_SCREEN)

    def wait_for_keypress(self) -> None:
        """Prompt and wait until a line is entered (or input ends)."""
        self.write("Press Enter to continue...")
        self.input.readline()