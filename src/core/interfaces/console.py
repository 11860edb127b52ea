"""Line-oriented console contract.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- The rich terminal and the scripted console used in tests are
  interchangeable without coupling the Core to either.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LineConsole(Protocol):
    """Minimal contract for an interactive text stream pair.

    Design rules:
    - `read_line` shows `prompt` without a trailing newline and blocks for one line.
    - `read_line` raises `core.errors.InputClosedError` at end of input.
    - `write_line` always terminates the text with a newline.
    """

    def read_line(self, prompt: str = "") -> str:
        """Show `prompt` and return the next line, without its line terminator."""

        ...

    def write_line(self, text: str = "") -> None:
        """Print `text` followed by a newline."""

        ...
