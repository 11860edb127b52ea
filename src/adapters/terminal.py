"""Rich-backed implementation of `LineConsole`.

Why a wrapper:
- Rich owns styling and output; the prompt loop only needs lines in and out.
- End of input becomes a typed `InputClosedError` instead of a bare EOFError
  or an empty string, whichever the underlying stream produces.
"""

from __future__ import annotations

from typing import TextIO

from rich.console import Console

from core.errors import InputClosedError
from core.logger import get_logger

logger = get_logger(__name__)


class RichTerminal:
    """Reads and writes plain lines through a `rich.console.Console`.

    `stream` is optional: when unset, rich falls back to the builtin `input()`,
    which reads `sys.stdin`.
    """

    def __init__(self, console: Console | None = None, *, stream: TextIO | None = None) -> None:
        self.console = console or Console(highlight=False)
        self._stream = stream

    def read_line(self, prompt: str = "") -> str:
        try:
            line = self.console.input(prompt, markup=False, emoji=False, stream=self._stream)
        except EOFError as exc:
            logger.debug("Input closed at prompt %r", prompt.strip())
            raise InputClosedError(prompt) from exc

        # readline() signals EOF with an empty string rather than an exception.
        if self._stream is not None and line == "":
            logger.debug("Input closed at prompt %r", prompt.strip())
            raise InputClosedError(prompt)
        return line.rstrip("\r\n")

    def write_line(self, text: str = "") -> None:
        self.console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)
