"""Error taxonomy of the application.

Cancelling a prompt is not an error (it yields `None`); only conditions the
operator cannot recover from inside the prompt loop live here.
"""

from __future__ import annotations


class FrobotzError(Exception):
    """Base class for application errors."""


class InputClosedError(FrobotzError, EOFError):
    """The interactive input stream reached end of file while a prompt was waiting."""

    def __init__(self, prompt: str = "") -> None:
        self.prompt = prompt
        label = prompt.strip().rstrip(":").strip()
        message = "input stream closed"
        if label:
            message = f"{message} while waiting for {label!r}"
        super().__init__(message)
