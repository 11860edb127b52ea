"""Confirmable prompt: read a value, echo it, accept it only on an explicit `y`.

The loop alternates between two states (`PromptState`): waiting for the text
and waiting for its confirmation. It ends either with the confirmed text or
with `None` when the operator types the exit sentinel at the text step.
There is no retry limit; only the operator ends the loop.
"""

from __future__ import annotations

from core.config import EXIT_SENTINEL
from core.domain.models import ConfirmationVerdict, PromptState
from core.interfaces.console import LineConsole
from core.logger import get_logger

logger = get_logger(__name__)

PROMPT_MARKER = ": "
CONFIRM_QUESTION = "Use this value? (y/n): "
EXTRA_CHARACTERS_MESSAGE = (
    "You can enter only 'y' or 'Y' to confirm your choice.",
    "Extra characters in the response aren't recognized.",
)


def reentry_message(exit_sentinel: str = EXIT_SENTINEL) -> str:
    return f"Please re-enter your input, or type '{exit_sentinel}' to cancel input."


def confirm_input(
    label: str,
    console: LineConsole,
    *,
    exit_sentinel: str = EXIT_SENTINEL,
) -> str | None:
    """Prompt for `label` until the operator confirms a value or cancels.

    Args:
        label: Text shown before the prompt marker, e.g. `"ID"` gives `"ID: "`.
        console: Line source/sink (terminal or scripted).
        exit_sentinel: Token that aborts the prompt without a confirmation step.

    Returns:
        The trimmed, confirmed text, or `None` if the operator cancelled.

    Raises:
        InputClosedError: propagated from `console` when input runs out.
    """

    state = PromptState.AWAITING_CONFIRMATION
    pending = ""
    attempts = 0

    while state is PromptState.AWAITING_CONFIRMATION:
        attempts += 1
        pending = console.read_line(f"{label}{PROMPT_MARKER}").strip()

        if pending == exit_sentinel:
            logger.info("Prompt %r cancelled after %d attempt(s)", label.strip(), attempts)
            return None

        console.write_line(f"You entered: {pending}")
        verdict = ConfirmationVerdict.from_reply(console.read_line(CONFIRM_QUESTION))

        if verdict is ConfirmationVerdict.ACCEPTED:
            state = PromptState.CONFIRMED
        elif verdict is ConfirmationVerdict.EXTRA_CHARACTERS:
            for line in EXTRA_CHARACTERS_MESSAGE:
                console.write_line(line)
        else:
            console.write_line(reentry_message(exit_sentinel))

    logger.info("Prompt %r confirmed after %d attempt(s)", label.strip(), attempts)
    logger.debug("Confirmed value for %r: %r", label.strip(), pending)
    return pending
