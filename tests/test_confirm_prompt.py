"""
Tests for the confirmable prompt loop

Tests cover:
- Confirmation with exact 'y'
- Cancellation with the exit sentinel
- Re-prompting after rejected or malformed confirmations
- Whitespace handling
- End of input
"""
import pytest

from core.domain.models import ConfirmationVerdict
from core.errors import InputClosedError
from core.services.confirm_prompt import (
    CONFIRM_QUESTION,
    EXTRA_CHARACTERS_MESSAGE,
    confirm_input,
    reentry_message,
)


class TestConfirmedInput:
    """Tests for accepted values"""

    def test_returns_value_confirmed_with_y(self, scripted):
        console = scripted(["me@example.com", "y"])

        assert confirm_input("Email", console) == "me@example.com"
        assert console.prompts == ["Email: ", CONFIRM_QUESTION]
        assert console.lines == ["You entered: me@example.com"]

    def test_uppercase_y_confirms(self, scripted):
        console = scripted(["12345678910", "Y"])

        assert confirm_input("Phone", console) == "12345678910"

    def test_confirmation_reply_is_trimmed(self, scripted):
        console = scripted(["abc", "  y  "])

        assert confirm_input("ID", console) == "abc"

    def test_surrounding_whitespace_is_stripped_before_echo(self, scripted):
        console = scripted(["   me@example.com \t", "y"])

        assert confirm_input("Email", console) == "me@example.com"
        assert console.lines == ["You entered: me@example.com"]

    def test_empty_value_can_be_confirmed(self, scripted):
        console = scripted(["", "y"])

        assert confirm_input("ID", console) == ""


class TestCancellation:
    """Tests for the exit sentinel"""

    def test_sentinel_cancels_without_confirmation(self, scripted):
        console = scripted([":exit"])

        assert confirm_input("ID", console) is None
        assert console.prompts == ["ID: "]
        assert console.lines == []

    def test_padded_sentinel_still_cancels(self, scripted):
        console = scripted(["  :exit  "])

        assert confirm_input("ID", console) is None

    def test_sentinel_after_rejections_cancels(self, scripted):
        console = scripted(["first", "n", "second", "yes", ":exit"])

        assert confirm_input("ID", console) is None
        assert console.prompts[-1] == "ID: "

    def test_sentinel_is_case_sensitive(self, scripted):
        console = scripted([":EXIT", "y"])

        assert confirm_input("ID", console) == ":EXIT"

    def test_custom_sentinel(self, scripted):
        console = scripted([":exit", "y", "quit"])

        assert confirm_input("ID", console, exit_sentinel="quit") == ":exit"

        console = scripted(["quit"])
        assert confirm_input("ID", console, exit_sentinel="quit") is None

    def test_sentinel_at_confirmation_step_is_a_rejection(self, scripted):
        console = scripted(["value", ":exit", "value", "y"])

        assert confirm_input("ID", console) == "value"
        assert reentry_message() in console.lines


class TestRetries:
    """Tests for the re-prompt paths"""

    def test_yes_gets_extra_characters_message(self, scripted):
        console = scripted(["555-1234", "yes", "555-1234", "y"])

        assert confirm_input("Phone", console) == "555-1234"
        assert console.lines == [
            "You entered: 555-1234",
            *EXTRA_CHARACTERS_MESSAGE,
            "You entered: 555-1234",
        ]

    @pytest.mark.parametrize("reply", ["n", "maybe", "", "no", " N "])
    def test_other_replies_get_reentry_message(self, scripted, reply):
        console = scripted(["value", reply, "value", "y"])

        assert confirm_input("ID", console) == "value"
        assert console.lines[1] == reentry_message()
        assert EXTRA_CHARACTERS_MESSAGE[0] not in console.lines

    def test_reentry_message_names_configured_sentinel(self, scripted):
        console = scripted(["value", "n", "quit"])

        confirm_input("ID", console, exit_sentinel="quit")

        assert console.lines[1] == "Please re-enter your input, or type 'quit' to cancel input."

    def test_label_is_shown_again_on_every_attempt(self, scripted):
        console = scripted(["a", "n", "b", "yep", "c", "y"])

        assert confirm_input("\nID", console) == "c"
        assert [p for p in console.prompts if p != CONFIRM_QUESTION] == ["\nID: "] * 3

    def test_latest_value_wins(self, scripted):
        console = scripted(["old", "n", "new", "y"])

        assert confirm_input("ID", console) == "new"


class TestEndOfInput:
    """Tests for a closed input stream"""

    def test_eof_at_text_step_propagates(self, scripted):
        console = scripted([])

        with pytest.raises(InputClosedError):
            confirm_input("ID", console)

    def test_eof_at_confirmation_step_propagates(self, scripted):
        console = scripted(["value"])

        with pytest.raises(InputClosedError) as excinfo:
            confirm_input("ID", console)
        assert excinfo.value.prompt == CONFIRM_QUESTION

    def test_input_closed_is_an_eof_error(self):
        assert issubclass(InputClosedError, EOFError)


class TestConfirmationVerdict:
    """Tests for reply classification"""

    @pytest.mark.parametrize(
        "reply, verdict",
        [
            ("y", ConfirmationVerdict.ACCEPTED),
            ("Y", ConfirmationVerdict.ACCEPTED),
            (" y\n", ConfirmationVerdict.ACCEPTED),
            ("yes", ConfirmationVerdict.EXTRA_CHARACTERS),
            ("YY", ConfirmationVerdict.EXTRA_CHARACTERS),
            ("n", ConfirmationVerdict.REJECTED),
            ("", ConfirmationVerdict.REJECTED),
            ("okay", ConfirmationVerdict.REJECTED),
        ],
    )
    def test_from_reply(self, reply, verdict):
        assert ConfirmationVerdict.from_reply(reply) is verdict
