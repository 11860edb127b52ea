"""Domain models (Pydantic v2 and enums).

Why here:
- These types describe *what* the operator entered and *where* the prompt
  loop stands, not *how* it is read from the terminal.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class PromptState(str, Enum):
    """Where a confirmable prompt stands in its loop."""

    AWAITING_CONFIRMATION = "awaiting_confirmation"
    CONFIRMED = "confirmed"


class ConfirmationVerdict(str, Enum):
    """Classification of the answer to `Use this value? (y/n)`."""

    ACCEPTED = "accepted"
    EXTRA_CHARACTERS = "extra_characters"
    REJECTED = "rejected"

    @classmethod
    def from_reply(cls, reply: str) -> "ConfirmationVerdict":
        answer = reply.strip().lower()
        if answer == "y":
            return cls.ACCEPTED
        if answer.startswith("y"):
            return cls.EXTRA_CHARACTERS
        return cls.REJECTED


class MenuOption(str, Enum):
    """Entries of the splash menu, in display order."""

    LOGIN = "login"
    SUBSCRIBE = "subscribe"
    UNSUBSCRIBE = "unsubscribe"

    @property
    def number(self) -> int:
        return list(MenuOption).index(self) + 1

    @classmethod
    def from_response(cls, response: str) -> "MenuOption | None":
        """Parse a menu answer by number or name; case and padding are ignored."""

        answer = response.strip().lower()
        for option in cls:
            if answer in (str(option.number), option.value):
                return option
        return None


class SubscriptionData(BaseModel):
    """Values captured by the subscribe flow.

    `None` means the operator cancelled that field with the exit sentinel.
    """

    model_config = ConfigDict(frozen=True)

    email: str | None = Field(
        default=None,
        description="Confirmed email address.",
    )
    sms: str | None = Field(
        default=None,
        description="Confirmed phone number able to receive SMS.",
    )

    @property
    def is_empty(self) -> bool:
        return self.email is None and self.sms is None


class SubscriberInfo(BaseModel):
    """Value captured by the login and unsubscribe flows."""

    model_config = ConfigDict(frozen=True)

    subscription_id: str | None = Field(
        default=None,
        description="Confirmed email address or SMS number identifying the subscriber.",
    )

    @property
    def cancelled(self) -> bool:
        return self.subscription_id is None
