"""Data-collection flows for login, subscribe and unsubscribe.

The CLI prints headings and notices, then delegates here; these helpers only
drive confirmable prompts and package the answers into domain models, so the
same flows can be reused from tests or another entry point.
"""

from __future__ import annotations

from core.config import EXIT_SENTINEL
from core.domain.models import SubscriberInfo, SubscriptionData
from core.interfaces.console import LineConsole
from core.logger import get_logger
from core.services.confirm_prompt import confirm_input

logger = get_logger(__name__)

EMAIL_LABEL = "\nEmail address (you@example.com)"
SMS_LABEL = "\nPhone number (numbers *only*)"
SUBSCRIBER_ID_LABEL = "\nID"


def collect_subscription_data(
    console: LineConsole,
    *,
    exit_sentinel: str = EXIT_SENTINEL,
) -> SubscriptionData:
    """Ask for an email address, then a phone number.

    Each field is confirmed or cancelled on its own; cancelling the email does
    not skip the phone prompt.
    """

    email = confirm_input(EMAIL_LABEL, console, exit_sentinel=exit_sentinel)
    sms = confirm_input(SMS_LABEL, console, exit_sentinel=exit_sentinel)
    data = SubscriptionData(email=email, sms=sms)
    logger.info(
        "Subscription data collected (email=%s, sms=%s)",
        "set" if data.email is not None else "cancelled",
        "set" if data.sms is not None else "cancelled",
    )
    return data


def collect_subscriber_info(
    console: LineConsole,
    *,
    exit_sentinel: str = EXIT_SENTINEL,
) -> SubscriberInfo:
    """Ask for the subscription id (a confirmed email address or SMS number)."""

    subscription_id = confirm_input(SUBSCRIBER_ID_LABEL, console, exit_sentinel=exit_sentinel)
    info = SubscriberInfo(subscription_id=subscription_id)
    logger.info("Subscriber id %s", "cancelled" if info.cancelled else "collected")
    return info
