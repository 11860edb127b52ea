"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Lets the splash screen and every flow reuse the same panels.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from core.domain.models import MenuOption, SubscriberInfo, SubscriptionData

CANCELLED = "(cancelled)"
NOTHING_ENTERED = "(nothing entered)"

_HEADINGS = {
    MenuOption.LOGIN: "Log in to {site}",
    MenuOption.SUBSCRIBE: "Subscribe to {site}",
    MenuOption.UNSUBSCRIBE: "Unsubscribe from {site}",
}


def print_banner(console: Console, site_name: str) -> None:
    """Print the welcome banner.

    Why here:
    - Avoids circular imports (main <-> doctor).
    - Can be switched off (`FROBOTZ_SHOW_BANNER=false`) for scripted sessions.
    """

    title = Text(f"Welcome to {site_name}!", style="bold cyan")
    body = Align.center(title, vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_menu_panel() -> Panel:
    """Panel listing the menu options by number and name."""

    body = Text()
    body.append("Choose one of the following options:\n\n")
    for option in MenuOption:
        body.append(f"{option.number}. ", style="bold")
        body.append(f"{option.value}\n")
    body.append("\nYou can enter either the option number or name here.\n", style="dim")
    body.append("Case is irrelevant.", style="dim")
    return Panel(body, border_style="cyan")


def flow_heading(option: MenuOption, site_name: str) -> Text:
    return Text(f"\n** {_HEADINGS[option].format(site=site_name)} **", style="bold")


def build_subscription_notice() -> Panel:
    body = Text()
    body.append("How would you like to subscribe? You can subscribe with either:\n\n")
    body.append("* your email address\n")
    body.append("* your phone number\n\n")
    body.append("Note: your phone must be able to accept SMS messages to subscribe by phone.\n\n", style="dim")
    body.append("Please enter one, or both, of these values now.")
    return Panel(body, border_style="yellow")


def build_subscriber_notice(exit_sentinel: str) -> Panel:
    body = Text()
    body.append("Enter your subscription id. This can be either your confirmed email ")
    body.append("address or sms phone number.\n\n")
    body.append(f"Enter '{exit_sentinel}' to cancel.", style="dim")
    return Panel(body, border_style="yellow")


def build_subscription_result(data: SubscriptionData) -> Text:
    """Plain summary of the subscribe flow, one line per channel."""

    if data.is_empty:
        return Text(f"  {NOTHING_ENTERED}")
    return Text(
        f"  email: {data.email if data.email is not None else CANCELLED}\n"
        f"  sms: {data.sms if data.sms is not None else CANCELLED}"
    )


def build_subscriber_result(info: SubscriberInfo) -> Text:
    return Text(f"  {CANCELLED if info.cancelled else info.subscription_id}")
