from typing import Any

from .errors import ValidationError
from .types import URL_ACTION, Action, Message

REQUIRED_MESSAGE_KEYS = ("id", "title", "message", "buttons")
REQUIRED_BUTTON_KEYS = ("title", "action")


def is_valid_message(data: Any) -> bool:
    """Structural check of a decoded server response. Never raises."""
    if not isinstance(data, dict):
        return False
    if any(key not in data for key in REQUIRED_MESSAGE_KEYS):
        return False
    buttons = data["buttons"]
    if not isinstance(buttons, list):
        return False
    return all(_is_valid_button(b) for b in buttons)


def _is_valid_button(button: Any) -> bool:
    if not isinstance(button, dict):
        return False
    if any(key not in button for key in REQUIRED_BUTTON_KEYS):
        return False
    if button["action"] == URL_ACTION and not button.get("url"):
        return False
    return True


def parse_message(data: Any) -> Message:
    if not is_valid_message(data):
        raise ValidationError("Received data is not a valid message")
    actions = [
        Action(
            label=b["title"],
            kind=b["action"],
            target=b.get("url"),
            raw=b,
        )
        for b in data["buttons"]
    ]
    return Message(
        id=data["id"],
        title=data["title"],
        body=data["message"],
        actions=actions,
    )
