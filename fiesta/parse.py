"""Classification of chat messages."""


def is_location(message: str) -> bool:
    """Return True when the message shares a location (starts with ``!``)."""
    return message.startswith("!")


def is_command(message: str) -> bool:
    """Return True when the message is a command (starts with ``/``)."""
    return message.startswith("/")