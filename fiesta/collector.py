"""Collector service storing game events in the log tables."""

from __future__ import annotations

from fiesta.database import (
    ChatData,
    Database,
    Insert,
    ItemData,
    LoggedData,
    MovementData,
    chat_values,
    item_values,
    logged_values,
    movement_values,
)


class Collector:
    """Receives game events and writes each one as a row; failures are logged only."""

    def __init__(self, database: Database) -> None:
        self._database = database

    def _save(self, table: str, insert: Insert) -> None:
        self._database.execute(insert.into(table), insert)

    def save_chat_log(self, data: ChatData) -> None:
        """Store a chat message in the ``chat`` table."""
        self._save("chat", chat_values(data))

    def save_item_log(self, data: ItemData) -> None:
        """Store an item event in the ``items`` table."""
        self._save("items", item_values(data))

    def save_movement_log(self, data: MovementData) -> None:
        """Store a server change in the ``movement`` table."""
        self._save("movement", movement_values(data))

    def save_logged_log(self, data: LoggedData) -> None:
        """Store a login or logout in the ``logged`` table."""
        self._save("logged", logged_values(data))