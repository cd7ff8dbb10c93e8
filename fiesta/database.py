"""Column inserts for the event log tables and the database that runs them."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from fiesta.parse import is_command, is_location

logger = logging.getLogger(__name__)

TABLE_SCHEMAS: tuple[str, ...] = (
    "CREATE TABLE IF NOT EXISTS chat (player String, message String, realm String, "
    "location Bool, command Bool, private Bool, cords String, server String, time DateTime) "
    "ENGINE = MergeTree() ORDER BY time;",
    "CREATE TABLE IF NOT EXISTS items (player String, item String, amount UInt8, action Bool, "
    "realm String, cords String, server String, time DateTime) "
    "ENGINE = MergeTree() ORDER BY time;",
    "CREATE TABLE IF NOT EXISTS deaths (player String, inventory String, reason String, "
    "realm String, cords String, server String, time DateTime) "
    "ENGINE = MergeTree() ORDER BY time;",
    "CREATE TABLE IF NOT EXISTS movement (player String, from String, to String, "
    "server String, time DateTime) ENGINE = MergeTree() ORDER BY time;",
    "CREATE TABLE IF NOT EXISTS logged (player String, action Bool, realm String, "
    "cords String, server String, time DateTime) ENGINE = MergeTree() ORDER BY time;",
)


@dataclass(frozen=True)
class ChatData:
    """A chat message sent by a player."""

    player: str = ""
    message: str = ""
    server: str = ""
    private: bool = False
    cords: str = ""
    time: int = 0


@dataclass(frozen=True)
class ItemData:
    """An item picked up or dropped by a player."""

    player: str = ""
    item: str = ""
    amount: int = 0
    action: bool = False
    server: str = ""
    cords: str = ""
    time: int = 0


@dataclass(frozen=True)
class MovementData:
    """A player moving from one server to another."""

    player: str = ""
    origin: str = ""
    destination: str = ""
    time: int = 0


@dataclass(frozen=True)
class LoggedData:
    """A player logging in or out."""

    player: str = ""
    server: str = ""
    action: bool = False
    cords: str = ""
    time: int = 0


@dataclass(frozen=True)
class Column:
    """A named column and the values it carries."""

    name: str
    values: tuple[Any, ...] = ()


@dataclass(frozen=True)
class Insert:
    """An ordered set of columns to be inserted into one table."""

    columns: tuple[Column, ...] = field(default_factory=tuple)

    def names(self) -> list[str]:
        """Return the column names in order."""
        return [column.name for column in self.columns]

    def into(self, table: str) -> str:
        """Return the INSERT statement for ``table`` with these columns."""
        return f"INSERT INTO {table} ({', '.join(self.names())}) VALUES"

    def __iter__(self) -> Iterator[Column]:
        return iter(self.columns)

    def __len__(self) -> int:
        return len(self.columns)

    def __getitem__(self, name: str) -> Column:
        for column in self.columns:
            if column.name == name:
                return column
        raise KeyError(name)


def _timestamp(seconds: int) -> datetime:
    return datetime.fromtimestamp(int(seconds), tz=timezone.utc)


def _insert(**values: Any) -> Insert:
    return Insert(tuple(Column(name, (value,)) for name, value in values.items()))


def chat_values(data: ChatData) -> Insert:
    """Build the row for the ``chat`` table."""
    return _insert(
        player=data.player,
        message=data.message,
        server=data.server,
        location=is_location(data.message),
        command=is_command(data.message),
        private=data.private,
        cords=data.cords,
        time=_timestamp(data.time),
    )


def item_values(data: ItemData) -> Insert:
    """Build the row for the ``items`` table; the amount is stored as an unsigned byte."""
    return _insert(
        player=data.player,
        item=data.item,
        amount=data.amount & 0xFF,
        server=data.server,
        cords=data.cords,
        time=_timestamp(data.time),
    )


def movement_values(data: MovementData) -> Insert:
    """Build the row for the ``movement`` table."""
    return Insert(
        (
            Column("player", (data.player,)),
            Column("from", (data.origin,)),
            Column("to", (data.destination,)),
            Column("time", (_timestamp(data.time),)),
        )
    )


def logged_values(data: LoggedData) -> Insert:
    """Build the row for the ``logged`` table."""
    return _insert(
        player=data.player,
        server=data.server,
        action=data.action,
        cords=data.cords,
        time=_timestamp(data.time),
    )


Executor = Callable[[str, "Insert | None"], Any]


class Database:
    """Runs queries through an executor, logging and swallowing failures."""

    def __init__(self, executor: Executor) -> None:
        self._executor = executor

    def create_tables(self) -> bool:
        """Create every log table that does not exist yet; True if all succeeded."""
        results = [self.execute(schema) for schema in TABLE_SCHEMAS]
        return all(results)

    def execute(self, body: str, insert: Insert | None = None) -> bool:
        """Run one query; return False and log the error when it fails."""
        try:
            self._executor(body, insert)
        except Exception as exc:  # noqa: BLE001 - any failure of the backend is reported the same way
            logger.error("failed to execute query: %s", exc)
            return False
        return True


def _as_sequence(insert: Insert) -> Sequence[Column]:
    return insert.columns