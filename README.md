# fiesta

`fiesta` collects activity records from game servers: chat messages,
item events, moves between servers, and logins and logouts. It turns
each record into a column-oriented insert for an analytical database.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Configuration

`fiesta.config.load_config(path="config.toml")` reads a TOML file into a
`Config`. A `Config` holds a `GeneralConfig` with `address`, the address
to listen on, and a `DatabaseConfig` with `address`, `username` and
`password`. Every value is a string and defaults to empty.

If the file cannot be read, `load_config` writes a file with the empty
defaults at that path and returns those defaults, so the first run leaves
a template to fill in. A file that is not valid TOML raises an error, and
so does a value that is not a string. The section names `General` and
`Database` are matched case-insensitively.

```python
from fiesta.config import load_config

config = load_config("config.toml")
print(config.general.address)
print(config.database.address)
```

`Config.to_dict()` and `Config.from_dict(data)` convert to and from the
nested table layout that the file uses.

## Building inserts

`fiesta.database` has a frozen data class for each kind of record and a
function that turns the record into an `Insert` of named `Column`s:

| Record         | Fields                                                 | Function          | Table      |
|----------------|--------------------------------------------------------|-------------------|------------|
| `ChatData`     | player, message, server, private, cords, time          | `chat_values`     | `chat`     |
| `ItemData`     | player, item, amount, action, server, cords, time      | `item_values`     | `items`    |
| `MovementData` | player, origin, destination, time                      | `movement_values` | `movement` |
| `LoggedData`   | player, server, action, cords, time                    | `logged_values`   | `logged`   |

Times are given in Unix seconds and become UTC `datetime` values.

- A chat row gets two extra columns. `location` is true when the message
  starts with `!` and `command` is true when it starts with `/`. The
  functions `is_location(message)` and `is_command(message)` in
  `fiesta.parse` make the same checks.
- The item amount is stored as an unsigned byte, so only its low 8 bits
  are kept. The item's `action` is not among the inserted columns.
- A movement row stores `origin` and `destination` in the columns `from`
  and `to`.

An `Insert` can be iterated over and has a length. You can look up a
column by name with `insert["player"]`, which raises `KeyError` when the
column is missing. `Insert.names()` lists the column names in order, and
`Insert.into(table)` returns the statement
`INSERT INTO <table> (<columns>) VALUES`.

## Storing records

`Database(executor)` runs queries through a callable that you supply. The
callable is called as `executor(body, insert)`, where `insert` is an
`Insert` or `None`.

- `Database.execute(body, insert=None)` runs one query and returns whether
  it succeeded. Any exception raised by the executor is logged through the
  `fiesta.database` logger and is not raised again.
- `Database.create_tables()` issues `CREATE TABLE IF NOT EXISTS` for the
  `chat`, `items`, `deaths`, `movement` and `logged` tables. It returns
  `True` only if every statement succeeded. The statements are also
  available as `TABLE_SCHEMAS`.

`fiesta.collector.Collector` takes a `Database` and writes each record it
receives as one row:

```python
from fiesta.collector import Collector
from fiesta.database import ChatData, Database

def run_query(body, insert):
    ...  # send the query to your database server

database = Database(run_query)
database.create_tables()

collector = Collector(database)
collector.save_chat_log(ChatData(player="alice", message="!base", server="lobby", time=1700000000))
```

The collector also has `save_item_log`, `save_movement_log` and
`save_logged_log`. These methods return nothing. A failed write is logged
and does not raise.

## Tokens

`fiesta.tokens` signs and checks HS256 tokens that carry a Discord key in
the `discord` claim:

```python
from fiesta.tokens import create_token, verify_token

signed = create_token("discord-user", "secret")
assert verify_token(signed, "secret") == "discord-user"
```

`verify_token` accepts HMAC-signed tokens only. It raises `TokenError` in
these cases:

- the token is malformed;
- it is signed with another key or with a non-HMAC algorithm;
- it carries no string `discord` claim.

`create_token` raises `TokenError` when signing fails.

## What this package does not do

`fiesta` provides no network server and no command to start one. It does
not listen on `GeneralConfig.address`, and it contains no database
client. Connecting to a database and sending the queries is left to the
executor you pass to `Database`. Records reach `Collector` only through
direct calls from your own code.