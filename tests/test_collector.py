import pytest

from fiesta.collector import Collector
from fiesta.database import (
    ChatData,
    Database,
    ItemData,
    LoggedData,
    MovementData,
    chat_values,
    item_values,
    logged_values,
    movement_values,
)


class _Recorder:
    def __init__(self, fail=False):
        self.calls = []
        self.fail = fail

    def __call__(self, body, insert):
        self.calls.append((body, insert))
        if self.fail:
            raise RuntimeError("down")


@pytest.fixture
def recorder():
    return _Recorder()


@pytest.fixture
def collector(recorder):
    return Collector(Database(recorder))


def test_save_chat_log(collector, recorder):
    data = ChatData(player="alex", message="!base", server="s", time=5)
    collector.save_chat_log(data)
    ((body, insert),) = recorder.calls
    assert insert == chat_values(data)
    assert body == insert.into("chat")
    assert insert["location"].values == (True,)


def test_save_item_log(collector, recorder):
    data = ItemData(player="alex", item="stone", amount=3)
    collector.save_item_log(data)
    ((body, insert),) = recorder.calls
    assert insert == item_values(data)
    assert body.startswith("INSERT INTO items")


def test_save_movement_log(collector, recorder):
    data = MovementData(player="alex", origin="a", destination="b")
    collector.save_movement_log(data)
    ((body, insert),) = recorder.calls
    assert insert == movement_values(data)
    assert body.startswith("INSERT INTO movement")


def test_save_logged_log(collector, recorder):
    data = LoggedData(player="alex", action=True)
    collector.save_logged_log(data)
    ((body, insert),) = recorder.calls
    assert insert == logged_values(data)
    assert body.startswith("INSERT INTO logged")


def test_failure_is_swallowed():
    recorder = _Recorder(fail=True)
    collector = Collector(Database(recorder))
    assert collector.save_chat_log(ChatData(player="alex")) is None
    assert len(recorder.calls) == 1


def test_calls_accumulate_in_order(collector, recorder):
    logged = LoggedData(player="a")
    movement = MovementData(player="a")
    collector.save_logged_log(logged)
    collector.save_movement_log(movement)
    expected_logged = logged_values(logged)
    expected_movement = movement_values(movement)
    assert recorder.calls == [
        (expected_logged.into("logged"), expected_logged),
        (expected_movement.into("movement"), expected_movement),
    ]