import logging

import pytest

from connect4engine.debug import DebugLevel, DebugManager, LOGGER_NAME


@pytest.fixture
def manager():
    mgr = DebugManager(level=DebugLevel.DEBUG)
    yield mgr
    mgr.configure(level=DebugLevel.WARNING, log_file="", components=[])


def test_messages_are_tagged_with_component(manager, caplog):
    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        manager.info("hello", "board")
    assert "[board] hello" in caplog.text


def test_level_filters_messages(manager, caplog):
    manager.configure(level=DebugLevel.WARNING)
    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        manager.info("quiet")
        manager.error("loud")
    assert "quiet" not in caplog.text
    assert "loud" in caplog.text


def test_component_filter(manager, caplog):
    manager.configure(components=["ai"])
    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        manager.debug("from ai", "ai")
        manager.debug("from board", "board")
    assert "from ai" in caplog.text
    assert "from board" not in caplog.text


def test_disabled_manager_is_silent(manager, caplog):
    manager.configure(enabled=False)
    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        manager.error("nothing")
    assert caplog.text == ""
    manager.configure(enabled=True)


def test_set_from_string(manager):
    assert manager.set_from_string("trace")
    assert manager._level == DebugLevel.TRACE
    assert not manager.set_from_string("chatty")
    assert manager._level == DebugLevel.TRACE


def test_timer(manager):
    manager.start_timer("win_check")
    elapsed = manager.end_timer("win_check")
    assert elapsed is not None and elapsed >= 0
    assert manager.end_timer("win_check") is None


def test_log_file(manager, tmp_path):
    path = tmp_path / "engine.log"
    manager.configure(log_file=str(path))
    manager.warning("to the file", "game")
    manager.configure(log_file="")

    assert "[game] to the file" in path.read_text()
