import re

import pytest

from displaydev.logger import LogLevel, Logger, log

_TIMESTAMP_LENGTH = len("[2000-01-01 00:00:00.000] ")


@pytest.fixture(autouse=True)
def reset_logger():
    logger = Logger.get()
    logger.set_log_level(LogLevel.info)
    logger.set_custom_callback(None)
    yield
    logger.set_log_level(LogLevel.info)
    logger.set_custom_callback(None)


def test_get_returns_shared_instance():
    first = Logger.get()
    second = Logger.get()
    first.set_log_level(LogLevel.error)
    assert second.is_log_level_enabled(LogLevel.warning) is False
    assert second.is_log_level_enabled(LogLevel.error) is True


def test_default_level_is_info():
    logger = Logger.get()
    assert logger.is_log_level_enabled(LogLevel.info)
    assert logger.is_log_level_enabled(LogLevel.fatal)
    assert not logger.is_log_level_enabled(LogLevel.debug)
    assert not logger.is_log_level_enabled(LogLevel.verbose)


@pytest.mark.parametrize("level", list(LogLevel))
def test_level_threshold(level):
    logger = Logger.get()
    logger.set_log_level(level)
    for other in LogLevel:
        assert logger.is_log_level_enabled(other) == (other >= level)


def test_custom_callback_receives_entries():
    captured = []
    logger = Logger.get()
    logger.set_custom_callback(lambda lvl, value: captured.append((lvl, value)))
    logger.write(LogLevel.warning, "hello")
    log(LogLevel.error, "world")
    assert captured == [(LogLevel.warning, "hello"), (LogLevel.error, "world")]


def test_disabled_level_not_forwarded():
    captured = []
    logger = Logger.get()
    logger.set_custom_callback(lambda lvl, value: captured.append(value))
    logger.set_log_level(LogLevel.error)
    log(LogLevel.warning, "dropped")
    log(LogLevel.fatal, "kept")
    assert captured == ["kept"]


def test_default_output_format(capsys):
    log(LogLevel.info, "hello")
    out = capsys.readouterr().out
    assert out[_TIMESTAMP_LENGTH:] == "INFO:    hello\n"
    prefix = out[:_TIMESTAMP_LENGTH]
    assert bool(re.fullmatch(r"\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3}\] ", prefix)) is True


@pytest.mark.parametrize(
    "level, label",
    [
        (LogLevel.verbose, "VERBOSE: "),
        (LogLevel.debug, "DEBUG:   "),
        (LogLevel.warning, "WARNING: "),
        (LogLevel.error, "ERROR:   "),
        (LogLevel.fatal, "FATAL:   "),
    ],
)
def test_level_labels(capsys, level, label):
    Logger.get().set_log_level(LogLevel.verbose)
    log(level, "msg")
    out = capsys.readouterr().out
    assert out.rstrip("\n").endswith("] " + label + "msg")


def test_disabled_level_prints_nothing(capsys):
    log(LogLevel.debug, "hidden")
    assert capsys.readouterr().out == ""