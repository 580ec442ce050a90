import logging

from pytest_mock import MockerFixture

from curlbridge.logging import ColorizedFormatter, getLogger, logger, LogLevel


def _record(level: int) -> logging.LogRecord:
    return logging.LogRecord("curlbridge", level, __file__, 1, "hello %s", ("x",), None)


def test_log_level():
    assert LogLevel.DEBUG == logging.DEBUG
    assert LogLevel["ERROR"] == logging.ERROR


def test_get_level_color():
    assert ColorizedFormatter.get_level_color(logging.DEBUG) == "\u001b[38;5;14m"
    assert ColorizedFormatter.get_level_color(logging.CRITICAL) == "\u001b[38;5;124m"


def test_format__color(mocker: MockerFixture):
    mocker.patch("curlbridge.logging.settings.NO_COLOR", False)
    record = _record(logging.WARNING)

    out = ColorizedFormatter("%(levelname)s %(message)s").format(record)

    assert out.startswith("\u001b[38;5;214mWARNING ")
    assert out.endswith("hello x")
    assert record.levelname == "WARNING", "Expected the record to be left untouched."


def test_format__no_color(mocker: MockerFixture):
    mocker.patch("curlbridge.logging.settings.NO_COLOR", True)

    out = ColorizedFormatter("%(levelname)s %(message)s").format(_record(logging.INFO))

    assert out == "INFO hello x"


def test_get_logger__copies_level():
    previous = logger.level
    logger.setLevel(logging.DEBUG)
    try:
        assert getLogger("curlbridge.test").level == logging.DEBUG
    finally:
        logger.setLevel(previous)
