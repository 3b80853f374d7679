import logging

from logger import LOG_FORMAT, configure_logging, get_logger, log_error


def test_configure_logging_is_idempotent():
    first = configure_logging("INFO")
    second = configure_logging("DEBUG")
    assert first is second
    assert logging.getLogger().level == logging.DEBUG
    named = [h for h in logging.getLogger().handlers if h.get_name() == first.get_name()]
    assert len(named) == 1
    configure_logging("INFO")


def test_format_carries_context():
    formatter = logging.Formatter(LOG_FORMAT)
    record = logging.LogRecord("quotes", logging.WARNING, __file__, 1, "hello", None, None)
    line = formatter.format(record)
    assert line.endswith("[WARNING] [quotes] hello")


def test_log_error_appends_exception(caplog):
    logger = get_logger("calculator")
    with caplog.at_level(logging.ERROR, logger="calculator"):
        log_error(logger, "Calculation failed", ValueError("bad input"))
        log_error(logger, "Plain failure")
    assert caplog.messages == ["Calculation failed - bad input", "Plain failure"]
