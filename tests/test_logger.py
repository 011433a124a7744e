import inspect
import io
from datetime import datetime

import pytest

from basekit.logger import (
    DEFAULT_FORMAT,
    DEFAULT_TIME_FORMAT,
    Info,
    Logger,
    LogLevel,
    Worker,
    parse_format,
    set_default_format,
    stack,
)

RESTORE_TEMPLATE = "#%{id} %{time:%Y-%m-%d %H:%M:%S} %{file}:%{line} ▶ %{lvl} %{message}"


@pytest.fixture(autouse=True)
def restore_defaults():
    yield
    set_default_format(RESTORE_TEMPLATE)


def render(template, **fields):
    fmt, _ = parse_format(template)
    return Info(**fields).output(fmt)


def make_logger(template, *extra):
    out = io.StringIO()
    logger = Logger("mymod", 0, out, LogLevel.DEBUG, *extra)
    logger.set_format(template)
    return logger, out


def test_placeholder_template_matches_default():
    assert parse_format(RESTORE_TEMPLATE) == (DEFAULT_FORMAT, DEFAULT_TIME_FORMAT)


def test_short_template_selects_defaults():
    assert parse_format("%{id}") == (DEFAULT_FORMAT, DEFAULT_TIME_FORMAT)


def test_level_and_message():
    assert render("%{level} %{message}", level=LogLevel.ERROR, message="boom") == "ERROR boom"


def test_short_level():
    assert render("%{lvl}/%{message}", level=LogLevel.CRITICAL, message="m") == "CRI/m"


def test_time_argument_sets_time_format():
    assert parse_format("%{time:%H} %{message}")[1] == "%H"


def test_unknown_placeholder_is_dropped():
    assert render("%{bogus} %{message}", message="x") == " x"


def test_literal_percent_and_braces_survive():
    assert render("100% {literal} %{message}", message="x") == "100% {literal} x"


def test_unterminated_placeholder_before_valid_one():
    assert render("%{bad %{message}", message="x") == "%{bad x"


def test_logger_writes_line():
    logger, out = make_logger("%{module} %{level} %{message}")
    logger.info("hello")
    assert out.getvalue() == "mymod INFO hello\n"


def test_level_filtering():
    logger, out = make_logger("%{level} %{message}")
    logger.set_log_level(LogLevel.WARNING)
    logger.info("hidden")
    logger.debug("hidden")
    assert out.getvalue() == ""
    logger.error("shown")
    assert out.getvalue() == "ERROR shown\n"


def test_colored_output():
    out = io.StringIO()
    logger = Logger("m", 1, out)
    logger.set_format("%{level} %{message}")
    logger.critical("x")
    text = out.getvalue()
    assert text.startswith("\033[35m")
    assert text.endswith("CRITICAL x\033[0m\n")


def test_printf_style_arguments():
    logger, out = make_logger("%{level} %{message}")
    logger.notice("n=%d", 5)
    assert out.getvalue() == "NOTICE n=5\n"


def test_caller_file_and_line():
    logger, out = make_logger("%{file}:%{line} %{message}")
    line = inspect.currentframe().f_lineno + 1
    logger.warning("here")
    assert out.getvalue() == f"test_logger.py:{line} here\n"


def test_ids_increase_by_one():
    logger, out = make_logger("%{id} %{message}")
    logger.info("a")
    logger.info("b")
    first, second = (int(row.split()[0]) for row in out.getvalue().splitlines())
    assert second == first + 1


def test_time_placeholder_uses_its_format():
    logger, out = make_logger("%{time:%Y} %{message}")
    logger.info("t")
    assert out.getvalue() == f"{datetime.now().year} t\n"


def test_fatal_logs_and_exits():
    logger, out = make_logger("%{level} %{message}")
    with pytest.raises(SystemExit) as caught:
        logger.fatal("bye")
    assert caught.value.code == 1
    assert out.getvalue() == "CRITICAL bye\n"


def test_panic_logs_and_raises():
    logger, out = make_logger("%{level} %{message}")
    with pytest.raises(RuntimeError, match="boom 3"):
        logger.panic("boom %d", 3)
    assert out.getvalue() == "CRITICAL boom 3\n"


def test_stack_as_error():
    logger, out = make_logger("%{level} %{message}")
    logger.stack_as_error("")
    text = out.getvalue()
    assert text.startswith("ERROR Stack info\n")
    assert "test_stack_as_error" in text


def test_stack_as_critical_with_message():
    logger, out = make_logger("%{level} %{message}")
    logger.stack_as_critical("trace")
    assert out.getvalue().startswith("CRITICAL trace\n")


def test_stack_contains_caller():
    assert "test_stack_contains_caller" in stack()


def test_unknown_argument_raises():
    with pytest.raises(TypeError):
        Logger(3.5)


def test_worker_without_level_writes_nothing_then_writes_with_prefix():
    out = io.StringIO()
    worker = Worker("pre:", 0, out)
    worker.set_format("%{level} %{message}")
    info = Info(level=LogLevel.CRITICAL, message="m")
    worker.log(LogLevel.CRITICAL, info)
    assert out.getvalue() == ""
    worker.set_log_level(LogLevel.DEBUG)
    worker.log(LogLevel.CRITICAL, info)
    assert out.getvalue() == "pre:CRITICAL m\n"


def test_worker_short_format_keeps_defaults():
    worker = Worker("", 0, io.StringIO())
    worker.set_format("abc")
    assert (worker.format, worker.time_format) == (DEFAULT_FORMAT, DEFAULT_TIME_FORMAT)


def test_set_default_format_applies_to_new_loggers():
    set_default_format("%{level}|%{message}")
    out = io.StringIO()
    Logger(0, out).info("m")
    assert out.getvalue() == "INFO|m\n"