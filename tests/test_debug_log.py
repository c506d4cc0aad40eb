import io
import logging
import re

import pytest

from snipekit.core.debug_log import DebugLog, configure_logging


RECORD_RE = re.compile(r"\n\n\*\*\* \d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{6} ")


@pytest.fixture
def debug_log():
    log = DebugLog(debug=True)
    yield log
    log.close()


def test_open_names_file_by_program(debug_log, tmp_path):
    assert debug_log.open("snipekit", log_dir=tmp_path)
    assert debug_log.path == tmp_path / "snipekit.log"
    assert debug_log.path.exists()


def test_open_names_file_by_auction(debug_log, tmp_path):
    assert debug_log.open("snipekit", auction="1234567890", log_dir=tmp_path)
    assert debug_log.path == tmp_path / "snipekit.1234567890.log"


def test_write_record_format(debug_log, tmp_path):
    debug_log.open("snipekit", log_dir=tmp_path)
    debug_log.write("first")
    debug_log.write("second")
    debug_log.close()

    content = (tmp_path / "snipekit.log").read_text()
    records = RECORD_RE.split(content)
    assert records == ["", "first", "second"]


def test_open_appends(tmp_path):
    with DebugLog() as log:
        log.open("snipekit", log_dir=tmp_path)
        log.write("one")

    with DebugLog() as log:
        log.open("snipekit", log_dir=tmp_path)
        log.write("two")

    content = (tmp_path / "snipekit.log").read_text()
    assert content.index("one") < content.index("two")


def test_write_when_closed_is_noop(debug_log):
    debug_log.write("nothing")
    assert not debug_log.is_open


def test_open_failure_is_not_fatal(debug_log, tmp_path, capsys):
    missing = tmp_path / "missing" / "dir"
    assert not debug_log.open("snipekit", log_dir=missing)
    assert not debug_log.is_open
    assert "Unable to open log file" in capsys.readouterr().err


def test_reopen_closes_previous(debug_log, tmp_path):
    debug_log.open("snipekit", auction="1", log_dir=tmp_path)
    debug_log.open("snipekit", auction="2", log_dir=tmp_path)
    debug_log.write("bid")
    debug_log.close()

    assert "bid" not in (tmp_path / "snipekit.1.log").read_text()
    assert "bid" in (tmp_path / "snipekit.2.log").read_text()


def test_print_log_writes_stream_and_file(debug_log, tmp_path):
    debug_log.open("snipekit", log_dir=tmp_path)
    stream = io.StringIO()

    debug_log.print_log(stream, "Cannot reach server\n")
    debug_log.close()

    assert stream.getvalue() == "Cannot reach server\n"
    assert "Cannot reach server" in (tmp_path / "snipekit.log").read_text()


def test_print_log_without_debug_skips_file(tmp_path):
    log = DebugLog(debug=False)
    log.open("snipekit", log_dir=tmp_path)
    stream = io.StringIO()

    log.print_log(stream, "quiet")
    log.close()

    assert stream.getvalue() == "quiet"
    assert (tmp_path / "snipekit.log").read_text() == ""


def test_log_char(debug_log, tmp_path):
    debug_log.open("snipekit", log_dir=tmp_path)
    for c in "<html>":
        debug_log.log_char(c)
    debug_log.log_char(None)

    assert (tmp_path / "snipekit.log").read_text() == "<html>"


def test_configure_logging_attaches_handler():
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    package_logger = logging.getLogger("snipekit")

    try:
        configure_logging(level=logging.DEBUG, format_string="%(name)s %(message)s", handler=handler)
        logging.getLogger("snipekit.test").debug("hello")
    finally:
        package_logger.removeHandler(handler)
        package_logger.setLevel(logging.NOTSET)

    assert stream.getvalue() == "snipekit.test hello\n"


def test_open_logs_write_only_to_their_own_file(tmp_path):
    first = DebugLog()
    second = DebugLog()
    try:
        first.open("snipekit", auction="111", log_dir=tmp_path)
        second.open("snipekit", auction="222", log_dir=tmp_path)

        first.write("only-for-first")
        second.write("only-for-second")
    finally:
        first.close()
        second.close()

    first_text = (tmp_path / "snipekit.111.log").read_text()
    second_text = (tmp_path / "snipekit.222.log").read_text()
    assert "only-for-first" in first_text
    assert "only-for-second" not in first_text
    assert "only-for-second" in second_text
    assert "only-for-first" not in second_text


def test_debug_log_does_not_reach_package_logger(tmp_path):
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    package_logger = logging.getLogger("snipekit")
    package_logger.addHandler(handler)

    try:
        with DebugLog() as log:
            log.open("snipekit", log_dir=tmp_path)
            log.write("file only")
    finally:
        package_logger.removeHandler(handler)

    assert "file only" not in stream.getvalue()


def test_configure_logging_replaces_previous_handler():
    first = logging.StreamHandler(io.StringIO())
    second = logging.StreamHandler(io.StringIO())
    package_logger = logging.getLogger("snipekit")

    try:
        configure_logging(handler=first)
        configure_logging(handler=second)

        assert first not in package_logger.handlers
        assert second in package_logger.handlers
    finally:
        package_logger.removeHandler(second)
        package_logger.setLevel(logging.NOTSET)
