import re

import pytest

from multilog import (
    create_logger, LoggerFactory, LoggerConfig,
    InvalidDestinationError, UnknownLevelError, WriteFault,
)
from multilog.adapters import ConsoleAdapter, FileAdapter, HtmlAdapter
from multilog.styles import strip_ansi

STAMP_RE = re.compile(r"\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\]")

def wait_all(futures):
    for f in futures:
        f.result(timeout=5)


def test_default_logger(capsys):
    logger = create_logger()
    assert len(logger.adapters) == 1
    assert isinstance(logger.adapters[0], ConsoleAdapter)
    assert set(logger.adapters[0].colorizer.levels) == {"info", "warning", "error", "yolo"}
    logger.log("info", "hello there")
    out = strip_ansi(capsys.readouterr().out)
    assert STAMP_RE.match(out)
    assert out.endswith("] info: hello there\n")
    with pytest.raises(UnknownLevelError):
        logger.log("nonexistent", "m")


def test_three_outputs_in_config_order(tmp_path, capsys):
    log_path = tmp_path / "x.log"
    html_path = tmp_path / "y.html"
    logger = create_logger({"output": {"console": "", "file": str(log_path), "html": str(html_path)}})
    assert [type(a) for a in logger.adapters] == [ConsoleAdapter, FileAdapter, HtmlAdapter]

    wait_all(logger.log("info", "m"))
    wait_all(logger.log("info", "m"))

    lines = log_path.read_text().splitlines()
    assert len(lines) == 2
    for line in lines:
        assert STAMP_RE.match(line) and line.endswith("] info: m")
    frags = html_path.read_text().splitlines()
    assert len(frags) == 2
    assert all(f.startswith("<p>") and f.endswith("<span>: m</span></p>") for f in frags)
    assert strip_ansi(capsys.readouterr().out).count("info: m") == 2


def test_output_order_follows_mapping(tmp_path):
    logger = create_logger({"output": {"html": str(tmp_path / "a.html"), "console": None}})
    assert [a.name for a in logger.adapters] == ["html", "console"]


def test_shared_colorizer(tmp_path):
    logger = create_logger({"output": {"console": "", "file": str(tmp_path / "a.txt")}})
    first, second = logger.adapters
    assert first.colorizer is second.colorizer


def test_unknown_output_keys_ignored(tmp_path):
    logger = create_logger({"output": {"syslog": "whatever", "file": str(tmp_path / "a.log")}})
    assert [a.name for a in logger.adapters] == ["file"]


def test_bad_destination_aborts_construction(tmp_path):
    with pytest.raises(InvalidDestinationError):
        create_logger({"output": {"console": "", "file": str(tmp_path / "out.csv")}})
    assert not (tmp_path / "out.csv").exists()


def test_unknown_level_writes_no_records(tmp_path, capsys):
    log_path = tmp_path / "x.log"
    html_path = tmp_path / "y.html"
    logger = create_logger({"output": {"console": "", "file": str(log_path), "html": str(html_path)}})
    with pytest.raises(UnknownLevelError):
        logger.log("nonexistent", "m")
    assert capsys.readouterr().out == ""
    assert not log_path.exists()
    assert not html_path.exists()


def test_custom_levels(tmp_path):
    log_path = tmp_path / "x.log"
    logger = create_logger(LoggerConfig(levels={"myLevel": "magenta"}, output={"file": str(log_path)}))
    wait_all(logger.log("myLevel", "asd"))
    assert log_path.read_text().endswith("] myLevel: asd\n")
    with pytest.raises(UnknownLevelError):
        logger.log("info", "dropped with the defaults")


def test_deferred_log_matches_direct_log(capsys):
    logger = create_logger()
    logger.log("warning", "w")
    direct = strip_ansi(capsys.readouterr().out)
    done = []
    logger.make_deferred_log("warning", "w")(lambda: done.append(1))
    deferred = strip_ansi(capsys.readouterr().out)
    assert done == [1]
    assert STAMP_RE.match(deferred)
    assert deferred.split("] ", 1)[1] == direct.split("] ", 1)[1] == "warning: w\n"


def test_factory_alias(tmp_path):
    logger = LoggerFactory.create_logger({"output": {"file": str(tmp_path / "a.log")}})
    wait_all(logger.log("yolo", "alias"))
    assert (tmp_path / "a.log").read_text().endswith("] yolo: alias\n")


def test_empty_output_means_no_adapters(capsys):
    logger = create_logger({"output": {}})
    assert logger.adapters == ()
    assert logger.log("info", "nowhere") == []
    assert capsys.readouterr().out == ""


def test_write_fault_through_logger(tmp_path):
    dest = tmp_path / "missing" / "x.log"
    logger = create_logger({"output": {"file": str(dest)}})
    (future,) = logger.log("info", "m")
    with pytest.raises(WriteFault) as ei:
        future.result(timeout=5)
    assert ei.value.path == str(dest)
