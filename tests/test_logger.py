import errno
import inspect
import pathlib

import pytest

from daybook import logger as logger_module
from daybook.config import settings
from daybook.levels import Level
from daybook.logger import TagLogger
from daybook.modes import OutputMode


@pytest.fixture
def file_logger(tmp_path, clock):
    log = TagLogger("app", output_mode=OutputMode.FILE, log_dir=tmp_path, clock=clock)
    yield log
    log.dispose()


@pytest.fixture
def console_logger(clock):
    return TagLogger("app", output_mode="console", clock=clock)


def test_file_mode_persists_only_error_and_above(file_logger, tmp_path):
    file_logger.i("hello")
    file_logger.e("boom")
    file_logger.dispose()

    lines = (tmp_path / "20240115.log").read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    assert lines[0].startswith("[app] ERROR [test_logger.py:")
    assert lines[0].endswith("[2024-01-15 12:00:00] boom")


def test_file_min_level_is_configurable(tmp_path, clock):
    with TagLogger(
        "app", output_mode="file", log_dir=tmp_path, clock=clock, file_min_level="warning"
    ) as log:
        log.d("skip")
        log.w("keep")
        log.f("also keep")

    lines = (tmp_path / "20240115.log").read_text(encoding="utf-8").splitlines()
    assert [line.split("] ")[-1] for line in lines] == ["keep", "also keep"]


def test_file_mode_rotates_with_clock(file_logger, tmp_path, clock):
    file_logger.e("monday")
    clock.advance(days=1)
    file_logger.e("tuesday")
    file_logger.dispose()

    assert (tmp_path / "20240115.log").read_text(encoding="utf-8").endswith("monday\n")
    assert (tmp_path / "20240116.log").read_text(encoding="utf-8").endswith("tuesday\n")


def test_disabled_logger_does_nothing(file_logger, tmp_path, monkeypatch):
    calls = []
    file_logger.set_log_listener(lambda level, line: calls.append(level))

    def fail(*args, **kwargs):
        raise AssertionError("caller lookup must be skipped while disabled")

    monkeypatch.setattr(logger_module, "resolve_caller", fail)
    file_logger.set_enable(False)
    for method in (file_logger.v, file_logger.d, file_logger.i, file_logger.w, file_logger.e):
        method("silenced")

    assert calls == []
    assert list(tmp_path.iterdir()) == []

    monkeypatch.undo()
    file_logger.set_enable(True)
    file_logger.e("back")
    assert calls == [Level.ERROR]


def test_listener_receives_dispatched_line(console_logger, capsys):
    calls = []
    console_logger.set_log_listener(lambda level, line: calls.append((level, line)))

    console_logger.w("heads up")

    out = capsys.readouterr().out.strip()
    assert calls == [(Level.WARNING, out)]


def test_listener_not_called_for_dropped_file_records(file_logger):
    calls = []
    file_logger.set_log_listener(lambda level, line: calls.append(line))
    file_logger.i("dropped")
    assert calls == []


def test_listener_errors_are_isolated(console_logger, diagnostics, capsys):
    def broken(level, line):
        raise RuntimeError("listener bug")

    console_logger.set_log_listener(broken)
    console_logger.i("still fine")

    assert "still fine" in capsys.readouterr().out
    assert any("listener" in r["message"] for r in diagnostics)


def test_console_line_includes_call_site(console_logger, capsys):
    line = inspect.currentframe().f_lineno + 1
    console_logger.i("located")
    out = capsys.readouterr().out.strip()
    assert out == f"{Level.INFO.emoji} [test_logger.py:{line}] [12:00:00] located"


def test_console_line_without_caller_lookup(clock, capsys, monkeypatch):
    def unavailable(*args, **kwargs):
        raise RuntimeError("no stack")

    monkeypatch.setattr(logger_module, "resolve_caller", unavailable)
    TagLogger("app", output_mode="console", clock=clock).d("still logged")

    assert capsys.readouterr().out.strip() == f"{Level.DEBUG.emoji} [12:00:00] still logged"


def test_console_line_number_can_be_disabled(clock, capsys):
    log = TagLogger("app", output_mode="console", clock=clock, enable_file_line_number=False)
    log.v(None)
    assert capsys.readouterr().out == f"{Level.VERBOSE.emoji} [12:00:00] \n"


def test_console_mode_never_touches_files(console_logger):
    assert console_logger.file_sink is None
    console_logger.dispose()


def test_off_level_is_never_emitted(console_logger, capsys):
    console_logger.log(Level.OFF, "invisible")
    console_logger.log("info", "visible")
    out = capsys.readouterr().out
    assert "invisible" not in out
    assert "visible" in out


def test_mode_defaults_follow_settings(monkeypatch, tmp_path, clock):
    monkeypatch.setattr(settings, "debug", True)
    assert TagLogger("app", clock=clock).output_mode is OutputMode.CONSOLE

    monkeypatch.setattr(settings, "debug", False)
    monkeypatch.setattr(settings, "log_dir", tmp_path / "from-settings")
    log = TagLogger("app", clock=clock)
    assert log.output_mode is OutputMode.FILE
    assert (tmp_path / "from-settings").is_dir()
    log.dispose()


def test_unusable_log_dir_is_fail_open(tmp_path, clock, diagnostics):
    blocker = tmp_path / "blocker"
    blocker.write_text("file", encoding="utf-8")

    log = TagLogger("app", output_mode="file", log_dir=blocker / "logs", clock=clock)
    log.e("goes nowhere")

    assert not log.file_sink.initialized
    assert any(r["level"].name == "ERROR" for r in diagnostics)


def test_context_manager_disposes_file_sink(tmp_path, clock):
    with TagLogger("app", output_mode="file", log_dir=tmp_path, clock=clock) as log:
        log.e("x")
        assert log.file_sink.active_path is not None
    assert log.file_sink.active_path is None


def test_unreadable_log_entry_does_not_break_construction(tmp_path, clock, monkeypatch):
    (tmp_path / "20200101.log").write_text("old\n", encoding="utf-8")
    original_is_file = pathlib.Path.is_file

    def guarded_is_file(self, *args, **kwargs):
        if self.name == "20200101.log":
            raise PermissionError(errno.EACCES, "Permission denied", str(self))
        return original_is_file(self, *args, **kwargs)

    monkeypatch.setattr(pathlib.Path, "is_file", guarded_is_file)

    with TagLogger("app", output_mode="file", log_dir=tmp_path, clock=clock) as log:
        log.e("still logging")

    assert (tmp_path / "20240115.log").read_text(encoding="utf-8").endswith("still logging\n")


def test_listener_skipped_when_file_sink_drops_line(file_logger):
    calls = []
    file_logger.set_log_listener(lambda level, line: calls.append(line))
    file_logger.e("written")
    file_logger.dispose()
    file_logger.e("after dispose")

    assert len(calls) == 1
    assert calls[0].endswith("written")


def test_listener_skipped_when_log_dir_unusable(tmp_path, clock):
    blocker = tmp_path / "blocker"
    blocker.write_text("file", encoding="utf-8")
    calls = []

    log = TagLogger(
        "app",
        output_mode="file",
        log_dir=blocker / "logs",
        clock=clock,
        listener=lambda level, line: calls.append(line),
    )
    log.e("nowhere to go")

    assert calls == []
