import pytest

from dancearcade import log


def test_info_goes_to_stdout_in_green(capsys):
    log.info("Starting Dance Arcade...")
    captured = capsys.readouterr()
    assert captured.out == "\033[1;32m[INFO] Starting Dance Arcade...\033[0m\n"
    assert captured.err == ""


def test_error_goes_to_stderr_in_red(capsys):
    log.error("Failed to start Dance Arcade")
    captured = capsys.readouterr()
    assert captured.err == "\033[1;31m[ERROR] Failed to start Dance Arcade\033[0m\n"
    assert captured.out == ""


def test_warning_goes_to_stderr_in_yellow(capsys):
    log.warning("careful")
    captured = capsys.readouterr()
    assert captured.err == "\033[1;33m[WARNING] careful\033[0m\n"
    assert captured.out == ""


def test_debug_printed_when_enabled(capsys, monkeypatch):
    monkeypatch.setattr(log, "DEBUG", True)
    log.debug("details")
    captured = capsys.readouterr()
    assert captured.out == "\033[1;34m[DEBUG] details\033[0m\n"


def test_debug_silent_when_disabled(capsys, monkeypatch):
    monkeypatch.setattr(log, "DEBUG", False)
    log.debug("details")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


@pytest.mark.parametrize("func", [log.info, log.error, log.warning])
def test_each_call_ends_with_reset_and_newline(capsys, func):
    func("msg")
    captured = capsys.readouterr()
    text = captured.out + captured.err
    assert text.endswith(log.COLOR_RESET + "\n")
    assert text.count("\n") == 1