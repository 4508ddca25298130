import pytest

from threadlab import logger
from threadlab.logger import Level


def test_log_msg_writes_line_to_stderr(capsys):
    line = logger.log_msg(Level.ERR, "boom")
    captured = capsys.readouterr()
    assert captured.err == line + "\n"
    assert captured.out == ""


def test_log_line_carries_level_and_message(capsys):
    line = logger.log_msg(Level.WAR, "careful")
    assert "[WAR]" in line
    assert line.endswith("-> careful")


def test_log_line_names_calling_function_and_file(capsys):
    line = logger.deb("hello")
    assert "[test_log_line_names_calling_function_and_file]" in line
    assert "test_logger.py" in line


@pytest.mark.parametrize(
    "func, level",
    [
        (logger.deb, Level.DEB),
        (logger.inf, Level.INF),
        (logger.war, Level.WAR),
        (logger.err, Level.ERR),
        (logger.fat, Level.FAT),
    ],
)
def test_shortcuts_use_their_level(func, level, capsys):
    line = func("msg")
    assert f"[{level.value}]" in line
    assert capsys.readouterr().err.strip() == line


def test_level_accepts_string_names(capsys):
    line = logger.log_msg("INF", "text")
    assert "[INF]" in line


def test_unknown_level_rejected():
    with pytest.raises(ValueError):
        logger.log_msg("XYZ", "text")


def test_level_lookup_by_value():
    assert Level("FAT") is Level.FAT