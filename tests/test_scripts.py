import runpy
from pathlib import Path

from ultimate_logger import LogLevel
from ultimate_logger.utils.parsers import read_log_file

SCRIPTS = Path(__file__).resolve().parent.parent / "scripts"


def test_two_loggers_share_one_file(tmp_path, capsys):
    path = tmp_path / "log.txt"
    path.write_text("", encoding="utf-8")
    demo = runpy.run_path(str(SCRIPTS / "two_loggers.py"))

    demo["main"](str(path))
    demo["main"](str(path))  # appends, never truncates

    parsed = read_log_file(path)
    first = [p.level for p in parsed if p.name == "First logger"]
    second = [p.level for p in parsed if p.name == "Second logger"]
    assert first == [LogLevel.WARNING, LogLevel.ERROR, LogLevel.CRITICAL] * 2
    assert second == list(LogLevel) * 2
    assert len(capsys.readouterr().out.splitlines()) == len(parsed)
