import logging

from ultimate_logger import Logger, LogLevel, configure_logging
from ultimate_logger.core import logging as diagnostics
from ultimate_logger.core.config import Settings


def test_defaults(monkeypatch):
    for var in ("ULTIMATE_LOGGER_COLOR", "ULTIMATE_LOGGER_FILE_ENCODING", "ULTIMATE_LOGGER_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    cfg = Settings()
    assert cfg.COLOR == "auto"
    assert cfg.FILE_ENCODING == "utf-8"
    assert cfg.LOG_LEVEL == "WARNING"


def test_values_come_from_prefixed_env(monkeypatch):
    monkeypatch.setenv("ULTIMATE_LOGGER_COLOR", " Always ")
    monkeypatch.setenv("ULTIMATE_LOGGER_LOG_LEVEL", "debug")
    cfg = Settings()
    assert cfg.COLOR == "always"
    assert cfg.LOG_LEVEL == "DEBUG"


def test_unknown_color_mode_falls_back_to_auto():
    assert Settings(COLOR="rainbow").COLOR == "auto"


def test_lifecycle_diagnostics(tmp_path, caplog):
    caplog.set_level(logging.DEBUG, logger="ultimate_logger")
    path = tmp_path / "diag.log"

    logger = Logger.new_to_file("d", LogLevel.INFO, path, append=True, mirror_to_console=False)
    logger.close()

    messages = [r.getMessage() for r in caplog.records if r.name.startswith("ultimate_logger")]
    assert f"Opened log file {path} (mode=a)" in messages
    assert f"Closed log file {path}" in messages


def test_configure_logging_installs_one_handler(capsys, reset_diagnostics):
    configure_logging("debug")
    configure_logging("DEBUG")

    installed = [h for h in diagnostics.logger.handlers if not isinstance(h, logging.NullHandler)]
    assert len(installed) == 1
    assert diagnostics.logger.level == logging.DEBUG

    diagnostics.get_logger("log_file").debug("hello diagnostics")
    assert "| DEBUG | ultimate_logger.log_file | hello diagnostics" in capsys.readouterr().out


def test_get_logger_children():
    assert diagnostics.get_logger() is diagnostics.logger
    assert diagnostics.get_logger("log_file").name == "ultimate_logger.log_file"
