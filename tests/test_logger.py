"""setup_logger prepares the log file and runs only once."""

from core import logger as logger_module


def test_creates_log_directory_once(tmp_path, monkeypatch):
    monkeypatch.setattr(logger_module, "_configured", False)
    first = tmp_path / "logs" / "app.log"
    second = tmp_path / "other" / "app.log"

    logger_module.setup_logger("DEBUG", str(first))
    logger_module.setup_logger("DEBUG", str(second))

    assert first.parent.exists()
    assert not second.parent.exists()
    assert logger_module._configured is True
