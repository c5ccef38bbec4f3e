"""Logging setup shared by the UI and the core services."""

import logging
from pathlib import Path

_configured = False


def setup_logger(log_level: str = "INFO", log_file: str = "logs/david_ai.log") -> None:
    """
    Configure root logging with a file handler and a console handler.
    Streamlit re-runs the script on every interaction; later calls are no-ops.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        log_file: path of the log file; parent directories are created
    """
    global _configured
    if _configured:
        return

    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.FileHandler(log_file, encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )
    _configured = True
