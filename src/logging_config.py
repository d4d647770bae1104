import logging
import logging.handlers
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_level: str = "INFO", log_dir: Optional[Path] = None) -> Path:
    """Configure root logging for the draft lottery.

    Writes everything (DEBUG and up) to ``logs/draft_lottery.log`` and
    ``log_level`` and up to the console. Safe to call more than once;
    only the first call installs handlers.

    Returns:
        Path of the log file.
    """
    log_dir = log_dir or Path(__file__).parent.parent / "logs"
    log_file = log_dir / "draft_lottery.log"

    root_logger = logging.getLogger()
    if root_logger.handlers:
        return log_file  # Already configured

    log_dir.mkdir(parents=True, exist_ok=True)
    level = getattr(logging, log_level.upper(), logging.INFO)
    root_logger.setLevel(logging.DEBUG)

    # Per-pick weights are logged at DEBUG; keep them in the file only
    file_handler = logging.handlers.RotatingFileHandler(
        log_file, maxBytes=5 * 1024 * 1024, backupCount=3
    )
    file_handler.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    file_handler.setFormatter(formatter)
    console_handler.setFormatter(formatter)

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    logging.getLogger(__name__).info("Logging initialized (level=%s)", log_level)
    return log_file
