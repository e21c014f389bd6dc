"""
loguru sinks for the fetch run: a colorized console on stderr and, when a
log directory is given, a rotating file named after the run date.

Levels and rotation come from ``cfg.log`` unless passed explicitly.
"""
import sys
from pathlib import Path
from typing import Optional

from loguru import logger as _logger

from src.config import cfg

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"


def setup_logger(
    log_dir: Optional[Path] = None,
    level: Optional[str] = None,
    file_level: Optional[str] = None,
) -> Optional[int]:
    """
    Replace loguru's default handler with the fetcher's sinks.

    Args:
        log_dir: Where to write ``fetch_races_<date>.log``; None skips the file sink.
        level: Console level (default ``cfg.log.console_level``).
        file_level: File sink level (default ``cfg.log.file_level``).

    Returns:
        The file sink's handler id, or None when no file sink was added.
    """
    _logger.remove()
    _logger.add(
        sys.stderr,
        level=level or cfg.log.console_level,
        format=CONSOLE_FORMAT,
        colorize=True,
    )

    if log_dir is None:
        return None

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    return _logger.add(
        log_dir / "fetch_races_{time:YYYY-MM-DD}.log",
        level=file_level or cfg.log.file_level,
        format=FILE_FORMAT,
        rotation=cfg.log.rotation,
        retention=cfg.log.retention,
        encoding="utf-8",
    )


logger = _logger
