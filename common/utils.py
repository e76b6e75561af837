from pathlib import Path

from loguru import logger
from rich.console import Console

__all__ = [
    "console",
    "logger",
    "configure_logging",
]

console = Console()

# Remove Loguru's default stdout sink to prevent terminal output
logger.remove()

log_format = "<green>{time:YYYY-MM-DD HH:mm:ss.SSS zz}</green> | <level>{level: <8}</level> | <yellow>Line {line: >4} ({file}):</yellow> <b>{message}</b>"

_configured_sinks: list[int] = []


def configure_logging(log_dir: str = ".file_poller", level: str = "INFO") -> Path:
    """Write logs to ``debug.log`` and ``info.log`` under ``log_dir``.

    Calling it again replaces the sinks added by the previous call.
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    while _configured_sinks:
        logger.remove(_configured_sinks.pop())

    _configured_sinks.append(
        logger.add(
            log_path / "debug.log",
            level="DEBUG",
            format=log_format,
            colorize=False,
            backtrace=True,
            diagnose=True,
        )
    )
    _configured_sinks.append(
        logger.add(
            log_path / "info.log",
            level=level,
            format=log_format,
            colorize=False,
            backtrace=True,
            diagnose=True,
        )
    )
    return log_path

