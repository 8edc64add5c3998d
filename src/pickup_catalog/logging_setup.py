import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import TextIO

LEVEL_COLORS = {
    "DEBUG": "90",
    "INFO": "94",
    "WARNING": "93",
    "ERROR": "91",
    "CRITICAL": "95",
}


class ConsoleFormatter(logging.Formatter):
    """Formatter that highlights the level name with ANSI colours when asked to."""

    def __init__(self, fmt: str, use_color: bool):
        super().__init__(fmt=fmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        code = LEVEL_COLORS.get(record.levelname)
        if not self.use_color or code is None:
            return super().format(record)
        # The record is shared with the file handler
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"\033[{code}m{record.levelname}\033[0m"
        return super().format(colored)


def wants_color(stream: TextIO) -> bool:
    """Colour only interactive terminals, and never when NO_COLOR is set."""
    if os.environ.get("NO_COLOR"):
        return False
    return hasattr(stream, "isatty") and stream.isatty()


def setup_logging(
    *,
    console_level: str = "INFO",
    log_dir: str = "",
    log_file: str = "pickup_catalog.log",
    file_level: str = "DEBUG",
) -> None:
    """Configure the root logger: coloured console output, optional rotating file."""
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    for h in list(root.handlers):
        root.removeHandler(h)

    ch = logging.StreamHandler(sys.stdout)
    ch.setLevel(getattr(logging, console_level.upper(), logging.INFO))
    ch.setFormatter(
        ConsoleFormatter(
            fmt="%(levelname)s %(name)s: %(message)s", use_color=wants_color(sys.stdout)
        )
    )
    root.addHandler(ch)

    log_path: Path | None = None
    if log_dir:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        log_path = Path(log_dir) / log_file
        fh = logging.handlers.RotatingFileHandler(
            filename=str(log_path),
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        fh.setLevel(getattr(logging, file_level.upper(), logging.DEBUG))
        fh.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(levelname)-8s %(name)s [%(filename)s:%(lineno)d] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root.addHandler(fh)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    root.debug("Logging initialized. log_path=%s", log_path.resolve() if log_path else None)
