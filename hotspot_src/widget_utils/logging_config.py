import logging
import re
import sys
from typing import Union

from rich.console import Console
from rich.logging import RichHandler

_console = Console(stderr=True)


class RedactionFilter(logging.Filter):
    """Masks secrets that callers may pass through tool arguments."""

    PATTERNS = [
        (r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Z|a-z]{2,}\b", "[EMAIL]"),
        (r"(?i)bearer\s+[A-Za-z0-9\-._~+/]+=*", "Bearer [TOKEN]"),
        (r"eyJ[A-Za-z0-9-_=]+\.[A-Za-z0-9-_=]+\.?[A-Za-z0-9-_.+/=]*", "[TOKEN]"),
    ]

    def filter(self, record: logging.LogRecord) -> bool:
        if not isinstance(record.msg, str):
            return True

        msg = record.msg
        for pattern, replacement in self.PATTERNS:
            msg = re.sub(pattern, replacement, msg)

        record.msg = msg
        return True


class HotspotFormatter(logging.Formatter):
    """One line per record: time, level tag, logger name, message.

    The level tag is colored with ANSI codes when `color` is set.
    """

    LEVEL_TAGS = {
        logging.DEBUG: ("DEBUG", "90"),
        logging.INFO: ("INFO", "34"),
        logging.WARNING: ("WARN", "33"),
        logging.ERROR: ("ERROR", "31"),
        logging.CRITICAL: ("FATAL", "1;31"),
    }

    def __init__(self, color: bool = True):
        super().__init__("%(asctime)s %(level_tag)s %(name)s: %(message)s", datefmt="%H:%M:%S")
        self.color = color

    def formatMessage(self, record: logging.LogRecord) -> str:
        label, ansi = self.LEVEL_TAGS.get(record.levelno, (record.levelname, "0"))
        tag = f"{label:<5}"
        record.level_tag = f"\033[{ansi}m{tag}\033[0m" if self.color else tag
        return super().formatMessage(record)


def configure_root_logger(
    level: Union[int, str] = logging.INFO, use_rich: bool | None = None
) -> None:
    """Install the project's stderr handler on the root logger.

    Args:
        level: Root log level (int or level name such as "DEBUG").
        use_rich: Render through rich. Defaults to True when stderr is a terminal.
    """
    root = logging.getLogger()
    root.setLevel(level)

    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.WARNING)

    for h in root.handlers[:]:
        root.removeHandler(h)

    if use_rich is None:
        use_rich = _console.is_terminal

    handler: logging.Handler
    if use_rich:
        handler = RichHandler(console=_console, show_path=False, rich_tracebacks=True)
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(HotspotFormatter(color=sys.stderr.isatty()))
    handler.addFilter(RedactionFilter())
    root.addHandler(handler)

    for logger_name in ["uvicorn", "uvicorn.error", "uvicorn.access"]:
        uv_logger = logging.getLogger(logger_name)
        uv_logger.handlers = []
        uv_logger.propagate = True


def get_logger(name: str) -> logging.Logger:
    """
    Returns a named logger.
    Assumes configure_root_logger() has been called.
    """
    return logging.getLogger(name)
