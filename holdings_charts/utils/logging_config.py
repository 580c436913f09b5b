import logging
import re
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_console = Console(stderr=True)


class AmountFilter(logging.Filter):
    """Redacts money amounts from log messages while private mode is on."""

    PATTERNS = [
        (r"-?(?:C\$|US\$|\$)\s?-?[0-9][0-9,]*(?:\.[0-9]+)?", "[AMOUNT]"),
        (r"-?\b[0-9][0-9,]*(?:\.[0-9]+)?\s?(?:CAD|USD)\b", "[AMOUNT]"),
    ]

    def filter(self, record: logging.LogRecord) -> bool:
        if not isinstance(record.msg, str):
            return True

        msg = record.getMessage() if record.args else record.msg
        for pattern, replacement in self.PATTERNS:
            msg = re.sub(pattern, replacement, msg)

        record.msg = msg
        record.args = None
        return True


class ChartsFormatter(logging.Formatter):
    PREFIX = "  \033[90mCHARTS\033[0m > "

    COLORS = {
        "DEBUG": "\033[90mDEBUG\033[0m",
        "INFO": "\033[34mINFO \033[0m",
        "WARNING": "\033[33mWARN \033[0m",
        "ERROR": "\033[31mERROR\033[0m",
        "CRITICAL": "\033[31mFATAL\033[0m",
    }

    def format(self, record: logging.LogRecord) -> str:
        level_name = record.levelname
        color_level = self.COLORS.get(level_name, level_name)

        log_fmt = f"{self.PREFIX}{color_level} {record.name}: {record.getMessage()}"

        if record.exc_info:
            if not record.exc_text:
                record.exc_text = self.formatException(record.exc_info)
            if record.exc_text:
                log_fmt += f"\n{record.exc_text}"

        return log_fmt


def parse_level(level: "int | str") -> int:
    """Accepts a logging level as int or name ("debug", "INFO", ...)."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    return value if isinstance(value, int) else logging.INFO


def configure_root_logger(
    level: "int | str" = logging.INFO,
    private_mode: bool = False,
    rich_output: bool = False,
) -> logging.Logger:
    root = logging.getLogger()
    root.setLevel(parse_level(level))

    logging.getLogger("streamlit").setLevel(logging.WARNING)
    logging.getLogger("plotly").setLevel(logging.WARNING)

    for h in root.handlers[:]:
        root.removeHandler(h)

    handler: logging.Handler
    if rich_output:
        handler = RichHandler(console=_console, show_path=False, markup=False)
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ChartsFormatter())

    if private_mode:
        handler.addFilter(AmountFilter())
    root.addHandler(handler)

    return root


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Returns a named logger.
    Assumes configure_root_logger() has been called.
    """
    return logging.getLogger(name)
