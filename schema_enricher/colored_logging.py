"""
Colored console logging for Schema Enricher.

Enrichment runs report a lot of per-table diagnostics (unknown types, skipped
relationships, name collisions). Coloring them by level and by kind keeps the
summary lines readable in a terminal; when output is redirected, plain text
is written instead.
"""

import logging
import sys
from typing import Any, Dict, Optional, TextIO


class ColoredFormatter(logging.Formatter):
    """
    Logging formatter that wraps messages in ANSI color codes.

    Warnings and errors are colored by level. INFO messages are colored by
    their kind: step markers written by ``log_step``, completion messages
    written by ``log_success`` and section banners written by ``log_section``.
    """

    LEVEL_COLORS = {
        logging.DEBUG: '\033[36m',     # Cyan
        logging.WARNING: '\033[33m',   # Yellow
        logging.ERROR: '\033[31m',     # Red
        logging.CRITICAL: '\033[35m',  # Magenta
    }

    SUCCESS_MARK = '✓'
    STEP_MARK = '→'
    BANNER_CHAR = '='

    SUCCESS_COLOR = '\033[92m'  # Bright Green
    STEP_COLOR = '\033[94m'     # Bright Blue
    BANNER_COLOR = '\033[96m'   # Bright Cyan

    RESET = '\033[0m'
    BOLD = '\033[1m'

    def __init__(self, fmt: Optional[str] = None, use_colors: bool = True,
                 stream: Optional[TextIO] = None):
        """
        Args:
            fmt: Log format string (``LEVEL: message`` when None)
            use_colors: Whether colors are wanted at all
            stream: Stream the handler writes to; colors are only used on a TTY
        """
        super().__init__(fmt or "%(levelname)s: %(message)s")
        stream = stream if stream is not None else sys.stderr
        self.use_colors = use_colors and getattr(stream, 'isatty', lambda: False)()

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        if not self.use_colors:
            return text

        color = self.color_for(record)
        if color is None:
            return text
        return f"{color}{text}{self.RESET}"

    def color_for(self, record: logging.LogRecord) -> Optional[str]:
        """Pick the color of a record, or None to leave it plain."""
        if record.levelno in self.LEVEL_COLORS and record.levelno != logging.DEBUG:
            return self.LEVEL_COLORS[record.levelno]

        message = record.getMessage().lstrip()
        if message.startswith(self.SUCCESS_MARK):
            return self.BOLD + self.SUCCESS_COLOR
        if message.startswith(self.STEP_MARK):
            return self.STEP_COLOR
        if message.startswith(self.BANNER_CHAR * 10) or record.__dict__.get('section'):
            return self.BOLD + self.BANNER_COLOR
        return self.LEVEL_COLORS.get(record.levelno)


def setup_colored_logging(level: int = logging.INFO, use_colors: bool = True) -> None:
    """
    Route all logging to stderr through ``ColoredFormatter``.

    Existing root handlers are replaced, so calling this twice does not
    duplicate output.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ColoredFormatter(use_colors=use_colors, stream=sys.stderr))
    handler.setLevel(level)

    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(level)


def get_colored_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_success(logger: logging.Logger, message: str) -> None:
    logger.info(f"{ColoredFormatter.SUCCESS_MARK} {message}")


def log_step(logger: logging.Logger, message: str) -> None:
    logger.info(f"{ColoredFormatter.STEP_MARK} {message}")


def log_section(logger: logging.Logger, section_name: str) -> None:
    """Log a banner announcing a stage of the run."""
    banner = ColoredFormatter.BANNER_CHAR * 60
    logger.info(banner)
    logger.info(f"  {section_name.upper()}", extra={'section': True})
    logger.info(banner)


def log_summary(logger: logging.Logger, summary: Dict[str, Any]) -> None:
    """
    Log the counters of an enrichment run, one per line.

    Non-zero problem counters (skipped relationships, errors, unmapped types,
    exhausted collisions) are logged as warnings so they stand out.
    """
    problems = ('skipped_relationships', 'errors', 'unmapped_types', 'exhausted_collisions')
    for key, value in summary.items():
        count = len(value) if isinstance(value, (list, tuple, set)) else value
        label = key.replace('_', ' ')
        if key in problems and count:
            logger.warning(f"  {label}: {count}")
        else:
            logger.info(f"  {label}: {count}")
