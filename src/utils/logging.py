"""Logging configuration."""

import logging
import sys
from pathlib import Path


class StripNewlinesFilter(logging.Filter):
    """Filter to remove leading/trailing newlines from log messages."""
    def filter(self, record):
        record.msg = str(record.msg).strip()
        return True


class ImmediateHandler(logging.StreamHandler):
    """Handler that flushes immediately."""
    def emit(self, record):
        super().emit(record)
        self.flush()


def setup_logging(log_dir='output', verbose=False):
    """Configure logging for both console and file output."""
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    logging.root.setLevel(logging.DEBUG)

    # Console handler - INFO level unless verbose, minimal format
    console_handler = ImmediateHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(logging.Formatter('%(message)s'))

    # File handler - DEBUG level, detailed format
    file_handler = logging.FileHandler(log_dir / 'conversion.log', mode='a', encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_formatter = logging.Formatter(
        '[%(asctime)s] %(levelname)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    file_handler.setFormatter(file_formatter)
    file_handler.addFilter(StripNewlinesFilter())

    # Clear any existing handlers
    logging.root.handlers = []

    logging.root.addHandler(console_handler)
    logging.root.addHandler(file_handler)

    # Add session separator to log file
    logging.info("="*80)
    logging.info("Starting new conversion session")
