"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger

from resumake.utils.logger import setup_logger as _setup_logger

load_dotenv()
LOGS_PATH = Path(os.getenv("RESUMAKE_LOGS_PATH", "outs/logs"))

CONTEXT_PREFIX = "[template]"


def setup_templating_logger(log_dir: Path = None, phase: str = "render", console: bool = True) -> Path:
    """
    Setup logger for templating context.

    Enables the package logging that is disabled on import.

    Args:
        log_dir: Directory for this templating session (defaults to RESUMAKE_LOGS_PATH)
        phase: Phase name for provenance
        console: Also log INFO and above to stdout

    Returns:
        Path to log file

    Example:
        from resumake.contexts.templating.logger import setup_templating_logger

        log_file = setup_templating_logger(Path("outs/logs/render_20251114"))
    """
    logger.enable("resumake")
    return _setup_logger(
        context_name="template",
        log_dir=log_dir or LOGS_PATH,
        extra_provenance={"Phase": phase},
        console=console,
    )


# Wrapper functions with automatic [template] prefix


def _log_error(message: str) -> None:
    """Log error message with [template] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_section_rendered(section_name: str, entry_count: int) -> None:
    """Log a rendered section with its entry count."""
    _log_debug(f"Rendered {section_name} section ({entry_count} entries)")


def log_section_skipped(section_name: str) -> None:
    """Log a section left out because its data is absent."""
    _log_debug(f"Skipped {section_name} section (no data)")


def log_document_rendered(section_count: int, length: int) -> None:
    """Log the finished document."""
    _log_debug(f"Rendered document with {section_count} sections ({length} characters)")
