"""
Drafting context logger.

Provides logging interface for drafting context with automatic [draft] prefix.
All drafting modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from folio.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[draft]"


def setup_drafting_logger(log_dir: Path, phase: str = "normalize") -> Path:
    """
    Setup logger for drafting context.

    Args:
        log_dir: Directory for this drafting session
        phase: Phase name for provenance ("load" or "normalize")

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="draft",
        log_dir=log_dir,
        extra_provenance={"Phase": phase},
    )


# Wrapper functions with automatic [draft] prefix


def _log_info(message: str) -> None:
    """Log info message with [draft] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [draft] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [draft] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [draft] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [draft] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_draft_loaded(source: Path, draft) -> None:
    """Log a summary of a freshly loaded and normalized draft."""
    _log_info(f"Loaded draft from {source}")
    _log_debug(
        f"  templateId={draft.template_id!r} experience={len(draft.experience)} "
        f"projects={len(draft.projects)} skills={len(draft.skills)} "
        f"education={len(draft.education)}"
    )
