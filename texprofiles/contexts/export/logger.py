"""
Export context logger.

Provides logging interface for export context with automatic [export] prefix.
All export modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from texprofiles.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[export]"


def setup_export_logger(log_dir: Path, backend: str = "latex") -> Path:
    """
    Setup logger for export context.

    Args:
        log_dir: Directory for this export session
        backend: Export backend recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="export",
        log_dir=log_dir,
        extra_provenance={"Backend": backend},
    )


# Wrapper functions with automatic [export] prefix


def _log_info(message: str) -> None:
    """Log info message with [export] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [export] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [export] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level export-specific logging helpers


def log_export_start(document_name: str, backend: str, profile_name, num_hooks: int) -> None:
    """Log start of a before-export pass."""
    _log_info(f"Preparing {document_name} for {backend} export")
    _log_debug(f"  Profile: {profile_name or '(none)'}")
    _log_debug(f"  Hooks: {num_hooks}")


def log_sync_result(result) -> None:
    """
    Log outcome of an asset sync.

    Args:
        result: SyncResult from copy_missing_assets()
    """
    for path in result.copied:
        _log_info(f"Copied asset {path.name} to {path.parent}")
    for path in result.skipped:
        _log_debug(f"Asset {path.name} already present in {path.parent}, left untouched")

    if result.copied:
        _log_success(f"Asset sync: {len(result.copied)} copied, {len(result.skipped)} already present")
