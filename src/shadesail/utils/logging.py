"""Logging utilities for Shadesail."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class WorkspaceStats:
    """Statistics for a sail workspace session."""

    sails_created: int = 0
    sails_rejected: int = 0
    sails_removed: int = 0
    profile_edits: int = 0
    rejections: list[tuple[str, str]] = field(default_factory=list)

    @property
    def active_estimate(self) -> int:
        """Sails created minus sails removed."""
        return self.sails_created - self.sails_removed


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("shadesail")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class WorkspaceLogger:
    """Logger for tracking sail lifecycle events and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger or structlog.get_logger("shadesail.workspace")
        self._stats = WorkspaceStats()

    def log_sail_created(
        self,
        sail_id: str,
        source: str,
        vertices: int,
        curved_edges: int,
    ) -> None:
        """Log successful sail creation."""
        self._logger.info(
            "Sail created",
            sail=sail_id,
            source=source,
            vertices=vertices,
            curved_edges=curved_edges,
        )
        self._stats.sails_created += 1

    def log_sail_rejected(self, source: str, error: Exception) -> None:
        """Log a recoverable sail creation failure."""
        self._logger.warning(
            "Sail rejected",
            source=source,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.sails_rejected += 1
        self._stats.rejections.append((source, str(error)))

    def log_sail_removed(self, sail_id: str) -> None:
        self._logger.info("Sail removed", sail=sail_id)
        self._stats.sails_removed += 1

    def log_profile_changed(
        self,
        sail_id: str,
        old_profile: tuple[bool, ...],
        new_profile: tuple[bool, ...],
    ) -> None:
        """Log an edge profile edit."""
        toggled = [i for i, (a, b) in enumerate(zip(old_profile, new_profile)) if a != b]
        self._logger.debug(
            "Edge profile changed",
            sail=sail_id,
            toggled_edges=toggled,
            curved_edges=sum(new_profile),
        )
        self._stats.profile_edits += 1

    @property
    def stats(self) -> WorkspaceStats:
        """Get current workspace statistics."""
        return self._stats
