"""Utility functions for shadesail.

This module provides utility functions including:

- Logging setup and configuration
- Sail lifecycle logging and statistics
"""

from shadesail.utils.logging import (
    WorkspaceLogger,
    WorkspaceStats,
    configure_logging,
)

__all__ = [
    "WorkspaceLogger",
    "WorkspaceStats",
    "configure_logging",
]
