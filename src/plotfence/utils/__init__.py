"""Utility functions for plotfence.

This module provides utility functions including:

- Logging setup and configuration
- Run statistics tracking
"""

from plotfence.utils.logging import (
    ProcessingLogger,
    ProcessingStats,
    configure_logging,
)

__all__ = [
    "ProcessingLogger",
    "ProcessingStats",
    "configure_logging",
]
