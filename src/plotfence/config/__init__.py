"""Configuration management for plotfence.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- SegmentationConfig: Region traversal settings
- PricingConfig: Which fence prices to compute
- LoggingConfig: Logging settings
- PlotfenceSettings: Main application settings
"""

from plotfence.config.settings import (
    LoggingConfig,
    PlotfenceSettings,
    PricingConfig,
    PricingMethod,
    SegmentationConfig,
    TraversalOrder,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "PlotfenceSettings",
    "PricingConfig",
    "PricingMethod",
    "SegmentationConfig",
    "TraversalOrder",
    "get_default_settings",
]
