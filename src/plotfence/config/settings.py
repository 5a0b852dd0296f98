"""Configuration settings for Plotfence."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class TraversalOrder(str, Enum):
    """Work-list discipline used while growing a region."""

    BREADTH_FIRST = "breadth_first"
    DEPTH_FIRST = "depth_first"


class PricingMethod(str, Enum):
    """Which fence price(s) to report."""

    BOTH = "both"
    PERIMETER = "perimeter"
    SIDES = "sides"


class SegmentationConfig(BaseModel):
    """Configuration for region segmentation."""

    traversal: TraversalOrder = Field(
        default=TraversalOrder.BREADTH_FIRST,
        description="Work-list discipline for flood fill (queue or stack)",
    )


class PricingConfig(BaseModel):
    """Configuration for fence pricing."""

    method: PricingMethod = Field(
        default=PricingMethod.BOTH,
        description="Price by perimeter, by sides, or both",
    )

    @property
    def wants_perimeter(self) -> bool:
        return self.method in (PricingMethod.BOTH, PricingMethod.PERIMETER)

    @property
    def wants_sides(self) -> bool:
        return self.method in (PricingMethod.BOTH, PricingMethod.SIDES)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )
    quiet: bool = Field(
        default=False,
        description="Only show errors on the console",
    )

    @field_validator("log_level", "file_log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level


class PlotfenceSettings(BaseModel):
    """Main application settings."""

    segmentation: SegmentationConfig = Field(default_factory=SegmentationConfig)
    pricing: PricingConfig = Field(default_factory=PricingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PlotfenceSettings:
    """Get default application settings."""
    return PlotfenceSettings()
