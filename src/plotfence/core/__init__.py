"""Core processing algorithms for plotfence.

This module contains the core algorithms for:

- Grid parsing (text to labeled grid, with malformed-input checks)
- Region segmentation (maximal 4-connected same-label regions)
- Boundary metrics (perimeter and distinct straight sides)
- Price aggregation (area x perimeter, area x sides)

All services are:
- Stateless apart from configuration
- Pure (no side effects outside the processor's logging)

Key functions:
- parse_grid: Parse grid text into a Grid
- segment: Partition a grid into regions
- perimeter: Count boundary edges of a region
- count_sides: Count straight boundary runs of a region
- price_by_perimeter / price_by_sides: Total prices over regions

Key classes:
- GridParser: Parses and validates grid text
- RegionSegmenter: Partitions grids into regions
- BoundaryMetrics: Measures regions
- PriceAggregator: Totals prices into a FencingQuote
- GardenProcessor: Runs the whole pipeline with logging
"""

from plotfence.core.metrics import (
    BoundaryMetrics,
    RegionMetrics,
    count_sides,
    count_sides_facing,
    is_exposed,
    perimeter,
)
from plotfence.core.parser import GridParser, parse_grid
from plotfence.core.pricing import (
    FencingQuote,
    PriceAggregator,
    price_by_perimeter,
    price_by_sides,
)
from plotfence.core.processor import GardenProcessor, PricingResult
from plotfence.core.segmenter import RegionSegmenter, segment

__all__ = [
    # Metrics
    "BoundaryMetrics",
    "FencingQuote",
    # Processor
    "GardenProcessor",
    # Parser
    "GridParser",
    "PriceAggregator",
    "PricingResult",
    "RegionMetrics",
    # Segmenter
    "RegionSegmenter",
    "count_sides",
    "count_sides_facing",
    "is_exposed",
    "parse_grid",
    "perimeter",
    "price_by_perimeter",
    "price_by_sides",
    "segment",
]
