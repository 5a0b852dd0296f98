"""Pipeline orchestration for fence pricing.

This module runs the full parse -> segment -> measure -> price workflow
with structured logging and run statistics.

Key components:
- PricingResult: Quote, grid and statistics from one run
- GardenProcessor: Main orchestrator class
"""

import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from plotfence.config import PlotfenceSettings
from plotfence.core.metrics import BoundaryMetrics, RegionMetrics
from plotfence.core.parser import GridParser
from plotfence.core.pricing import FencingQuote, PriceAggregator
from plotfence.core.segmenter import RegionSegmenter
from plotfence.domain import Grid
from plotfence.exceptions import GridLoadError, PlotfenceError
from plotfence.io import GridReader
from plotfence.utils import ProcessingLogger, ProcessingStats, configure_logging


@dataclass(frozen=True)
class PricingResult:
    """Outcome of pricing one grid.

    Attributes:
        grid: The parsed grid
        quote: Fence prices and per-region metrics
        stats: Run statistics
    """

    grid: Grid
    quote: FencingQuote
    stats: ProcessingStats


class GardenProcessor:
    """Orchestrates fence pricing for a garden grid.

    Manages the complete workflow:
    1. Load and parse grid text
    2. Segment the grid into regions
    3. Measure each region's boundary
    4. Aggregate both prices

    Example:
        settings = PlotfenceSettings()
        processor = GardenProcessor(settings)
        result = processor.process_file(Path("garden.txt"))
        print(result.quote.as_pair())
    """

    def __init__(self, config: PlotfenceSettings | None = None) -> None:
        """Initialize processor with configuration.

        Args:
            config: Plotfence settings (defaults if None)
        """
        self.config = config or PlotfenceSettings()
        self.logger = configure_logging(
            log_file=self.config.logging.log_file,
            console_level=self.config.logging.log_level,
            file_level=self.config.logging.file_log_level,
            quiet=self.config.logging.quiet,
        )
        self.parser = GridParser()
        self.segmenter = RegionSegmenter(self.config.segmentation)
        self.aggregator = PriceAggregator(BoundaryMetrics())

    def process_file(
        self,
        grid_path: Path,
        progress_callback: Callable[[int, int], None] | None = None,
    ) -> PricingResult:
        """Price the grid stored in a text file.

        Args:
            grid_path: Path to the grid file
            progress_callback: Optional callback(measured, total)

        Returns:
            PricingResult for the grid

        Raises:
            GridLoadError: If the file cannot be read
            MalformedGridError: If the file is not a rectangular grid
        """
        self.logger.info("Loading grid", input=str(grid_path))
        try:
            with GridReader(grid_path) as reader:
                text = reader.text
        except (OSError, UnicodeDecodeError) as e:
            error = GridLoadError(str(grid_path), str(e))
            self.logger.error("Grid load failed", input=str(grid_path), reason=str(e))
            raise error from e

        return self.process_text(text, progress_callback=progress_callback)

    def process_text(
        self,
        text: str,
        progress_callback: Callable[[int, int], None] | None = None,
    ) -> PricingResult:
        """Price a grid given as text.

        Args:
            text: Grid rows separated by newlines
            progress_callback: Optional callback(measured, total)

        Returns:
            PricingResult for the grid

        Raises:
            MalformedGridError: If the text is not a rectangular grid
        """
        processing_logger = ProcessingLogger(self.logger)
        stats = processing_logger.stats
        stats.start_time = time.time()

        try:
            grid = self.parser.parse(text)
        except PlotfenceError as e:
            processing_logger.log_error(e)
            raise

        processing_logger.log_grid_parsed(grid.rows, grid.cols, len(grid.labels()))

        segment_start = time.time()
        regions = self.segmenter.segment(grid)
        processing_logger.log_segmentation_complete(
            len(regions), (time.time() - segment_start) * 1000
        )

        total = len(regions)
        measured = 0

        def on_measured(metrics: RegionMetrics) -> None:
            nonlocal measured
            measured += 1
            processing_logger.log_region_measured(
                metrics.label,
                metrics.anchor.to_tuple(),
                metrics.area,
                metrics.perimeter,
                metrics.sides,
            )
            if progress_callback is not None:
                progress_callback(measured, total)

        quote = self.aggregator.aggregate(regions, on_measured=on_measured)

        stats.end_time = time.time()
        processing_logger.log_quote(quote.price_by_perimeter, quote.price_by_sides)

        return PricingResult(grid=grid, quote=quote, stats=stats)
