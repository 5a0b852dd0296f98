"""Logging utilities for Plotfence."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog

_FILE_HANDLER = "plotfence.file"
_CONSOLE_HANDLER = "plotfence.console"


@dataclass
class ProcessingStats:
    """Statistics from a pricing run."""

    rows: int = 0
    cols: int = 0
    cell_count: int = 0
    label_count: int = 0
    region_count: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Handlers installed by an earlier call are replaced, so configuring
    twice does not duplicate output.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        if handler.get_name() in (_FILE_HANDLER, _CONSOLE_HANDLER):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(_FILE_HANDLER)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.set_name(_CONSOLE_HANDLER)
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
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

    logger = structlog.get_logger("plotfence")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ProcessingLogger:
    """Logger for tracking pricing progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ProcessingStats()

    def log_grid_parsed(self, rows: int, cols: int, label_count: int) -> None:
        """Log grid dimensions after parsing."""
        self._logger.info(
            "Grid parsed",
            rows=rows,
            cols=cols,
            labels=label_count,
        )
        self._stats.rows = rows
        self._stats.cols = cols
        self._stats.cell_count = rows * cols
        self._stats.label_count = label_count

    def log_segmentation_complete(self, region_count: int, duration_ms: float) -> None:
        """Log segmentation results."""
        self._logger.info(
            "Segmentation complete",
            regions=region_count,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.region_count = region_count

    def log_region_measured(
        self,
        label: str,
        anchor: tuple[int, int],
        area: int,
        perimeter: int,
        sides: int,
    ) -> None:
        """Log measurements of a single region."""
        self._logger.debug(
            "Region measured",
            label=label,
            anchor=list(anchor),
            area=area,
            perimeter=perimeter,
            sides=sides,
        )

    def log_quote(self, price_by_perimeter: int, price_by_sides: int) -> None:
        """Log the final prices."""
        self._logger.info(
            "Fencing priced",
            price_by_perimeter=price_by_perimeter,
            price_by_sides=price_by_sides,
        )

    def log_error(self, error: Exception) -> None:
        """Log a failed run."""
        self._logger.error(
            "Pricing failed",
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> ProcessingStats:
        """Get current processing statistics."""
        return self._stats
