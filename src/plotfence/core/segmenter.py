"""Region segmentation engine.

Partitions a grid into regions: maximal sets of same-label cells that are
connected through up/down/left/right steps.

The segmenter drains a private "unclaimed" copy of the grid. Each pass
takes any unclaimed cell, then grows its region with an explicit work-list
(a deque used as a queue or a stack), claiming every same-label neighbor it
reaches. The unclaimed map shrinks on every pass, so segmentation always
terminates, and each cell ends up in exactly one region.
"""

from collections import deque

from plotfence.config import SegmentationConfig, TraversalOrder
from plotfence.domain import Grid, Point, Region


class RegionSegmenter:
    """Splits a grid into maximal 4-connected same-label regions.

    The segmenter holds only configuration; all working state lives inside
    a single segment() call.
    """

    def __init__(self, config: SegmentationConfig | None = None) -> None:
        """Initialize the segmenter.

        Args:
            config: Segmentation settings (defaults to breadth-first)
        """
        self.config = config or SegmentationConfig()

    def segment(self, grid: Grid) -> set[Region]:
        """Partition a grid into regions.

        Region order is unspecified; compare results as sets.

        Args:
            grid: The grid to partition

        Returns:
            Set of regions covering every grid point exactly once
        """
        unclaimed: dict[Point, str] = dict(grid.cells)
        regions: set[Region] = set()

        while unclaimed:
            seed, label = unclaimed.popitem()
            members = self._grow(seed, label, unclaimed)
            regions.add(Region.of(label, members))

        return regions

    def _grow(self, seed: Point, label: str, unclaimed: dict[Point, str]) -> set[Point]:
        """Claim every unclaimed same-label point reachable from seed.

        Points are removed from unclaimed as soon as they are queued, so
        none is queued twice.

        Args:
            seed: Starting point, already removed from unclaimed
            label: Label shared by the region
            unclaimed: Remaining points; mutated in place

        Returns:
            The region's member points
        """
        members = {seed}
        pending = deque([seed])
        take = (
            pending.popleft
            if self.config.traversal is TraversalOrder.BREADTH_FIRST
            else pending.pop
        )

        while pending:
            current = take()
            for neighbor in current.neighbors():
                if unclaimed.get(neighbor) == label:
                    del unclaimed[neighbor]
                    members.add(neighbor)
                    pending.append(neighbor)

        return members


def segment(grid: Grid, config: SegmentationConfig | None = None) -> set[Region]:
    """Partition a grid into regions with a RegionSegmenter.

    Args:
        grid: The grid to partition
        config: Optional segmentation settings

    Returns:
        Set of regions
    """
    return RegionSegmenter(config).segment(grid)
