"""Grid reader for loading garden map files.

This module provides the GridReader class for loading text files
and parsing them into Grid domain models.
"""

from pathlib import Path
from typing import TYPE_CHECKING

from plotfence.domain import Grid

if TYPE_CHECKING:
    from plotfence.core.parser import GridParser


class GridReader:
    """Loads grid text files and parses them.

    Example:
        reader = GridReader(Path("garden.txt"))
        reader.load()
        grid = reader.read_grid()
    """

    def __init__(self, grid_path: Path, encoding: str = "utf-8") -> None:
        """Initialize the grid reader.

        Args:
            grid_path: Path to the grid text file
            encoding: Text encoding of the file
        """
        self._grid_path = grid_path
        self._encoding = encoding
        self._text: str | None = None

    def load(self) -> None:
        """Load the grid file.

        Raises:
            FileNotFoundError: If grid file does not exist
            UnicodeDecodeError: If the file is not valid text
        """
        if not self._grid_path.exists():
            raise FileNotFoundError(f"Grid file not found: {self._grid_path}")

        self._text = self._grid_path.read_text(encoding=self._encoding)

    @property
    def path(self) -> Path:
        return self._grid_path

    @property
    def text(self) -> str:
        """Return the raw file text.

        Raises:
            RuntimeError: If file has not been loaded yet
        """
        if self._text is None:
            raise RuntimeError("Grid not loaded. Call load() first.")

        return self._text

    def read_grid(self, parser: "GridParser | None" = None) -> Grid:
        """Parse the loaded text into a Grid.

        Args:
            parser: Parser to use (default GridParser)

        Returns:
            Parsed Grid

        Raises:
            RuntimeError: If file has not been loaded yet
            MalformedGridError: If the text is not a rectangular grid
        """
        from plotfence.core.parser import GridParser

        return (parser or GridParser()).parse(self.text)

    def close(self) -> None:
        """Drop the loaded text."""
        self._text = None

    def __enter__(self) -> "GridReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
