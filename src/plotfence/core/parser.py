"""Grid text parser.

Turns a block of text, one row per line and one label character per cell,
into a Grid. Malformed text is rejected rather than guessed at:

- no rows at all raises EmptyGridError
- a row of a different width than the first raises RaggedGridError
- a whitespace cell raises InvalidLabelError

Rows are split on line feeds only, dropping one trailing carriage return
per row. Other line-break characters stay in the row and are rejected as
labels.
Trailing blank lines are ignored, so a final newline (or several) is fine.
"""

from plotfence.domain import Grid, Point
from plotfence.exceptions import EmptyGridError, InvalidLabelError, RaggedGridError


class GridParser:
    """Parses grid text into a Grid.

    The parser is stateless and deterministic.
    """

    def parse(self, text: str) -> Grid:
        """Parse grid text.

        Args:
            text: Grid rows separated by newlines

        Returns:
            Grid with one label per cell

        Raises:
            EmptyGridError: If the text holds no rows
            RaggedGridError: If rows differ in width
            InvalidLabelError: If a cell is whitespace
        """
        lines = self._split_rows(text)
        if not lines:
            raise EmptyGridError()

        width = len(lines[0])
        cells: dict[Point, str] = {}
        for row, line in enumerate(lines):
            if len(line) != width:
                raise RaggedGridError(row=row, expected=width, actual=len(line))
            for col, label in enumerate(line):
                if label.isspace():
                    raise InvalidLabelError(row=row, col=col, label=label)
                cells[Point(row, col)] = label

        return Grid(cells=cells, rows=len(lines), cols=width)

    @staticmethod
    def _split_rows(text: str) -> list[str]:
        lines = [line.removesuffix("\r") for line in text.split("\n")]
        while lines and not lines[-1].strip(" \t"):
            lines.pop()
        return lines


def parse_grid(text: str) -> Grid:
    """Parse grid text with a default GridParser."""
    return GridParser().parse(text)
