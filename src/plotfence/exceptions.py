"""Exception hierarchy for Plotfence."""


class PlotfenceError(Exception):
    """Base exception for all Plotfence errors."""

    pass


class GridError(PlotfenceError):
    """Errors related to grid content."""

    pass


class MalformedGridError(GridError):
    """Grid text does not describe a rectangular grid of labels."""

    pass


class EmptyGridError(MalformedGridError):
    """Grid text contains no rows."""

    def __init__(self) -> None:
        super().__init__("Grid is empty")


class RaggedGridError(MalformedGridError):
    """A row's width differs from the first row's width."""

    def __init__(self, row: int, expected: int, actual: int) -> None:
        self.row = row
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Row {row} has width {actual}, expected {expected}"
        )


class InvalidLabelError(MalformedGridError):
    """A cell holds a character that cannot be a plot label."""

    def __init__(self, row: int, col: int, label: str) -> None:
        self.row = row
        self.col = col
        self.label = label
        super().__init__(f"Invalid label {label!r} at row {row}, column {col}")


class InputError(PlotfenceError):
    """Errors related to reading grid input."""

    pass


class GridLoadError(InputError):
    """Error loading a grid file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load grid '{path}': {reason}")
