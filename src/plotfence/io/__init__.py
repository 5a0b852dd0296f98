"""Grid I/O layer for plotfence.

This module handles reading grid text from files and handing it to the
parser, keeping file handling out of the core algorithms.

Key classes:
- GridReader: Load grid files and parse them into Grid models
"""

from plotfence.io.reader import GridReader

__all__ = [
    "GridReader",
]
