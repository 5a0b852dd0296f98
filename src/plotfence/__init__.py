"""Plotfence - Price the fencing of garden plots on a character grid.

Plotfence is a CLI tool that reads a grid of single-character plant labels,
splits it into plots (maximal 4-connected regions sharing a label) and
prices the fence around each plot two ways: area times perimeter, and area
times the number of straight sides.

Example:
    $ plotfence garden.txt

This will print the total perimeter price and the total sides price.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
