"""Turn-based tactical battles on a 15 by 11 grid, with a computer opponent."""

__version__ = "0.1.0"