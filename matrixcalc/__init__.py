"""Interactive calculator and helper functions for named dense matrices."""

__version__ = "0.1.0"