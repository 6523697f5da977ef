"""Two-player Connect Four in the terminal with a per-player countdown timer window."""

__version__ = "0.1.0"
__all__ = ["__version__"]