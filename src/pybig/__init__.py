"""pybig - list the files at or above a size threshold."""

__version__ = "1.0.0"
