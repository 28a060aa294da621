"""Path-based pull request reviewer assignment."""

__version__ = "0.1.0"
