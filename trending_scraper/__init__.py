"""Command-line viewer for the GitHub Trending page."""

__version__ = "0.1.0"
