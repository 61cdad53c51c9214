"""Command-line interface for toolshed."""
