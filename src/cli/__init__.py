"""Command-line interface for chart-index."""
