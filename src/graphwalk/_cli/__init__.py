"""Command-line interface for graphwalk."""
