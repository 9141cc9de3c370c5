"""Command-line interface for dicedist."""
