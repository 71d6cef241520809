"""Command line interface for human-time."""
