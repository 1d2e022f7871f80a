"""Command-line interface for DRILLS."""
