"""Command-line interface for the unit engine."""
