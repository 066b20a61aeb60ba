"""Command-line maintenance scripts."""
