"""Command line interface for Conformer."""
