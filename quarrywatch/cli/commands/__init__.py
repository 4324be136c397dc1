"""Quarrywatch CLI subcommands."""
