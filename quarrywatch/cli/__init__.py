"""Quarrywatch CLI — Typer-based command-line interface.

Provides the ``quarrywatch`` command with subcommands for live monitoring,
one-shot statistics and map views, and hole lookup.

All output uses Rich for formatted terminal display.
"""
