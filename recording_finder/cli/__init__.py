"""Typer command-line interface for Recording Finder."""
