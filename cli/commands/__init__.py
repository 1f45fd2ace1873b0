"""Command implementations for the formstate CLI."""
