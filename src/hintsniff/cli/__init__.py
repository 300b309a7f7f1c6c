"""Command-line interface for hintsniff."""
