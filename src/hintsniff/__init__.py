"""hintsniff - function signature and type hint analysis for PHP."""

__version__ = "0.1.0"
