"""Railway network and schedule file parsing, time conversion and settings."""

__version__ = "0.1.0"

__all__ = ["cli", "errors", "logger", "parser", "positions", "settings", "timeconv"]