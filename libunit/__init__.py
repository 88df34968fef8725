"""Unit-test runner with framed, coloured reports and a printf-style formatter."""

__version__ = "0.1.0"
__all__ = ["convert", "fields", "printf", "report", "runner", "cli"]