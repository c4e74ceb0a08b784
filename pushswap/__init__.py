"""Two-stack integer sorting with a minimal operation set, plus small text helpers."""

__version__ = "1.0.0"

__all__ = ["chars", "fmt", "output", "parse", "search", "sorter", "stack", "targets", "text"]