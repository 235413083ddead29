"""Two-stack integer sorting that prints the operations it performs, with small text, byte and list helpers."""

__version__ = "1.0.0"
__all__ = [
    "chars",
    "cli",
    "linked",
    "lines",
    "memory",
    "output",
    "parsing",
    "sorting",
    "stacks",
    "strings",
]