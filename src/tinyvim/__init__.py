"""A small modal terminal text editor built around a testable engine."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "config",
    "keymaps",
    "modes",
    "runtime",
    "search",
    "state",
    "view",
]

__version__ = "0.1.0"
