from __future__ import annotations


class InvalidInput(ValueError):
    """Raised when an evaluation call gets the wrong cards or players."""
