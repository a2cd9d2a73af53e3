"""Base exception for expected create-dna-for-file failures."""

from __future__ import annotations


class FileDnaError(RuntimeError):
    """Raised for failures the CLI reports as ``Error: <message>``."""
