"""Deterministic numeric fingerprints ("DNA") for file content."""

from .errors import FileDnaError
from .fingerprint import Fingerprint, fingerprint_path, fingerprint_stream

__version__ = "0.1.0"

__all__ = ["FileDnaError", "Fingerprint", "fingerprint_path", "fingerprint_stream"]
