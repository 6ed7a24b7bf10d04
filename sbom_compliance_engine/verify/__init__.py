"""Verify package — external signature verification."""

from .signature import build_command, verify_document_signatures, verify_signature

__all__ = [
    "build_command",
    "verify_document_signatures",
    "verify_signature",
]
