"""SBOM package — normalized document model and loading."""

from .document import (
    Checksum,
    CdxDocument,
    Component,
    Document,
    ExternalRef,
    License,
    Relation,
    Signature,
    Spec,
    SpdxDocument,
    Tool,
)
from .keys import KeyMaterialError, decode_signature_value, normalize_public_key
from .loader import DocumentLoadError, document_from_dict, load_document

__all__ = [
    "Checksum",
    "CdxDocument",
    "Component",
    "Document",
    "ExternalRef",
    "License",
    "Relation",
    "Signature",
    "Spec",
    "SpdxDocument",
    "Tool",
    "KeyMaterialError",
    "decode_signature_value",
    "normalize_public_key",
    "DocumentLoadError",
    "document_from_dict",
    "load_document",
]
