"""
Document loader — builds the normalized Document from its JSON dump.
Raw SPDX / CycloneDX parsing happens upstream; this only rehydrates the model.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .document import (
    DOCUMENT_TYPES,
    Checksum,
    Component,
    Document,
    ExternalRef,
    License,
    Relation,
    Signature,
    Spec,
    Tool,
)
from .keys import KeyMaterialError, decode_signature_value, normalize_public_key

logger = logging.getLogger("sbom_compliance_engine.sbom.loader")


class DocumentLoadError(Exception):
    """Raised when a normalized document cannot be loaded."""
    pass


def _str(data: dict, key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


def _licenses(items: Any) -> list[License]:
    licenses = []
    for item in items or []:
        if isinstance(item, str):
            licenses.append(License(short_id=item))
        elif isinstance(item, dict):
            licenses.append(License(short_id=_str(item, "short_id"), name=_str(item, "name")))
    return licenses


def _signature(data: dict) -> Signature:
    """
    Decode signature material where possible. Undecodable material is kept
    as-is so the signature still counts as present; only verification fails.
    """
    value = data.get("value") or ""
    public_key = data.get("public_key") or ""
    try:
        if value:
            value = decode_signature_value(value)
    except KeyMaterialError as e:
        logger.warning(f"Keeping raw signature value: {e}")
    try:
        if public_key:
            public_key = normalize_public_key(public_key)
    except KeyMaterialError as e:
        logger.warning(f"Keeping raw public key: {e}")
        if isinstance(public_key, dict):
            public_key = json.dumps(public_key, sort_keys=True)
    return Signature(value=value, public_key=public_key, algorithm=_str(data, "algorithm"))


def _component(data: dict) -> Component:
    return Component(
        name=_str(data, "name"),
        version=_str(data, "version"),
        id=_str(data, "id"),
        spdx_id=_str(data, "spdx_id"),
        copyright=_str(data, "copyright"),
        file_analyzed=bool(data.get("file_analyzed", False)),
        license_concluded=_str(data, "license_concluded"),
        license_declared=_str(data, "license_declared"),
        download_location=_str(data, "download_location"),
        supplier=_str(data, "supplier"),
        checksums=[
            Checksum(algorithm=_str(c, "algorithm"), value=_str(c, "value"))
            for c in data.get("checksums", [])
        ],
        external_refs=[
            ExternalRef(
                category=_str(r, "category"),
                ref_type=_str(r, "ref_type"),
                locator=_str(r, "locator"),
            )
            for r in data.get("external_refs", [])
        ],
        purls=[str(p) for p in data.get("purls", []) if p],
        cpes=[str(c) for c in data.get("cpes", []) if c],
        licenses=_licenses(data.get("licenses")),
    )


def document_from_dict(data: dict[str, Any]) -> Document:
    """Build the Document variant matching the declared spec type."""
    if not isinstance(data, dict):
        raise DocumentLoadError("Document must be a JSON object")

    spec_data = data.get("spec") or {}
    if not isinstance(spec_data, dict):
        raise DocumentLoadError("Document 'spec' must be a JSON object")
    spec_type = _str(spec_data, "spec_type").lower()
    doc_cls = DOCUMENT_TYPES.get(spec_type)
    if doc_cls is None:
        raise DocumentLoadError(f"Unsupported SBOM spec type: {spec_type or '<empty>'}")

    spec = Spec(
        spec_type=spec_type,
        format=_str(spec_data, "format").lower(),
        version=_str(spec_data, "version"),
        name=_str(spec_data, "name"),
        namespace=_str(spec_data, "namespace"),
        organization=_str(spec_data, "organization"),
        creation_timestamp=_str(spec_data, "creation_timestamp"),
        comment=_str(spec_data, "comment"),
        spdx_id=_str(spec_data, "spdx_id"),
        licenses=_licenses(spec_data.get("licenses")),
    )

    try:
        return doc_cls(
            spec=spec,
            components=[_component(c) for c in data.get("components", [])],
            tools=[
                Tool(name=_str(t, "name"), version=_str(t, "version"))
                for t in data.get("tools", [])
            ],
            signatures=[_signature(s) for s in data.get("signatures", [])],
            relations=[
                Relation(source=_str(r, "source"), target=_str(r, "target"))
                for r in data.get("relations", [])
            ],
            primary_component=bool(data.get("primary_component", False)),
        )
    except (AttributeError, TypeError) as e:
        raise DocumentLoadError(f"Malformed document structure: {e}")


def load_document(path: str | Path) -> Document:
    """Load a normalized document from a JSON file."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = json.load(fh)
    except FileNotFoundError:
        raise DocumentLoadError(f"Document file not found: {path}")
    except (OSError, json.JSONDecodeError) as e:
        raise DocumentLoadError(f"Failed to read document {path}: {e}")

    doc = document_from_dict(data)
    logger.info(
        f"Loaded {doc.spec.spec_type} document with "
        f"{len(doc.components)} components from {path}"
    )
    return doc
