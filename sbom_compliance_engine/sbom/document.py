"""
Normalized SBOM document model — the read-only view the compliance checks consume.
SPDX and CycloneDX documents share one interface; the variant only fixes the spec type.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Union

from ..config import SPEC_CYCLONEDX, SPEC_SPDX


@dataclass
class License:
    """A license attached to the document or a component."""
    short_id: str = ""                  # SPDX short identifier (e.g. "cc0-1.0")
    name: str = ""                      # Free-form name for custom licenses

    def display(self) -> str:
        return self.short_id or self.name


@dataclass
class Spec:
    """Document-level metadata."""
    spec_type: str = ""                 # spdx, cyclonedx
    format: str = ""                    # json, xml, yaml, tag-value, rdf
    version: str = ""                   # e.g. "SPDX-2.3", "1.5"
    name: str = ""
    namespace: str = ""                 # SPDX namespace / CycloneDX serialNumber
    organization: str = ""
    creation_timestamp: str = ""
    comment: str = ""
    spdx_id: str = ""
    licenses: list[License] = field(default_factory=list)


@dataclass
class Tool:
    name: str = ""
    version: str = ""


@dataclass
class Checksum:
    algorithm: str = ""
    value: str = ""


@dataclass
class ExternalRef:
    category: str = ""
    ref_type: str = ""                  # purl, cpe23Type, vcs, ...
    locator: str = ""


@dataclass
class Signature:
    """An embedded document signature and the key it claims to verify against."""
    value: Union[str, bytes] = ""
    public_key: Union[str, bytes] = ""
    algorithm: str = ""

    def exists(self) -> bool:
        return bool(self.value) and bool(self.public_key)


@dataclass
class Relation:
    """A dependency edge between two component ids."""
    source: str = ""
    target: str = ""


@dataclass
class Component:
    """A single package / component entry."""
    name: str = ""
    version: str = ""
    id: str = ""
    spdx_id: str = ""
    copyright: str = ""
    file_analyzed: bool = False
    license_concluded: str = ""
    license_declared: str = ""
    download_location: str = ""
    supplier: str = ""
    checksums: list[Checksum] = field(default_factory=list)
    external_refs: list[ExternalRef] = field(default_factory=list)
    purls: list[str] = field(default_factory=list)
    cpes: list[str] = field(default_factory=list)
    licenses: list[License] = field(default_factory=list)


@dataclass
class Document:
    """
    Normalized SBOM document.
    Owned by the caller; compliance checks only read it.
    """
    spec: Spec = field(default_factory=Spec)
    components: list[Component] = field(default_factory=list)
    tools: list[Tool] = field(default_factory=list)
    signatures: list[Signature] = field(default_factory=list)
    relations: list[Relation] = field(default_factory=list)
    primary_component: bool = False

    spec_type: str = ""

    def __post_init__(self):
        # The variant fills an empty spec type on its own copy of the spec
        if self.spec_type and not self.spec.spec_type:
            self.spec = replace(self.spec, spec_type=self.spec_type)


@dataclass
class SpdxDocument(Document):
    spec_type: str = SPEC_SPDX


@dataclass
class CdxDocument(Document):
    spec_type: str = SPEC_CYCLONEDX


DOCUMENT_TYPES: dict[str, type[Document]] = {
    SPEC_SPDX: SpdxDocument,
    SPEC_CYCLONEDX: CdxDocument,
}
