"""
OpenChain Telco (OCT) SBOM guide — openness / completeness of SPDX documents.
Covers the document-creation block, build information, data formats and the
per-package SPDX fields.
"""

from __future__ import annotations

from ..config import HUMAN_READABLE_FORMATS, SPEC_SPDX
from ..sbom.document import Component, Document
from .base import Check, Standard
from .common import component_group, is_supported_format, joined, machine_format, presence
from .db import Record, new_record
from .keys import (
    CAT_BUILD_INFO,
    CAT_HUMAN_FORMAT,
    CAT_MACHINE_FORMAT,
    CAT_SBOM_FORMAT,
    CAT_SPDX_ELEMENTS,
    CheckKey,
)


# ---------------------------------------------------------------------------
# Document checks
# ---------------------------------------------------------------------------

def oct_spec(doc: Document) -> Record:
    """OCT only accepts SPDX documents."""
    spec = doc.spec.spec_type
    return new_record(CheckKey.SBOM_SPEC, spec, spec == SPEC_SPDX, CAT_SBOM_FORMAT)


def oct_spec_version(doc: Document) -> Record:
    return presence(CheckKey.SBOM_SPEC_VERSION, doc.spec.version, CAT_SPDX_ELEMENTS)


def oct_spdx_id(doc: Document) -> Record:
    return presence(CheckKey.SBOM_SPDXID, doc.spec.spdx_id, CAT_SPDX_ELEMENTS)


def oct_sbom_name(doc: Document) -> Record:
    return presence(CheckKey.SBOM_NAME, doc.spec.name, CAT_SPDX_ELEMENTS)


def oct_sbom_namespace(doc: Document) -> Record:
    return presence(CheckKey.SBOM_NAMESPACE, doc.spec.namespace, CAT_SPDX_ELEMENTS)


def oct_sbom_license(doc: Document) -> Record:
    value = joined(lic.display() for lic in doc.spec.licenses)
    return presence(CheckKey.SBOM_LICENSE, value, CAT_SPDX_ELEMENTS)


def oct_sbom_comment(doc: Document) -> Record:
    return presence(CheckKey.SBOM_COMMENT, doc.spec.comment, CAT_SPDX_ELEMENTS, required=False)


def oct_sbom_organization(doc: Document) -> Record:
    return presence(CheckKey.SBOM_ORG, doc.spec.organization, CAT_BUILD_INFO)


def oct_sbom_tool(doc: Document) -> Record:
    """Creator: Tool — at least one named tool."""
    names = [
        f"{t.name}-{t.version}" if t.version else t.name
        for t in doc.tools
        if t.name
    ]
    return new_record(CheckKey.SBOM_TOOL, joined(names), bool(names), CAT_BUILD_INFO)


def oct_created_timestamp(doc: Document) -> Record:
    return presence(CheckKey.SBOM_TIMESTAMP, doc.spec.creation_timestamp, CAT_BUILD_INFO)


def oct_machine_format(doc: Document) -> Record:
    spec = doc.spec.spec_type
    passed = spec == SPEC_SPDX and is_supported_format(spec, doc.spec.format)
    return new_record(CheckKey.SBOM_MACHINE_FORMAT, machine_format(doc), passed, CAT_MACHINE_FORMAT)


def oct_human_format(doc: Document) -> Record:
    file_format = doc.spec.format
    return new_record(
        CheckKey.SBOM_HUMAN_FORMAT,
        file_format,
        file_format in HUMAN_READABLE_FORMATS,
        CAT_HUMAN_FORMAT,
    )


# ---------------------------------------------------------------------------
# Package checks — grouped per component id
# ---------------------------------------------------------------------------

def oct_package_name(comp: Component) -> Record:
    return presence(CheckKey.PACK_NAME, comp.name, component_group(comp))


def oct_package_version(comp: Component) -> Record:
    return presence(CheckKey.PACK_VERSION, comp.version, component_group(comp))


def oct_package_spdx_id(comp: Component) -> Record:
    return presence(CheckKey.PACK_SPDXID, comp.spdx_id, component_group(comp))


def oct_package_supplier(comp: Component) -> Record:
    return presence(CheckKey.PACK_SUPPLIER, comp.supplier, component_group(comp))


def oct_package_download_url(comp: Component) -> Record:
    return presence(CheckKey.PACK_DOWNLOAD_URL, comp.download_location, component_group(comp))


def oct_package_file_analyzed(comp: Component) -> Record:
    value = "yes" if comp.file_analyzed else "no"
    return new_record(CheckKey.PACK_FILE_ANALYZED, value, comp.file_analyzed, component_group(comp))


def oct_package_hash(comp: Component) -> Record:
    algorithms = [c.algorithm for c in comp.checksums if c.value]
    return new_record(
        CheckKey.PACK_HASH,
        joined(algorithms),
        bool(algorithms),
        component_group(comp),
        required=False,
    )


def oct_package_con_license(comp: Component) -> Record:
    return presence(CheckKey.PACK_LICENSE_CON, comp.license_concluded, component_group(comp))


def oct_package_dec_license(comp: Component) -> Record:
    return presence(CheckKey.PACK_LICENSE_DEC, comp.license_declared, component_group(comp))


def oct_package_copyright(comp: Component) -> Record:
    return presence(CheckKey.PACK_COPYRIGHT, comp.copyright, component_group(comp))


def oct_package_external_refs(comp: Component) -> Record:
    ref_types = [r.ref_type for r in comp.external_refs if r.locator]
    return new_record(CheckKey.PACK_EXT_REF, joined(ref_types), bool(ref_types), component_group(comp))


OCT = Standard(
    name="oct",
    title="OpenChain Telco SBOM Guide",
    description="Openness and completeness of SPDX documents and packages",
    document_checks=[
        Check(CheckKey.SBOM_SPEC, oct_spec, CAT_SBOM_FORMAT),
        Check(CheckKey.SBOM_SPEC_VERSION, oct_spec_version, CAT_SPDX_ELEMENTS),
        Check(CheckKey.SBOM_SPDXID, oct_spdx_id, CAT_SPDX_ELEMENTS),
        Check(CheckKey.SBOM_NAME, oct_sbom_name, CAT_SPDX_ELEMENTS),
        Check(CheckKey.SBOM_NAMESPACE, oct_sbom_namespace, CAT_SPDX_ELEMENTS),
        Check(CheckKey.SBOM_LICENSE, oct_sbom_license, CAT_SPDX_ELEMENTS),
        Check(CheckKey.SBOM_COMMENT, oct_sbom_comment, CAT_SPDX_ELEMENTS, required=False),
        Check(CheckKey.SBOM_ORG, oct_sbom_organization, CAT_BUILD_INFO),
        Check(CheckKey.SBOM_TOOL, oct_sbom_tool, CAT_BUILD_INFO),
        Check(CheckKey.SBOM_TIMESTAMP, oct_created_timestamp, CAT_BUILD_INFO),
        Check(CheckKey.SBOM_MACHINE_FORMAT, oct_machine_format, CAT_MACHINE_FORMAT),
        Check(CheckKey.SBOM_HUMAN_FORMAT, oct_human_format, CAT_HUMAN_FORMAT),
    ],
    component_checks=[
        Check(CheckKey.PACK_NAME, oct_package_name),
        Check(CheckKey.PACK_VERSION, oct_package_version),
        Check(CheckKey.PACK_SPDXID, oct_package_spdx_id),
        Check(CheckKey.PACK_SUPPLIER, oct_package_supplier),
        Check(CheckKey.PACK_DOWNLOAD_URL, oct_package_download_url),
        Check(CheckKey.PACK_FILE_ANALYZED, oct_package_file_analyzed),
        Check(CheckKey.PACK_HASH, oct_package_hash, required=False),
        Check(CheckKey.PACK_LICENSE_CON, oct_package_con_license),
        Check(CheckKey.PACK_LICENSE_DEC, oct_package_dec_license),
        Check(CheckKey.PACK_COPYRIGHT, oct_package_copyright),
        Check(CheckKey.PACK_EXT_REF, oct_package_external_refs),
    ],
)
