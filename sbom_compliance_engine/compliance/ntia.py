"""
NTIA minimum elements — automation support, SBOM data fields and the
per-component baseline (supplier, name, version, unique ids, relationships).
"""

from __future__ import annotations

from ..sbom.document import Component, Document
from .base import Check, Standard
from .common import (
    component_group,
    is_supported_format,
    is_supported_spec,
    machine_format,
    presence,
)
from .db import Record, new_record
from .keys import CAT_AUTOMATION, CAT_DATA_FIELDS, CheckKey


def ntia_automation_spec(doc: Document) -> Record:
    spec = doc.spec.spec_type
    passed = is_supported_spec(spec) and is_supported_format(spec, doc.spec.format)
    return new_record(CheckKey.SBOM_MACHINE_FORMAT, machine_format(doc), passed, CAT_AUTOMATION)


def ntia_sbom_creator(doc: Document) -> Record:
    """Author of the SBOM data: the organization, else the first named tool."""
    creator = doc.spec.organization
    if not creator:
        creator = next((t.name for t in doc.tools if t.name), "")
    return presence(CheckKey.SBOM_CREATOR, creator, CAT_DATA_FIELDS)


def ntia_sbom_timestamp(doc: Document) -> Record:
    return presence(CheckKey.SBOM_TIMESTAMP, doc.spec.creation_timestamp, CAT_DATA_FIELDS)


def ntia_sbom_dependency(doc: Document) -> Record:
    """A primary component is declared and the dependency graph is non-empty."""
    count = len(doc.relations)
    passed = doc.primary_component and count > 0
    return new_record(CheckKey.SBOM_DEPENDENCY, str(count), passed, CAT_DATA_FIELDS)


def ntia_component_creator(comp: Component) -> Record:
    return presence(CheckKey.COMP_CREATOR, comp.supplier, component_group(comp))


def ntia_component_name(comp: Component) -> Record:
    return presence(CheckKey.COMP_NAME, comp.name, component_group(comp))


def ntia_component_version(comp: Component) -> Record:
    return presence(CheckKey.COMP_VERSION, comp.version, component_group(comp))


def ntia_component_other_uniq_ids(comp: Component) -> Record:
    ids = comp.purls or comp.cpes
    value = ids[0] if ids else ""
    return presence(CheckKey.COMP_OTHER_UNIQ_IDS, value, component_group(comp))


def ntia_component_depth(comp: Component, doc: Document) -> Record:
    """The component takes part in at least one dependency relationship."""
    count = 0
    if comp.id:
        count = sum(1 for r in doc.relations if comp.id in (r.source, r.target))
    return new_record(CheckKey.COMP_DEPTH, str(count), count > 0, component_group(comp))


NTIA = Standard(
    name="ntia",
    title="NTIA Minimum Elements",
    description="Minimum elements for a software bill of materials",
    document_checks=[
        Check(CheckKey.SBOM_MACHINE_FORMAT, ntia_automation_spec, CAT_AUTOMATION),
        Check(CheckKey.SBOM_CREATOR, ntia_sbom_creator, CAT_DATA_FIELDS),
        Check(CheckKey.SBOM_TIMESTAMP, ntia_sbom_timestamp, CAT_DATA_FIELDS),
        Check(CheckKey.SBOM_DEPENDENCY, ntia_sbom_dependency, CAT_DATA_FIELDS),
    ],
    component_checks=[
        Check(CheckKey.COMP_CREATOR, ntia_component_creator),
        Check(CheckKey.COMP_NAME, ntia_component_name),
        Check(CheckKey.COMP_VERSION, ntia_component_version),
        Check(CheckKey.COMP_OTHER_UNIQ_IDS, ntia_component_other_uniq_ids),
        Check(CheckKey.COMP_DEPTH, ntia_component_depth, with_document=True),
    ],
)
