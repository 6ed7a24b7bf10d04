"""
OWASP SCVS V2 — Software Bill of Materials verification maturity.
One record per control (2.1 - 2.18). Controls mandated at Level 1 are required.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..config import EvaluationConfig
from ..sbom.document import Document
from ..verify.signature import verify_document_signatures
from .base import Check, Standard
from .common import all_components, coverage, is_supported_spec, joined, machine_format
from .db import Record, new_record
from .keys import (
    CAT_SCVS_ANALYSIS,
    CAT_SCVS_COMP_IDENTITY,
    CAT_SCVS_COMP_INTEGRITY,
    CAT_SCVS_COMP_LICENSING,
    CAT_SCVS_FORMAT,
    CAT_SCVS_IDENTITY,
    CAT_SCVS_INVENTORY,
    CAT_SCVS_SIGNATURE,
    CheckKey,
)

logger = logging.getLogger("sbom_compliance_engine.compliance.scvs")

# Control id and the lowest maturity level mandating it
SCVS_CONTROLS = {
    CheckKey.SCVS_MACHINE_READABLE: ("2.1", 1),
    CheckKey.SCVS_AUTOMATED_CREATION: ("2.2", 2),
    CheckKey.SCVS_UNIQUE_ID: ("2.3", 1),
    CheckKey.SCVS_SIGNED: ("2.4", 2),
    CheckKey.SCVS_SIGNATURE_CORRECT: ("2.5", 2),
    CheckKey.SCVS_SIGNATURE_VERIFIED: ("2.6", 3),
    CheckKey.SCVS_TIMESTAMPED: ("2.7", 1),
    CheckKey.SCVS_RISK_ANALYZED: ("2.8", 1),
    CheckKey.SCVS_DEPENDENCY_INVENTORY: ("2.9", 1),
    CheckKey.SCVS_TEST_COMPONENTS: ("2.10", 2),
    CheckKey.SCVS_PRIMARY_COMPONENT: ("2.11", 2),
    CheckKey.SCVS_COMP_IDENTITY: ("2.12", 1),
    CheckKey.SCVS_COMP_ORIGIN: ("2.13", 3),
    CheckKey.SCVS_COMP_LICENSES: ("2.14", 1),
    CheckKey.SCVS_COMP_VERIFIED_LICENSE: ("2.15", 2),
    CheckKey.SCVS_COMP_COPYRIGHT: ("2.16", 3),
    CheckKey.SCVS_COMP_MODIFICATIONS: ("2.17", 3),
    CheckKey.SCVS_COMP_HASH: ("2.18", 3),
}

# Levels each control applies to, e.g. "L1 L2 L3"
SCVS_LEVELS = {
    key: " ".join(f"L{n}" for n in range(level, 4))
    for key, (_, level) in SCVS_CONTROLS.items()
}


def _record(key: CheckKey, value: str, passed: bool, category: str) -> Record:
    _, level = SCVS_CONTROLS[key]
    return new_record(key, value, passed, category, required=level == 1)


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------

def is_sbom_machine_readable(doc: Document) -> bool:
    return is_supported_spec(doc.spec.spec_type)


def is_sbom_creation_automated(doc: Document) -> bool:
    return any(t.name and t.version for t in doc.tools)


def is_sbom_has_uniq_id(doc: Document) -> bool:
    return doc.spec.namespace != ""


def is_sbom_has_signature(doc: Document) -> bool:
    """Only the first signature entry decides."""
    if not doc.signatures:
        return False
    return doc.signatures[0].exists()


def is_sbom_signature_correct(doc: Document) -> bool:
    return is_sbom_has_signature(doc)


def is_sbom_timestamped(doc: Document) -> bool:
    return doc.spec.creation_timestamp != ""


def is_sbom_has_primary_component(doc: Document) -> bool:
    return bool(doc.primary_component)


def is_component_has_identity_id(doc: Document) -> bool:
    return all_components(doc, lambda c: bool(c.purls))


def is_component_has_origin_id(doc: Document) -> bool:
    # Same predicate as 2.12 until origin metadata is modelled separately
    return all_components(doc, lambda c: bool(c.purls))


def is_component_has_licenses(doc: Document) -> bool:
    return all_components(doc, lambda c: bool(c.licenses))


def is_component_has_copyright(doc: Document) -> bool:
    return all_components(doc, lambda c: bool(c.copyright))


# ---------------------------------------------------------------------------
# Checks
# ---------------------------------------------------------------------------

def scvs_machine_readable(doc: Document) -> Record:
    return _record(
        CheckKey.SCVS_MACHINE_READABLE, machine_format(doc),
        is_sbom_machine_readable(doc), CAT_SCVS_FORMAT,
    )


def scvs_automated_creation(doc: Document) -> Record:
    tools = joined(f"{t.name}-{t.version}" for t in doc.tools if t.name and t.version)
    return _record(
        CheckKey.SCVS_AUTOMATED_CREATION, tools,
        is_sbom_creation_automated(doc), CAT_SCVS_FORMAT,
    )


def scvs_unique_id(doc: Document) -> Record:
    return _record(
        CheckKey.SCVS_UNIQUE_ID, doc.spec.namespace,
        is_sbom_has_uniq_id(doc), CAT_SCVS_IDENTITY,
    )


def scvs_signed(doc: Document) -> Record:
    signed = is_sbom_has_signature(doc)
    return _record(CheckKey.SCVS_SIGNED, _yes_no(signed), signed, CAT_SCVS_SIGNATURE)


def scvs_signature_correct(doc: Document) -> Record:
    correct = is_sbom_signature_correct(doc)
    return _record(CheckKey.SCVS_SIGNATURE_CORRECT, _yes_no(correct), correct, CAT_SCVS_SIGNATURE)


def scvs_signature_verified(
    doc: Document,
    config: Optional[EvaluationConfig] = None,
    log: Optional[logging.Logger] = None,
) -> Record:
    config = config or EvaluationConfig()
    verified = verify_document_signatures(doc.signatures, config.verifier, log or logger)
    return _record(CheckKey.SCVS_SIGNATURE_VERIFIED, _yes_no(verified), verified, CAT_SCVS_SIGNATURE)


def scvs_timestamped(doc: Document) -> Record:
    return _record(
        CheckKey.SCVS_TIMESTAMPED, doc.spec.creation_timestamp,
        is_sbom_timestamped(doc), CAT_SCVS_IDENTITY,
    )


def scvs_risk_analyzed(doc: Document) -> Record:
    return _record(CheckKey.SCVS_RISK_ANALYZED, "", False, CAT_SCVS_ANALYSIS)


def scvs_dependency_inventory(doc: Document) -> Record:
    return _record(CheckKey.SCVS_DEPENDENCY_INVENTORY, "", False, CAT_SCVS_INVENTORY)


def scvs_test_components(doc: Document) -> Record:
    return _record(CheckKey.SCVS_TEST_COMPONENTS, "", False, CAT_SCVS_INVENTORY)


def scvs_primary_component(doc: Document) -> Record:
    primary = is_sbom_has_primary_component(doc)
    return _record(CheckKey.SCVS_PRIMARY_COMPONENT, _yes_no(primary), primary, CAT_SCVS_INVENTORY)


def scvs_component_identity(doc: Document) -> Record:
    return _record(
        CheckKey.SCVS_COMP_IDENTITY, coverage(doc, lambda c: bool(c.purls)),
        is_component_has_identity_id(doc), CAT_SCVS_COMP_IDENTITY,
    )


def scvs_component_origin(doc: Document) -> Record:
    return _record(
        CheckKey.SCVS_COMP_ORIGIN, coverage(doc, lambda c: bool(c.purls)),
        is_component_has_origin_id(doc), CAT_SCVS_COMP_IDENTITY,
    )


def scvs_component_licenses(doc: Document) -> Record:
    return _record(
        CheckKey.SCVS_COMP_LICENSES, coverage(doc, lambda c: bool(c.licenses)),
        is_component_has_licenses(doc), CAT_SCVS_COMP_LICENSING,
    )


def scvs_component_verified_license(doc: Document) -> Record:
    return _record(CheckKey.SCVS_COMP_VERIFIED_LICENSE, "", False, CAT_SCVS_COMP_LICENSING)


def scvs_component_copyright(doc: Document) -> Record:
    return _record(
        CheckKey.SCVS_COMP_COPYRIGHT, coverage(doc, lambda c: bool(c.copyright)),
        is_component_has_copyright(doc), CAT_SCVS_COMP_LICENSING,
    )


def scvs_component_modifications(doc: Document) -> Record:
    return _record(CheckKey.SCVS_COMP_MODIFICATIONS, "", False, CAT_SCVS_COMP_INTEGRITY)


def scvs_component_hash(doc: Document) -> Record:
    return _record(CheckKey.SCVS_COMP_HASH, "", False, CAT_SCVS_COMP_INTEGRITY)


def _check(key: CheckKey, func, category: str, **kwargs) -> Check:
    _, level = SCVS_CONTROLS[key]
    return Check(key, func, category, required=level == 1, **kwargs)


SCVS = Standard(
    name="scvs",
    title="OWASP SCVS V2: Software Bill of Materials",
    description="Verification maturity of the SBOM and its component metadata",
    document_checks=[
        _check(CheckKey.SCVS_MACHINE_READABLE, scvs_machine_readable, CAT_SCVS_FORMAT),
        _check(CheckKey.SCVS_AUTOMATED_CREATION, scvs_automated_creation, CAT_SCVS_FORMAT),
        _check(CheckKey.SCVS_UNIQUE_ID, scvs_unique_id, CAT_SCVS_IDENTITY),
        _check(CheckKey.SCVS_SIGNED, scvs_signed, CAT_SCVS_SIGNATURE),
        _check(CheckKey.SCVS_SIGNATURE_CORRECT, scvs_signature_correct, CAT_SCVS_SIGNATURE),
        _check(CheckKey.SCVS_SIGNATURE_VERIFIED, scvs_signature_verified, CAT_SCVS_SIGNATURE,
               with_config=True),
        _check(CheckKey.SCVS_TIMESTAMPED, scvs_timestamped, CAT_SCVS_IDENTITY),
        _check(CheckKey.SCVS_RISK_ANALYZED, scvs_risk_analyzed, CAT_SCVS_ANALYSIS),
        _check(CheckKey.SCVS_DEPENDENCY_INVENTORY, scvs_dependency_inventory, CAT_SCVS_INVENTORY),
        _check(CheckKey.SCVS_TEST_COMPONENTS, scvs_test_components, CAT_SCVS_INVENTORY),
        _check(CheckKey.SCVS_PRIMARY_COMPONENT, scvs_primary_component, CAT_SCVS_INVENTORY),
        _check(CheckKey.SCVS_COMP_IDENTITY, scvs_component_identity, CAT_SCVS_COMP_IDENTITY),
        _check(CheckKey.SCVS_COMP_ORIGIN, scvs_component_origin, CAT_SCVS_COMP_IDENTITY),
        _check(CheckKey.SCVS_COMP_LICENSES, scvs_component_licenses, CAT_SCVS_COMP_LICENSING),
        _check(CheckKey.SCVS_COMP_VERIFIED_LICENSE, scvs_component_verified_license,
               CAT_SCVS_COMP_LICENSING),
        _check(CheckKey.SCVS_COMP_COPYRIGHT, scvs_component_copyright, CAT_SCVS_COMP_LICENSING),
        _check(CheckKey.SCVS_COMP_MODIFICATIONS, scvs_component_modifications,
               CAT_SCVS_COMP_INTEGRITY),
        _check(CheckKey.SCVS_COMP_HASH, scvs_component_hash, CAT_SCVS_COMP_INTEGRITY),
    ],
)
