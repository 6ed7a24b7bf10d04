from __future__ import annotations

import pytest

from sbom_compliance_engine.compliance import CheckKey, SCVS_LEVELS, evaluate
from sbom_compliance_engine.compliance import scvs
from sbom_compliance_engine.sbom import CdxDocument, Component, License, Signature, Tool


STUBS = [
    scvs.scvs_risk_analyzed,
    scvs.scvs_dependency_inventory,
    scvs.scvs_test_components,
    scvs.scvs_component_verified_license,
    scvs.scvs_component_modifications,
    scvs.scvs_component_hash,
]

COMPLETENESS = [
    scvs.scvs_component_identity,
    scvs.scvs_component_origin,
    scvs.scvs_component_licenses,
    scvs.scvs_component_copyright,
]


@pytest.mark.parametrize("check", STUBS)
def test_stubbed_controls_always_fail(spdx_doc, check):
    record = check(spdx_doc)
    assert record.score == 0.0
    assert record.check_value == ""


@pytest.mark.parametrize("check", COMPLETENESS)
def test_completeness_fails_without_components(empty_cdx_doc, check):
    record = check(empty_cdx_doc)
    assert record.score == 0.0
    assert record.check_value == "0/0"


@pytest.mark.parametrize("check", COMPLETENESS)
def test_completeness_passes_with_full_coverage(spdx_doc, check):
    record = check(spdx_doc)
    assert record.score == 10.0
    assert record.check_value == "1/1"


@pytest.mark.parametrize("check", COMPLETENESS)
def test_completeness_is_binary(spdx_doc, check):
    spdx_doc.components.append(Component(id="bare"))
    record = check(spdx_doc)
    assert record.score == 0.0
    assert record.check_value == "1/2"


def test_origin_duplicates_identity(spdx_doc):
    spdx_doc.components[0].purls = []
    assert scvs.is_component_has_identity_id(spdx_doc) is False
    assert scvs.is_component_has_origin_id(spdx_doc) is False


def test_licenses_and_copyright_predicates():
    doc = CdxDocument(components=[
        Component(id="a", licenses=[License(short_id="MIT")], copyright="(c) a"),
        Component(id="b", licenses=[License(name="Custom")], copyright="(c) b"),
    ])
    assert scvs.is_component_has_licenses(doc)
    assert scvs.is_component_has_copyright(doc)


def test_boolean_document_controls(spdx_doc):
    assert scvs.scvs_machine_readable(spdx_doc).score == 10.0
    assert scvs.scvs_automated_creation(spdx_doc).check_value == "syft-0.80.0"
    assert scvs.scvs_unique_id(spdx_doc).score == 10.0
    assert scvs.scvs_timestamped(spdx_doc).check_value == "2023-05-04T09:33:40Z"
    assert scvs.scvs_primary_component(spdx_doc).check_value == "yes"


def test_automation_needs_tool_version(spdx_doc):
    spdx_doc.tools = [Tool(name="syft")]
    assert scvs.scvs_automated_creation(spdx_doc).score == 0.0


def test_machine_readable_rejects_unknown_spec(spdx_doc):
    spdx_doc.spec.spec_type = "swid"
    record = scvs.scvs_machine_readable(spdx_doc)
    assert record.score == 0.0
    assert record.check_value == "swid, json"


def test_signature_presence_uses_first_entry(spdx_doc):
    assert scvs.scvs_signed(spdx_doc).score == 0.0

    spdx_doc.signatures = [Signature(value="", public_key=""), Signature(value="sig", public_key="key")]
    assert scvs.is_sbom_has_signature(spdx_doc) is False

    spdx_doc.signatures = [Signature(value="sig", public_key="key")]
    assert scvs.scvs_signed(spdx_doc).score == 10.0
    assert scvs.scvs_signature_correct(spdx_doc).score == 10.0


def test_signature_verified_delegates_to_verifier(spdx_doc, monkeypatch):
    seen = {}

    def fake_verify(signatures, config, log):
        seen["signatures"] = signatures
        seen["config"] = config
        return True

    monkeypatch.setattr(scvs, "verify_document_signatures", fake_verify)
    spdx_doc.signatures = [Signature(value="sig", public_key="key")]
    record = scvs.scvs_signature_verified(spdx_doc)
    assert record.score == 10.0
    assert record.check_value == "yes"
    assert seen["signatures"] == spdx_doc.signatures


def test_signature_verified_without_signature(spdx_doc):
    record = scvs.scvs_signature_verified(spdx_doc)
    assert record.score == 0.0
    assert record.check_value == "no"


def test_required_marks_level_one_controls(empty_cdx_doc):
    db = evaluate("scvs", empty_cdx_doc)
    assert len(db) == 18
    required = {r.check_key for r in db.required()}
    assert required == {
        CheckKey.SCVS_MACHINE_READABLE,
        CheckKey.SCVS_UNIQUE_ID,
        CheckKey.SCVS_TIMESTAMPED,
        CheckKey.SCVS_RISK_ANALYZED,
        CheckKey.SCVS_DEPENDENCY_INVENTORY,
        CheckKey.SCVS_COMP_IDENTITY,
        CheckKey.SCVS_COMP_LICENSES,
    }
    assert SCVS_LEVELS[CheckKey.SCVS_UNIQUE_ID] == "L1 L2 L3"
    assert SCVS_LEVELS[CheckKey.SCVS_COMP_HASH] == "L3"


def test_scvs_records_keep_control_order(spdx_doc):
    db = evaluate("scvs", spdx_doc)
    keys = [r.check_key for r in db]
    assert keys == sorted(keys)
    assert keys[0] == CheckKey.SCVS_MACHINE_READABLE
    assert keys[-1] == CheckKey.SCVS_COMP_HASH
