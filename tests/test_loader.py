from __future__ import annotations

import base64
import json

import pytest
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from sbom_compliance_engine.sbom import (
    CdxDocument,
    DocumentLoadError,
    KeyMaterialError,
    SpdxDocument,
    decode_signature_value,
    document_from_dict,
    load_document,
    normalize_public_key,
)


def _b64url(n: int, length: int) -> str:
    return base64.urlsafe_b64encode(n.to_bytes(length, "big")).rstrip(b"=").decode()


@pytest.fixture
def ec_key():
    return ec.generate_private_key(ec.SECP256R1()).public_key()


def _pem(public_key) -> bytes:
    return public_key.public_bytes(Encoding.PEM, PublicFormat.SubjectPublicKeyInfo)


def test_document_variant_follows_spec_type():
    spdx = document_from_dict({"spec": {"spec_type": "SPDX", "format": "JSON"}})
    cdx = document_from_dict({"spec": {"spec_type": "cyclonedx"}})
    assert isinstance(spdx, SpdxDocument)
    assert spdx.spec.spec_type == "spdx"
    assert spdx.spec.format == "json"
    assert isinstance(cdx, CdxDocument)


@pytest.mark.parametrize("data", [
    {"spec": {"spec_type": "swid"}},
    {"spec": {}},
    {"spec": "spdx"},
    [],
])
def test_unsupported_documents_raise(data):
    with pytest.raises(DocumentLoadError):
        document_from_dict(data)


def test_full_document_round_trip(tmp_path):
    data = {
        "spec": {
            "spec_type": "spdx",
            "format": "json",
            "version": "SPDX-2.3",
            "name": "nano",
            "licenses": ["CC0-1.0"],
        },
        "components": [{
            "name": "core-js",
            "version": "3.6.5",
            "id": "c1",
            "file_analyzed": True,
            "checksums": [{"algorithm": "SHA256", "value": "ab"}],
            "external_refs": [{"category": "PACKAGE-MANAGER", "ref_type": "purl", "locator": "pkg:npm/core-js"}],
            "purls": ["pkg:npm/core-js@3.6.5", ""],
            "licenses": [{"short_id": "MIT"}, "Apache-2.0"],
        }],
        "tools": [{"name": "syft", "version": "0.80.0"}],
        "relations": [{"source": "DOCUMENT", "target": "c1"}],
        "primary_component": True,
    }
    path = tmp_path / "sbom.json"
    path.write_text(json.dumps(data), encoding="utf-8")

    doc = load_document(path)
    comp = doc.components[0]
    assert doc.spec.licenses[0].short_id == "CC0-1.0"
    assert comp.file_analyzed is True
    assert comp.purls == ["pkg:npm/core-js@3.6.5"]
    assert [l.short_id for l in comp.licenses] == ["MIT", "Apache-2.0"]
    assert comp.external_refs[0].ref_type == "purl"
    assert doc.relations[0].target == "c1"
    assert doc.primary_component is True


def test_load_document_errors(tmp_path):
    with pytest.raises(DocumentLoadError):
        load_document(tmp_path / "missing.json")

    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(DocumentLoadError):
        load_document(bad)


def test_signature_material_is_decoded(ec_key):
    pem = _pem(ec_key)
    doc = document_from_dict({
        "spec": {"spec_type": "cyclonedx"},
        "signatures": [{
            "value": base64.b64encode(b"\x30\x44sig").decode(),
            "public_key": pem.decode(),
            "algorithm": "ES256",
        }],
    })
    sig = doc.signatures[0]
    assert sig.value == b"\x30\x44sig"
    assert sig.public_key == pem
    assert sig.exists()


def test_undecodable_signature_material_is_kept(caplog):
    doc = document_from_dict({
        "spec": {"spec_type": "cyclonedx"},
        "signatures": [{"value": "not base64!", "public_key": {"kty": "oct", "k": "x"}}],
    })
    sig = doc.signatures[0]
    assert sig.value == "not base64!"
    assert json.loads(sig.public_key) == {"k": "x", "kty": "oct"}
    assert sig.exists()
    assert "Keeping raw" in caplog.text


def test_decode_signature_value():
    assert decode_signature_value(b"raw") == b"raw"
    assert decode_signature_value(" " + base64.b64encode(b"abc").decode() + "\n") == b"abc"
    with pytest.raises(KeyMaterialError):
        decode_signature_value("%%%")


def test_normalize_pem_and_der(ec_key):
    pem = _pem(ec_key)
    der = ec_key.public_bytes(Encoding.DER, PublicFormat.SubjectPublicKeyInfo)
    assert normalize_public_key(pem) == pem
    assert normalize_public_key(pem.decode()) == pem
    assert normalize_public_key(der) == pem
    assert normalize_public_key(base64.b64encode(der).decode()) == pem


def test_normalize_ec_jwk(ec_key):
    numbers = ec_key.public_numbers()
    jwk = {
        "kty": "EC",
        "crv": "P-256",
        "x": _b64url(numbers.x, 32),
        "y": _b64url(numbers.y, 32),
    }
    assert normalize_public_key(jwk) == _pem(ec_key)


@pytest.mark.parametrize("key", [
    {"kty": "EC", "crv": "P-192", "x": "AA", "y": "AA"},
    {"kty": "EC", "crv": "P-256"},
    {"kty": "oct"},
    "-----BEGIN PUBLIC KEY-----\ngarbage\n-----END PUBLIC KEY-----",
    b"\x00\x01",
])
def test_normalize_rejects_bad_keys(key):
    with pytest.raises(KeyMaterialError):
        normalize_public_key(key)


def _wrapped(data: bytes, width: int = 64) -> str:
    text = base64.b64encode(data).decode()
    return "\n".join(text[i:i + width] for i in range(0, len(text), width)) + "\n"


def test_wrapped_and_urlsafe_signature_values():
    signature = bytes(range(256)) * 2
    urlsafe = base64.urlsafe_b64encode(signature).rstrip(b"=").decode()
    assert "-" in urlsafe or "_" in urlsafe

    assert decode_signature_value(_wrapped(signature)) == signature
    assert decode_signature_value(urlsafe) == signature

    for encoded in (_wrapped(signature), urlsafe):
        doc = document_from_dict({
            "spec": {"spec_type": "cyclonedx"},
            "signatures": [{"value": encoded, "public_key": "k"}],
        })
        assert doc.signatures[0].value == signature


@pytest.mark.parametrize("public_key", [
    "\ud800",
    {"kty": "EC", "crv": "P-256", "x": 1, "y": 2},
    {"kty": "RSA", "e": "AQAB", "n": ["not", "text"]},
    {"kty": "OKP", "crv": "Ed25519", "x": 7},
])
def test_malformed_public_keys_are_kept(public_key, caplog):
    doc = document_from_dict({
        "spec": {"spec_type": "spdx"},
        "signatures": [{"value": "abcd", "public_key": public_key}],
    })
    sig = doc.signatures[0]
    assert sig.exists()
    assert "Keeping raw public key" in caplog.text


def test_non_text_signature_value_is_kept():
    doc = document_from_dict({
        "spec": {"spec_type": "spdx"},
        "signatures": [{"value": 12345, "public_key": "k"}],
    })
    assert doc.signatures[0].value == 12345
