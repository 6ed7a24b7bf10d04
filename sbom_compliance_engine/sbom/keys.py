"""
Signature key material — normalizes embedded signature values and public keys
into the byte forms the external verifier expects (raw signature, PEM key).
"""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Any, Union

from cryptography.hazmat.primitives.asymmetric import ec, ed25519, rsa
from cryptography.hazmat.primitives.serialization import (
    Encoding,
    PublicFormat,
    load_der_public_key,
    load_pem_public_key,
)

logger = logging.getLogger("sbom_compliance_engine.sbom.keys")

PEM_MARKER = b"-----BEGIN"

# base64url alphabet -> standard alphabet
URLSAFE_ALPHABET = str.maketrans("-_", "+/")

# JWK "crv" -> cryptography curve
JWK_CURVES = {
    "P-256": ec.SECP256R1,
    "P-384": ec.SECP384R1,
    "P-521": ec.SECP521R1,
}


class KeyMaterialError(Exception):
    """Raised when signature or key material cannot be decoded."""
    pass


def _b64decode(value: str, urlsafe: bool = False) -> bytes:
    """
    Decode standard or base64url text. Line breaks and other whitespace
    are dropped, and missing padding is restored.
    """
    if not isinstance(value, str):
        raise KeyMaterialError(f"Expected base64 text, got {type(value).__name__}")
    data = "".join(value.split())
    if urlsafe or "-" in data or "_" in data:
        data = data.translate(URLSAFE_ALPHABET)
    data += "=" * (-len(data) % 4)
    try:
        return base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise KeyMaterialError(f"Invalid base64 data: {e}")


def _b64_int(value: str) -> int:
    return int.from_bytes(_b64decode(value, urlsafe=True), "big")


def decode_signature_value(value: Union[str, bytes]) -> bytes:
    """Decode a base64 or base64url signature value. Raw bytes pass through unchanged."""
    if isinstance(value, bytes):
        return value
    return _b64decode(value)


def _public_key_from_jwk(jwk: dict[str, Any]):
    kty = jwk.get("kty", "")
    try:
        if kty == "EC":
            curve = JWK_CURVES.get(jwk.get("crv", ""))
            if curve is None:
                raise KeyMaterialError(f"Unsupported EC curve: {jwk.get('crv')}")
            numbers = ec.EllipticCurvePublicNumbers(
                _b64_int(jwk["x"]), _b64_int(jwk["y"]), curve()
            )
            return numbers.public_key()
        if kty == "RSA":
            return rsa.RSAPublicNumbers(_b64_int(jwk["e"]), _b64_int(jwk["n"])).public_key()
        if kty == "OKP" and jwk.get("crv") == "Ed25519":
            return ed25519.Ed25519PublicKey.from_public_bytes(
                _b64decode(jwk["x"], urlsafe=True)
            )
    except KeyError as e:
        raise KeyMaterialError(f"JWK is missing parameter {e}")
    except (ValueError, TypeError) as e:
        raise KeyMaterialError(f"Invalid JWK: {e}")
    raise KeyMaterialError(f"Unsupported JWK key type: {kty or '<none>'}")


def normalize_public_key(key: Union[str, bytes, dict]) -> bytes:
    """
    Return the key as SubjectPublicKeyInfo PEM bytes.

    Accepts PEM text, base64-encoded DER, raw DER bytes, or a JWK dict
    (CycloneDX JSF signatures embed the key as a JWK).
    """
    if isinstance(key, dict):
        public_key = _public_key_from_jwk(key)
    else:
        try:
            raw = key.encode("utf-8") if isinstance(key, str) else key
            raw = raw.strip()
            if raw.startswith(PEM_MARKER):
                public_key = load_pem_public_key(raw)
            elif isinstance(key, str):
                public_key = load_der_public_key(_b64decode(raw.decode("ascii")))
            else:
                public_key = load_der_public_key(raw)
        except (ValueError, TypeError, AttributeError) as e:
            raise KeyMaterialError(f"Unable to load public key: {e}")

    return public_key.public_bytes(Encoding.PEM, PublicFormat.SubjectPublicKeyInfo)
