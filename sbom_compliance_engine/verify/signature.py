"""
Signature verifier — checks an embedded SBOM signature against its public key
by shelling out to an external digest verifier (openssl by default).

Every failure (temp file, write, process launch, timeout, mismatch) is
reported as "not verified"; nothing here raises into the evaluation run.
"""

from __future__ import annotations

import logging
import os
import subprocess
import tempfile
from contextlib import contextmanager
from typing import Iterator, Optional, Sequence, Union

from ..config import SIGNATURE_VERIFIED_MARKER, VerifierConfig
from ..sbom.document import Signature

logger = logging.getLogger("sbom_compliance_engine.verify")


@contextmanager
def _temp_file(
    content: Union[str, bytes],
    prefix: str,
    suffix: str,
    temp_dir: Optional[str] = None,
) -> Iterator[str]:
    """Write content to a uniquely named temp file and always remove it."""
    data = content.encode("utf-8") if isinstance(content, str) else content
    fd, path = tempfile.mkstemp(prefix=prefix, suffix=suffix, dir=temp_dir)
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
        yield path
    finally:
        try:
            os.remove(path)
        except FileNotFoundError:
            pass


def build_command(config: VerifierConfig, pubkey_path: str, sig_path: str) -> list[str]:
    return [
        config.command, "dgst",
        "-verify", pubkey_path,
        "-signature", sig_path,
        config.payload_path,
    ]


def verify_signature(
    signature: Signature,
    config: Optional[VerifierConfig] = None,
    log: Optional[logging.Logger] = None,
) -> bool:
    """
    Verify one signature. Success is judged by the verifier's combined
    output containing "Verified OK", not by its exit status.
    """
    config = config or VerifierConfig()
    log = log or logger

    try:
        with _temp_file(signature.value, "signature-", ".sig", config.temp_dir) as sig_path, \
                _temp_file(signature.public_key, "publickey-", ".pem", config.temp_dir) as key_path:
            cmd = build_command(config, key_path, sig_path)
            log.debug(f"Running signature verifier: {' '.join(cmd)}")
            proc = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                timeout=config.timeout_seconds,
                check=False,
            )
    except subprocess.TimeoutExpired:
        log.warning(f"Signature verifier timed out after {config.timeout_seconds}s")
        return False
    except (OSError, ValueError, TypeError) as e:
        log.warning(f"Signature verification could not run: {type(e).__name__}: {e}")
        return False

    output = proc.stdout.decode("utf-8", errors="replace") if proc.stdout else ""
    verified = SIGNATURE_VERIFIED_MARKER in output
    log.info(f"Signature verification result: {verified}")
    if not verified:
        log.debug(f"Verifier output: {output.strip()}")
    return verified


def verify_document_signatures(
    signatures: Sequence[Signature],
    config: Optional[VerifierConfig] = None,
    log: Optional[logging.Logger] = None,
) -> bool:
    """
    Only the first signature is evaluated; its result is the document's result.
    No signature means not verified, without invoking the external tool.
    """
    if not signatures or not signatures[0].exists():
        return False
    return verify_signature(signatures[0], config, log)
