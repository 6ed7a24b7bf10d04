"""
Standard dispatcher — maps a standard name to its ordered check list and
evaluates a document against it.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..config import EvaluationConfig
from ..sbom.document import Document
from .base import Standard
from .db import DB
from .ntia import NTIA
from .oct import OCT
from .scvs import SCVS

logger = logging.getLogger("sbom_compliance_engine.compliance.dispatcher")

STANDARDS: dict[str, Standard] = {
    NTIA.name: NTIA,
    OCT.name: OCT,
    SCVS.name: SCVS,
}


class UnknownStandardError(Exception):
    """Raised when a caller requests a standard the engine does not know."""
    pass


def get_standard(name: str) -> Standard:
    standard = STANDARDS.get((name or "").strip().lower())
    if standard is None:
        raise UnknownStandardError(
            f"Unknown compliance standard '{name}'. "
            f"Available: {', '.join(sorted(STANDARDS))}"
        )
    return standard


def evaluate(
    standard: str,
    document: Document,
    config: Optional[EvaluationConfig] = None,
    log: Optional[logging.Logger] = None,
) -> DB:
    """
    Run every check of the requested standard against the document.

    Args:
        standard: Standard name ("ntia", "oct", "scvs").
        document: Normalized document; never modified.
        config:   Evaluation options (thread pool size, verifier settings).
        log:      Logger used by the run and passed down to the checks.

    Returns:
        A freshly populated DB owned by the caller.
    """
    log = log or logger
    selected = get_standard(standard)
    log.info(
        f"Evaluating {selected.title} against {document.spec.spec_type or 'unknown'} "
        f"document ({len(document.components)} components)"
    )
    return selected.run(document, config, log)
