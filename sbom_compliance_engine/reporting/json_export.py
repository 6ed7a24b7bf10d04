"""
JSON exporter — Produces the full JSON output of one compliance evaluation.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .. import __version__


def build_payload(
    compliance_score: Any,
    records: list,
    document: Any,
    run_id: str,
) -> dict:
    """Assemble the report payload without touching the filesystem."""
    return {
        "metadata": {
            "engine": "SBOM Compliance Scoring Engine",
            "version": __version__,
            "run_id": run_id,
            "generated_utc": datetime.now(timezone.utc).isoformat(),
        },
        "document": {
            "spec_type": document.spec.spec_type,
            "spec_version": document.spec.version,
            "format": document.spec.format,
            "name": document.spec.name,
            "components": len(document.components),
        },
        "scoring": compliance_score.to_dict(),
        "records": [r.to_dict() for r in records],
    }


def export_json(
    compliance_score: Any,
    records: list,
    document: Any,
    output_dir: Path,
    run_id: str,
) -> Path:
    """
    Write the evaluation results to a JSON file.

    Returns:
        Path to the created JSON file.
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    payload = build_payload(compliance_score, records, document, run_id)

    filename = f"sbom_compliance_{compliance_score.standard}_{run_id}.json"
    filepath = output_dir / filename

    with open(filepath, "w", encoding="utf-8") as fh:
        json.dump(payload, fh, indent=2, default=str, ensure_ascii=False)

    return filepath
