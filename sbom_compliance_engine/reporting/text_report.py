"""
Text report — plain table of records and category scores for the terminal.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..compliance.scvs import SCVS_CONTROLS, SCVS_LEVELS

VALUE_WIDTH = 48


def _truncate(value: str, width: int = VALUE_WIDTH) -> str:
    return value if len(value) <= width else value[: width - 3] + "..."


def _feature(record) -> str:
    control = SCVS_CONTROLS.get(record.check_key)
    if control:
        return f"{control[0]} {record.check_key.name} ({SCVS_LEVELS[record.check_key]})"
    return record.check_key.name


def render_text(compliance_score: Any, records: list, title: str = "") -> str:
    lines = []
    header = title or compliance_score.standard
    lines.append("=" * 100)
    lines.append(f" {header}")
    lines.append("=" * 100)
    lines.append(f"  {'Category':<32s} {'Feature':<44s} {'Req':<4s} {'Score':>5s}  Value")
    lines.append(f"  {'─' * 32} {'─' * 44} {'─' * 4} {'─' * 5}  {'─' * 20}")
    for r in records:
        req = "yes" if r.required else "no"
        lines.append(
            f"  {_truncate(r.id, 32):<32s} {_feature(r):<44s} {req:<4s} "
            f"{r.score:5.1f}  {_truncate(r.check_value)}"
        )

    lines.append("")
    lines.append("  Category Scores")
    for cs in compliance_score.categories.values():
        lines.append(f"    {_truncate(cs.category, 40):<40s} {cs.score:5.1f}/10 "
                     f"({cs.passed_count}/{cs.check_count} passed)")

    lines.append("")
    status = "COMPLIANT" if compliance_score.compliant else "NOT COMPLIANT"
    lines.append(f"  Overall Score:    {compliance_score.overall_score:.1f}/10")
    lines.append(f"  Required Checks:  {compliance_score.required_passed}/"
                 f"{compliance_score.required_total} ({status})")
    return "\n".join(lines) + "\n"


def export_text(
    compliance_score: Any,
    records: list,
    output_dir: Path,
    run_id: str,
    title: str = "",
) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    filepath = output_dir / f"sbom_compliance_{compliance_score.standard}_{run_id}.txt"
    with open(filepath, "w", encoding="utf-8") as fh:
        fh.write(render_text(compliance_score, records, title))
    return filepath
