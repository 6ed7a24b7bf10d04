"""
CSV exporter — Produces structured CSV files of records and category scores.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Any

RECORD_FIELDS = ["check_key", "check_value", "score", "id", "required", "ignore"]
CATEGORY_FIELDS = ["category", "score", "checks", "passed", "ignored"]


def export_csv(
    compliance_score: Any,
    records: list,
    output_dir: Path,
    run_id: str,
) -> list[Path]:
    """
    Write CSV files for records and category scores.

    Returns:
        List of created CSV file paths.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    created = []
    standard = compliance_score.standard

    # --- Records CSV ---
    records_path = output_dir / f"records_{standard}_{run_id}.csv"
    with open(records_path, "w", newline="", encoding="utf-8-sig") as fh:
        writer = csv.DictWriter(fh, fieldnames=RECORD_FIELDS)
        writer.writeheader()
        for r in records:
            writer.writerow(r.to_dict())
    created.append(records_path)

    # --- Category Scores CSV ---
    categories_path = output_dir / f"category_scores_{standard}_{run_id}.csv"
    with open(categories_path, "w", newline="", encoding="utf-8-sig") as fh:
        writer = csv.DictWriter(fh, fieldnames=CATEGORY_FIELDS)
        writer.writeheader()
        for cs in compliance_score.categories.values():
            writer.writerow(cs.to_dict())
    created.append(categories_path)

    # --- Summary CSV ---
    summary_path = output_dir / f"summary_{standard}_{run_id}.csv"
    with open(summary_path, "w", newline="", encoding="utf-8-sig") as fh:
        writer = csv.writer(fh)
        writer.writerow(["metric", "value"])
        writer.writerow(["standard", standard])
        writer.writerow(["overall_score", round(compliance_score.overall_score, 2)])
        writer.writerow(["compliant", compliance_score.compliant])
        writer.writerow(["total_checks", compliance_score.total_checks])
        writer.writerow(["required_total", compliance_score.required_total])
        writer.writerow(["required_passed", compliance_score.required_passed])
    created.append(summary_path)

    return created
