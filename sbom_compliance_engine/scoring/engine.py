"""
Scoring Engine — Reduces a record store into category and overall scores.

Scoring model:
  - Every record scores 0-10.
  - A category score is the mean of its records' scores, ignored records excluded.
  - The overall score is the mean of the category scores, so each category
    weighs the same regardless of how many checks it holds. A category whose
    records are all ignored scores 0.0 and still counts toward the overall mean.
  - Empty categories / documents score 0.0; NaN is never reported.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable

from ..compliance.db import DB, Record
from .models import CategoryScore, ComplianceScore, Score

logger = logging.getLogger("sbom_compliance_engine.scoring")


def _mean(values: list[float]) -> float:
    if not values:
        return 0.0
    result = sum(values) / len(values)
    return 0.0 if math.isnan(result) else result


def to_scores(records: Iterable[Record]) -> list[Score]:
    scores = []
    for r in records:
        s = Score(
            category=r.id,
            feature=r.check_key.name,
            descr=r.check_value,
            ignore=r.ignore,
        )
        s.set_score(r.score)
        scores.append(s)
    return scores


def compute_scores(db: DB, standard: str = "") -> ComplianceScore:
    """
    Compute category and overall scores from one evaluation's records.

    Args:
        db:       Record store produced by the dispatcher.
        standard: Name of the evaluated standard, carried into the result.

    Returns:
        ComplianceScore with per-category means and the overall mean.
    """
    records = db.records
    result = ComplianceScore(standard=standard)
    result.scores = to_scores(records)
    result.total_checks = len(records)

    # --- Group by category, in order of first appearance ---
    members: dict[str, list[float]] = {}
    for s in result.scores:
        cs = result.categories.setdefault(s.category, CategoryScore(category=s.category))
        if s.ignore:
            cs.ignored_count += 1
            continue
        members.setdefault(s.category, []).append(s.score)
        cs.check_count += 1
        if s.score >= 10.0:
            cs.passed_count += 1

    for category, cs in result.categories.items():
        cs.score = _mean(members.get(category, []))

    # --- Overall: equal weight per category ---
    result.overall_score = _mean([cs.score for cs in result.categories.values()])

    # --- Mandatory subset ---
    required = [r for r in records if r.required and not r.ignore]
    result.required_total = len(required)
    result.required_passed = sum(1 for r in required if r.passed)

    logger.debug(
        f"Scored {result.total_checks} records in {len(result.categories)} categories — "
        f"overall {result.overall_score:.2f}"
    )
    return result
