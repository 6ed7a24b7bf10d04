"""
Scoring data models — Defines structured types for the scoring engine output.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass
class Score:
    """Scorer view of one record."""
    category: str
    feature: str
    descr: str = ""
    score: float = 0.0
    ignore: bool = False

    def set_score(self, value: float):
        self.score = 0.0 if math.isnan(value) else value

    def to_dict(self) -> dict:
        return {
            "category": self.category,
            "feature": self.feature,
            "description": self.descr,
            "score": round(self.score, 2),
            "ignore": self.ignore,
        }


@dataclass
class CategoryScore:
    """Mean score for one category."""
    category: str
    score: float = 0.0                  # Mean of member scores, 0-10
    check_count: int = 0                # Records contributing (ignored excluded)
    passed_count: int = 0
    ignored_count: int = 0

    def to_dict(self) -> dict:
        return {
            "category": self.category,
            "score": round(self.score, 2),
            "checks": self.check_count,
            "passed": self.passed_count,
            "ignored": self.ignored_count,
        }


@dataclass
class ComplianceScore:
    """Complete scoring result for one (document, standard) evaluation."""
    standard: str = ""
    overall_score: float = 0.0
    categories: dict[str, CategoryScore] = field(default_factory=dict)
    scores: list[Score] = field(default_factory=list)
    total_checks: int = 0
    required_total: int = 0
    required_passed: int = 0

    @property
    def compliant(self) -> bool:
        """Every required check passed (and there was at least one)."""
        return self.required_total > 0 and self.required_passed == self.required_total

    def to_dict(self) -> dict:
        return {
            "standard": self.standard,
            "overall_score": round(self.overall_score, 2),
            "compliant": self.compliant,
            "total_checks": self.total_checks,
            "required": {
                "total": self.required_total,
                "passed": self.required_passed,
            },
            "category_scores": {
                k: v.to_dict() for k, v in self.categories.items()
            },
        }
