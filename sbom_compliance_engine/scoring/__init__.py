"""Scoring package — category and overall compliance score calculation."""

from .engine import compute_scores, to_scores
from .models import CategoryScore, ComplianceScore, Score

__all__ = [
    "compute_scores",
    "to_scores",
    "CategoryScore",
    "ComplianceScore",
    "Score",
]
