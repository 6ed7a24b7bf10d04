"""
SBOM Compliance Scoring Engine
==============================
Scores a normalized software bill of materials against independent
compliance standards (NTIA minimum elements, OpenChain Telco, OWASP SCVS)
and aggregates the atomic check results into category and overall scores.

The engine never modifies the document it inspects and never fails a run:
missing or malformed data degrades to a 0.0 score.
"""

__version__ = "1.0.0"
__author__ = "SBOM Compliance Scoring Engine"
