"""
Configuration module for the SBOM Compliance Scoring Engine.
Defines supported formats, signature verifier settings and evaluation options.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or is invalid."""
    pass


# ─── SBOM Specs & Serialization Formats ─────────────────────────────────────

SPEC_SPDX = "spdx"
SPEC_CYCLONEDX = "cyclonedx"

SUPPORTED_SPECS = [SPEC_SPDX, SPEC_CYCLONEDX]

SUPPORTED_FORMATS = {
    SPEC_SPDX: ["json", "yaml", "rdf", "tag-value", "xml"],
    SPEC_CYCLONEDX: ["json", "xml"],
}

# Serializations a person can reasonably read without tooling
HUMAN_READABLE_FORMATS = ["json", "tag-value"]


# ─── Signature Verification ─────────────────────────────────────────────────

SIGNATURE_VERIFY_COMMAND = "openssl"
SIGNATURE_PAYLOAD_PATH = "data-to-verify.txt"
SIGNATURE_VERIFY_TIMEOUT_SECONDS = 30.0
SIGNATURE_VERIFIED_MARKER = "Verified OK"


@dataclass
class VerifierConfig:
    """Controls for the external signature verifier."""
    command: str = SIGNATURE_VERIFY_COMMAND
    payload_path: str = SIGNATURE_PAYLOAD_PATH
    timeout_seconds: float = SIGNATURE_VERIFY_TIMEOUT_SECONDS
    temp_dir: Optional[str] = None      # None = system temp directory


# ─── Evaluation ─────────────────────────────────────────────────────────────

@dataclass
class EvaluationConfig:
    """Controls for running a standard's check set."""
    max_workers: int = 1                # >1 runs checks on a thread pool
    verifier: VerifierConfig = field(default_factory=VerifierConfig)


# ─── Output Configuration ───────────────────────────────────────────────────

REPORT_FORMATS = ["json", "csv", "text"]


@dataclass
class OutputConfig:
    """Output directory and format settings."""
    base_dir: str = "./sbom_compliance_output"
    formats: list[str] = field(default_factory=lambda: ["text"])

    @property
    def report_dir(self) -> Path:
        return Path(self.base_dir)


# ─── Master Configuration ───────────────────────────────────────────────────

@dataclass
class EngineConfig:
    """Top-level configuration for the entire engine."""
    standard: str = "ntia"
    evaluation: EvaluationConfig = field(default_factory=EvaluationConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    verbose: bool = False

    @classmethod
    def from_file(cls, path: str | Path) -> "EngineConfig":
        """Load configuration from a JSON file."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Failed to read config file {path}: {e}")
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object")

        config = cls()
        config.standard = data.get("standard", config.standard)
        if "evaluation" in data:
            evaluation = data["evaluation"]
            config.evaluation.max_workers = int(evaluation.get("max_workers", 1))
            for k, v in evaluation.get("verifier", {}).items():
                if hasattr(config.evaluation.verifier, k):
                    setattr(config.evaluation.verifier, k, v)
        if "output" in data:
            for k, v in data["output"].items():
                if hasattr(config.output, k):
                    setattr(config.output, k, v)
        unknown = [f for f in config.output.formats if f not in REPORT_FORMATS]
        if unknown:
            raise ConfigError(f"Unknown report formats: {', '.join(unknown)}")
        config.verbose = data.get("verbose", False)
        return config
