"""
SBOM Compliance Scoring Engine — Main Orchestrator

Usage:
    python -m sbom_compliance_engine --input sbom.json                    # NTIA, text report
    python -m sbom_compliance_engine --input sbom.json --standard scvs
    python -m sbom_compliance_engine --input sbom.json --standard oct --formats json csv
    python -m sbom_compliance_engine --input sbom.json --config config.json --workers 4

The input is a normalized document dump (see sbom/loader.py), not a raw
SPDX or CycloneDX file.
"""

from __future__ import annotations

import argparse
import logging
import sys
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from . import __version__
from .compliance import STANDARDS, UnknownStandardError, evaluate, get_standard
from .config import REPORT_FORMATS, ConfigError, EngineConfig
from .reporting import export_csv, export_json, export_text, render_text
from .sbom import DocumentLoadError, load_document
from .scoring import compute_scores

logger = logging.getLogger("sbom_compliance_engine")


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sbom_compliance_engine",
        description="Score a normalized SBOM against a compliance standard",
    )
    parser.add_argument(
        "--input", "-i",
        type=Path,
        required=True,
        help="Path to the normalized SBOM document (JSON)",
    )
    parser.add_argument(
        "--standard", "-s",
        choices=sorted(STANDARDS),
        default=None,
        help="Compliance standard to evaluate (default: ntia)",
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        help="Path to JSON configuration file",
    )
    parser.add_argument(
        "--output-dir", "-o",
        type=Path,
        default=None,
        help="Output directory for reports (default: ./sbom_compliance_output)",
    )
    parser.add_argument(
        "--formats",
        nargs="+",
        choices=REPORT_FORMATS,
        default=None,
        help="Report files to write (default: text)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Evaluate checks on a thread pool of this size",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> EngineConfig:
    """Build engine configuration from config file, then CLI overrides."""
    if args.config:
        config = EngineConfig.from_file(args.config)
    else:
        config = EngineConfig()

    if args.standard:
        config.standard = args.standard
    if args.output_dir:
        config.output.base_dir = str(args.output_dir)
    if args.formats:
        config.output.formats = list(args.formats)
    if args.workers:
        config.evaluation.max_workers = args.workers
    if args.verbose:
        config.verbose = True
    return config


def generate_reports(
    compliance_score,
    records: list,
    document,
    output_dir: Path,
    run_id: str,
    title: str,
    formats: list[str],
) -> list[Path]:
    """Generate all requested report formats."""
    created = []

    if "json" in formats:
        path = export_json(compliance_score, records, document, output_dir, run_id)
        created.append(path)
        print(f"  JSON:  {path}")

    if "csv" in formats:
        paths = export_csv(compliance_score, records, output_dir, run_id)
        created.extend(paths)
        for p in paths:
            print(f"  CSV:   {p}")

    if "text" in formats:
        path = export_text(compliance_score, records, output_dir, run_id, title)
        created.append(path)
        print(f"  Text:  {path}")

    return created


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)

    try:
        config = build_config(args)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    run_id = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S") + "_" + uuid.uuid4().hex[:8]

    try:
        document = load_document(args.input)
        db = evaluate(config.standard, document, config.evaluation, logger)
    except (DocumentLoadError, UnknownStandardError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    standard = get_standard(config.standard)
    compliance_score = compute_scores(db, standard.name)
    title = standard.title
    records = db.records

    print(render_text(compliance_score, records, title), end="")

    if config.output.formats:
        print()
        generate_reports(
            compliance_score=compliance_score,
            records=records,
            document=document,
            output_dir=config.output.report_dir,
            run_id=run_id,
            title=title,
            formats=config.output.formats,
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
