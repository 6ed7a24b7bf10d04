"""Reporting package — multi-format output generation."""

from .json_export import build_payload, export_json
from .csv_export import export_csv
from .text_report import export_text, render_text

__all__ = [
    "build_payload",
    "export_json",
    "export_csv",
    "export_text",
    "render_text",
]
