"""
Predicates and record builders shared by the standard check sets.
"""

from __future__ import annotations

from typing import Callable, Iterable

from ..config import SUPPORTED_FORMATS, SUPPORTED_SPECS
from ..sbom.document import Component, Document
from .db import Record, new_record
from .keys import CheckKey


def presence(
    key: CheckKey,
    value: str,
    category: str,
    required: bool = True,
) -> Record:
    """Pass iff the raw field is non-empty; the field is echoed verbatim."""
    value = value or ""
    return new_record(key, value, value != "", category, required)


def joined(values: Iterable[str]) -> str:
    return ", ".join(v for v in values if v)


def machine_format(doc: Document) -> str:
    return f"{doc.spec.spec_type}, {doc.spec.format}"


def is_supported_spec(spec_type: str) -> bool:
    return spec_type in SUPPORTED_SPECS


def is_supported_format(spec_type: str, file_format: str) -> bool:
    return file_format in SUPPORTED_FORMATS.get(spec_type, [])


def all_components(doc: Document, predicate: Callable[[Component], bool]) -> bool:
    """
    True iff every component satisfies the predicate.
    An empty component list fails rather than passing vacuously.
    """
    total = len(doc.components)
    if total == 0:
        return False
    return count_components(doc, predicate) == total


def count_components(doc: Document, predicate: Callable[[Component], bool]) -> int:
    return sum(1 for c in doc.components if predicate(c))


def coverage(doc: Document, predicate: Callable[[Component], bool]) -> str:
    """Human-readable "n/total" coverage value."""
    return f"{count_components(doc, predicate)}/{len(doc.components)}"


def component_group(comp: Component) -> str:
    """Record id for per-component checks."""
    return comp.id
