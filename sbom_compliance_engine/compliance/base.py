"""
Standard base — a compliance standard is a fixed, ordered list of check
functions. Document checks run once; component checks run per component.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Callable, Optional

from ..config import EvaluationConfig
from ..sbom.document import Document
from .db import DB, Record
from .keys import CheckKey

logger = logging.getLogger("sbom_compliance_engine.compliance")

@dataclass
class Check:
    """A check function plus the key and category it reports under."""
    key: CheckKey
    func: Callable
    category: str = ""                  # Empty = per-component grouping
    required: bool = True
    with_document: bool = False         # Component check also receives the document
    with_config: bool = False           # Document check also receives config and logger

    @property
    def name(self) -> str:
        return getattr(self.func, "__name__", self.key.name)


@dataclass
class Standard:
    """
    A named compliance standard and its ordered check list.
    """
    name: str                           # Dispatcher key (e.g. "ntia")
    title: str                          # Human-readable name
    description: str = ""
    document_checks: list[Check] = field(default_factory=list)
    component_checks: list[Check] = field(default_factory=list)

    def tasks(
        self,
        doc: Document,
        config: EvaluationConfig,
        log: logging.Logger,
    ) -> list[tuple[Check, str, Callable[[], Record]]]:
        """Expand the check list into (check, group, task) triples, in report order."""
        tasks: list[tuple[Check, str, Callable[[], Record]]] = []
        for check in self.document_checks:
            if check.with_config:
                task = lambda f=check.func: f(doc, config=config, log=log)
            else:
                task = lambda f=check.func: f(doc)
            tasks.append((check, check.category, task))
        for comp in doc.components:
            for check in self.component_checks:
                if check.with_document:
                    task = lambda f=check.func, c=comp: f(c, doc)
                else:
                    task = lambda f=check.func, c=comp: f(c)
                tasks.append((check, comp.id, task))
        return tasks

    def run(
        self,
        doc: Document,
        config: Optional[EvaluationConfig] = None,
        log: Optional[logging.Logger] = None,
    ) -> DB:
        """
        Execute every check and collect the records.
        Records are stored in check-list order whether or not a pool is used.
        """
        config = config or EvaluationConfig()
        log = log or logger
        db = DB()
        tasks = self.tasks(doc, config, log)

        log.debug(f"[{self.name}] Running {len(tasks)} checks")
        if config.max_workers > 1 and len(tasks) > 1:
            with ThreadPoolExecutor(max_workers=config.max_workers) as pool:
                futures = [
                    pool.submit(_guarded, check, group, task, log)
                    for check, group, task in tasks
                ]
                db.add_all(f.result() for f in futures)
        else:
            db.add_all(_guarded(check, group, task, log) for check, group, task in tasks)

        passed = sum(1 for r in db if r.passed)
        log.info(f"[{self.name}] Evaluation complete — {passed}/{len(db)} checks passed")
        return db


def _guarded(
    check: Check,
    group: str,
    task: Callable[[], Record],
    log: logging.Logger,
) -> Record:
    """Run one check; an unexpected exception becomes a failing record."""
    try:
        return task()
    except Exception as e:
        log.exception(f"Check {check.name} failed: {e}")
        return Record(
            check_key=check.key,
            check_value="",
            score=0.0,
            id=group,
            required=check.required,
        )
