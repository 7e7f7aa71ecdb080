"""Runs the audit: build the master index once, then resolve and validate every content row."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from .masters import build_index
from .models import AuditInputError, ContentTable, MasterTables, Report, RowVerdict, RunStats
from .normalize import ContentRow
from .settings import FAILED, PASSED, REPORT_FILE_PREFIX
from .validation import check_headers, resolve_row, validate_row

logger = logging.getLogger(__name__)


def _require_tables(masters: MasterTables, content: ContentTable) -> None:
    missing = [
        name
        for name, table in (
            ("brands", masters.brands),
            ("colors", masters.colors),
            ("sizes", masters.sizes),
            ("categories", masters.categories),
            ("template rules", masters.template_rules),
            ("content", content.rows),
        )
        if table is None
    ]
    if missing:
        raise AuditInputError(f"Required tables missing: {', '.join(missing)}")


def summarize(verdicts: Iterable[RowVerdict]) -> RunStats:
    total = passed = category_errors = value_errors = template_errors = header_errors = 0
    for v in verdicts:
        total += 1
        passed += v.passed
        category_errors += v.category_status == FAILED
        value_errors += v.value_status == FAILED
        template_errors += v.template_status == FAILED
        header_errors += v.header_status != PASSED

    return RunStats(
        total=total,
        passed=passed,
        failed=total - passed,
        category_errors=category_errors,
        value_errors=value_errors,
        template_errors=template_errors,
        header_errors=header_errors,
    )


def suggested_file_name(run_at: Optional[datetime] = None) -> str:
    ts = (run_at or datetime.now()).strftime("%Y%m%d_%H%M%S_%f")
    return f"{REPORT_FILE_PREFIX}_{ts}.xlsx"


def run_validation(
    masters: MasterTables,
    content: ContentTable,
    run_at: Optional[datetime] = None,
) -> Report:
    _require_tables(masters, content)

    index = build_index(
        masters.brands,
        masters.colors,
        masters.sizes,
        masters.categories,
        masters.template_rules,
    )

    headers = list(content.headers)
    if not headers and content.rows:
        headers = list(content.rows[0].keys())
    header_status_by_template: Dict[str, str] = {}
    verdicts: List[RowVerdict] = []

    for record in content.rows:
        row = ContentRow(record)
        resolved = resolve_row(row, index)

        header_status = header_status_by_template.get(resolved.declared_template)
        if header_status is None:
            header_status = check_headers(resolved.active_rules, headers)
            header_status_by_template[resolved.declared_template] = header_status

        verdicts.append(validate_row(row, resolved, index, headers, header_status=header_status))

    stats = summarize(verdicts)
    logger.info(
        "QC run finished: total=%d passed=%d failed=%d category_errors=%d template_errors=%d value_errors=%d",
        stats.total,
        stats.passed,
        stats.failed,
        stats.category_errors,
        stats.template_errors,
        stats.value_errors,
    )

    return Report(
        headers=headers,
        rows=list(content.rows),
        verdicts=verdicts,
        stats=stats,
        suggested_file_name=suggested_file_name(run_at),
        warnings=list(index.warnings),
    )
