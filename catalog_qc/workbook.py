from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple

import pandas as pd

from .models import AuditInputError, ContentTable, MasterTables, Record, Report, RowVerdict
from .normalize import cell_text
from .settings import (
    ALL_CHECKS_PASSED,
    COL_OUT_FINAL_STATUS,
    COL_OUT_HEADER_CHECK,
    COL_OUT_REMARKS,
    MAX_SUMMARY_DIAGNOSTICS,
    PASSED,
    REPORT_SHEET_NAME,
    SUMMARY_SHEET_NAME,
    TRUNCATION_MARKER,
)

INPUT_KEYS = ("brands", "colors", "sizes", "categories", "template_rules", "content")


# =========================
# LOADING HELPERS
# =========================

def _is_excel(p: Path) -> bool:
    return p.suffix.lower() in (".xlsx", ".xlsm")


def read_table(path: str | Path, header: Optional[int] = 0, nrows: Optional[int] = None) -> pd.DataFrame:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"File not found: {p}")

    # Only empty cells are blank: "NA"/"None" stay text and "007" keeps its zeros.
    opts = dict(header=header, nrows=nrows, dtype=object, keep_default_na=False, na_values=[""])
    if _is_excel(p):
        return pd.read_excel(p, engine="openpyxl", sheet_name=0, **opts)
    return pd.read_csv(p, low_memory=False, **opts)


def read_header_row(path: str | Path) -> List[str]:
    """First row as written, duplicates kept and blank cells as ''."""
    df = read_table(path, header=None, nrows=1)
    if df.empty:
        return []
    return [cell_text(v) for v in df.iloc[0].tolist()]


def frame_to_records(df: pd.DataFrame) -> List[Dict[str, object]]:
    clean = df.astype(object).where(pd.notna(df), None)
    return clean.to_dict(orient="records")


def load_inputs(paths: Mapping[str, Optional[str | Path]]) -> Tuple[MasterTables, ContentTable]:
    missing = [k for k in INPUT_KEYS if not paths.get(k)]
    if missing:
        raise AuditInputError(f"Input files missing: {', '.join(missing)}")

    not_found = [str(paths[k]) for k in INPUT_KEYS if not Path(paths[k]).exists()]
    if not_found:
        raise AuditInputError(f"Input files not found: {', '.join(not_found)}")

    tables = {k: frame_to_records(read_table(paths[k])) for k in INPUT_KEYS}

    masters = MasterTables(
        brands=tables["brands"],
        colors=tables["colors"],
        sizes=tables["sizes"],
        categories=tables["categories"],
        template_rules=tables["template_rules"],
    )
    content = ContentTable(rows=tables["content"], headers=read_header_row(paths["content"]))
    return masters, content


# =========================
# REPORT OUTPUT
# =========================

def remarks_text(verdict: RowVerdict) -> str:
    if verdict.passed:
        return ALL_CHECKS_PASSED
    if not verdict.diagnostics:
        return verdict.header_status
    return " | ".join(verdict.diagnostics)


def final_status_text(verdict: RowVerdict, limit: int = MAX_SUMMARY_DIAGNOSTICS) -> str:
    if verdict.passed:
        return PASSED

    shown = list(verdict.diagnostics[:limit])
    if not shown:
        # only the header check failed
        return "Failed: header check"
    summary = " | ".join(shown)
    if len(verdict.diagnostics) > limit:
        summary += f" {TRUNCATION_MARKER}"
    return f"Failed: {summary}"


def report_to_frame(report: Report) -> pd.DataFrame:
    out_rows: List[Record] = []
    for row, verdict in zip(report.rows, report.verdicts):
        out = dict(row)
        out[COL_OUT_HEADER_CHECK] = verdict.header_status
        out[COL_OUT_REMARKS] = remarks_text(verdict)
        out[COL_OUT_FINAL_STATUS] = final_status_text(verdict)
        out_rows.append(out)

    if out_rows:
        return pd.DataFrame(out_rows)

    columns = [cell_text(h) for h in report.headers] + [COL_OUT_HEADER_CHECK, COL_OUT_REMARKS, COL_OUT_FINAL_STATUS]
    return pd.DataFrame(columns=columns)


def stats_to_frame(report: Report) -> pd.DataFrame:
    return pd.DataFrame([{"Metric": k, "Count": v} for k, v in report.stats.as_dict().items()])


def write_report(report: Report, out_dir: str | Path = ".") -> Path:
    out_path = Path(out_dir) / report.suggested_file_name
    out_path.parent.mkdir(parents=True, exist_ok=True)

    with pd.ExcelWriter(out_path, engine="openpyxl") as writer:
        report_to_frame(report).to_excel(writer, sheet_name=REPORT_SHEET_NAME, index=False)
        stats_to_frame(report).to_excel(writer, sheet_name=SUMMARY_SHEET_NAME, index=False)

    return out_path
