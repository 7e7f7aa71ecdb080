from .engine import run_validation
from .masters import build_index
from .models import (
    AuditInputError,
    ContentTable,
    FieldRule,
    MasterIndex,
    MasterTables,
    Report,
    RowVerdict,
    RunStats,
)
from .normalize import ContentRow, normalize
from .validation import resolve_row, validate_row

__all__ = [
    "AuditInputError",
    "ContentRow",
    "ContentTable",
    "FieldRule",
    "MasterIndex",
    "MasterTables",
    "Report",
    "RowVerdict",
    "RunStats",
    "build_index",
    "normalize",
    "resolve_row",
    "run_validation",
    "validate_row",
]
