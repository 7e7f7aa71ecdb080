from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Mapping, Optional, Sequence, Tuple

from .settings import FAILED, PASSED

Record = Mapping[str, object]


class AuditInputError(ValueError):
    """One of the six required tables is absent; the audit cannot run."""


# =========================
# MASTER DATA
# =========================

@dataclass(frozen=True)
class FieldRule:
    template_name: str
    field_name: str
    selection_kind: str
    mandatory: bool = False
    allowed_values: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class MasterIndex:
    brands: FrozenSet[str]
    colors: FrozenSet[str]
    sizes: FrozenSet[str]
    category_to_template: Mapping[str, str]
    template_rules: Mapping[str, Tuple[FieldRule, ...]]
    warnings: Tuple[str, ...] = ()

    def rules_for(self, template_name: str) -> Tuple[FieldRule, ...]:
        return self.template_rules.get(template_name, ())


@dataclass(frozen=True)
class MasterTables:
    brands: Optional[Sequence[Record]]
    colors: Optional[Sequence[Record]]
    sizes: Optional[Sequence[Record]]
    categories: Optional[Sequence[Record]]
    template_rules: Optional[Sequence[Record]]


@dataclass(frozen=True)
class ContentTable:
    rows: Optional[Sequence[Record]]
    headers: Sequence[object] = ()


# =========================
# RESULTS
# =========================

@dataclass(frozen=True)
class ResolvedRow:
    top_category: str
    expected_template: Optional[str]
    declared_template: str
    active_rules: Tuple[FieldRule, ...]


@dataclass(frozen=True)
class RowVerdict:
    category_status: str
    template_status: str
    header_status: str
    value_status: str
    diagnostics: Tuple[str, ...] = ()

    @property
    def overall_status(self) -> str:
        statuses = (self.category_status, self.template_status, self.header_status, self.value_status)
        return PASSED if all(s == PASSED for s in statuses) else FAILED

    @property
    def passed(self) -> bool:
        return self.overall_status == PASSED


@dataclass(frozen=True)
class RunStats:
    total: int = 0
    passed: int = 0
    failed: int = 0
    category_errors: int = 0
    value_errors: int = 0
    template_errors: int = 0
    header_errors: int = 0

    def as_dict(self) -> Dict[str, int]:
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "categoryErrors": self.category_errors,
            "valueErrors": self.value_errors,
            "templateErrors": self.template_errors,
            "headerErrors": self.header_errors,
        }


@dataclass
class Report:
    headers: List[object]
    rows: Sequence[Record]
    verdicts: List[RowVerdict]
    stats: RunStats
    suggested_file_name: str
    warnings: List[str] = field(default_factory=list)
