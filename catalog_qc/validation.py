from __future__ import annotations

from typing import Callable, FrozenSet, Iterable, List, Sequence, Tuple

from .models import FieldRule, MasterIndex, Record, ResolvedRow, RowVerdict
from .normalize import ContentRow, cell_text, normalize, split_multi
from .settings import (
    CATEGORY_PATH_DELIMITER,
    COL_CONTENT_CATEGORY,
    COL_TEMPLATE_NAME,
    FAILED,
    MULTI,
    MULTI_VALUE_DELIMITER,
    PASSED,
    SINGLE,
)

# =========================
# FIELD CLASSIFICATION
# =========================

BRAND = "Brand"
COLOR_NAME = "ColorName"
SIZE_NAME = "SizeName"
OTHER = "Other"

# Ordered; the first predicate that accepts the normalized column name wins.
FIELD_CLASSIFIERS: Sequence[Tuple[str, Callable[[str], bool]]] = (
    (BRAND, lambda n: n in ("brand", "brand name")),
    (COLOR_NAME, lambda n: ("color" in n or "colour" in n) and "name" in n),
    (SIZE_NAME, lambda n: "size" in n and "name" in n),
)

MASTER_LABELS = {BRAND: "Brand", COLOR_NAME: "Color", SIZE_NAME: "Size"}


def classify_field(field_name: str) -> str:
    n = normalize(field_name)
    for kind, accepts in FIELD_CLASSIFIERS:
        if accepts(n):
            return kind
    return OTHER


def master_values_for(kind: str, index: MasterIndex) -> FrozenSet[str] | None:
    if kind == BRAND:
        return index.brands
    if kind == COLOR_NAME:
        return index.colors
    if kind == SIZE_NAME:
        return index.sizes
    return None


# =========================
# ROW RESOLUTION
# =========================

def top_category(value: object) -> str:
    return normalize(cell_text(value).split(CATEGORY_PATH_DELIMITER)[0])


def resolve_row(row: Record, index: MasterIndex) -> ResolvedRow:
    r = row if isinstance(row, ContentRow) else ContentRow(row)

    top = top_category(r.text(*COL_CONTENT_CATEGORY))
    declared = r.text(*COL_TEMPLATE_NAME)

    return ResolvedRow(
        top_category=top,
        expected_template=index.category_to_template.get(top) if top else None,
        declared_template=declared,
        active_rules=index.rules_for(declared),
    )


# =========================
# HEADER CHECK
# =========================

def check_headers(rules: Iterable[FieldRule], batch_headers: Iterable[object]) -> str:
    """Passed, or a message naming mandatory columns absent from the header row."""
    present = {normalize(h) for h in batch_headers}
    missing = [r.field_name for r in rules if r.mandatory and normalize(r.field_name) not in present]
    if not missing:
        return PASSED
    return "Missing mandatory columns: " + ", ".join(missing)


# =========================
# VALUE CHECKS
# =========================

def atomic_values(rule: FieldRule, text: str) -> Tuple[List[str], List[str]]:
    """Split a non-blank cell into the values to check, plus any delimiter problems."""
    problems: List[str] = []

    if rule.selection_kind == MULTI:
        if f" {MULTI_VALUE_DELIMITER}" in text or f"{MULTI_VALUE_DELIMITER} " in text:
            problems.append(f"{rule.field_name}: spaces around '{MULTI_VALUE_DELIMITER}' delimiter")
        return split_multi(text), problems

    if rule.selection_kind == SINGLE and MULTI_VALUE_DELIMITER in text:
        problems.append(f"{rule.field_name}: single value expected, multiple given")

    return [normalize(text)], problems


def check_field(rule: FieldRule, row: ContentRow, index: MasterIndex) -> List[str]:
    text = cell_text(row.raw(rule.field_name))

    if not text:
        if rule.mandatory:
            return [f'Mandatory field "{rule.field_name}" missing']
        return []

    values, problems = atomic_values(rule, text)

    kind = classify_field(rule.field_name)
    master = master_values_for(kind, index)

    for val in values:
        if master is not None and val not in master:
            problems.append(f'{MASTER_LABELS[kind]} "{val}" invalid ({rule.field_name})')
        if rule.allowed_values and val not in rule.allowed_values:
            problems.append(f'{rule.field_name}: "{val}" not allowed')

    return problems


# =========================
# ROW VERDICT
# =========================

def validate_row(
    row: Record,
    resolved: ResolvedRow,
    index: MasterIndex,
    batch_headers: Sequence[object],
    header_status: str | None = None,
) -> RowVerdict:
    r = row if isinstance(row, ContentRow) else ContentRow(row)
    diagnostics: List[str] = []

    category_status = PASSED
    if not resolved.top_category:
        category_status = FAILED
        diagnostics.append("Category missing")
    elif resolved.expected_template is None:
        category_status = FAILED
        diagnostics.append(f'Category "{resolved.top_category}" unknown')

    template_status = PASSED
    if not resolved.declared_template:
        template_status = FAILED
        diagnostics.append("Template missing")
    elif resolved.expected_template is not None and normalize(resolved.expected_template) != normalize(
        resolved.declared_template
    ):
        template_status = FAILED
        diagnostics.append(f'Template mismatch: expected "{resolved.expected_template}"')

    if header_status is None:
        header_status = check_headers(resolved.active_rules, batch_headers)

    value_problems: List[str] = []
    for rule in resolved.active_rules:
        value_problems.extend(check_field(rule, r, index))
    diagnostics.extend(value_problems)

    return RowVerdict(
        category_status=category_status,
        template_status=template_status,
        header_status=header_status,
        value_status=FAILED if value_problems else PASSED,
        diagnostics=tuple(diagnostics),
    )
