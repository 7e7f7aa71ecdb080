from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Sequence, Tuple

from .models import FieldRule, MasterIndex, Record
from .normalize import ContentRow, normalize, split_multi
from .settings import (
    COL_CATEGORY_MASTER_CATEGORY,
    COL_RULE_ALLOWED_VALUES,
    COL_RULE_FIELD_NAME,
    COL_RULE_FIELD_TYPE,
    COL_RULE_MANDATORY,
    COL_TEMPLATE_NAME,
    MANDATORY_YES,
    MULTI,
    OPEN,
    SINGLE,
)

logger = logging.getLogger(__name__)


# =========================
# SINGLE-COLUMN MASTERS
# =========================

def build_value_set(rows: Sequence[Record]) -> FrozenSet[str]:
    """Normalized values of the first column; master sheets carry one column of interest."""
    values = (normalize(ContentRow(r).first_value()) for r in rows)
    return frozenset(v for v in values if v)


# =========================
# CATEGORY -> TEMPLATE
# =========================

def build_category_map(rows: Sequence[Record]) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for r in rows:
        row = ContentRow(r)
        cat = normalize(row.text(*COL_CATEGORY_MASTER_CATEGORY) or row.first_value())
        template = row.text(*COL_TEMPLATE_NAME)
        if not cat or not template:
            continue
        out[cat] = template
    return out


# =========================
# TEMPLATE FIELD RULES
# =========================

def classify_selection_kind(field_type: object) -> str:
    t = normalize(field_type)
    if "multi" in t:
        return MULTI
    if "select" in t or "dropdown" in t:
        return SINGLE
    return OPEN


def parse_rule_row(r: Record) -> FieldRule | None:
    row = ContentRow(r)
    template = row.text(*COL_TEMPLATE_NAME)
    field_name = row.text(*COL_RULE_FIELD_NAME)
    if not template or not field_name:
        return None

    return FieldRule(
        template_name=template,
        field_name=field_name,
        selection_kind=classify_selection_kind(row.text(*COL_RULE_FIELD_TYPE)),
        mandatory=normalize(row.text(*COL_RULE_MANDATORY)) == MANDATORY_YES,
        allowed_values=frozenset(split_multi(row.text(*COL_RULE_ALLOWED_VALUES))),
    )


def build_template_rules(rows: Sequence[Record], warnings: List[str]) -> Dict[str, Tuple[FieldRule, ...]]:
    by_template: Dict[str, Dict[str, FieldRule]] = {}
    skipped = 0

    for r in rows:
        rule = parse_rule_row(r)
        if rule is None:
            skipped += 1
            continue

        rules = by_template.setdefault(rule.template_name, {})
        key = normalize(rule.field_name)
        if key in rules:
            msg = f'Template "{rule.template_name}" declares field "{rule.field_name}" more than once; last rule kept'
            logger.warning(msg)
            warnings.append(msg)
        rules[key] = rule

    if skipped:
        logger.debug("Template rule rows skipped (no template or field name): %d", skipped)

    return {name: tuple(rules.values()) for name, rules in by_template.items()}


# =========================
# INDEX
# =========================

def build_index(
    brand_rows: Sequence[Record],
    color_rows: Sequence[Record],
    size_rows: Sequence[Record],
    category_rows: Sequence[Record],
    template_rule_rows: Sequence[Record],
) -> MasterIndex:
    warnings: List[str] = []
    template_rules = build_template_rules(template_rule_rows, warnings)

    index = MasterIndex(
        brands=build_value_set(brand_rows),
        colors=build_value_set(color_rows),
        sizes=build_value_set(size_rows),
        category_to_template=MappingProxyType(build_category_map(category_rows)),
        template_rules=MappingProxyType(template_rules),
        warnings=tuple(warnings),
    )

    logger.info(
        "Master index built: brands=%d colors=%d sizes=%d categories=%d templates=%d",
        len(index.brands),
        len(index.colors),
        len(index.sizes),
        len(index.category_to_template),
        len(index.template_rules),
    )
    return index
