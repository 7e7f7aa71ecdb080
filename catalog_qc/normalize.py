from __future__ import annotations

from typing import Dict, Iterator, List, Mapping, Optional

import pandas as pd

from .settings import MULTI_VALUE_DELIMITER


# =========================
# NORMALIZATION HELPERS
# =========================

def is_blank_cell(value: object) -> bool:
    if value is None:
        return True
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return True
    return isinstance(value, str) and value.strip() == ""


def cell_text(value: object) -> str:
    """Trimmed display form of a cell; blank, NaN and None become ''."""
    if is_blank_cell(value):
        return ""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, float) and value.is_integer():
        # pandas reads integer-looking columns with blanks as float64
        return str(int(value))
    return str(value).strip()


def normalize(value: object) -> str:
    return cell_text(value).lower()


def split_multi(value: object, delimiter: str = MULTI_VALUE_DELIMITER) -> List[str]:
    """Split a delimited cell into normalized fragments, dropping empty ones."""
    return [n for n in (normalize(part) for part in cell_text(value).split(delimiter)) if n]


# =========================
# ROW ACCESS
# =========================

class ContentRow(Mapping[str, object]):
    """Read-only view over one spreadsheet record.

    Columns can be addressed by their exact header or by its normalized form,
    so ``row.text("Color Name")`` also finds a ``" color name"`` column.
    """

    def __init__(self, values: Mapping[str, object]):
        self._values = values
        self._by_norm: Dict[str, str] = {}
        for col in values:
            self._by_norm.setdefault(normalize(col), col)

    def __getitem__(self, key: str) -> object:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def column_for(self, name: str) -> Optional[str]:
        if name in self._values:
            return name
        return self._by_norm.get(normalize(name))

    def raw(self, name: str) -> object:
        col = self.column_for(name)
        return None if col is None else self._values[col]

    def text(self, *names: str) -> str:
        for name in names:
            t = cell_text(self.raw(name))
            if t:
                return t
        return ""

    def first_value(self) -> object:
        return next(iter(self._values.values()), None)
