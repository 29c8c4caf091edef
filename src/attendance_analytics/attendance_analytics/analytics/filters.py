from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, FrozenSet, Iterable, Optional, Tuple, Union

from ..common.validators import optional_int
from ..core.constants import MONTH_ABBREVIATIONS


@dataclass(frozen=True)
class MonthFilter:
    """Year / month-set constraint applied to attendance records.

    Both constraints are optional; a missing one always matches. The same
    rule is rendered as SQL by `sql_predicate` so the record store can apply
    it without changing results.
    """

    year: Optional[int] = None
    months: FrozenSet[int] = frozenset()

    def matches(self, year: int, month: int) -> bool:
        if self.year is not None and year != self.year:
            return False
        if self.months and month not in self.months:
            return False
        return True

    def matches_date(self, value: date) -> bool:
        return self.matches(value.year, value.month)

    __call__ = matches

    def sql_predicate(self, column: str) -> Tuple[str, tuple]:
        clauses: list[str] = []
        params: list[object] = []

        if self.year is not None:
            clauses.append(f"YEAR({column}) = %s")
            params.append(self.year)
        if self.months:
            ordered = sorted(self.months)
            placeholders = ", ".join(["%s"] * len(ordered))
            clauses.append(f"MONTH({column}) IN ({placeholders})")
            params.extend(ordered)

        return " AND ".join(clauses) or "1=1", tuple(params)


def parse_months(months_param: Union[str, Iterable[str], None]) -> FrozenSet[int]:
    if not months_param:
        return frozenset()
    tokens = months_param.split(",") if isinstance(months_param, str) else months_param
    out = set()
    for token in tokens:
        month = MONTH_ABBREVIATIONS.get(str(token).strip())
        if month is not None:
            out.add(month)
    return frozenset(out)


def build_month_filter(year_param: Any = None, months_param: Union[str, Iterable[str], None] = None) -> Optional[MonthFilter]:
    """Build a filter from raw query values; None means "no filter"."""

    year = optional_int(year_param)
    months = parse_months(months_param)
    if year is None and not months:
        return None
    return MonthFilter(year=year, months=months)
