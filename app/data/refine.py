"""
Search / filter / sort for the public listings.

Pure functions over DataFrames: the input frame is never modified, rows that
compare equal under the chosen sort keep their source order, and there is no
pagination.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Optional

import pandas as pd


ALL = "all"

# sort key -> (column, ascending)
TEACHER_SORTS = {
    "rating": ("rating", False),
    "reviews": ("reviews", False),
    "price-low": ("hourly_rate", True),
    "price-high": ("hourly_rate", False),
}

COURSE_SORTS = {
    "rating": ("rating", False),
    "students": ("students", False),
    "price-low": ("price", True),
    "price-high": ("price", False),
}

ONLINE_FILTERS = {"online": True, "offline": False}


def refine(
    df: pd.DataFrame,
    query: str = "",
    search_fields: Iterable[str] = (),
    filters: Optional[Mapping[str, object]] = None,
    sort_key: Optional[str] = None,
    sorts: Optional[Mapping[str, tuple[str, bool]]] = None,
) -> pd.DataFrame:
    out = df.copy()
    if out.empty:
        return out.reset_index(drop=True)

    for col, value in (filters or {}).items():
        if value is None or value == ALL:
            continue
        out = out[out[col] == value]

    needle = (query or "").lower()
    fields = list(search_fields)
    if needle and fields:
        mask = pd.Series(False, index=out.index)
        for f in fields:
            mask |= out[f].fillna("").astype(str).str.lower().str.contains(needle, regex=False)
        out = out[mask]

    # unknown keys keep source order
    if sort_key and sorts and sort_key in sorts:
        col, ascending = sorts[sort_key]
        out = out.sort_values(col, ascending=ascending, kind="stable", na_position="last")

    return out.reset_index(drop=True)


def refine_teachers(df: pd.DataFrame, query: str = "", status: str = ALL, sort_key: str = "rating") -> pd.DataFrame:
    filters = {"is_online": ONLINE_FILTERS[status]} if status in ONLINE_FILTERS else None
    return refine(
        df,
        query=query,
        search_fields=("name", "specialization"),
        filters=filters,
        sort_key=sort_key,
        sorts=TEACHER_SORTS,
    )


def refine_courses(
    df: pd.DataFrame,
    query: str = "",
    level: str = ALL,
    category: str = ALL,
    sort_key: str = "rating",
) -> pd.DataFrame:
    return refine(
        df,
        query=query,
        search_fields=("title", "description"),
        filters={"level": level, "category": category},
        sort_key=sort_key,
        sorts=COURSE_SORTS,
    )


def filter_bookings(df: pd.DataFrame, status: str = ALL) -> pd.DataFrame:
    return refine(df, filters={"status": status})
