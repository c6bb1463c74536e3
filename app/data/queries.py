from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class TableQuery:
    """A single-table read: column list, equality filters, one ORDER BY, optional LIMIT."""

    table: str
    columns: str = "*"
    eq: dict[str, Any] = field(default_factory=dict)
    order_by: Optional[str] = None
    ascending: bool = True
    limit: Optional[int] = None


def q_teachers() -> TableQuery:
    return TableQuery(table="teachers", order_by="rating", ascending=False)


def q_teachers_admin() -> TableQuery:
    return TableQuery(table="teachers", order_by="created_at", ascending=False)


def q_teacher_by_id(teacher_id: str) -> TableQuery:
    return TableQuery(table="teachers", eq={"id": teacher_id}, limit=1)


def q_online_teachers() -> TableQuery:
    # booking form only offers teachers who are currently taking students
    return TableQuery(
        table="teachers",
        columns="id, name, specialization, hourly_rate, image_url",
        eq={"is_online": True},
        order_by="rating",
        ascending=False,
    )


def q_teacher_names() -> TableQuery:
    return TableQuery(table="teachers", columns="id, name")


def q_courses() -> TableQuery:
    return TableQuery(table="courses", order_by="rating", ascending=False)


def q_courses_admin() -> TableQuery:
    return TableQuery(table="courses", order_by="created_at", ascending=False)


def q_course_by_id(course_id: str) -> TableQuery:
    return TableQuery(table="courses", eq={"id": course_id}, limit=1)


def q_bookings() -> TableQuery:
    return TableQuery(table="bookings", order_by="created_at", ascending=False)


def q_payment_methods(active_only: bool = False) -> TableQuery:
    eq = {"is_active": True} if active_only else {}
    return TableQuery(table="payment_methods", eq=eq, order_by="created_at", ascending=False)


def q_admins() -> TableQuery:
    return TableQuery(
        table="admins",
        columns="id, email, name, created_at",
        order_by="created_at",
        ascending=False,
    )


def q_admin_by_email(email: str) -> TableQuery:
    return TableQuery(table="admins", eq={"email": email}, limit=1)


def q_site_settings() -> TableQuery:
    return TableQuery(table="site_settings", limit=1)


def q_theme_settings() -> TableQuery:
    return TableQuery(table="theme_settings", limit=1)
