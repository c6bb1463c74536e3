from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Any, Callable, Mapping, Optional

import pandas as pd

from config import DEFAULT_SITE_NAME, DEFAULT_THEME_COLORS
from data import forms, mock_data, queries
from data.connection import BackendError
from data.forms import ValidationError


log = logging.getLogger(__name__)


TEACHER_COLUMNS = [
    "id", "name", "specialization", "rating", "reviews", "hourly_rate", "experience",
    "languages", "image_url", "is_online", "bio", "education", "certifications", "created_at",
]
COURSE_COLUMNS = [
    "id", "title", "description", "level", "duration", "students", "rating", "price",
    "instructor", "image_url", "category", "features", "content_outline", "prerequisites", "created_at",
]
BOOKING_COLUMNS = [
    "id", "teacher_id", "student_name", "student_email", "student_phone",
    "lesson_date", "lesson_time", "lesson_notes", "status", "created_at",
]
PAYMENT_COLUMNS = ["id", "name", "type", "details", "is_active", "created_at"]
ADMIN_COLUMNS = ["id", "email", "name", "created_at"]

# numeric / list / bool columns that may come back NULL
_ZERO_COLUMNS = ("rating", "reviews", "students")
_LIST_COLUMNS = ("languages", "certifications", "features", "content_outline", "prerequisites")
_FALSE_COLUMNS = ("is_online",)

BOOKING_TRANSITIONS = {
    "pending": ("confirmed", "cancelled"),
    "confirmed": ("completed",),
}


@dataclass(frozen=True)
class DataResult:
    df: pd.DataFrame
    source: str  # "mock" | "supabase" | "sample" | "unavailable"
    warning: str | None = None


@dataclass(frozen=True)
class RecordResult:
    record: dict = field(default_factory=dict)
    source: str = "mock"
    warning: str | None = None


def _frame(df: pd.DataFrame, columns: list[str]) -> pd.DataFrame:
    out = df.reindex(columns=list(dict.fromkeys(list(df.columns) + columns))).copy()
    for col in _ZERO_COLUMNS:
        if col in out.columns:
            out[col] = pd.to_numeric(out[col], errors="coerce").fillna(0)
    for col in _LIST_COLUMNS:
        if col in out.columns:
            out[col] = out[col].apply(lambda v: list(v) if isinstance(v, (list, tuple)) else [])
    for col in _FALSE_COLUMNS:
        if col in out.columns:
            out[col] = out[col].apply(lambda v: bool(v) if v is not None and v == v else False)
    return out


def _fallback(
    backend,
    what: str,
    fn_live: Callable[[], pd.DataFrame],
    fn_fallback: Optional[Callable[[], pd.DataFrame]],
    columns: list[str],
) -> DataResult:
    try:
        return DataResult(df=_frame(fn_live(), columns), source=backend.name)
    except BackendError as e:
        log.warning("Loading %s failed: %s", what, e)
        if fn_fallback is not None:
            return DataResult(
                df=_frame(fn_fallback(), columns),
                source="sample",
                warning=f"Fell back to sample data: {type(e).__name__}",
            )
        return DataResult(
            df=_frame(pd.DataFrame(), columns),
            source="unavailable",
            warning=f"Could not load {what}: {type(e).__name__}",
        )


def records(df: pd.DataFrame) -> list[dict]:
    """Rows as plain dicts, with NaN cells turned into None."""
    return df.astype(object).where(df.notna(), None).to_dict("records")


def _first(df: pd.DataFrame) -> dict:
    if df.empty:
        return {}
    return records(df.head(1))[0]


def _sample_teacher(teacher_id: str) -> pd.DataFrame:
    df = mock_data.teachers_mock()
    return df[df["id"] == str(teacher_id)]


# --- public listings -----------------------------------------------------------------


def get_teachers(backend) -> DataResult:
    return _fallback(
        backend,
        "teachers",
        fn_live=lambda: backend.query(queries.q_teachers()),
        fn_fallback=mock_data.teachers_mock,
        columns=TEACHER_COLUMNS,
    )


def get_teacher(backend, teacher_id: str) -> RecordResult:
    res = _fallback(
        backend,
        f"teacher {teacher_id}",
        fn_live=lambda: backend.query(queries.q_teacher_by_id(teacher_id)),
        fn_fallback=lambda: _sample_teacher(teacher_id),
        columns=TEACHER_COLUMNS,
    )
    return RecordResult(record=_first(res.df), source=res.source, warning=res.warning)


def get_online_teachers(backend) -> DataResult:
    return _fallback(
        backend,
        "online teachers",
        fn_live=lambda: backend.query(queries.q_online_teachers()),
        fn_fallback=lambda: mock_data.teachers_mock().head(1),
        columns=["id", "name", "specialization", "hourly_rate", "image_url"],
    )


def get_courses(backend) -> DataResult:
    return _fallback(
        backend,
        "courses",
        fn_live=lambda: backend.query(queries.q_courses()),
        fn_fallback=mock_data.courses_mock,
        columns=COURSE_COLUMNS,
    )


def get_course(backend, course_id: str) -> RecordResult:
    # no sample fallback: an unknown course sends the visitor back to the list
    res = _fallback(
        backend,
        f"course {course_id}",
        fn_live=lambda: backend.query(queries.q_course_by_id(course_id)),
        fn_fallback=None,
        columns=COURSE_COLUMNS,
    )
    return RecordResult(record=_first(res.df), source=res.source, warning=res.warning)


def get_active_payment_methods(backend) -> DataResult:
    return _fallback(
        backend,
        "payment methods",
        fn_live=lambda: backend.query(queries.q_payment_methods(active_only=True)),
        fn_fallback=None,
        columns=PAYMENT_COLUMNS,
    )


def create_booking(backend, form: Mapping[str, Any]) -> dict:
    row = forms.booking_row(form)
    created = backend.insert("bookings", row)
    log.info("Booking created for teacher %s on %s %s", row["teacher_id"], row["lesson_date"], row["lesson_time"])
    return created


def submit_contact(form: Mapping[str, Any]) -> dict:
    msg = forms.contact_message(form)
    log.info("Contact message from %s: %s", msg["email"], msg["subject"])
    return msg


# --- admin: catalog ------------------------------------------------------------------


def get_teachers_admin(backend) -> DataResult:
    return _fallback(
        backend,
        "teachers",
        fn_live=lambda: backend.query(queries.q_teachers_admin()),
        fn_fallback=None,
        columns=TEACHER_COLUMNS,
    )


def get_courses_admin(backend) -> DataResult:
    return _fallback(
        backend,
        "courses",
        fn_live=lambda: backend.query(queries.q_courses_admin()),
        fn_fallback=None,
        columns=COURSE_COLUMNS,
    )


def upload_image(backend, bucket: str, filename: str, content: bytes, content_type: Optional[str] = None) -> str:
    ext = PurePath(filename).suffix.lstrip(".").lower() or "bin"
    path = f"{uuid.uuid4().hex}.{ext}"
    url = backend.upload(bucket, path, content, content_type)
    log.info("Uploaded %s to %s/%s", filename, bucket, path)
    return url


def _save(backend, table: str, row: dict, record_id: Optional[str]) -> dict:
    if record_id:
        backend.update(table, record_id, row)
        log.info("Updated %s/%s", table, record_id)
        return dict(row, id=record_id)
    created = backend.insert(table, row)
    log.info("Inserted into %s: %s", table, created.get("id"))
    return created


def save_teacher(backend, form: Mapping[str, Any], existing: Optional[Mapping[str, Any]] = None) -> dict:
    row = forms.teacher_row(form, existing)
    return _save(backend, "teachers", row, (existing or {}).get("id"))


def save_course(backend, form: Mapping[str, Any], existing: Optional[Mapping[str, Any]] = None) -> dict:
    row = forms.course_row(form, existing)
    return _save(backend, "courses", row, (existing or {}).get("id"))


def delete_record(backend, table: str, record_id: str) -> None:
    backend.delete(table, record_id)
    log.info("Deleted %s/%s", table, record_id)


# --- admin: bookings -----------------------------------------------------------------


def get_bookings(backend) -> DataResult:
    return _fallback(
        backend,
        "bookings",
        fn_live=lambda: backend.query(queries.q_bookings()),
        fn_fallback=None,
        columns=BOOKING_COLUMNS,
    )


def get_teacher_names(backend) -> dict[str, str]:
    res = _fallback(
        backend,
        "teacher names",
        fn_live=lambda: backend.query(queries.q_teacher_names()),
        fn_fallback=None,
        columns=["id", "name"],
    )
    return {str(r["id"]): r["name"] for r in records(res.df)}


def next_statuses(status: str) -> tuple[str, ...]:
    return BOOKING_TRANSITIONS.get(status, ())


def update_booking_status(backend, booking_id: str, current: str, new_status: str) -> None:
    if new_status not in next_statuses(current):
        raise ValidationError(f"Cannot move a booking from {current} to {new_status}")
    backend.update("bookings", booking_id, {"status": new_status})
    log.info("Booking %s: %s -> %s", booking_id, current, new_status)


def booking_status_counts(df: pd.DataFrame) -> pd.DataFrame:
    if df.empty or "status" not in df.columns:
        return pd.DataFrame(columns=["status", "count"])
    return df.groupby("status", as_index=False).size().rename(columns={"size": "count"})


# --- admin: payments -----------------------------------------------------------------


def get_payment_methods(backend) -> DataResult:
    return _fallback(
        backend,
        "payment methods",
        fn_live=lambda: backend.query(queries.q_payment_methods()),
        fn_fallback=None,
        columns=PAYMENT_COLUMNS,
    )


def save_payment_method(backend, form: Mapping[str, Any], method_id: Optional[str] = None) -> dict:
    return _save(backend, "payment_methods", forms.payment_method_row(form), method_id)


def toggle_payment_method(backend, method_id: str, is_active: bool) -> None:
    backend.update("payment_methods", method_id, {"is_active": not is_active})
    log.info("Payment method %s active=%s", method_id, not is_active)


# --- admin: accounts -----------------------------------------------------------------


def get_admins(backend) -> DataResult:
    return _fallback(
        backend,
        "admins",
        fn_live=lambda: backend.query(queries.q_admins()),
        fn_fallback=None,
        columns=ADMIN_COLUMNS,
    )


def add_admin(backend, form: Mapping[str, Any]) -> dict:
    row = forms.new_admin_row(form)
    if not backend.query(queries.q_admin_by_email(row["email"])).empty:
        raise ValidationError(f"An admin with email {row['email']} already exists")
    created = backend.insert("admins", row)
    log.info("Admin added: %s", row["email"])
    created.pop("password", None)
    return created


def update_admin(backend, admin_id: str, form: Mapping[str, Any]) -> None:
    backend.update("admins", admin_id, forms.admin_changes(form))
    log.info("Admin %s updated", admin_id)


def sign_in(backend, email: str, password: str) -> str:
    if not email.strip() or not password:
        raise ValidationError("Email and password are required")
    return backend.sign_in(email.strip(), password)


def sign_out(backend) -> None:
    backend.sign_out()


# --- admin: branding -----------------------------------------------------------------


def get_site_settings(backend) -> RecordResult:
    """Loads the single settings row, creating the default one on first use."""
    try:
        record = _first(backend.query(queries.q_site_settings()))
        if not record:
            record = backend.insert("site_settings", {"site_name": DEFAULT_SITE_NAME})
            log.info("Created default site settings")
        return RecordResult(record=record, source=backend.name)
    except BackendError as e:
        log.warning("Loading site settings failed: %s", e)
        return RecordResult(
            record={"id": None, "site_name": DEFAULT_SITE_NAME, "logo_url": None},
            source="sample",
            warning=f"Could not load site settings: {type(e).__name__}",
        )


def save_site_settings(backend, settings_id: str, site_name: str, logo_url: Optional[str]) -> None:
    if not site_name.strip():
        raise ValidationError("Site name is required")
    backend.update("site_settings", settings_id, {"site_name": site_name.strip(), "logo_url": logo_url})
    log.info("Site settings saved")


def get_theme_settings(backend) -> RecordResult:
    try:
        record = _first(backend.query(queries.q_theme_settings()))
    except BackendError as e:
        log.warning("Loading theme settings failed: %s", e)
        return RecordResult(
            record=dict(DEFAULT_THEME_COLORS),
            source="sample",
            warning=f"Could not load theme settings: {type(e).__name__}",
        )
    return RecordResult(record=record or dict(DEFAULT_THEME_COLORS), source=backend.name)


def save_theme_settings(backend, form: Mapping[str, Any], settings_id: Optional[str] = None) -> dict:
    return _save(backend, "theme_settings", forms.theme_row(form), settings_id)
