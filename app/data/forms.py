"""
Form input -> row payloads.

Every function validates before building the row, so nothing invalid reaches
the backend. Errors are raised as ValidationError with a user-facing message.
"""

from __future__ import annotations

import hashlib
import re
from datetime import date
from typing import Any, Mapping, Optional


EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
HEX_COLOR_RE = re.compile(r"#[0-9a-fA-F]{6}")

PAYMENT_TYPES = ("mobile_wallet", "bank_account", "instant_payment")
COURSE_LEVELS = ("مبتدئ", "متوسط", "متقدم")
COURSE_CATEGORIES = ("محادثة", "قواعد", "أعمال", "امتحانات")

# 09:00 .. 20:00, one lesson per hour
TIME_SLOTS = [f"{h:02d}:00" for h in range(9, 21)]


class ValidationError(ValueError):
    pass


def hash_password(password: str) -> str:
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def split_csv(text: Optional[str]) -> list[str]:
    return [part.strip() for part in (text or "").split(",") if part.strip()]


def split_lines(text: Optional[str]) -> list[str]:
    return [line.strip() for line in (text or "").splitlines() if line.strip()]


def _required(form: Mapping[str, Any], *names: str) -> None:
    missing = [n for n in names if not str(form.get(n) or "").strip()]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")


def _number(value: Any, name: str, cast=float):
    try:
        n = cast(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{name} must be a number") from None
    if n < 0:
        raise ValidationError(f"{name} must not be negative")
    return n


def _email(value: Any) -> str:
    email = str(value or "").strip()
    if not EMAIL_RE.match(email):
        raise ValidationError(f"Invalid email address: {email!r}")
    return email


def teacher_row(form: Mapping[str, Any], existing: Optional[Mapping[str, Any]] = None) -> dict:
    _required(form, "name", "specialization")
    existing = existing or {}
    return {
        "name": form["name"].strip(),
        "specialization": form["specialization"].strip(),
        "hourly_rate": _number(form.get("hourly_rate"), "hourly_rate"),
        "experience": _number(form.get("experience"), "experience", int),
        "languages": split_csv(form.get("languages")),
        "bio": (form.get("bio") or "").strip() or None,
        "education": (form.get("education") or "").strip() or None,
        "certifications": split_lines(form.get("certifications")),
        "is_online": bool(form.get("is_online")),
        "image_url": form.get("image_url") or existing.get("image_url"),
        # admin edits never touch the review counters
        "rating": existing.get("rating") or 0,
        "reviews": existing.get("reviews") or 0,
    }


def course_row(form: Mapping[str, Any], existing: Optional[Mapping[str, Any]] = None) -> dict:
    _required(form, "title", "description", "level", "duration", "instructor", "category")
    existing = existing or {}
    return {
        "title": form["title"].strip(),
        "description": form["description"].strip(),
        "level": form["level"],
        "duration": form["duration"].strip(),
        "price": _number(form.get("price"), "price"),
        "instructor": form["instructor"].strip(),
        "category": form["category"].strip(),
        "features": split_lines(form.get("features")),
        "content_outline": split_lines(form.get("content_outline")),
        "prerequisites": split_lines(form.get("prerequisites")),
        "image_url": form.get("image_url") or existing.get("image_url"),
        "students": existing.get("students") or 0,
        "rating": existing.get("rating") or 0,
    }


def booking_row(form: Mapping[str, Any], today: Optional[date] = None) -> dict:
    _required(form, "teacher_id", "lesson_date", "lesson_time", "student_name", "student_email")
    lesson_date = form["lesson_date"]
    if not isinstance(lesson_date, date):
        try:
            lesson_date = date.fromisoformat(str(lesson_date))
        except ValueError:
            raise ValidationError(f"Invalid lesson date: {lesson_date}") from None
    if lesson_date < (today or date.today()):
        raise ValidationError("Lesson date cannot be in the past")
    if form["lesson_time"] not in TIME_SLOTS:
        raise ValidationError(f"Unknown time slot: {form['lesson_time']}")
    return {
        "teacher_id": str(form["teacher_id"]),
        "student_name": form["student_name"].strip(),
        "student_email": _email(form["student_email"]),
        "student_phone": (form.get("student_phone") or "").strip() or None,
        "lesson_date": lesson_date.isoformat(),
        "lesson_time": form["lesson_time"],
        "lesson_notes": (form.get("lesson_notes") or "").strip() or None,
        "status": "pending",
    }


def payment_method_row(form: Mapping[str, Any]) -> dict:
    _required(form, "name", "type", "details")
    if form["type"] not in PAYMENT_TYPES:
        raise ValidationError(f"Unknown payment type: {form['type']}")
    return {
        "name": form["name"].strip(),
        "type": form["type"],
        "details": form["details"].strip(),
        "is_active": bool(form.get("is_active", True)),
    }


def new_admin_row(form: Mapping[str, Any]) -> dict:
    _required(form, "email", "password")
    return {
        "email": _email(form["email"]).lower(),
        "name": (form.get("name") or "").strip() or None,
        "password": hash_password(form["password"]),
    }


def admin_changes(form: Mapping[str, Any]) -> dict:
    """Only the fields the admin actually filled in."""
    changes = {}
    if (form.get("name") or "").strip():
        changes["name"] = form["name"].strip()
    if form.get("password"):
        changes["password"] = hash_password(form["password"])
    if not changes:
        raise ValidationError("Nothing to update")
    return changes


def theme_row(form: Mapping[str, Any]) -> dict:
    row = {}
    for key in ("primary_color", "secondary_color", "accent_color"):
        value = str(form.get(key) or "").strip()
        if not HEX_COLOR_RE.fullmatch(value):
            raise ValidationError(f"{key} must look like #RRGGBB")
        row[key] = value.upper()
    return row


def contact_message(form: Mapping[str, Any]) -> dict:
    _required(form, "name", "email", "subject", "message")
    return {
        "name": form["name"].strip(),
        "email": _email(form["email"]),
        "subject": form["subject"].strip(),
        "message": form["message"].strip(),
    }
