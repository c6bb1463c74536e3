from datetime import date, timedelta

import pytest

from data.forms import (
    TIME_SLOTS,
    ValidationError,
    admin_changes,
    booking_row,
    contact_message,
    course_row,
    hash_password,
    new_admin_row,
    payment_method_row,
    split_csv,
    split_lines,
    teacher_row,
    theme_row,
)


@pytest.fixture
def booking_form():
    """A complete, valid booking form."""
    return {
        "teacher_id": "1",
        "lesson_date": date.today() + timedelta(days=7),
        "lesson_time": "10:00",
        "student_name": "  Mona Ali ",
        "student_email": "mona@example.com",
        "student_phone": "",
        "lesson_notes": "Focus on speaking",
    }


@pytest.fixture
def teacher_form():
    return {
        "name": "Nour",
        "specialization": "IELTS",
        "hourly_rate": 175,
        "experience": 4,
        "languages": "Arabic, English ,",
        "certifications": "CELTA\n\nTESOL\n",
        "bio": "",
        "is_online": True,
    }


class TestHelpers:
    """Test list splitting and password hashing."""

    def test_split_csv_drops_blanks(self):
        assert split_csv("a, b ,, c") == ["a", "b", "c"]
        assert split_csv(None) == []

    def test_split_lines(self):
        assert split_lines("x\n\n y \n") == ["x", "y"]

    def test_hash_password_is_sha256_hex(self):
        digest = hash_password("admin123")
        assert len(digest) == 64
        assert digest == hash_password("admin123")
        assert digest != hash_password("admin124")

    def test_time_slots_cover_working_day(self):
        """Test the twelve hourly slots from 09:00 to 20:00."""
        assert len(TIME_SLOTS) == 12
        assert TIME_SLOTS[0] == "09:00"
        assert TIME_SLOTS[-1] == "20:00"


class TestBookingRow:
    """Test booking form validation."""

    def test_valid_booking_is_pending(self, booking_form):
        """Test that new bookings always start as pending."""
        row = booking_row(booking_form)
        assert row["status"] == "pending"
        assert row["lesson_date"] == (date.today() + timedelta(days=7)).isoformat()
        assert row["student_name"] == "Mona Ali"
        assert row["student_phone"] is None

    @pytest.mark.parametrize("field", ["teacher_id", "lesson_date", "lesson_time", "student_name", "student_email"])
    def test_required_fields(self, booking_form, field):
        """Test that each required field is enforced."""
        booking_form[field] = ""
        with pytest.raises(ValidationError):
            booking_row(booking_form)

    def test_bad_email(self, booking_form):
        booking_form["student_email"] = "not-an-email"
        with pytest.raises(ValidationError):
            booking_row(booking_form)

    def test_slot_outside_hours(self, booking_form):
        """Test that only the offered slots are accepted."""
        booking_form["lesson_time"] = "22:00"
        with pytest.raises(ValidationError):
            booking_row(booking_form)

    def test_past_date_rejected(self, booking_form):
        """Test that a lesson cannot be booked for a day that has gone."""
        booking_form["lesson_date"] = date(2026, 3, 1)
        with pytest.raises(ValidationError):
            booking_row(booking_form, today=date(2026, 3, 2))

    def test_today_is_allowed(self, booking_form):
        booking_form["lesson_date"] = date(2026, 3, 2)
        assert booking_row(booking_form, today=date(2026, 3, 2))["lesson_date"] == "2026-03-02"

    def test_iso_string_date(self, booking_form):
        booking_form["lesson_date"] = "2026-03-05"
        assert booking_row(booking_form, today=date(2026, 3, 2))["lesson_date"] == "2026-03-05"

    def test_unparseable_date(self, booking_form):
        booking_form["lesson_date"] = "next tuesday"
        with pytest.raises(ValidationError):
            booking_row(booking_form)


class TestCatalogRows:
    """Test teacher and course payloads."""

    def test_teacher_lists_are_parsed(self, teacher_form):
        row = teacher_row(teacher_form)
        assert row["languages"] == ["Arabic", "English"]
        assert row["certifications"] == ["CELTA", "TESOL"]
        assert row["bio"] is None
        assert row["rating"] == 0

    def test_teacher_edit_keeps_review_counters(self, teacher_form):
        """Test that editing a teacher never resets rating / reviews."""
        existing = {"id": "9", "rating": 4.6, "reviews": 40, "image_url": "http://x/y.png"}
        row = teacher_row(teacher_form, existing)
        assert row["rating"] == 4.6
        assert row["reviews"] == 40
        assert row["image_url"] == "http://x/y.png"

    def test_teacher_negative_rate(self, teacher_form):
        teacher_form["hourly_rate"] = -5
        with pytest.raises(ValidationError):
            teacher_row(teacher_form)

    def test_teacher_requires_name(self, teacher_form):
        teacher_form["name"] = "  "
        with pytest.raises(ValidationError):
            teacher_row(teacher_form)

    def test_course_row(self):
        row = course_row(
            {
                "title": "Phonics",
                "description": "Sounds of English",
                "level": "مبتدئ",
                "duration": "4 weeks",
                "price": "600",
                "instructor": "Sara",
                "category": "محادثة",
                "features": "Live\nRecorded",
            }
        )
        assert row["price"] == 600.0
        assert row["features"] == ["Live", "Recorded"]
        assert row["prerequisites"] == []
        assert row["students"] == 0

    def test_course_price_not_a_number(self):
        with pytest.raises(ValidationError):
            course_row(
                {
                    "title": "t",
                    "description": "d",
                    "level": "مبتدئ",
                    "duration": "1",
                    "price": "free",
                    "instructor": "i",
                    "category": "c",
                }
            )


class TestSettingsRows:
    """Test payment, admin, theme and contact payloads."""

    def test_payment_method_type_checked(self):
        with pytest.raises(ValidationError):
            payment_method_row({"name": "Card", "type": "credit_card", "details": "x"})

    def test_payment_method_active_by_default(self):
        row = payment_method_row({"name": "InstaPay", "type": "instant_payment", "details": "me@instapay"})
        assert row["is_active"] is True

    def test_new_admin_hashes_password(self):
        row = new_admin_row({"email": "Boss@Example.com", "password": "s3cret"})
        assert row["email"] == "boss@example.com"
        assert row["password"] == hash_password("s3cret")

    def test_new_admin_requires_password(self):
        with pytest.raises(ValidationError):
            new_admin_row({"email": "a@b.co", "password": ""})

    def test_admin_changes_only_filled_fields(self):
        assert admin_changes({"name": "New", "password": ""}) == {"name": "New"}

    def test_admin_changes_nothing(self):
        with pytest.raises(ValidationError):
            admin_changes({"name": " ", "password": ""})

    def test_theme_row_uppercases(self):
        row = theme_row({"primary_color": "#3b82f6", "secondary_color": "#10B981", "accent_color": "#f59e0b"})
        assert row == {"primary_color": "#3B82F6", "secondary_color": "#10B981", "accent_color": "#F59E0B"}

    def test_theme_row_rejects_short_hex(self):
        with pytest.raises(ValidationError):
            theme_row({"primary_color": "#FFF", "secondary_color": "#10B981", "accent_color": "#F59E0B"})

    def test_contact_message(self):
        msg = contact_message({"name": "Ali", "email": "ali@example.com", "subject": "Hi", "message": " Hello "})
        assert msg["message"] == "Hello"

    def test_contact_requires_message(self):
        with pytest.raises(ValidationError):
            contact_message({"name": "Ali", "email": "ali@example.com", "subject": "Hi", "message": ""})
