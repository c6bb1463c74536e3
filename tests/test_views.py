import pandas as pd
import pytest
from streamlit.testing.v1 import AppTest

from views.admin import lesson_markup, overview_kpis
from views.booking import preselect_index


def _booking_page(teacher_id):
    from data.memory_store import MemoryStore
    from views import booking

    booking.render(None, MemoryStore.seeded(), "en", {"teacher_id": teacher_id} if teacher_id else None)


@pytest.fixture
def booking_page():
    def run(teacher_id=None):
        at = AppTest.from_function(_booking_page, args=(teacher_id,))
        at.run()
        assert not at.exception
        return at

    return run


class TestBookingTeacherChoice:
    """Test which teacher the booking form starts with."""

    def test_preselect_online_teacher(self):
        assert preselect_index(["1", "3"], "3") == 1

    def test_unknown_teacher_selects_nobody(self):
        assert preselect_index(["1", "3"], "2") is None

    def test_no_request_selects_nobody(self):
        assert preselect_index(["1", "3"], "") is None

    def test_online_teacher_from_profile(self, booking_page):
        at = booking_page("3")
        assert at.selectbox(key="booking_teacher").value == "3"
        assert len(at.info) == 0

    def test_offline_teacher_is_not_swapped(self, booking_page):
        """Test that booking an offline teacher leaves the choice empty and says why."""
        at = booking_page("2")
        assert at.selectbox(key="booking_teacher").value is None
        assert any("not taking bookings" in info.value for info in at.info)

    def test_submit_without_teacher_is_rejected(self, booking_page):
        at = booking_page("2")
        at.button[0].click().run()
        assert any("teacher_id" in err.value for err in at.error)
        assert len(at.success) == 0


class TestAdminMarkup:
    """Test admin overview tiles and booking rows."""

    def test_pending_tile_is_translated(self):
        bookings = pd.DataFrame({"status": ["pending", "confirmed", "pending"]})
        kpis = overview_kpis(pd.DataFrame(), pd.DataFrame(), bookings, "ar")
        assert kpis[-1].label == "قيد الانتظار"
        assert kpis[-1].value == "2"

    def test_pending_tile_on_empty_bookings(self):
        kpis = overview_kpis(pd.DataFrame(), pd.DataFrame(), pd.DataFrame(), "en")
        assert kpis[-1].label == "Pending"
        assert kpis[-1].value == "0"

    def test_lesson_markup_is_escaped(self):
        """Test that teacher names and dates cannot inject HTML."""
        booking = {"teacher_id": "9", "lesson_date": "<b>2026-01-01</b>", "lesson_time": "10:00"}
        out = lesson_markup(booking, {"9": "<script>x</script>"})
        assert "<script>" not in out
        assert "&lt;script&gt;" in out
        assert "&lt;b&gt;2026-01-01&lt;/b&gt;" in out

    def test_lesson_markup_unknown_teacher_shows_id(self):
        out = lesson_markup({"teacher_id": "42", "lesson_date": "2026-01-01", "lesson_time": "10:00"}, {})
        assert out.startswith("42<br/>")
