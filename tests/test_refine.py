import pandas as pd

from data.refine import ALL, filter_bookings, refine, refine_courses, refine_teachers


class TestTeacherSearch:
    """Test free-text search over teacher name and specialization."""

    def test_empty_query_keeps_everything(self, teachers_df):
        """Test that an empty query matches all rows."""
        out = refine_teachers(teachers_df, query="")
        assert len(out) == len(teachers_df)

    def test_search_is_case_insensitive(self, tied_teachers):
        """Test that search ignores case."""
        out = refine_teachers(tied_teachers, query="ielts")
        assert out["id"].tolist() == ["b"]

    def test_search_matches_specialization(self, tied_teachers):
        """Test that specialization is searched as well as name."""
        out = refine_teachers(tied_teachers, query="english")
        assert out["id"].tolist() == ["d"]

    def test_search_matches_arabic_text(self, teachers_df):
        """Test substring match on Arabic names."""
        out = refine_teachers(teachers_df, query="سارة")
        assert out["id"].tolist() == ["1"]

    def test_query_is_not_trimmed(self, tied_teachers):
        """Test that surrounding whitespace is part of the query."""
        assert refine_teachers(tied_teachers, query=" alice").empty

    def test_no_match_returns_empty(self, tied_teachers):
        """Test that an unmatched query yields an empty frame."""
        out = refine_teachers(tied_teachers, query="zzz")
        assert out.empty


class TestTeacherFilterAndSort:
    """Test online filter and sort keys."""

    def test_online_filter(self, tied_teachers):
        """Test that 'online' keeps only online teachers."""
        out = refine_teachers(tied_teachers, status="online")
        assert set(out["id"]) == {"a", "c"}

    def test_offline_filter(self, tied_teachers):
        """Test that 'offline' keeps only offline teachers."""
        out = refine_teachers(tied_teachers, status="offline")
        assert set(out["id"]) == {"b", "d"}

    def test_all_filter_keeps_everything(self, tied_teachers):
        """Test that 'all' applies no predicate."""
        assert len(refine_teachers(tied_teachers, status=ALL)) == 4

    def test_rating_desc_adjacent_pairs(self, teachers_df):
        """Test that every adjacent pair is ordered by rating descending."""
        ratings = refine_teachers(teachers_df, sort_key="rating")["rating"].tolist()
        assert all(a >= b for a, b in zip(ratings, ratings[1:]))

    def test_rating_ties_keep_source_order(self, tied_teachers):
        """Test that equal ratings stay in their original order."""
        out = refine_teachers(tied_teachers, sort_key="rating")
        assert out["id"].tolist() == ["b", "a", "c", "d"]

    def test_reviews_desc(self, tied_teachers):
        """Test sorting by review count."""
        out = refine_teachers(tied_teachers, sort_key="reviews")
        assert out["id"].tolist() == ["c", "b", "a", "d"]

    def test_price_low_is_stable(self, tied_teachers):
        """Test ascending hourly rate with a tie between a and c."""
        out = refine_teachers(tied_teachers, sort_key="price-low")
        assert out["id"].tolist() == ["a", "c", "d", "b"]

    def test_price_high(self, tied_teachers):
        """Test descending hourly rate."""
        out = refine_teachers(tied_teachers, sort_key="price-high")
        assert out["id"].tolist() == ["b", "d", "a", "c"]

    def test_unknown_sort_keeps_source_order(self, tied_teachers):
        """Test that an unrecognised sort key leaves order untouched."""
        out = refine_teachers(tied_teachers, sort_key="newest")
        assert out["id"].tolist() == ["a", "b", "c", "d"]

    def test_filter_is_idempotent(self, tied_teachers):
        """Test that refining an already-refined result changes nothing."""
        once = refine_teachers(tied_teachers, query="a", status="online", sort_key="rating")
        twice = refine_teachers(once, query="a", status="online", sort_key="rating")
        pd.testing.assert_frame_equal(once, twice)

    def test_input_not_mutated(self, tied_teachers):
        """Test that the caller's frame is left as it was."""
        before = tied_teachers.copy()
        refine_teachers(tied_teachers, query="a", status="online", sort_key="price-high")
        pd.testing.assert_frame_equal(tied_teachers, before)


class TestCourseRefinement:
    """Test course search, level / category filters and sorts."""

    def test_search_title_and_description(self, courses_df):
        """Test that description text is searched."""
        out = refine_courses(courses_df, query="IELTS")
        assert out["id"].tolist() == ["2"]

    def test_level_filter(self, courses_df):
        """Test filtering by level."""
        out = refine_courses(courses_df, level="مبتدئ")
        assert set(out["id"]) == {"1", "4"}

    def test_level_and_category_combine(self, courses_df):
        """Test that filters are ANDed together."""
        out = refine_courses(courses_df, level="مبتدئ", category="قواعد")
        assert out["id"].tolist() == ["4"]

    def test_students_desc(self, courses_df):
        """Test sorting by enrolment."""
        out = refine_courses(courses_df, sort_key="students")
        assert out["id"].tolist() == ["4", "1", "2", "3"]

    def test_price_low(self, courses_df):
        """Test ascending price."""
        out = refine_courses(courses_df, sort_key="price-low")
        assert out["price"].tolist() == sorted(courses_df["price"].tolist())

    def test_rating_default(self, courses_df):
        """Test that the default sort is rating descending."""
        out = refine_courses(courses_df)
        assert out["id"].tolist() == ["2", "1", "3", "4"]


class TestGenericRefine:
    """Test edge cases of the shared refine function."""

    def test_empty_frame(self):
        """Test that an empty input returns an empty output."""
        assert refine(pd.DataFrame(), query="x", search_fields=("name",)).empty

    def test_missing_values_sort_last(self):
        """Test that rows without a sort value go to the end."""
        df = pd.DataFrame({"id": ["a", "b", "c"], "rating": [None, 4.0, 5.0]})
        out = refine(df, sort_key="rating", sorts={"rating": ("rating", False)})
        assert out["id"].tolist() == ["c", "b", "a"]

    def test_filter_bookings_by_status(self, store):
        """Test the admin booking status filter."""
        df = pd.DataFrame(store.tables["bookings"])
        out = filter_bookings(df, "pending")
        assert (out["status"] == "pending").all()
        assert len(filter_bookings(df, ALL)) == len(df)
