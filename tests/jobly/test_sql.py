"""Tests for the SQL fragment builders."""

import re

import pytest

from jobly.exceptions import BadRequestError
from jobly.utils.sql import SqlFragment, build_filtered_query, like_pattern, sql_for_partial_update

USER_COLUMNS = {
    "firstName": "first_name",
    "lastName": "last_name",
    "isAdmin": "is_admin",
}


class TestSqlForPartialUpdate:
    """Tests for sql_for_partial_update."""

    def test_one_item(self):
        """A single mapped field yields one placeholder."""
        result = sql_for_partial_update({"firstName": "Jenny"}, USER_COLUMNS)
        assert result == SqlFragment('"first_name"=$1', ["Jenny"])

    def test_two_items_with_pass_through(self):
        """Unmapped fields use their own name as the column."""
        result = sql_for_partial_update({"firstName": "Jenny", "age": 35}, {"firstName": "first_name"})
        assert result.sql == '"first_name"=$1, "age"=$2'
        assert result.values == ["Jenny", 35]

    def test_follows_insertion_order(self):
        """Placeholders follow the order fields were supplied."""
        result = sql_for_partial_update({"isAdmin": True, "lastName": "Doe", "firstName": "J"}, USER_COLUMNS)
        assert result.sql == '"is_admin"=$1, "last_name"=$2, "first_name"=$3'
        assert result.values == [True, "Doe", "J"]

    def test_placeholder_count_matches_values(self):
        """One placeholder per field, numbered 1..n."""
        data = {f"field{i}": i for i in range(7)}
        result = sql_for_partial_update(data, {})
        placeholders = re.findall(r"\$(\d+)", result.sql)
        assert [int(p) for p in placeholders] == list(range(1, 8))
        assert len(result.values) == len(placeholders) == len(data)

    def test_falsy_values_are_kept(self):
        """None, 0 and empty strings are real updates."""
        result = sql_for_partial_update({"logoUrl": None, "numEmployees": 0}, {"numEmployees": "num_employees", "logoUrl": "logo_url"})
        assert result.sql == '"logo_url"=$1, "num_employees"=$2'
        assert result.values == [None, 0]

    def test_empty_data_raises(self):
        """An update with no fields is a bad request."""
        with pytest.raises(BadRequestError, match="No data"):
            sql_for_partial_update({}, USER_COLUMNS)

    def test_idempotent(self):
        """Same input, same output."""
        data = {"firstName": "Jenny", "age": 35}
        assert sql_for_partial_update(data, USER_COLUMNS) == sql_for_partial_update(data, USER_COLUMNS)


class TestBuildFilteredQuery:
    """Tests for build_filtered_query."""

    BASE = "SELECT handle FROM companies"

    def test_no_predicates(self):
        """No predicates leaves the base query plus order clause."""
        result = build_filtered_query(self.BASE, [], "ORDER BY name")
        assert result.sql == "SELECT handle FROM companies ORDER BY name"
        assert result.values == []

    def test_single_predicate(self):
        """A lone predicate gets $1."""
        result = build_filtered_query(self.BASE, [("num_employees >= {}", 5)], "ORDER BY name")
        assert result.sql == "SELECT handle FROM companies WHERE num_employees >= $1 ORDER BY name"
        assert result.values == [5]

    def test_shared_counter(self):
        """Placeholders increase across all predicates and join with AND."""
        predicates = [
            ("num_employees >= {}", 1),
            ("num_employees <= {}", 10),
            ("LOWER(name) LIKE LOWER({})", "%net%"),
        ]
        result = build_filtered_query(self.BASE, predicates, "ORDER BY name")
        assert result.sql == (
            "SELECT handle FROM companies WHERE num_employees >= $1 AND num_employees <= $2 "
            "AND LOWER(name) LIKE LOWER($3) ORDER BY name"
        )
        assert result.values == [1, 10, "%net%"]

    def test_accepts_generator(self):
        """Predicates may be any iterable."""
        result = build_filtered_query(self.BASE, (p for p in [("salary >= {}", 0)]), "ORDER BY title")
        assert result.sql.endswith("WHERE salary >= $1 ORDER BY title")
        assert result.values == [0]

    def test_idempotent(self):
        """No counter state leaks between calls."""
        predicates = [("salary >= {}", 100)]
        first = build_filtered_query(self.BASE, predicates, "ORDER BY title")
        second = build_filtered_query(self.BASE, predicates, "ORDER BY title")
        assert first == second


class TestLikePattern:
    """Tests for like_pattern."""

    def test_plain_text(self):
        """Plain text is wrapped for a substring match."""
        assert like_pattern("net") == "%net%"

    @pytest.mark.parametrize(
        "text, expected",
        [("_", "%\\_%"), ("%", "%\\%%"), ("a\\b", "%a\\\\b%"), ("50%_off", "%50\\%\\_off%")],
    )
    def test_wildcards_escaped(self, text, expected):
        """Wildcards and the escape character are escaped."""
        assert like_pattern(text) == expected
