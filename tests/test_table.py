"""Tests for table.py — column building and ragged transpose."""

import pytest

from roster import Course, CourseRoster, Student
from table import build_column, build_columns, transpose


def _roster(name: str, *given_names) -> CourseRoster:
    return CourseRoster(
        course=Course(id=f"id-{name}", name=name, course_state="ACTIVE"),
        students=[Student(given_name=g) for g in given_names],
    )


# ---------------------------------------------------------------------------
# build_column / build_columns
# ---------------------------------------------------------------------------

class TestBuildColumn:
    """Tests for build_column()."""

    def test_header_then_names_in_order(self):
        assert build_column(_roster("Course1", "Amy", "Bo")) == ["Course1", "Amy", "Bo"]

    def test_missing_given_name_becomes_empty_string(self):
        column = build_column(_roster("Course1", "Amy", None, "Cy"))

        assert column == ["Course1", "Amy", "", "Cy"]
        assert len(column) == 4

    def test_no_students(self):
        assert build_column(_roster("Course1")) == ["Course1"]

    def test_duplicates_kept_and_unsorted(self):
        assert build_column(_roster("C", "Zed", "Amy", "Zed")) == ["C", "Zed", "Amy", "Zed"]


class TestBuildColumns:
    """Tests for build_columns()."""

    def test_preserves_course_order(self):
        columns = build_columns([_roster("B", "x"), _roster("A", "y")])

        assert [c[0] for c in columns] == ["B", "A"]

    def test_empty(self):
        assert build_columns([]) == []


# ---------------------------------------------------------------------------
# transpose
# ---------------------------------------------------------------------------

class TestTranspose:
    """Tests for transpose()."""

    def test_two_courses_ragged(self):
        columns = [["Course1", "Amy", "Bo"], ["Course2", "Cy"]]

        assert transpose(columns) == [
            ["Course1", "Course2"],
            ["Amy", "Cy"],
            ["Bo", ""],
        ]

    def test_single_column(self):
        assert transpose([["Course1", ""]]) == [["Course1"], [""]]

    def test_zero_columns(self):
        assert transpose([]) == []

    def test_zero_length_columns_are_padded(self):
        assert transpose([[], ["A", "b"], []]) == [["", "A", ""], ["", "b", ""]]

    def test_all_zero_length_columns(self):
        assert transpose([[], []]) == []

    def test_returns_lists(self):
        grid = transpose([["A"], ["B"]])

        assert all(isinstance(row, list) for row in grid)

    @pytest.mark.parametrize(
        "lengths",
        [(1,), (3, 1), (1, 3), (2, 5, 0, 4), (7, 7, 7)],
    )
    def test_shape_and_cells(self, lengths):
        columns = [
            [f"{c}-{r}" for r in range(length)]
            for c, length in enumerate(lengths)
        ]

        grid = transpose(columns)

        assert len(grid) == max(lengths)
        assert all(len(row) == len(columns) for row in grid)
        for r, row in enumerate(grid):
            for c, cell in enumerate(row):
                expected = columns[c][r] if r < len(columns[c]) else ""
                assert cell == expected

    def test_does_not_modify_input(self):
        columns = [["A", "x"], ["B"]]

        transpose(columns)

        assert columns == [["A", "x"], ["B"]]
