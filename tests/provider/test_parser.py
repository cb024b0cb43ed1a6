"""
Tests for parsing the race track text format.
"""

import pytest

from race_track.provider.parser import CaseParseError, CaseProvider
from race_track.track.board import Node

F, T = False, True


class TestCaseProvider:
    def test_single_case_with_obstacle(self):
        cases = CaseProvider().get("1\n5 5\n4 0 4 4\n1\n1 4 2 3")

        assert len(cases) == 1
        case = cases[0]
        assert case.case_id == 1
        assert (case.width, case.height) == (5, 5)
        assert case.start == Node(4, 0)
        assert case.end == Node(4, 4)
        assert case.num_obstacles == 1
        assert case.track.grid.tolist() == [
            [F, F, F, F, F],
            [F, F, F, F, F],
            [F, T, T, T, T],
            [F, T, T, T, T],
            [F, F, F, F, F],
        ]

    def test_multiple_cases(self):
        text = "2\n5 5\n4 0 4 4\n1\n1 4 2 3\n3 3\n0 0 2 2\n2\n1 1 0 2\n0 2 1 1\n"
        cases = CaseProvider().get(text)

        assert [case.case_id for case in cases] == [1, 2]
        second = cases[1]
        assert (second.width, second.height) == (3, 3)
        assert second.start == Node(0, 0)
        assert second.end == Node(2, 2)
        assert second.num_obstacles == 2
        assert second.track.grid.tolist() == [
            [F, T, F],
            [T, T, T],
            [F, T, F],
        ]

    def test_minimal_grid(self):
        (case,) = CaseProvider().get("1\n1 1\n0 0 0 0\n0")
        assert (case.width, case.height) == (1, 1)
        assert case.start == case.end == Node(0, 0)
        assert case.track.grid.tolist() == [[F]]

    def test_large_empty_grid(self):
        (case,) = CaseProvider().get("1\n30 30\n0 0 29 29\n0")
        assert case.track.grid.shape == (30, 30)
        assert case.track.obstacle_count() == 0
        assert case.end == Node(29, 29)

    def test_non_square_grid(self):
        """Width is the x extent and height the y extent."""
        (case,) = CaseProvider().get("1\n4 2\n0 0 3 1\n1\n1 2 0 0")
        assert case.track.grid.tolist() == [[F, T, T, F], [F, F, F, F]]

    def test_zero_cases(self):
        assert CaseProvider().get("0\n") == []

    def test_trailing_blank_lines_are_ignored(self):
        cases = CaseProvider().get("1\n1 1\n0 0 0 0\n0\n\n  \n")
        assert len(cases) == 1

    def test_parsed_cases_validate(self):
        text = "2\n5 5\n4 0 4 4\n1\n1 4 2 3\n3 3\n0 0 2 2\n2\n1 1 0 2\n0 2 1 1\n"
        for case in CaseProvider().get(text):
            assert case.validate() == []


@pytest.mark.parametrize(
    "text,message",
    [
        ("", "failed to read number of test cases"),
        ("a", "failed to parse number of test cases"),
        ("-1", "failed to parse number of test cases"),
        ("1 2", "failed to parse number of test cases"),
        (
            "1",
            "not enough information for test case 1: missing width and height",
        ),
        ("1\n5", "failed to parse width and height for test case 1"),
        ("1\n-5 5\n0 0 4 4\n0", "invalid grid dimensions for test case 1"),
        ("1\n5 0\n0 0 4 4\n0", "invalid grid dimensions for test case 1"),
        (
            "1\n5 5",
            "not enough information for test case 1: missing start and end points",
        ),
        ("1\n5 5\na b c d\n0", "failed to parse start and end points for test case 1"),
        ("1\n5 5\n0 0 4\n0", "failed to parse start and end points for test case 1"),
        (
            "1\n5 5\n0 0 5 4\n0",
            "start or end point is out of grid bounds for test case 1",
        ),
        (
            "1\n5 5\n0 0 4 4",
            "not enough information for test case 1: missing number of obstacles",
        ),
        ("1\n5 5\n0 0 4 4\nx", "failed to parse number of obstacles for test case 1"),
        ("1\n5 5\n0 0 4 4\n-2", "failed to parse number of obstacles for test case 1"),
        (
            "1\n5 5\n0 0 4 4\n2\n1 1 1 1",
            "not enough information for obstacle 2 in test case 1",
        ),
        ("1\n5 5\n0 0 4 4\n1\n1 1 1", "failed to parse obstacle 1 for test case 1"),
        (
            "1\n3 3\n0 0 2 2\n1\n0 4 1 1",
            "obstacle 1 for test case 1 is out of grid bounds",
        ),
        (
            "1\n3 3\n0 0 2 2\n1\n0 1 -1 0",
            "obstacle 1 for test case 1 is out of grid bounds",
        ),
        (
            "1\n3 3\n0 0 2 2\n1\n0 0 0 0",
            "start or end point is blocked by an obstacle for test case 1",
        ),
        (
            "1\n3 3\n0 0 5 5\n1\n0 0 0 0",
            "start or end point is out of grid bounds for test case 1",
        ),
        (
            "1\n5 5\n4 0 4 4\n0\nextra data",
            "extra data found after the declared number of test cases",
        ),
        (
            "2\n1 1\n0 0 0 0\n0\n3 3",
            "not enough information for test case 2: missing start and end points",
        ),
    ],
)
def test_malformed_input(text, message):
    with pytest.raises(CaseParseError) as exc_info:
        CaseProvider().get(text)
    assert str(exc_info.value) == message


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        CaseProvider().get("oops")
