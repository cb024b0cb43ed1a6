"""
Parser turning the textual problem description into race track cases.
"""

from typing import Iterator, List, Optional

from ..logger import logger
from ..track.board import Node, Track
from ..track.case import Case


class CaseParseError(ValueError):
    """Raised when the problem text is malformed."""


class _Lines:
    """Line cursor over the problem text."""

    def __init__(self, text: str):
        lines = text.splitlines()
        while lines and not lines[-1].strip():
            lines.pop()
        self._iter: Iterator[str] = iter(lines)

    def next(self) -> Optional[str]:
        return next(self._iter, None)


def _parse_ints(line: str, count: int) -> Optional[List[int]]:
    tokens = line.split()
    if len(tokens) != count:
        return None
    try:
        return [int(token) for token in tokens]
    except ValueError:
        return None


class CaseProvider:
    """Reads test cases from the race track text format.

    The text starts with the number of cases. Each case is a ``width height``
    line, a ``startX startY endX endY`` line, an obstacle count and then one
    ``x1 x2 y1 y2`` line per inclusive obstacle rectangle.
    """

    def __init__(self):
        self.logger = logger.bind(component="provider")

    def get(self, text: str) -> List[Case]:
        """Parse every case in ``text``.

        Raises:
            CaseParseError: on the first malformed or missing line
        """
        lines = _Lines(text)

        line = lines.next()
        if line is None:
            raise CaseParseError("failed to read number of test cases")
        values = _parse_ints(line, 1)
        if values is None or values[0] < 0:
            raise CaseParseError("failed to parse number of test cases")
        num_tests = values[0]

        cases = [self._parse_case(lines, case_id) for case_id in range(1, num_tests + 1)]

        if lines.next() is not None:
            raise CaseParseError(
                "extra data found after the declared number of test cases"
            )

        self.logger.debug(f"Parsed {len(cases)} case(s)")
        return cases

    def _parse_case(self, lines: _Lines, case_id: int) -> Case:
        width, height = self._read(
            lines, 2,
            f"not enough information for test case {case_id}: missing width and height",
            f"failed to parse width and height for test case {case_id}",
        )
        if width <= 0 or height <= 0:
            raise CaseParseError(f"invalid grid dimensions for test case {case_id}")

        x1, y1, x2, y2 = self._read(
            lines, 4,
            f"not enough information for test case {case_id}: missing start and end points",
            f"failed to parse start and end points for test case {case_id}",
        )
        start, end = Node(x1, y1), Node(x2, y2)
        track = Track(width, height)

        (num_obstacles,) = self._read(
            lines, 1,
            f"not enough information for test case {case_id}: missing number of obstacles",
            f"failed to parse number of obstacles for test case {case_id}",
        )
        if num_obstacles < 0:
            raise CaseParseError(
                f"failed to parse number of obstacles for test case {case_id}"
            )

        for obstacle in range(1, num_obstacles + 1):
            ox1, ox2, oy1, oy2 = self._read(
                lines, 4,
                f"not enough information for obstacle {obstacle} in test case {case_id}",
                f"failed to parse obstacle {obstacle} for test case {case_id}",
            )
            if not (
                track.is_valid_position(ox1, oy1) and track.is_valid_position(ox2, oy2)
            ):
                raise CaseParseError(
                    f"obstacle {obstacle} for test case {case_id} is out of grid bounds"
                )
            track.add_obstacle(ox1, ox2, oy1, oy2)

        case = Case(
            case_id=case_id,
            width=width,
            height=height,
            track=track,
            start=start,
            end=end,
            num_obstacles=num_obstacles,
        )
        errors = case.validate()
        if errors:
            raise CaseParseError(errors[0])

        self.logger.debug(
            f"Case {case_id}: {width}x{height}, {track.obstacle_count()} blocked cells"
        )
        return case

    @staticmethod
    def _read(lines: _Lines, count: int, missing: str, malformed: str) -> List[int]:
        line = lines.next()
        if line is None:
            raise CaseParseError(missing)
        values = _parse_ints(line, count)
        if values is None:
            raise CaseParseError(malformed)
        return values
