"""
A* solver for the minimum number of hops on a race track.
"""

import threading
import time
from dataclasses import dataclass
from typing import Optional, Sequence, Union

import numpy as np

from ..config import MAX_SPEED
from ..logger import logger
from ..track.board import Node, Track
from ..track.case import Case
from .state import SearchState, StateQueue, VisitedSet

# Every hop changes each velocity component by -1, 0 or +1
ACCELERATIONS = tuple(Node(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1))

ZERO_VELOCITY = Node(0, 0)

GridLike = Union[Track, np.ndarray, Sequence[Sequence[bool]]]


def hop_lower_bound(point: Node, goal: Node) -> int:
    """Fewest hops that could cover the distance to ``goal``.

    A hop moves at most MAX_SPEED cells along each axis, so the bound never
    overestimates and changes by at most one per hop.
    """
    dx = abs(point.x - goal.x)
    dy = abs(point.y - goal.y)
    return max(-(-dx // MAX_SPEED), -(-dy // MAX_SPEED))


@dataclass
class SearchResult:
    """Result of A* solving."""

    hops: Optional[int]
    nodes_explored: int
    time_taken_ms: float
    cancelled: bool = False

    @property
    def solved(self) -> bool:
        return self.hops is not None

    def message(self) -> str:
        if self.solved:
            return f"Optimal solution takes {self.hops} hops."
        if self.cancelled:
            return "Search cancelled."
        return "No solution."

    def __str__(self) -> str:
        return self.message()


class AStarSolver:
    """A* search over (position, velocity) states.

    The solver keeps no state between calls, so one instance may be shared
    by several threads solving different cases.
    """

    def solve(
        self,
        grid: GridLike,
        start: Node,
        end: Node,
        width: int,
        height: int,
        cancel_event: Optional[threading.Event] = None,
    ) -> SearchResult:
        """Find the least number of hops from ``start`` to ``end``.

        ``start`` and ``end`` are trusted to be free cells inside the grid.
        Only the landing cell of each hop is checked against obstacles.

        Args:
            grid: Obstacle flags indexed ``[y][x]``, or a Track
            start: Start cell, entered with zero velocity
            end: Goal cell
            width: Grid width
            height: Grid height
            cancel_event: Stops the search early when set

        Returns:
            SearchResult with the optimal hop count, or ``hops=None``
        """
        start_time = time.time()
        start, end = Node(*start), Node(*end)
        track = grid if isinstance(grid, Track) else Track.from_rows(grid)
        blocked = track.grid

        queue = StateQueue()
        queue.push(SearchState(start, ZERO_VELOCITY, 0, hop_lower_bound(start, end)))
        visited = VisitedSet()
        nodes_explored = 0

        while queue:
            if cancel_event is not None and cancel_event.is_set():
                return self._finish(None, nodes_explored, start_time, cancelled=True)

            current = queue.pop()
            # A state can be queued more than once; only its first pop counts
            if not visited.add(current.point, current.velocity):
                continue
            nodes_explored += 1

            if current.point == end:
                return self._finish(current.hops, nodes_explored, start_time)

            for acceleration in ACCELERATIONS:
                velocity = current.velocity + acceleration
                if abs(velocity.x) > MAX_SPEED or abs(velocity.y) > MAX_SPEED:
                    continue

                point = current.point + velocity
                if not (0 <= point.x < width and 0 <= point.y < height):
                    continue
                if blocked[point.y, point.x]:
                    continue

                if (point, velocity) not in visited:
                    queue.push(
                        SearchState(
                            point,
                            velocity,
                            current.hops + 1,
                            hop_lower_bound(point, end),
                        )
                    )

        return self._finish(None, nodes_explored, start_time)

    def solve_case(
        self, case: Case, cancel_event: Optional[threading.Event] = None
    ) -> SearchResult:
        result = self.solve(
            case.track, case.start, case.end, case.width, case.height, cancel_event
        )
        logger.bind(component="solver", case_id=case.case_id).debug(
            f"{result.message()} ({result.nodes_explored} states explored "
            f"in {result.time_taken_ms:.1f}ms)"
        )
        return result

    def _finish(
        self,
        hops: Optional[int],
        nodes_explored: int,
        start_time: float,
        cancelled: bool = False,
    ) -> SearchResult:
        elapsed_ms = (time.time() - start_time) * 1000
        return SearchResult(
            hops=hops,
            nodes_explored=nodes_explored,
            time_taken_ms=elapsed_ms,
            cancelled=cancelled,
        )
