"""
Search states and the priority queue used by the A* solver.
"""

import heapq
import itertools
from dataclasses import dataclass
from typing import Dict, List, Set, Tuple

from ..track.board import Node


@dataclass(frozen=True)
class SearchState:
    """A vehicle at ``point`` moving with ``velocity`` after ``hops`` steps."""

    point: Node
    velocity: Node
    hops: int
    heuristic: int

    @property
    def priority(self) -> int:
        return self.hops + self.heuristic


class StateQueue:
    """Min-priority queue of search states ordered by ``hops + heuristic``.

    Equal priorities pop in insertion order (FIFO); the sequence number in
    each heap entry keeps the comparison away from the states themselves.
    """

    def __init__(self):
        self._heap: List[Tuple[int, int, SearchState]] = []
        self._counter = itertools.count()

    def push(self, state: SearchState) -> None:
        heapq.heappush(self._heap, (state.priority, next(self._counter), state))

    def pop(self) -> SearchState:
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


class VisitedSet:
    """Velocities already expanded for each point."""

    def __init__(self):
        self._seen: Dict[Node, Set[Node]] = {}

    def add(self, point: Node, velocity: Node) -> bool:
        """Mark ``(point, velocity)`` visited; False if it already was."""
        velocities = self._seen.setdefault(point, set())
        if velocity in velocities:
            return False
        velocities.add(velocity)
        return True

    def __contains__(self, key: Tuple[Node, Node]) -> bool:
        point, velocity = key
        return velocity in self._seen.get(point, ())

    def __len__(self) -> int:
        return sum(len(velocities) for velocities in self._seen.values())
