from typing import NamedTuple, Sequence

import numpy as np


class Node(NamedTuple):
    """Integer grid pair used for both positions and velocities."""

    x: int
    y: int

    def __add__(self, other: "Node") -> "Node":
        return Node(self.x + other.x, self.y + other.y)


class Track:
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.grid = np.zeros((height, width), dtype=bool)

    def is_valid_position(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_obstacle(self, x: int, y: int) -> bool:
        return bool(self.grid[y, x])

    def is_free(self, x: int, y: int) -> bool:
        return self.is_valid_position(x, y) and not self.grid[y, x]

    def set_obstacle(self, x: int, y: int, blocked: bool = True) -> None:
        if self.is_valid_position(x, y):
            self.grid[y, x] = blocked

    def add_obstacle(self, x1: int, x2: int, y1: int, y2: int) -> None:
        """Block the inclusive rectangle ``x1..x2`` by ``y1..y2``.

        The argument order follows the problem text, x range first.
        """
        if x1 > x2 or y1 > y2:
            return
        self.grid[y1 : y2 + 1, x1 : x2 + 1] = True

    def obstacle_count(self) -> int:
        return int(self.grid.sum())

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[bool]]) -> "Track":
        """Build a track from row-major ``rows[y][x]`` obstacle flags."""
        grid = np.asarray(rows, dtype=bool)
        track = cls(grid.shape[1], grid.shape[0])
        track.grid = grid
        return track

    def __str__(self) -> str:
        result = []
        for y in range(self.height):
            row = ["#" if self.grid[y, x] else "." for x in range(self.width)]
            result.append("".join(row))
        return "\n".join(result)

    def render(self, start: Node, end: Node) -> str:
        """Render the track with the start marked ``S`` and the goal ``E``."""
        lines = [list(line) for line in str(self).split("\n")]
        lines[start.y][start.x] = "S"
        lines[end.y][end.x] = "E"
        return "\n".join("".join(line) for line in lines)
