from dataclasses import dataclass
from typing import List

from .board import Node, Track


@dataclass
class Case:
    """One race track problem: a track plus the start and goal cells."""

    case_id: int
    width: int
    height: int
    track: Track
    start: Node
    end: Node
    num_obstacles: int = 0

    def validate(self) -> List[str]:
        """Check that start and goal are free cells inside the track."""
        errors = []

        points = (self.start, self.end)
        if not all(self.track.is_valid_position(p.x, p.y) for p in points):
            errors.append(
                f"start or end point is out of grid bounds for test case {self.case_id}"
            )
        elif any(self.track.is_obstacle(p.x, p.y) for p in points):
            errors.append(
                "start or end point is blocked by an obstacle "
                f"for test case {self.case_id}"
            )

        return errors

    def __str__(self) -> str:
        return (
            f"Case {self.case_id} ({self.width}x{self.height}, "
            f"{self.num_obstacles} obstacles)\n{self.track.render(self.start, self.end)}"
        )
