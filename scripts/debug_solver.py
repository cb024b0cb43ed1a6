#!/usr/bin/env python3
"""
Debug script for the A* solver - prints each track and cross-checks the
hop count against an exhaustive breadth-first search.
"""

import argparse
import sys
from collections import deque
from pathlib import Path
from typing import Optional

# Add src directory to path to import the race_track package
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from race_track.cli import SAMPLE_INPUT
from race_track.config import MAX_SPEED
from race_track.provider import CaseParseError, CaseProvider
from race_track.solver.solver import ACCELERATIONS, AStarSolver
from race_track.track.board import Node
from race_track.track.case import Case


def bfs_hops(case: Case) -> Optional[int]:
    """Exhaustive BFS over (position, velocity); None if the goal is unreachable."""
    start_key = (case.start, Node(0, 0))
    queue = deque([(start_key, 0)])
    seen = {start_key}

    while queue:
        (point, velocity), hops = queue.popleft()
        if point == case.end:
            return hops
        for acceleration in ACCELERATIONS:
            new_velocity = velocity + acceleration
            if abs(new_velocity.x) > MAX_SPEED or abs(new_velocity.y) > MAX_SPEED:
                continue
            new_point = point + new_velocity
            if not case.track.is_free(new_point.x, new_point.y):
                continue
            key = (new_point, new_velocity)
            if key not in seen:
                seen.add(key)
                queue.append((key, hops + 1))
    return None


def main():
    parser = argparse.ArgumentParser(description="Debug the race track A* solver")
    parser.add_argument("input", nargs="?", help="Problem file (default: built-in sample)")
    args = parser.parse_args()

    text = Path(args.input).read_text() if args.input else SAMPLE_INPUT

    try:
        cases = CaseProvider().get(text)
    except CaseParseError as e:
        print(f"ERROR: {e}")
        return 1

    solver = AStarSolver()
    mismatches = 0

    for case in cases:
        print(f"=== {case} ===")
        result = solver.solve_case(case)
        expected = bfs_hops(case)
        print(f"A*:  {result.message()}")
        print(f"     {result.nodes_explored} states explored in {result.time_taken_ms:.1f}ms")
        print(f"BFS: {expected if expected is not None else 'no solution'}")
        if result.hops != expected:
            print("MISMATCH")
            mismatches += 1
        print()

    print(f"{len(cases) - mismatches}/{len(cases)} cases agree")
    return 1 if mismatches else 0


if __name__ == "__main__":
    sys.exit(main())
