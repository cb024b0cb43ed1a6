"""
A* solver for race track cases.

Finds the least number of acceleration hops from start to goal.
"""

from .solver import ACCELERATIONS, AStarSolver, SearchResult, hop_lower_bound
from .state import SearchState, StateQueue, VisitedSet

__all__ = [
    "AStarSolver",
    "SearchResult",
    "SearchState",
    "StateQueue",
    "VisitedSet",
    "ACCELERATIONS",
    "hop_lower_bound",
]
