"""
Race track solver.

Finds the minimum number of acceleration hops a bounded-velocity vehicle
needs to cross a grid with rectangular obstacles.
"""

from .config import RunConfig
from .provider import CaseParseError, CaseProvider
from .runner import CaseResult, format_result, solve_cases
from .solver import AStarSolver, SearchResult
from .track import Case, Node, Track

__all__ = [
    "AStarSolver",
    "Case",
    "CaseParseError",
    "CaseProvider",
    "CaseResult",
    "Node",
    "RunConfig",
    "SearchResult",
    "Track",
    "format_result",
    "solve_cases",
]
