"""
Solves many race track cases concurrently, one task per case.
"""

import concurrent.futures
import threading
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from tqdm import tqdm

from .logger import logger
from .solver.solver import AStarSolver, SearchResult
from .track.case import Case


@dataclass
class CaseResult:
    """Search result for the case with ``case_id``."""

    case_id: int
    result: SearchResult


def format_result(case_result: CaseResult) -> str:
    return f"Case {case_result.case_id}:\n{case_result.result.message()}"


def solve_cases(
    cases: Sequence[Case],
    workers: Optional[int] = None,
    cancel_event: Optional[threading.Event] = None,
    progress: bool = False,
) -> List[CaseResult]:
    """Solve every case and return the results in input order.

    Cases are submitted to a thread pool as independent tasks. Results are
    keyed by case id as they complete, so completion order never leaks into
    the returned order.

    Args:
        cases: Parsed cases, each with a unique ``case_id``
        workers: Thread count; 1 solves sequentially in the calling thread
        cancel_event: Shared flag that stops searches still running
        progress: Show a tqdm bar over finished cases

    Returns:
        One CaseResult per case, ordered like ``cases``

    Raises:
        ValueError: if two cases share a ``case_id``
    """
    if len({case.case_id for case in cases}) != len(cases):
        raise ValueError("case ids must be unique")

    log = logger.bind(component="runner")
    solver = AStarSolver()
    results: Dict[int, SearchResult] = {}

    with tqdm(
        total=len(cases),
        desc="Solving cases",
        unit="case",
        leave=False,
        ncols=100,
        disable=not progress,
    ) as pbar:
        if workers == 1:
            for case in cases:
                results[case.case_id] = solver.solve_case(case, cancel_event)
                pbar.update(1)
        else:
            with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as pool:
                futures = {
                    pool.submit(solver.solve_case, case, cancel_event): case.case_id
                    for case in cases
                }
                for future in concurrent.futures.as_completed(futures):
                    results[futures[future]] = future.result()
                    pbar.update(1)

    solved = sum(1 for result in results.values() if result.solved)
    log.info(f"Solved {solved}/{len(cases)} case(s)")

    return [CaseResult(case.case_id, results[case.case_id]) for case in cases]
