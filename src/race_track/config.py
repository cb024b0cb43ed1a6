"""
Configuration for solving race track cases.
"""

from dataclasses import dataclass
from typing import Optional

# Motion model: each velocity component stays within [-MAX_SPEED, MAX_SPEED]
MAX_SPEED = 3


@dataclass
class RunConfig:
    """Configuration for a batch of race track cases."""

    # Worker threads for the per-case fan-out; None lets the executor decide
    workers: Optional[int] = None

    # Output parameters
    show_progress: bool = False  # tqdm bar over finished cases
    verbose: bool = False  # DEBUG logging, including per-case search stats

    def __post_init__(self):
        if self.workers is not None and self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")
