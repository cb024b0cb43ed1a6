#!/usr/bin/env python3
"""
Race Track Solver

Computes the minimum number of acceleration hops a vehicle with bounded
velocity needs to reach the goal cell of a grid with rectangular obstacles.
"""

import sys
from pathlib import Path

# Add src directory to path so the solver runs from a plain checkout
sys.path.insert(0, str(Path(__file__).parent / "src"))

from race_track.cli import main

if __name__ == "__main__":
    sys.exit(main())
