"""
Race track model: grid nodes, obstacle tracks and problem cases.
"""

from .board import Node, Track
from .case import Case

__all__ = ["Node", "Track", "Case"]
