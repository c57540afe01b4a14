"""
Relation Detector Module
========================

Stateless batch queries - applies rectangle relations to many candidates.

Design:
- Pure functions (no state)
- Returns numpy boolean masks aligned with the candidate sequence
- Thread-safe (no mutations)
"""

from typing import Iterable, List, Optional, Sequence

import numpy as np

from rectilinear.geometry.shapes import AdjacencyType, Rectangle

_SHARED_SIDE_KINDS = frozenset({
    AdjacencyType.PROPER,
    AdjacencyType.SUB_LINE,
    AdjacencyType.PARTIAL,
})


class RelationDetector:
    """
    Stateless detector for applying rectangle relations to a set of candidates.

    Design Philosophy:
    - All methods are static (no instance state)
    - Results are masks: mask[i] answers the query for candidates[i]
    """

    @staticmethod
    def detect_contained(
        container: Rectangle,
        candidates: Sequence[Rectangle]
    ) -> np.ndarray:
        """
        Detect which candidates lie strictly inside the container.

        Args:
            container: Enclosing rectangle
            candidates: Rectangles to test

        Returns:
            Boolean mask of shape (N,) where True = contained
        """
        if len(candidates) == 0:
            return np.array([], dtype=bool)

        return np.array([
            container.contains(candidate)
            for candidate in candidates
        ], dtype=bool)

    @staticmethod
    def detect_containing(
        rectangle: Rectangle,
        candidates: Sequence[Rectangle]
    ) -> np.ndarray:
        """Boolean mask where True = candidate strictly contains rectangle."""
        if len(candidates) == 0:
            return np.array([], dtype=bool)

        return np.array([
            candidate.contains(rectangle)
            for candidate in candidates
        ], dtype=bool)

    @staticmethod
    def detect_intersecting(
        rectangle: Rectangle,
        candidates: Sequence[Rectangle]
    ) -> np.ndarray:
        """Boolean mask where True = boundaries cross at least once."""
        if len(candidates) == 0:
            return np.array([], dtype=bool)

        return np.array([
            len(rectangle.intersects(candidate)) > 0
            for candidate in candidates
        ], dtype=bool)

    @staticmethod
    def classify_adjacency(
        rectangle: Rectangle,
        candidates: Sequence[Rectangle]
    ) -> List[AdjacencyType]:
        """Adjacency of rectangle against each candidate, in order."""
        return [rectangle.adjacent(candidate) for candidate in candidates]

    @staticmethod
    def detect_adjacent(
        rectangle: Rectangle,
        candidates: Sequence[Rectangle],
        kinds: Optional[Iterable[AdjacencyType]] = None
    ) -> np.ndarray:
        """
        Detect which candidates share a side with rectangle.

        Args:
            rectangle: Reference rectangle
            candidates: Rectangles to test
            kinds: Adjacency kinds that count as a match
                   (default: PROPER, SUB_LINE and PARTIAL)

        Returns:
            Boolean mask of shape (N,) where True = adjacency is one of kinds
        """
        if len(candidates) == 0:
            return np.array([], dtype=bool)

        accepted = _SHARED_SIDE_KINDS if kinds is None else frozenset(kinds)
        adjacency = RelationDetector.classify_adjacency(rectangle, candidates)

        return np.array([kind in accepted for kind in adjacency], dtype=bool)
