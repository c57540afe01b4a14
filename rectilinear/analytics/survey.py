"""
Layout Survey Module
====================

Compares every unordered pair of a named rectangle layout.

Design:
- Pair order follows layout insertion order (i < j)
- Geometry stays pure; logging happens here, at the orchestration edge
"""

from itertools import combinations
from typing import Dict, List, Optional, Tuple

from rectilinear.analytics.counter import LayoutStats, RelationCounter
from rectilinear.analytics.report import RelationReport
from rectilinear.geometry import Rectangle
from rectilinear.logging import LogEvent, StructuredLogger


def survey_layout(
    rectangles: Dict[str, Rectangle],
    logger: Optional[StructuredLogger] = None
) -> Tuple[List[RelationReport], LayoutStats]:
    """
    Compare all pairs of a layout.

    Args:
        rectangles: Ordered mapping {rectangle_id: Rectangle}
        logger: Optional structured logger for per-pair events

    Returns:
        Tuple of:
        - reports: One RelationReport per unordered pair
        - stats: Aggregated LayoutStats snapshot
    """
    counter = RelationCounter()
    reports = []

    for (first_id, first), (second_id, second) in combinations(rectangles.items(), 2):
        report = RelationReport.compare(first_id, first, second_id, second)
        counter.update(report)
        reports.append(report)

        if logger is not None:
            logger.debug(
                event=LogEvent.QUERY_EVALUATED,
                message=str(report),
                metadata={'first_id': first_id, 'second_id': second_id}
            )

    stats = counter.get_stats()

    if logger is not None:
        logger.info(
            event=LogEvent.SURVEY_COMPLETED,
            message=f"Surveyed {len(rectangles)} rectangles",
            metadata=stats.to_dict()
        )

    return reports, stats
