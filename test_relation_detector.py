"""
Test RelationDetector and Analytics
===================================

Batch masks over candidate rectangles, pair reports and layout statistics.

Usage:
    pytest test_relation_detector.py
"""

import logging

import numpy as np

from rectilinear import (
    AdjacencyType,
    Coordinate,
    Rectangle,
    RelationCounter,
    RelationDetector,
    RelationReport,
    survey_layout,
)
from rectilinear.logging import StructuredLogger

ROOM = Rectangle.from_points((0, 0), (10, 10))

CANDIDATES = [
    Rectangle.from_points((1, 1), (5, 5)),        # inside
    Rectangle.from_points((5, 5), (15, 15)),      # crossing
    Rectangle.from_points((0, 10), (10, 12)),     # proper
    Rectangle.from_points((5, 10), (8, 12)),      # sub line
    Rectangle.from_points((5, 10), (11, 13)),     # partial
    Rectangle.from_points((20, 20), (30, 30)),    # far away
    Rectangle.from_points((-5, -5), (20, 20)),    # encloses room
]


# ========== RelationDetector ==========

def test_detect_contained():
    mask = RelationDetector.detect_contained(ROOM, CANDIDATES)
    assert mask.dtype == bool
    assert mask.tolist() == [True, False, False, False, False, False, False]


def test_detect_containing():
    mask = RelationDetector.detect_containing(ROOM, CANDIDATES)
    assert mask.tolist() == [False, False, False, False, False, False, True]


def test_detect_intersecting():
    mask = RelationDetector.detect_intersecting(ROOM, CANDIDATES)
    assert mask.tolist() == [False, True, False, False, False, False, False]


def test_classify_adjacency():
    assert RelationDetector.classify_adjacency(ROOM, CANDIDATES) == [
        AdjacencyType.NON_ADJACENT,
        AdjacencyType.NON_ADJACENT,
        AdjacencyType.PROPER,
        AdjacencyType.SUB_LINE,
        AdjacencyType.PARTIAL,
        AdjacencyType.NON_ADJACENT,
        AdjacencyType.NON_ADJACENT,
    ]


def test_detect_adjacent_default_kinds():
    mask = RelationDetector.detect_adjacent(ROOM, CANDIDATES)
    assert mask.tolist() == [False, False, True, True, True, False, False]


def test_detect_adjacent_selected_kinds():
    mask = RelationDetector.detect_adjacent(ROOM, CANDIDATES, kinds=[AdjacencyType.PROPER])
    assert np.flatnonzero(mask).tolist() == [2]


def test_empty_candidates():
    for detect in (
        RelationDetector.detect_contained,
        RelationDetector.detect_containing,
        RelationDetector.detect_intersecting,
        RelationDetector.detect_adjacent,
    ):
        mask = detect(ROOM, [])
        assert mask.shape == (0,)
        assert mask.dtype == bool


# ========== RelationReport ==========

def test_report_compare_crossing():
    report = RelationReport.compare("room", ROOM, "annex", CANDIDATES[1])
    assert report.intersections == (Coordinate(5, 10), Coordinate(10, 5))
    assert report.intersecting
    assert not report.nested
    assert report.adjacency is AdjacencyType.NON_ADJACENT
    assert report.is_related


def test_report_compare_nested_both_directions():
    inner = RelationReport.compare("room", ROOM, "closet", CANDIDATES[0])
    outer = RelationReport.compare("closet", CANDIDATES[0], "room", ROOM)
    assert inner.first_contains_second and not inner.second_contains_first
    assert outer.second_contains_first and not outer.first_contains_second


def test_report_unrelated():
    report = RelationReport.compare("room", ROOM, "far", CANDIDATES[5])
    assert not report.is_related
    assert str(report) == "room -> far: unrelated"


def test_report_to_dict():
    report = RelationReport.compare("room", ROOM, "hall", CANDIDATES[2])
    assert report.to_dict() == {
        "first_id": "room",
        "second_id": "hall",
        "intersections": [],
        "first_contains_second": False,
        "second_contains_first": False,
        "adjacency": "Proper",
    }
    assert str(report) == "room -> hall: adjacent (Proper)"


# ========== RelationCounter / survey ==========

def test_counter_accumulates_and_resets():
    counter = RelationCounter()
    for rectangle_id, candidate in zip("abcdefg", CANDIDATES):
        counter.update(RelationReport.compare("room", ROOM, rectangle_id, candidate))

    stats = counter.get_stats()
    assert stats.pairs_compared == 7
    assert stats.intersecting_pairs == 1
    assert stats.nested_pairs == 2
    assert stats.adjacent_pairs == 3
    assert stats.adjacency_counts == {
        "NonAdjacent": 4,
        "Proper": 1,
        "SubLine": 1,
        "Partial": 1,
    }

    counter.reset()
    assert counter.get_stats().pairs_compared == 0
    assert counter.get_stats().adjacency_counts == {}


def test_stats_snapshot_is_independent_of_counter():
    counter = RelationCounter()
    counter.update(RelationReport.compare("room", ROOM, "hall", CANDIDATES[2]))
    stats = counter.get_stats()
    counter.update(RelationReport.compare("room", ROOM, "porch", CANDIDATES[4]))
    assert stats.pairs_compared == 1
    assert stats.adjacency_counts == {"Proper": 1}


def test_survey_layout_pairs_in_order():
    rectangles = {
        "room": ROOM,
        "hall": CANDIDATES[2],
        "closet": CANDIDATES[0],
    }
    reports, stats = survey_layout(rectangles)

    assert [(r.first_id, r.second_id) for r in reports] == [
        ("room", "hall"),
        ("room", "closet"),
        ("hall", "closet"),
    ]
    assert stats.pairs_compared == 3
    assert stats.nested_pairs == 1
    assert stats.adjacent_pairs == 1


def test_survey_layout_logs_summary(caplog):
    logger = StructuredLogger(component="survey_test", level=logging.DEBUG)
    with caplog.at_level(logging.DEBUG, logger="rectilinear.survey_test"):
        survey_layout({"room": ROOM, "hall": CANDIDATES[2]}, logger=logger)

    messages = [record.getMessage() for record in caplog.records]
    assert any('"event": "query.evaluated"' in message for message in messages)
    assert any('"event": "survey.completed"' in message for message in messages)
