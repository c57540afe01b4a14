"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

This module defines typed event names for structured logging.

Design:
- Enum-based (prevents typos, enables autocomplete)
- Hierarchical naming (namespace.category.action)
- Searchable in log aggregators

Event Naming Convention:
    <component>.<action> or <component>.<category>

    component: layout, rectangle, query, survey, error
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - layout.*: Layout configuration loading
    - rectangle.*: Rectangle construction
    - query.*: Relationship queries
    - survey.*: Whole-layout comparisons
    - error.*: Error conditions
    """

    # ========== Layout Events ==========
    LAYOUT_LOADED = "layout.loaded"
    """Layout configuration parsed from YAML."""

    LAYOUT_EMPTY = "layout.empty"
    """Layout configuration lists no rectangles."""

    # ========== Rectangle Events ==========
    RECTANGLE_CREATED = "rectangle.created"
    """Rectangle built from a validated pair of corners."""

    RECTANGLE_REJECTED = "rectangle.rejected"
    """Pair of corners failed the rectangle invariant."""

    # ========== Query Events ==========
    QUERY_EVALUATED = "query.evaluated"
    """Relationship query evaluated between two rectangles."""

    # ========== Survey Events ==========
    SURVEY_COMPLETED = "survey.completed"
    """Every pair of a layout compared."""

    # ========== Error Events ==========
    CONFIG_ERROR = "error.config"
    """Layout configuration missing or invalid."""

    UNKNOWN_RECTANGLE_ERROR = "error.unknown_rectangle"
    """Query referenced a rectangle id absent from the layout."""
