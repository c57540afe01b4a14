"""
rectilinear CLI - Main entry point.

Provides a command-line interface for running rectangle relationship queries
against a YAML layout file. Results are printed to stdout as JSON; structured
logs go to stderr.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from rectilinear import (
    InvalidRectangleError,
    LayoutConfig,
    Rectangle,
    RelationReport,
    survey_layout,
)
from rectilinear.logging import LogEvent, StructuredLogger, create_logger

PAIR_COMMANDS = ('intersects', 'contains', 'adjacent', 'compare')


class UnknownRectangleError(ValueError):
    """Raised when a query names a rectangle id absent from the layout."""


def build_layout(layout: LayoutConfig, logger: StructuredLogger) -> Dict[str, Rectangle]:
    """
    Build the rectangles of a loaded layout, logging each one.

    Args:
        layout: Validated layout configuration
        logger: Structured logger for build events

    Returns:
        Ordered mapping {rectangle_id: Rectangle}

    Raises:
        InvalidRectangleError: If a rectangle has invalid corners
    """
    rectangles = {}

    if not layout.rectangles:
        logger.warning(
            event=LogEvent.LAYOUT_EMPTY,
            message="Layout defines no rectangles"
        )

    for rectangle_config in layout.rectangles:
        try:
            rectangle = rectangle_config.to_rectangle()
        except InvalidRectangleError as e:
            logger.error(
                event=LogEvent.RECTANGLE_REJECTED,
                message=f"Rejected rectangle '{rectangle_config.rectangle_id}'",
                metadata={'rectangle_id': rectangle_config.rectangle_id},
                exc_info=e
            )
            raise

        logger.debug(
            event=LogEvent.RECTANGLE_CREATED,
            message=f"Built rectangle '{rectangle_config.rectangle_id}'",
            metadata={'rectangle_id': rectangle_config.rectangle_id, **rectangle.to_dict()}
        )
        rectangles[rectangle_config.rectangle_id] = rectangle

    logger.info(
        event=LogEvent.LAYOUT_LOADED,
        message=f"Loaded {len(rectangles)} rectangles",
        metadata={'rectangle_ids': list(rectangles)}
    )
    return rectangles


def lookup(rectangles: Dict[str, Rectangle], rectangle_id: str) -> Rectangle:
    """
    Fetch a rectangle by id.

    Raises:
        UnknownRectangleError: If the layout has no such rectangle
    """
    if rectangle_id not in rectangles:
        raise UnknownRectangleError(
            f"Unknown rectangle id: '{rectangle_id}'. "
            f"Available: {', '.join(rectangles) or 'none'}"
        )
    return rectangles[rectangle_id]


def run_pair_query(
    command: str,
    rectangles: Dict[str, Rectangle],
    first_id: str,
    second_id: str
) -> Dict[str, Any]:
    """
    Run one relationship query between two named rectangles.

    Args:
        command: One of intersects, contains, adjacent, compare
        rectangles: Layout rectangles
        first_id: Rectangle the query is called on
        second_id: Rectangle passed as the query argument

    Returns:
        JSON-compatible result dict
    """
    first = lookup(rectangles, first_id)
    second = lookup(rectangles, second_id)
    result: Dict[str, Any] = {'first_id': first_id, 'second_id': second_id}

    if command == 'intersects':
        result['intersections'] = [point.to_dict() for point in first.intersects(second)]
    elif command == 'contains':
        result['contains'] = first.contains(second)
    elif command == 'adjacent':
        result['adjacency'] = first.adjacent(second).value
    elif command == 'compare':
        result = RelationReport.compare(first_id, first, second_id, second).to_dict()
    else:
        raise ValueError(f"Unknown query command: {command}")

    return result


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="rectilinear-cli",
        description="rectilinear CLI - Query relationships between rectangles of a layout",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Boundary crossings of two rectangles
  rectilinear-cli intersects layout.yaml room hall

  # Strict containment / shared sides
  rectilinear-cli contains layout.yaml room closet
  rectilinear-cli adjacent layout.yaml room hall

  # All relations of one pair
  rectilinear-cli compare layout.yaml room hall

  # Every pair of the layout, with summary statistics
  rectilinear-cli survey layout.yaml
"""
    )

    # Global arguments
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: log_level from the layout file)"
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    pair_help = {
        'intersects': 'Points where the boundaries of FIRST and SECOND cross',
        'contains': 'Whether FIRST strictly contains SECOND',
        'adjacent': 'How FIRST shares a side with SECOND',
        'compare': 'Every relation between FIRST and SECOND',
    }
    for name in PAIR_COMMANDS:
        sub = subparsers.add_parser(name, help=pair_help[name])
        sub.add_argument('layout', help='Path to layout YAML')
        sub.add_argument('first', help='First rectangle id')
        sub.add_argument('second', help='Second rectangle id')

    survey = subparsers.add_parser('survey', help='Compare every pair of a layout')
    survey.add_argument('layout', help='Path to layout YAML')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logger = create_logger("cli", level=getattr(logging, args.log_level or "INFO"))

    try:
        layout = LayoutConfig.from_yaml(Path(args.layout))
        if args.log_level is None:
            logger.set_level(getattr(logging, layout.log_level))

        rectangles = build_layout(layout, logger)

        if args.command == 'survey':
            reports, stats = survey_layout(rectangles, logger=logger)
            output = {
                'reports': [report.to_dict() for report in reports],
                'stats': stats.to_dict(),
            }
        else:
            output = run_pair_query(args.command, rectangles, args.first, args.second)
            logger.debug(
                event=LogEvent.QUERY_EVALUATED,
                message=f"{args.command} {args.first} {args.second}",
                metadata=output
            )

    except UnknownRectangleError as e:
        logger.error(event=LogEvent.UNKNOWN_RECTANGLE_ERROR, message=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except InvalidRectangleError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (FileNotFoundError, ValueError) as e:
        logger.error(event=LogEvent.CONFIG_ERROR, message="Layout not loaded", exc_info=e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(output, indent=2))
    return 0


if __name__ == '__main__':
    sys.exit(main())
