"""
rectilinear CLI - Command-line interface for rectangle relationship queries.

This package wraps the rectilinear library so layouts written in YAML can be
queried without writing Python.

Usage:
    rectilinear-cli intersects layout.yaml room hall
    rectilinear-cli contains layout.yaml room closet
    rectilinear-cli adjacent layout.yaml room hall
    rectilinear-cli compare layout.yaml room hall
    rectilinear-cli survey layout.yaml
"""

__version__ = "1.0.0"
