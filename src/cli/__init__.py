"""CLI module - command-line entry points.

TIER 2: Entry points, may import from all layers.
"""
