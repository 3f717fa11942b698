"""Aggregation engine and display helpers."""
from .aggregate import aggregate, build_dashboard, DIMENSIONS
from .common import merge_long_tail, with_shares
