"""
Utilities module for AdjWeaver.

- Overlap graph statistics (vertex/edge counts, out-degree distribution)
"""

from .graph_stats import compute_graph_stats, format_graph_stats

__all__ = [
    'compute_graph_stats',
    'format_graph_stats',
]
