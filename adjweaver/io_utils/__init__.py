"""
AdjWeaver v0.1.0

Graph export module for AdjWeaver: adjacency list, DOT, SAM and GFA writers.
"""

from .graph_export import (
    GRAPH_FORMATS,
    export_graph,
    overlap_to_sam,
    write_adj,
    write_dot,
    write_gfa,
    write_graph,
    write_sam,
)

__all__ = [
    'GRAPH_FORMATS',
    'export_graph',
    'overlap_to_sam',
    'write_adj',
    'write_dot',
    'write_gfa',
    'write_graph',
    'write_sam',
]
