#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
AdjWeaver v0.1.0

Overlap graph statistics: vertex and edge counts and the out-degree
distribution, reported after the graph is built.

Author: AdjWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from typing import Any, Dict

import numpy as np

from ..assembly_core.adjacency_engine_module import OverlapGraph


def compute_graph_stats(graph: OverlapGraph) -> Dict[str, Any]:
    """
    Summarise an overlap graph.

    Args:
        graph: OverlapGraph

    Returns:
        Dict with 'vertices', 'edges', 'edges_per_vertex', 'degree_histogram'
        (count of vertices per out-degree), the percentage of vertices with
        out-degree 0, 1, 2-4 and 5+, and 'max_degree'
    """
    degrees = np.fromiter(
        (graph.out_degree(u) for u in graph.vertices()),
        dtype=np.int64,
        count=graph.num_vertices(),
    )
    n_vertices = int(degrees.size)
    n_edges = int(graph.num_edges())

    if n_vertices == 0:
        return {
            'vertices': 0,
            'edges': n_edges,
            'edges_per_vertex': 0.0,
            'degree_histogram': [],
            'degree_percent': {'0': 0.0, '1': 0.0, '2-4': 0.0, '5+': 0.0},
            'max_degree': 0,
        }

    histogram = np.bincount(degrees)

    def percent(count) -> float:
        return round(100.0 * float(count) / n_vertices, 1)

    return {
        'vertices': n_vertices,
        'edges': n_edges,
        'edges_per_vertex': n_edges / n_vertices,
        'degree_histogram': histogram.tolist(),
        'degree_percent': {
            '0': percent(np.sum(degrees == 0)),
            '1': percent(np.sum(degrees == 1)),
            '2-4': percent(np.sum((degrees >= 2) & (degrees <= 4))),
            '5+': percent(np.sum(degrees >= 5)),
        },
        'max_degree': int(degrees.max()),
    }


def format_graph_stats(stats: Dict[str, Any]) -> str:
    """
    Render graph statistics as two lines of text.

    Example:
        V=4 E=2 E/V=0.5
        Degree: 0: 50.0% 1: 50.0% 2-4: 0.0% 5+: 0.0% max: 1
    """
    pct = stats['degree_percent']
    return (
        f"V={stats['vertices']} E={stats['edges']} E/V={stats['edges_per_vertex']:.3g}\n"
        f"Degree: 0: {pct['0']}% 1: {pct['1']}% 2-4: {pct['2-4']}% "
        f"5+: {pct['5+']}% max: {stats['max_degree']}"
    )


__all__ = [
    'compute_graph_stats',
    'format_graph_stats',
]
