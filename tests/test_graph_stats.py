#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
AdjWeaver v0.1.0

Tests for overlap graph statistics.

Author: AdjWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from adjweaver.assembly_core.contig_registry import ContigRegistry
from adjweaver.assembly_core.adjacency_engine_module import build_overlap_graph
from adjweaver.utils.graph_stats import compute_graph_stats, format_graph_stats


class TestGraphStats:
    """Test graph summary statistics."""

    def test_counts(self, build_graph, scenario_contigs):
        stats = compute_graph_stats(build_graph(scenario_contigs, 4))
        assert stats['vertices'] == 4
        assert stats['edges'] == 2
        assert stats['edges_per_vertex'] == 0.5
        assert stats['degree_histogram'] == [2, 2]
        assert stats['degree_percent'] == {'0': 50.0, '1': 50.0, '2-4': 0.0, '5+': 0.0}
        assert stats['max_degree'] == 1

    def test_fan_out(self, build_graph):
        # Six contigs ending in ACT, all followed by six contigs starting with it
        seqs = [f"{p}ACT" for p in ("AAA", "CCA", "GGA", "TTA", "CAA", "GAA")]
        seqs += [f"ACT{s}" for s in ("GGG", "TTT", "CCC", "GTG", "TGT", "CGC")]
        stats = compute_graph_stats(build_graph(seqs, 4))
        assert stats['max_degree'] >= 6
        assert stats['degree_percent']['5+'] > 0

    def test_empty_graph(self):
        graph = build_overlap_graph(ContigRegistry(4))
        stats = compute_graph_stats(graph)
        assert stats['vertices'] == 0
        assert stats['edges_per_vertex'] == 0.0

    def test_format(self, build_graph, scenario_contigs):
        text = format_graph_stats(compute_graph_stats(build_graph(scenario_contigs, 4)))
        assert text.splitlines() == [
            "V=4 E=2 E/V=0.5",
            "Degree: 0: 50.0% 1: 50.0% 2-4: 0.0% 5+: 0.0% max: 1",
        ]
