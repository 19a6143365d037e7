#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
AdjWeaver v0.1.0

Pytest configuration and shared fixtures.

Author: AdjWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import pytest

from adjweaver.assembly_core.adjacency_engine_module import build_overlap_graph
from adjweaver.assembly_core.contig_registry import ContigRegistry
from adjweaver.io.io_core_module import SequenceRecord


@pytest.fixture
def write_fasta(tmp_path):
    """Factory writing (name, sequence[, comment]) tuples to a FASTA file."""
    def _write(filename, contigs):
        path = tmp_path / filename
        lines = []
        for contig in contigs:
            name, seq = contig[0], contig[1]
            comment = contig[2] if len(contig) > 2 else ''
            header = f">{name} {comment}" if comment else f">{name}"
            lines.append(header)
            lines.append(seq)
        path.write_text('\n'.join(lines) + '\n')
        return path
    return _write


@pytest.fixture
def make_registry():
    """Factory building a ContigRegistry from a list of sequences named c1, c2, ..."""
    def _make(seqs, k, lock=True):
        registry = ContigRegistry(k)
        for i, seq in enumerate(seqs, start=1):
            registry.add_record(SequenceRecord(f"c{i}", seq))
        if lock:
            registry.lock()
        return registry
    return _make


@pytest.fixture
def build_graph(make_registry):
    """Factory building an OverlapGraph from a list of sequences named c1, c2, ..."""
    def _build(seqs, k):
        return build_overlap_graph(make_registry(seqs, k))
    return _build


@pytest.fixture
def scenario_contigs():
    """k=4: the suffix TAC of c1 equals the prefix of c2."""
    return ["ACGTAC", "TACGGG"]
