#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
AdjWeaver v0.1.0

Adjacency engine: finds overlaps of exactly k-1 bases between contigs.
- OverlapGraph holds both orientations of every contig as vertices
- OverlapGraphBuilder probes the overlap index for each oriented contig
- build_graph_from_files runs ingest -> lock -> index -> connect

Author: AdjWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Sequence, Union

from .contig_registry import ContigRegistry, GraphStateError
from .data_structures import ContigNode, ContigProperties, OverlapEdge
from .kmer_module import KmerConfig
from .overlap_index_module import OverlapIndex
from ..io.io_core_module import STDIN_PATH

logger = logging.getLogger(__name__)


# ============================================================================
# Graph
# ============================================================================

class OverlapGraph:
    """
    Directed graph over oriented contigs.

    Vertex u+ and u- both exist for every contig and share its properties.
    Every edge carries the distance -(k-1). Each vertex owns its out-edge
    list; edges can only be added until freeze() is called.
    """

    def __init__(self, names: Sequence[str], properties: Sequence[ContigProperties], k: int):
        if len(names) != len(properties):
            raise ValueError(f"{len(names)} names for {len(properties)} contigs")
        self.k = k
        self._kmer_config = KmerConfig.from_k(k)
        self._names = list(names)
        self._properties = list(properties)
        self._out_edges: List[List[OverlapEdge]] = [[] for _ in range(2 * len(self._names))]
        self._num_edges = 0
        self._frozen = False

    @property
    def distance(self) -> int:
        return self._kmer_config.overlap_distance

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self):
        self._frozen = True

    def num_contigs(self) -> int:
        return len(self._names)

    def num_vertices(self) -> int:
        return 2 * len(self._names)

    def num_edges(self) -> int:
        return self._num_edges

    def contigs(self) -> range:
        return range(len(self._names))

    def vertices(self) -> Iterator[ContigNode]:
        """All oriented vertices: 0+, 0-, 1+, 1-, ..."""
        for index in range(self.num_vertices()):
            yield ContigNode.from_index(index)

    def contig_name(self, contig_id: int) -> str:
        return self._names[contig_id]

    def vertex_name(self, u: ContigNode) -> str:
        return f"{self._names[u.id]}{u.strand}"

    def properties(self, u: Union[ContigNode, int]) -> ContigProperties:
        contig_id = u.id if isinstance(u, ContigNode) else u
        return self._properties[contig_id]

    def add_edge(self, u: ContigNode, v: ContigNode) -> OverlapEdge:
        if self._frozen:
            raise GraphStateError("Cannot add an edge after the overlap graph is built")
        edge = OverlapEdge(u, v, self.distance)
        self._out_edges[u.index].append(edge)
        self._num_edges += 1
        return edge

    def out_edges(self, u: ContigNode) -> Sequence[OverlapEdge]:
        return tuple(self._out_edges[u.index])

    def successors(self, u: ContigNode) -> List[ContigNode]:
        return [e.target for e in self._out_edges[u.index]]

    def out_degree(self, u: ContigNode) -> int:
        return len(self._out_edges[u.index])

    def in_degree(self, u: ContigNode) -> int:
        # Overlaps are strand-symmetric: u -> v exists iff ~v -> ~u exists
        return len(self._out_edges[(~u).index])

    def edges(self) -> Iterator[OverlapEdge]:
        for edge_list in self._out_edges:
            yield from edge_list


# ============================================================================
# Builder
# ============================================================================

class OverlapGraphBuilder:
    """Connects contigs whose ends overlap by exactly k-1 bases."""

    def __init__(self, registry: ContigRegistry):
        if not registry.locked:
            raise GraphStateError("Contig ids must be locked before connecting contigs")
        self.registry = registry
        self.index = OverlapIndex.from_registry(registry)

    def build(self) -> OverlapGraph:
        registry = self.registry
        graph = OverlapGraph(registry.names, registry.properties, registry.k)

        for u in graph.vertices():
            for v in self.neighbours(u):
                graph.add_edge(u, v)

        graph.freeze()
        logger.debug(f"Connected {graph.num_edges()} overlaps between "
                     f"{graph.num_vertices()} oriented contigs")
        return graph

    def neighbours(self, u: ContigNode) -> List[ContigNode]:
        """
        Oriented contigs that follow u: those whose left end equals the right
        end of u in its current orientation.
        """
        kmer = self.registry.ends[u.id].facing(u.sense)
        side = OverlapIndex.RIGHT if u.sense else OverlapIndex.LEFT
        # Candidates are oriented relative to u+, so re-orient them for u-
        return [v.relative_to(u.sense) for v in self.index.lookup(side, kmer)]


def build_overlap_graph(registry: ContigRegistry) -> OverlapGraph:
    """Lock the registry if needed, index the contig ends and add the edges."""
    if not registry.locked:
        registry.lock()
    return OverlapGraphBuilder(registry).build()


def build_graph_from_files(paths: Iterable[Union[str, Path]], k: int) -> OverlapGraph:
    """
    Read contigs from every path (standard input if none) and build the
    overlap graph.

    Args:
        paths: FASTA/FASTQ files, optionally gzipped; '-' for standard input
        k: k-mer size; contigs overlap by exactly k-1 bases

    Returns:
        The finished, read-only overlap graph
    """
    registry = ContigRegistry(k)

    paths = list(paths) or [STDIN_PATH]
    for path in paths:
        registry.read_contigs(path)
    registry.lock()

    logger.info(f"Read {len(registry)} contigs")
    return build_overlap_graph(registry)
