#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
AdjWeaver v0.1.0

Core data structures shared by the overlap index and the overlap graph:
oriented contig nodes, contig properties, terminal k-mers and edges.

Author: AdjWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from dataclasses import dataclass

from .kmer_module import Kmer


@dataclass(frozen=True, order=True)
class ContigNode:
    """
    A contig paired with an orientation.

    sense=False is the contig as read, sense=True its reverse complement.
    u+ and u- are distinct vertices of the overlap graph.
    """
    id: int
    sense: bool = False

    def flip(self) -> 'ContigNode':
        return ContigNode(self.id, not self.sense)

    def __invert__(self) -> 'ContigNode':
        return self.flip()

    def relative_to(self, sense: bool) -> 'ContigNode':
        """
        Re-orient this node relative to a traversal direction: flipped when
        sense is True, unchanged otherwise.
        """
        return self.flip() if sense else self

    @property
    def index(self) -> int:
        """Dense vertex index: 2*id for u+, 2*id+1 for u-."""
        return 2 * self.id + int(self.sense)

    @classmethod
    def from_index(cls, index: int) -> 'ContigNode':
        return cls(index // 2, bool(index % 2))

    @property
    def strand(self) -> str:
        return '-' if self.sense else '+'

    def __str__(self) -> str:
        return f"{self.id}{self.strand}"


@dataclass(frozen=True)
class ContigProperties:
    """Vertex properties of a contig."""
    length: int
    coverage: int = 0


@dataclass(frozen=True)
class ContigEnds:
    """The two terminal k-mers of a contig: first k-1 and last k-1 bases."""
    l: Kmer
    r: Kmer

    def facing(self, sense: bool) -> Kmer:
        """
        The stored k-mer on the downstream side of the contig in the given
        orientation: r as read, l when reverse-complemented.
        """
        return self.l if sense else self.r


@dataclass(frozen=True)
class OverlapEdge:
    """A directed overlap between two oriented contigs."""
    source: ContigNode
    target: ContigNode
    distance: int

    def mirror(self) -> 'OverlapEdge':
        """
        The same overlap read on the opposite strand: u -> v implies ~v -> ~u.
        """
        return OverlapEdge(~self.target, ~self.source, self.distance)

    def is_canonical(self) -> bool:
        """
        True for the representative of an edge and its mirror, used by
        formats that write each overlap pair once.
        """
        return (self.source, self.target) <= (~self.target, ~self.source)
