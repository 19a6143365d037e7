"""
Assembly Core module for AdjWeaver.

This module provides overlap detection between contigs:
- Fixed-length k-mers with reverse complement over nucleotide or colour-space alphabets
- Contig ingestion with dense id allocation and terminal k-mer extraction
- Overlap index over both orientations of every contig
- Overlap graph construction with a fixed -(k-1) distance per edge
"""

from .kmer_module import (
    Alphabet,
    AlphabetError,
    Kmer,
    KmerAlphabetError,
    KmerConfig,
    KmerError,
    KmerLengthError,
    reverse_complement,
)

from .data_structures import (
    ContigEnds,
    ContigNode,
    ContigProperties,
    OverlapEdge,
)

from .contig_registry import (
    ContigRegistry,
    DuplicateContigError,
    GraphStateError,
    SequenceTooShortError,
    parse_coverage,
)

from .overlap_index_module import OverlapIndex

from .adjacency_engine_module import (
    OverlapGraph,
    OverlapGraphBuilder,
    build_graph_from_files,
    build_overlap_graph,
)

__all__ = [
    'Alphabet',
    'AlphabetError',
    'Kmer',
    'KmerAlphabetError',
    'KmerConfig',
    'KmerError',
    'KmerLengthError',
    'reverse_complement',
    'ContigEnds',
    'ContigNode',
    'ContigProperties',
    'OverlapEdge',
    'ContigRegistry',
    'DuplicateContigError',
    'GraphStateError',
    'SequenceTooShortError',
    'parse_coverage',
    'OverlapIndex',
    'OverlapGraph',
    'OverlapGraphBuilder',
    'build_graph_from_files',
    'build_overlap_graph',
]
