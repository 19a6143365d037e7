#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
AdjWeaver v0.1.0

Graph Export: overlap graph serialization as adjacency list, Graphviz DOT,
SAM-style overlap alignments, and GFA 1.0.

Author: AdjWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from __future__ import annotations
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from ..assembly_core.adjacency_engine_module import OverlapGraph
from ..assembly_core.data_structures import ContigNode, OverlapEdge
from ..io.io_core_module import open_file
from ..version import __version__

logger = logging.getLogger(__name__)

GRAPH_FORMATS = ('adj', 'dot', 'sam', 'gfa')


# ============================================================================
#                       ADJACENCY LIST
# ============================================================================

def write_adj(graph: OverlapGraph, out: TextIO) -> None:
    """
    Write one line per contig:

        name length coverage<TAB>; successors of name+<TAB>; predecessors of name+

    Predecessors of name+ are the successors of name- read on the other strand.
    """
    for contig_id in graph.contigs():
        props = graph.properties(contig_id)
        fields = [f"{graph.contig_name(contig_id)} {props.length} {props.coverage}"]
        for sense in (False, True):
            u = ContigNode(contig_id, sense)
            neighbours = ''.join(
                f" {graph.vertex_name(edge.target.relative_to(sense))}"
                for edge in graph.out_edges(u)
            )
            fields.append(f";{neighbours}")
        out.write('\t'.join(fields) + '\n')


# ============================================================================
#                       GRAPHVIZ DOT
# ============================================================================

def write_dot(graph: OverlapGraph, out: TextIO) -> None:
    """Write a digraph with one node per oriented contig."""
    out.write("digraph adj {\n")
    out.write(f"graph [k={graph.k}]\n")
    out.write(f"edge [d={graph.distance}]\n")
    for u in graph.vertices():
        props = graph.properties(u)
        name = graph.vertex_name(u)
        out.write(f'"{name}" [l={props.length} C={props.coverage}]\n')
        for edge in graph.out_edges(u):
            out.write(f'"{name}" -> "{graph.vertex_name(edge.target)}"\n')
    out.write("}\n")


# ============================================================================
#                       SAM
# ============================================================================

@dataclass
class SAMRecord:
    """An overlap written as the alignment of one contig's end to another."""
    qname: str
    flag: int
    rname: str
    pos: int  # 1-based
    cigar: str
    mapq: int = 255

    def to_sam_line(self) -> str:
        return (f"{self.qname}\t{self.flag}\t{self.rname}\t{self.pos}\t{self.mapq}\t"
                f"{self.cigar}\t*\t0\t0\t*\t*")


def overlap_to_sam(graph: OverlapGraph, edge: OverlapEdge) -> SAMRecord:
    """
    Express an overlap as an alignment against a contig as read.

    If the source is as read, its last k-1 bases align to the first k-1 bases
    of the target. Otherwise the mirror edge is used, or when that also starts
    on the reverse strand, the reverse-complemented source aligns to the start
    of the (as read) target.
    """
    overlap = graph.k - 1
    if edge.source.sense and edge.target.sense:
        edge = edge.mirror()
    u, v = edge.source, edge.target

    if not u.sense:
        ref_len = graph.properties(u).length
        query_len = graph.properties(v).length
        return SAMRecord(
            qname=graph.contig_name(v.id),
            flag=16 if v.sense else 0,
            rname=graph.contig_name(u.id),
            pos=ref_len - overlap + 1,
            cigar=f"{overlap}M{query_len - overlap}S",
        )

    query_len = graph.properties(u).length
    return SAMRecord(
        qname=graph.contig_name(u.id),
        flag=16,
        rname=graph.contig_name(v.id),
        pos=1,
        cigar=f"{query_len - overlap}S{overlap}M",
    )


def write_sam(graph: OverlapGraph, out: TextIO, program: str = 'adjweaver',
              command_line: str = '') -> None:
    """Write a SAM header and one record per overlap pair."""
    out.write("@HD\tVN:1.0\tSO:unsorted\n")
    for contig_id in graph.contigs():
        out.write(f"@SQ\tSN:{graph.contig_name(contig_id)}\t"
                  f"LN:{graph.properties(contig_id).length}\n")
    pg = f"@PG\tID:{program}\tPN:{program}\tVN:{__version__}"
    if command_line:
        pg += f"\tCL:{command_line}"
    out.write(pg + "\n")

    for edge in graph.edges():
        if edge.is_canonical():
            out.write(overlap_to_sam(graph, edge).to_sam_line() + "\n")


# ============================================================================
#                       GFA
# ============================================================================

@dataclass
class GFASegment:
    """Represents a GFA S-line (segment). Sequences are not retained, so '*'."""
    name: str
    length: int
    coverage: int

    def to_gfa_line(self) -> str:
        return f"S\t{self.name}\t*\tLN:i:{self.length}\tKC:i:{self.coverage}"


@dataclass
class GFALink:
    """Represents a GFA L-line (link/edge)."""
    from_name: str
    from_orient: str
    to_name: str
    to_orient: str
    overlap: str

    def to_gfa_line(self) -> str:
        return f"L\t{self.from_name}\t{self.from_orient}\t{self.to_name}\t{self.to_orient}\t{self.overlap}"


def write_gfa(graph: OverlapGraph, out: TextIO) -> None:
    """Write GFA 1.0 with one link per overlap pair."""
    out.write(f"H\tVN:Z:1.0\tKM:i:{graph.k}\n")
    for contig_id in graph.contigs():
        props = graph.properties(contig_id)
        segment = GFASegment(graph.contig_name(contig_id), props.length, props.coverage)
        out.write(segment.to_gfa_line() + "\n")

    overlap = f"{graph.k - 1}M"
    for edge in graph.edges():
        if not edge.is_canonical():
            continue
        link = GFALink(
            from_name=graph.contig_name(edge.source.id),
            from_orient=edge.source.strand,
            to_name=graph.contig_name(edge.target.id),
            to_orient=edge.target.strand,
            overlap=overlap,
        )
        out.write(link.to_gfa_line() + "\n")


# ============================================================================
#                       DISPATCH
# ============================================================================

def write_graph(graph: OverlapGraph, out: TextIO, fmt: str = 'adj',
                program: str = 'adjweaver', command_line: str = '') -> None:
    """
    Serialize the overlap graph in the requested format.

    Args:
        graph: Finished overlap graph
        out: Text handle to write to
        fmt: One of 'adj', 'dot', 'sam', 'gfa'
        program: Program name recorded in SAM headers
        command_line: Command line recorded in SAM headers
    """
    if fmt == 'adj':
        write_adj(graph, out)
    elif fmt == 'dot':
        write_dot(graph, out)
    elif fmt == 'sam':
        write_sam(graph, out, program, command_line)
    elif fmt == 'gfa':
        write_gfa(graph, out)
    else:
        raise ValueError(f"Unknown graph format: {fmt} (choose from {', '.join(GRAPH_FORMATS)})")


def export_graph(graph: OverlapGraph, output_path: str | Path | None, fmt: str = 'adj',
                 program: str = 'adjweaver', command_line: str = '') -> None:
    """
    Write the overlap graph to a file (gzipped if the name ends in .gz), or to
    standard output when output_path is None or '-'.
    """
    if output_path is None or str(output_path) == '-':
        write_graph(graph, sys.stdout, fmt, program, command_line)
        sys.stdout.flush()
        return

    output_path = Path(output_path)
    logger.info(f"Writing {fmt} graph to {output_path}")
    with open_file(output_path, 'w') as f:
        write_graph(graph, f, fmt, program, command_line)
