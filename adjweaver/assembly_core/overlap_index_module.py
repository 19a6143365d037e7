#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
AdjWeaver v0.1.0

Overlap index: hash tables from terminal k-mers to the oriented contigs that
carry them, built once from every contig in both orientations.

Author: AdjWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
from collections import defaultdict
from typing import Dict, List, Sequence, Tuple

from .contig_registry import ContigRegistry, GraphStateError
from .data_structures import ContigEnds, ContigNode
from .kmer_module import Kmer, KmerConfig, KmerLengthError

logger = logging.getLogger(__name__)


class OverlapIndex:
    """
    Two multi-maps keyed by k-mer:

    - RIGHT (index 0): the right-end k-mer of each oriented contig
    - LEFT (index 1): the left-end k-mer of each oriented contig

    A contig read backward presents rc(l) as its right end and rc(r) as its
    left end, so both orientations are inserted up front and lookups never
    need to complement anything.
    """
    RIGHT = 0
    LEFT = 1

    def __init__(self, kmer_config: KmerConfig):
        self.kmer_config = kmer_config
        self._ends: Tuple[Dict[Kmer, List[ContigNode]], Dict[Kmer, List[ContigNode]]] = (
            defaultdict(list), defaultdict(list)
        )
        self._built = False

    @classmethod
    def from_registry(cls, registry: ContigRegistry) -> 'OverlapIndex':
        """Build the index from a locked contig registry."""
        if not registry.locked:
            raise GraphStateError("Contig ids must be locked before building the overlap index")
        if registry.kmer_config is None:
            # No contigs were read; nothing will ever be probed
            index = cls(KmerConfig.from_k(registry.k))
            index.build([])
            return index

        index = cls(registry.kmer_config)
        index.build(registry.ends)
        return index

    @property
    def built(self) -> bool:
        return self._built

    def build(self, contigs: Sequence[ContigEnds]):
        """
        Index the end sequences of every contig. Position in the sequence is
        the contig id.
        """
        if self._built:
            raise GraphStateError("Overlap index has already been built")

        right, left = self._ends
        for contig_id, ends in enumerate(contigs):
            u = ContigNode(contig_id, False)
            right[ends.r].append(u)
            left[ends.l].append(u)
            right[ends.l.reverse_complement()].append(~u)
            left[ends.r.reverse_complement()].append(~u)

        self._built = True
        logger.debug(f"Indexed {len(right)} right-end and {len(left)} left-end k-mers "
                     f"from {len(contigs)} contigs")

    def lookup(self, side: int, kmer: Kmer) -> Sequence[ContigNode]:
        """
        All oriented contigs whose end on the given side equals kmer.

        Returns an empty sequence when nothing matches; the index itself is
        never modified by a lookup.
        """
        if not self._built:
            raise GraphStateError("Overlap index queried before it was built")
        if len(kmer) != self.kmer_config.length:
            raise KmerLengthError(
                f"Probe k-mer length {len(kmer)} doesn't match indexed length "
                f"{self.kmer_config.length}"
            )
        return self._ends[side].get(kmer, ())

    def num_keys(self, side: int) -> int:
        return len(self._ends[side])

    def __len__(self) -> int:
        return sum(len(nodes) for nodes in self._ends[self.RIGHT].values())
