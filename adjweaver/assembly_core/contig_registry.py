#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
AdjWeaver v0.1.0

Contig ingestion.
- Detects the run's alphabet from the first contig
- Allocates dense contig ids across every input source of a run
- Records contig length/coverage and the two terminal k-mers of each contig
- Locks the id space before the overlap index is built

Author: AdjWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from .data_structures import ContigEnds, ContigProperties
from .kmer_module import (
    Alphabet,
    KmerAlphabetError,
    KmerConfig,
    find_invalid_symbols,
)
from ..io.io_core_module import SequenceRecord, read_sequences

logger = logging.getLogger(__name__)

# "length coverage" at the start of a contig comment
_COVERAGE_PATTERN = re.compile(r'\s*\d+\s+(\d+)')


class SequenceTooShortError(ValueError):
    """Raised when a contig is not longer than the k-mer length (k-1)."""
    pass


class DuplicateContigError(ValueError):
    """Raised when two contigs share an identifier."""
    pass


class GraphStateError(RuntimeError):
    """Raised when a build phase is entered out of order."""
    pass


def parse_coverage(comment: str) -> int:
    """
    Parse the coverage from a contig comment of the form "length coverage".

    Coverage is an annotation only, so anything unparsable yields 0.

    Example:
        >>> parse_coverage("120 35")
        35
        >>> parse_coverage("120")
        0
    """
    match = _COVERAGE_PATTERN.match(comment or '')
    if match is None:
        return 0
    return int(match.group(1))


class ContigRegistry:
    """
    Accumulates contigs from one or more input sources into a single id space.

    Ids are allocated in first-seen order. Once lock() is called no further
    contigs may be added and the terminal k-mer table is read-only.
    """

    def __init__(self, k: int):
        # Fail on a bad k before any input is read
        KmerConfig.from_k(k)
        self.k = k
        self.kmer_config: Optional[KmerConfig] = None

        self.names: List[str] = []
        self.properties: List[ContigProperties] = []
        self.ends: List[ContigEnds] = []
        self._name_to_id: Dict[str, int] = {}
        self._next_id = 0
        self._locked = False

    def __len__(self) -> int:
        return len(self.names)

    @property
    def overlap(self) -> int:
        """Number of bases two adjacent contigs share (k-1)."""
        return self.k - 1

    @property
    def locked(self) -> bool:
        return self._locked

    @property
    def alphabet(self) -> Optional[Alphabet]:
        return self.kmer_config.alphabet if self.kmer_config else None

    def lock(self):
        """Freeze the id space. Required before indexing."""
        self._locked = True

    def allocate_id(self, name: str) -> int:
        """Assign the next contig id to a name."""
        if self._locked:
            raise GraphStateError(f"Cannot add contig {name!r}: contig ids are locked")
        if name in self._name_to_id:
            raise DuplicateContigError(f"Duplicate contig identifier: {name}")

        contig_id = self._next_id
        self._next_id += 1
        self._name_to_id[name] = contig_id
        self.names.append(name)
        return contig_id

    def get_id(self, name: str) -> int:
        return self._name_to_id[name]

    def get_name(self, contig_id: int) -> str:
        return self.names[contig_id]

    def _check_alphabet(self, record: SequenceRecord, source: str):
        seq = record.sequence
        detected = Alphabet.detect(seq[0])

        if self.kmer_config is None:
            if detected is None:
                raise KmerAlphabetError(
                    f"{source}: contig {record.identifier} starts with "
                    f"unrecognised symbol {seq[0]!r}"
                )
            self.kmer_config = KmerConfig.from_k(self.k, detected)
            logger.debug(f"Detected {detected.value} alphabet from contig {record.identifier}")
        elif detected is not self.kmer_config.alphabet:
            raise KmerAlphabetError(
                f"{source}: contig {record.identifier} does not match the "
                f"{self.kmer_config.alphabet.value} alphabet of the first contig; "
                f"mixed-alphabet input is not supported"
            )

        invalid = find_invalid_symbols(seq, self.kmer_config.alphabet)
        if invalid:
            raise KmerAlphabetError(
                f"{source}: contig {record.identifier} contains symbols outside the "
                f"{self.kmer_config.alphabet.value} alphabet: {''.join(sorted(invalid))}"
            )

    def add_record(self, record: SequenceRecord, source: str = '<input>') -> int:
        """
        Add one contig.

        Args:
            record: The input sequence record
            source: Name of the input source, used in error messages

        Returns:
            The contig id

        Raises:
            GraphStateError: If the registry is locked
            SequenceTooShortError: If the contig is not longer than k-1
            KmerAlphabetError: If the contig's symbols are inconsistent with the run's alphabet
            DuplicateContigError: If the identifier has been seen before
        """
        if self._locked:
            raise GraphStateError(
                f"Cannot add contig {record.identifier!r}: contig ids are locked"
            )

        seq = record.sequence
        overlap = self.overlap
        if len(seq) <= overlap:
            raise SequenceTooShortError(
                f"{source}: contig {record.identifier} is {len(seq)} bp, "
                f"must be longer than k-1 = {overlap} bp"
            )

        self._check_alphabet(record, source)

        contig_id = self.allocate_id(record.identifier)
        self.properties.append(ContigProperties(len(seq), parse_coverage(record.comment)))
        self.ends.append(ContigEnds(
            l=self.kmer_config.make_kmer(seq[:overlap]),
            r=self.kmer_config.make_kmer(seq[len(seq) - overlap:]),
        ))
        return contig_id

    def add_records(self, records: Iterable[SequenceRecord], source: str = '<input>') -> int:
        """Add every record of one input source. Returns the number added."""
        count = 0
        for record in records:
            self.add_record(record, source)
            count += 1
        return count

    def read_contigs(self, path: Union[str, Path]) -> int:
        """Read and add every contig of a FASTA/FASTQ file ('-' for stdin)."""
        logger.info(f"Reading `{path}'...")
        count = self.add_records(read_sequences(path), str(path))
        logger.debug(f"Read {count} contigs from {path}")
        return count
