#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Core I/O module for AdjWeaver.

Contains:
- SequenceRecord, the {identifier, sequence, comment} record consumed by
  contig ingestion
- File opening with automatic gzip detection and standard input support
- FASTA/FASTQ record streaming via Biopython
"""

# =============================================================================
# SECTION 1: IMPORTS AND DEPENDENCIES
# =============================================================================

import gzip
import io
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, TextIO, Union

from Bio import SeqIO

logger = logging.getLogger(__name__)

STDIN_PATH = '-'


class InputStreamError(ValueError):
    """Raised when an input file is malformed or ends partway through a record."""
    pass


# =============================================================================
# SECTION 2: SEQUENCE RECORDS
# =============================================================================

@dataclass(frozen=True)
class SequenceRecord:
    """
    One input sequence.

    Attributes:
        identifier: First word of the header line
        sequence: Sequence, folded to upper case
        comment: Remainder of the header line after the identifier
    """
    identifier: str
    sequence: str
    comment: str = ''

    def __len__(self) -> int:
        return len(self.sequence)


# =============================================================================
# SECTION 3: FILE HANDLING
# =============================================================================

GZIP_SUFFIXES = ('.gz', '.gzip')


def is_gzipped(filepath: Union[str, Path]) -> bool:
    """True if the file name carries a gzip suffix."""
    return Path(filepath).suffix in GZIP_SUFFIXES


def open_file(filepath: Union[str, Path], mode: str = 'r') -> TextIO:
    """
    Open a sequence or graph file in text mode, through gzip when the name
    ends in .gz.

    Args:
        filepath: Path to file
        mode: 'r' to read, 'w' to write
    """
    text_mode = 'rt' if 'r' in mode else 'wt'
    if is_gzipped(filepath):
        return gzip.open(filepath, text_mode)
    return open(filepath, text_mode)


def sniff_format(handle: TextIO) -> Optional[str]:
    """
    Guess the sequence format from the first non-blank character and rewind.

    Returns:
        'fasta', 'fastq', or None for an empty input

    Raises:
        InputStreamError: If the content is neither FASTA nor FASTQ
    """
    first = ''
    for line in handle:
        stripped = line.strip()
        if stripped:
            first = stripped[0]
            break
    handle.seek(0)

    if not first:
        return None
    if first == '>':
        return 'fasta'
    if first == '@':
        return 'fastq'
    raise InputStreamError(
        f"Expected a FASTA ('>') or FASTQ ('@') record, found {first!r}"
    )


# =============================================================================
# SECTION 4: SEQUENCE FILE I/O
# =============================================================================

def _parse_records(handle: TextIO, name: str) -> Iterator[SequenceRecord]:
    fmt = None
    try:
        fmt = sniff_format(handle)
        if fmt is None:
            logger.warning(f"{name}: no sequences found")
            return

        for record in SeqIO.parse(handle, fmt):
            parts = record.description.split(None, 1)
            comment = parts[1] if len(parts) > 1 and parts[0] == record.id else ''
            yield SequenceRecord(
                identifier=record.id,
                sequence=str(record.seq).upper(),
                comment=comment,
            )
    except InputStreamError as e:
        raise InputStreamError(f"{name}: {e}") from e
    except (ValueError, OSError, EOFError) as e:
        # Decoding errors, bad or truncated gzip streams, and Biopython parse errors
        what = f"malformed or truncated {fmt} record" if fmt else "not a readable sequence file"
        raise InputStreamError(f"{name}: {what}: {e}") from e


def read_sequences(filepath: Union[str, Path]) -> Iterator[SequenceRecord]:
    """
    Read a FASTA or FASTQ file and yield SequenceRecord objects.

    Args:
        filepath: Path to the file (can be gzipped), or '-' for standard input

    Yields:
        SequenceRecord objects in file order

    Raises:
        FileNotFoundError: If the file does not exist
        InputStreamError: If the file is malformed or truncated

    Examples:
        >>> for record in read_sequences("contigs.fa"):
        ...     print(record.identifier, len(record))
    """
    if str(filepath) == STDIN_PATH:
        # Standard input cannot be rewound after sniffing
        try:
            text = sys.stdin.read()
        except UnicodeDecodeError as e:
            raise InputStreamError(f"<stdin>: not a readable sequence file: {e}") from e
        yield from _parse_records(io.StringIO(text), '<stdin>')
        return

    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"Sequence file not found: {filepath}")

    with open_file(filepath, 'r') as handle:
        yield from _parse_records(handle, str(filepath))
