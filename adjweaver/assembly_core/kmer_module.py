#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
AdjWeaver v0.1.0

Fixed-length k-mers for overlap detection.
- KmerConfig fixes the k-mer length (k-1) and alphabet once per run
- Kmer is an immutable, hashable terminal sequence of a contig
- Reverse complement over IUPAC nucleotide codes or colour-space digits

Author: AdjWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..config.parser import ConfigurationError


# ============================================================================
# Errors
# ============================================================================

class KmerError(ValueError):
    """Base class for k-mer construction and comparison errors."""
    pass


class KmerAlphabetError(KmerError):
    """Raised when a sequence contains a symbol outside the active alphabet."""
    pass


class KmerLengthError(KmerError):
    """Raised when a sequence does not have the configured k-mer length."""
    pass


AlphabetError = KmerAlphabetError


# ============================================================================
# Alphabets
# ============================================================================

NUCLEOTIDE_COMPLEMENTS = {
    'A': 'T', 'T': 'A', 'G': 'C', 'C': 'G',
    'R': 'Y', 'Y': 'R', 'S': 'S', 'W': 'W',
    'K': 'M', 'M': 'K', 'B': 'V', 'V': 'B',
    'D': 'H', 'H': 'D', 'N': 'N',
}

# Colour-space symbols encode transitions between bases, which read the same on
# both strands, so only the order reverses.
COLOUR_COMPLEMENTS = {'0': '0', '1': '1', '2': '2', '3': '3'}


class Alphabet(Enum):
    """Symbol set shared by every k-mer of a run."""
    NUCLEOTIDE = 'nucleotide'
    COLOUR_SPACE = 'colour_space'

    @property
    def complements(self) -> dict:
        if self is Alphabet.COLOUR_SPACE:
            return COLOUR_COMPLEMENTS
        return NUCLEOTIDE_COMPLEMENTS

    @property
    def symbols(self) -> frozenset:
        return frozenset(self.complements)

    @classmethod
    def detect(cls, symbol: str) -> Optional['Alphabet']:
        """
        Classify the first symbol of a sequence.

        Returns:
            COLOUR_SPACE for a digit, NUCLEOTIDE for a letter, None otherwise
        """
        if symbol.isdigit():
            return cls.COLOUR_SPACE
        if symbol.isalpha():
            return cls.NUCLEOTIDE
        return None


_TRANSLATIONS = {
    alphabet: str.maketrans(alphabet.complements)
    for alphabet in Alphabet
}


def reverse_complement(sequence: str, alphabet: Alphabet = Alphabet.NUCLEOTIDE) -> str:
    """
    Reverse complement a sequence.

    Symbols without a complement in the alphabet pass through unchanged; callers
    that need strict checking validate first.

    Example:
        >>> reverse_complement("ACGTAC")
        'GTACGT'
        >>> reverse_complement("0123", Alphabet.COLOUR_SPACE)
        '3210'
    """
    return sequence.translate(_TRANSLATIONS[alphabet])[::-1]


def find_invalid_symbols(sequence: str, alphabet: Alphabet) -> set:
    """Return the set of symbols in the sequence that are not in the alphabet."""
    return set(sequence) - alphabet.symbols


# ============================================================================
# Configuration
# ============================================================================

@dataclass(frozen=True)
class KmerConfig:
    """
    Run-wide k-mer contract: every k-mer built or compared in one run shares
    this length and alphabet.
    """
    length: int  # k - 1
    alphabet: Alphabet = Alphabet.NUCLEOTIDE

    def __post_init__(self):
        """Validate configuration."""
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise ConfigurationError(f"k-mer length must be an integer, got {self.length!r}")
        if self.length < 0:
            raise ConfigurationError(f"k-mer length must be >= 0, got {self.length}")

    @classmethod
    def from_k(cls, k: Optional[int], alphabet: Alphabet = Alphabet.NUCLEOTIDE) -> 'KmerConfig':
        """
        Build the configuration for overlaps of exactly k-1 bases.

        Raises:
            ConfigurationError: If k is missing or not a positive integer
        """
        if k is None:
            raise ConfigurationError("missing -k,--kmer option")
        if isinstance(k, bool) or not isinstance(k, int) or k <= 0:
            raise ConfigurationError(f"k-mer size must be a positive integer, got {k!r}")
        return cls(length=k - 1, alphabet=alphabet)

    @property
    def k(self) -> int:
        return self.length + 1

    @property
    def overlap_distance(self) -> int:
        """Distance between two adjacent contigs that share k-1 bases."""
        return -self.length

    def make_kmer(self, sequence: str) -> 'Kmer':
        return Kmer(sequence, self)


# ============================================================================
# K-mer
# ============================================================================

@dataclass(frozen=True, eq=False)
class Kmer:
    """
    An immutable k-mer of the configured length over the configured alphabet.

    Equality and hashing use the sequence only. Comparing two k-mers built from
    different configurations is a programming error and raises KmerError.
    """
    seq: str
    config: KmerConfig = field(repr=False)

    def __post_init__(self):
        if len(self.seq) != self.config.length:
            raise KmerLengthError(
                f"K-mer length {len(self.seq)} doesn't match configured length "
                f"{self.config.length} (k={self.config.k})"
            )
        invalid = find_invalid_symbols(self.seq, self.config.alphabet)
        if invalid:
            raise KmerAlphabetError(
                f"K-mer {self.seq!r} contains symbols outside the "
                f"{self.config.alphabet.value} alphabet: {''.join(sorted(invalid))}"
            )

    def reverse_complement(self) -> 'Kmer':
        return Kmer(reverse_complement(self.seq, self.config.alphabet), self.config)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Kmer):
            return NotImplemented
        if self.config != other.config:
            raise KmerError(
                f"Cannot compare k-mers from different configurations: "
                f"{self.config} vs {other.config}"
            )
        return self.seq == other.seq

    def __hash__(self) -> int:
        return hash(self.seq)

    def __len__(self) -> int:
        return len(self.seq)

    def __str__(self) -> str:
        return self.seq
