#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
AdjWeaver v0.1.0

Tests for k-mers, k-mer configuration and reverse complement.

Author: AdjWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import random

import pytest

from adjweaver.assembly_core.kmer_module import (
    Alphabet,
    Kmer,
    KmerAlphabetError,
    KmerConfig,
    KmerError,
    KmerLengthError,
    reverse_complement,
)
from adjweaver.config.parser import ConfigurationError


class TestReverseComplement:
    """Test sequence reverse complement."""

    def test_nucleotide(self):
        assert reverse_complement("ACGTAC") == "GTACGT"
        assert reverse_complement("AAAC") == "GTTT"

    def test_iupac_codes(self):
        assert reverse_complement("RYKMBVDHN") == "NDHBVKMRY"
        assert reverse_complement("SW") == "WS"

    def test_colour_space_reverses_only(self):
        assert reverse_complement("0123", Alphabet.COLOUR_SPACE) == "3210"

    def test_empty(self):
        assert reverse_complement("") == ""


class TestKmerConfig:
    """Test run-wide k-mer configuration."""

    def test_from_k(self):
        config = KmerConfig.from_k(31)
        assert config.length == 30
        assert config.k == 31
        assert config.alphabet is Alphabet.NUCLEOTIDE
        assert config.overlap_distance == -30

    def test_missing_k(self):
        with pytest.raises(ConfigurationError, match="missing -k"):
            KmerConfig.from_k(None)

    @pytest.mark.parametrize("k", [0, -3])
    def test_non_positive_k(self, k):
        with pytest.raises(ConfigurationError):
            KmerConfig.from_k(k)

    def test_non_integer_k(self):
        with pytest.raises(ConfigurationError):
            KmerConfig.from_k("31")

    def test_negative_length(self):
        with pytest.raises(ConfigurationError):
            KmerConfig(length=-1)

    def test_config_is_immutable(self):
        config = KmerConfig.from_k(4)
        with pytest.raises(Exception):
            config.length = 5


class TestKmer:
    """Test k-mer construction, equality and hashing."""

    def test_construct(self):
        config = KmerConfig.from_k(4)
        kmer = config.make_kmer("TAC")
        assert kmer.seq == "TAC"
        assert len(kmer) == 3
        assert str(kmer) == "TAC"

    def test_length_mismatch(self):
        config = KmerConfig.from_k(4)
        with pytest.raises(KmerLengthError):
            config.make_kmer("TACG")
        with pytest.raises(KmerLengthError):
            config.make_kmer("TA")

    def test_invalid_symbol(self):
        config = KmerConfig.from_k(4)
        with pytest.raises(KmerAlphabetError):
            config.make_kmer("TXC")

    def test_digits_rejected_in_nucleotide_alphabet(self):
        config = KmerConfig.from_k(4)
        with pytest.raises(KmerAlphabetError):
            config.make_kmer("012")

    def test_colour_space(self):
        config = KmerConfig.from_k(4, Alphabet.COLOUR_SPACE)
        kmer = config.make_kmer("012")
        assert kmer.reverse_complement().seq == "210"
        with pytest.raises(KmerAlphabetError):
            config.make_kmer("ACG")

    def test_equality_and_hash(self):
        config = KmerConfig.from_k(4)
        a = config.make_kmer("ACG")
        b = config.make_kmer("ACG")
        c = config.make_kmer("ACT")
        assert a == b
        assert hash(a) == hash(b)
        assert a != c
        assert {a: 1}[b] == 1

    def test_compare_across_configurations_fails(self):
        a = KmerConfig.from_k(4).make_kmer("ACG")
        b = KmerConfig.from_k(5).make_kmer("ACGT")
        with pytest.raises(KmerError):
            a == b

    def test_not_equal_to_string(self):
        kmer = KmerConfig.from_k(4).make_kmer("ACG")
        assert kmer != "ACG"

    def test_reverse_complement(self):
        config = KmerConfig.from_k(5)
        kmer = config.make_kmer("AACG")
        rc = kmer.reverse_complement()
        assert rc.seq == "CGTT"
        assert rc.config == config

    def test_reverse_complement_is_involution(self):
        config = KmerConfig.from_k(12)
        rng = random.Random(11)
        for _ in range(200):
            seq = ''.join(rng.choice("ACGTNRYKM") for _ in range(11))
            kmer = config.make_kmer(seq)
            assert kmer.reverse_complement().reverse_complement() == kmer

    def test_empty_kmer_for_k_of_one(self):
        config = KmerConfig.from_k(1)
        kmer = config.make_kmer("")
        assert kmer.reverse_complement() == kmer
