#!/usr/bin/env python3
"""
Tests for nucleotide pileups.
"""

import unittest

import numpy as np

from ngstk.analysis import Alignment, AlignmentOperation, Pileup
from ngstk.sequence import DnaNucleotide, DnaSequence, Peptide, RnaSequence

M = AlignmentOperation.MATCH
I = AlignmentOperation.INSERTION


class PileupTests(unittest.TestCase):
    """Test cases for the Pileup class."""

    def setUp(self):
        """Set up a template and a few reads."""
        self.template = DnaSequence('ACGTACGT')
        self.pileup = Pileup(self.template.length())
        reads = [('ACGT', 0), ('ACTT', 0), ('CGTA', 1)]
        for text, offset in reads:
            alignment = Alignment.from_operations(self.template, DnaSequence(text), [(M, 4)],
                                                  template_offset=offset)
            self.pileup.add_alignment(alignment)

    def test_counts_and_depth(self):
        """Test per-position counts."""
        self.assertEqual(self.pileup.depth(0), 2)
        self.assertEqual(self.pileup.depth(2), 3)
        self.assertEqual(self.pileup.count(2, DnaNucleotide.T), 1)
        self.assertEqual(self.pileup.count(2, 'G'), 2)
        self.assertEqual(self.pileup.depth(7), 0)
        np.testing.assert_array_equal(self.pileup.depths(), [2, 3, 3, 3, 1, 0, 0, 0])

    def test_consensus(self):
        """Test the consensus sequence."""
        self.assertEqual(self.pileup.consensus().to_text(), 'ACGTANNN')

    def test_consensus_tie(self):
        """Test that ties go to the first base in A, C, G, T order."""
        pileup = Pileup(1)
        for text in ['T', 'C']:
            pileup.add_alignment(Alignment.from_operations(DnaSequence('A'), DnaSequence(text), [(M, 1)]))
        self.assertEqual(pileup.consensus().to_text(), 'C')

    def test_only_equal_length_segments(self):
        """Test that insertions do not contribute bases."""
        pileup = Pileup(self.template.length())
        alignment = Alignment.from_operations(self.template, DnaSequence('ACGTTT'), [(M, 4), (I, 2)])
        self.assertEqual(pileup.add_alignment(alignment), 4)
        self.assertEqual(pileup.consensus().to_text(), 'ACGTNNNN')

    def test_reverse_alignment(self):
        """Test that reverse reads are counted in template orientation."""
        pileup = Pileup(4)
        alignment = Alignment.from_operations(DnaSequence('AACC'), DnaSequence('GGTT'), [(M, 4)], is_reverse=True)
        pileup.add_alignment(alignment)
        self.assertEqual(pileup.consensus(), DnaSequence('AACC'))

    def test_rna_alignment(self):
        """Test that RNA reads are counted with U as T."""
        pileup = Pileup(4)
        alignment = Alignment.from_operations(RnaSequence('ACGU'), RnaSequence('ACGU'), [(M, 4)])
        self.assertEqual(pileup.add_alignment(alignment), 4)
        self.assertEqual(pileup.consensus(), DnaSequence('ACGT'))
        self.assertEqual(pileup.count(3, DnaNucleotide.T), 1)

    def test_peptide_alignment(self):
        """Test that peptide alignments are rejected."""
        pileup = Pileup(3)
        alignment = Alignment.from_operations(Peptide('MAK'), Peptide('MAK'), [(M, 3)])
        with self.assertRaises(TypeError):
            pileup.add_alignment(alignment)
        self.assertEqual(pileup.depths().sum(), 0)

    def test_past_template_end(self):
        """Test that bases beyond the pileup are ignored."""
        pileup = Pileup(4)
        alignment = Alignment.from_operations(self.template, DnaSequence('ACGTACGT'), [(M, 8)])
        self.assertEqual(pileup.add_alignment(alignment), 4)
        self.assertEqual(pileup.template_length, 4)


if __name__ == '__main__':
    unittest.main()
