#!/usr/bin/env python3
"""
Tests for genomic intervals.
"""

import dataclasses
import itertools
import unittest

from ngstk.models import GenomicInterval, IntervalParseError


class IntervalParseTests(unittest.TestCase):
    """Test cases for parsing and displaying intervals."""

    def test_parse_and_display(self):
        """Test that parsing and displaying round-trip."""
        interval = GenomicInterval.parse('chr1:1232-1235')
        self.assertEqual(interval.reference_name, 'chr1')
        self.assertEqual(interval.offset, 1231)
        self.assertEqual(interval.length, 4)
        self.assertEqual(interval.display_string(), 'chr1:1232-1235')
        self.assertEqual(str(interval), 'chr1:1232-1235')

    def test_parse_large_interval(self):
        """Test parsing a long interval."""
        interval = GenomicInterval.parse('chr1:1232-121144')
        self.assertEqual(interval.offset, 1231)
        self.assertEqual(interval.end, 121144)

    def test_parse_single_base(self):
        """Test parsing a single base interval."""
        interval = GenomicInterval.parse('chr1:1-1')
        self.assertEqual(interval.offset, 0)
        self.assertEqual(interval.length, 1)
        self.assertEqual(interval.end, 1)

    def test_parse_reference_name_with_separators(self):
        """Test reference names containing ':' or '-'."""
        interval = GenomicInterval.parse('HLA-A*01:01:1-10')
        self.assertEqual(interval.reference_name, 'HLA-A*01:01')
        self.assertEqual(interval.offset, 0)
        self.assertEqual(interval.length, 10)
        self.assertEqual(interval.display_string(), 'HLA-A*01:01:1-10')

    def test_parse_errors(self):
        """Test rejection of malformed interval text."""
        invalid = [
            'chr1:0-123',
            'chr1:10-5',
            'chr1',
            'chr1:100',
            'chr1:a-5',
            'chr1:5-b',
            ':1-5',
            '',
            'chr1: 5-10',
            'chr1:5 -10',
            'chr1:5- 10',
            'chr1:1_000-2_000',
            'chr1:+5-10',
            'chr1:05-10',
            'chr1:5-010',
        ]

        for text in invalid:
            with self.assertRaises(IntervalParseError):
                GenomicInterval.parse(text)

        with self.assertRaises(ValueError):
            GenomicInterval.parse('chr1:0-123')

        try:
            GenomicInterval.parse('chr1:0-123')
        except IntervalParseError as e:
            self.assertIn('1 or larger', e.reason)
            self.assertEqual(e.text, 'chr1:0-123')

    def test_round_trip(self):
        """Test round trip for several valid inputs."""
        for text in ['chr1:1-1', 'chrX:100-200', 'scaffold_12:5-5000000', 'chr1:10-10']:
            self.assertEqual(GenomicInterval.parse(text).display_string(), text)

    def test_alternative_constructors(self):
        """Test BED and GTF style constructors."""
        bed = GenomicInterval.from_half_open('chr1', 10, 20)
        gtf = GenomicInterval.from_one_based('chr1', 11, 20)
        self.assertEqual(bed, GenomicInterval('chr1', 10, 10))
        self.assertEqual(bed, gtf)

        with self.assertRaises(ValueError):
            GenomicInterval.from_half_open('chr1', 20, 10)
        with self.assertRaises(ValueError):
            GenomicInterval.from_one_based('chr1', 0, 10)

    def test_invalid_coordinates(self):
        """Test that negative coordinates are rejected."""
        with self.assertRaises(ValueError):
            GenomicInterval('chr1', -1, 5)
        with self.assertRaises(ValueError):
            GenomicInterval('chr1', 1, -5)
        with self.assertRaises(ValueError):
            GenomicInterval('chr1', 1.5, 5)

    def test_immutable(self):
        """Test that intervals can not be modified."""
        interval = GenomicInterval('chr1', 1, 5)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            interval.offset = 3


class IntervalArithmeticTests(unittest.TestCase):
    """Test cases for overlap, intersection and ordering."""

    def test_overlap(self):
        """Test overlap between intervals on the same reference."""
        second = GenomicInterval('ref', 10, 10)
        test_cases = [
            (GenomicInterval('ref', 0, 10), 0),   # right before
            (GenomicInterval('ref', 0, 11), 1),   # 1bp overlap
            (GenomicInterval('ref', 10, 10), 10), # identical
            (GenomicInterval('ref', 11, 9), 9),   # contained
            (GenomicInterval('ref', 19, 10), 1),  # 1bp at the end
            (GenomicInterval('ref', 20, 10), 0),  # right after
            (GenomicInterval('ref', 5, 30), 10),  # containing
        ]

        for first, expected in test_cases:
            self.assertEqual(first.overlap_length(second), expected)
            self.assertEqual(first.overlaps(second), expected > 0)

    def test_overlap_same_offset(self):
        """Test that intervals sharing an offset overlap by the shorter length."""
        short = GenomicInterval('ref', 5, 3)
        long = GenomicInterval('ref', 5, 10)
        self.assertEqual(short.overlap_length(long), 3)
        self.assertEqual(long.overlap_length(short), 3)

    def test_overlap_symmetry(self):
        """Test that overlap length is symmetric."""
        intervals = [
            GenomicInterval(name, offset, length)
            for name in ['chr1', 'chr2']
            for offset in [0, 3, 7]
            for length in [0, 1, 4, 10]
        ]

        for a, b in itertools.product(intervals, repeat=2):
            self.assertEqual(a.overlap_length(b), b.overlap_length(a))
            if a.reference_name != b.reference_name:
                self.assertEqual(a.overlap_length(b), 0)
                self.assertIsNone(a.intersect(b))

    def test_intersect(self):
        """Test intersections."""
        a = GenomicInterval('chr1', 0, 10)
        self.assertEqual(a.intersect(GenomicInterval('chr1', 5, 20)), GenomicInterval('chr1', 5, 5))
        self.assertEqual(a.intersect(GenomicInterval('chr1', 2, 3)), GenomicInterval('chr1', 2, 3))
        self.assertEqual(a.intersect(GenomicInterval('chr1', 10, 5)), GenomicInterval('chr1', 10, 0))
        self.assertIsNone(a.intersect(GenomicInterval('chr1', 12, 5)))
        self.assertIsNone(a.intersect(GenomicInterval('chr2', 0, 10)))

    def test_contains(self):
        """Test position containment."""
        interval = GenomicInterval('chr1', 10, 5)
        self.assertFalse(interval.contains(9))
        self.assertTrue(interval.contains(10))
        self.assertTrue(interval.contains(14))
        self.assertFalse(interval.contains(15))

    def test_compare_and_sort(self):
        """Test the total order on intervals."""
        a = GenomicInterval('chr1', 10, 5)
        self.assertEqual(a.compare(GenomicInterval('chr1', 10, 5)), 0)
        self.assertEqual(a.compare(GenomicInterval('chr2', 0, 1)), -1)
        self.assertEqual(a.compare(GenomicInterval('chr1', 5, 100)), 1)
        self.assertEqual(a.compare(GenomicInterval('chr1', 10, 6)), -1)

        intervals = [
            GenomicInterval('chr2', 5, 1),
            GenomicInterval('chr1', 10, 5),
            GenomicInterval('chr1', 10, 2),
            GenomicInterval('chr1', 3, 50),
        ]
        self.assertEqual(
            [str(i) for i in sorted(intervals)],
            ['chr1:4-53', 'chr1:11-12', 'chr1:11-15', 'chr2:6-6']
        )


if __name__ == '__main__':
    unittest.main()
