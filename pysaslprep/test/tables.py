#!/usr/bin/python
# -*- coding: UTF-8 -*-
# pylint: disable=C0111

"""Tests for pysaslprep.tables"""

import unittest

import logging

from pysaslprep import tables
from pysaslprep.tables import TABLES, SASL_PROHIBITED, get_table

logger = logging.getLogger("pysaslprep.test.tables")

TABLE_NAMES = ["A.1", "B.1", "C.1.1", "C.1.2", "C.2.1", "C.2.2", "C.3",
               "C.4", "C.5", "C.6", "C.7", "C.8", "C.9", "D.1", "D.2"]

MEMBERS = [
    ("A.1", [0x0221, 0x0234, 0x024F, 0x0560, 0x1D800, 0xE0000, 0xEFFFD]),
    ("B.1", [0x00AD, 0x034F, 0x200B, 0x2060, 0xFE00, 0xFE0F, 0xFEFF]),
    ("C.1.1", [0x0020]),
    ("C.1.2", [0x00A0, 0x1680, 0x2000, 0x200B, 0x202F, 0x205F, 0x3000]),
    ("C.2.1", [0x0000, 0x0007, 0x001F, 0x007F]),
    ("C.2.2", [0x0080, 0x009F, 0x06DD, 0x2028, 0xFEFF, 0x1D17A]),
    ("C.3", [0xE000, 0xF8FF, 0xF0000, 0x10FFFD]),
    ("C.4", [0xFDD0, 0xFDEF, 0xFFFE, 0xFFFF, 0x10FFFF]),
    ("C.5", [0xD800, 0xDFFF]),
    ("C.6", [0xFFF9, 0xFFFD]),
    ("C.7", [0x2FF0, 0x2FFB]),
    ("C.8", [0x0340, 0x200E, 0x202E, 0x206F]),
    ("C.9", [0xE0001, 0xE0020, 0xE007F]),
    ("D.1", [0x05BE, 0x05D0, 0x05EA, 0x0627, 0x200F, 0xFEFC]),
    ("D.2", [0x0041, 0x005A, 0x0061, 0x007A, 0x00AA, 0x200E, 0x10FFFD]),
    ]

NON_MEMBERS = [
    ("A.1", [0x0041, 0x0220, 0x0222, 0x05D0, 0xE0001]),
    ("B.1", [0x0020, 0x00A0, 0x180F]),
    ("C.1.1", [0x001F, 0x0021, 0x00A0]),
    ("C.1.2", [0x0020, 0x2060]),
    ("C.2.1", [0x0020, 0x0080]),
    ("C.2.2", [0x007F, 0x00A0, 0x206A + 6]),
    ("C.3", [0xDFFF, 0xF900, 0x10FFFE]),
    ("C.4", [0xFDCF, 0xFDF0, 0xFFFD]),
    ("C.5", [0xD7FF, 0xE000]),
    ("C.6", [0xFFF8, 0xFFFE]),
    ("C.7", [0x2FEF, 0x2FFC]),
    ("C.8", [0x0342, 0x2010]),
    ("C.9", [0xE0000, 0xE0002, 0xE0080]),
    ("D.1", [0x0041, 0x0031, 0x05BF, 0x0620]),
    ("D.2", [0x0030, 0x0040, 0x05D0, 0x0221, 0x0020]),
    ]

class TestTables(unittest.TestCase):
    def test_registry(self):
        self.assertEqual(sorted(TABLES), sorted(TABLE_NAMES))
        for name in TABLE_NAMES:
            table = get_table(name)
            self.assertEqual(table.name, name)
        self.assertIs(get_table("A.1"), tables.A_1)
        self.assertIs(get_table("D.2"), tables.D_2)
        with self.assertRaises(KeyError):
            get_table("B.2")

    def test_canonical_form(self):
        for name, table in TABLES.items():
            logger.debug(" checking {0}...".format(name))
            previous_end = None
            for start, count in table:
                self.assertTrue(count >= 1)
                if previous_end is not None:
                    # sorted and neither overlapping nor touching
                    self.assertTrue(start > previous_end)
                previous_end = start + count

    def test_range_boundaries(self):
        for table in list(TABLES.values()) + [SASL_PROHIBITED]:
            logger.debug(" checking {0}...".format(table.name))
            for start, count in table:
                self.assertFalse(start - 1 in table)
                self.assertTrue(start in table)
                self.assertTrue(start + count - 1 in table)
                self.assertFalse(start + count in table)

    def test_members(self):
        for name, code_points in MEMBERS:
            table = get_table(name)
            for code_point in code_points:
                self.assertTrue(code_point in table,
                                "{0:04X} not in {1}".format(code_point, name))

    def test_non_members(self):
        for name, code_points in NON_MEMBERS:
            table = get_table(name)
            for code_point in code_points:
                self.assertFalse(code_point in table,
                                "{0:04X} in {1}".format(code_point, name))

    def test_sasl_prohibited(self):
        parts = ["C.1.2", "C.2.1", "C.2.2", "C.3", "C.4", "C.5", "C.6",
                 "C.7", "C.8", "C.9"]
        for name in parts:
            for start, count in get_table(name):
                self.assertTrue(start in SASL_PROHIBITED)
                self.assertTrue(start + count - 1 in SASL_PROHIBITED)
        for start, count in SASL_PROHIBITED:
            for code_point in (start, start + count - 1):
                self.assertTrue(any(code_point in get_table(name)
                                                        for name in parts))
        for code_point in (0x0020, 0x0041, 0x00AD, 0x0221, 0x05D0):
            self.assertFalse(code_point in SASL_PROHIBITED)

    def test_sasl_prohibited_merged(self):
        # 007F (C.2.1), 0080-009F (C.2.2) and 00A0 (C.1.2) touch
        self.assertEqual(SASL_PROHIBITED.ranges()[:2],
                                            [(0x0000, 0x20), (0x007F, 0x22)])

# pylint: disable=W0611
from pysaslprep.test._support import load_tests, setup_logging

def setUpModule():
    setup_logging()

if __name__ == "__main__":
    unittest.main()
