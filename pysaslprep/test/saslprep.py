#!/usr/bin/python
# -*- coding: UTF-8 -*-
# pylint: disable=C0111

"""Tests for pysaslprep.saslprep"""

import unittest

import logging

from pysaslprep import StringprepError, ErrorKind
from pysaslprep.saslprep import SASLPREP, is_prohibited
from pysaslprep.saslprep import prepare_as_query_string
from pysaslprep.saslprep import prepare_as_stored_string
from pysaslprep.tables import SASL_PROHIBITED

logger = logging.getLogger("pysaslprep.test.saslprep")

# RFC 4013 section 3 and a few more
VALID_STRINGS = [
    (u"I\u00ADX",   u"IX"),
    (u"user",       u"user"),
    (u"USER",       u"USER"),
    (u"\u00AA",     u"a"),
    (u"\u2168",     u"IX"),
    (u"I\u00A0X",   u"I X"),
    (u"a\u3000b\u2003c", u"a b c"),
    (u"\u200Bab\uFEFF", u"ab"),
    (u"\u00AD",     u""),
    (u"",           u""),
    (u"\uFF2D\uFF4F\uFF4D", u"Mom"),
    (u"jajcu\u015B", u"jajcu\u015B"),
    (u"\u05D0\u05D1", u"\u05D0\u05D1"),
    (u"\u0627\u0031\u0628", u"\u0627\u0031\u0628"),
    (u"pass word", u"pass word"),
]

INVALID_STRINGS = [
    (u"\u0007",         ErrorKind.PROHIBITED_CHARACTER, 0),
    (u"a\u0000b",       ErrorKind.PROHIBITED_CHARACTER, 1),
    (u"\u200E",         ErrorKind.PROHIBITED_CHARACTER, 0),
    (u"ab\uE000",       ErrorKind.PROHIBITED_CHARACTER, 2),
    (u"\uFFFD",         ErrorKind.PROHIBITED_CHARACTER, 0),
    (u"x\U000E0041",    ErrorKind.PROHIBITED_CHARACTER, 1),
    (u"\u0627\u0031",   ErrorKind.RTL_MISSING_SUFFIX, 1),
    (u"\u05D0A",        ErrorKind.RTL_BOTH_DIRECTIONS, 1),
    (u"\u05C0 foo \u05C0", ErrorKind.RTL_BOTH_DIRECTIONS, 2),
    (u"1\u05D0\u05D1",  ErrorKind.RTL_MISSING_PREFIX, 0),
    (u"\u05D0\u05D11",  ErrorKind.RTL_MISSING_SUFFIX, 2),
    (u"1\u05D0\u05D12", ErrorKind.RTL_MISSING_PREFIX, 0),
]

class TestSASLprep(unittest.TestCase):
    def test_valid_query_strings(self):
        for input_, output in VALID_STRINGS:
            logger.debug(" checking {0!r}...".format(input_))
            self.assertEqual(prepare_as_query_string(input_), output)

    def test_valid_stored_strings(self):
        for input_, output in VALID_STRINGS:
            logger.debug(" checking {0!r}...".format(input_))
            self.assertEqual(prepare_as_stored_string(input_), output)

    def test_invalid_strings(self):
        for input_, kind, index in INVALID_STRINGS:
            logger.debug(" checking {0!r}...".format(input_))
            for function in (prepare_as_query_string,
                                                prepare_as_stored_string):
                with self.assertRaises(StringprepError) as context:
                    function(input_)
                self.assertIs(context.exception.kind, kind)
                self.assertEqual(context.exception.index, index)

    def test_idempotence(self):
        for input_, dummy in VALID_STRINGS:
            once = prepare_as_query_string(input_)
            self.assertEqual(prepare_as_query_string(once), once)

    def test_unassigned(self):
        self.assertEqual(prepare_as_query_string(u"\u0221"), u"\u0221")
        with self.assertRaises(StringprepError) as context:
            prepare_as_stored_string(u"\u0221")
        self.assertIs(context.exception.kind, ErrorKind.UNASSIGNED_CODEPOINT)
        self.assertEqual(context.exception.index, 0)
        with self.assertRaises(StringprepError) as context:
            prepare_as_stored_string(u"ab\u0221")
        self.assertEqual(context.exception.index, 2)

    def test_prohibited_before_unassigned(self):
        with self.assertRaises(StringprepError) as context:
            prepare_as_stored_string(u"\u0221\u0007")
        self.assertIs(context.exception.kind, ErrorKind.PROHIBITED_CHARACTER)

    def test_bidi_before_unassigned(self):
        with self.assertRaises(StringprepError) as context:
            prepare_as_stored_string(u"\u05D0\u0221")
        self.assertIs(context.exception.kind, ErrorKind.RTL_MISSING_SUFFIX)

    def test_error_kinds(self):
        with self.assertRaises(ValueError) as context:
            prepare_as_query_string(u"\u05D0A")
        self.assertTrue(context.exception.kind.is_bidi)
        with self.assertRaises(ValueError) as context:
            prepare_as_query_string(u"\u0000")
        self.assertFalse(context.exception.kind.is_bidi)

    def test_message_hides_character(self):
        with self.assertRaises(StringprepError) as context:
            prepare_as_query_string(u"secret\u0007")
        self.assertNotIn(u"\u0007", str(context.exception))
        self.assertNotIn(u"secret", str(context.exception))
        self.assertEqual(context.exception.char, u"\u0007")
        self.assertEqual(str(context.exception),
                                "String contains a prohibited character")

    def test_bytes_rejected(self):
        with self.assertRaises(TypeError):
            prepare_as_query_string(b"user")
        with self.assertRaises(TypeError):
            prepare_as_stored_string(None)

class TestIsProhibited(unittest.TestCase):
    def test_is_prohibited(self):
        self.assertFalse(is_prohibited(u"user"))
        self.assertFalse(is_prohibited(u""))
        self.assertFalse(is_prohibited(u"I\u00ADX"))
        self.assertFalse(is_prohibited(u"\u0221"))
        self.assertFalse(is_prohibited(u"\u05D0A"))
        self.assertTrue(is_prohibited(u"a\u0000"))
        self.assertTrue(is_prohibited(u"\uDB80"))
        self.assertTrue(is_prohibited(u"\U000E0001"))

    def test_no_mapping(self):
        # raw input is checked, so spaces mapped by SASLprep are reported
        self.assertTrue(is_prohibited(u"I\u00A0X"))
        self.assertEqual(prepare_as_query_string(u"I\u00A0X"), u"I X")

    def test_bytes_rejected(self):
        with self.assertRaises(TypeError):
            is_prohibited(b"\x00")
        with self.assertRaises(TypeError):
            is_prohibited(b"user")
        with self.assertRaises(TypeError):
            SASLPREP.is_prohibited(None)

    def test_consistency(self):
        samples = [u"user", u"\u0007", u"a\u00A0b", u"\u2168", u"\uFFFF",
                   u"\u05D0\u05D1", u"x\U0010FFFD", u"\u206A", u"\u0340"]
        for sample in samples:
            expected = any(ord(char) in SASL_PROHIBITED for char in sample)
            self.assertEqual(is_prohibited(sample), expected)
            self.assertEqual(SASLPREP.is_prohibited(sample), expected)

# pylint: disable=W0611
from pysaslprep.test._support import load_tests, setup_logging

def setUpModule():
    setup_logging()

if __name__ == "__main__":
    unittest.main()
