
"""Startup script for the whole pysaslprep test suite."""

import unittest
import pysaslprep.test

def load_tests(loader, standard_tests, pattern):
    """Load all tests discovered in pysaslprep.test."""
    # pylint: disable=W0613
    return pysaslprep.test.discover()

unittest.main()
