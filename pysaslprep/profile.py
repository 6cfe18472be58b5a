#
# (C) Copyright 2011 Jacek Konieczny <jajcus@jajcus.net>
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License Version
# 2.1 as published by the Free Software Foundation.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this program; if not, write to the Free Software
# Foundation, Inc., 675 Mass Ave, Cambridge, MA 02139, USA.
#

"""Stringprep (:RFC:`3454`) profile implementation.

A `Profile` object runs the stringprep steps over a string:

  1. mapping,
  2. normalization,
  3. prohibited output check,
  4. bidirectional characters check,

and, for 'stored' strings, the unassigned code points check. Any failure
raises `StringprepError` and the remaining steps are not run.

Normative reference:
  - :RFC:`3454`
"""

__docformat__ = "restructuredtext en"

import logging
import unicodedata

from .exceptions import StringprepError, ErrorKind
from .settings import PrepSettings
from .tables import D_1, D_2

logger = logging.getLogger("pysaslprep.profile")

UNICODE_DATABASES = {
        "3.2.0": unicodedata.ucd_3_2_0,
        "current": unicodedata,
    }

def _check_type(string):
    """Raise `TypeError` unless `string` is a `str`."""
    if not isinstance(string, str):
        raise TypeError("Expected str, got {0}"
                                        .format(type(string).__name__))

class Profile(object):
    """Stringprep profile.

    Profile objects are not modified after construction and hold no
    per-call state, so a single instance may be used from many threads.

    :Ivariables:
        - `unassigned`: the unassigned code points table
        - `mapping`: the mapping rules, applied in order
        - `normalization`: Unicode normalization form or `None`
        - `prohibited`: the prohibited output table
        - `bidi`: if `True` the bidirectional checks are done
        - `settings`: profile settings
    :Types:
        - `unassigned`: `RangeTable`
        - `mapping`: `tuple` of (`RangeTable`, `str`) tuples
        - `normalization`: `str`
        - `prohibited`: `RangeTable`
        - `bidi`: `bool`
        - `settings`: `PrepSettings`
    """
    # pylint: disable=R0913
    def __init__(self, unassigned, mapping, normalization, prohibited,
                                                bidi = True, settings = None):
        """Initialize a stringprep profile object.

        Each mapping rule is a ``(table, replacement)`` pair: every
        character from the table is replaced with the replacement string.
        The rules are applied one after another to the whole string, which
        only gives the right result when no replacement contains
        a character mapped by any rule.

        :Parameters:
            - `unassigned`: the unassigned code points table
            - `mapping`: the mapping rules
            - `normalization`: normalization form (e.g. ``"NFKC"``) or
              `None`
            - `prohibited`: the prohibited output table
            - `bidi`: if `True` the bidirectional checks are done
            - `settings`: profile settings
        :Types:
            - `unassigned`: `RangeTable`
            - `mapping`: sequence of (`RangeTable`, `str`) tuples
            - `normalization`: `str`
            - `prohibited`: `RangeTable`
            - `bidi`: `bool`
            - `settings`: `PrepSettings`

        :raise ValueError: when a replacement string contains a mapped
            character.
        """
        mapping = tuple((table, replacement) for table, replacement in mapping)
        for table, replacement in mapping:
            for rule_table, dummy in mapping:
                if rule_table.find(replacement) != -1:
                    raise ValueError("Replacement {0!r} for {1} contains"
                                        " a character mapped by {2}".format(
                                        replacement, table.name,
                                        rule_table.name))
        self.unassigned = unassigned
        self.mapping = mapping
        self.normalization = normalization
        self.prohibited = prohibited
        self.bidi = bidi
        if settings is None:
            settings = PrepSettings()
        self.settings = settings

    def configured(self, settings):
        """Return a copy of this profile using different settings.

        :Parameters:
            - `settings`: the new settings
        :Types:
            - `settings`: `PrepSettings`

        :returntype: `Profile`
        """
        return Profile(self.unassigned, self.mapping, self.normalization,
                        self.prohibited, self.bidi, settings)

    def prepare(self, string):
        """Complete string preparation procedure for 'stored' strings.
        (includes checks for unassigned codes)

        :Parameters:
            - `string`: the string to prepare
        :Types:
            - `string`: `str`

        :raise StringprepError: if the preparation fails.

        :return: the prepared string
        :returntype: `str`
        """
        result = self.prepare_query(string)
        return self.check_unassigned(result)

    def prepare_query(self, string):
        """Complete string preparation procedure for 'query' strings.
        (without checks for unassigned codes)

        :Parameters:
            - `string`: the string to prepare
        :Types:
            - `string`: `str`

        :raise StringprepError: if the preparation fails.

        :return: the prepared string
        :returntype: `str`
        """
        _check_type(string)
        self.check_length(string)
        result = self.map(string)
        result = self.normalize(result)
        result = self.prohibit(result)
        if self.bidi:
            result = self.check_bidi(result)
        return result

    def check_length(self, string):
        """Reject strings longer than the ``max_length`` setting."""
        max_length = self.settings["max_length"]
        if max_length is not None and len(string) > max_length:
            logger.debug("Input length {0} exceeds {1}".format(len(string),
                                                                max_length))
            raise StringprepError(ErrorKind.INPUT_TOO_LONG, max_length)
        return string

    def map(self, string):
        """Mapping part of string preparation."""
        for table, replacement in self.mapping:
            string = "".join(replacement if char in table else char
                                                        for char in string)
        return string

    def normalize(self, string):
        """Normalization part of string preparation.

        The Unicode database is selected by the ``unicode_version``
        setting.
        """
        if not self.normalization:
            return string
        database = UNICODE_DATABASES[self.settings["unicode_version"]]
        return database.normalize(self.normalization, string)

    def prohibit(self, string):
        """Checks for prohibited characters."""
        index = self.prohibited.find(string)
        if index != -1:
            logger.debug("Prohibited character at {0}".format(index))
            raise StringprepError(ErrorKind.PROHIBITED_CHARACTER, index,
                                                                string[index])
        return string

    def check_unassigned(self, string):
        """Checks for unassigned character codes."""
        index = self.unassigned.find(string)
        if index != -1:
            logger.debug("Unassigned code point at {0}".format(index))
            raise StringprepError(ErrorKind.UNASSIGNED_CODEPOINT, index,
                                                                string[index])
        return string

    @staticmethod
    def check_bidi(string):
        """Checks if string is valid for bidirectional printing.

        :RFC:`3454` section 6 rules are checked in order: no LCat
        characters when RandALCat is present, RandALCat first and
        RandALCat last.
        """
        if D_1.find(string) == -1:
            return string
        index = D_2.find(string)
        if index != -1:
            kind = ErrorKind.RTL_BOTH_DIRECTIONS
        elif string[0] not in D_1:
            kind, index = ErrorKind.RTL_MISSING_PREFIX, 0
        elif string[-1] not in D_1:
            kind, index = ErrorKind.RTL_MISSING_SUFFIX, len(string) - 1
        else:
            return string
        logger.debug("Bidi check failed: {0} at {1}".format(kind.value, index))
        raise StringprepError(kind, index, string[index])

    def is_prohibited(self, string):
        """Check if `string` contains any prohibited character.

        This is a quick check of the raw input: no mapping or normalization
        is done, so it does not replace the full `prepare` procedure.

        :returntype: `bool`
        """
        _check_type(string)
        return self.prohibited.find(string) != -1

# vi: sts=4 et sw=4
