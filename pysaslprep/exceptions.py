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

"""Exceptions raised by the string preparation code.

There is a single exception class, `StringprepError`. The reason of a
failure is given by its `StringprepError.kind` attribute, which is one of
the `ErrorKind` values, so the callers can dispatch on the kind instead of
catching different exception classes.
"""

__docformat__ = "restructuredtext en"

from enum import Enum

class ErrorKind(Enum):
    """Closed set of string preparation failure reasons."""
    PROHIBITED_CHARACTER = "prohibited-character"
    UNASSIGNED_CODEPOINT = "unassigned-codepoint"
    RTL_BOTH_DIRECTIONS = "rtl-both-directions"
    RTL_MISSING_PREFIX = "rtl-missing-prefix"
    RTL_MISSING_SUFFIX = "rtl-missing-suffix"
    INVALID_RANGE_TABLE = "invalid-range-table"
    INPUT_TOO_LONG = "input-too-long"

    @property
    def is_bidi(self):
        """`True` for failures of the RFC 3454 section 6 checks."""
        return self in (ErrorKind.RTL_BOTH_DIRECTIONS,
                        ErrorKind.RTL_MISSING_PREFIX,
                        ErrorKind.RTL_MISSING_SUFFIX)

STRINGPREP_ERRORS = {
        ErrorKind.PROHIBITED_CHARACTER:
            "String contains a prohibited character",
        ErrorKind.UNASSIGNED_CODEPOINT:
            "String contains an unassigned codepoint",
        ErrorKind.RTL_BOTH_DIRECTIONS:
            "Both RandALCat and LCat characters present",
        ErrorKind.RTL_MISSING_PREFIX:
            "RandALCat string does not start with a RandALCat character",
        ErrorKind.RTL_MISSING_SUFFIX:
            "RandALCat string does not end with a RandALCat character",
        ErrorKind.INVALID_RANGE_TABLE:
            "Invalid character range table definition",
        ErrorKind.INPUT_TOO_LONG:
            "String too long",
    }

class StringprepError(ValueError):
    """Raised when string preparation fails.

    The message never includes the offending character, as the prepared
    strings are often passwords.

    :Ivariables:
        - `kind`: the failure reason
        - `index`: position of the offending code point in the string
          examined by the failing stage (or `None` when not applicable)
        - `char`: the offending code point (or `None`)
    :Types:
        - `kind`: `ErrorKind`
        - `index`: `int`
        - `char`: `str`
    """
    def __init__(self, kind, index = None, char = None, detail = None):
        if detail is None:
            message = STRINGPREP_ERRORS[kind]
        else:
            message = "{0}: {1}".format(STRINGPREP_ERRORS[kind], detail)
        ValueError.__init__(self, message)
        self.kind = kind
        self.index = index
        self.char = char

    def __repr__(self):
        return "<StringprepError {0} at {1!r}>".format(self.kind.value,
                                                                self.index)

# vi: sts=4 et sw=4
