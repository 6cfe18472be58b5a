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

"""Code point range tables.

A `RangeTable` is an immutable set of Unicode code points, stored as
a sorted sequence of disjoint ``[start, start + count)`` ranges.

Tables are built with one of the factory functions:

  * `table_from_list` -- from individual code points,
  * `table_from_ranges` -- from a flat sequence of inclusive
    ``start, end`` bounds, as the tables are printed in :RFC:`3454`,
  * `table_from_tables` -- as a union of other tables.

All of them sort the input and merge overlapping or adjacent ranges, so
membership can be tested with a single binary search.
"""

__docformat__ = "restructuredtext en"

import logging

from bisect import bisect_right

from .exceptions import StringprepError, ErrorKind

logger = logging.getLogger("pysaslprep.rangetable")

MAX_CODE_POINT = 0x10FFFF

def _check_bound(value):
    """Raise `StringprepError` unless `value` is a valid code point."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise StringprepError(ErrorKind.INVALID_RANGE_TABLE,
                                detail = "{0!r} is not an integer".format(value))
    if value < 0 or value > MAX_CODE_POINT:
        raise StringprepError(ErrorKind.INVALID_RANGE_TABLE,
                                detail = "{0:#x} out of range".format(value))

def _coalesce(pairs):
    """Sort ``(start, count)`` pairs and merge overlapping or touching
    ranges.

    :return: ``(starts, counts)`` tuple of tuples
    """
    starts = []
    counts = []
    for start, count in sorted(pairs):
        if starts:
            prev_start = starts[-1]
            prev_end = prev_start + counts[-1]
            if prev_end >= start:
                # (0, 1) + (1, 5) gives (0, 6); (0, 10) + (2, 1) stays (0, 10)
                counts[-1] = max(prev_end, start + count) - prev_start
                continue
        starts.append(start)
        counts.append(count)
    return tuple(starts), tuple(counts)

class RangeTable(object):
    """Immutable set of code points.

    Supports the ``in`` operator for integer code points and single
    character strings.

    :Ivariables:
        - `name`: table name, e.g. ``"C.2.1"``
    :Types:
        - `name`: `str`
    """
    __slots__ = ("name", "_starts", "_counts")
    def __init__(self, pairs, name = None):
        """Build a table from ``(start, count)`` pairs.

        The pairs may come in any order and may overlap. Use the
        `table_from_list`, `table_from_ranges` or `table_from_tables`
        factory functions instead of calling this directly.

        :Parameters:
            - `pairs`: ranges to include
            - `name`: table name
        :Types:
            - `pairs`: iterable of (`int`, `int`) tuples
            - `name`: `str`
        """
        checked = []
        for start, count in pairs:
            _check_bound(start)
            if count < 1:
                raise StringprepError(ErrorKind.INVALID_RANGE_TABLE,
                            detail = "empty range at {0:#x}".format(start))
            _check_bound(start + count - 1)
            checked.append((start, count))
        starts, counts = _coalesce(checked)
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "_starts", starts)
        object.__setattr__(self, "_counts", counts)

    def __setattr__(self, name, value):
        raise AttributeError("RangeTable objects are immutable")

    def __contains__(self, char):
        if isinstance(char, str):
            char = ord(char)
        # the last range starting at or before char is the only candidate
        pos = bisect_right(self._starts, char) - 1
        if pos < 0:
            return False
        return char < self._starts[pos] + self._counts[pos]

    def __len__(self):
        """Number of (merged) ranges in the table."""
        return len(self._starts)

    def __iter__(self):
        """Iterate over the ``(start, count)`` ranges, in ascending order."""
        return zip(self._starts, self._counts)

    def __eq__(self, other):
        if not isinstance(other, RangeTable):
            return NotImplemented
        return (self._starts == other._starts
                                    and self._counts == other._counts)

    def __hash__(self):
        return hash((self._starts, self._counts))

    def __repr__(self):
        return "<RangeTable {0!r}: {1} ranges>".format(self.name, len(self))

    def ranges(self):
        """Return the table content as a list of ``(start, count)``
        tuples."""
        return list(zip(self._starts, self._counts))

    def find(self, string):
        """Find the first character of `string` which belongs to this table.

        :Parameters:
            - `string`: the string to scan
        :Types:
            - `string`: `str`

        :return: index of the character or -1 when none is found
        :returntype: `int`
        """
        for index, char in enumerate(string):
            if char in self:
                return index
        return -1

def table_from_list(code_points, name = None):
    """Build a table from individual code points.

    :Parameters:
        - `code_points`: the table members
        - `name`: table name
    :Types:
        - `code_points`: iterable of `int`
        - `name`: `str`

    :returntype: `RangeTable`
    """
    return RangeTable(((code_point, 1) for code_point in code_points), name)

def table_from_ranges(bounds, name = None):
    """Build a table from a flat sequence of inclusive range bounds.

    `bounds` is ``start1, end1, start2, end2, ...``, so it must have an even
    length.

    :Parameters:
        - `bounds`: range bounds
        - `name`: table name
    :Types:
        - `bounds`: sequence of `int`
        - `name`: `str`

    :raise StringprepError: (`ErrorKind.INVALID_RANGE_TABLE`) when the
        sequence has odd length or contains an invalid range.

    :returntype: `RangeTable`
    """
    bounds = list(bounds)
    if len(bounds) % 2:
        logger.error("Odd number of bounds in table {0!r}".format(name))
        raise StringprepError(ErrorKind.INVALID_RANGE_TABLE,
                                        detail = "odd number of bounds")
    pairs = []
    for i in range(0, len(bounds), 2):
        start, end = bounds[i], bounds[i + 1]
        _check_bound(start)
        _check_bound(end)
        pairs.append((start, end - start + 1))
    return RangeTable(pairs, name)

def table_from_tables(*tables, name = None):
    """Build a table as a union of other tables.

    :Parameters:
        - `tables`: the tables to merge
        - `name`: (keyword only) the new table name
    :Types:
        - `tables`: `RangeTable`
        - `name`: `str`

    :returntype: `RangeTable`
    """
    pairs = []
    for table in tables:
        pairs.extend(table)
    return RangeTable(pairs, name)

# vi: sts=4 et sw=4
