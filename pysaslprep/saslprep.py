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

"""SASLprep stringprep profile.

Usernames and passwords should be prepared with `prepare_as_stored_string`
when they are stored or compared with stored values and with
`prepare_as_query_string` when they are received for authentication. Any
`StringprepError` means the credential must be rejected.

Normative reference:
  - :RFC:`4013`__
"""

__docformat__ = "restructuredtext en"

from .profile import Profile
from .tables import A_1, B_1, C_1_2, SASL_PROHIBITED

def saslprep_profile(settings = None):
    """Create a SASLprep profile object.

    :Parameters:
        - `settings`: profile settings
    :Types:
        - `settings`: `PrepSettings`

    :returntype: `Profile`
    """
    return Profile(
        unassigned = A_1,
        mapping = ((B_1, ""), (C_1_2, " ")),
        normalization = "NFKC",
        prohibited = SASL_PROHIBITED,
        bidi = True,
        settings = settings)

SASLPREP = saslprep_profile()

def prepare_as_query_string(string):
    """Apply SASLprep to a 'query' string (unassigned code points
    allowed).

    :raise StringprepError: if the string cannot be prepared.

    :returntype: `str`
    """
    return SASLPREP.prepare_query(string)

def prepare_as_stored_string(string):
    """Apply SASLprep to a 'stored' string (unassigned code points
    prohibited).

    :raise StringprepError: if the string cannot be prepared.

    :returntype: `str`
    """
    return SASLPREP.prepare(string)

def is_prohibited(string):
    """Quick check for SASLprep prohibited characters in raw input.

    :returntype: `bool`
    """
    return SASLPREP.is_prohibited(string)

# vi: sts=4 et sw=4
