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

"""SASLprep (:RFC:`4013`) string preparation for usernames and passwords.

The package implements the :RFC:`3454` stringprep procedure over
hand-maintained code point range tables, with the SASLprep profile used
by SCRAM and other SASL mechanisms.

Modules:

  * `pysaslprep.rangetable` -- code point range tables,
  * `pysaslprep.tables` -- the :RFC:`3454` tables,
  * `pysaslprep.profile` -- generic stringprep profile,
  * `pysaslprep.saslprep` -- the SASLprep profile and entry points,
  * `pysaslprep.settings` -- settings container,
  * `pysaslprep.exceptions` -- the `StringprepError` exception.

Normative reference:
  - :RFC:`3454`
  - :RFC:`4013`
"""

__docformat__ = "restructuredtext en"

from .exceptions import StringprepError, ErrorKind
from .saslprep import SASLPREP, saslprep_profile
from .saslprep import prepare_as_query_string, prepare_as_stored_string
from .saslprep import is_prohibited
from .settings import PrepSettings
from .version import version as __version__

# vi: sts=4 et sw=4
