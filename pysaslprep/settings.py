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
# pylint: disable-msg=W0201

"""General settings container.

String preparation is controlled by a few optional parameters, like the
Unicode database version used for normalization or the input length limit.
Instead of passing each of them via function arguments a `PrepSettings`
object is used. It also provides the defaults.

Known settings:

  * ``unicode_version`` -- ``"3.2.0"`` (the default, as required by
    :RFC:`3454`) or ``"current"`` (the database of the running Python
    interpreter), selects the data used for normalization,
  * ``max_length`` -- maximum input length in characters, ``None`` (the
    default) for no limit.
"""

__docformat__ = "restructuredtext en"

import argparse
import logging

from collections.abc import MutableMapping

logger = logging.getLogger("pysaslprep.settings")

class _SettingDefinition(object):
    # pylint: disable=R0903,R0913
    def __init__(self, name, type = str, default = None, cmdline_help = None,
                                                            validator = None):
        self.name = name
        self.type = type
        self.default = default
        self.cmdline_help = cmdline_help
        self.validator = validator

class PrepSettings(MutableMapping):
    """Container for the string preparation parameters.

    It can be used like a regular dictionary, but will provide reasonable
    defaults for parameters which are not explicitely set.

    :CVariables:
        - `_defs`: registered setting definitions.
    :Ivariables:
        - `_settings`: current values of the parameters explicitely set.
    """
    _defs = {}
    def __init__(self, data = None):
        """Create settings, optionally initialized with `data`.

        :Parameters:
            - `data`: initial data
        :Types:
            - `data`: any mapping, including `PrepSettings`
        """
        self._settings = {}
        if data is not None:
            for key, value in dict(data).items():
                self[key] = value

    def __len__(self):
        """Number of parameters set."""
        return len(self._settings)

    def __iter__(self):
        """Iterate over the parameter names."""
        return iter(self._settings)

    def __contains__(self, key):
        """Check if a parameter is set.

        :Parameters:
            - `key`: the parameter name
        :Types:
            - `key`: `str`
        """
        return key in self._settings

    def __getitem__(self, key):
        """Get a parameter value. Return the default if no value is set
        and the default is provided.

        :Parameters:
            - `key`: the parameter name
        :Types:
            - `key`: `str`
        """
        return self.get(key, required = True)

    def __setitem__(self, key, value):
        """Set a parameter value.

        The value is passed through the setting's validator, if one is
        registered.

        :Parameters:
            - `key`: the parameter name
            - `value`: the new value
        :Types:
            - `key`: `str`

        :raise ValueError: when the value is not valid for the setting.
        """
        setting_def = self._defs.get(key)
        if setting_def is not None and setting_def.validator is not None \
                                                        and value is not None:
            value = setting_def.validator(value)
        self._settings[str(key)] = value

    def __delitem__(self, key):
        """Unset a parameter value.

        :Parameters:
            - `key`: the parameter name
        :Types:
            - `key`: `str`
        """
        del self._settings[key]

    def __repr__(self):
        return "PrepSettings({0!r})".format(self._settings)

    def get(self, key, local_default = None, required = False):
        """Get a parameter value.

        If parameter is not set, return `local_default` if it is not `None`
        or the global default otherwise.

        :Raise `KeyError`: if parameter has no value and no global default

        :Return: parameter value
        """
        if key in self._settings:
            return self._settings[key]
        if local_default is not None:
            return local_default
        if key in self._defs:
            return self._defs[key].default
        if required:
            raise KeyError(key)
        return local_default

    def load_arguments(self, args):
        """Load settings from parsed command line arguments.

        Only the arguments created by `get_arg_parser` with a non-`None`
        value are used.

        :Parameters:
            - `args`: command line arguments
        :Types:
            - `args`: `argparse.Namespace`
        """
        for name, setting in self._defs.items():
            if not setting.cmdline_help:
                continue
            value = getattr(args, name, None)
            if value is not None:
                self[name] = value

    @classmethod
    def add_setting(cls, name, **kwargs):
        """Register a setting definition.

        Registering the same setting twice is allowed when the definitions
        agree.

        :raise ValueError: when the setting is already registered with
            a different type or default.
        """
        setting_def = _SettingDefinition(name, **kwargs)
        if name not in cls._defs:
            cls._defs[name] = setting_def
            return
        duplicate = cls._defs[name]
        if duplicate.type != setting_def.type:
            raise ValueError("Setting duplicate, with a different type")
        if duplicate.default != setting_def.default:
            raise ValueError("Setting duplicate, with a different default")

    @classmethod
    def get_arg_parser(cls, settings = None, option_prefix = "--",
                                                        add_help = False):
        """Make a command-line option parser for the registered settings.

        The parser is meant to be used as a parent of the application
        argument parser. Setting ``some_name`` becomes option
        ``--some-name``.

        :Parameters:
            - `settings`: names of the settings to include, all settings
              with `cmdline_help` by default
            - `option_prefix`: option name prefix
            - `add_help`: passed to the `argparse.ArgumentParser`
        :Types:
            - `settings`: sequence of `str`
            - `option_prefix`: `str`
            - `add_help`: `bool`

        :returntype: `argparse.ArgumentParser`
        """
        parser = argparse.ArgumentParser(add_help = add_help)
        for name, setting in sorted(cls._defs.items()):
            if not setting.cmdline_help:
                continue
            if settings is not None and name not in settings:
                continue
            if setting.validator is not None:
                opt_type = setting.validator
            else:
                opt_type = setting.type
            parser.add_argument(option_prefix + name.replace("_", "-"),
                                dest = name, type = opt_type,
                                help = setting.cmdline_help)
        return parser

    @staticmethod
    def validate_positive_int(value):
        """Validator for positive integer settings."""
        value = int(value)
        if value <= 0:
            raise ValueError("Positive number required")
        return value

    @staticmethod
    def get_choice_validator(choices):
        """Make a validator accepting only one of the `choices`."""
        def validate_choice(value):
            value = str(value)
            if value in choices:
                return value
            raise ValueError("Not one of: {0}".format(", ".join(choices)))
        return validate_choice

PrepSettings.add_setting("unicode_version", type = str, default = "3.2.0",
        validator = PrepSettings.get_choice_validator(("3.2.0", "current")),
        cmdline_help = "Unicode database for normalization: 3.2.0 or current",
    )

PrepSettings.add_setting("max_length", type = int, default = None,
        validator = PrepSettings.validate_positive_int,
        cmdline_help = "Maximum length of the prepared strings",
    )

# vi: sts=4 et sw=4
