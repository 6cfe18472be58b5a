#!/usr/bin/python
# -*- coding: utf-8 -*-

"""
Prepare usernames or passwords with SASLprep.

Strings are taken from the command line or, when none are given, read
from the standard input, one per line. Each prepared string is printed
on a separate line; strings which cannot be prepared are reported
on the standard error and make the script exit with a non-zero status.
"""

import sys
import logging
import argparse

from pysaslprep import saslprep_profile, StringprepError
from pysaslprep.settings import PrepSettings

def main():
    """Parse the command-line arguments and prepare the strings."""
    parser = argparse.ArgumentParser(description = 'SASLprep tool',
                                    parents = [PrepSettings.get_arg_parser()])
    parser.add_argument('strings', metavar = 'STRING', nargs = '*',
                        help = 'Strings to prepare (default: read stdin)')
    parser.add_argument('--query', action = 'store_true',
                        help = 'Prepare as query strings'
                                            ' (allow unassigned code points)')
    parser.add_argument('--check', action = 'store_true',
                        help = 'Only check the raw input for prohibited'
                                                                ' characters')
    parser.add_argument('--debug',
                        action = 'store_const', dest = 'log_level',
                        const = logging.DEBUG, default = logging.INFO,
                        help = 'Print debug messages')
    parser.add_argument('--quiet', const = logging.ERROR,
                        action = 'store_const', dest = 'log_level',
                        help = 'Print only error messages')

    args = parser.parse_args()
    settings = PrepSettings()
    settings.load_arguments(args)

    logging.basicConfig(level = args.log_level)

    profile = saslprep_profile(settings)
    if args.strings:
        strings = args.strings
    else:
        strings = (line.rstrip(u"\r\n") for line in sys.stdin)

    failed = 0
    for number, string in enumerate(strings, 1):
        if args.check:
            print(u"prohibited" if profile.is_prohibited(string) else u"ok")
            continue
        try:
            if args.query:
                result = profile.prepare_query(string)
            else:
                result = profile.prepare(string)
        except StringprepError as err:
            logging.error(u"String #{0}: {1} ({2})".format(number, err,
                                                            err.kind.value))
            failed += 1
            continue
        print(result)
    if failed:
        sys.exit(1)

if __name__ == '__main__':
    main()
