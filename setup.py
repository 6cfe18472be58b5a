#! /usr/bin/env python

import os.path
import sys

from setuptools import setup

version = "1.0.0"

if (not os.path.exists(os.path.join("pysaslprep","version.py"))
                                    or "make_version" in sys.argv):
    with open("pysaslprep/version.py", "w") as version_py:
        version_py.write("# pylint: disable=C0111,C0103\n")
        version_py.write("version = {0!r}\n".format(version))
    if "make_version" in sys.argv:
        sys.exit(0)
else:
    exec(open(os.path.join("pysaslprep", "version.py")).read())


if version.endswith("-git"):
    download_url = None
else:
    download_url = 'https://github.com/Jajcus/pysaslprep/archive/{0}.tar.gz'.format(version)

setup(
    name =      'pysaslprep',
    version =   version,
    description =   'SASLprep (RFC 4013) and stringprep (RFC 3454) for Python',
    author =    'Jacek Konieczny',
    author_email =  'jajcus@jajcus.net',
    download_url = download_url,
    url =       'https://github.com/Jajcus/pysaslprep',
    classifiers = [
            "Development Status :: 4 - Beta",
            "Intended Audience :: Developers",
            "License :: OSI Approved :: GNU Library or Lesser General Public License (LGPL)",
            "Operating System :: OS Independent",
            "Programming Language :: Python",
            "Programming Language :: Python :: 3",
            "Topic :: Security",
            "Topic :: Text Processing",
            "Topic :: Software Development :: Libraries :: Python Modules",
        ],
    license =   'LGPL',
    python_requires = '>=3.4',
    install_requires = [],
    extras_require = {
        'test': ['pytest'],
    },
    packages = [
        'pysaslprep',
        'pysaslprep.test',
    ],
    test_suite = "pysaslprep.test.discover",
)
