#!/usr/bin/env python

"""Set up the CQL Python Driver package.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

This package can be installed using pip as follows:

    pip install pycql

To install with the test requirements:

    pip install 'pycql[test]'
"""

import os
import re

from setuptools import setup

with open(os.path.join(os.path.dirname(__file__), 'pycql', '__init__.py')) as v:
    m = re.search(r"^ *__version__ *= *'(.*?)'", v.read(), re.M)
    if m is None:
        raise RuntimeError("Cannot detect version in pycql/__init__.py")
    VERSION = m.group(1)

readme = os.path.join(os.path.dirname(__file__), 'README.rst')

setup(
    name='pycql',
    version=VERSION,
    description='PEP 249 statement layer for CQL servers',
    keywords='cql cassandra dbapi statement driver',
    packages=['pycql'],
    license='BSD License',
    long_description=open(readme).read(),
    python_requires='>=3.9',
    install_requires=['tzlocal>=3.0', 'jdcal>=1.4'],
    extras_require=dict(test=['pytest>=7.0']),
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: SQL',
        'Topic :: Database :: Front-Ends',
    ],
)
