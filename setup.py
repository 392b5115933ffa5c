#!/usr/bin/env python
from setuptools import setup

setup(
    name='python-quoted-string',
    version='1.0',
    description=('A Python library to quote, unquote and compare RFC 5322 quoted-strings.'),
    long_description=(
"""
Quoting and unquoting of the quoted-string token used by mail (RFC 5322,
RFC 6532) and HTTP/MIME media type parameters, without copying the input
when no escaping is involved.
"""
    ),
    packages=['python_quoted_string'],
    package_dir={'python_quoted_string': 'python_quoted_string'},
    python_requires='>=3.6',
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Environment :: Web Environment',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Communications :: Email',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
    zip_safe=True,
)
