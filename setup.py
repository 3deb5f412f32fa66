#!/usr/bin/env python
#
# Setup script for pldoc, the Prolog documentation toolkit
#
# Edward Loper
#

from setuptools import setup
import re

# Read the package metadata without importing it.
with open('src/pldoc/__init__.py') as f:
    INIT = f.read()

def _meta(name):
    return re.search(r"^__%s__ = '(.*)'$" % name, INIT, re.M).group(1)

VERSION = _meta('version')
(AUTHOR, EMAIL) = re.match(r'^(.*?)\s*<(.*)>$', _meta('author')).groups()
URL = _meta('url')

setup(name="pldoc",
      description="Documentation toolkit for Prolog structured comments",
      version=VERSION,
      author=AUTHOR,
      author_email=EMAIL,
      url=URL,
      package_dir={'': 'src'},
      packages=['pldoc', 'pldoc.markup', 'pldoc.docwriter', 'pldoc.test'],
      python_requires='>=3.6')
