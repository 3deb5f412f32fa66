# pldoc
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
Documentation toolkit for Prolog structured comments.  Pldoc takes the
structured comments that precede predicate definitions, parses the
lightweight wiki markup inside them, and renders the result as HTML or
as LaTeX.

Architecture graph::

    structured comment text
              |
              V
      +---------------+    Strips the comment prefix, reads mode
      |  markup.wiki  |    lines (markup.modes) and parses the wiki
      +---------------+    markup into a document tree (dom).
              |
              V
      +---------------+    Registers every documented predicate so
      |   docindex    |    that cross-references can be resolved.
      +---------------+
              |
       +------+-------+
       |              |
       V              V
  +---------+   +----------+
  |  html   |   |  latex   |  docwriter backends; both walk the same
  +---------+   +----------+  tree without modifying it.

  1. Collect the documented objects of a source file
     (L{pldoc.docbuilder.DocObject}, L{pldoc.docbuilder.FileDoc}).
  2. Index them once (L{pldoc.docbuilder.index_objects}).
  3. Build the document tree (L{pldoc.docbuilder.file_tree}).
  4. Render it with L{pldoc.docwriter.html.HTMLWriter} or
     L{pldoc.docwriter.latex.LatexWriter}.

@author: U{Edward Loper<edloper@gradient.cis.upenn.edu>}
@requires: Python 3.6+
@version: 1.0
"""
__docformat__ = 'epytext en'

# General info
__version__ = '1.0'
__author__ = 'Edward Loper <edloper@gradient.cis.upenn.edu>'
__url__ = 'http://epydoc.sourceforge.net'
__license__ = 'IBM Open Source License'

DEBUG = False
"""True if debugging is turned on."""
