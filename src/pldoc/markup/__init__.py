# pldoc -- Markup parsing
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
Parsers for the contents of structured comments.

  - L{wiki}: the wiki markup of comment bodies.
  - L{modes}: mode lines, and the predicate signatures they declare.
  - L{terms}: the term reader used by L{modes}.
"""
__docformat__ = 'epytext en'
