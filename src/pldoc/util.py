# pldoc -- Utility functions
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
Miscellaneous utility functions that are used by multiple modules.
"""
__docformat__ = 'epytext en'

import re

SCRWIDTH = 75

def wordwrap(str, indent=0, right=SCRWIDTH, startindex=0):
    """
    Word-wrap the given string.  All sequences of whitespace are
    converted into spaces, and the string is broken up into lines,
    where each line begins with C{indent} spaces, followed by one or
    more (space-delimited) words whose length is less than
    C{right-indent}.  If a word is longer than C{right-indent}
    characters, then it is put on its own line.

    @param str: The string that should be word-wrapped.
    @type str: C{string}
    @param indent: The left margin of the string.  C{indent} spaces
        will be inserted at the beginning of every line.
    @type indent: C{int}
    @param right: The right margin of the string.
    @type right: C{int}
    @param startindex: The index at which the first line starts.  This
        is useful if you want to include other contents on the first
        line.
    @type startindex: C{int}
    @return: A word-wrapped version of C{str}.
    @rtype: C{string}
    """
    words = str.split()
    out_str = ' '*(indent-startindex)
    charindex = max(indent, startindex)
    for word in words:
        if charindex+len(word) > right and charindex > indent:
            out_str = out_str.rstrip() + '\n' + ' '*indent
            charindex = indent
        out_str += word+' '
        charindex += len(word)+1
    return out_str.rstrip()+'\n'

_WHITESPACE = re.compile(r'\s+')

def normalize_space(str):
    """
    Collapse every run of whitespace in C{str} to a single space, and
    strip leading and trailing whitespace.
    """
    return _WHITESPACE.sub(' ', str).strip()

_IDENTIFIER = re.compile(r'[a-z][a-zA-Z0-9_]*$')

def is_identifier(str):
    """
    @return: True if C{str} is an atom that can be written without
        quotes: a lower-case letter followed by letters, digits and
        underscores.
    @rtype: C{boolean}
    """
    return _IDENTIFIER.match(str) is not None

def common_indent(lines):
    """
    @return: The smallest indentation of any non-blank line in
        C{lines}, or 0 if every line is blank.
    @rtype: C{int}
    """
    indents = [len(line) - len(line.lstrip())
               for line in lines if line.strip()]
    if not indents: return 0
    return min(indents)
