# pldoc -- Document writers
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
Writers that render document trees.

  - L{html.HTMLWriter} renders a tree as an HTML element tree.
  - L{latex.LatexWriter} renders a tree as a stream of LaTeX tokens,
    which a separate print pass turns into text.

Both writers derive from L{DocWriter}, which dispatches each node to
the writer's C{write_<tag>} method, and both use a L{ModeStack} to
wrap runs of predicate descriptions in a single environment.
"""
__docformat__ = 'epytext en'

from pldoc import log
from pldoc.dom import NODE_TYPES, Node, Tag, is_predicate_list
from pldoc.options import make_options

######################################################################
## Mode stack
######################################################################

class ModeStack:
    """
    The environments that are currently open in the output, innermost
    last.  The base mode is never closed and emits no markers.

    @ivar opened: The number of open markers emitted so far.
    @ivar closed: The number of close markers emitted so far.
    """
    def __init__(self, open_mode, close_mode, base='body'):
        """
        @param open_mode: Called with a mode name to emit the marker
            that opens it.
        @param close_mode: Called with a mode name to emit the marker
            that closes it.
        """
        self._open = open_mode
        self._close = close_mode
        self._stack = [base]
        self.opened = 0
        self.closed = 0

    def top(self):
        return self._stack[-1]

    def modes(self):
        return list(self._stack)

    def need(self, mode):
        """
        Make C{mode} the innermost mode: do nothing if it already is,
        close the modes inside it if it is open, and open it
        otherwise.
        """
        if self._stack[-1] == mode:
            return
        if mode in self._stack:
            self.pop_to(mode)
        else:
            self._stack.append(mode)
            self.opened += 1
            self._open(mode)

    def pop_to(self, mode):
        """
        Close modes, innermost first, until C{mode} is the innermost
        mode or only the base mode is left.
        """
        while self._stack[-1] != mode and len(self._stack) > 1:
            self.closed += 1
            self._close(self._stack.pop())

######################################################################
## Writer base class
######################################################################

def group_tags(nodes):
    """
    Group consecutive L{Tag} nodes.  Each run of tags is replaced by
    a C{list} of those tags; other nodes are left alone.
    """
    groups = []
    for node in nodes:
        if isinstance(node, Tag):
            if groups and isinstance(groups[-1], list):
                groups[-1].append(node)
            else:
                groups.append([node])
        else:
            groups.append(node)
    return groups

TAG_TITLES = {
    'param': 'Parameters',
    'arg': 'Parameters',
    'author': 'Author',
    'version': 'Version',
    'see': 'See also',
    'deprecated': 'Deprecated',
    'compat': 'Compatibility',
    'bug': 'Bug',
    'tbd': 'To be done',
    'throws': 'Throws',
    'error': 'Errors',
    'license': 'License',
    'copyright': 'Copyright',
    }

def tag_title(keyword):
    """
    @return: The title displayed for tags with the given keyword.
    """
    return TAG_TITLES.get(keyword, keyword.capitalize())

class DocWriter:
    """
    The base class for writers.  Subclasses define a C{write_<tag>}
    method for each node class in L{pldoc.dom.NODE_TYPES}, and
    L{write_unknown} for anything else.

    @ivar _docindex: The index used to resolve references, or C{None}.
    @ivar _options: The rendering options.
    @type _options: L{pldoc.options.Options}
    """
    def __init__(self, docindex=None, options=None, **kwargs):
        self._docindex = docindex
        self._options = make_options(options, **kwargs)

    def dispatch(self, node, *args):
        """
        Render C{node} with the matching C{write_<tag>} method.  Nodes
        that are not document tree nodes, or that this writer has no
        method for, are reported and rendered by L{write_unknown}.
        """
        if isinstance(node, NODE_TYPES):
            method = getattr(self, 'write_' + node.tag, None)
            if method is not None:
                return method(node, *args)
        log.warn('%s: cannot render %r; writing it as text' %
                 (self.__class__.__name__, node))
        return self.write_unknown(node, *args)

    def write_unknown(self, node, *args):
        raise NotImplementedError()

    def resolve(self, ref):
        """
        @return: The index entry a L{pldoc.dom.PredicateRef} refers
            to, or C{None}.
        @rtype: L{pldoc.docindex.IndexEntry}
        """
        if self._docindex is None:
            return None
        return self._docindex.lookup(ref.name, ref.arity, ref.module,
                                     ref.kind, fallback=False)

def placeholder_text(node):
    """The text shown in place of a node that cannot be rendered."""
    if isinstance(node, str):
        return node
    if isinstance(node, Node) and hasattr(node, 'text'):
        return node.text
    return '[%s]' % node.__class__.__name__
