# pldoc -- Document tree
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
The document tree shared by the markup parser and by every writer.

A document tree is built from a closed set of node classes, listed in
L{NODE_TYPES}.  The parser only ever produces these classes, and each
writer provides a handler for each of them.  Nodes are immutable:
their children are stored as tuples, and assigning to an attribute
after construction raises C{AttributeError}.  This makes it safe to
render one tree with several writers, in any order.

Nodes compare by structure::

    >>> Paragraph('Hello') == Paragraph([PlainText('Hello')])
    True
    >>> Emphasis('bold', ['see ', InlineCode('x')]).content[0]
    PlainText('see ')

Wherever a node expects a sequence of child nodes (C{content}), a
plain string is accepted and wrapped in a L{PlainText} node, and so is
each string in a sequence.
"""
__docformat__ = 'epytext en'

######################################################################
## Base class
######################################################################

class Node:
    """
    The base class for document tree nodes.

    @cvar tag: The name used to select the writer method that renders
        this node (C{write_<tag>}).
    @cvar _fields: The names of the constructor arguments, in order.
        They define equality and C{repr}.
    """
    tag = None
    _fields = ()
    __slots__ = ()

    def _set(self, **values):
        for (name, val) in values.items():
            object.__setattr__(self, name, val)

    def __setattr__(self, name, val):
        raise AttributeError('%s nodes are immutable' %
                             self.__class__.__name__)

    def __delattr__(self, name):
        raise AttributeError('%s nodes are immutable' %
                             self.__class__.__name__)

    def __eq__(self, other):
        if type(self) is not type(other): return False
        for field in self._fields:
            if getattr(self, field) != getattr(other, field):
                return False
        return True

    def __ne__(self, other):
        return not self.__eq__(other)

    __hash__ = None

    def __repr__(self):
        args = [repr(getattr(self, field)) for field in self._fields]
        return '%s(%s)' % (self.__class__.__name__, ', '.join(args))

    def children(self):
        """
        @return: The nodes directly contained in this node, in
            document order.
        @rtype: C{list} of L{Node}
        """
        return []

def _content(content):
    """Normalize a content argument to a tuple of nodes."""
    if isinstance(content, str):
        if not content: return ()
        return (PlainText(content),)
    if isinstance(content, Node):
        return (content,)
    return tuple([isinstance(node, str) and PlainText(node) or node
                  for node in content])

######################################################################
## Block nodes
######################################################################

class Document(Node):
    """The root of a document tree."""
    tag = 'document'
    _fields = ('content',)
    __slots__ = _fields

    def __init__(self, content=()):
        self._set(content=_content(content))

    def children(self):
        return list(self.content)

class Heading(Node):
    """
    A section heading.

    @ivar level: The heading level, from 1 (outermost) to 4.
    """
    tag = 'heading'
    _fields = ('level', 'content')
    __slots__ = _fields

    def __init__(self, level, content):
        if not 1 <= level <= 4:
            raise ValueError('Bad heading level %r' % (level,))
        self._set(level=level, content=_content(content))

    def children(self):
        return list(self.content)

class Paragraph(Node):
    tag = 'paragraph'
    _fields = ('content',)
    __slots__ = _fields

    def __init__(self, content):
        self._set(content=_content(content))

    def children(self):
        return list(self.content)

class List(Node):
    """
    A bulleted or numbered list.  Each item is a tuple of nodes: the
    inline nodes of the item's first paragraph, followed by any nested
    blocks.
    """
    tag = 'list'
    _fields = ('ordered', 'items')
    __slots__ = _fields

    def __init__(self, ordered, items):
        self._set(ordered=bool(ordered),
                  items=tuple([_content(item) for item in items]))

    def children(self):
        return [node for item in self.items for node in item]

class DescriptionList(Node):
    """
    A list of C{(term, body)} pairs.  The term is a L{Term} or a
    L{PredicateHeader}; the body is a tuple of nodes.
    """
    tag = 'description_list'
    _fields = ('items',)
    __slots__ = _fields

    def __init__(self, items):
        self._set(items=tuple([(term, _content(body))
                               for (term, body) in items]))

    def is_predicate_list(self):
        """
        @return: True if this list describes predicates, rather than
            plain terms.
        """
        return bool(self.items) and isinstance(self.items[0][0],
                                               PredicateHeader)

    def children(self):
        nodes = []
        for (term, body) in self.items:
            nodes.append(term)
            nodes.extend(body)
        return nodes

class Term(Node):
    """
    The term of a C{$ term: text} entry.

    @ivar text: The term as written.
    @ivar signature: The term read as a callable term, or C{None} if
        it could not be read.
    @type signature: L{pldoc.markup.modes.Signature}
    """
    tag = 'term'
    _fields = ('text', 'signature')
    __slots__ = _fields

    def __init__(self, text, signature=None):
        self._set(text=text, signature=signature)

class PredicateHeader(Node):
    """
    The term of a predicate description: the mode lines that declare
    one predicate.

    @ivar signatures: The declared signatures, in order.
    @type signatures: C{tuple} of L{pldoc.markup.modes.Signature}
    @ivar public: False if the predicate is not exported.
    @ivar module: The module defining the predicate, if known.
    """
    tag = 'predicate_header'
    _fields = ('signatures', 'public', 'module')
    __slots__ = _fields

    def __init__(self, signatures, public=True, module=None):
        self._set(signatures=tuple(signatures), public=bool(public),
                  module=module)

class CodeBlock(Node):
    """A verbatim block.  Its text is never parsed further."""
    tag = 'code_block'
    _fields = ('text',)
    __slots__ = _fields

    def __init__(self, text):
        self._set(text=text)

class Tag(Node):
    """
    A tag from the trailing tag section, such as C{@author} or
    C{@see}.  C{keyword} is stored without the C{@}.
    """
    tag = 'tag'
    _fields = ('keyword', 'value')
    __slots__ = _fields

    def __init__(self, keyword, value):
        self._set(keyword=keyword, value=_content(value))

    def children(self):
        return list(self.value)

class ParamList(Node):
    """
    The C{@param} entries of a description, as C{(name, description)}
    pairs.
    """
    tag = 'param_list'
    _fields = ('entries',)
    __slots__ = _fields

    def __init__(self, entries):
        self._set(entries=tuple([(name, _content(descr))
                                 for (name, descr) in entries]))

    def children(self):
        return [node for (name, descr) in self.entries for node in descr]

######################################################################
## Inline nodes
######################################################################

class PlainText(Node):
    tag = 'plain_text'
    _fields = ('text',)
    __slots__ = _fields

    def __init__(self, text):
        self._set(text=text)

class InlineCode(Node):
    tag = 'inline_code'
    _fields = ('text',)
    __slots__ = _fields

    def __init__(self, text):
        self._set(text=text)

EMPHASIS_KINDS = ('bold', 'italic')

class Emphasis(Node):
    tag = 'emphasis'
    _fields = ('kind', 'content')
    __slots__ = _fields

    def __init__(self, kind, content):
        if kind not in EMPHASIS_KINDS:
            raise ValueError('Bad emphasis kind %r' % (kind,))
        self._set(kind=kind, content=_content(content))

    def children(self):
        return list(self.content)

LINK_KINDS = ('url', 'file')

class Link(Node):
    """
    A hyperlink to a URL or to a file.  If C{content} is empty, the
    target itself is displayed.
    """
    tag = 'link'
    _fields = ('target', 'content', 'kind')
    __slots__ = _fields

    def __init__(self, target, content=(), kind='url'):
        if kind not in LINK_KINDS:
            raise ValueError('Bad link kind %r' % (kind,))
        self._set(target=target, content=_content(content), kind=kind)

    def children(self):
        return list(self.content)

REF_KINDS = ('predicate', 'dcg_rule')

class PredicateRef(Node):
    """
    A reference to a predicate (C{name/arity}) or to a grammar rule
    (C{name//arity}), optionally qualified by a module.
    """
    tag = 'predicate_ref'
    _fields = ('name', 'arity', 'kind', 'module')
    __slots__ = _fields

    def __init__(self, name, arity, kind='predicate', module=None):
        if kind not in REF_KINDS:
            raise ValueError('Bad reference kind %r' % (kind,))
        self._set(name=name, arity=arity, kind=kind, module=module)

    def indicator(self):
        """
        @return: The reference as written: C{name/arity} or
            C{name//arity}, without the module.
        """
        if self.kind == 'dcg_rule':
            return '%s//%d' % (self.name, self.arity)
        return '%s/%d' % (self.name, self.arity)

NODE_TYPES = (Document, Heading, Paragraph, List, DescriptionList, Term,
              PredicateHeader, CodeBlock, Tag, ParamList, PlainText,
              InlineCode, Emphasis, Link, PredicateRef)
"""The closed set of node classes that may appear in a document tree."""

INLINE_TYPES = (PlainText, InlineCode, Emphasis, Link, PredicateRef)

######################################################################
## Tree utilities
######################################################################

def iter_nodes(tree):
    """
    Generate every node of C{tree} in document order, starting with
    C{tree} itself.  C{tree} may also be a sequence of nodes.
    """
    if isinstance(tree, Node):
        stack = [tree]
    else:
        stack = list(tree)[::-1]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(node.children()[::-1])

def to_plaintext(tree):
    """
    Flatten a node, or a sequence of nodes, to its text.  Blocks are
    separated by blank lines; markup is dropped.

    @rtype: C{string}
    """
    if not isinstance(tree, Node):
        return ''.join([to_plaintext(node) for node in tree])
    if isinstance(tree, (PlainText, InlineCode, CodeBlock)):
        text = tree.text
    elif isinstance(tree, Term):
        text = tree.text
    elif isinstance(tree, PredicateRef):
        text = tree.indicator()
        if tree.module: text = '%s:%s' % (tree.module, text)
    elif isinstance(tree, Link):
        text = to_plaintext(tree.content) or tree.target
    elif isinstance(tree, PredicateHeader):
        text = '\n'.join([str(sig) for sig in tree.signatures])
    elif isinstance(tree, Tag):
        text = '@%s %s' % (tree.keyword, to_plaintext(tree.value))
    elif isinstance(tree, ParamList):
        text = '\n'.join(['@param %s %s' % (name, to_plaintext(descr))
                          for (name, descr) in tree.entries])
    elif isinstance(tree, List):
        text = '\n'.join(['* ' + to_plaintext(item)
                          for item in tree.items])
    elif isinstance(tree, DescriptionList):
        text = '\n'.join([to_plaintext(term) + '\n' + to_plaintext(body)
                          for (term, body) in tree.items])
    elif isinstance(tree, Document):
        return '\n'.join([to_plaintext(node) for node in tree.content])
    else:
        text = ''.join([to_plaintext(node) for node in tree.children()])
    if not isinstance(tree, INLINE_TYPES):
        text = text.rstrip('\n') + '\n'
    return text

def is_predicate_list(node):
    """
    @return: True if C{node} is a list of predicate descriptions.
    """
    return isinstance(node, DescriptionList) and node.is_predicate_list()
