# pldoc -- Predicate signatures
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
Predicate signatures, and the mode lines that declare them.

A structured comment starts with one or more X{mode lines}, each
declaring one way of calling the predicate::

    %!  member(?Elem, ?List) is nondet.
    %!  atom_length(+Atom, -Length:integer) is det.
    %!  phrase(:Body, ?List)// is nondet.
    %!  +Number1 =:= +Number2 is semidet.

L{parse_mode_line} reads one such line into a L{Signature};
L{process_modes} splits the mode lines of a comment from its body.
Whether a head is typeset as an operator is decided here, once, and
stored in L{Signature.fixity}.
"""
__docformat__ = 'epytext en'

import re

from pldoc.markup import terms
from pldoc.markup.terms import Atom, Var, Compound, PList, String, \
     TermSyntaxError

MODE_INDICATORS = ('+', '-', '?', '@', ':')
"""The argument mode prefixes: input, output, either, no further
instantiation and meta-argument."""

DETERMINISM = ('det', 'semidet', 'nondet', 'multi', 'failure', 'unknown')

######################################################################
## Signatures
######################################################################

class Arg:
    """
    One argument slot of a signature.

    @ivar mode: The mode indicator, or C{None}.
    @ivar name: The argument name, or C{None} if the slot has no name;
        see L{display_name}.
    @ivar type: The type annotation as text, or C{None}.
    @ivar ellipsis: True for a repeated argument (C{Arg...}).
    """
    def __init__(self, name, mode=None, type=None, ellipsis=False):
        self.name = name
        self.mode = mode
        self.type = type
        self.ellipsis = ellipsis

    def display_name(self, index):
        """
        @param index: The position of this argument, counting from 1.
        @return: The argument name; unnamed slots are called
            C{ArgN}.
        """
        if self.name is None: return 'Arg%d' % index
        return self.name

    def rename(self, name):
        return Arg(name, self.mode, self.type, self.ellipsis)

    def to_text(self, index):
        text = (self.mode or '') + self.display_name(index)
        if self.type is not None: text += ':' + self.type
        if self.ellipsis: text += '...'
        return text

    def __eq__(self, other):
        return (isinstance(other, Arg) and
                (self.name, self.mode, self.type, self.ellipsis) ==
                (other.name, other.mode, other.type, other.ellipsis))

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((self.name, self.mode, self.type, self.ellipsis))

    def __repr__(self):
        return 'Arg(%r, %r, %r, %r)' % (self.name, self.mode, self.type,
                                        self.ellipsis)

class Signature:
    """
    The declared call pattern of a predicate or grammar rule.

    @ivar name: The predicate name.
    @ivar args: The argument slots.
    @type args: C{tuple} of L{Arg}
    @ivar det: The determinism; one of L{DETERMINISM}.
    @ivar dcg: True for a grammar rule (C{name//N}).
    @ivar fixity: C{'infix'}, C{'prefix'} or C{'postfix'} if the head
        is an operator; C{None} for a plain head.
    @ivar anchor: False if an earlier signature in the same comment
        has the same L{key}, in which case this one is not a link
        target.
    """
    def __init__(self, name, args=(), det='unknown', dcg=False,
                 fixity=None, anchor=True):
        if det not in DETERMINISM:
            raise ValueError('Bad determinism %r' % (det,))
        self.name = name
        self.args = tuple(args)
        self.det = det
        self.dcg = dcg
        self.fixity = fixity
        self.anchor = anchor

    def arity(self):
        """The number of arguments as written."""
        return len(self.args)
    arity = property(arity)

    def key(self):
        """
        The identity of the predicate this signature declares,
        C{(functor, arity)}.  A grammar rule C{name//N} is the
        predicate C{name/N+2}.
        """
        if self.dcg: return (self.name, len(self.args)+2)
        return (self.name, len(self.args))
    key = property(key)

    def pi(self):
        """The predicate indicator: C{name/N} or C{name//N}."""
        if self.dcg: return '%s//%d' % (self.name, len(self.args))
        return '%s/%d' % (self.name, len(self.args))
    pi = property(pi)

    def _replace(self, **changes):
        values = dict(name=self.name, args=self.args, det=self.det,
                      dcg=self.dcg, fixity=self.fixity, anchor=self.anchor)
        values.update(changes)
        return Signature(**values)

    def bind(self, bindings):
        """
        Return a copy of this signature, where each argument named by
        a key of C{bindings} is renamed to the corresponding value.

        @type bindings: C{dict}
        """
        args = [arg.rename(bindings.get(arg.name, arg.name))
                for arg in self.args]
        return self._replace(args=args)

    def with_anchor(self, anchor):
        return self._replace(anchor=anchor)

    def __eq__(self, other):
        return (isinstance(other, Signature) and
                (self.name, self.args, self.det, self.dcg, self.fixity,
                 self.anchor) ==
                (other.name, other.args, other.det, other.dcg,
                 other.fixity, other.anchor))

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((self.name, self.args, self.det, self.dcg))

    def __repr__(self):
        return '<Signature %s>' % self

    def __str__(self):
        args = [arg.to_text(i+1) for (i, arg) in enumerate(self.args)]
        if self.fixity == 'infix':
            text = '%s %s %s' % (args[0], self.name, args[1])
        elif self.fixity == 'prefix':
            text = '%s %s' % (self.name, args[0])
        elif self.fixity == 'postfix':
            text = '%s %s' % (args[0], self.name)
        elif args:
            text = '%s(%s)' % (terms.atom_text(self.name), ', '.join(args))
        else:
            text = terms.atom_text(self.name)
        if self.dcg: text += '//'
        if self.det != 'unknown': text += ' is ' + self.det
        return text

######################################################################
## Reading mode lines
######################################################################

def _arg_from_term(term):
    mode = None
    ellipsis = False
    # '...' binds tighter than the mode prefix, but accept both orders.
    if isinstance(term, Compound) and term.functor == '...' and \
           term.arity() == 1:
        ellipsis = True
        term = term.args[0]
    if isinstance(term, Compound) and term.arity() == 1 and \
           term.functor in MODE_INDICATORS:
        mode = term.functor
        term = term.args[0]
    elif isinstance(term, Atom) and term.name in MODE_INDICATORS:
        return Arg(None, term.name, None, ellipsis)
    if isinstance(term, Compound) and term.functor == '...' and \
           term.arity() == 1:
        ellipsis = True
        term = term.args[0]
    type = None
    if isinstance(term, Compound) and term.functor == ':' and \
           term.arity() == 2:
        type = terms.write_term(term.args[1], 999)
        term = term.args[0]
    if isinstance(term, Var):
        name = term.name
    else:
        name = terms.write_term(term, 999)
    return Arg(name, mode, type, ellipsis)

def signature_from_head(head, det='unknown', dcg=False):
    """
    Build a signature from a head term that has already been read.

    @type head: L{terms.Term}
    @return: The signature, or C{None} if C{head} is not callable.
    """
    if isinstance(head, Atom):
        return Signature(head.name, (), det, dcg)
    if not isinstance(head, Compound):
        return None
    args = [_arg_from_term(arg) for arg in head.args]
    fix = None
    if not dcg:
        fix = terms.fixity(head.functor, len(args))
    return Signature(head.functor, args, det, dcg, fix)

def _bindings(term):
    """Read a C{[Name=Var, ...]} list into a C{{var: name}} dict."""
    if not isinstance(term, PList) or term.tail is not None:
        return None
    bindings = {}
    for item in term.items:
        if not (isinstance(item, Compound) and item.functor == '=' and
                item.arity() == 2 and isinstance(item.args[1], Var)):
            return None
        name = item.args[0]
        if isinstance(name, Atom): bindings[item.args[1].name] = name.name
        elif isinstance(name, String): bindings[item.args[1].name] = name.text
        else: return None
    return bindings

_DET_RE = re.compile(r'(.*\S)\s+is\s+([a-z]\w*)\s*\.?\s*$', re.DOTALL)

def parse_mode_line(text):
    """
    Read a mode line.  The recognized forms are C{Head},
    C{Head is Det}, C{Head//} and C{Head// is Det}, optionally
    wrapped as C{mode(Form, [Name=Var, ...])}, whose bindings rename
    the arguments.  A trailing C{.} is allowed.

    @return: The signature declared by C{text}, or C{None} if C{text}
        is not a mode line.
    @rtype: L{Signature} or C{None}
    """
    if not text.strip():
        return None
    det = 'unknown'
    # The determinism is split off as text, so that operator heads
    # such as "+X =:= +Y is semidet" need no priority juggling.
    m = _DET_RE.match(text)
    if m:
        if m.group(2) not in DETERMINISM:
            return None
        text, det = m.group(1), m.group(2)
    try:
        term = terms.read_term(text)
    except TermSyntaxError:
        return None

    bindings = None
    if (isinstance(term, Compound) and term.functor == 'mode' and
        term.arity() == 2):
        bindings = _bindings(term.args[1])
        if bindings is None: return None
        term = term.args[0]

    if (isinstance(term, Compound) and term.functor == 'is' and
        term.arity() == 2 and isinstance(term.args[1], Atom)):
        if term.args[1].name not in DETERMINISM:
            return None
        det = term.args[1].name
        term = term.args[0]

    dcg = False
    if (isinstance(term, Compound) and term.functor == '//' and
        term.arity() == 1):
        dcg = True
        term = term.args[0]

    signature = signature_from_head(term, det, dcg)
    if signature is not None and bindings:
        signature = signature.bind(bindings)
    return signature

def process_modes(lines):
    """
    Split the leading mode lines from the rest of a comment.  Mode
    lines end at the first blank line or at the first line that is
    not a mode line.  When several mode lines declare the same
    predicate, only the first one is an anchor.

    @param lines: The comment lines, with the comment prefix removed.
    @type lines: C{list} of C{string}
    @return: C{(signatures, rest)}, where C{rest} holds the lines
        that follow the mode lines.
    @rtype: C{tuple}
    """
    signatures = []
    seen = set()
    index = 0
    while index < len(lines):
        signature = parse_mode_line(lines[index])
        if signature is None:
            break
        if signature.key in seen:
            signature = signature.with_anchor(False)
        seen.add(signature.key)
        signatures.append(signature)
        index += 1
    return signatures, list(lines[index:])

def signature_for(name, arity, dcg=False):
    """
    Synthesize a signature for a predicate that has no mode lines.
    Its arguments are called C{Arg1} to C{ArgN}.
    """
    args = [Arg('Arg%d' % (i+1)) for i in range(arity)]
    return Signature(name, args, dcg=dcg,
                     fixity=not dcg and terms.fixity(name, arity) or None)

def term_signature(text):
    """
    Read the term of a C{$ term: text} entry.  The term is read
    without mode operators.

    @return: The term as a signature, or C{None} if C{text} is not a
        callable term.
    """
    try:
        term = terms.read_term(text, terms.STANDARD_OPS)
    except TermSyntaxError:
        return None
    if isinstance(term, Compound) or (isinstance(term, Atom) and
                                      term.name.strip()):
        return signature_from_head(term)
    return None
