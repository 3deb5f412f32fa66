# pldoc -- Term reader
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
A reader for the Prolog terms that appear in mode lines, such as::

    append(?List1, ?List2, ?List3) is nondet
    phrase_from_file(:Grammar, +File)
    +Expr1 =:= +Expr2 is semidet

Terms are read with an operator precedence parser driven by an
operator table.  The default table, L{MODE_OPS}, is the standard
operator table (L{STANDARD_OPS}) extended with the prefix operators
used for argument modes and with the postfix operators C{...}
(repeated argument) and C{//} (grammar rule).

Reading produces a small tree of L{Atom}, L{Var}, L{Number},
L{String}, L{Compound} and L{PList} objects.  The C{str} of a term
writes it back in standard operator notation.

@var STANDARD_OPS: The standard operator table.
@var MODE_OPS: L{STANDARD_OPS} plus the mode operators.
"""
__docformat__ = 'epytext en'

import re

##################################################
## Operator tables
##################################################

class OpTable:
    """
    A table of operator definitions.  Each definition is a
    C{(priority, type)} pair, where C{type} is one of C{xfx}, C{xfy},
    C{yfx} (infix), C{fy}, C{fx} (prefix), C{xf} or C{yf} (postfix).
    A name can have at most one definition of each kind.
    """
    def __init__(self, ops=()):
        self.infix = {}
        self.prefix = {}
        self.postfix = {}
        for (priority, optype, names) in ops:
            self.add(priority, optype, names)

    def add(self, priority, optype, names):
        if optype in ('xfx', 'xfy', 'yfx'): table = self.infix
        elif optype in ('fy', 'fx'): table = self.prefix
        elif optype in ('xf', 'yf'): table = self.postfix
        else: raise ValueError('Bad operator type %r' % optype)
        for name in names.split():
            table[name] = (priority, optype)

    def copy(self):
        ops = OpTable()
        ops.infix.update(self.infix)
        ops.prefix.update(self.prefix)
        ops.postfix.update(self.postfix)
        return ops

    def is_op(self, name):
        return (name in self.infix or name in self.prefix or
                name in self.postfix)

STANDARD_OPS = OpTable([
    (1200, 'xfx', ':- -->'),
    (1200, 'fx', ':- ?-'),
    (1150, 'fx', 'dynamic discontiguous initialization meta_predicate '
                 'module_transparent multifile public thread_local table'),
    (1105, 'xfy', '|'),
    (1100, 'xfy', ';'),
    (1050, 'xfy', '-> *->'),
    (1000, 'xfy', ','),
    (990, 'xfx', ':='),
    (900, 'fy', '\\+'),
    (700, 'xfx', '= \\= == \\== @< @> @=< @>= =.. is =:= =\\= < > =< >= '
                 '>:< :< as'),
    (500, 'yfx', '+ - /\\ \\/ xor'),
    (500, 'fx', '?'),
    (400, 'yfx', '* / // rdiv << >> mod rem div divmod'),
    (200, 'xfx', '**'),
    (200, 'xfy', '^'),
    (200, 'xfy', ':'),
    (200, 'fy', '- + \\'),
    (1, 'fx', '$'),
    ])

MODE_OPS = STANDARD_OPS.copy()
MODE_OPS.add(200, 'fy', '+ - ? @ :')
MODE_OPS.add(200, 'xf', '... //')

##################################################
## Terms
##################################################

class Term:
    """The base class for terms."""
    _fields = ()

    def __eq__(self, other):
        if type(self) is not type(other): return False
        for field in self._fields:
            if getattr(self, field) != getattr(other, field):
                return False
        return True

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((self.__class__.__name__,) +
                    tuple([getattr(self, f) for f in self._fields]))

    def __repr__(self):
        args = [repr(getattr(self, field)) for field in self._fields]
        return '%s(%s)' % (self.__class__.__name__, ', '.join(args))

    def __str__(self):
        return write_term(self)

class Atom(Term):
    _fields = ('name',)
    def __init__(self, name):
        self.name = name

class Var(Term):
    """A variable.  The anonymous variable is named C{_}."""
    _fields = ('name',)
    def __init__(self, name):
        self.name = name

    def is_anonymous(self):
        return self.name == '_'

class Number(Term):
    """A number, kept as written."""
    _fields = ('text',)
    def __init__(self, text):
        self.text = text

class String(Term):
    """A double-quoted or back-quoted string."""
    _fields = ('text', 'quote')
    def __init__(self, text, quote='"'):
        self.text = text
        self.quote = quote

class Compound(Term):
    _fields = ('functor', 'args')
    def __init__(self, functor, args):
        self.functor = functor
        self.args = tuple(args)

    def arity(self):
        return len(self.args)

class PList(Term):
    """A list, C{[a, b | Tail]}; C{tail} is C{None} for a proper list."""
    _fields = ('items', 'tail')
    def __init__(self, items, tail=None):
        self.items = tuple(items)
        self.tail = tail

##################################################
## Tokenization
##################################################

class TermSyntaxError(Exception):
    """
    Raised when a string cannot be read as a term.

    @ivar pos: The character offset at which reading failed.
    """
    def __init__(self, descr, pos):
        Exception.__init__(self, '%s (at character %d)' % (descr, pos))
        self.descr = descr
        self.pos = pos

class _Token:
    # Token types
    VAR = 'var'
    NAME = 'name'
    NUMBER = 'number'
    STRING = 'string'
    PUNCT = 'punct'
    END = 'end'

    def __init__(self, kind, text, pos, layout, quoted=False):
        self.kind = kind
        self.text = text
        self.pos = pos
        self.layout = layout
        self.quoted = quoted

    def __repr__(self):
        return '<Token: %s %r at %d>' % (self.kind, self.text, self.pos)

SYMBOL_CHARS = '+-*/\\^<>=~:.?@#&$'

_LAYOUT_RE = re.compile(r'\s*')
_TOKEN_RE = re.compile(r'''
      (?P<number>0'\\?.|\d+(?:\.\d+)?(?:[eE][+-]?\d+)?)
    | (?P<var>[A-Z_]\w*)
    | (?P<name>[a-z]\w*)
    | (?P<symbol>[%s]+)
    | (?P<solo>[!;])
    | (?P<punct>[()\[\]{},|])
    | (?P<quote>['"`])
    ''' % re.escape(SYMBOL_CHARS), re.VERBOSE)

_ESCAPES = {'n': '\n', 't': '\t', '\\': '\\', "'": "'", '"': '"',
            '`': '`', '0': '\0'}

def _read_quoted(text, pos, quote):
    """
    Read a quoted item whose opening quote is at C{text[pos-1]}.
    @return: C{(contents, end)}
    """
    chars = []
    while pos < len(text):
        c = text[pos]
        if c == quote:
            if text[pos+1:pos+2] == quote:
                chars.append(quote)
                pos += 2
                continue
            return ''.join(chars), pos+1
        if c == '\\' and pos+1 < len(text):
            chars.append(_ESCAPES.get(text[pos+1], text[pos+1]))
            pos += 2
            continue
        chars.append(c)
        pos += 1
    raise TermSyntaxError('Unterminated quoted item', pos)

def tokenize(text):
    """
    Split C{text} into a list of tokens.  A C{.} that is followed by
    layout or by the end of the text is an end token.
    """
    tokens = []
    pos = 0
    while True:
        start = _LAYOUT_RE.match(text, pos).end()
        layout = start > pos
        if start == len(text):
            break
        m = _TOKEN_RE.match(text, start)
        if m is None:
            raise TermSyntaxError('Illegal character %r' % text[start],
                                  start)
        pos = m.end()
        if m.group('number') is not None:
            tokens.append(_Token(_Token.NUMBER, m.group('number'),
                                 start, layout))
        elif m.group('var') is not None:
            tokens.append(_Token(_Token.VAR, m.group('var'), start, layout))
        elif m.group('name') is not None:
            tokens.append(_Token(_Token.NAME, m.group('name'), start, layout))
        elif m.group('symbol') is not None:
            symbol = m.group('symbol')
            if symbol == '.' and (pos == len(text) or text[pos].isspace()):
                tokens.append(_Token(_Token.END, '.', start, layout))
            else:
                tokens.append(_Token(_Token.NAME, symbol, start, layout))
        elif m.group('solo') is not None:
            tokens.append(_Token(_Token.NAME, m.group('solo'), start, layout))
        elif m.group('punct') is not None:
            tokens.append(_Token(_Token.PUNCT, m.group('punct'),
                                 start, layout))
        else:
            quote = m.group('quote')
            contents, pos = _read_quoted(text, pos, quote)
            if quote == "'":
                tokens.append(_Token(_Token.NAME, contents, start, layout,
                                     quoted=True))
            else:
                tokens.append(_Token(_Token.STRING, quote + contents,
                                     start, layout))
    return tokens

##################################################
## Parsing
##################################################

class _Parser:
    """
    An operator precedence parser over a token list.  C{parse(max)}
    reads the longest term whose priority is at most C{max} and
    returns it with its priority.
    """
    def __init__(self, tokens, ops, text):
        self.tokens = tokens
        self.ops = ops
        self.text = text
        self.index = 0

    def peek(self, offset=0):
        if self.index+offset < len(self.tokens):
            return self.tokens[self.index+offset]
        return None

    def next(self):
        token = self.peek()
        if token is None:
            raise TermSyntaxError('Unexpected end of term', len(self.text))
        self.index += 1
        return token

    def error(self, descr, token=None):
        if token is None: token = self.peek()
        if token is None: pos = len(self.text)
        else: pos = token.pos
        return TermSyntaxError(descr, pos)

    def expect(self, text):
        token = self.peek()
        if token is None or token.kind != _Token.PUNCT or token.text != text:
            raise self.error('Expected %r' % text)
        self.index += 1

    def starts_term(self, offset):
        """
        True if the token at C{offset} can begin an operand.  Names
        that are only infix or postfix operators cannot.
        """
        token = self.peek(offset)
        if token is None or token.kind == _Token.END:
            return False
        if token.kind == _Token.PUNCT:
            return token.text in '([{'
        if token.kind == _Token.NAME and not token.quoted:
            after = self.peek(offset+1)
            if (after is not None and after.kind == _Token.PUNCT and
                after.text == '(' and not after.layout):
                return True
            if token.text in self.ops.prefix:
                return True
            if token.text in self.ops.infix or token.text in self.ops.postfix:
                return False
        return True

    def parse(self, max_priority):
        left, left_priority = self.parse_primary(max_priority)
        return self.parse_infix(left, left_priority, max_priority)

    def parse_primary(self, max_priority):
        token = self.next()
        if token.kind == _Token.NUMBER:
            return Number(token.text), 0
        if token.kind == _Token.VAR:
            return Var(token.text), 0
        if token.kind == _Token.STRING:
            return String(token.text[1:], token.text[0]), 0
        if token.kind == _Token.PUNCT:
            if token.text == '(':
                term, _ = self.parse(1200)
                self.expect(')')
                return term, 0
            if token.text == '[':
                return self.parse_list(), 0
            if token.text == '{':
                if self.peek_punct('}'):
                    self.index += 1
                    return self.parse_name('{}', False)
                term, _ = self.parse(1200)
                self.expect('}')
                return Compound('{}', [term]), 0
            raise self.error('Unexpected %r' % token.text, token)
        if token.kind == _Token.NAME:
            return self.parse_name(token.text, token.quoted)
        raise self.error('Unexpected end of clause', token)

    def peek_punct(self, text, layout_ok=True):
        token = self.peek()
        return (token is not None and token.kind == _Token.PUNCT and
                token.text == text and (layout_ok or not token.layout))

    def parse_name(self, name, quoted):
        # Functional notation: the '(' must follow the name directly.
        if self.peek_punct('(', layout_ok=False):
            self.index += 1
            args = self.parse_arglist(')')
            return Compound(name, args), 0
        if name in self.ops.prefix and not quoted:
            following = self.peek()
            if (name == '-' and following is not None and
                following.kind == _Token.NUMBER and not following.layout):
                self.index += 1
                return Number('-' + following.text), 0
            if self.starts_term(0):
                priority, optype = self.ops.prefix[name]
                priority = min(priority, 999)
                if optype == 'fy': arg_max = priority
                else: arg_max = priority-1
                arg, _ = self.parse(arg_max)
                return Compound(name, [arg]), priority
        return Atom(name), 0

    def parse_arglist(self, close):
        args = []
        while True:
            arg, _ = self.parse(999)
            args.append(arg)
            if self.peek_punct(','):
                self.index += 1
                continue
            self.expect(close)
            return args

    def parse_list(self):
        if self.peek_punct(']'):
            self.index += 1
            return PList([])
        items = []
        tail = None
        while True:
            item, _ = self.parse(999)
            items.append(item)
            if self.peek_punct(','):
                self.index += 1
                continue
            if self.peek_punct('|'):
                self.index += 1
                tail, _ = self.parse(999)
            self.expect(']')
            return PList(items, tail)

    def parse_infix(self, left, left_priority, max_priority):
        while True:
            token = self.peek()
            if token is None or token.kind == _Token.END:
                return left, left_priority
            if token.kind == _Token.PUNCT:
                if token.text not in ',|': return left, left_priority
            elif token.kind != _Token.NAME or token.quoted:
                return left, left_priority
            name = token.text

            infix = self.ops.infix.get(name)
            postfix = self.ops.postfix.get(name)
            if infix and postfix:
                if self.starts_term(1): postfix = None
                else: infix = None

            if infix:
                priority, optype = infix
                if optype == 'yfx': left_max = priority
                else: left_max = priority-1
                if optype == 'xfy': right_max = priority
                else: right_max = priority-1
                if priority > max_priority or left_priority > left_max:
                    return left, left_priority
                self.index += 1
                right, _ = self.parse(right_max)
                left = Compound(name, [left, right])
                left_priority = priority
            elif postfix:
                priority, optype = postfix
                if optype == 'yf': left_max = priority
                else: left_max = priority-1
                if priority > max_priority or left_priority > left_max:
                    return left, left_priority
                self.index += 1
                left = Compound(name, [left])
                left_priority = priority
            else:
                return left, left_priority

def read_term(text, ops=MODE_OPS):
    """
    Read a single term from C{text}.  The term may be followed by an
    end token (C{.}), but by nothing else.

    @param ops: The operator table to read with.
    @type ops: L{OpTable}
    @rtype: L{Term}
    @raise TermSyntaxError: If C{text} is not a single term.
    """
    tokens = tokenize(text)
    if tokens and tokens[-1].kind == _Token.END:
        tokens.pop()
    if not tokens:
        raise TermSyntaxError('Empty term', 0)
    parser = _Parser(tokens, ops, text)
    term, _ = parser.parse(1200)
    if parser.peek() is not None:
        raise parser.error('Operator expected')
    return term

##################################################
## Writing
##################################################

_SOLO_ATOMS = ('[]', '{}', '!', ';', ',', '|')

def atom_text(name):
    """
    @return: C{name} written as an atom, quoted where needed.
    """
    if re.match(r'[a-z]\w*$', name) or name in _SOLO_ATOMS:
        return name
    if name and not name.strip(SYMBOL_CHARS):
        return name
    return "'%s'" % name.replace('\\', '\\\\').replace("'", "\\'")

def write_term(term, max_priority=1200, ops=STANDARD_OPS):
    """
    Write C{term} in operator notation, adding parentheses where an
    operand binds more loosely than its position allows.

    @rtype: C{string}
    """
    text, priority = _write(term, ops)
    if priority > max_priority:
        return '(%s)' % text
    return text

def _write(term, ops):
    if isinstance(term, Atom):
        return atom_text(term.name), 0
    if isinstance(term, Var):
        return term.name, 0
    if isinstance(term, Number):
        return term.text, 0
    if isinstance(term, String):
        return '%s%s%s' % (term.quote, term.text, term.quote), 0
    if isinstance(term, PList):
        items = [write_term(item, 999, ops) for item in term.items]
        if term.tail is not None:
            return '[%s|%s]' % (','.join(items),
                                write_term(term.tail, 999, ops)), 0
        return '[%s]' % ','.join(items), 0
    functor = term.functor
    if functor == '{}' and len(term.args) == 1:
        return '{%s}' % write_term(term.args[0], 1200, ops), 0
    if len(term.args) == 2 and functor in ops.infix:
        priority, optype = ops.infix[functor]
        if optype == 'yfx': left_max = priority
        else: left_max = priority-1
        if optype == 'xfy': right_max = priority
        else: right_max = priority-1
        left = write_term(term.args[0], left_max, ops)
        right = write_term(term.args[1], right_max, ops)
        if functor == ',':
            return '%s,%s' % (left, right), priority
        if re.match(r'[a-z]', functor):
            return '%s %s %s' % (left, functor, right), priority
        return '%s%s%s' % (left, functor, right), priority
    if len(term.args) == 1 and functor in ops.prefix:
        priority, optype = ops.prefix[functor]
        if optype == 'fy': arg_max = priority
        else: arg_max = priority-1
        arg = write_term(term.args[0], arg_max, ops)
        if (re.match(r'[a-z]', functor) or
            (arg[:1] in SYMBOL_CHARS and functor[-1:] in SYMBOL_CHARS) or
            arg[:1].isdigit() or arg[:1] == '('):
            return '%s %s' % (functor, arg), priority
        return '%s%s' % (functor, arg), priority
    if len(term.args) == 1 and functor in ops.postfix:
        priority, optype = ops.postfix[functor]
        if optype == 'yf': arg_max = priority
        else: arg_max = priority-1
        return '%s%s' % (write_term(term.args[0], arg_max, ops),
                         functor), priority
    args = [write_term(arg, 999, ops) for arg in term.args]
    return '%s(%s)' % (atom_text(functor), ','.join(args)), 0

def fixity(name, arity, ops=STANDARD_OPS):
    """
    @return: C{'infix'}, C{'prefix'} or C{'postfix'} if a predicate
        C{name/arity} is an operator in C{ops}; C{None} otherwise.
    """
    if arity == 2 and name in ops.infix:
        return 'infix'
    if arity == 1 and name in ops.prefix:
        return 'prefix'
    if arity == 1 and name in ops.postfix:
        return 'postfix'
    return None
