# pldoc -- LaTeX writer
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

r"""
Writer that renders document trees as LaTeX.

Rendering happens in two passes.  L{LatexWriter} first turns a tree
into a flat list of I{tokens}: commands, braces, text, verbatim text,
code blocks, and directives asking for newlines or indentation.  The
print pass (L{print_tokens}) then turns the token list into text.
Keeping the layout directives separate from the text lets adjacent
requests for blank lines be merged, so that C{\section} followed by
a paragraph is separated by exactly one blank line, however many
blank lines each of them asks for.

The commands and environments that the writer emits are defined by
C{pl.sty} (see L{pldoc.docwriter.latex_sty}).
"""
__docformat__ = 'epytext en'

##################################################
## Imports
##################################################

from pldoc import log
from pldoc.options import SECTION_LEVELS
from pldoc.util import is_identifier
from pldoc.dom import Paragraph, to_plaintext
from pldoc.docwriter import DocWriter, ModeStack, group_tags, \
     is_predicate_list, tag_title, placeholder_text
from pldoc.docwriter import latex_sty

##################################################
## Errors
##################################################

class LatexError(Exception):
    """
    A tree that cannot be written as LaTeX.
    """

class SectionLevelError(LatexError):
    """
    A heading that is nested too deeply for the section ladder, or an
    unknown C{section_level} option.
    """

class VerbDelimiterError(LatexError):
    """
    Inline code that contains every character that C{\\verb} could
    use as a delimiter.
    """

##################################################
## Tokens
##################################################

class Token:
    """
    The base class for the tokens of the LaTeX writer.  Tokens are
    immutable, and compare by value.
    """
    _fields = ()
    __slots__ = ()

    def _set(self, **values):
        for (name, val) in values.items():
            object.__setattr__(self, name, val)

    def __setattr__(self, name, val):
        raise AttributeError('Tokens are immutable')

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

class Command(Token):
    r"""A command name, written as C{\name}."""
    _fields = __slots__ = ('name',)
    def __init__(self, name): self._set(name=name)

class Curl(Token):
    """An open or close brace."""
    _fields = __slots__ = ('char',)
    def __init__(self, char):
        if char not in '{}' or len(char) != 1:
            raise ValueError('Bad brace %r' % (char,))
        self._set(char=char)

class Verb(Token):
    r"""Inline verbatim text, written with C{\verb}."""
    _fields = __slots__ = ('text',)
    def __init__(self, text): self._set(text=text)

class NL(Token):
    """
    A request for line breaks.  C{NL(n)} asks that the next output
    start C{n-1} blank lines below the current line; C{NL(n, True)}
    writes exactly C{n} newline characters.  Adjacent requests are
    merged by L{collapse_newlines}.
    """
    _fields = __slots__ = ('count', 'exact')
    def __init__(self, count, exact=False):
        self._set(count=count, exact=bool(exact))

class Indent(Token):
    """A request to pad the current line with spaces up to C{column}."""
    _fields = __slots__ = ('column',)
    def __init__(self, column): self._set(column=column)

class Code(Token):
    """A verbatim code block."""
    _fields = __slots__ = ('text',)
    def __init__(self, text): self._set(text=text)

class Latex(Token):
    """Text that is written as is."""
    _fields = __slots__ = ('text',)
    def __init__(self, text): self._set(text=text)

class Text(Token):
    """Text that is escaped when it is written."""
    _fields = __slots__ = ('text',)
    def __init__(self, text): self._set(text=text)

class Opt:
    """
    An optional command argument, written in square brackets.  It is
    left out when its content is empty.
    """
    def __init__(self, content):
        self.content = content

##################################################
## Print pass
##################################################

def collapse_newlines(tokens):
    """
    Merge each run of adjacent L{NL} tokens into one.  The merged
    token asks for the largest count in the run, and is exact if any
    token of the run is exact.

    @rtype: C{list} of L{Token}
    """
    result = []
    for token in tokens:
        if isinstance(token, NL) and result and isinstance(result[-1], NL):
            prev = result[-1]
            result[-1] = NL(max(prev.count, token.count),
                            prev.exact or token.exact)
        else:
            result.append(token)
    return result

VERB_DELIMITERS = '$|@="^!'
"""The characters tried, in order, as delimiters for C{\\verb}."""

def choose_delimiter(text):
    """
    @return: The first character of L{VERB_DELIMITERS} that does not
        occur in C{text}.
    @raise VerbDelimiterError: If every one of them occurs.
    """
    for char in VERB_DELIMITERS:
        if char not in text:
            return char
    raise VerbDelimiterError('No delimiter for \\verb: %r uses all of %s' %
                             (text, VERB_DELIMITERS))

_ESCAPES = {
    '<': '$<$',
    '>': '$>$',
    '{': '\\{',
    '}': '\\}',
    '$': '\\$',
    '#': '\\#',
    '\\': '\\bsl{}',
    }

def escape(text):
    """
    @return: C{text}, with the characters that are special to LaTeX
        replaced.
    """
    return ''.join([_ESCAPES.get(char, char) for char in text])

def print_tokens(tokens):
    """
    Write a token list as LaTeX text.

    @type tokens: C{list} of L{Token}
    @rtype: C{string}
    @raise VerbDelimiterError: If a L{Verb} token cannot be written.
    """
    out = []
    column = 0
    for token in collapse_newlines(tokens):
        if isinstance(token, NL):
            # Nothing to separate from yet.
            if not out: continue
            if token.exact or column > 0:
                text = '\n' * token.count
            else:
                text = '\n' * max(token.count-1, 0)
        elif isinstance(token, Indent):
            text = ' ' * max(token.column-column, 0)
        elif isinstance(token, Command):
            text = '\\' + token.name
        elif isinstance(token, Curl):
            text = token.char
        elif isinstance(token, Verb):
            delim = choose_delimiter(token.text)
            text = '\\verb%s%s%s' % (delim, token.text, delim)
        elif isinstance(token, Code):
            text = token.text
            if not text.endswith('\n'): text += '\n'
            text = '\\begin{code}\n%s\\end{code}\n' % text
            if column > 0: text = '\n' + text
        elif isinstance(token, Latex):
            text = token.text
        elif isinstance(token, Text):
            text = escape(token.text)
        else:
            raise TypeError('Not a LaTeX token: %r' % (token,))

        if not text: continue
        out.append(text)
        newline = text.rfind('\n')
        if newline < 0:
            column += len(text)
        else:
            column = len(text) - newline - 1
    return ''.join(out)

##################################################
## Layout tables
##################################################

# Tokens written before a command.
_INDENT = {
    'begin': (NL(1),),
    'end': (NL(1, True),),
    'chapter': (NL(2),),
    'section': (NL(2),),
    'subsection': (NL(2),),
    'subsubsection': (NL(2),),
    'paragraph': (NL(2),),
    }
for _name in ('item', 'tag', 'termitem', 'predicate', 'dcg', 'infixop',
              'prefixop', 'postfixop'):
    _INDENT[_name] = (NL(1), Indent(4))

# Tokens written after a command and its arguments.
_OUTDENT = {
    'begin': (NL(1, True),),
    'end': (NL(1),),
    'item': (Text(' '),),
    'chapter': (NL(2),),
    'section': (NL(2),),
    'subsection': (NL(2),),
    'subsubsection': (NL(2),),
    'paragraph': (NL(2),),
    }
for _name in ('tag', 'termitem', 'predicate', 'dcg', 'infixop',
              'prefixop', 'postfixop'):
    _OUTDENT[_name] = (NL(1),)
del _name

_LATEX_HEADER = r"""
\documentclass[11pt]{article}
\usepackage{times}
\usepackage{pl}
\sloppy
\makeindex

\begin{document}
""".lstrip()

_LATEX_FOOTER = r"""
\printindex
\end{document}
"""

def style_file(name='default'):
    """
    @return: The text of a style file defining the commands that
        the writer emits; see L{latex_sty.STYLESHEETS}.  Stand-alone
        output loads it as C{pl.sty}.
    @raise KeyError: If there is no style file with that name.
    """
    return latex_sty.STYLESHEETS[name]

##################################################
## Writer
##################################################

class LatexWriter(DocWriter):
    """
    A writer that renders document trees as LaTeX.  Use L{tokens} to
    get the token list for a tree, and L{to_latex} to get its text.

    Contiguous predicate descriptions at the top level of a document
    share a single C{description} environment.

    @ivar _out: The tokens written so far by the current pass.
    @ivar _fragile: The number of command arguments being written.
        Inside an argument, inline code is written with C{\\texttt}
        rather than C{\\verb}.
    @ivar _modes: The environments open in the current pass.
    @type _modes: L{ModeStack}
    """
    def __init__(self, docindex=None, options=None, **kwargs):
        DocWriter.__init__(self, docindex, options, **kwargs)
        self._reset()

    def _reset(self):
        self._out = []
        self._fragile = 0
        self._modes = ModeStack(lambda mode: self._cmd('begin', mode),
                                lambda mode: self._cmd('end', mode))

    #////////////////////////////////////////////////////////////
    # Entry points
    #////////////////////////////////////////////////////////////

    def tokens(self, tree):
        """
        @return: The token list for C{tree}.
        @rtype: C{list} of L{Token}
        """
        self._reset()
        self.dispatch(tree)
        self._modes.pop_to('body')
        return self._out

    def to_latex(self, tree):
        """
        @return: The LaTeX text for C{tree}.  If the C{stand_alone}
            option is set, the text is a complete LaTeX document.
        @rtype: C{string}
        """
        text = print_tokens(self.tokens(tree))
        if not self._options.stand_alone:
            return text
        if text and not text.endswith('\n'): text += '\n'
        return _LATEX_HEADER + text + _LATEX_FOOTER

    def predicate_tokens(self, trees):
        """
        @return: The tokens for the predicate descriptions of C{trees},
            without the surrounding C{description} environment.
        @type trees: C{list} of L{pldoc.dom.Document}
        """
        self._reset()
        self._emit(NL(0, True))
        for tree in trees:
            for node in tree.content:
                if is_predicate_list(node):
                    self._write_predicate_items(node)
                else:
                    self.dispatch(node)
        return self._out

    #////////////////////////////////////////////////////////////
    # Token helpers
    #////////////////////////////////////////////////////////////

    def _emit(self, *tokens):
        self._out.extend(tokens)

    def _cmd(self, name, *args):
        r"""
        Write C{\name}, followed by its arguments.  Each argument is
        a string, a token, a node, an L{Opt}, or a sequence of these.
        The layout tables decide what is written around the command.
        """
        self._out.extend(_INDENT.get(name, ()))
        self._out.append(Command(name))
        self._fragile += 1
        try:
            for arg in args:
                if isinstance(arg, Opt):
                    if not _is_empty(arg.content):
                        self._out.append(Latex('['))
                        self._write_arg(arg.content)
                        self._out.append(Latex(']'))
                else:
                    self._out.append(Curl('{'))
                    self._write_arg(arg)
                    self._out.append(Curl('}'))
        finally:
            self._fragile -= 1
        self._out.extend(_OUTDENT.get(name, ()))

    def _write_arg(self, arg):
        if isinstance(arg, str):
            if arg: self._out.append(Text(arg))
        elif isinstance(arg, Token):
            self._out.append(arg)
        elif isinstance(arg, (list, tuple)):
            for item in arg:
                self._write_arg(item)
        else:
            self.dispatch(arg)

    def _write_blocks(self, nodes):
        for group in group_tags(nodes):
            if isinstance(group, list):
                self._write_tag_group(group)
            else:
                self.dispatch(group)

    def _write_body(self, nodes):
        """
        Write the body of a description.  A leading paragraph is run
        in with the item label.
        """
        nodes = list(nodes)
        if nodes and isinstance(nodes[0], Paragraph):
            for node in nodes.pop(0).content:
                self.dispatch(node)
        self._write_blocks(nodes)

    def section_command(self, level):
        """
        @return: The sectioning command for a heading of the given
            level.  Level 1 uses the C{section_level} option.
        @raise SectionLevelError: If the level is past the end of the
            ladder, or C{section_level} is unknown.
        """
        base = self._options.section_level
        if base not in SECTION_LEVELS:
            raise SectionLevelError('Unknown section level %r' % (base,))
        index = SECTION_LEVELS.index(base) + level - 1
        if index >= len(SECTION_LEVELS):
            raise SectionLevelError('Heading level %d is too deep below '
                                    '\\%s' % (level, base))
        return SECTION_LEVELS[index]

    #////////////////////////////////////////////////////////////
    # Block nodes
    #////////////////////////////////////////////////////////////

    def write_document(self, doc):
        for group in group_tags(doc.content):
            if isinstance(group, list):
                self._modes.pop_to('body')
                self._write_tag_group(group)
            elif is_predicate_list(group):
                self._modes.need('description')
                self._write_predicate_items(group)
            else:
                self._modes.pop_to('body')
                self.dispatch(group)
        self._modes.pop_to('body')

    def write_heading(self, node):
        self._cmd(self.section_command(node.level), node.content)

    def write_paragraph(self, node):
        self._emit(NL(2, True))
        for child in node.content:
            self.dispatch(child)

    def write_list(self, node):
        env = node.ordered and 'enumerate' or 'itemize'
        self._cmd('begin', env)
        for item in node.items:
            self._cmd('item')
            self._write_blocks(item)
        self._cmd('end', env)

    def write_description_list(self, node):
        if node.is_predicate_list():
            # Not at the top level of a document: give it its own
            # environment.
            self._cmd('begin', 'description')
            self._write_predicate_items(node)
            self._cmd('end', 'description')
            return
        self._cmd('begin', 'description')
        for (term, body) in node.items:
            self.dispatch(term)
            self._write_body(body)
        self._cmd('end', 'description')

    def _write_predicate_items(self, node):
        for (header, body) in node.items:
            self.dispatch(header)
            self._write_body(body)

    def write_term(self, term):
        sig = term.signature
        if sig is None:
            self._cmd('termitem', term.text, '')
        else:
            self._cmd('termitem', sig.name, self._arg_tokens(sig))

    def write_predicate_header(self, header):
        self._emit(NL(2))
        for (i, sig) in enumerate(header.signatures):
            if i > 0: self._cmd('nodescription')
            self._write_signature(sig, header.public)

    def _write_signature(self, sig, public):
        args = [self._arg(arg, i+1) for (i, arg) in enumerate(sig.args)]
        if sig.fixity == 'infix':
            self._cmd('infixop', sig.name, args[0], args[1])
        elif sig.fixity == 'prefix':
            self._cmd('prefixop', sig.name, args[0])
        elif sig.fixity == 'postfix':
            self._cmd('postfixop', sig.name, args[0])
        else:
            attrs = []
            if sig.det != 'unknown':
                attrs.append(Text('is %s' % sig.det))
            if not public:
                attrs.append(Latex(' \\textit{[private]}'))
            self._cmd(sig.dcg and 'dcg' or 'predicate', Opt(attrs),
                      sig.name, str(sig.arity), self._arg_tokens(sig))

    def _arg(self, arg, index):
        tokens = [Text((arg.mode or '') + arg.display_name(index))]
        if arg.type is not None:
            tokens.append(Text(':' + arg.type))
        if arg.ellipsis:
            tokens.append(Latex('\\ldots'))
        return tokens

    def _arg_tokens(self, sig):
        tokens = []
        for (i, arg) in enumerate(sig.args):
            if i > 0: tokens.append(Text(', '))
            tokens.extend(self._arg(arg, i+1))
        return tokens

    def write_code_block(self, node):
        self._emit(Code(node.text))

    def write_tag(self, node):
        self._write_tag_group([node])

    def _write_tag_group(self, tags):
        self._emit(NL(2))
        self._cmd('begin', 'tags')
        for tag in tags:
            self._cmd('tag', tag_title(tag.keyword))
            for child in tag.value:
                self.dispatch(child)
        self._cmd('end', 'tags')
        self._emit(NL(2))

    def write_param_list(self, node):
        self._cmd('begin', 'parameters')
        for (name, descr) in node.entries:
            self._emit(NL(1))
            self._cmd('arg', name)
            self._emit(Latex(' & '))
            for child in descr:
                self.dispatch(child)
            self._emit(Latex(' \\\\'))
        self._cmd('end', 'parameters')

    #////////////////////////////////////////////////////////////
    # Inline nodes
    #////////////////////////////////////////////////////////////

    def write_plain_text(self, node):
        self._emit(Text(node.text))

    def write_inline_code(self, node):
        if is_identifier(node.text):
            self._cmd('const', node.text)
        elif self._fragile:
            self._cmd('texttt', node.text)
        else:
            self._emit(Verb(node.text))

    def write_emphasis(self, node):
        if node.kind == 'bold':
            self._cmd('textbf', node.content)
        else:
            self._cmd('textit', node.content)

    def write_link(self, node):
        if node.kind == 'file':
            label = node.content or node.target
            if self._fragile:
                self._cmd('texttt', label)
            else:
                self._cmd('file', label)
        elif (not node.content or
              to_plaintext(node.content) == node.target):
            self._cmd('url', node.target)
        else:
            self._cmd('url', Opt(node.content), node.target)

    def write_predicate_ref(self, node):
        if self.resolve(node) is None:
            self._emit(Text(node.indicator()))
        elif node.kind == 'dcg_rule':
            self._cmd('dcgref', node.name, str(node.arity))
        else:
            self._cmd('predref', node.name, str(node.arity))

    def write_unknown(self, node, *args):
        self._emit(Text(placeholder_text(node)))

def _is_empty(content):
    if isinstance(content, (list, tuple)):
        return not [item for item in content if not _is_empty(item)]
    return content == ''

##################################################
## Convenience functions
##################################################

def latex_for_file(filedoc, docindex=None, options=None, **kwargs):
    """
    @return: The LaTeX documentation of a source file.
    @type filedoc: L{pldoc.docbuilder.FileDoc}
    @param docindex: The index used to resolve references.  If it is
        not given, an index of the file's own predicates is built.
    @rtype: C{string}
    """
    from pldoc import docbuilder
    writer = LatexWriter(docindex, options, **kwargs)
    if docindex is None:
        writer._docindex = docbuilder.index_objects([filedoc],
                                                   options=writer._options)
    tree = docbuilder.file_tree(filedoc, writer._docindex, writer._options)
    return writer.to_latex(tree)

def latex_for_wiki(text, docindex=None, options=None, **kwargs):
    """
    @return: The LaTeX rendering of a text written in wiki markup.
    @rtype: C{string}
    """
    from pldoc.markup import wiki
    context = wiki.ParseContext(docindex, modes=False)
    tree = wiki.parse(text, context)
    return LatexWriter(docindex, options, **kwargs).to_latex(tree)

def latex_for_predicates(objects, docindex=None, options=None, **kwargs):
    """
    @return: The LaTeX descriptions of the given predicates, meant to
        be included in a C{description} environment of a larger
        document.
    @type objects: C{list} of L{pldoc.docbuilder.DocObject}
    @rtype: C{string}
    """
    from pldoc import docbuilder
    writer = LatexWriter(docindex, options, **kwargs)
    if docindex is None:
        writer._docindex = docbuilder.index_objects(objects,
                                                   options=writer._options)
    trees = [docbuilder.object_tree(obj, writer._docindex)
             for obj in objects
             if obj.public or not writer._options.public_only]
    log.info('Writing LaTeX for %d predicates' % len(trees))
    return print_tokens(writer.predicate_tokens(trees))
