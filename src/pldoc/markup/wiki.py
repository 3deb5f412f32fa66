# pldoc -- Wiki markup parser
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
Parser for the wiki markup used in structured comments.  The parser
converts the text of one comment into a document tree (see
L{pldoc.dom}).

A structured comment is either a block of line comments whose first
line starts with C{%!} or C{%%}, or a block comment that starts with
C{/**}::

    %!  atom_prefix(+Atom, ?Prefix) is semidet.
    %
    %   True if Prefix is a prefix of Atom.  See also [[sub_atom/5]].
    %
    %   @param Atom   An atom, *not* a string.
    %   @see  atom_concat/3

Leading mode lines (see L{pldoc.markup.modes}) become the term of a
predicate description; the rest of the comment becomes its body.

Block structure
===============
  Each line is classified by the first of these rules that applies:

    - A blank line separates blocks.
    - A line holding only C{==} opens a verbatim block, which ends
      at the next C{==} line.
    - A line indented four or more columns deeper than the current
      block, and following a blank line, starts an indented code
      block, which ends at the first line that is indented less.
    - C{---+ Title} is a heading; the number of C{+} signs gives the
      level.
    - C{@keyword value} is a tag.  Tags are collected into the
      trailing tag section of the description.
    - C{* text}, C{- text} and C{1. text} are list items.
    - C{$ term: text} is an entry of a term description list.
    - Any other line is paragraph text.

Inline markup
=============
  C{`code`}, C{*bold*}, C{_italic_}, C{[[name/arity]]},
  C{[[name//arity]]}, C{[[module:name/arity]]}, C{[[file]]},
  C{[[label][target]]} and C{<scheme:target>}.  A bare C{name/arity}
  is a reference if the predicate is known to the L{ParseContext}.

Malformed markup is never an error: it is kept as text, and a
L{ParseWarning} is recorded.
"""
__docformat__ = 'epytext en'

import re

from pldoc import log
from pldoc.util import wordwrap, normalize_space, common_indent
from pldoc.dom import Document, Heading, Paragraph, List, \
     DescriptionList, Term, PredicateHeader, CodeBlock, InlineCode, \
     Emphasis, Link, PlainText, PredicateRef, Tag, ParamList, iter_nodes, \
     to_plaintext
from pldoc.markup import modes

##################################################
## Parse context and warnings
##################################################

class ParseContext:
    """
    The state a parse depends on, passed explicitly to L{parse}.

    @ivar docindex: The index used to recognize bare predicate
        indicators, or C{None}.
    @type docindex: L{pldoc.docindex.DocIndex}
    @ivar module: The module the comment belongs to.
    @ivar modes: Read leading mode lines: C{True}, C{False}, or
        C{None} to read them only in structured comments.
    @ivar public: Whether the documented predicate is exported.
    """
    def __init__(self, docindex=None, module=None, modes=None, public=True):
        self.docindex = docindex
        self.module = module
        self.modes = modes
        self.public = public

    def is_known(self, name, arity, kind='predicate'):
        if self.docindex is None:
            return False
        return self.docindex.lookup(name, arity, self.module, kind) is not None

class ParseWarning(Exception):
    """
    A recoverable problem found while parsing a comment.

    @ivar descr: A description of the problem.
    @type descr: C{string}
    @ivar linenum: The line of the comment on which the problem was
        found, counting from 1.
    @type linenum: C{int}
    """
    def __init__(self, descr, linenum):
        Exception.__init__(self, descr)
        self.descr = descr
        self.linenum = linenum + 1

    def __repr__(self):
        return '<ParseWarning on line %d>' % self.linenum

    def __str__(self):
        return self.as_warning()

    def as_warning(self):
        str = '%5s: Warning: ' % ('L%d' % self.linenum)
        return str + wordwrap(self.descr, 7, startindex=len(str))[:-1]

##################################################
## Comment prefixes
##################################################

_LINE_COMMENT_RE = re.compile(r'(\s*)%[%!]')
_LINE_PREFIX_RE = re.compile(r'\s*%[%!]?')
_BLOCK_COMMENT_RE = re.compile(r'(\s*)/\*\*')
_GUTTER_RE = re.compile(r'(\s*)\*(?=\s|$)')
_MODULE_RE = re.compile(r'<module>\s*(.*)$')

def is_structured_comment(lines):
    """
    @return: True if C{lines} open with C{%!}, C{%%} or C{/**}.
    """
    for line in lines:
        if line.strip():
            return bool(_LINE_COMMENT_RE.match(line) or
                        _BLOCK_COMMENT_RE.match(line))
    return False

def strip_comment(lines):
    """
    Remove the comment delimiters from C{lines}.  The prefix is
    derived once, from the opening line, and removed from every line;
    tabs are expanded and the common indentation is removed.  In a
    structured comment the first line shares the line of the opening
    delimiter, so it is stripped on its own.

    @return: C{(lines, kind)}, where C{kind} is C{'line'} for line
        comments, C{'block'} for block comments and C{None} if the
        text is not a structured comment.
    """
    lines = list(lines)
    while lines and not lines[0].strip():
        del lines[0]
    if not lines:
        return [], None

    kind = None
    m = _LINE_COMMENT_RE.match(lines[0])
    if m:
        kind = 'line'
        lines[0] = ' '*m.end() + lines[0][m.end():]
        for i in range(1, len(lines)):
            m = _LINE_PREFIX_RE.match(lines[i])
            if m:
                # Keep the columns: the prefix becomes whitespace.
                lines[i] = ' '*m.end() + lines[i][m.end():]
    else:
        m = _BLOCK_COMMENT_RE.match(lines[0])
        if m:
            kind = 'block'
            lines[0] = ' '*m.end() + lines[0][m.end():]
            for i in range(len(lines)-1, -1, -1):
                end = lines[i].find('*/')
                if end >= 0:
                    lines[i] = lines[i][:end]
                    del lines[i+1:]
                    break
            rest = [line for line in lines[1:] if line.strip()]
            if rest and all([_GUTTER_RE.match(line) for line in rest]):
                for i in range(1, len(lines)):
                    m = _GUTTER_RE.match(lines[i])
                    if m:
                        lines[i] = (m.group(1) + ' ' +
                                    lines[i][m.end():])

    lines = [line.expandtabs().rstrip() for line in lines]
    if kind is None:
        indent = common_indent(lines)
        lines = [line[indent:] for line in lines]
    else:
        indent = common_indent(lines[1:])
        lines = [lines[0].strip()] + [line[indent:] for line in lines[1:]]
    while lines and not lines[0]:
        del lines[0]
    while lines and not lines[-1]:
        lines.pop()
    return lines, kind

##################################################
## Top level
##################################################

def parse(lines, context=None, warnings=None):
    """
    Parse the text of a comment into a document tree.  Parsing never
    fails: markup that cannot be interpreted is kept as text.

    @param lines: The comment, as a string or as a list of lines.
        Comment delimiters are removed if present.
    @type lines: C{string} or C{list} of C{string}
    @param context: The parse state; see L{ParseContext}.
    @type context: L{ParseContext}
    @param warnings: A list where recoverable problems are stored as
        L{ParseWarning}s.  If no list is given, the problems are
        reported through L{pldoc.log}.
    @type warnings: C{list} of L{ParseWarning}
    @rtype: L{pldoc.dom.Document}
    """
    if context is None: context = ParseContext()
    report = warnings is None
    if report: warnings = []
    if isinstance(lines, str):
        lines = lines.replace('\r\n', '\n').split('\n')

    lines, kind = strip_comment(lines)
    if kind == 'block' and lines and _MODULE_RE.match(lines[0]):
        title = _MODULE_RE.match(lines[0]).group(1)
        heading = Heading(1, parse_inline(title, context, warnings, 0))
        body = _BlockParser(lines[1:], context, warnings, 1).parse()
        doc = Document([heading] + body)
    elif context.modes or (context.modes is None and kind is not None):
        doc = _parse_predicate(lines, context, warnings)
    else:
        doc = Document(_BlockParser(lines, context, warnings).parse())

    if report:
        for warning in warnings:
            log.warn(warning.as_warning())
    return doc

def _parse_predicate(lines, context, warnings):
    signatures, rest = modes.process_modes(lines)
    if not signatures:
        return Document(_BlockParser(lines, context, warnings).parse())
    offset = len(lines) - len(rest)
    while rest and not rest[0].strip():
        del rest[0]
        offset += 1
    indent = common_indent(rest)
    rest = [line[indent:] for line in rest]
    body = _BlockParser(rest, context, warnings, offset).parse()
    header = PredicateHeader(signatures, context.public, context.module)
    return Document([DescriptionList([(header, body)])])

##################################################
## Block structure
##################################################

_FENCE_RE = re.compile(r'={2,}$')
_HEADING_RE = re.compile(r'---(\++)\s+(.*?)(?:\s+\+*-*)?$')
_TAG_RE = re.compile(r'@(\w+)(?:\s+(.*))?$')
_ITEM_RE = re.compile(r'(?:([*-])|(\d+)\.)\s+(?=\S)')
_TERM_RE = re.compile(r'\$\s+(.+?):(?:\s+|$)')
_PARAM_TAGS = ('param', 'arg')

class _BlockParser:
    """
    A line-oriented scanner that turns the lines of one comment body
    into blocks.  Tags are not placed where they occur; they are
    collected and appended as the trailing tag section of the body.
    """
    def __init__(self, lines, context, warnings, offset=0):
        self.lines = list(lines)
        self.context = context
        self.warnings = warnings
        self.offset = offset
        self.pos = 0
        self.params = []
        self.tags = []

    def warn(self, descr, linenum=None):
        if linenum is None: linenum = self.pos
        self.warnings.append(ParseWarning(descr, linenum+self.offset))

    def parse(self):
        blocks = self.blocks(0, 0)
        if self.params:
            blocks.append(ParamList(self.params))
        for tag in self.tags:
            blocks.append(tag)
        return blocks

    def inline(self, text, linenum=None):
        if linenum is None: linenum = self.pos
        return parse_inline(text, self.context, self.warnings,
                            linenum+self.offset)

    def prev_blank(self):
        return self.pos == 0 or not self.lines[self.pos-1].strip()

    def blocks(self, min_indent, base_indent):
        """
        Read blocks until the end of the text, or until a non-blank
        line indented less than C{min_indent}.  Code blocks must be
        indented four columns deeper than C{base_indent}.
        """
        blocks = []
        lines = self.lines
        while self.pos < len(lines):
            line = lines[self.pos]
            if not line.strip():
                self.pos += 1
                continue
            indent = len(line) - len(line.lstrip())
            if indent < min_indent:
                break
            text = line[indent:]

            if _FENCE_RE.match(text):
                blocks.append(self.fenced_code(indent, text))
            elif indent >= base_indent+4 and self.prev_blank():
                blocks.append(self.indented_code(indent))
            elif _HEADING_RE.match(text):
                blocks.append(self.heading(text))
            elif _TAG_RE.match(text):
                self.tag(text)
            elif _ITEM_RE.match(text):
                blocks.append(self.bullet_list(indent))
            elif _TERM_RE.match(text):
                blocks.append(self.description_list(indent))
            else:
                blocks.append(self.paragraph(min_indent))
        return blocks

    def is_block_start(self, text):
        return bool(_FENCE_RE.match(text) or _HEADING_RE.match(text) or
                    _TAG_RE.match(text) or _ITEM_RE.match(text) or
                    _TERM_RE.match(text))

    def fenced_code(self, indent, fence):
        start = self.pos
        self.pos += 1
        body = []
        while self.pos < len(self.lines):
            line = self.lines[self.pos]
            self.pos += 1
            if line.strip() == fence:
                break
            body.append(line[indent:] if not line[:indent].strip() else
                        line.lstrip())
        else:
            self.warn('Verbatim block is not closed; it ends at the '
                      'end of the comment.', start)
        return CodeBlock('\n'.join(body))

    def indented_code(self, indent):
        body = []
        while self.pos < len(self.lines):
            line = self.lines[self.pos]
            if line.strip() and len(line) - len(line.lstrip()) < indent:
                break
            body.append(line[indent:])
            self.pos += 1
        while body and not body[-1].strip():
            body.pop()
        return CodeBlock('\n'.join(body))

    def heading(self, text):
        m = _HEADING_RE.match(text)
        level = len(m.group(1))
        if level > 4:
            self.warn('Heading level %d is too deep; using level 4.' %
                      level)
            level = 4
        node = Heading(level, self.inline(m.group(2)))
        self.pos += 1
        return node

    def tag(self, text):
        start = self.pos
        m = _TAG_RE.match(text)
        keyword = m.group(1)
        value = [m.group(2) or '']
        self.pos += 1
        while self.pos < len(self.lines):
            line = self.lines[self.pos].strip()
            if not line or _TAG_RE.match(line):
                break
            value.append(line)
            self.pos += 1
        value = ' '.join(value).strip()

        if keyword in _PARAM_TAGS:
            words = value.split(None, 1)
            if not words:
                self.warn('@%s without a parameter name.' % keyword, start)
                return
            descr = ''
            if len(words) > 1: descr = words[1]
            self.params.append((words[0], self.inline(descr, start)))
        else:
            self.tags.append(Tag(keyword, self.inline(value, start)))

    def item_body(self, indent, text_col):
        """
        Read the body of a list item or description entry whose first
        line has its text at column C{text_col}.  The marker of the
        first line is blanked out, so the text reads as the first
        paragraph of the body.
        """
        line = self.lines[self.pos]
        self.lines[self.pos] = ' '*text_col + line[text_col:]
        return self.blocks(indent+1, text_col)

    def bullet_list(self, indent):
        m = _ITEM_RE.match(self.lines[self.pos][indent:])
        ordered = m.group(2) is not None
        items = []
        while self.pos < len(self.lines):
            line = self.lines[self.pos]
            m = _ITEM_RE.match(line[indent:])
            if (line[:indent].strip() or not m or
                (m.group(2) is not None) != ordered):
                break
            body = self.item_body(indent, indent+m.end())
            if body and isinstance(body[0], Paragraph):
                body = list(body[0].content) + body[1:]
            items.append(body)
            self.skip_blank_lines(indent)
        return List(ordered, items)

    def description_list(self, indent):
        items = []
        while self.pos < len(self.lines):
            line = self.lines[self.pos]
            m = _TERM_RE.match(line[indent:])
            if line[:indent].strip() or not m:
                break
            text = m.group(1).strip()
            term = Term(text, modes.term_signature(text))
            if line[indent+m.end():].strip():
                body = self.item_body(indent, indent+m.end())
            else:
                self.pos += 1
                body = self.blocks(indent+1, indent+1)
            items.append((term, body))
            self.skip_blank_lines(indent)
        return DescriptionList(items)

    def skip_blank_lines(self, indent):
        """
        Move past blank lines if the next non-blank line continues the
        current list at C{indent}.
        """
        pos = self.pos
        while pos < len(self.lines) and not self.lines[pos].strip():
            pos += 1
        if pos < len(self.lines):
            line = self.lines[pos]
            if len(line) - len(line.lstrip()) == indent:
                self.pos = pos

    def paragraph(self, min_indent):
        start = self.pos
        text = [self.lines[self.pos].strip()]
        self.pos += 1
        while self.pos < len(self.lines):
            line = self.lines[self.pos]
            if not line.strip():
                break
            indent = len(line) - len(line.lstrip())
            if indent < min_indent or self.is_block_start(line[indent:]):
                break
            text.append(line.strip())
            self.pos += 1
        return Paragraph(self.inline(' '.join(text), start))

##################################################
## Inline markup
##################################################

_INLINE_RE = re.compile(r'''
      (?P<code>`[^`]+`)
    | (?P<labelled>\[\[(?P<label>[^\[\]]+)\]\[(?P<target>[^\[\]]+)\]\])
    | (?P<xref>\[\[(?P<ref>[^\[\]]+)\]\])
    | (?P<url><(?P<href>[a-z][a-z0-9+.-]*:[^<>\s]+)>)
    | (?P<bold>(?<![\w*])\*(?P<boldtext>[^\s*](?:[^*]*[^\s*])?)\*(?![\w*]))
    | (?P<italic>(?<![\w_])_(?P<italictext>[^\s_](?:[^_]*[^\s_])?)_(?![\w_]))
    | (?P<pi>(?<![\w/])(?P<pname>[a-z]\w*)(?P<slash>//?)(?P<parity>\d+)
                      (?![\w/]))
    ''', re.VERBOSE)

_REF_RE = re.compile(r'(?:(?P<module>\w+):)?(?P<name>[^/\s:]+)'
                     r'(?P<slash>//?)(?P<arity>\d+)$')
_SCHEME_RE = re.compile(r'[a-z][a-z0-9+.-]*:')

def parse_inline(text, context=None, warnings=None, linenum=0):
    """
    Parse the inline markup of one block of text.

    @return: The inline nodes of C{text}.
    @rtype: C{list} of L{pldoc.dom.Node}
    """
    if context is None: context = ParseContext()
    if warnings is None: warnings = []
    nodes = []
    pos = 0
    for m in _INLINE_RE.finditer(text):
        node = _inline_node(m, context)
        if node is None:
            continue
        _add_text(nodes, text[pos:m.start()], warnings, linenum)
        nodes.append(node)
        pos = m.end()
    _add_text(nodes, text[pos:], warnings, linenum)
    return nodes

def _inline_node(m, context):
    if m.group('code'):
        return InlineCode(m.group('code')[1:-1])
    if m.group('labelled'):
        target = m.group('target').strip()
        label = parse_inline(m.group('label').strip(), context)
        return _link(target, label)
    if m.group('xref'):
        ref = m.group('ref').strip()
        r = _REF_RE.match(ref)
        if r:
            if r.group('slash') == '//': kind = 'dcg_rule'
            else: kind = 'predicate'
            return PredicateRef(r.group('name'), int(r.group('arity')),
                                kind, r.group('module'))
        return _link(ref, ())
    if m.group('url'):
        return Link(m.group('href'), (), 'url')
    if m.group('bold'):
        return Emphasis('bold', parse_inline(m.group('boldtext'), context))
    if m.group('italic'):
        return Emphasis('italic',
                        parse_inline(m.group('italictext'), context))
    if m.group('pi'):
        name, arity = m.group('pname'), int(m.group('parity'))
        if m.group('slash') == '//': kind = 'dcg_rule'
        else: kind = 'predicate'
        if context.is_known(name, arity, kind):
            return PredicateRef(name, arity, kind)
    return None

def _link(target, content):
    if _SCHEME_RE.match(target):
        return Link(target, content, 'url')
    return Link(target, content, 'file')

def _add_text(nodes, text, warnings, linenum):
    if not text:
        return
    if '[[' in text:
        warnings.append(ParseWarning('Unmatched "[[" kept as text.',
                                     linenum))
    if '`' in text:
        warnings.append(ParseWarning('Unmatched "`" kept as text.',
                                     linenum))
    if nodes and isinstance(nodes[-1], PlainText):
        nodes[-1] = PlainText(nodes[-1].text + text)
    else:
        nodes.append(PlainText(text))

##################################################
## Summaries
##################################################

ABBREVIATIONS = ('dr', 'mr', 'mrs', 'ms', 'prof', 'st', 'vs', 'etc',
                 'e.g', 'i.e', 'cf', 'fig', 'no', 'resp', 'approx')
"""Words that end with a period without ending the sentence."""

_PERIOD_RE = re.compile(r'\.(?=\s|$)')
_LAST_WORD_RE = re.compile(r'(\S+)$')

def summary(text):
    """
    Return the first sentence of C{text}, with whitespace normalized.
    The sentence ends at the first period that is followed by
    whitespace or by the end of the text, except where:

      - the period follows another period (C{...});
      - the period follows a single letter, or an abbreviation
        listed in L{ABBREVIATIONS} (C{Dr.}, C{e.g.}).

    If no period ends a sentence, the whole text is returned.

    @rtype: C{string}
    """
    text = normalize_space(text)
    for m in _PERIOD_RE.finditer(text):
        end = m.start()
        if end == 0 or text[end-1] == '.':
            continue
        word = _LAST_WORD_RE.search(text, 0, end)
        if word:
            word = word.group(1).lstrip('([{"\'')
            if len(word) == 1 and word.isalpha():
                continue
            if word.lower() in ABBREVIATIONS:
                continue
        return text[:end+1]
    return text

def tree_summary(tree):
    """
    @return: The first sentence of the first paragraph of C{tree}, or
        the empty string if it has no paragraph.
    @rtype: C{string}
    """
    for node in iter_nodes(tree):
        if isinstance(node, Paragraph):
            return summary(to_plaintext(node.content))
    return ''
