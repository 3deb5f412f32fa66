# pldoc -- HTML writer
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
Writer that renders document trees as HTML.

The writer builds an C{xml.dom.minidom} element tree, so that every
piece of text is escaped exactly once, when the tree is serialized.
L{HTMLWriter.to_dom} returns the element tree for a document;
L{HTMLWriter.to_html} returns its text; and L{HTMLWriter.page} wraps
it in a complete page, with a navigation header and a link to the
stylesheet.

Each predicate description is written as a C{dt} element per
signature, followed by a C{dd} element for the body::

    <dl class="predicates">
      <dt class="pubdef"><a name="append/3"><b class="pred">append</b>
        <var class="arglist">(?List1, ?List2, ?List3)</var></a></dt>
      <dd class="defbody">...</dd>
    </dl>

Contiguous predicate descriptions share a single C{dl} element.  The
first anchor signature of each predicate on a page gets an
C{<a name="PI">} element, which references to the predicate target.
"""
__docformat__ = 'epytext en'

##################################################
## Imports
##################################################

import xml.dom.minidom

from pldoc import log
from pldoc.docwriter import DocWriter, ModeStack, group_tags, \
     is_predicate_list, tag_title, placeholder_text
from pldoc.docwriter import html_css

##################################################
## Constants
##################################################

_DOCTYPE = ('<!DOCTYPE html PUBLIC "-//W3C//DTD HTML 4.01//EN" '
            '"http://www.w3.org/TR/html4/strict.dtd">\n')

def stylesheet(name='default'):
    """
    @return: The text of one of the predefined stylesheets; see
        L{html_css.STYLESHEETS}.
    @rtype: C{string}
    @raise KeyError: If there is no stylesheet with that name.
    """
    return html_css.STYLESHEETS[name][0]

##################################################
## Writer
##################################################

class HTMLWriter(DocWriter):
    """
    A writer that renders document trees as HTML.

    Each C{write_<tag>} method takes the node to render and the
    element to add its rendering to.

    @ivar _dom: The document that owns the elements being built.
    @ivar _containers: The elements that top-level nodes are added
        to, innermost last.  A C{dl class="predicates"} element is
        pushed while predicate descriptions are being written.
    @ivar _done: The indicators of the predicates that already have
        an anchor on this page.
    @ivar _modes: The environments open in the current pass.
    @type _modes: L{ModeStack}
    """
    def __init__(self, docindex=None, options=None, **kwargs):
        DocWriter.__init__(self, docindex, options, **kwargs)
        self._reset()

    def _reset(self):
        self._dom = xml.dom.minidom.Document()
        self._containers = []
        self._done = set()
        self._modes = ModeStack(self._open_mode, self._close_mode)

    def _open_mode(self, mode):
        dl = self._element(self._containers[-1], 'dl', mode)
        self._containers.append(dl)

    def _close_mode(self, mode):
        self._containers.pop()

    #////////////////////////////////////////////////////////////
    # Entry points
    #////////////////////////////////////////////////////////////

    def to_dom(self, tree):
        """
        @return: A document whose root element is a
            C{div class="pldoc"} element holding the rendering of
            C{tree}.
        @rtype: C{xml.dom.minidom.Document}
        """
        self._reset()
        root = self._element(self._dom, 'div', 'pldoc')
        self._containers.append(root)
        self.dispatch(tree, root)
        self._modes.pop_to('body')
        return self._dom

    def to_html(self, tree):
        """
        @return: The HTML text for C{tree}.
        @rtype: C{string}
        """
        return self.to_dom(tree).documentElement.toxml()

    def page(self, tree, title=None):
        """
        @return: A complete HTML page for C{tree}.
        @param title: The page title.  Defaults to the C{title} option.
        @rtype: C{string}
        """
        if title is None: title = self._options.title or ''
        dom = self.to_dom(tree)
        body = dom.documentElement
        dom.removeChild(body)

        html = self._element(dom, 'html')
        head = self._element(html, 'head')
        self._text(self._element(head, 'title'), title)
        self._element(head, 'link', rel='stylesheet', type='text/css',
                      href=self._options.stylesheet)
        page_body = self._element(html, 'body')
        if self._options.header:
            self._navigation_header(page_body, title)
        page_body.appendChild(body)
        return _DOCTYPE + html.toxml() + '\n'

    def _navigation_header(self, parent, title):
        navhdr = self._element(parent, 'div', 'navhdr')
        if self._options.index_href:
            index = self._element(navhdr, 'a', href=self._options.index_href)
            self._text(index, 'Index')
            self._text(navhdr, ' ')
        self._text(self._element(navhdr, 'span', 'title'), title)

    #////////////////////////////////////////////////////////////
    # Element helpers
    #////////////////////////////////////////////////////////////

    def _element(self, parent, tag, cls=None, **attribs):
        elt = self._dom.createElement(tag)
        if cls is not None:
            elt.setAttribute('class', cls)
        for (name, val) in sorted(attribs.items()):
            elt.setAttribute(name, val)
        parent.appendChild(elt)
        return elt

    def _text(self, parent, text):
        if text:
            parent.appendChild(self._dom.createTextNode(text))

    def _write_nodes(self, nodes, parent):
        for node in nodes:
            self.dispatch(node, parent)

    def _write_blocks(self, nodes, parent):
        for group in group_tags(nodes):
            if isinstance(group, list):
                self._write_tag_group(group, parent)
            else:
                self.dispatch(group, parent)

    #////////////////////////////////////////////////////////////
    # Block nodes
    #////////////////////////////////////////////////////////////

    def write_document(self, doc, parent):
        for group in group_tags(doc.content):
            if is_predicate_list(group):
                self._modes.need('predicates')
                self._write_predicate_items(group, self._containers[-1])
                continue
            self._modes.pop_to('body')
            if isinstance(group, list):
                self._write_tag_group(group, self._containers[-1])
            else:
                self.dispatch(group, self._containers[-1])
        self._modes.pop_to('body')

    def write_heading(self, node, parent):
        self._write_nodes(node.content,
                          self._element(parent, 'h%d' % node.level))

    def write_paragraph(self, node, parent):
        self._write_nodes(node.content, self._element(parent, 'p'))

    def write_list(self, node, parent):
        lst = self._element(parent, node.ordered and 'ol' or 'ul')
        for item in node.items:
            self._write_blocks(item, self._element(lst, 'li'))

    def write_description_list(self, node, parent):
        if node.is_predicate_list():
            dl = self._element(parent, 'dl', 'predicates')
            self._write_predicate_items(node, dl)
            return
        dl = self._element(parent, 'dl', 'termlist')
        for (term, body) in node.items:
            self.dispatch(term, dl)
            self._write_blocks(body, self._element(dl, 'dd'))

    def _write_predicate_items(self, node, dl):
        for (header, body) in node.items:
            self.dispatch(header, dl)
            self._write_blocks(body, self._element(dl, 'dd', 'defbody'))

    def write_term(self, term, parent):
        dt = self._element(parent, 'dt', 'term')
        if term.signature is None:
            self._text(dt, term.text)
        else:
            self._write_plain_head(term.signature, dt)

    def write_predicate_header(self, header, parent):
        cls = header.public and 'pubdef' or 'privdef'
        for sig in header.signatures:
            dt = self._element(parent, 'dt', cls)
            if sig.anchor and sig.pi not in self._done:
                self._done.add(sig.pi)
                dt = self._element(dt, 'a', name=sig.pi)
            self._write_signature(sig, dt)
            if not header.public:
                self._text(dt, ' ')
                self._text(self._element(dt, 'span', 'private'), '[private]')

    def _write_signature(self, sig, parent):
        if sig.fixity == 'infix':
            self._write_arg(sig, 0, parent)
            self._text(parent, ' ')
            self._text(self._element(parent, 'b', 'pred'), sig.name)
            self._text(parent, ' ')
            self._write_arg(sig, 1, parent)
        elif sig.fixity == 'prefix':
            self._text(self._element(parent, 'b', 'pred'), sig.name)
            self._write_arg(sig, 0, parent)
        elif sig.fixity == 'postfix':
            self._write_arg(sig, 0, parent)
            self._text(self._element(parent, 'b', 'pred'), sig.name)
        else:
            self._write_plain_head(sig, parent)
            if sig.dcg: self._text(parent, '//')
        if sig.det != 'unknown':
            self._text(parent, ' is ')
            self._text(self._element(parent, 'b', 'det'), sig.det)

    def _write_plain_head(self, sig, parent):
        self._text(self._element(parent, 'b', 'pred'), sig.name)
        if sig.args:
            args = [arg.to_text(i+1) for (i, arg) in enumerate(sig.args)]
            self._text(self._element(parent, 'var', 'arglist'),
                       '(%s)' % ', '.join(args))

    def _write_arg(self, sig, index, parent):
        var = self._element(parent, 'var', 'arglist')
        self._text(var, sig.args[index].to_text(index+1))

    def write_code_block(self, node, parent):
        self._text(self._element(parent, 'pre', 'code'), node.text)

    def write_tag(self, node, parent):
        self._write_tag_group([node], parent)

    def _write_tag_group(self, tags, parent):
        dl = self._element(parent, 'dl', 'tags')
        for tag in tags:
            self._text(self._element(dl, 'dt'), tag_title(tag.keyword))
            self._write_nodes(tag.value, self._element(dl, 'dd'))

    def write_param_list(self, node, parent):
        table = self._element(parent, 'table', 'paramlist')
        for (name, descr) in node.entries:
            tr = self._element(table, 'tr')
            self._text(self._element(self._element(tr, 'td'), 'var'), name)
            self._write_nodes(descr, self._element(tr, 'td', 'argdescr'))

    #////////////////////////////////////////////////////////////
    # Inline nodes
    #////////////////////////////////////////////////////////////

    def write_plain_text(self, node, parent):
        self._text(parent, node.text)

    def write_inline_code(self, node, parent):
        self._text(self._element(parent, 'code'), node.text)

    def write_emphasis(self, node, parent):
        tag = node.kind == 'bold' and 'b' or 'i'
        self._write_nodes(node.content, self._element(parent, tag))

    def write_link(self, node, parent):
        if node.kind == 'file':
            a = self._element(parent, 'a', 'file', href=node.target)
        else:
            a = self._element(parent, 'a', href=node.target)
        if node.content:
            self._write_nodes(node.content, a)
        else:
            self._text(a, node.target)

    def write_predicate_ref(self, node, parent):
        entry = self.resolve(node)
        if entry is None:
            self._text(self._element(parent, 'i'), node.indicator())
        else:
            a = self._element(parent, 'a', href=entry.location)
            self._text(a, node.indicator())

    def write_unknown(self, node, parent):
        self._text(parent, placeholder_text(node))

##################################################
## Convenience functions
##################################################

def html_for_file(filedoc, docindex=None, options=None, **kwargs):
    """
    @return: A complete HTML page documenting a source file.
    @type filedoc: L{pldoc.docbuilder.FileDoc}
    @param docindex: The index used to resolve references.  If it is
        not given, an index of the file's own predicates is built.
    @rtype: C{string}
    """
    from pldoc import docbuilder
    writer = HTMLWriter(docindex, options, **kwargs)
    if docindex is None:
        writer._docindex = docbuilder.index_objects([filedoc],
                                                   options=writer._options)
    tree = docbuilder.file_tree(filedoc, writer._docindex, writer._options)
    log.info('Writing HTML for %s' % filedoc.path)
    return writer.page(tree, writer._options.title or filedoc.title())

def html_for_wiki(text, docindex=None, options=None, **kwargs):
    """
    @return: The HTML rendering of a text written in wiki markup, as
        a C{div} element.
    @rtype: C{string}
    """
    from pldoc.markup import wiki
    context = wiki.ParseContext(docindex, modes=False)
    tree = wiki.parse(text, context)
    return HTMLWriter(docindex, options, **kwargs).to_html(tree)
