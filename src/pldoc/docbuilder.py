# pldoc -- Documentation builder
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
Build document trees for documented source files.

The objects that are documented, and their comments, are described
by L{DocObject} and L{FileDoc}; finding them in source files is left
to the caller.  Documentation is built in two passes:

  1. L{index_objects} registers every documented predicate in a
     L{DocIndex}, and freezes it.
  2. L{object_tree} and L{file_tree} build the document trees, using
     the index to recognize references.

The trees can then be rendered by any writer in L{pldoc.docwriter}.
"""
__docformat__ = 'epytext en'

import os.path

from pldoc import log
from pldoc.options import make_options
from pldoc.docindex import DocIndex
from pldoc.dom import Document, Heading, Paragraph, DescriptionList, \
     PredicateHeader, PlainText, to_plaintext, is_predicate_list
from pldoc.markup import wiki
from pldoc.markup.modes import signature_for

##################################################
## Documented objects
##################################################

class DocObject:
    """
    A documented predicate.

    @ivar name: The predicate name.
    @ivar arity: The predicate arity.  For a grammar rule, this is the
        arity as written (C{name//arity}).
    @ivar comment: The structured comment that documents the
        predicate, as a string or a list of lines, or C{None}.
    @ivar module: The module that defines the predicate.
    @ivar pos: Where the predicate is defined, such as
        C{('lists.pl', 42)}; only used in messages.
    @ivar public: False if the predicate is not exported.
    @ivar dcg: True for a grammar rule.
    """
    def __init__(self, name, arity, comment, module=None, pos=None,
                 public=True, dcg=False):
        self.name = name
        self.arity = arity
        self.comment = comment
        self.module = module
        self.pos = pos
        self.public = public
        self.dcg = dcg

    def indicator(self):
        if self.dcg: return '%s//%d' % (self.name, self.arity)
        return '%s/%d' % (self.name, self.arity)

    def __repr__(self):
        return '<DocObject %s>' % self.indicator()

class FileDoc:
    """
    A documented source file.

    @ivar path: The file name.
    @ivar objects: The documented predicates, in source order.
    @type objects: C{list} of L{DocObject}
    @ivar comment: The module comment (C{/** <module> Title ...}), or
        C{None}.
    @ivar module: The module defined by the file.
    """
    def __init__(self, path, objects=(), comment=None, module=None):
        self.path = path
        self.objects = list(objects)
        self.comment = comment
        self.module = module

    def base(self):
        """@return: The file name, without its directory."""
        return os.path.basename(self.path)

    def page(self):
        """@return: The name of the HTML page for this file."""
        return os.path.splitext(self.base())[0] + '.html'

    def title(self):
        """
        @return: The title of the file's documentation: C{base --
            Title}, where C{Title} is taken from the module comment.
        """
        title, body = _module_comment(self, None, warnings=[])
        return to_plaintext(_title_heading(self, title).content).strip()

    def __repr__(self):
        return '<FileDoc %s>' % self.path

##################################################
## Indexing pass
##################################################

def _parse_object(obj, docindex, module=None, warnings=None):
    context = wiki.ParseContext(docindex, obj.module or module,
                                modes=True, public=obj.public)
    report = warnings is None
    if report: warnings = []
    tree = wiki.parse(obj.comment, context, warnings)
    if report:
        for warning in warnings:
            log.warn('In %s: %s' % (_where(obj), warning.as_warning()))
    return tree

def _where(obj):
    if obj.pos is None: return obj.indicator()
    return '%s (%s:%s)' % ((obj.indicator(),) + tuple(obj.pos))

def _anchor_signature(obj, tree):
    """
    @return: The first anchor signature declared by C{tree}, or a
        signature synthesized from C{obj}.
    """
    if tree is not None:
        for node in tree.content:
            if is_predicate_list(node):
                for sig in node.items[0][0].signatures:
                    if sig.anchor: return sig
    return signature_for(obj.name, obj.arity, obj.dcg)

def index_objects(items, docindex=None, options=None, **kwargs):
    """
    Register documented predicates in an index, and freeze it.  Each
    predicate is registered under its first anchor signature, with
    the location C{page#PI} and the first sentence of its comment.

    @param items: The files or objects to index.  Objects that are
        not in a file are given locations of the form C{#PI}.
    @type items: C{list} of L{FileDoc} or L{DocObject}
    @param docindex: The index to add to.  If it is not given, a new
        index is created.
    @rtype: L{DocIndex}
    @raise DocIndexError: If C{docindex} is already frozen.
    """
    options = make_options(options, **kwargs)
    if docindex is None: docindex = DocIndex()
    log.start_block('Indexing')
    try:
        for item in items:
            if isinstance(item, FileDoc):
                for obj in item.objects:
                    _index_object(obj, docindex, options, item.page(),
                                  item.module)
            else:
                _index_object(item, docindex, options, '')
    finally:
        log.end_block()
    docindex.freeze()
    return docindex

def _index_object(obj, docindex, options, page, module=None):
    if options.public_only and not obj.public:
        return
    tree = None
    summary = ''
    if obj.comment is not None:
        # Problems are reported when the tree is built.
        tree = _parse_object(obj, None, module, warnings=[])
        summary = wiki.tree_summary(tree)
    sig = _anchor_signature(obj, tree)
    kind = sig.dcg and 'dcg_rule' or 'predicate'
    docindex.register(sig.name, sig.arity, '%s#%s' % (page, sig.pi),
                      obj.module or module, kind, summary, sig)

##################################################
## Document trees
##################################################

NO_DOCUMENTATION = 'No documentation'

def object_tree(obj, docindex=None, module=None):
    """
    Build the document tree for one predicate: a description list
    holding a single predicate description.  If the comment has no
    mode lines, a signature is synthesized from the name and arity.

    @type obj: L{DocObject}
    @param module: The module of the enclosing file, used if C{obj}
        has none.
    @rtype: L{pldoc.dom.Document}
    """
    if obj.comment is None:
        header = PredicateHeader([_anchor_signature(obj, None)],
                                 obj.public, obj.module or module)
        body = [Paragraph(NO_DOCUMENTATION)]
        return Document([DescriptionList([(header, body)])])

    tree = _parse_object(obj, docindex, module)
    if tree.content and is_predicate_list(tree.content[0]):
        return tree
    header = PredicateHeader([_anchor_signature(obj, None)], obj.public,
                             obj.module or module)
    body = list(tree.content) or [Paragraph(NO_DOCUMENTATION)]
    return Document([DescriptionList([(header, body)])])

def _module_comment(filedoc, docindex, warnings=None):
    if filedoc.comment is None:
        return None, []
    context = wiki.ParseContext(docindex, filedoc.module, modes=False)
    tree = wiki.parse(filedoc.comment, context, warnings)
    content = list(tree.content)
    if content and isinstance(content[0], Heading) and \
           content[0].level == 1:
        return content[0], content[1:]
    return None, content

def _title_heading(filedoc, title):
    if title is None:
        return Heading(1, filedoc.base())
    return Heading(1, (PlainText('%s -- ' % filedoc.base()),) +
                   title.content)

def file_tree(filedoc, docindex=None, options=None, **kwargs):
    """
    Build the document tree for a source file: a title, the module
    comment, and the description of each predicate.  Predicates that
    are not exported are left out if the C{public_only} option is
    set.

    @type filedoc: L{FileDoc}
    @rtype: L{pldoc.dom.Document}
    """
    options = make_options(options, **kwargs)
    title, body = _module_comment(filedoc, docindex)
    content = [_title_heading(filedoc, title)] + body
    for obj in filedoc.objects:
        if options.public_only and not obj.public:
            continue
        tree = object_tree(obj, docindex, filedoc.module)
        content.extend(tree.content)
    return Document(content)
