# pldoc -- Cross-reference index
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
The index used to resolve cross-references between documented
predicates.

An index is filled by a single indexing pass (see
L{pldoc.docbuilder.index_objects}) and then frozen.  Writers only read
from a frozen index, so one index can be shared by any number of
render passes.  Registering into a frozen index raises
L{DocIndexError}.
"""
__docformat__ = 'epytext en'

from pldoc import log

class DocIndexError(Exception):
    """
    An attempt to modify an index that has been frozen.
    """

class IndexEntry:
    """
    A registered predicate.

    @ivar name: The predicate name.
    @ivar arity: The arity as written: for a grammar rule
        C{name//N}, this is C{N}.
    @ivar kind: C{'predicate'} or C{'dcg_rule'}.
    @ivar module: The module that defines the predicate, or C{None}.
    @ivar location: Where the predicate is documented, such as
        C{'lists.html#append/3'}.
    @ivar summary: The first sentence of its documentation.
    @ivar signature: The anchor signature of the predicate, if known.
    @type signature: L{pldoc.markup.modes.Signature}
    """
    def __init__(self, name, arity, kind, module, location, summary='',
                 signature=None):
        self.name = name
        self.arity = arity
        self.kind = kind
        self.module = module
        self.location = location
        self.summary = summary
        self.signature = signature

    def indicator(self):
        if self.kind == 'dcg_rule':
            return '%s//%d' % (self.name, self.arity)
        return '%s/%d' % (self.name, self.arity)

    def __repr__(self):
        if self.module:
            return '<IndexEntry %s:%s>' % (self.module, self.indicator())
        return '<IndexEntry %s>' % self.indicator()

def _real_arity(arity, kind):
    if kind == 'dcg_rule': return arity+2
    return arity

class DocIndex:
    """
    A mapping from predicates to the places where they are
    documented.  Entries are found by C{(module, name, arity)}, or by
    C{name/arity} alone; if two modules define the same
    C{name/arity}, the unqualified lookup finds the first one
    registered.  A grammar rule C{name//N} is stored as the predicate
    C{name/N+2}.
    """
    def __init__(self):
        self._qualified = {}
        self._bare = {}
        self._entries = []
        self._frozen = False

    def register(self, name, arity, location, module=None,
                 kind='predicate', summary='', signature=None):
        """
        Add a predicate to the index.

        @return: True if the predicate was added; False if it was
            already registered, in which case the index is unchanged.
        @rtype: C{boolean}
        @raise DocIndexError: If the index has been frozen.
        """
        if self._frozen:
            raise DocIndexError('Cannot register %s/%d: the index is '
                                'frozen' % (name, arity))
        key = (name, _real_arity(arity, kind))
        if (module,)+key in self._qualified:
            log.info('%s/%d is already registered' % key)
            return False
        entry = IndexEntry(name, arity, kind, module, location, summary,
                           signature)
        self._qualified[(module,)+key] = entry
        self._bare.setdefault(key, entry)
        self._entries.append(entry)
        return True

    def freeze(self):
        """
        End the indexing pass.  After this, the index is read-only.
        """
        self._frozen = True

    def is_frozen(self):
        return self._frozen

    def lookup(self, name, arity, module=None, kind='predicate',
               fallback=True):
        """
        Find a predicate.  If C{module} is given, an entry for that
        module is preferred; any entry for C{name/arity} is accepted
        only if C{fallback} is true.

        @param fallback: False for an explicitly qualified reference
            (C{module:name/arity}), which must not resolve to another
            module's predicate.

        @return: The entry, or C{None} if the predicate is unknown.
        @rtype: L{IndexEntry} or C{None}
        """
        key = (name, _real_arity(arity, kind))
        if module is not None and (module,)+key in self._qualified:
            return self._qualified[(module,)+key]
        if module is not None and not fallback:
            return None
        return self._bare.get(key)

    def entries(self):
        """
        @return: The registered entries, in order of registration.
        """
        return list(self._entries)

    def __len__(self):
        return len(self._entries)
