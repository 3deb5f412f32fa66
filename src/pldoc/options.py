# pldoc -- Rendering options
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
The configuration consumed by the document builder and by the
writers.  Options are collected once in an L{Options} object and
handed explicitly to each call; nothing is read from global state.

Writers also accept the same options as keyword arguments, in which
case they build their own C{Options} (see L{Options.derive}).
"""
__docformat__ = 'epytext en'

SECTION_LEVELS = ('chapter', 'section', 'subsection', 'subsubsection',
                  'paragraph')
"""The heading ladder of the typeset backend, outermost first."""

DEFAULTS = {
    'public_only': True,
    'section_level': 'section',
    'stand_alone': True,
    'title': None,
    'stylesheet': 'pldoc.css',
    'header': True,
    'index_href': None,
    }

class OptionError(ValueError):
    """
    An unknown option name.  The section level is checked by the LaTeX
    writer, which is the only consumer of that option.
    """

class Options:
    """
    A set of rendering options.

    @ivar public_only: Suppress predicates that are not exported.
    @ivar section_level: The heading command used for level-1
        headings by the LaTeX writer; one of L{SECTION_LEVELS}.
    @ivar stand_alone: Wrap LaTeX output in a complete document.
    @ivar title: Page title; defaults to the file name.
    @ivar stylesheet: The stylesheet linked from HTML pages.
    @ivar header: Add the navigation header to HTML pages.
    @ivar index_href: Target of the "Index" link in the navigation
        header, or C{None} to leave it out.
    """
    def __init__(self, **kwargs):
        for (key, val) in DEFAULTS.items():
            setattr(self, key, val)
        self._update(kwargs)

    def _update(self, kwargs):
        for (key, val) in kwargs.items():
            if key not in DEFAULTS:
                raise OptionError('Unknown option %r' % key)
            setattr(self, key, val)

    def derive(self, **overrides):
        """
        @return: A copy of these options, with the given values
            replaced.
        @rtype: L{Options}
        """
        options = Options(**self.as_dict())
        options._update(overrides)
        return options

    def as_dict(self):
        return dict([(key, getattr(self, key)) for key in DEFAULTS])

    def __repr__(self):
        args = ['%s=%r' % (key, getattr(self, key))
                for key in sorted(DEFAULTS)]
        return 'Options(%s)' % ', '.join(args)

def make_options(options=None, **kwargs):
    """
    Combine an optional L{Options} object with keyword overrides.
    """
    if options is None:
        return Options(**kwargs)
    return options.derive(**kwargs)
