#
# pldoc.css: default pldoc CSS stylesheets
# Edward Loper
#
# Created [01/30/01 05:18 PM]
# $Id$
#

"""
Predefined CSS stylesheets for the HTML writer (L{pldoc.docwriter.html}).

@type STYLESHEETS: C{dictionary} from C{string} to C{(string, string)}
@var STYLESHEETS: A dictionary mapping from stylesheet names to CSS
    stylesheets and descriptions.  Currently, the following
    stylesheets are defined:
      - C{default}: The default stylesheet (synonym for C{white}).
      - C{white}: Black on white, with blue highlights.
      - C{black}: White on black.
      - C{grayscale}: Grayscale black on white.
@var STYLESHEET: The default stylesheet.
"""
__docformat__ = 'epytext en'

import re

############################################################
## Basic stylesheet
############################################################

# Colors are written as $names, and filled in by _set_colors.
TEMPLATE = """
/* PlDoc CSS Stylesheet
 *
 * This stylesheet can be used to customize the appearance of the
 * pages written by pldoc's HTML writer.
 */

body                    { background: $body_bg; color: $body_fg; }
a:link                  { color: $body_link; }
a:visited               { color: $body_visited_link; }

/* Navigation header */
div.navhdr              { background: $navhdr_bg; color: $navhdr_fg;
                          border-bottom: 1px solid $navhdr_border;
                          padding: 2px 4px; margin-bottom: 1em; }
div.navhdr a            { color: $navhdr_fg; }

/* Headings and text */
h1, h2, h3, h4          { color: $heading_fg; }
pre.code                { background: $code_bg; color: $code_fg;
                          border: 1px solid $code_border;
                          padding: 0.5ex 1ex; }
code                    { color: $code_fg; }

/* Predicate descriptions */
dl.predicates           { margin-left: 0; }
dt.pubdef, dt.privdef   { margin-top: 1.5ex; }
dt.pubdef               { background: $pubdef_bg; }
dt.privdef              { background: $privdef_bg; }
b.pred                  { font-weight: bold; }
var.arglist             { font-style: italic; }
b.det                   { font-weight: normal; font-style: italic; }
span.private            { color: $private_fg; font-style: italic; }
dd.defbody              { margin-bottom: 1ex; }

/* Term lists, tags and parameters */
dl.termlist dt          { font-weight: bold; }
dl.tags                 { font-size: 90%; margin-top: 1ex; }
dl.tags dt              { font-weight: bold; float: left;
                          min-width: 10em; }
table.paramlist         { border-collapse: collapse; }
table.paramlist td      { vertical-align: top; padding: 0 1ex; }
td.argdescr             { color: $body_fg; }
"""

############################################################
## Derived color schemes
############################################################

_COLOR_RE = re.compile(r'#(..)(..)(..)')

def _set_colors(template, *dicts):
    colors = dicts[0].copy()
    for d in dicts[1:]: colors.update(d)
    return re.sub(r'\$(\w+)', lambda m:colors[m.group(1)], template)

def _rv(match):
    """
    Given a regexp match for a color, return the reverse-video version
    of that color.

    @param match: A regular expression match.
    @type match: C{Match}
    @return: The reverse-video color.
    @rtype: C{string}
    """
    rgb = [int(grp, 16) for grp in match.groups()]
    return '#' + ''.join(['%02x' % (255-c) for c in rgb])

_WHITE_COLORS = dict(
    body_bg                 =  '#ffffff',
    body_fg                 =  '#000000',
    body_link               =  '#0000ff',
    body_visited_link       =  '#204080',
    navhdr_bg               =  '#e0e8f0',
    navhdr_fg               =  '#000000',
    navhdr_border           =  '#a0a0a0',
    heading_fg              =  '#202060',
    code_bg                 =  '#f0f0f0',
    code_fg                 =  '#000060',
    code_border             =  '#c0c0c0',
    pubdef_bg               =  '#f0f4ff',
    privdef_bg              =  '#f8f0f0',
    private_fg              =  '#606060',
    )

_WHITE = _set_colors(TEMPLATE, _WHITE_COLORS)

# White-on-black.
_BLACK = _COLOR_RE.sub(r'#\3\2\1', _COLOR_RE.sub(_rv, _WHITE))

# Grayscale
_GRAYSCALE = _COLOR_RE.sub(r'#\2\2\2', _WHITE)

############################################################
## Stylesheet table
############################################################

STYLESHEETS = {
    'white': (_WHITE, "Black on white, with blue highlights"),
    'black': (_BLACK, "White on black"),
    'grayscale': (_GRAYSCALE, "Grayscale black on white"),
    'default': (_WHITE, "Default stylesheet (=white)"),
    }

STYLESHEET = STYLESHEETS['default'][0]
