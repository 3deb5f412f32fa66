#
# test/test_html.py: tests for the HTML writer
#
# $Id$
#

"""
Regression testing for the HTML writer.
"""

import unittest

from pldoc.dom import *
from pldoc.docindex import DocIndex
from pldoc.docwriter.html import *
from pldoc.markup import wiki

def render(tree, docindex=None, **options):
    return HTMLWriter(docindex, **options).to_html(tree)

def predicate(text, public=True):
    context = wiki.ParseContext(public=public)
    return wiki.parse(text, context).content[0]

def div(html):
    return '<div class="pldoc">%s</div>' % html

class BlockTestCase(unittest.TestCase):
    def testParagraph(self):
        self.assertEqual(render(Document([Paragraph('Hi')])),
                         div('<p>Hi</p>'))

    def testEscaping(self):
        self.assertEqual(render(Document([Paragraph('<b> & c')])),
                         div('<p>&lt;b&gt; &amp; c</p>'))
        self.assertEqual(render(Document([CodeBlock('a < b')])),
                         div('<pre class="code">a &lt; b</pre>'))

    def testHeadings(self):
        tree = wiki.parse('---+ One\n\n---++ Two')
        self.assertEqual(render(tree), div('<h1>One</h1><h2>Two</h2>'))

    def testLists(self):
        self.assertEqual(render(Document([List(False, ['a', 'b'])])),
                         div('<ul><li>a</li><li>b</li></ul>'))
        self.assertEqual(render(wiki.parse('1. one\n2. two')),
                         div('<ol><li>one</li><li>two</li></ol>'))

    def testTermList(self):
        tree = wiki.parse('$ foo(X, Y): Does foo.\n$ foo(: Broken.')
        self.assertEqual(render(tree), div(
            '<dl class="termlist">'
            '<dt class="term"><b class="pred">foo</b>'
            '<var class="arglist">(X, Y)</var></dt>'
            '<dd><p>Does foo.</p></dd>'
            '<dt class="term">foo(</dt>'
            '<dd><p>Broken.</p></dd></dl>'))

    def testTags(self):
        text = render(wiki.parse('Body.\n\n@author Jan\n@see foo/2'))
        self.assertEqual(text, div(
            '<p>Body.</p><dl class="tags">'
            '<dt>Author</dt><dd>Jan</dd>'
            '<dt>See also</dt><dd>foo/2</dd></dl>'))

    def testParams(self):
        text = render(wiki.parse('@param X The input'))
        self.assertEqual(text, div(
            '<table class="paramlist"><tr><td><var>X</var></td>'
            '<td class="argdescr">The input</td></tr></table>'))

class PredicateTestCase(unittest.TestCase):
    def testPredicate(self):
        tree = Document([predicate('%! foo(+A, -B) is det.\n%\n'
                                   '%  Does foo.')])
        self.assertEqual(render(tree), div(
            '<dl class="predicates"><dt class="pubdef"><a name="foo/2">'
            '<b class="pred">foo</b><var class="arglist">(+A, -B)</var>'
            ' is <b class="det">det</b></a></dt>'
            '<dd class="defbody"><p>Does foo.</p></dd></dl>'))

    def testOneAnchor(self):
        foo = predicate('%! foo(+A, -B) is det.')
        text = render(Document([foo, foo]))
        self.assertEqual(text.count('<a name='), 1)
        self.assertEqual(text.count('<dt'), 2)

    def testSeveralSignatures(self):
        tree = Document([predicate('%! foo(+A, -B) is det.\n'
                                   '%! foo(-A, +B) is semidet.')])
        text = render(tree)
        self.assertEqual(text.count('<a name="foo/2">'), 1)
        self.assertEqual(text.count('<dt class="pubdef">'), 2)

    def testSharedList(self):
        foo = predicate('%! foo(+A) is det.')
        bar = predicate('%! bar(+A) is det.')
        text = render(Document([foo, bar]))
        self.assertEqual(text.count('<dl class="predicates">'), 1)
        text = render(Document([foo, Paragraph('Between.'), bar]))
        self.assertEqual(text.count('<dl class="predicates">'), 2)
        self.assertTrue('</dl><p>Between.</p><dl' in text)

    def testOperators(self):
        text = render(Document([predicate('%! +X =:= +Y is semidet.')]))
        self.assertTrue('<var class="arglist">+X</var> <b class="pred">=:='
                        '</b> <var class="arglist">+Y</var> is '
                        '<b class="det">semidet</b>' in text)
        text = render(Document([predicate('%! \\+ :Goal is semidet.')]))
        self.assertTrue('<b class="pred">\\+</b>'
                        '<var class="arglist">:Goal</var>' in text)

    def testGrammarRule(self):
        text = render(Document([predicate('%! greeting(-Name)// is det.')]))
        self.assertTrue('<a name="greeting//1">' in text)
        self.assertTrue('<var class="arglist">(-Name)</var>// is ' in text)

    def testPrivate(self):
        text = render(Document([predicate('%! foo(+A) is det.',
                                          public=False)]))
        self.assertTrue('<dt class="privdef">' in text)
        self.assertTrue(' <span class="private">[private]</span></a></dt>'
                        in text)

class InlineTestCase(unittest.TestCase):
    def checkInline(self, nodes, expected, docindex=None):
        self.assertEqual(render(Document([Paragraph(nodes)]), docindex),
                         div('<p>%s</p>' % expected))

    def testMarkup(self):
        self.checkInline([InlineCode('X = 1')], '<code>X = 1</code>')
        self.checkInline([Emphasis('bold', [PlainText('b')]),
                          Emphasis('italic', 'i')], '<b>b</b><i>i</i>')

    def testLinks(self):
        self.checkInline([Link('http://x.org', 'the site')],
                         '<a href="http://x.org">the site</a>')
        self.checkInline([Link('http://x.org')],
                         '<a href="http://x.org">http://x.org</a>')
        self.checkInline([Link('README', (), 'file')],
                         '<a class="file" href="README">README</a>')

    def testReferences(self):
        docindex = DocIndex()
        docindex.register('foo', 2, 'lib.html#foo/2')
        docindex.freeze()
        self.checkInline([PredicateRef('foo', 2)],
                         '<a href="lib.html#foo/2">foo/2</a>', docindex)
        self.checkInline([PredicateRef('bar', 1)], '<i>bar/1</i>',
                         docindex)
        self.checkInline([PredicateRef('foo', 2)], '<i>foo/2</i>')

    def testWikiReferences(self):
        docindex = DocIndex()
        docindex.register('foo', 2, '#foo/2')
        docindex.freeze()
        text = html_for_wiki('Use foo/2 or [[bar/1]].', docindex)
        self.assertEqual(text, div('<p>Use <a href="#foo/2">foo/2</a> or '
                                   '<i>bar/1</i>.</p>'))

    def testQualifiedReferences(self):
        docindex = DocIndex()
        docindex.register('append', 3, 'other.html#append/3', 'other')
        docindex.freeze()
        text = html_for_wiki('[[lists:append/3]] or [[other:append/3]]',
                             docindex)
        self.assertEqual(text, div('<p><i>append/3</i> or '
                                   '<a href="other.html#append/3">'
                                   'append/3</a></p>'))

    def testUnknownNode(self):
        self.assertEqual(render(Document([42])), div('[int]'))
        self.assertEqual(render(Document(['raw <text>'])),
                         div('raw &lt;text&gt;'))

class PageTestCase(unittest.TestCase):
    def testPage(self):
        text = HTMLWriter().page(Document([Paragraph('Hi')]), 'My title')
        self.assertEqual(text,
            '<!DOCTYPE html PUBLIC "-//W3C//DTD HTML 4.01//EN" '
            '"http://www.w3.org/TR/html4/strict.dtd">\n'
            '<html><head><title>My title</title>'
            '<link href="pldoc.css" rel="stylesheet" type="text/css"/>'
            '</head><body><div class="navhdr">'
            '<span class="title">My title</span></div>'
            '<div class="pldoc"><p>Hi</p></div></body></html>\n')

    def testOptions(self):
        tree = Document([Paragraph('Hi')])
        text = HTMLWriter(header=False, stylesheet='x.css').page(tree)
        self.assertFalse('navhdr' in text)
        self.assertTrue('<link href="x.css"' in text)
        text = HTMLWriter(index_href='index.html', title='T').page(tree)
        self.assertTrue('<div class="navhdr"><a href="index.html">Index'
                        '</a> <span class="title">T</span></div>' in text)
        self.assertTrue('<title>T</title>' in text)

    def testRepeatable(self):
        writer = HTMLWriter()
        tree = Document([predicate('%! foo(+A) is det.')])
        self.assertEqual(writer.to_html(tree), writer.to_html(tree))

    def testStylesheets(self):
        self.assertTrue('dl.predicates' in stylesheet())
        self.assertEqual(stylesheet('default'), stylesheet('white'))
        self.assertNotEqual(stylesheet('black'), stylesheet('white'))
        self.assertRaises(KeyError, stylesheet, 'nonexistent')

if __name__ == '__main__':
    unittest.main()
