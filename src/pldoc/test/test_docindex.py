#
# test/test_docindex.py: tests for the cross-reference index
#
# $Id$
#

"""
Regression testing for the cross-reference index.
"""

import unittest

from pldoc.docindex import *

class DocIndexTestCase(unittest.TestCase):
    def setUp(self):
        self.index = DocIndex()
        self.index.register('append', 3, 'lists.html#append/3', 'lists',
                            summary='Concatenate lists.')
        self.index.register('phrase', 2, 'dcg.html#phrase//2', 'dcg',
                            kind='dcg_rule')

    def testLookup(self):
        entry = self.index.lookup('append', 3)
        self.assertEqual(entry.location, 'lists.html#append/3')
        self.assertEqual(entry.summary, 'Concatenate lists.')
        self.assertEqual(entry.indicator(), 'append/3')
        self.assertEqual(self.index.lookup('append', 2), None)
        self.assertEqual(self.index.lookup('prepend', 3), None)

    def testModules(self):
        self.assertEqual(self.index.lookup('append', 3, 'lists').module,
                         'lists')
        # An unknown module falls back to the unqualified entry.
        self.assertEqual(self.index.lookup('append', 3, 'other').module,
                         'lists')
        self.index.register('append', 3, 'my.html#append/3', 'mine')
        self.assertEqual(self.index.lookup('append', 3, 'mine').location,
                         'my.html#append/3')
        self.assertEqual(self.index.lookup('append', 3).location,
                         'lists.html#append/3')

    def testExplicitModule(self):
        self.assertEqual(self.index.lookup('append', 3, 'other',
                                           fallback=False), None)
        entry = self.index.lookup('append', 3, 'lists', fallback=False)
        self.assertEqual(entry.module, 'lists')
        self.assertEqual(self.index.lookup('append', 3, fallback=False),
                         entry)

    def testGrammarRules(self):
        entry = self.index.lookup('phrase', 2, kind='dcg_rule')
        self.assertEqual(entry.indicator(), 'phrase//2')
        # phrase//2 is the predicate phrase/4.
        self.assertEqual(self.index.lookup('phrase', 4), entry)
        self.assertEqual(self.index.lookup('phrase', 2), None)

    def testDuplicates(self):
        self.assertFalse(self.index.register('append', 3, 'x.html',
                                             'lists'))
        self.assertEqual(self.index.lookup('append', 3).location,
                         'lists.html#append/3')
        self.assertEqual(len(self.index), 2)

    def testFreeze(self):
        self.assertFalse(self.index.is_frozen())
        self.index.freeze()
        self.assertTrue(self.index.is_frozen())
        self.assertRaises(DocIndexError, self.index.register, 'foo', 1,
                          'x.html#foo/1')
        self.assertNotEqual(self.index.lookup('append', 3), None)

    def testEntries(self):
        self.assertEqual([repr(e) for e in self.index.entries()],
                         ['<IndexEntry lists:append/3>',
                          '<IndexEntry dcg:phrase//2>'])

if __name__ == '__main__':
    unittest.main()
