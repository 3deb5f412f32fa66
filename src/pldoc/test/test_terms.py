#
# test/test_terms.py: tests for the term reader
#
# $Id$
#

"""
Regression testing for the term reader used by the mode line parser.
"""

import unittest

from pldoc.markup.terms import *

##//////////////////////////////////////////////////////
##  Reading
##//////////////////////////////////////////////////////

class ReadTermTestCase(unittest.TestCase):
    def checkRead(self, text, term, ops=MODE_OPS):
        self.assertEqual(read_term(text, ops), term)

    def checkError(self, text, ops=MODE_OPS):
        self.assertRaises(TermSyntaxError, read_term, text, ops)

    def testAtoms(self):
        self.checkRead('foo', Atom('foo'))
        self.checkRead("'hello world'", Atom('hello world'))
        self.checkRead('[]', PList([]))
        self.checkRead('!', Atom('!'))

    def testVariables(self):
        self.checkRead('X', Var('X'))
        self.checkRead('_Rest', Var('_Rest'))
        self.assertTrue(read_term('_').is_anonymous())

    def testNumbers(self):
        self.checkRead('42', Number('42'))
        self.checkRead('3.14', Number('3.14'))
        self.checkRead('-1', Number('-1'))
        self.checkRead('- 1', Compound('-', [Number('1')]))

    def testStrings(self):
        self.checkRead('"abc"', String('abc', '"'))
        self.checkRead('`abc`', String('abc', '`'))
        self.checkRead("'it''s'", Atom("it's"))

    def testCompound(self):
        self.checkRead('foo(X, bar)',
                       Compound('foo', [Var('X'), Atom('bar')]))
        self.checkRead('f(g(a))', Compound('f', [Compound('g', [Atom('a')])]))
        # A space before the parenthesis is not functional notation.
        self.checkError('foo (X)')

    def testLists(self):
        self.checkRead('[a, b|T]', PList([Atom('a'), Atom('b')], Var('T')))
        self.checkRead('[1,2]', PList([Number('1'), Number('2')]))

    def testCurly(self):
        self.checkRead('{a}', Compound('{}', [Atom('a')]))
        self.checkRead('{}', Atom('{}'))

    def testPriority(self):
        self.checkRead('a + b * c',
                       Compound('+', [Atom('a'),
                                      Compound('*', [Atom('b'), Atom('c')])]))
        self.checkRead('a - b - c',
                       Compound('-', [Compound('-', [Atom('a'), Atom('b')]),
                                      Atom('c')]))
        self.checkRead('a:b:c',
                       Compound(':', [Atom('a'),
                                      Compound(':', [Atom('b'), Atom('c')])]))

    def testModeOperators(self):
        self.checkRead('+X', Compound('+', [Var('X')]))
        self.checkRead('?X', Compound('?', [Var('X')]))
        self.checkRead('@X', Compound('@', [Var('X')]))
        self.checkRead('-X:integer',
                       Compound('-', [Compound(':', [Var('X'),
                                                     Atom('integer')])]))
        self.checkRead('X...', Compound('...', [Var('X')]))
        self.checkRead('foo(X)//', Compound('//', [Compound('foo',
                                                            [Var('X')])]))

    def testStandardOperators(self):
        # '@' is only an operator in mode lines.
        self.checkError('@X', STANDARD_OPS)
        self.checkRead('X // 2', Compound('//', [Var('X'), Number('2')]),
                       STANDARD_OPS)

    def testEndToken(self):
        self.checkRead('foo.', Atom('foo'))
        self.checkRead('foo(X) .', Compound('foo', [Var('X')]))
        tokens = tokenize('a. ')
        self.assertEqual([t.kind for t in tokens], ['name', 'end'])

    def testErrors(self):
        self.checkError('')
        self.checkError('foo(')
        self.checkError('foo bar')
        self.checkError('foo(a,)')
        self.checkError("'unterminated")
        self.checkError('[a|b|c]')
        try:
            read_term('foo(')
        except TermSyntaxError as e:
            self.assertEqual(e.pos, 4)

##//////////////////////////////////////////////////////
##  Writing
##//////////////////////////////////////////////////////

class WriteTermTestCase(unittest.TestCase):
    def checkWrite(self, text, expected=None):
        if expected is None: expected = text
        self.assertEqual(write_term(read_term(text, STANDARD_OPS)), expected)

    def testSimple(self):
        self.checkWrite('foo')
        self.checkWrite('foo(X,bar)')
        self.checkWrite('[a,b|T]')
        self.checkWrite('"str"')

    def testOperators(self):
        self.checkWrite('a-(b-c)')
        self.checkWrite('(a-b)-c', 'a-b-c')
        self.checkWrite('X is Y+1')
        self.checkWrite('\\+ a', '\\+a')
        self.checkWrite('- (1)', '- 1')

    def testQuoting(self):
        self.assertEqual(atom_text('foo'), 'foo')
        self.assertEqual(atom_text('Foo'), "'Foo'")
        self.assertEqual(atom_text('hello world'), "'hello world'")
        self.assertEqual(atom_text("it's"), "'it\\'s'")
        self.assertEqual(atom_text('=..'), '=..')
        self.assertEqual(atom_text('[]'), '[]')

    def testMaxPriority(self):
        term = read_term('a:-b', STANDARD_OPS)
        self.assertEqual(write_term(term, 999), '(a:-b)')
        self.assertEqual(str(term), 'a:-b')

##//////////////////////////////////////////////////////
##  Operator tables
##//////////////////////////////////////////////////////

class FixityTestCase(unittest.TestCase):
    def testFixity(self):
        self.assertEqual(fixity('=:=', 2), 'infix')
        self.assertEqual(fixity('is', 2), 'infix')
        self.assertEqual(fixity('\\+', 1), 'prefix')
        self.assertEqual(fixity('foo', 2), None)
        self.assertEqual(fixity('=:=', 3), None)
        self.assertEqual(fixity('//', 1), None)
        self.assertEqual(fixity('//', 1, MODE_OPS), 'postfix')

    def testOpTable(self):
        ops = OpTable([(700, 'xfx', '===')])
        self.assertTrue(ops.is_op('==='))
        self.assertFalse(ops.is_op('=='))
        copy = ops.copy()
        copy.add(200, 'xf', '!!')
        self.assertFalse(ops.is_op('!!'))
        self.assertRaises(ValueError, ops.add, 100, 'xyz', 'bad')

if __name__ == '__main__':
    unittest.main()
