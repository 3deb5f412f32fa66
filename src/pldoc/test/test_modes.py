#
# test/test_modes.py: tests for mode lines and signatures
#
# $Id$
#

"""
Regression testing for mode lines and the signatures they declare.
"""

import unittest

from pldoc.markup.modes import *

class ModeLineTestCase(unittest.TestCase):
    def checkMode(self, text, name, args, det='unknown', dcg=False,
                  fixity=None):
        sig = parse_mode_line(text)
        self.assertNotEqual(sig, None, 'Not a mode line: %r' % text)
        self.assertEqual(sig.name, name)
        self.assertEqual([arg.to_text(i+1) for (i, arg)
                          in enumerate(sig.args)], args)
        self.assertEqual(sig.det, det)
        self.assertEqual(sig.dcg, dcg)
        self.assertEqual(sig.fixity, fixity)
        return sig

    def checkNotMode(self, text):
        self.assertEqual(parse_mode_line(text), None)

    def testPlain(self):
        self.checkMode('member(?Elem, ?List) is nondet.', 'member',
                       ['?Elem', '?List'], 'nondet')
        self.checkMode('halt', 'halt', [])
        self.checkMode('foo(X)', 'foo', ['X'])
        self.checkMode('foo(+X).', 'foo', ['+X'])

    def testTypes(self):
        sig = self.checkMode('atom_length(+Atom, -Length:integer) is det',
                             'atom_length', ['+Atom', '-Length:integer'],
                             'det')
        self.assertEqual(sig.args[1], Arg('Length', '-', 'integer'))

    def testModes(self):
        sig = self.checkMode('call(:Goal, @Options)', 'call',
                             [':Goal', '@Options'])
        self.assertEqual([arg.mode for arg in sig.args], [':', '@'])

    def testDeterminism(self):
        for det in DETERMINISM:
            self.checkMode('foo(+X) is %s.' % det, 'foo', ['+X'], det)
        self.checkNotMode('foo(+X) is quick.')

    def testGrammarRule(self):
        sig = self.checkMode('phrase(:Body, ?List)// is nondet', 'phrase',
                             [':Body', '?List'], 'nondet', dcg=True)
        self.assertEqual(sig.arity, 2)
        self.assertEqual(sig.key, ('phrase', 4))
        self.assertEqual(sig.pi, 'phrase//2')
        self.assertEqual(str(sig), 'phrase(:Body, ?List)// is nondet')

    def testOperators(self):
        self.checkMode('+X =:= +Y is semidet', '=:=', ['+X', '+Y'],
                       'semidet', fixity='infix')
        self.checkMode('\\+ :Goal is semidet', '\\+', [':Goal'],
                       'semidet', fixity='prefix')
        sig = parse_mode_line('+X =:= +Y is semidet')
        self.assertEqual(str(sig), '+X =:= +Y is semidet')

    def testEllipsis(self):
        sig = self.checkMode('format(+Format, +Args...)', 'format',
                             ['+Format', '+Args...'])
        self.assertTrue(sig.args[1].ellipsis)
        self.assertFalse(sig.args[0].ellipsis)

    def testNonVariableArgs(self):
        self.checkMode('foo(+[H|T])', 'foo', ['+[H|T]'])
        self.checkMode('foo(-)', 'foo', ['-Arg1'])

    def testBindings(self):
        sig = self.checkMode("mode(open(+X, -Y), ['File'=X, 'Stream'=Y])",
                             'open', ['+File', '-Stream'])
        self.assertEqual(sig.args[0].name, 'File')
        self.checkNotMode('mode(open(+X), [foo])')

    def testNotModeLines(self):
        self.checkNotMode('')
        self.checkNotMode('   ')
        self.checkNotMode('This is not a mode line.')
        self.checkNotMode('True if X is an atom, and')
        self.checkNotMode('42')
        self.checkNotMode('foo(')

class ProcessModesTestCase(unittest.TestCase):
    def testSplit(self):
        lines = ['foo(+A, -B) is det.', 'foo(-A, +B) is semidet.', '',
                 'Body text.']
        sigs, rest = process_modes(lines)
        self.assertEqual(len(sigs), 2)
        self.assertEqual(rest, ['', 'Body text.'])

    def testDuplicateKeys(self):
        sigs, rest = process_modes(['foo(+A, -B) is det.',
                                    'foo(-A, +B) is semidet.',
                                    'bar(+A) is det.'])
        self.assertEqual([sig.anchor for sig in sigs], [True, False, True])
        self.assertEqual(sigs[0].key, sigs[1].key)

    def testGrammarKeys(self):
        # foo//1 is the predicate foo/3.
        sigs, rest = process_modes(['foo(X)//', 'foo(X, Y, Z)'])
        self.assertEqual([sig.anchor for sig in sigs], [True, False])

    def testNoModes(self):
        sigs, rest = process_modes(['Just text.'])
        self.assertEqual(sigs, [])
        self.assertEqual(rest, ['Just text.'])

class SignatureTestCase(unittest.TestCase):
    def testSignatureFor(self):
        sig = signature_for('foo', 2)
        self.assertEqual(str(sig), 'foo(Arg1, Arg2)')
        self.assertEqual(sig.pi, 'foo/2')
        self.assertEqual(signature_for('is', 2).fixity, 'infix')
        self.assertEqual(signature_for('digits', 1, dcg=True).fixity, None)

    def testDisplayName(self):
        self.assertEqual(Arg(None, '+').display_name(3), 'Arg3')
        self.assertEqual(Arg('X').display_name(3), 'X')

    def testBind(self):
        sig = Signature('foo', [Arg('X', '+'), Arg('Y', '-')])
        bound = sig.bind({'X': 'In'})
        self.assertEqual(str(bound), 'foo(+In, -Y)')
        self.assertEqual(str(sig), 'foo(+X, -Y)')

    def testBadDeterminism(self):
        self.assertRaises(ValueError, Signature, 'foo', (), 'maybe')

    def testQuotedName(self):
        self.assertEqual(str(Signature('Foo', [Arg('X')])), "'Foo'(X)")

    def testTermSignature(self):
        sig = term_signature('foo(X, Y)')
        self.assertEqual(sig.name, 'foo')
        self.assertEqual(sig.arity, 2)
        self.assertEqual(term_signature('bar').arity, 0)
        self.assertEqual(term_signature('42'), None)
        self.assertEqual(term_signature('foo('), None)

if __name__ == '__main__':
    unittest.main()
