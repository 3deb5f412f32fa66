#
# test/test_options.py: tests for options and logging
#
# $Id$
#

"""
Regression testing for rendering options and for the logger registry.
"""

import unittest, io

from pldoc import log
from pldoc.options import *

class OptionsTestCase(unittest.TestCase):
    def testDefaults(self):
        options = Options()
        self.assertEqual(options.public_only, True)
        self.assertEqual(options.section_level, 'section')
        self.assertEqual(options.stand_alone, True)
        self.assertEqual(options.stylesheet, 'pldoc.css')
        self.assertEqual(options.index_href, None)

    def testUnknown(self):
        self.assertRaises(OptionError, Options, colour='blue')
        self.assertRaises(OptionError, Options().derive, colour='blue')

    def testDerive(self):
        options = Options(section_level='chapter')
        derived = options.derive(stand_alone=False)
        self.assertEqual(derived.section_level, 'chapter')
        self.assertEqual(derived.stand_alone, False)
        self.assertEqual(options.stand_alone, True)

    def testMakeOptions(self):
        options = Options(title='T')
        self.assertEqual(make_options().title, None)
        self.assertEqual(make_options(options).title, 'T')
        self.assertEqual(make_options(options, header=False).title, 'T')
        self.assertEqual(make_options(options, header=False).header, False)
        self.assertEqual(options.header, True)

    def testAsDict(self):
        self.assertEqual(sorted(Options().as_dict()), sorted(DEFAULTS))
        self.assertTrue(repr(Options()).startswith('Options('))

class LogTestCase(unittest.TestCase):
    def setUp(self):
        self.stream = io.StringIO()
        self.logger = log.SimpleLogger(0, self.stream)
        log.register_logger(self.logger)

    def tearDown(self):
        log.remove_logger(self.logger)

    def testVerbosity(self):
        log.warn('a warning')
        log.info('some info')
        log.error('an error')
        self.assertEqual(self.stream.getvalue(),
                         'Warning: a warning\n  Error: an error\n')

    def testBlocks(self):
        log.start_block('Indexing')
        log.end_block()
        self.assertEqual(self.stream.getvalue(), '')
        log.start_block('Indexing')
        log.warn('late')
        self.assertEqual(self.stream.getvalue(), '')
        log.end_block()
        self.assertTrue('| Indexing\n' in self.stream.getvalue())
        self.assertTrue('| Warning: late\n' in self.stream.getvalue())

    def testWrapping(self):
        log.warn('word ' * 40)
        for line in self.stream.getvalue().split('\n'):
            self.assertTrue(len(line) <= log.SimpleLogger.TERM_WIDTH)

if __name__ == '__main__':
    unittest.main()
