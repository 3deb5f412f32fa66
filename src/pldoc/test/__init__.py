# pldoc -- Regression testing
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
Regression testing.  Each C{test_*.py} module in this package holds
the test cases for one part of pldoc; L{main} runs all of them, along
with the examples in the docstrings of L{pldoc.dom}.
"""
__docformat__ = 'epytext en'

import unittest, doctest, os.path

import pldoc
import pldoc.dom

def testsuite():
    """
    @return: A unittest suite holding every pldoc test.
    """
    testdir = os.path.dirname(os.path.abspath(__file__))
    toplevel = os.path.dirname(os.path.dirname(testdir))
    loader = unittest.TestLoader()
    tests = loader.discover(testdir, pattern='test_*.py',
                            top_level_dir=toplevel)
    return unittest.TestSuite([tests, doctest.DocTestSuite(pldoc.dom)])

def main():
    # Turn on debugging.
    pldoc.DEBUG = True
    doctest.set_unittest_reportflags(doctest.REPORT_UDIFF)
    unittest.TextTestRunner(verbosity=2).run(testsuite())

if __name__=='__main__':
    main()
