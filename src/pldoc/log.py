# pldoc -- Logging
#
# Copyright (C) 2005 Edward Loper
# Author: Edward Loper <edloper@loper.org>
# URL: <http://epydoc.sf.net>
#
# $Id$

"""
Functions used to report diagnostics to the user.  These functions
are delegated to zero or more registered L{Logger} objects, which are
responsible for actually presenting the information.  Parsers and
writers only ever call the module-level functions; whoever drives
them (a script, a server, a test case) decides how messages are
shown by registering its own C{Logger}.

@group Logging Functions: error, warn, info, start_block, end_block
"""
__docformat__ = 'epytext en'

import sys

from pldoc.util import wordwrap

######################################################################
# Logger Base Class
######################################################################
class Logger:
    """
    The base class that defines the interface for X{loggers},
    which are used by pldoc to report information back to the user.
    To set up a logger, create a subclass of C{Logger} that overrides
    the methods for the messages it shows, and register it using
    L{register_logger}.  The base methods discard their messages.
    """
    def info(self, message):
        """
        Display an informational message.  If C{message} is not a
        string, then it will be cast to a string.
        """

    def warn(self, message):
        """
        Display a warning message.  If C{message} is not a string,
        then it will be cast to a string.
        """

    def error(self, message):
        """
        Display an error message.  If C{message} is not a string, then
        it will be cast to a string.
        """

    def start_block(self, header):
        """
        Start a new message block.  Any calls to L{info}, L{warn}, or
        L{error} that occur between a call to C{start_block} and a
        corresponding call to C{end_block} will be grouped together,
        and displayed with a common header.  Every call to
        C{start_block} I{must} be balanced by a call to C{end_block}.
        """

    def end_block(self):
        """
        End a message block.  See L{start_block} for details.
        """

class SimpleLogger(Logger):
    """
    A logger that writes word-wrapped messages to a stream.

    @ivar verbosity: Messages are shown when the verbosity is at least
        -1 (errors), 0 (warnings) or 2 (info).
    """
    TERM_WIDTH = 75

    def __init__(self, verbosity=0, stream=None):
        self.verbosity = verbosity
        self._stream = stream
        self._message_blocks = []

    def _format(self, prefix, message):
        return wordwrap('%s' % message, len(prefix), self.TERM_WIDTH,
                        startindex=len(prefix))

    def error(self, message):
        if self.verbosity >= -1:
            self._report('  Error: ' + self._format('  Error: ', message))

    def warn(self, message):
        if self.verbosity >= 0:
            self._report('Warning: ' + self._format('Warning: ', message))

    def info(self, message):
        if self.verbosity >= 2:
            self._report('   Info: ' + self._format('   Info: ', message))

    def start_block(self, header):
        self._message_blocks.append( (header, []) )

    def end_block(self):
        header, messages = self._message_blocks.pop()
        if messages:
            body = ''.join(['| ' + line + '\n'
                            for m in messages for line in m.split('\n')])
            self._report('+' + '-'*(self.TERM_WIDTH-1) + '\n' +
                         '| ' + header + '\n' + body)

    def _report(self, message):
        message = message.rstrip()
        if self._message_blocks:
            self._message_blocks[-1][-1].append(message)
        else:
            stream = self._stream or sys.stderr
            stream.write(message + '\n')

######################################################################
# Logger Registry
######################################################################

_loggers = []
"""
The list of registered loggers.
"""

def register_logger(logger):
    """
    Register a logger.  Each call to one of the logging functions
    defined by this module will be delegated to each registered
    logger.
    """
    if logger not in _loggers:
        _loggers.append(logger)

def remove_logger(logger):
    _loggers.remove(logger)

######################################################################
# Logging Functions
######################################################################
# The following methods all just delegate to the corresponding
# methods in the Logger class (above) for each registered logger.

def error(message):
    for logger in _loggers: logger.error(message)
error.__doc__ = Logger.error.__doc__

def warn(message):
    for logger in _loggers: logger.warn(message)
warn.__doc__ = Logger.warn.__doc__

def info(message):
    for logger in _loggers: logger.info(message)
info.__doc__ = Logger.info.__doc__

def start_block(header):
    for logger in _loggers: logger.start_block(header)
start_block.__doc__ = Logger.start_block.__doc__

def end_block():
    for logger in _loggers: logger.end_block()
end_block.__doc__ = Logger.end_block.__doc__
