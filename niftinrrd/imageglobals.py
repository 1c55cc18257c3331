# emacs: -*- mode: python-mode; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the niftinrrd package for the
#   copyright and license terms.
#
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""Defaults for header decoding

error_level is the problem level (see batteryrunners) at which an error will be
raised, by the batteryrunners ``log_raise`` method.  The default of 40 lets all
the non-fatal diagnostics (level 30) through as reports, and raises for the
fatal ones (level 50).  Use a level of 30 for strict decoding, where any
diagnostic becomes an error.

``logger`` is the default logger (python log instance).  It only has a
``NullHandler``, so reports do not appear anywhere until the application
configures logging, for example with ``logging.basicConfig()`` or by adding a
handler to ``logger``.

To set the log level (log message appears for problem of level >= log level),
use e.g. ``logger.setLevel(30)``.
"""
import logging

error_level = 40
#: problem level of reports for problems that do not stop decoding
warn_level = 30
logger = logging.getLogger('niftinrrd.global')
logger.addHandler(logging.NullHandler())


class ErrorLevel:
    """Context manager to set log error level"""

    def __init__(self, level):
        self.level = level

    def __enter__(self):
        global error_level
        self._original_level = error_level
        error_level = self.level

    def __exit__(self, exc, value, tb):
        global error_level
        error_level = self._original_level
        return False


class LoggingOutputSuppressor:
    """Context manager to prevent global logger from printing"""

    def __enter__(self):
        self.orig_handlers = list(logger.handlers)
        for handler in self.orig_handlers:
            logger.removeHandler(handler)

    def __exit__(self, exc, value, tb):
        for handler in self.orig_handlers:
            logger.addHandler(handler)
