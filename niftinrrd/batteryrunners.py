# emacs: -*- mode: python-mode; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the niftinrrd package for the
#   copyright and license terms.
#
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""Battery runner classes and Report classes

These classes / objects are for generic checking of decoded headers.

The ``BatteryRunner`` class will run a series of checks on a single
object.

A check is a callable, of signature ``func(obj)`` which returns a
``Report``.  Checks never modify ``obj``; decoded headers are read-only.

To run checks only, and return problem report objects:

>>> from niftinrrd.batteryrunners import BatteryRunner, Report
>>> def chk(obj): # minimal check
...     return Report()
>>> btrun = BatteryRunner((chk,))
>>> reports = btrun.check_only('a string')

Reports have attributes ``error``, ``problem_level`` and ``problem_msg``.
The ``problem_level`` is an integer, giving the level of problem, from 0 (no
problem) to 50 (very bad problem).  The levels follow the log levels from the
logging module (e.g 30 equivalent to "warning" level, 50 to "critical").  The
``error`` can be one of ``None`` if no error to suggest, or an Exception class
that the user might consider raising for this situation.  The
``problem_msg`` is a human readable string that should explain what
happened.

For example, for the NIfTI header, we need to check the datatype::

    def chk_datatype(hdr):
        rep = Report(HeaderDataError)
        code = int(hdr['datatype'])
        if code in data_type_codes:
            return rep
        rep.problem_level = 30
        rep.problem_msg = f'datatype code {code} not recognized'
        return rep
"""


class BatteryRunner:
    """Class to run set of checks"""

    def __init__(self, checks):
        """Initialize instance from sequence of `checks`

        Parameters
        ----------
        checks : sequence
           sequence of checks, where checks are callables matching
           signature ``rep = chk(obj)``.  Checks are run in the order they
           are passed.

        Examples
        --------
        >>> def chk(obj): # minimal check
        ...     return Report()
        >>> btrun = BatteryRunner((chk,))
        """
        self._checks = checks

    def check_only(self, obj):
        """Run checks on `obj` returning reports

        Parameters
        ----------
        obj : anything
           object on which to run checks

        Returns
        -------
        reports : sequence
           sequence of report objects reporting on result of running
           checks on `obj`
        """
        return [check(obj) for check in self._checks]

    def check_raise(self, obj, logger, error_level=40):
        """Run checks on `obj`, log problems, raise on severe problems

        Checks run in order; the first report at or above `error_level` with
        an error class raises, so later checks do not run.

        Parameters
        ----------
        obj : anything
           object on which to run checks
        logger : log
           log object, implementing ``log`` method
        error_level : int, optional
           problem level at which to raise the report error

        Returns
        -------
        problems : list
           reports with non-zero problem level
        """
        problems = []
        for check in self._checks:
            report = check(obj)
            if not report.problem_level:
                continue
            report.log_raise(logger, error_level)
            problems.append(report)
        return problems

    def __len__(self):
        return len(self._checks)


class Report:
    def __init__(self, error=Exception, problem_level=0, problem_msg=''):
        """Initialize report with values

        Parameters
        ----------
        error : None or Exception
           Error to raise if raising error for this check.  If None,
           no error can be raised for this check (it was probably
           normal).
        problem_level : int
           level of problem.  From 0 (no problem) to 50 (severe
           problem).  Default is 0
        problem_msg : string
           String describing problem detected. Default is ''

        Examples
        --------
        >>> rep = Report()
        >>> rep.problem_level
        0
        >>> rep = Report(TypeError, 10)
        >>> rep.problem_level
        10
        """
        self.error = error
        self.problem_level = problem_level
        self.problem_msg = problem_msg

    def __getstate__(self):
        """State that defines object

        Returns
        -------
        tup : tuple
        """
        return self.error, self.problem_level, self.problem_msg

    def __eq__(self, other):
        """are two Report-like objects equal?

        Parameters
        ----------
        other : object
           report-like object to test equality

        Examples
        --------
        >>> rep = Report(problem_level=10)
        >>> rep2 = Report(problem_level=10)
        >>> rep == rep2
        True
        >>> rep3 = Report(problem_level=20)
        >>> rep == rep3
        False
        """
        return self.__getstate__() == other.__getstate__()

    def __ne__(self, other):
        return not self == other

    def __repr__(self):
        return f'Report({self.problem_level}, {self.problem_msg!r})'

    @property
    def message(self):
        """formatted message string"""
        return self.problem_msg

    def log_raise(self, logger, error_level=40):
        """Log problem, raise error if problem >= `error_level`

        Parameters
        ----------
        logger : log
           log object, implementing ``log`` method
        error_level : int, optional
           If ``self.problem_level`` >= `error_level`, raise error
        """
        logger.log(self.problem_level, self.message)
        if self.problem_level and self.problem_level >= error_level:
            if self.error:
                raise self.error(self.problem_msg)

    def write_raise(self, stream, error_level=40, log_level=30):
        """Write report to `stream`

        Parameters
        ----------
        stream : file-like
           implementing ``write`` method
        error_level : int, optional
           level at which to raise error for problem detected in
           ``self``
        log_level : int, optional
           Such that if ``self.problem_level`` >= `log_level` we
           write the report to `stream`, otherwise we write nothing.
        """
        if self.problem_level >= log_level:
            stream.write(f'Level {self.problem_level}: {self.message}\n')
        if self.problem_level and self.problem_level >= error_level:
            if self.error:
                raise self.error(self.problem_msg)
