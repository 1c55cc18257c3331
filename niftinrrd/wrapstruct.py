# emacs: -*- mode: python-mode; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the niftinrrd package for the
#   copyright and license terms.
#
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""Class to wrap numpy structured array

============
 wrapstruct
============

The :class:`WrapStruct` class is a read-only wrapper around a numpy
structured array type, viewing a fixed-layout binary block.

It implements:

* Mappingness from the underlying structured array fields
* A mechanism for running checks on the data on object creation, collecting
  the resulting reports
* Endianness guessing

The :class:`LabeledWrapStruct` subclass adds:

* A pretty printing mechanism whereby field values can be displayed as
  corresponding strings (see :meth:`LabeledWrapStruct.get_value_label` and
  :meth:`LabeledWrapStruct.__str_`)

Mappingness
-----------

You can access fields of the contained structarr using standard
__getitem__ syntax:

    wrapped['field']

Wrapped structures also implement general mappingness:

    wrapped.keys()
    wrapped.items()
    wrapped.values()

Properties::

    .endianness (read only)
    .binaryblock (read only)
    .structarr (read only)
    .reports (read only)

Methods::

    .check()
    .__str__
    .__eq__
    .__ne__
    .get_value_label(name)

Class methods::

    .diagnose_binaryblock
    .default_structarr() - return default structured array
    .guessed_endian(binaryblock) - return guessed endian code

Class variables:
    template_dtype - native endian version of dtype for contained structarr

Consistency checks
------------------

``WrapStruct`` can hold checks for internal consistency of the contained
data.  Checks with non-zero problem level are kept in the ``reports``
attribute, and logged to ``niftinrrd.imageglobals.logger``.  If a problem is
severe enough, checking raises an error::

   wrapped = WrapStruct(bad_binaryblock)

We set the error level (the level of problem that checking will accept as
OK) from global defaults::

   import niftinrrd as nn
   nn.imageglobals.error_level = 30

If we want the created object, come what may::

   wrapped = WrapStruct(bad_binaryblock, check=False)
"""
import numpy as np

from . import imageglobals as imageglobals
from .batteryrunners import BatteryRunner
from .errors import NiftiNrrdError
from .volumeutils import buffer_size, endian_codes, native_code, pretty_mapping


class WrapStructError(NiftiNrrdError):
    pass


class WrapStruct:
    # placeholder datatype
    template_dtype = np.dtype([('integer', 'i2')])

    def __init__(self, binaryblock=None, endianness=None, check=True):
        """Initialize WrapStruct from binary data block

        Parameters
        ----------
        binaryblock : {None, bytes-like} optional
            binary block to set into object.  By default, None, in
            which case we insert the default empty block
        endianness : {None, '<','>', other endian code} string, optional
            endianness of the binaryblock.  If None, guess endianness
            from the data.
        check : bool, optional
            Whether to check content of binary data in initialization.
            Default is True.

        Examples
        --------
        >>> wstr1 = WrapStruct() # a default structure
        >>> wstr1.endianness == native_code
        True
        >>> int(wstr1['integer'])
        0
        """
        self._reports = []
        if binaryblock is None:
            self._structarr = self.__class__.default_structarr(endianness)
            self._structarr.flags.writeable = False
            return
        # check size
        if buffer_size(binaryblock) != self.template_dtype.itemsize:
            raise WrapStructError('Binary block is wrong size')
        if endianness is None:
            endianness = self.__class__.guessed_endian(binaryblock)
        else:
            endianness = endian_codes[endianness]
        dt = self.template_dtype
        if endianness != native_code:
            dt = dt.newbyteorder(endianness)
        wstr = np.ndarray(shape=(), dtype=dt, buffer=binaryblock)
        self._structarr = wstr.copy()
        self._structarr.flags.writeable = False
        if check:
            self.check()

    @property
    def binaryblock(self):
        """binary block of data as bytes

        Examples
        --------
        >>> # Make default empty structure
        >>> wstr = WrapStruct()
        >>> len(wstr.binaryblock)
        2
        """
        return self._structarr.tobytes()

    @property
    def endianness(self):
        """endian code of binary data

        The endianness code gives the byte order interpretation of the binary
        data.

        Examples
        --------
        >>> wstr = WrapStruct()
        >>> code = wstr.endianness
        >>> code == native_code
        True

        Notes
        -----
        Endianness gives endian interpretation of binary data. It is
        read only; it is set on initialization.
        """
        if self._structarr.dtype.isnative:
            return native_code
        return endian_codes['swapped']

    @property
    def reports(self):
        """List of reports with non-zero problem level from last check"""
        return list(self._reports)

    def copy(self):
        """Return copy of structure

        >>> wstr = WrapStruct()
        >>> wstr2 = wstr.copy()
        >>> wstr2 is wstr
        False
        >>> wstr2 == wstr
        True
        """
        return self.__class__(self.binaryblock, self.endianness, check=False)

    def __eq__(self, other):
        """equality between two structures defined by binaryblock

        Examples
        --------
        >>> wstr = WrapStruct()
        >>> wstr2 = WrapStruct()
        >>> wstr == wstr2
        True
        >>> wstr3 = WrapStruct(endianness=endian_codes['swapped'])
        >>> wstr == wstr3
        True
        """
        this_end = self.endianness
        this_bb = self.binaryblock
        try:
            other_end = other.endianness
            other_bb = other.binaryblock
        except AttributeError:
            return False
        if this_end == other_end:
            return this_bb == other_bb
        other_bb = other._structarr.byteswap().tobytes()
        return this_bb == other_bb

    def __ne__(self, other):
        return not self == other

    def __getitem__(self, item):
        """Return values from structure data

        Examples
        --------
        >>> wstr = WrapStruct()
        >>> bool(wstr['integer'] == 0)
        True
        """
        return self._structarr[item]

    def __iter__(self):
        return iter(self.keys())

    def keys(self):
        """Return keys from structured data"""
        return list(self.template_dtype.names)

    def values(self):
        """Return values from structured data"""
        data = self._structarr
        return [data[key] for key in self.template_dtype.names]

    def items(self):
        """Return items from structured data"""
        return zip(self.keys(), self.values())

    def get(self, k, d=None):
        """Return value for the key k if present or d otherwise"""
        return self._structarr[k] if k in self.keys() else d

    def check(self, logger=None, error_level=None):
        """Check structured data with checks

        Reports with non-zero problem level are logged to `logger`, and kept
        in ``self.reports``.

        Parameters
        ----------
        logger : None or logging.Logger
        error_level : None or int
            Level of error severity at which to raise error.  Any error of
            severity >= `error_level` will cause an exception.
        """
        if logger is None:
            logger = imageglobals.logger
        if error_level is None:
            error_level = imageglobals.error_level
        battrun = BatteryRunner(self.__class__._get_checks())
        self._reports = battrun.check_raise(self, logger, error_level)

    @classmethod
    def diagnose_binaryblock(klass, binaryblock, endianness=None):
        """Run checks over binary data, return string"""
        wstr = klass(binaryblock, endianness=endianness, check=False)
        battrun = BatteryRunner(klass._get_checks())
        reports = battrun.check_only(wstr)
        return '\n'.join([report.message for report in reports if report.message])

    @classmethod
    def guessed_endian(klass, binaryblock):
        """Guess intended endianness from binary data

        Parameters
        ----------
        binaryblock : bytes-like
            Binary block for the structure.  We will guess the endianness
            from looking at the field values

        Returns
        -------
        endianness : {'<', '>'}
           Guessed endianness of binary data in ``binaryblock``
        """
        raise NotImplementedError

    @classmethod
    def default_structarr(klass, endianness=None):
        """Return structured array for default structure with given endianness"""
        dt = klass.template_dtype
        if endianness is not None:
            endianness = endian_codes[endianness]
            dt = dt.newbyteorder(endianness)
        return np.zeros((), dtype=dt)

    @property
    def structarr(self):
        """Structured data, with data fields

        Examples
        --------
        >>> wstr1 = WrapStruct() # with default data
        >>> an_int = wstr1.structarr['integer']
        >>> wstr1.structarr.flags.writeable
        False
        """
        return self._structarr

    def __str__(self):
        """Return string representation for printing"""
        summary = f"{self.__class__} object, endian='{self.endianness}'"
        return '\n'.join([summary, pretty_mapping(self)])

    @classmethod
    def _get_checks(klass):
        """Return sequence of check functions for this class"""
        return ()


class LabeledWrapStruct(WrapStruct):
    """A WrapStruct with some fields having value labels for printing etc"""

    _field_recoders = {}  # for recoding values for str

    def get_value_label(self, fieldname):
        """Returns label for coded field

        A coded field is an int field containing codes that stand for
        discrete values that also have string labels.

        Parameters
        ----------
        fieldname : str
           name of header field to get label for

        Returns
        -------
        label : str
           label for code value in header field `fieldname`

        Raises
        ------
        ValueError
            if field is not coded.

        Examples
        --------
        >>> from niftinrrd.volumeutils import Recoder
        >>> recoder = Recoder(((1, 'one'), (2, 'two')), ('code', 'label'))
        >>> class C(LabeledWrapStruct):
        ...     template_dtype = np.dtype([('datatype', 'i2')])
        ...     _field_recoders = dict(datatype = recoder)
        >>> hdr  = C()
        >>> hdr.get_value_label('datatype')
        '<unknown code 0>'
        >>> hdr = C(b'\\x02\\x00', endianness='<')
        >>> hdr.get_value_label('datatype')
        'two'
        """
        if fieldname not in self._field_recoders:
            raise ValueError(f'{fieldname} not a coded field')
        code = int(self._structarr[fieldname])
        try:
            return self._field_recoders[fieldname].label[code]
        except KeyError:
            return f'<unknown code {code}>'

    def __str__(self):
        """Return string representation for printing"""
        summary = f"{self.__class__} object, endian='{self.endianness}'"

        def _getter(obj, key):
            try:
                return obj.get_value_label(key)
            except ValueError:
                return obj[key]

        return '\n'.join([summary, pretty_mapping(self, _getter)])
