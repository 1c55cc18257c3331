# emacs: -*- mode: python-mode; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the niftinrrd package for the
#   copyright and license terms.
#
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""Test read-only binary structures

We test the base class on a small example structure, with checks of its own.
The NIfTI header tests in ``test_nifti1`` exercise the same machinery on the
real header.
"""
import logging
from io import StringIO

import numpy as np
import pytest

from .. import imageglobals
from ..batteryrunners import Report
from ..errors import HeaderDataError
from ..volumeutils import Recoder, native_code, read_field, swapped_code
from ..wrapstruct import LabeledWrapStruct, WrapStruct, WrapStructError


class MyWrapStruct(WrapStruct):
    """An example wrapped struct class"""

    template_dtype = np.dtype([('an_integer', 'i2'), ('a_str', 'S10')])

    @classmethod
    def guessed_endian(klass, binaryblock):
        if 0 <= read_field(binaryblock, 0, 'i2', native_code) < 256:
            return native_code
        return swapped_code

    @classmethod
    def default_structarr(klass, endianness=None):
        structarr = super().default_structarr(endianness)
        structarr['an_integer'] = 1
        structarr['a_str'] = b'a string'
        return structarr

    @classmethod
    def _get_checks(klass):
        """Return sequence of check functions for this class"""
        return (klass._chk_integer, klass._chk_string)

    @staticmethod
    def _chk_integer(hdr):
        rep = Report(HeaderDataError)
        if hdr['an_integer'] == 1:
            return rep
        rep.problem_level = 40
        rep.problem_msg = 'an_integer should be 1'
        return rep

    @staticmethod
    def _chk_string(hdr):
        rep = Report(HeaderDataError)
        hdr_str = hdr['a_str'].item().decode('latin-1')
        if hdr_str.lower() == hdr_str:
            return rep
        rep.problem_level = 20
        rep.problem_msg = 'a_str should be lower case'
        return rep


class MyLabeledWrapStruct(LabeledWrapStruct, MyWrapStruct):
    _field_recoders = {'an_integer': Recoder(((1, 'one'), (2, 'two')),
                                             ('code', 'label'))}


def make_block(an_integer=1, a_str=b'a string', endianness=native_code):
    arr = np.zeros((), dtype=MyWrapStruct.template_dtype.newbyteorder(endianness))
    arr['an_integer'] = an_integer
    arr['a_str'] = a_str
    return arr.tobytes()


def test_general_init():
    hdr = MyWrapStruct()
    # binaryblock has length given by header data dtype
    binblock = hdr.binaryblock
    assert len(binblock) == hdr.structarr.dtype.itemsize
    # Endianness will be native by default for empty header
    assert hdr.endianness == native_code
    # But you can change this if you want
    hdr = MyWrapStruct(endianness='swapped')
    assert hdr.endianness == swapped_code
    assert hdr['an_integer'] == 1
    # Wrong sized blocks are an error
    with pytest.raises(WrapStructError):
        MyWrapStruct(binblock[:-1])
    with pytest.raises(WrapStructError):
        MyWrapStruct(binblock + b'\x00')


def test_read_only():
    hdr = MyWrapStruct(make_block())
    with pytest.raises(ValueError):
        hdr.structarr['an_integer'] = 2
    assert hdr['an_integer'] == 1
    # The structure does not keep a view onto the input
    block = bytearray(make_block())
    hdr = MyWrapStruct(block)
    block[:2] = make_block(2)[:2]
    assert hdr['an_integer'] == 1


def test_endianness_guess():
    hdr = MyWrapStruct(make_block(endianness=swapped_code))
    assert hdr.endianness == swapped_code
    assert hdr['an_integer'] == 1
    hdr = MyWrapStruct(make_block(endianness=native_code))
    assert hdr.endianness == native_code
    # Given endianness overrides guess
    hdr = MyWrapStruct(make_block(), endianness='swapped', check=False)
    assert hdr.endianness == swapped_code
    assert hdr['an_integer'] == 256


def test_eq_copy():
    hdr = MyWrapStruct(make_block())
    hdr2 = MyWrapStruct(make_block(endianness=swapped_code))
    # Equality is by values, not by byte order
    assert hdr == hdr2
    assert hdr.binaryblock != hdr2.binaryblock
    assert hdr != MyWrapStruct(make_block(a_str=b'other'))
    assert hdr != 1
    hdr_copy = hdr2.copy()
    assert hdr_copy is not hdr2
    assert hdr_copy == hdr2
    assert hdr_copy.endianness == swapped_code


def test_mappingness():
    hdr = MyWrapStruct(make_block())
    assert hdr.keys() == ['an_integer', 'a_str']
    assert list(hdr) == ['an_integer', 'a_str']
    assert [v.item() for v in hdr.values()] == [1, b'a string']
    assert dict(hdr.items())['a_str'] == b'a string'
    assert hdr.get('an_integer') == 1
    assert hdr.get('not_a_key') is None
    assert hdr.get('not_a_key', 3) == 3


def test_checks_and_reports():
    # Good blocks give no reports
    hdr = MyWrapStruct(make_block())
    assert hdr.reports == []
    # Minor problems are kept as reports
    hdr = MyWrapStruct(make_block(a_str=b'A String'))
    assert hdr.reports == [Report(HeaderDataError, 20, 'a_str should be lower case')]
    # Reports are a copy
    hdr.reports.append(None)
    assert len(hdr.reports) == 1
    # Severe problems raise at the default error level
    bad_block = make_block(an_integer=2)
    with pytest.raises(HeaderDataError):
        MyWrapStruct(bad_block)
    # Unless we do not check
    hdr = MyWrapStruct(bad_block, check=False)
    assert hdr.reports == []
    # Or the error level is higher
    with imageglobals.ErrorLevel(50):
        hdr = MyWrapStruct(bad_block)
    assert [r.problem_level for r in hdr.reports] == [40]
    # Strict checking raises for minor problems too
    with imageglobals.ErrorLevel(20):
        with pytest.raises(HeaderDataError):
            MyWrapStruct(make_block(a_str=b'A String'))


def test_check_logging():
    hdr = MyWrapStruct(make_block(a_str=b'A String'), check=False)
    str_io = StringIO()
    logger = logging.getLogger('test.logger')
    handler = logging.StreamHandler(str_io)
    logger.addHandler(handler)
    logger.setLevel(20)
    try:
        hdr.check(logger=logger, error_level=40)
    finally:
        logger.removeHandler(handler)
    assert str_io.getvalue() == 'a_str should be lower case\n'
    assert len(hdr.reports) == 1


def test_diagnose_binaryblock():
    bad_block = make_block(an_integer=2, a_str=b'A String')
    msg = MyWrapStruct.diagnose_binaryblock(bad_block)
    assert msg == 'an_integer should be 1\na_str should be lower case'
    assert MyWrapStruct.diagnose_binaryblock(make_block()) == ''


def test_base_guessed_endian():
    with pytest.raises(NotImplementedError):
        WrapStruct(b'\x00\x00')
    wstr = WrapStruct(b'\x01\x00', endianness='<')
    assert wstr['integer'] == 1


def test_str_and_labels():
    hdr = MyLabeledWrapStruct(make_block())
    assert hdr.get_value_label('an_integer') == 'one'
    with pytest.raises(ValueError):
        hdr.get_value_label('a_str')
    s1 = str(hdr)
    assert 'an_integer  : one' in s1
    hdr = MyLabeledWrapStruct(make_block(), check=False, endianness=swapped_code)
    assert hdr.get_value_label('an_integer') == '<unknown code 256>'
    # Plain structures print field values
    assert 'an_integer  : 1' in str(MyWrapStruct(make_block()))
