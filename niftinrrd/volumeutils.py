# emacs: -*- mode: python-mode; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the niftinrrd package for the
#   copyright and license terms.
#
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""Utility functions for decoding fixed-layout binary headers and data"""

import sys
from functools import reduce
from operator import mul

import numpy as np

from .errors import InsufficientData

sys_is_le = sys.byteorder == 'little'
native_code = '<' if sys_is_le else '>'
swapped_code = '>' if sys_is_le else '<'

_endian_codes = (  # numpy code, label, aliases
    ('<', 'little', 'l', 'le', 'L', 'LE'),
    ('>', 'big', 'BIG', 'b', 'be', 'B', 'BE'),
    (native_code, sys.byteorder, 'native', 'n', 'N', '=', '|', 'i', 'I'),
    (swapped_code, 'big' if sys_is_le else 'little', 'swapped', 's', 'S', '!'),
)
# We'll put these into the Recoder class after we define it


class Recoder:
    """class to return canonical code(s) from code or aliases

    The concept is a lot easier to read in the implementation and
    tests than it is to explain, so...

    >>> # If you have some codes, and several aliases, like this:
    >>> code1 = 1; aliases1=['one', 'first']
    >>> code2 = 2; aliases2=['two', 'second']
    >>> # You might want to do this:
    >>> codes = [[code1]+aliases1,[code2]+aliases2]
    >>> recodes = Recoder(codes)
    >>> recodes.code['one']
    1
    >>> recodes.code['second']
    2
    >>> recodes.code[2]
    2
    >>> # Or maybe you have a code, a label and some aliases
    >>> codes=((1,'label1','one', 'first'),(2,'label2','two'))
    >>> # you might want to get back the code or the label
    >>> recodes = Recoder(codes, fields=('code','label'))
    >>> recodes.code['first']
    1
    >>> recodes.code['label1']
    1
    >>> recodes.label[2]
    'label2'
    >>> # For convenience, you can get the first entered name by
    >>> # indexing the object directly
    >>> recodes[2]
    2
    """

    def __init__(self, codes, fields=('code',)):
        """Create recoder object

        ``codes`` give a sequence of code, alias sequences
        ``fields`` are names by which the entries in these sequences can be
        accessed.

        By default ``fields`` gives the first column the name
        "code".  The first column is the vector of first entries
        in each of the sequences found in ``codes``.  Thence you can
        get the equivalent first column value with ob.code[value],
        where value can be a first column value, or a value in any of
        the other columns in that sequence.

        Parameters
        ----------
        codes : sequence of sequences
            Each sequence defines values (codes) that are equivalent
        fields : {('code',) string sequence}, optional
            names by which elements in sequences can be accessed
        """
        self.fields = tuple(fields)
        self.field1 = {}  # a placeholder for the check below
        for name in fields:
            if name in self.__dict__:
                raise KeyError(f'Input name {name} already in object dict')
            self.__dict__[name] = {}
        self.field1 = self.__dict__[fields[0]]
        self.add_codes(codes)

    def add_codes(self, code_syn_seqs):
        """Add codes to object

        Parameters
        ----------
        code_syn_seqs : sequence
            sequence of sequences, where each sequence ``S = code_syn_seqs[n]``
            for n in 0..len(code_syn_seqs), is a sequence giving values in the
            same order as ``self.fields``.  Each S should be at least of the
            same length as ``self.fields``.

        Examples
        --------
        >>> code_syn_seqs = ((2, 'two'), (1, 'one'))
        >>> rc = Recoder(code_syn_seqs)
        >>> rc.value_set() == set((1,2))
        True
        >>> rc.add_codes(((3, 'three'), (1, 'first')))
        >>> rc.value_set() == set((1,2,3))
        True
        """
        for code_syns in code_syn_seqs:
            # Add all the aliases
            for alias in code_syns:
                # For all defined fields, make every value in the sequence be
                # an entry to return matching index value.
                for field_ind, field_name in enumerate(self.fields):
                    self.__dict__[field_name][alias] = code_syns[field_ind]

    def __getitem__(self, key):
        """Return value from field1 dictionary (first column of values)

        >>> codes = ((1, 'one'), (2, 'two'))
        >>> Recoder(codes)['two']
        2
        """
        return self.field1[key]

    def __contains__(self, key):
        """True if field1 in recoder contains `key`"""
        try:
            self.field1[key]
        except (KeyError, TypeError):
            return False
        return True

    def keys(self):
        """Return all available code and alias values"""
        return self.field1.keys()

    def value_set(self, name=None):
        """Return set of possible returned values for column

        By default, the column is the first column.

        Parameters
        ----------
        name : {None, string}
            Where default of none gives result for first column

        >>> codes = ((1, 'one'), (2, 'two'), (1, 'repeat value'))
        >>> vs = Recoder(codes).value_set()
        >>> vs == set([1, 2]) # Sets are not ordered, hence this test
        True
        """
        if name is None:
            d = self.field1
        else:
            d = self.__dict__[name]
        return set(d.values())


# Endian code aliases
endian_codes = Recoder(_endian_codes, fields=('code', 'label'))


def pretty_mapping(mapping, getterfunc=None):
    """Make pretty string from mapping

    Adjusts text column to print values on basis of longest key.
    Probably only sensible if keys are mainly strings.

    You can pass in a callable that does clever things to get the values
    out of the mapping, given the names.  By default, we just use
    ``__getitem__``

    Parameters
    ----------
    mapping : mapping
       implementing iterator returning keys and .items()
    getterfunc : None or callable
       callable taking two arguments, ``obj`` and ``key`` where ``obj``
       is the passed mapping.  If None, just use ``lambda obj, key:
       obj[key]``

    Returns
    -------
    str : string

    Examples
    --------
    >>> d = {'a key': 'a value'}
    >>> print(pretty_mapping(d))
    a key  : a value
    """
    if getterfunc is None:
        getterfunc = lambda obj, key: obj[key]
    names = list(mapping)
    if not names:
        return ''
    mxlen = max(len(str(name)) for name in names)
    fmt = '%%-%ds  : %%s' % mxlen
    out = []
    for name in names:
        value = getterfunc(mapping, name)
        out.append(fmt % (name, value))
    return '\n'.join(out)


def make_dt_codes(codes_seqs):
    """Create datatype codes Recoder instance from datatype definitions

    Parameters
    ----------
    codes_seqs : sequence of sequences
       contained sequences must be length 4.  Elements are data type code,
       data type label, numpy type (such as ``np.float32``) and the nifti
       string representation of the code (e.g. "NIFTI_TYPE_FLOAT32").  Types
       we cannot decode have numpy type ``np.void``.

    Returns
    -------
    rec : ``Recoder`` instance
       Recoder that, by default, returns ``code`` when indexed with any
       of the corresponding code, label, or niistring.  The ``dtype``
       field gives the native numpy dtype for the code.
    """
    dt_codes = []
    for seq in codes_seqs:
        if len(seq) != 4:
            raise ValueError('Sequences must be length 4')
        code, label, np_type, niistring = seq
        dt_codes.append((code, label, niistring, np.dtype(np_type)))
    return Recoder(dt_codes, ('code', 'label', 'niistring', 'dtype'))


def buffer_size(buffer):
    """Return length in bytes of object supporting the buffer protocol"""
    return memoryview(buffer).nbytes


def read_field(buffer, offset, code, endianness='<'):
    """Read a single typed value at byte `offset` in `buffer`

    Parameters
    ----------
    buffer : bytes-like
        object supporting the buffer protocol
    offset : int
        byte offset of the value in `buffer`
    code : str or dtype
        numpy type code of the value, such as ``'i2'`` or ``'f4'``.  A
        character field is given as ``'S<n>'``, for a field ``n`` bytes wide.
    endianness : str, optional
        endian code of the stored value; any alias in ``endian_codes``

    Returns
    -------
    value : int or float or str
        Python scalar.  Character fields are decoded byte for byte, so
        trailing NUL bytes are kept.

    Examples
    --------
    >>> read_field(b'\\x00\\x01', 0, 'i2', 'big')
    1
    >>> read_field(b'\\x00\\x01', 0, 'i2', 'little')
    256
    >>> read_field(b'n+1\\x00', 0, 'S4')
    'n+1\\x00'
    """
    dt = np.dtype(code)
    if offset + dt.itemsize > buffer_size(buffer):
        raise ValueError(f'Cannot read {dt.itemsize} bytes at offset {offset}')
    if dt.kind == 'S':
        raw = memoryview(buffer).cast('B')[offset:offset + dt.itemsize]
        return bytes(raw).decode('latin-1')
    dt = dt.newbyteorder(endian_codes[endianness])
    return np.frombuffer(buffer, dtype=dt, count=1, offset=offset)[0].item()


def array_from_buffer(buffer, in_dtype, count, offset=0):
    """Get 1D array of `count` values with dtype `in_dtype` from `buffer`

    Parameters
    ----------
    buffer : bytes-like
        object supporting the buffer protocol
    in_dtype : numpy dtype
        fully specified numpy dtype, including correct endianness
    count : int
        number of values to read
    offset : int, optional
        offset in bytes into `buffer` of first value. Default is 0

    Returns
    -------
    arr : ndarray
        If `in_dtype` has native (or no) byte order, a read-only view onto
        `buffer` without copying.  Otherwise a new native endian array, with
        the values byteswapped into it.

    Raises
    ------
    InsufficientData
        If `buffer` does not contain `count` values after `offset`

    Examples
    --------
    >>> arr = array_from_buffer(b'\\x00\\x01\\x00\\x02', '>i2', 2)
    >>> arr.tolist()
    [1, 2]
    >>> arr.dtype.isnative
    True
    """
    in_dtype = np.dtype(in_dtype)
    n_bytes = count * in_dtype.itemsize
    available = buffer_size(buffer) - offset
    if n_bytes > available:
        raise InsufficientData(f'Expected {n_bytes} bytes of data, '
                               f'buffer has {max(available, 0)} bytes')
    if count == 0:
        return np.empty((0,), dtype=in_dtype.newbyteorder('='))
    arr = np.frombuffer(buffer, dtype=in_dtype, count=count, offset=offset)
    if in_dtype.isnative:
        # read-only, even for writable buffers
        arr.flags.writeable = False
        return arr
    return arr.astype(in_dtype.newbyteorder('='))


def n_elements(shape):
    """Number of elements in array of shape `shape`

    Uses Python ints, to work around numpy integer overflow

    >>> n_elements((2, 3, 4))
    24
    """
    return reduce(mul, (int(s) for s in shape), 1)
