# emacs: -*- mode: python-mode; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the niftinrrd package for the
#   copyright and license terms.
#
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""Read access to NIfTI1 headers and single-file image data

NIfTI1 format defined at http://nifti.nimh.nih.gov/nifti-1/

The header is decoded from an in-memory buffer holding a complete ``.nii``
file, or at least its first 348 bytes.  The byte order of the buffer is
not declared anywhere in the file, so we work it out from the header fields.
"""
from collections import namedtuple

import numpy as np

from . import imageglobals
from .batteryrunners import Report
from .errors import (
    BufferTooSmall,
    HeaderDataError,
    HeaderTooSmall,
    IllegalVoxOffset,
    ImageFileError,
    NoValidDimensions,
    NotNifti1,
    UndeterminableByteOrder,
)
from .quaternions import fillpositive
from .volumeutils import (
    Recoder,
    array_from_buffer,
    buffer_size,
    make_dt_codes,
    n_elements,
    read_field,
)
from .wrapstruct import LabeledWrapStruct

# nifti1 flat header definition for Analyze-like first 348 bytes
# first number in comments indicates offset in file header in bytes
header_dtd = [
    ('sizeof_hdr', 'i4'),      # 0; must be 348
    ('data_type', 'S10'),      # 4; unused
    ('db_name', 'S18'),        # 14; unused
    ('extents', 'i4'),         # 32; unused
    ('session_error', 'i2'),   # 36; unused
    ('regular', 'S1'),         # 38; unused
    ('dim_info', 'i1'),        # 39; MRI slice ordering code
    ('dim', 'i2', (8,)),       # 40; data array dimensions
    ('intent_p1', 'f4'),       # 56; first intent parameter
    ('intent_p2', 'f4'),       # 60; second intent parameter
    ('intent_p3', 'f4'),       # 64; third intent parameter
    ('intent_code', 'i2'),     # 68; NIFTI intent code
    ('datatype', 'i2'),        # 70; it's the datatype
    ('bitpix', 'i2'),          # 72; number of bits per voxel
    ('slice_start', 'i2'),     # 74; first slice index
    ('pixdim', 'f4', (8,)),    # 76; grid spacings (units below)
    ('vox_offset', 'f4'),      # 108; offset to data in image file
    ('scl_slope', 'f4'),       # 112; data scaling slope
    ('scl_inter', 'f4'),       # 116; data scaling intercept
    ('slice_end', 'i2'),       # 120; last slice index
    ('slice_code', 'i1'),      # 122; slice timing order
    ('xyzt_units', 'u1'),      # 123; units of pixdim[1..4]
    ('cal_max', 'f4'),         # 124; max display intensity
    ('cal_min', 'f4'),         # 128; min display intensity
    ('slice_duration', 'f4'),  # 132; time for 1 slice
    ('toffset', 'f4'),         # 136; time axis shift
    ('glmax', 'i4'),           # 140; unused
    ('glmin', 'i4'),           # 144; unused
    ('descrip', 'S80'),        # 148; any text
    ('aux_file', 'S24'),       # 228; auxiliary filename
    ('qform_code', 'i2'),      # 252; xform code
    ('sform_code', 'i2'),      # 254; xform code
    ('quatern_b', 'f4'),       # 256; quaternion b param
    ('quatern_c', 'f4'),       # 260; quaternion c param
    ('quatern_d', 'f4'),       # 264; quaternion d param
    ('qoffset_x', 'f4'),       # 268; quaternion x shift
    ('qoffset_y', 'f4'),       # 272; quaternion y shift
    ('qoffset_z', 'f4'),       # 276; quaternion z shift
    ('srow_x', 'f4', (4,)),    # 280; 1st row affine transform
    ('srow_y', 'f4', (4,)),    # 296; 2nd row affine transform
    ('srow_z', 'f4', (4,)),    # 312; 3rd row affine transform
    ('intent_name', 'S16'),    # 328; name or meaning of data
    ('magic', 'S4'),           # 344; must be 'ni1\0' or 'n+1\0'
]

# Full header numpy dtype
header_dtype = np.dtype(header_dtd)

# Field name -> (byte offset, numpy type code).  Array fields give the
# offset and type of their first element.  The extension flag follows the
# header, in files that have it.
header_fields = {
    dtd[0]: (header_dtype.fields[dtd[0]][1], dtd[1]) for dtd in header_dtd
}
header_fields['extension'] = (header_dtype.itemsize, 'i4')

_dtdefs = (  # code, label, dtype definition, niistring
    (1, 'bit', np.void, 'NIFTI_TYPE_BINARY'),
    (2, 'uint8', np.uint8, 'NIFTI_TYPE_UINT8'),
    (4, 'int16', np.int16, 'NIFTI_TYPE_INT16'),
    (8, 'int32', np.int32, 'NIFTI_TYPE_INT32'),
    (16, 'float', np.float32, 'NIFTI_TYPE_FLOAT32'),
    (32, 'complex64', np.void, 'NIFTI_TYPE_COMPLEX64'),
    (64, 'double', np.float64, 'NIFTI_TYPE_FLOAT64'),
    (128, 'rgb24', np.void, 'NIFTI_TYPE_RGB24'),
    (256, 'int8', np.int8, 'NIFTI_TYPE_INT8'),
    (512, 'uint16', np.uint16, 'NIFTI_TYPE_UINT16'),
    (768, 'uint32', np.uint32, 'NIFTI_TYPE_UINT32'),
    (1024, 'int64', np.int64, 'NIFTI_TYPE_INT64'),
    (1280, 'uint64', np.uint64, 'NIFTI_TYPE_UINT64'),
    (1536, 'float128', np.void, 'NIFTI_TYPE_FLOAT128'),
    (1792, 'complex128', np.void, 'NIFTI_TYPE_COMPLEX128'),
    (2048, 'complex256', np.void, 'NIFTI_TYPE_COMPLEX256'),
    (2304, 'rgba32', np.void, 'NIFTI_TYPE_RGBA32'),
)

# Make full code alias bank, including dtype column.  Types with dtype
# ``np.void`` have no voxel decoding rule.
data_type_codes = make_dt_codes(_dtdefs)

# Transform (qform, sform) codes
xform_codes = Recoder(
    (  # code, label, niistring
        (0, 'unknown', 'NIFTI_XFORM_UNKNOWN'),
        (1, 'scanner', 'NIFTI_XFORM_SCANNER_ANAT'),
        (2, 'aligned', 'NIFTI_XFORM_ALIGNED_ANAT'),
        (3, 'talairach', 'NIFTI_XFORM_TALAIRACH'),
        (4, 'mni', 'NIFTI_XFORM_MNI_152'),
    ),
    fields=('code', 'label', 'niistring'),
)

# unit codes; space units in bits 0-2 and time units in bits 3-5 of
# ``xyzt_units``
space_unit_codes = Recoder(
    (  # code, label, niistring
        (0, '', 'NIFTI_UNITS_UNKNOWN'),
        (1, 'm', 'NIFTI_UNITS_METER'),
        (2, 'mm', 'NIFTI_UNITS_MM'),
        (3, 'um', 'NIFTI_UNITS_MICRON'),
    ),
    fields=('code', 'label', 'niistring'),
)

time_unit_codes = Recoder(
    (  # code, label, niistring
        (0, '', 'NIFTI_UNITS_UNKNOWN'),
        (8, 's', 'NIFTI_UNITS_SEC'),
        (16, 'ms', 'NIFTI_UNITS_MSEC'),
        (24, 'us', 'NIFTI_UNITS_USEC'),
        (32, 'Hz', 'NIFTI_UNITS_HZ'),
        (40, 'ppm', 'NIFTI_UNITS_PPM'),
        (48, 'rad/s', 'NIFTI_UNITS_RADS'),
    ),
    fields=('code', 'label', 'niistring'),
)

SPACE_UNIT_MASK = 7
TIME_UNIT_MASK = 56


class Known(namedtuple('Known', ('label',))):
    """Decoded code with a recognized label"""

    __slots__ = ()
    known = True

    @property
    def value(self):
        return self.label


class Unknown(namedtuple('Unknown', ('code',))):
    """Code we do not recognize, passed through as is"""

    __slots__ = ()
    known = False

    @property
    def value(self):
        return self.code


def decode_datatype(code):
    """Decode NIfTI datatype `code` to ``Known(label)`` or ``Unknown(code)``

    Examples
    --------
    >>> decode_datatype(16)
    Known(label='float')
    >>> decode_datatype(3)
    Unknown(code=3)
    """
    code = int(code)
    try:
        return Known(data_type_codes.label[code])
    except KeyError:
        return Unknown(code)


def decode_space_unit(xyzt_units):
    """Decode space unit from bits 0-2 of `xyzt_units`

    >>> decode_space_unit(2 | 8)
    Known(label='mm')
    >>> decode_space_unit(5)
    Unknown(code=5)
    """
    bits = int(xyzt_units) & SPACE_UNIT_MASK
    try:
        return Known(space_unit_codes.label[bits])
    except KeyError:
        return Unknown(bits)


def decode_time_unit(xyzt_units):
    """Decode time unit from bits 3-5 of `xyzt_units`

    >>> decode_time_unit(2 | 8)
    Known(label='s')
    >>> decode_time_unit(56)
    Unknown(code=56)
    """
    bits = int(xyzt_units) & TIME_UNIT_MASK
    try:
        return Known(time_unit_codes.label[bits])
    except KeyError:
        return Unknown(bits)


def decode_units(xyzt_units):
    """Return units for the x, y, z and t axes from `xyzt_units`

    Unrecognized units decode to the empty string.

    Parameters
    ----------
    xyzt_units : int
        ``xyzt_units`` header field

    Returns
    -------
    units : None or tuple
        ``(space, space, space, time)`` labels, or None if neither space
        nor time units are set.

    Examples
    --------
    >>> decode_units(0) is None
    True
    >>> decode_units(2 | 8)
    ('mm', 'mm', 'mm', 's')
    >>> decode_units(16)
    ('', '', '', 'ms')
    """
    space = decode_space_unit(xyzt_units)
    time = decode_time_unit(xyzt_units)
    space = space.label if space.known else ''
    time = time.label if time.known else ''
    if space == '' and time == '':
        return None
    return (space, space, space, time)


def _other_endian(endianness):
    return '>' if endianness == '<' else '<'


def _rank_ok(rank):
    return 1 <= rank <= 7


def resolve_endianness(binaryblock):
    """Work out byte order of NIfTI1 header in `binaryblock`

    Parameters
    ----------
    binaryblock : bytes-like
        buffer starting with NIfTI1 header

    Returns
    -------
    endianness : {'<', '>'}
        endian code of header

    Raises
    ------
    BufferTooSmall
        if `binaryblock` is shorter than a header
    UndeterminableByteOrder
        if ``dim[0]`` is out of range, and ``sizeof_hdr`` is not 348, in
        either byte order
    HeaderTooSmall
        if ``sizeof_hdr`` is less than 348

    Notes
    -----
    First, look at the first value in the ``dim`` field, read as little
    endian.  This should be between 1 and 7.  If it is not, try big endian.
    If neither gives a sensible value, carry on anyway, with big endian;
    there is not enough information in two bytes to do better.

    Then read ``sizeof_hdr``, which should be 348.  If it is not, and the
    ``dim[0]`` check was inconclusive, flip byte order; ``sizeof_hdr`` must
    then be 348.  Sizes bigger than 348 are accepted, because some writers
    store them; the header checks report them.

    Examples
    --------
    >>> hdr = np.zeros((), dtype=header_dtype.newbyteorder('>'))
    >>> hdr['sizeof_hdr'] = 348
    >>> hdr['dim'] = [3, 2, 2, 2, 1, 1, 1, 1]
    >>> resolve_endianness(hdr.tobytes())
    '>'
    >>> resolve_endianness(hdr.byteswap().tobytes())
    '<'
    """
    if buffer_size(binaryblock) < Nifti1Header.sizeof_hdr:
        raise BufferTooSmall(
            'The buffer is not large enough to contain the minimal header '
            'expected from a NIfTI file'
        )
    dim_offset, dim_code = header_fields['dim']
    size_offset, size_code = header_fields['sizeof_hdr']
    endianness = '<'
    rank = read_field(binaryblock, dim_offset, dim_code, endianness)
    if not _rank_ok(rank):
        endianness = _other_endian(endianness)
        rank = read_field(binaryblock, dim_offset, dim_code, endianness)
    sizeof_hdr = read_field(binaryblock, size_offset, size_code, endianness)
    if sizeof_hdr != Nifti1Header.sizeof_hdr and not _rank_ok(rank):
        endianness = _other_endian(endianness)
        sizeof_hdr = read_field(binaryblock, size_offset, size_code, endianness)
        if sizeof_hdr != Nifti1Header.sizeof_hdr:
            raise UndeterminableByteOrder('Cannot determine the byte order of the NIfTI file')
    elif sizeof_hdr < Nifti1Header.sizeof_hdr:
        raise HeaderTooSmall(f'sizeof_hdr {sizeof_hdr} is smaller than {Nifti1Header.sizeof_hdr}')
    return endianness


class Nifti1Header(LabeledWrapStruct):
    """Class for NIfTI1 header

    The header is read-only.  Build it from a buffer with ``from_buffer``,
    which checks the magic string and works out the byte order first.
    """

    # Copies of module level definitions
    template_dtype = header_dtype
    _data_type_codes = data_type_codes

    # fields with recoders for their values
    _field_recoders = {
        'datatype': data_type_codes,
        'qform_code': xform_codes,
        'sform_code': xform_codes,
    }

    # header size, magic strings and minimum data offset
    sizeof_hdr = 348
    pair_magic = 'ni1\x00'
    single_magic = 'n+1\x00'
    single_vox_offset = 352

    # Problem level for reports that do not stop decoding
    warn_level = imageglobals.warn_level
    # Problem level for reports that do
    fatal_level = 50

    def __init__(self, binaryblock=None, endianness=None, check=True, extension_flag=None):
        """Initialize header from binary data block

        Parameters
        ----------
        binaryblock : {None, bytes-like} optional
            348 byte header block.  By default, None, in which case we
            insert the default empty block
        endianness : {None, '<','>', other endian code} string, optional
            endianness of the binaryblock.  If None, work out endianness
            from the data with ``resolve_endianness``.
        check : bool, optional
            Whether to check content of binary data in initialization.
            Default is True.
        extension_flag : None or int, optional
            value of the 4 bytes following the header, if present
        """
        self._extension_flag = extension_flag
        super().__init__(binaryblock, endianness, check)

    @classmethod
    def from_buffer(klass, buffer, check=True):
        """Return header decoded from start of `buffer`

        Parameters
        ----------
        buffer : bytes-like
            buffer containing a NIfTI1 file, or at least its header
        check : bool, optional
            Whether to run the header checks.  Default is True.

        Returns
        -------
        hdr : Nifti1Header

        Raises
        ------
        BufferTooSmall
            if `buffer` is shorter than 348 bytes
        NotNifti1
            if the magic string is not that of a NIfTI1 file
        HeaderDataError
            for other unreadable headers; see ``resolve_endianness`` and
            the header checks
        """
        buffer = memoryview(buffer).cast('B')
        if len(buffer) < klass.sizeof_hdr:
            raise BufferTooSmall(
                'The buffer is not large enough to contain the minimal header '
                'expected from a NIfTI file'
            )
        magic = read_field(buffer, *header_fields['magic'])
        if magic not in (klass.pair_magic, klass.single_magic):
            raise NotNifti1(
                f'Magic string {magic!r} is not that of a NIfTI-1 file; '
                'maybe Analyze 7.5 or NIfTI-2?'
            )
        endianness = klass.guessed_endian(buffer)
        ext_offset, ext_code = header_fields['extension']
        extension_flag = None
        if len(buffer) >= ext_offset + 4:
            extension_flag = read_field(buffer, ext_offset, ext_code, endianness)
        return klass(buffer[: klass.sizeof_hdr], endianness, check, extension_flag)

    @classmethod
    def guessed_endian(klass, binaryblock):
        """Guess intended endianness from binary header

        See ``resolve_endianness`` for the algorithm.
        """
        return resolve_endianness(binaryblock)

    @property
    def extension_flag(self):
        """Value of extension flag after the header, or None if absent"""
        return self._extension_flag

    def copy(self):
        """Return copy of header, with the same extension flag"""
        return self.__class__(
            self.binaryblock, self.endianness, check=False, extension_flag=self._extension_flag
        )

    @property
    def is_single(self):
        """True if the image data follows the header in the same file"""
        return self.get_string('magic') == self.single_magic

    def get_string(self, name):
        """Return character field `name`, decoded byte for byte

        Trailing NUL bytes are kept, so the result always has the full field
        width.
        """
        offset, code = header_fields[name]
        if not code.startswith('S'):
            raise ValueError(f'{name} is not a character field')
        return read_field(self.binaryblock, offset, code)

    def get_dim(self):
        """Return ``dim`` tuple, cut at the first non-positive extent

        ``dim[0]`` gives the number of extents kept, so that
        ``len(dim) == dim[0] + 1``.

        Raises
        ------
        NoValidDimensions
            if there is no positive extent to keep
        """
        dims = self._structarr['dim']
        rank = min(7, int(dims[0]))
        dim = [rank]
        for i in range(1, rank + 1):
            if dims[i] <= 0:
                break
            dim.append(int(dims[i]))
        if len(dim) == 1:
            raise NoValidDimensions('No valid dimensions')
        dim[0] = len(dim) - 1
        return tuple(dim)

    def get_data_shape(self):
        """Return extents of data, fastest changing axis first"""
        return self.get_dim()[1:]

    def get_pixdim(self):
        """Return ``pixdim`` values, one for each element of ``dim``"""
        n = len(self.get_dim())
        return tuple(float(p) for p in self._structarr['pixdim'][:n])

    def get_srows(self):
        """Return (3, 4) array of ``srow_x``, ``srow_y``, ``srow_z``

        These are decoded only; they are not used for orientation.
        """
        hdr = self._structarr
        return np.array([hdr['srow_x'], hdr['srow_y'], hdr['srow_z']], dtype=np.float64)

    def get_datatype(self):
        """Return decoded datatype, ``Known(label)`` or ``Unknown(code)``"""
        return decode_datatype(self._structarr['datatype'])

    def get_xyzt_units(self):
        """Return ``(space, space, space, time)`` unit labels, or None"""
        return decode_units(self._structarr['xyzt_units'])

    def get_qform_quaternion(self):
        """Compute quaternion from b, c, d of quaternion

        Fills a value by assuming this is a unit quaternion
        """
        hdr = self._structarr
        bcd = [hdr['quatern_b'], hdr['quatern_c'], hdr['quatern_d']]
        return fillpositive(bcd)

    def get_qoffset(self):
        """Return ``qoffset_x, qoffset_y, qoffset_z`` as array"""
        hdr = self._structarr
        return np.array([hdr['qoffset_x'], hdr['qoffset_y'], hdr['qoffset_z']], dtype=np.float64)

    def get_data_dtype(self):
        """Return numpy dtype of voxel data, in header byte order

        Returns None for datatypes we cannot decode, including ``bit``,
        which has no whole-byte numpy type.
        """
        datatype = self.get_datatype()
        if not datatype.known:
            return None
        dtype = self._data_type_codes.dtype[datatype.label]
        if dtype.itemsize == 0:
            return None
        return dtype.newbyteorder(self.endianness)

    def get_data_offset(self, buffer_length):
        """Return byte offset of voxel data in a buffer of `buffer_length`

        Raises
        ------
        IllegalVoxOffset
            if ``vox_offset`` is not in ``[352, buffer_length]``
        """
        offset = float(self._structarr['vox_offset'])
        if not self.single_vox_offset <= offset <= buffer_length:
            raise IllegalVoxOffset(
                f'Illegal vox_offset {offset:g}; should be between '
                f'{self.single_vox_offset} and {buffer_length}'
            )
        return int(np.floor(offset))

    def data_from_buffer(self, buffer):
        """Read voxel data from `buffer` containing a single-file image

        Parameters
        ----------
        buffer : bytes-like
            buffer containing the whole file, header included

        Returns
        -------
        data : None or 1D array
            flat voxel data, fastest changing axis first.  If the file byte
            order is native, or the data type is one byte wide, a read-only
            view onto `buffer`.  Otherwise a new native endian array.  None
            if we cannot decode the datatype.

        Raises
        ------
        IllegalVoxOffset
            if ``vox_offset`` is outside the buffer
        InsufficientData
            if the buffer is too short for the data
        """
        size = buffer_size(buffer)
        offset = self.get_data_offset(size)
        n_vox = n_elements(self.get_data_shape())
        if self.get_datatype() == Known('bit'):
            packed = array_from_buffer(buffer, np.uint8, -(-n_vox // 8), offset)
            return np.unpackbits(packed, count=n_vox)
        dtype = self.get_data_dtype()
        if dtype is None:
            return None
        return array_from_buffer(buffer, dtype, n_vox, offset)

    """ Checks only below here """

    @classmethod
    def _get_checks(klass):
        return (
            klass._chk_sizeof_hdr,
            klass._chk_dim0,
            klass._chk_dims,
            klass._chk_datatype,
            klass._chk_xyzt_units,
            klass._chk_qform_code,
            klass._chk_sform_code,
            klass._chk_extension,
        )

    @classmethod
    def _chk_sizeof_hdr(klass, hdr):
        rep = Report(HeaderDataError)
        sizeof_hdr = int(hdr['sizeof_hdr'])
        if sizeof_hdr == klass.sizeof_hdr:
            return rep
        rep.problem_level = klass.warn_level
        rep.problem_msg = f'sizeof_hdr is {sizeof_hdr}, should be {klass.sizeof_hdr}'
        return rep

    @classmethod
    def _chk_dim0(klass, hdr):
        rep = Report(HeaderDataError)
        rank = int(hdr['dim'][0])
        if _rank_ok(rank):
            return rep
        rep.problem_level = klass.warn_level
        rep.problem_msg = f'dim[0] ({rank}) is out of range [1, 7]'
        return rep

    @classmethod
    def _chk_dims(klass, hdr):
        rep = Report(HeaderDataError)
        dims = hdr['dim']
        rank = min(7, int(dims[0]))
        bad = [i for i in range(1, rank + 1) if dims[i] <= 0]
        if rank >= 1 and not bad:
            return rep
        if rank < 1 or bad[0] == 1:
            rep.error = NoValidDimensions
            rep.problem_level = klass.fatal_level
            rep.problem_msg = 'No valid dimensions'
            return rep
        rep.problem_level = klass.warn_level
        rep.problem_msg = (
            f'dim[{bad[0]}] ({int(dims[bad[0]])}) is not positive; dim[0] was '
            f'probably wrong or corrupt, keeping {bad[0] - 1} dimensions'
        )
        return rep

    @classmethod
    def _chk_datatype(klass, hdr):
        rep = Report(HeaderDataError)
        datatype = hdr.get_datatype()
        if datatype.known:
            return rep
        rep.problem_level = klass.warn_level
        rep.problem_msg = f'datatype code {datatype.code} not recognized'
        return rep

    @classmethod
    def _chk_xyzt_units(klass, hdr):
        rep = Report(HeaderDataError)
        units = hdr['xyzt_units']
        msgs = [
            f'{kind} unit code {decoded.code} not recognized'
            for kind, decoded in (
                ('space', decode_space_unit(units)),
                ('time', decode_time_unit(units)),
            )
            if not decoded.known
        ]
        if not msgs:
            return rep
        rep.problem_level = klass.warn_level
        rep.problem_msg = ' and '.join(msgs)
        return rep

    @classmethod
    def _chk_qform_code(klass, hdr):
        rep = Report(HeaderDataError)
        code = int(hdr['qform_code'])
        if code >= 0:
            return rep
        rep.problem_level = klass.warn_level
        rep.problem_msg = f'qform_code {code} not valid; orientation not available'
        return rep

    @classmethod
    def _chk_sform_code(klass, hdr):
        rep = Report(HeaderDataError)
        code = int(hdr['sform_code'])
        if code <= 0:
            return rep
        rep.problem_level = klass.warn_level
        rep.problem_msg = f'sform_code {code} set, but sform transformations are ignored'
        return rep

    @classmethod
    def _chk_extension(klass, hdr):
        rep = Report(HeaderDataError)
        if not hdr.extension_flag:
            return rep
        rep.problem_level = klass.warn_level
        rep.problem_msg = 'header extensions present, but ignored'
        return rep


def parse_header(buffer):
    """Return checked ``Nifti1Header`` from `buffer`

    Non-fatal problems are in the ``reports`` attribute of the header.
    """
    return Nifti1Header.from_buffer(buffer)


def parse_body(hdr, buffer):
    """Return voxel bytes, decoded voxel data and reports for single file

    Parameters
    ----------
    hdr : Nifti1Header
        header decoded from `buffer`
    buffer : bytes-like
        buffer containing the whole ``n+1`` file

    Returns
    -------
    body : memoryview
        read-only bytes of `buffer` from ``floor(vox_offset)`` onward
    data : None or 1D array
        decoded voxel data, or None for datatypes we cannot decode
    reports : list
        reports of problems decoding data

    Raises
    ------
    ImageFileError
        if the header is for a pair of files, so data is not in `buffer`
    IllegalVoxOffset
        if ``vox_offset`` is outside of `buffer`
    InsufficientData
        if `buffer` does not contain all the voxel data
    """
    if not hdr.is_single:
        raise ImageFileError('Header is for a ni1 file pair; data is not in buffer')
    view = memoryview(buffer).cast('B').toreadonly()
    offset = hdr.get_data_offset(len(view))
    data = hdr.data_from_buffer(buffer)
    reports = []
    if data is None:
        rep = Report(
            HeaderDataError,
            hdr.warn_level,
            f'datatype {hdr.get_datatype().value} not supported for voxel data; no data decoded',
        )
        rep.log_raise(imageglobals.logger, imageglobals.error_level)
        reports.append(rep)
    return view[offset:], data, reports
