# emacs: -*- mode: python-mode; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the niftinrrd package for the
#   copyright and license terms.
#
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""Utilities for testing"""

import numpy as np

from ..nifti1 import header_dtype

# Values for a valid, small, single file uint8 image
DEFAULT_FIELDS = dict(
    sizeof_hdr=348,
    dim=[3, 2, 2, 1],
    pixdim=[1, 1, 1, 1],
    datatype=2,
    bitpix=8,
    vox_offset=352,
    magic=b'n+1',
)

# Padding values for the 8 element dim and pixdim fields
_ARRAY_PADS = dict(dim=1, pixdim=1.0)


def make_header_block(endianness='<', **fields):
    """Return 348 byte NIfTI1 header with given `endianness`

    Fields not in `fields` take values from ``DEFAULT_FIELDS``, or zero.
    ``dim`` and ``pixdim`` may have fewer than 8 values, and are padded with
    ones.
    """
    hdr = np.zeros((), dtype=header_dtype.newbyteorder(endianness))
    values = dict(DEFAULT_FIELDS, **fields)
    for key, value in values.items():
        if key in _ARRAY_PADS:
            value = list(value) + [_ARRAY_PADS[key]] * (8 - len(value))
        hdr[key] = value
    return hdr.tobytes()


def make_single_file(data=b'', endianness='<', extension=b'\x00' * 4, **fields):
    """Return bytes of single file NIfTI1 image

    Header from ``make_header_block(endianness, **fields)``, then
    `extension` bytes, then `data`.  `data` can be bytes or an array, which
    is written in `endianness` byte order.
    """
    if isinstance(data, np.ndarray):
        data = data.astype(data.dtype.newbyteorder(endianness)).tobytes()
    return make_header_block(endianness, **fields) + extension + data
