# emacs: -*- mode: python-mode; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the niftinrrd package for the
#   copyright and license terms.
#
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""Utilities to parse NIfTI1 buffers and files into NRRD records"""

import gzip
import os

from .errors import ImageFileError
from .nifti1 import parse_body, parse_header
from .nrrd import nifti_to_nrrd

_compressed_suffixes = ('.gz',)


def parse(buffer):
    """Parse NIfTI1 file in `buffer` to NRRD record

    Parameters
    ----------
    buffer : bytes-like
        complete NIfTI1 file, or just the header for ``ni1`` pairs

    Returns
    -------
    record : NrrdRecord
        NRRD header fields.  For single (``n+1``) files, ``record.buffer``
        and ``record.data`` hold the voxel bytes and decoded voxels.
        ``record.reports`` holds reports of any non-fatal problems.
    """
    hdr = parse_header(buffer)
    record = nifti_to_nrrd(hdr)
    if hdr.is_single:
        body, data, reports = parse_body(hdr, buffer)
        record.buffer = body
        record.data = data
        record.reports = record.reports + reports
    return record


def load(filename):
    """Read and parse NIfTI1 file `filename`

    Files ending in ``.gz`` are decompressed first.

    Parameters
    ----------
    filename : str or os.PathLike
       NIfTI1 file to load

    Returns
    -------
    record : NrrdRecord
    """
    filename = os.fspath(filename)
    try:
        stat_result = os.stat(filename)
    except OSError:
        raise FileNotFoundError(f"No such file or no access: '{filename}'")
    if stat_result.st_size <= 0:
        raise ImageFileError(f"Empty file: '{filename}'")
    opener = gzip.open if filename.endswith(_compressed_suffixes) else open
    with opener(filename, 'rb') as fobj:
        buffer = fobj.read()
    return parse(buffer)
