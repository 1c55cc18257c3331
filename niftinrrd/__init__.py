# emacs: -*- mode: python-mode; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the niftinrrd package for the
#   copyright and license terms.
#
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""
Decode NIfTI-1 images held in memory, and express them as NRRD records.

Quickstart
==========

::

   import niftinrrd as nn

   with open('my_file.nii', 'rb') as fobj:
       record = nn.parse(fobj.read())

   record['sizes']             # extents, fastest changing axis first
   record['space directions']  # if the file has a qform
   data = record.data          # flat voxel array, for single files
   record.reports              # problems found in decoding

   hdr = nn.parse_header(buffer)  # header only
"""

import os

from . import imageglobals
from .batteryrunners import Report
from .errors import (
    BufferTooSmall,
    HeaderDataError,
    HeaderTooSmall,
    IllegalVoxOffset,
    ImageFileError,
    InsufficientData,
    NiftiNrrdError,
    NotNifti1,
    NoValidDimensions,
    UndeterminableByteOrder,
    VoxelDataError,
)
from .loadsave import load, parse
from .nifti1 import Nifti1Header, parse_body, parse_header
from .nrrd import NrrdRecord, nifti_to_nrrd
from .pkg_info import __version__
from .pkg_info import get_pkg_info as _get_pkg_info


def get_info():
    return _get_pkg_info(os.path.dirname(__file__))
