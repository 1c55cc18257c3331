# emacs: -*- mode: python-mode; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the niftinrrd package for the
#   copyright and license terms.
#
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""Exceptions raised while decoding NIfTI-1 buffers"""


class NiftiNrrdError(Exception):
    """Base class for all errors raised by niftinrrd"""


class HeaderDataError(NiftiNrrdError):
    """Class to indicate error in getting header data"""


class ImageFileError(NiftiNrrdError):
    """Buffer does not hold the expected file format"""


class VoxelDataError(NiftiNrrdError):
    """Class to indicate error in getting voxel data"""


class BufferTooSmall(HeaderDataError):
    pass


class UndeterminableByteOrder(HeaderDataError):
    pass


class HeaderTooSmall(HeaderDataError):
    pass


class NoValidDimensions(HeaderDataError):
    pass


class NotNifti1(ImageFileError):
    pass


class IllegalVoxOffset(VoxelDataError):
    pass


class InsufficientData(VoxelDataError):
    pass
