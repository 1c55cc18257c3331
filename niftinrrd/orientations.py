# emacs: -*- mode: python-mode; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the niftinrrd package for the
#   copyright and license terms.
#
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""Utilities for calculating NRRD orientation from NIfTI1 headers

NIfTI1 gives three methods of orientation.  NRRD can express methods 1 and 2:

* method 1 (``qform_code == 0``): voxel spacings only, from ``pixdim``;
* method 2 (``qform_code > 0``): rotation from the quaternion in
  ``quatern_b, quatern_c, quatern_d``, scaled by ``pixdim``, with the origin
  in ``qoffset_x, qoffset_y, qoffset_z``.

Method 3 (``sform_code > 0``) is a general affine that may disagree with
method 2.  NRRD has room for only one, so we ignore the sform.
"""

import numpy as np

from .quaternions import quat2mat

#: NRRD space of NIfTI1 method 2 orientations
QFORM_SPACE = 'right-anterior-superior'


def method1_spacings(pixdim, dimension):
    """Return NRRD spacings for `dimension` axes from `pixdim`

    Parameters
    ----------
    pixdim : sequence
        NIfTI1 ``pixdim`` values, where ``pixdim[0]`` is qfac
    dimension : int
        number of axes

    Returns
    -------
    spacings : (dimension,) array
        ``pixdim[1:]``, padded with NaN, or truncated, to `dimension` values

    Examples
    --------
    >>> method1_spacings([1, 2.0, 3.0], 3).tolist()
    [2.0, 3.0, nan]
    """
    spacings = np.full(dimension, np.nan)
    values = np.asarray(pixdim[1 : dimension + 1], dtype=np.float64)
    spacings[: len(values)] = values
    return spacings


def qform_space_directions(quaternion, pixdim):
    """Return NRRD space directions from NIfTI1 quaternion and ``pixdim``

    Parameters
    ----------
    quaternion : sequence
        unit quaternion ``a, b, c, d``, as from ``fillpositive`` applied to
        the ``quatern_b, quatern_c, quatern_d`` header values
    pixdim : sequence
        at least 4 ``pixdim`` header values; ``pixdim[0]`` is qfac, where 0
        means 1.  These are the stored values, not ``Nifti1Header.get_pixdim()``,
        so images with fewer than 3 dimensions still scale the remaining
        directions by the stored ``pixdim[2:4]``, rather than by NaN.

    Returns
    -------
    directions : (3, 3) array
        one row per voxel axis, giving the step in RAS+ space along that
        axis.  Row ``i`` is column ``i`` of the quaternion rotation matrix,
        scaled by ``pixdim[i + 1]``, with the last row scaled by qfac as well.

    Examples
    --------
    >>> qform_space_directions([1, 0, 0, 0], [1, 2, 3, 4]).tolist()
    [[2.0, 0.0, 0.0], [0.0, 3.0, 0.0], [0.0, 0.0, 4.0]]
    """
    pixdim = np.asarray(pixdim, dtype=np.float64)
    qfac = 1.0 if pixdim[0] == 0 else pixdim[0]
    R = quat2mat(quaternion)
    scales = pixdim[1:4].copy()
    scales[2] *= qfac
    return R.T * scales[:, None]


def header_orientation(hdr, dimension):
    """Return mapping of NRRD orientation fields from NIfTI1 header `hdr`

    Parameters
    ----------
    hdr : Nifti1Header
    dimension : int
        number of axes in the image

    Returns
    -------
    fields : dict
        For method 1, ``spacings`` and ``space dimension``.  For method 2,
        ``space``, ``space directions`` and ``space origin``.  Empty for
        invalid (negative) ``qform_code``.
    """
    qform_code = int(hdr['qform_code'])
    if qform_code == 0:
        return {
            'spacings': method1_spacings(hdr.get_pixdim(), dimension),
            'space dimension': min(dimension, 3),
        }
    if qform_code > 0:
        return {
            'space': QFORM_SPACE,
            'space directions': qform_space_directions(
                hdr.get_qform_quaternion(), hdr['pixdim'][:4]
            ),
            'space origin': hdr.get_qoffset(),
        }
    return {}
