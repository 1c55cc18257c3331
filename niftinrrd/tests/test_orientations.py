# emacs: -*- mode: python-mode; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the niftinrrd package for the
#   copyright and license terms.
#
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""Testing orientations module"""

import numpy as np
import pytest
from numpy.testing import assert_array_almost_equal, assert_array_equal

from ..nifti1 import Nifti1Header
from ..orientations import (
    QFORM_SPACE,
    header_orientation,
    method1_spacings,
    qform_space_directions,
)
from ..quaternions import fillpositive, quat2mat
from ..testing import make_header_block


def test_method1_spacings():
    assert_array_equal(method1_spacings([1, 2, 3, 4], 3), [2, 3, 4])
    # Truncated
    assert_array_equal(method1_spacings([1, 2, 3, 4, 5], 2), [2, 3])
    # Padded with NaN
    spacings = method1_spacings([0, 2.5], 3)
    assert spacings[0] == 2.5
    assert np.all(np.isnan(spacings[1:]))
    assert spacings.dtype == np.float64
    assert method1_spacings([0], 2).shape == (2,)


@pytest.mark.parametrize('qfac', [1, 0, -1])
def test_identity_quaternion(qfac):
    pixdim = [qfac, 2, 3, 4]
    directions = qform_space_directions([1, 0, 0, 0], pixdim)
    # Sign flip on last row only for negative qfac
    z_scale = -4 if qfac < 0 else 4
    assert_array_almost_equal(np.diag(directions), [2, 3, z_scale])
    assert_array_almost_equal(directions - np.diag(np.diag(directions)), np.zeros((3, 3)))


def test_rotation_directions():
    # 90 degrees around z; first voxel axis points along y
    c = np.sqrt(0.5)
    quaternion = fillpositive([0, 0, c])
    directions = qform_space_directions(quaternion, [1, 2, 3, 4])
    assert_array_almost_equal(directions, [[0, 2, 0], [-3, 0, 0], [0, 0, 4]])
    # Rows are columns of rotation matrix, scaled
    quaternion = fillpositive([0.1, -0.2, 0.3])
    R = quat2mat(quaternion)
    directions = qform_space_directions(quaternion, [-1, 1.5, 2, 2.5])
    assert_array_almost_equal(directions[0], R[:, 0] * 1.5)
    assert_array_almost_equal(directions[1], R[:, 1] * 2)
    assert_array_almost_equal(directions[2], R[:, 2] * -2.5)


def test_header_orientation_method1():
    hdr = Nifti1Header.from_buffer(
        make_header_block(dim=[2, 4, 5], pixdim=[1, 1.5, 2.5], qform_code=0)
    )
    fields = header_orientation(hdr, 2)
    assert set(fields) == {'spacings', 'space dimension'}
    assert_array_equal(fields['spacings'], [1.5, 2.5])
    assert fields['space dimension'] == 2
    hdr = Nifti1Header.from_buffer(
        make_header_block(dim=[4, 4, 5, 6, 7], pixdim=[1, 1, 2, 3, 4])
    )
    fields = header_orientation(hdr, 4)
    assert_array_equal(fields['spacings'], [1, 2, 3, 4])
    assert fields['space dimension'] == 3


def test_header_orientation_method2():
    hdr = Nifti1Header.from_buffer(
        make_header_block(
            dim=[3, 4, 5, 6],
            pixdim=[-1, 2, 3, 4],
            qform_code=2,
            qoffset_x=1.5,
            qoffset_y=-2,
            qoffset_z=3,
        )
    )
    fields = header_orientation(hdr, 3)
    assert set(fields) == {'space', 'space directions', 'space origin'}
    assert fields['space'] == QFORM_SPACE
    assert_array_almost_equal(fields['space directions'], np.diag([2, 3, -4]))
    assert_array_almost_equal(fields['space origin'], [1.5, -2, 3])
    # Method 2 uses first four pixdims, even for fewer dimensions
    hdr = Nifti1Header.from_buffer(
        make_header_block(dim=[2, 4, 5], pixdim=[1, 2, 3, 7], qform_code=1)
    )
    fields = header_orientation(hdr, 2)
    assert_array_almost_equal(fields['space directions'], np.diag([2, 3, 7]))


def test_header_orientation_invalid_qform():
    hdr = Nifti1Header.from_buffer(make_header_block(qform_code=-3))
    assert header_orientation(hdr, 3) == {}
