# emacs: -*- mode: python-mode; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the niftinrrd package for the
#   copyright and license terms.
#
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""
Functions to operate on, or return, quaternions.

Quaternions here consist of 4 values ``w, x, y, z``, where ``w`` is the
real (scalar) part, and ``x, y, z`` are the complex (vector) part.

Note - rotation matrices here apply to column vectors, that is,
they are applied on the left of the vector.  For example:

>>> import numpy as np
>>> q = [0, 1, 0, 0] # 180 degree rotation around axis 0
>>> M = quat2mat(q) # from this module
>>> vec = np.array([1, 2, 3]).reshape((3,1)) # column vector
>>> tvec = np.dot(M, vec)

NIfTI-1 stores only the ``x, y, z`` (``b, c, d``) part of a unit quaternion;
``fillpositive`` recovers ``w`` (``a``).
"""

import numpy as np


def fillpositive(xyz):
    """Compute unit quaternion from last 3 values

    Parameters
    ----------
    xyz : iterable
       iterable containing 3 values, corresponding to quaternion x, y, z

    Returns
    -------
    wxyz : array shape (4,)
         Full 4 values of quaternion

    Notes
    -----
    If w, x, y, z are the values in the full quaternion, assumes w is
    positive.

    Gives ``w = sqrt(max(0, 1 - (x*x + y*y + z*z)))``.  The sum of squares of
    ``x, y, z`` from a stored header can be a little above 1 from float
    precision; these, and any larger values, give ``w == 0``.

    Examples
    --------
    >>> wxyz = fillpositive([0,0,0])
    >>> np.allclose(wxyz, [1, 0, 0, 0])
    True
    >>> wxyz = fillpositive([1,0,0]) # Corner case; w is 0
    >>> np.allclose(wxyz, [0, 1, 0, 0])
    True
    """
    # Check inputs (force error if < 3 values)
    if len(xyz) != 3:
        raise ValueError('xyz should have length 3')
    xyz = np.asarray(xyz, dtype=np.float64)
    w2 = 1.0 - np.dot(xyz, xyz)
    w = np.sqrt(max(0.0, w2))
    return np.r_[w, xyz]


def quat2mat(q):
    """Calculate rotation matrix corresponding to quaternion

    Parameters
    ----------
    q : 4 element array-like
        quaternion ``w, x, y, z``

    Returns
    -------
    M : (3,3) array
      Rotation matrix corresponding to input quaternion *q*

    Notes
    -----
    Uses the expansion for a unit quaternion, without normalizing *q* first,
    as the NIfTI-1 standard does for ``quatern_b, quatern_c, quatern_d``::

        [[w2+x2-y2-z2, 2xy-2wz,     2xz+2wy    ],
         [2xy+2wz,     w2-x2+y2-z2, 2yz-2wx    ],
         [2xz-2wy,     2yz+2wx,     w2-x2-y2+z2]]

    References
    ----------
    Algorithm from https://en.wikipedia.org/wiki/Rotation_matrix#Quaternion

    Examples
    --------
    >>> import numpy as np
    >>> M = quat2mat([1, 0, 0, 0]) # Identity quaternion
    >>> np.allclose(M, np.eye(3))
    True
    >>> M = quat2mat([0, 1, 0, 0]) # 180 degree rotn around axis 0
    >>> np.allclose(M, np.diag([1, -1, -1]))
    True
    """
    w, x, y, z = (float(v) for v in q)
    ww, xx, yy, zz = w * w, x * x, y * y, z * z
    wx, wy, wz = w * x, w * y, w * z
    xy, xz, yz = x * y, x * z, y * z
    return np.array(
        [
            [ww + xx - yy - zz, 2 * (xy - wz), 2 * (xz + wy)],
            [2 * (xy + wz), ww - xx + yy - zz, 2 * (yz - wx)],
            [2 * (xz - wy), 2 * (yz + wx), ww - xx - yy + zz],
        ]
    )
