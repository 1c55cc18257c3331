# emacs: -*- mode: python-mode; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the niftinrrd package for the
#   copyright and license terms.
#
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""Testing package info"""

import pytest

import niftinrrd as nn

from ..pkg_info import cmp_pkg_version


def test_pkg_info():
    """Smoke test niftinrrd.get_info()

    Hits:
        - niftinrrd.get_info
        - niftinrrd.pkg_info.get_pkg_info
    """
    info = nn.get_info()
    assert info['pkg_path'].endswith('niftinrrd')
    assert info['pkg_version'] == nn.__version__
    assert 'sys_version' in info
    assert 'np_version' in info


def test_version():
    # Test info about version
    assert nn.pkg_info.__version__ == nn.__version__


@pytest.mark.parametrize(
    'v1, v2, result',
    [
        ('1.0', '1.0', 0),
        ('1.0.0', '1.0', 0),
        ('1.0', '1.0.1', -1),
        ('1.1', '1.0.1', 1),
        ('1.2.1dev', '1.2.1', -1),
        ('1.2.1rc1', '1.2.1', -1),
        ('1.2.1rc1', '1.2.1rc', 1),
        ('1.2.1b', '1.2.1a', 1),
    ],
)
def test_cmp_pkg_version(v1, v2, result):
    assert cmp_pkg_version(v1, v2) == result
    assert cmp_pkg_version(v2, v1) == -result
    if v2 == nn.__version__:
        assert cmp_pkg_version(v1) == result


def test_cmp_pkg_version_error():
    with pytest.raises(ValueError):
        cmp_pkg_version('foo.2')
