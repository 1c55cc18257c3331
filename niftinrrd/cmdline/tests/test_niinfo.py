# emacs: -*- mode: python; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:
"""Test niinfo script"""

import gzip

import numpy as np
import pytest

import niftinrrd as nn
from niftinrrd.cmdline.niinfo import format_record, main
from niftinrrd.testing import make_header_block, make_single_file


@pytest.fixture
def nii_file(tmp_path):
    fname = tmp_path / 'img.nii'
    fname.write_bytes(
        make_single_file(
            np.arange(8, dtype=np.int16),
            dim=[3, 2, 2, 2],
            pixdim=[1, 2, 3, 4],
            datatype=4,
            bitpix=16,
            xyzt_units=2,
        )
    )
    return fname


def test_format_record():
    record = nn.parse(make_single_file(b'\x01\x02\x03\x04'))
    lines = format_record(record).split('\n')
    # Values line up after the longest key
    assert lines[0] == 'dimension' + ' ' * 6 + '  : 3'
    assert 'type' + ' ' * 11 + '  : uint8' in lines
    assert 'sizes' + ' ' * 10 + '  : [2, 2, 1]' in lines
    assert 'spacings' + ' ' * 7 + '  : [1.0, 1.0, 1.0]' in lines
    assert 'space dimension  : 3' in lines


def test_niinfo(nii_file, capsys):
    assert main([str(nii_file)]) == 0
    out = capsys.readouterr().out
    assert f'NRRD fields for "{nii_file}"' in out
    assert 'type' in out and 'int16' in out
    assert "['mm', 'mm', 'mm']" in out


def test_niinfo_gz(nii_file, tmp_path, capsys):
    gz_fname = tmp_path / 'img.nii.gz'
    with gzip.open(gz_fname, 'wb') as fobj:
        fobj.write(nii_file.read_bytes())
    assert main([str(gz_fname)]) == 0
    assert 'int16' in capsys.readouterr().out


def test_niinfo_reports(tmp_path, capsys):
    fname = tmp_path / 'sform.nii'
    fname.write_bytes(make_single_file(b'\x00' * 4, sform_code=1))
    assert main([str(fname)]) == 0
    out = capsys.readouterr().out
    assert 'Level 30: sform_code 1 set, but sform transformations are ignored' in out
    # Strict mode fails the file
    assert main(['--strict', str(fname)]) == 1
    err = capsys.readouterr().err
    assert f'Cannot parse "{fname}"' in err
    # Verbose mode logs the problem as well
    assert main(['-v', str(fname)]) == 0
    captured = capsys.readouterr()
    assert 'sform_code 1 set' in captured.err


def test_niinfo_failures(nii_file, tmp_path, capsys):
    bad = tmp_path / 'bad.nii'
    bad.write_bytes(make_header_block(magic=b'XYZ'))
    missing = tmp_path / 'missing.nii'
    assert main([str(nii_file), str(bad), str(missing)]) == 1
    captured = capsys.readouterr()
    assert f'NRRD fields for "{nii_file}"' in captured.out
    assert f'Cannot parse "{bad}"' in captured.err
    assert 'NIfTI-1' in captured.err
    assert f'Cannot parse "{missing}"' in captured.err


def test_niinfo_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(['--version'])
    assert excinfo.value.code == 0
    assert nn.__version__ in capsys.readouterr().out
