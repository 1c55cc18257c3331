# emacs: -*- mode: python-mode; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the niftinrrd package for the
#   copyright and license terms.
#
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""NRRD view of NIfTI1 headers

An ``NrrdRecord`` is a dict of NRRD header fields, with the same key
spelling as NRRD files and pynrrd headers (``'space directions'``,
``'space origin'`` and so on), plus attributes for the NIfTI1 header, the
voxel data and any problem reports.
"""

import numpy as np

from .orientations import header_orientation
from .volumeutils import endian_codes

#: NRRD encoding of NIfTI1 voxel data
ENCODING = 'raw'


class NrrdRecord(dict):
    """NRRD header fields for an image, with data and problem reports

    Attributes
    ----------
    header : None or Nifti1Header
        header the fields were made from
    buffer : None or memoryview
        bytes of the file from the start of the voxel data, for single files
    data : None or ndarray
        flat voxel data, fastest changing axis first.  Reshape with
        ``record.data.reshape(record['sizes'], order='F')``.
    reports : list
        ``Report`` objects for problems found in decoding
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.header = None
        self.buffer = None
        self.data = None
        self.reports = []

    def __repr__(self):
        return f'{self.__class__.__name__}({dict.__repr__(self)})'


def nifti_to_nrrd(hdr):
    """Return ``NrrdRecord`` of NRRD fields for NIfTI1 header `hdr`

    Parameters
    ----------
    hdr : Nifti1Header
        checked header

    Returns
    -------
    record : NrrdRecord
        with ``dimension``, ``type``, ``encoding``, ``endian`` and ``sizes``,
        ``space units`` if the header has units, and orientation fields (see
        ``orientations.header_orientation``).  ``type`` is the datatype label,
        or the integer code if the datatype is not recognized.
    """
    dim = hdr.get_dim()
    dimension = dim[0]
    record = NrrdRecord(
        dimension=dimension,
        type=hdr.get_datatype().value,
        encoding=ENCODING,
        endian=endian_codes.label[hdr.endianness],
        sizes=np.array(dim[1:], dtype=np.int64),
    )
    units = hdr.get_xyzt_units()
    if units is not None:
        units = list(units[:dimension])
        record['space units'] = units + [''] * (dimension - len(units))
    record.update(header_orientation(hdr, dimension))
    record.header = hdr
    record.reports = hdr.reports
    return record
