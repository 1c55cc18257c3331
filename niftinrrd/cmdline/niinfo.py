#!python
# emacs: -*- mode: python-mode; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the niftinrrd package for the
#   copyright and license terms.
#
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""Print NRRD header fields for NIfTI-1 files"""

import logging
import sys
from argparse import ArgumentParser

import numpy as np

import niftinrrd as nn
from niftinrrd import imageglobals
from niftinrrd.errors import NiftiNrrdError
from niftinrrd.volumeutils import pretty_mapping

__license__ = 'MIT'


def _format_value(value):
    if isinstance(value, np.ndarray):
        return value.tolist()
    return value


def format_record(record):
    """Return printable string for NRRD `record`, without voxel data"""
    return pretty_mapping(record, lambda obj, key: _format_value(obj[key]))


def main(args=None):
    """Go go team"""
    parser = ArgumentParser(description=__doc__)
    parser.add_argument('--version', action='version', version=f'%(prog)s {nn.__version__}')
    parser.add_argument(
        '-s',
        '--strict',
        action='store_true',
        help='Fail on any header problem, not only on unreadable headers',
    )
    parser.add_argument(
        '-v',
        '--verbose',
        action='store_true',
        help='Log header problems to stderr as they are found',
    )
    parser.add_argument('files', nargs='+', metavar='FILE', help='NIfTI-1 file names')

    args = parser.parse_args(args=args)

    if args.verbose:
        handler = logging.StreamHandler(sys.stderr)
        imageglobals.logger.addHandler(handler)
    error_level = imageglobals.warn_level if args.strict else imageglobals.error_level
    failed = 0
    try:
        with imageglobals.ErrorLevel(error_level):
            for fname in args.files:
                try:
                    record = nn.load(fname)
                except (NiftiNrrdError, OSError) as err:
                    print(f'Cannot parse "{fname}": {err}', file=sys.stderr)
                    failed += 1
                    continue
                print(f'NRRD fields for "{fname}"\n')
                print(format_record(record) + '\n')
                for report in record.reports:
                    report.write_raise(sys.stdout, error_level=imageglobals.error_level)
    finally:
        if args.verbose:
            imageglobals.logger.removeHandler(handler)
    return 1 if failed else 0


if __name__ == '__main__':
    sys.exit(main())
