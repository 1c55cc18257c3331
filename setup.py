#!/usr/bin/env python
# emacs: -*- mode: python-mode; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
#
#   See COPYING file distributed along with the niftinrrd package for the
#   copyright and license terms.
#
### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ### ##
"""
Setuptools entrypoint

This file should not be run directly. To install, use:

    pip install .

To install with the test dependencies, use:

    pip install .[test]

"""
import os

from setuptools import find_packages, setup


def get_version():
    # Read version without importing the package, which needs numpy
    ns = {}
    with open(os.path.join('niftinrrd', 'pkg_info.py')) as fobj:
        for line in fobj:
            if line.startswith('__version__'):
                exec(line, ns)
                break
    return ns['__version__']


setup(
    name='niftinrrd',
    version=get_version(),
    description='Decode NIfTI-1 headers and voxel data into NRRD records',
    long_description=open('README.rst').read(),
    long_description_content_type='text/x-rst',
    license='MIT License',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering',
    ],
    python_requires='>=3.8',
    packages=find_packages(include=['niftinrrd', 'niftinrrd.*']),
    install_requires=[
        'numpy >=1.22',
        'packaging >=17',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'niinfo=niftinrrd.cmdline.niinfo:main',
        ],
    },
)
