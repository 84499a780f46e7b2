# This file is part of minicheck, a small property-based testing library.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at http://mozilla.org/MPL/2.0/.
#
# END HEADER

import os

import setuptools


def local_file(name):
    return os.path.relpath(os.path.join(os.path.dirname(__file__), name))


SOURCE = local_file('src')
README = local_file('README.rst')


# Assignment to placate pyflakes. The actual version is from the exec that
# follows.
__version__ = None

with open(local_file('src/minicheck/version.py')) as o:
    exec(o.read())

assert __version__ is not None


extras = {
    'pytest': ['pytest>=6.2.0'],
}

extras['all'] = sorted(sum(extras.values(), []))

install_requires = ['attrs>=19.2.0']

setuptools.setup(
    name='minicheck',
    version=__version__,
    packages=setuptools.find_packages(SOURCE),
    package_dir={'': SOURCE},
    license='MPL v2',
    description='A small library for property based testing with shrinking',
    zip_safe=False,
    extras_require=extras,
    install_requires=install_requires,
    python_requires='>=3.9',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Topic :: Software Development :: Testing',
    ],
    entry_points={
        'pytest11': ['minicheckpytest = minicheck.extra.pytestplugin'],
    },
    long_description=open(README).read(),
)
