"""Setuptools based setup script for MAFblocks.

Heavily inspired from the the Biopython setup.py script, all right reserved.

This uses setuptools, the standard python mechanism for installing
packages. For the easiest installation just type the command:

pip install .

MAFblocks reads and writes files in the Multiple Alignment Format (MAF)
block by block. Each block is kept as an ordered list of lines, sequence
lines being parsed into their fields, and can be written back verbatim.
Helper functions build the arrays (sequence matrix, strands, coordinates,
species) used by downstream tools, or a biopython alignment.

Copyright 2016 by Tristan Bitard-Feildel. All rights reserved

Licensed under the MIT License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

https://opensource.org/licenses/MIT

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.

Dependencies
------------

Biopython, licenced under the Biopython License Agreement
(https://github.com/biopython/biopython/blob/master/LICENSE), should
also be installed

"""

import sys
import os
import importlib

from setuptools import setup
from setuptools import Command


def can_import(module_name):
    """can_import(module_name) -> module or None"""
    try:
        return importlib.import_module(module_name)
    except ImportError:
        return None


def is_biopython_installed():
    return bool(can_import("Bio"))


def check_dependencies():
    if is_biopython_installed():
        return True
    print("""BioPython (Bio) is not installed

This package is required by MAFblocks. Install it with pip install biopython
or see https://biopython.org
""")
    return False


class test_mafblocks(Command):
    """Run the tests for the package.

    python setup.py test

    """
    description = "Automatically run the test suite for MAFblocks."
    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        if not check_dependencies():
            sys.exit(1)
        this_dir = os.getcwd()

        # change to the test dir and run the tests
        os.chdir("tests")
        sys.path.insert(0, '')
        import run_tests
        failures = run_tests.main([])

        # change back to the current directory
        os.chdir(this_dir)
        if failures:
            sys.exit(1)

# version is defined in lib/mafblocks/__init__.py
__version__ = "Undefined"
with open(os.path.join('lib', 'mafblocks', '__init__.py')) as handle:
    for line in handle:
        if (line.startswith('__version__')):
            exec(line.strip())

PACKAGES = ['mafblocks']

PACKAGE_DIR = {}
for pkg in PACKAGES:
    PACKAGE_DIR[pkg] = os.path.join('lib', *pkg.split('.'))


setup_args = {
    "name": 'MAFblocks',
    "version": __version__,
    "author": 'Tristan Bitard-Feildel',
    "author_email": 'tristan@bitardfeildel.fr',
    "description": 'Block by block reader and writer for genome alignments in MAF',
    "license": "MIT",
    "cmdclass": {
        "test": test_mafblocks,
        },
    "packages": PACKAGES,
    "package_dir": PACKAGE_DIR,
    "python_requires": ">=3.8",
    "install_requires": ["biopython"],
    "extras_require": {"test": ["pytest"]},
   }

setup(**setup_args)
