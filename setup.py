# SPDX-FileCopyrightText: 2025 fixedrational contributors
# SPDX-License-Identifier: Apache-2.0

from setuptools import setup, find_packages

setup(
    name='fixedrational',
    version='0.1.0',
    description='Exact rational numbers with fixed-width integer components',
    license='Apache-2.0',
    packages=find_packages(include=['fixedrational', 'fixedrational.*']),
    python_requires='>=3.10',
    install_requires=[
        'numpy',
        'atpublic',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
