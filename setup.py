#!/usr/bin/env python3
# encoding: utf-8
"""
Package configuration for mini-stats.
"""

from setuptools import setup, find_packages

REQUIREMENTS = [
    'click',
    'cloup',
    'humanfriendly',
    'loguru',
    'PyYAML',
    'tabulate',
]

TEST_REQUIREMENTS = [
    'pytest',
    'hypothesis',
]


with open('mini_stats/version.txt') as f:
    VERSION = f.read().strip()


setup(
    name='mini-stats',
    version=VERSION,
    description='Formatting helpers for system statistics indicators.',
    license='MIT',
    zip_safe=False,
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: MacOS",
        "Operating System :: POSIX :: Linux",
        "Environment :: Console",
        "Programming Language :: Python :: 3",
        "Topic :: System :: Monitoring",
        "Typing :: Typed",
    ],
    platforms=['Linux', 'MacOS'],
    packages=find_packages(exclude=['tests*']),
    package_data={
        '': ['version.txt'],
    },
    entry_points={'console_scripts': [
        'mini-stats = mini_stats:main',
    ]},
    install_requires=REQUIREMENTS,
    extras_require={
        'test': TEST_REQUIREMENTS,
    },
)
