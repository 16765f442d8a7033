#!/usr/bin/env python3

from setuptools import setup

setup(
    name='pwgauge',
    version='0.1.0',
    description='Password generator with entropy-based strength meter',
    packages=['pwgauge'],
    python_requires='>=3.8',
    install_requires=[
        'prompt_toolkit',
        'blessed',
        'pyperclip',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['pwgauge = pwgauge.main:main'],
    },
)
