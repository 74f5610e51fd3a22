#!/usr/bin/python

from setuptools import setup

setup(
    name='beziertools',
    version='0.1.0',
    description='Bezier curves of arbitrary degree - Bernstein evaluation, polyline sampling',
    author='Nervures',
    author_email='be@nervures.com',
    license='LGPL-3.0',
    package_dir={
        'beziertools': 'sources/model',
    },
    packages=['beziertools'],
    package_data={
        'beziertools': ['*.cfg'],
    },
    install_requires=[
        'numpy>=1.20',
    ],
    extras_require={
        'test': ['pytest>=7'],
    },
    python_requires='>=3.8',
)
