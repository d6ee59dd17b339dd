#! /usr/bin/env python

from setuptools import setup

from planperf import __version__ as version


with open("README.rst") as f:
    long_description = f.read()


setup(
    name="planperf",
    version=version.rstrip("+"),
    description="Performance indexes for multi-robot motion plans",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    keywords="multi-robot planning logs benchmarks",
    license="GPL3+",
    packages=["planperf", "planperf.reports"],
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Topic :: Scientific/Engineering",
    ],
    install_requires=[
        "matplotlib",  # for scatter plots
        "simplejson",  # optional, speeds up writing properties files
        "txt2tags>=3.6",  # for HTML and Latex tables
    ],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["planperf = planperf.evaluate:main"]},
    python_requires=">=3.8",
)
