import os
from setuptools import setup


src_version = os.path.join(os.path.dirname(__file__), "aocutil", "version.py")
with open(src_version) as f:
    version = f.read().strip().split()[-1][1:-1]


setup(
    name="aocutil",
    version=version,
    description="Fetch, cache and parse your Advent of Code puzzle inputs",
    long_description=open("README.rst").read(),
    long_description_content_type="text/x-rst",
    packages=["aocutil"],
    entry_points={
        "console_scripts": [
            "aocutil=aocutil.cli:main",
        ],
    },
    license="MIT",
    classifiers=[
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Topic :: Software Development :: Libraries",
        "Topic :: Games/Entertainment :: Puzzle Games",
    ],
    python_requires=">=3.9",
    install_requires=[
        "urllib3",
        'tzdata; platform_system == "Windows"',
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-mock",
            "pytest-freezer",
            "pytest-raisin",
            "pook",
        ],
    },
)
