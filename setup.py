# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

"""Setuptools installer for the fabric network API."""

from os.path import dirname, join

from setuptools import find_packages, setup


def read(filename):
    """Return the whitespace-stripped content of `filename`."""
    path = join(dirname(__file__), filename)
    with open(path, "r") as fin:
        return fin.read().strip()


setup(
    name="netapiserver",
    version="1.0.0",
    license="AGPLv3",
    description="Tenant fabric networks and VLANs API",
    long_description=read("README.rst"),
    packages=find_packages(
        where="src",
        include=[
            "netapiserver",
            "netapiserver.*",
            "netservicelayer",
            "netservicelayer.*",
        ],
    ),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=[
        "aiohttp",
        "fastapi",
        "pydantic>=2",
        "python-json-logger",
        "PyYAML",
        "starlette",
        "structlog",
        "uvicorn",
    ],
    extras_require={
        "test": [
            "httpx",
            "pytest",
            "pytest-asyncio",
            "pytest-mock",
        ],
    },
    entry_points={
        "console_scripts": [
            "netapiserver = netapiserver.main:run",
        ]
    },
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Information Technology",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: GNU Affero General Public License v3",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Topic :: System :: Systems Administration",
    ],
)
