#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from setuptools import find_packages, setup

setup(
    name="pnp-templates",
    version="1.1.0",
    packages=find_packages(include=["pnp_templates", "pnp_templates.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=["fastapi", "pydantic>=2"],
    extras_require={"test": ["pytest", "httpx"]},
    entry_points={"console_scripts": ["pnp-template=pnp_templates.cli:main"]},
)
