#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

import functools
import os
from pathlib import Path

from pnp_templates.exceptions import MKTemplateError


@functools.lru_cache
def _omd_root() -> Path:
    try:
        return Path(os.environ["OMD_ROOT"])
    except KeyError as e:
        raise MKTemplateError("OMD_ROOT is not set, use --rrdfile") from e


@functools.lru_cache
def site_name() -> str:
    return os.environ["OMD_SITE"]


@functools.lru_cache
def config_path() -> Path:
    return _omd_root() / "etc/pnp-templates/check_meminfo.mk"


@functools.lru_cache
def log_path() -> Path:
    return _omd_root() / "var/log/pnp-templates/pnp-templates.log"


@functools.lru_cache
def perfdata_dir() -> Path:
    return _omd_root() / "var/pnp4nagios/perfdata"


def pnp_cleanup(s: str) -> str:
    """Quote a string (host name or service name) in PNP4Nagios format

    >>> pnp_cleanup("Memory used: /var")
    'Memory_used___var'
    """
    return s.replace(" ", "_").replace(":", "_").replace("/", "_").replace("\\", "_")


def rrd_path_for(hostname: str, servicedesc: str) -> Path:
    return perfdata_dir() / pnp_cleanup(hostname) / f"{pnp_cleanup(servicedesc)}.rrd"
