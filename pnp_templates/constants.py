#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from typing import Final

BYTES_PER_MB: Final = 1048576

# PNP4Nagios with RRD_STORAGE_TYPE = MULTIPLE names the data sources by position
DEFAULT_DATA_SOURCES: Final = ("1", "2", "3", "4", "5", "6")

LEGEND_FORMAT: Final = "%6.0lf"

WARN_COLOR: Final = "#FFFF00"
CRIT_COLOR: Final = "#FF0000"
