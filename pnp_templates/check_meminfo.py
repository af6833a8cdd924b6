#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""PNP template for check_meminfo

Renders the memory usage graph (used, buffered, cached, swap) of the
check_meminfo plug-in. The data sources are expected in this order:

    1: memory total
    2: memory used
    3: memory buffered
    4: memory cached
    5: swap used
    6: swap total

All values are stored in bytes. The areas and lines are drawn from the raw
values, the legend shows them in megabytes.
"""

import math
from collections.abc import Sequence
from typing import NamedTuple, Optional

from pnp_templates import rrdgraph
from pnp_templates.constants import BYTES_PER_MB, CRIT_COLOR, LEGEND_FORMAT, WARN_COLOR
from pnp_templates.exceptions import MKTemplateError
from pnp_templates.log import logger
from pnp_templates.models import first_threshold, PNPTemplate, TemplateConfig

NUMBER_OF_DATA_SOURCES = 6


class _Layer(NamedTuple):
    graph: str
    legend_var: str
    last_padding: str


_LAYERS = [
    _Layer(rrdgraph.area("var1", "#EA8F00", r"Memory    \t"), "varm1", " " * 5),
    _Layer(rrdgraph.area("var2", "#00FF00", r"-used     \t"), "varm2", " " * 5),
    _Layer(rrdgraph.area("var3", "#AACC01", r"-buffered \t", stack=True), "varm3", " " * 5),
    _Layer(rrdgraph.area("var4", "#EACC00", r"-cached   \t", stack=True), "varm4", " " * 5),
    # Flat line at zero, its legend shows the swap total
    _Layer(rrdgraph.line(0, "0", "#4433FF", r"Swap    \t"), "varm6", " " * 6),
    _Layer(rrdgraph.line(1, "var5", "#44CCFF", r"-used     \t"), "varm5", " " * 6),
]


def _graph_options(hostname: str, servicedesc: str) -> rrdgraph.RRDGraphCommands:
    return rrdgraph.RRDGraphCommands(
        [
            "--vertical-label " + rrdgraph.quoted("Byte Usage"),
            "-l0",
            "-b 1024",
            "--alt-autoscale-max",
            "--rigid",
            "--title " + rrdgraph.quoted(f"Memory-Usage for {hostname} / {servicedesc}"),
        ]
    )


def _data_definitions(rrdfile: str, data_sources: Sequence[str]) -> list[str]:
    commands = []
    for nr, data_source in enumerate(data_sources[:NUMBER_OF_DATA_SOURCES], start=1):
        commands.append(rrdgraph.data_definition(f"var{nr}", rrdfile, data_source))
        commands.append(rrdgraph.calculation(f"varm{nr}", f"var{nr},{BYTES_PER_MB},/"))
    return commands


def _threshold_rules(
    warn: Sequence[Optional[float]],
    crit: Sequence[Optional[float]],
) -> list[str]:
    thresholds = [
        (first_threshold(warn), WARN_COLOR),
        (first_threshold(crit), CRIT_COLOR),
    ]
    return [
        rrdgraph.hrule(value, color)
        for value, color in thresholds
        if value is not None and math.isfinite(value)
    ]


def _legend_readouts(var_name: str, last_padding: str) -> list[str]:
    return [
        rrdgraph.gprint(var_name, "LAST", LEGEND_FORMAT + last_padding),
        rrdgraph.gprint(var_name, "AVERAGE", LEGEND_FORMAT + "   "),
        rrdgraph.gprint(var_name, "MAX", LEGEND_FORMAT + r"\n"),
    ]


def render_meminfo_template(
    hostname: str,
    servicedesc: str,
    rrdfile: str,
    data_sources: Sequence[str],
    warn: Sequence[Optional[float]] = (),
    crit: Sequence[Optional[float]] = (),
    config: TemplateConfig = TemplateConfig(),
) -> PNPTemplate:
    if len(data_sources) < NUMBER_OF_DATA_SOURCES:
        raise MKTemplateError(
            f"check_meminfo needs {NUMBER_OF_DATA_SOURCES} data sources, got {len(data_sources)}"
        )

    defs = rrdgraph.RRDGraphCommands(_data_definitions(rrdfile, data_sources))

    if config.show_thresholds:
        defs.extend(_threshold_rules(warn, crit))

    defs.append(rrdgraph.comment(r"\t\t LAST MB\t    AVG MB\t    MAX MB\n"))

    for layer in _LAYERS:
        defs.append(layer.graph)
        defs.extend(_legend_readouts(layer.legend_var, layer.last_padding))

    logger.debug(
        "Rendered check_meminfo template for %s / %s (%d directives)",
        hostname,
        servicedesc,
        len(defs),
    )
    return PNPTemplate(
        opt=_graph_options(hostname, servicedesc).render(),
        defs=defs.render(),
    )
