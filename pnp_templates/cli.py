#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Render the PNP graph definition of check_meminfo

Prints the rrdgraph options on the first line and the graph definitions on
the second line.
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Optional

from pnp_templates.check_meminfo import render_meminfo_template
from pnp_templates.config import load_template_config
from pnp_templates.constants import DEFAULT_DATA_SOURCES
from pnp_templates.exceptions import MKTemplateError
from pnp_templates.models import TemplateConfig
from pnp_templates.site_context import rrd_path_for


def parse_arguments(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)

    parser.add_argument(
        "--debug",
        action="store_true",
        help="debug mode: let Python exceptions come through",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="verbose mode")
    parser.add_argument(
        "--rrdfile",
        metavar="PATH",
        help="RRD file to read from (default: the host's and service's file in the PNP perfdata directory)",
    )
    parser.add_argument(
        "--ds",
        metavar="NAME",
        nargs=6,
        default=list(DEFAULT_DATA_SOURCES),
        help="the six data sources within the RRD file (default: 1 2 3 4 5 6)",
    )
    parser.add_argument("--warn", metavar="BYTES", type=float, help="warning threshold")
    parser.add_argument("--crit", metavar="BYTES", type=float, help="critical threshold")
    parser.add_argument(
        "--show-thresholds",
        action="store_true",
        help="draw horizontal rules at the warning and critical thresholds",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        type=Path,
        help="read the template configuration from this file",
    )
    parser.add_argument("hostname", metavar="HOSTNAME", help="name of the monitored host")
    parser.add_argument("servicedesc", metavar="SERVICE", help="description of the service")

    return parser.parse_args(argv)


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(levelname)s: %(message)s",
    )


def _template_config(args: argparse.Namespace) -> TemplateConfig:
    config = load_template_config(args.config) if args.config else TemplateConfig()
    if args.show_thresholds:
        return config.model_copy(update={"show_thresholds": True})
    return config


def main(sys_argv: Optional[Sequence[str]] = None) -> int:
    if sys_argv is None:
        sys_argv = sys.argv[1:]

    args = parse_arguments(sys_argv)
    setup_logging(args.verbose)

    try:
        template = render_meminfo_template(
            args.hostname,
            args.servicedesc,
            (
                args.rrdfile
                if args.rrdfile is not None
                else str(rrd_path_for(args.hostname, args.servicedesc))
            ),
            args.ds,
            warn=[args.warn],
            crit=[args.crit],
            config=_template_config(args),
        )
    except MKTemplateError as e:
        if args.debug:
            raise
        sys.stderr.write(f"{e}\n")
        return 2

    sys.stdout.write(f"{template.opt}\n")
    sys.stdout.write(f"{template.defs}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
