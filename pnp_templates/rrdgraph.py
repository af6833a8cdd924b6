#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.
"""Building blocks for the argument strings of "rrdtool graph"

PNP4Nagios passes two strings to rrdtool: the graph options and the graph
definitions. Both are plain sequences of blank separated tokens. Legend texts
are put into double quotes and may contain the escape sequences "\\t" and "\\n"
which are interpreted by rrdtool itself, so they are written as literal
backslash sequences here.
"""

from collections.abc import Iterable, Iterator
from typing import Literal

ConsolidationFunction = Literal["AVERAGE", "MIN", "MAX", "LAST"]


class RRDGraphCommands:
    """Append-only, ordered sequence of rrdgraph directives"""

    def __init__(self, commands: Iterable[str] = ()) -> None:
        self._commands: list[str] = list(commands)

    def append(self, command: str) -> None:
        self._commands.append(command)

    def extend(self, commands: Iterable[str]) -> None:
        self._commands.extend(commands)

    def __iter__(self) -> Iterator[str]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def render(self) -> str:
        # Every directive is terminated by a blank, including the last one
        return "".join(f"{command} " for command in self._commands)


def render_value(value: float) -> str:
    """Render a number the way it appears in a directive

    >>> render_value(80.0)
    '80'
    >>> render_value(1.5)
    '1.5'
    """
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def data_definition(
    var_name: str,
    rrdfile: str,
    data_source: str,
    cf: ConsolidationFunction = "AVERAGE",
) -> str:
    return f"DEF:{var_name}={rrdfile}:{data_source}:{cf}"


def calculation(var_name: str, rpn_expression: str) -> str:
    return f"CDEF:{var_name}={rpn_expression}"


def comment(text: str) -> str:
    return f'COMMENT:"{text}"'


def area(value: str, color: str, legend: str, *, stack: bool = False) -> str:
    return f'AREA:{value}{color}:"{legend}"' + (":STACK" if stack else "")


def line(width: int, value: str, color: str, legend: str) -> str:
    return f'LINE{width}:{value}{color}:"{legend}"'


def gprint(var_name: str, cf: ConsolidationFunction, fmt: str) -> str:
    return f'GPRINT:{var_name}:{cf}:"{fmt}"'


def hrule(value: float, color: str) -> str:
    return f"HRULE:{render_value(value)}{color}"


def quoted(text: str) -> str:
    return f'"{text}"'
