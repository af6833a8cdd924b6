#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

import pytest

from pnp_templates import rrdgraph


def test_render_terminates_every_command() -> None:
    commands = rrdgraph.RRDGraphCommands(["-l0"])
    commands.append("--rigid")
    commands.extend(["-b 1024"])
    assert list(commands) == ["-l0", "--rigid", "-b 1024"]
    assert len(commands) == 3
    assert commands.render() == "-l0 --rigid -b 1024 "


def test_render_empty() -> None:
    assert rrdgraph.RRDGraphCommands().render() == ""


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "0"),
        (80.0, "80"),
        (8589934592, "8589934592"),
        (1.5, "1.5"),
    ],
)
def test_render_value(value: float, expected: str) -> None:
    assert rrdgraph.render_value(value) == expected


def test_data_definition() -> None:
    assert (
        rrdgraph.data_definition("var1", "/omd/mem.rrd", "1")
        == "DEF:var1=/omd/mem.rrd:1:AVERAGE"
    )
    assert rrdgraph.data_definition("v", "x.rrd", "2", "MAX") == "DEF:v=x.rrd:2:MAX"


def test_calculation() -> None:
    assert rrdgraph.calculation("varm1", "var1,1048576,/") == "CDEF:varm1=var1,1048576,/"


def test_area() -> None:
    assert rrdgraph.area("var1", "#EA8F00", r"Memory\t") == r'AREA:var1#EA8F00:"Memory\t"'
    assert (
        rrdgraph.area("var3", "#AACC01", "buf", stack=True) == 'AREA:var3#AACC01:"buf":STACK'
    )


def test_line() -> None:
    assert rrdgraph.line(0, "0", "#4433FF", "Swap") == 'LINE0:0#4433FF:"Swap"'
    assert rrdgraph.line(1, "var5", "#44CCFF", "used") == 'LINE1:var5#44CCFF:"used"'


def test_gprint() -> None:
    assert rrdgraph.gprint("varm1", "LAST", "%6.0lf ") == 'GPRINT:varm1:LAST:"%6.0lf "'


def test_comment_keeps_escapes_literal() -> None:
    text = rrdgraph.comment(r"\t LAST MB\n")
    assert text == 'COMMENT:"\\t LAST MB\\n"'
    assert "\t" not in text
    assert "\n" not in text


def test_hrule() -> None:
    assert rrdgraph.hrule(1024.0, "#FFFF00") == "HRULE:1024#FFFF00"
