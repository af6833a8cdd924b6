#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from collections.abc import Sequence
from typing import NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field


class PNPTemplate(NamedTuple):
    opt: str
    defs: str


class TemplateConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    show_thresholds: bool = False


class TemplateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    opt: str
    defs: str = Field(alias="def")

    @classmethod
    def from_template(cls, template: PNPTemplate) -> "TemplateResponse":
        return cls(opt=template.opt, defs=template.defs)


def first_threshold(thresholds: Sequence[Optional[float]]) -> Optional[float]:
    return thresholds[0] if thresholds else None
