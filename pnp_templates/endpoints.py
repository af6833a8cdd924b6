#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from typing import Optional

from fastapi import Depends, HTTPException, Query
from starlette.status import HTTP_400_BAD_REQUEST

from pnp_templates.apps_and_routers import PNP_TEMPLATES_APP
from pnp_templates.check_meminfo import render_meminfo_template
from pnp_templates.config import load_template_config
from pnp_templates.constants import DEFAULT_DATA_SOURCES
from pnp_templates.exceptions import MKTemplateError
from pnp_templates.log import logger
from pnp_templates.models import TemplateConfig, TemplateResponse
from pnp_templates.site_context import config_path, rrd_path_for


def template_config() -> TemplateConfig:
    try:
        return load_template_config(config_path())
    except MKTemplateError as e:
        logger.error("Falling back to default template configuration: %s", e)
        return TemplateConfig()


@PNP_TEMPLATES_APP.get(
    "/check_meminfo",
    response_model=TemplateResponse,
    response_model_by_alias=True,
)
async def check_meminfo(
    hostname: str,
    servicedesc: str,
    rrdfile: Optional[str] = None,
    ds: list[str] = Query(list(DEFAULT_DATA_SOURCES)),
    warn: Optional[float] = None,
    crit: Optional[float] = None,
    config: TemplateConfig = Depends(template_config),
) -> TemplateResponse:
    try:
        template = render_meminfo_template(
            hostname,
            servicedesc,
            rrdfile if rrdfile is not None else str(rrd_path_for(hostname, servicedesc)),
            ds,
            warn=[warn],
            crit=[crit],
            config=config,
        )
    except MKTemplateError as e:
        logger.error(
            "host=%s service=%s Rendering check_meminfo template failed: %s",
            hostname,
            servicedesc,
            e,
        )
        raise HTTPException(
            status_code=HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    return TemplateResponse.from_template(template)
