#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from fastapi import FastAPI

from pnp_templates.apps_and_routers import PNP_TEMPLATES_APP
from pnp_templates.log import configure_logger
from pnp_templates.site_context import log_path, site_name


def main_app() -> FastAPI:
    configure_logger(log_path())

    # register endpoints
    from pnp_templates import endpoints  # pylint: disable=unused-import

    main_app_ = FastAPI(
        openapi_url=None,
        docs_url=None,
        redoc_url=None,
    )
    main_app_.mount(f"/{site_name()}/pnp-templates", PNP_TEMPLATES_APP)
    return main_app_
