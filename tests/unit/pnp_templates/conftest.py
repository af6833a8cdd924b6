#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

from collections.abc import Iterator
from pathlib import Path

import pytest

from pnp_templates import site_context


def _clear_caches() -> None:
    for func in (
        site_context._omd_root,
        site_context.site_name,
        site_context.config_path,
        site_context.log_path,
        site_context.perfdata_dir,
    ):
        func.cache_clear()


@pytest.fixture(name="site_root")
def fixture_site_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    monkeypatch.setenv("OMD_ROOT", str(tmp_path))
    monkeypatch.setenv("OMD_SITE", "NO_SITE")
    _clear_caches()
    yield tmp_path
    _clear_caches()


@pytest.fixture(name="no_site")
def fixture_no_site(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv("OMD_ROOT", raising=False)
    monkeypatch.delenv("OMD_SITE", raising=False)
    _clear_caches()
    yield
    _clear_caches()
