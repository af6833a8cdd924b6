#!/usr/bin/env python3
# Copyright (C) 2019 Checkmk GmbH - License: GNU General Public License v2
# This file is part of Checkmk (https://checkmk.com). It is subject to the terms and
# conditions defined in the file COPYING, which is part of this source code package.

import ast
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from pnp_templates.exceptions import MKTemplateError
from pnp_templates.log import logger
from pnp_templates.models import TemplateConfig


def _load_object_from_file(path: Path, default: Any = None) -> Any:
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return default
    except OSError as e:
        raise MKTemplateError(f"Cannot read {path}: {e}") from e
    if not content.strip():
        return default
    try:
        return ast.literal_eval(content)
    except (SyntaxError, ValueError, TypeError, MemoryError, RecursionError) as e:
        raise MKTemplateError(f"Cannot parse {path}: {e}") from e


def load_template_config(path: Path) -> TemplateConfig:
    """Read the template configuration, e.g. {"show_thresholds": True}

    A missing or empty file results in the default configuration.
    """
    raw = _load_object_from_file(path, default={})

    try:
        config = TemplateConfig.model_validate(raw)
    except ValidationError as e:
        raise MKTemplateError(f"Invalid template configuration in {path}: {e}") from e

    logger.debug("Loaded template configuration from %s: %r", path, config)
    return config
