#===============================================================================
#  TokenView | config.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Loading of the optional tokenview.json settings file (output path, opener
#  flags, app selection, log folder).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from .constants import DEFAULT_LOG_DIR, DEFAULT_OUTPUT_PATH

log = logging.getLogger(__name__)


def default_config() -> Dict[str, Any]:
    return {
        "output_path": DEFAULT_OUTPUT_PATH,
        "open": True,                        # open the image after writing it
        "app": None,                         # name, shortcut or list of names
        "app_arguments": [],
        "wait": False,
        "background": False,
        "new_instance": False,
        "allow_nonzero_exit_code": False,
        "log_dir": DEFAULT_LOG_DIR,
    }


def _is_str_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(v, str) for v in value)


def _check_value(key: str, value: Any) -> bool:
    if key == "output_path":
        return isinstance(value, str) and bool(value.strip())
    if key == "log_dir":
        return value is None or isinstance(value, str)
    if key == "app":
        return value is None or isinstance(value, str) or _is_str_list(value)
    if key == "app_arguments":
        return _is_str_list(value)
    return isinstance(value, bool)


def normalize_config(data: Dict[str, Any], config_path: Path) -> Dict[str, Any]:
    """Fill missing keys and replace values of the wrong type with the default."""
    d = default_config()
    if isinstance(data.get("app_arguments"), str):
        data["app_arguments"] = [data["app_arguments"]]
    for k in d:
        if k not in data:
            data[k] = d[k]
        elif not _check_value(k, data[k]):
            log.warning("Ignoring %s in %s: unexpected value %r", k, config_path, data[k])
            data[k] = d[k]
    return data


def load_config(config_path: Path) -> Dict[str, Any]:
    """Load settings from disk (or defaults). Unknown keys are kept."""
    d = default_config()
    if not config_path.exists():
        return d
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        log.warning("Ignoring unreadable config %s: %s", config_path, e)
        return d
    if not isinstance(data, dict):
        log.warning("Ignoring config %s: expected a JSON object", config_path)
        return d
    return normalize_config(data, config_path)
