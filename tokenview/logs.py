#===============================================================================
#  TokenView | logs.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Logging setup: console output plus an appending run log under
#  ./.tokenview/logs/tokenview.log.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from .constants import LOG_FILE_NAME

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def ensure_log_dir(log_dir: Union[str, Path]) -> Path:
    p = Path(log_dir)
    p.mkdir(parents=True, exist_ok=True)
    return p


def setup_logging(log_dir: Optional[Union[str, Path]] = None, verbose: bool = False) -> logging.Logger:
    """Configure the `tokenview` logger and return it.

    Console gets INFO (DEBUG with verbose). The log file, when log_dir is
    given, always gets DEBUG.
    """
    logger = logging.getLogger("tokenview")
    logger.setLevel(logging.DEBUG)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    console = logging.StreamHandler()
    console.setLevel(logging.DEBUG if verbose else logging.INFO)
    console.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console)

    if log_dir:
        log_file = ensure_log_dir(log_dir) / LOG_FILE_NAME
        fh = logging.FileHandler(log_file, encoding="utf-8", errors="ignore")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(fh)

    return logger
