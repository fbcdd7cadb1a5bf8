#===============================================================================
#  TokenView | wsl.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Resolves where WSL mounts the Windows drives, so the Windows PowerShell
#  binary can be reached from inside the Linux subsystem.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional

from .constants import WSL_CONFIG_PATH, WSL_DEFAULT_MOUNT_POINT

log = logging.getLogger(__name__)

ROOT_RE = re.compile(r"root\s*=\s*(.*)")


def parse_mount_root(config_text: str) -> Optional[str]:
    """Return the first uncommented `root = <path>` value, or None."""
    for line in config_text.splitlines():
        active = line.split("#", 1)[0]
        m = ROOT_RE.search(active)
        if m:
            return m.group(1).strip()
    return None


class WslMountResolver:
    """Reads the automount root from wsl.conf; falls back to /mnt/.

    Only a value actually read from the config file is cached, so a missing
    file is looked up again on the next call.
    """

    def __init__(self, config_path: str = WSL_CONFIG_PATH, default: str = WSL_DEFAULT_MOUNT_POINT) -> None:
        self.config_path = Path(config_path)
        self.default = default
        self._mount_point: Optional[str] = None

    def mount_point(self) -> str:
        if self._mount_point:
            return self._mount_point

        if not self.config_path.exists():
            return self.default

        try:
            content = self.config_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            log.debug("Could not read %s (%s); using %s", self.config_path, e, self.default)
            return self.default

        root = parse_mount_root(content)
        if not root:
            return self.default

        self._mount_point = root if root.endswith("/") else f"{root}/"
        return self._mount_point


_resolver = WslMountResolver()


def get_wsl_drives_mount_point() -> str:
    return _resolver.mount_point()
