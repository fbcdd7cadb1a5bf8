#===============================================================================
#  TokenView | platform_info.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Detects the host platform (macOS / Windows / WSL / other Unix), the CPU
#  architecture and container / bundled-runtime conditions used by the opener.
#
#  Notes
#  -----
#  - Detection is done once per process (detect_platform is memoized).
#  - Tests build PlatformInfo directly instead of patching sys/platform.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import functools
import platform
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .constants import CGROUP_PATH, DOCKERENV_PATH, PROC_VERSION_PATH


class PlatformKind(Enum):
    MACOS = "macos"
    WINDOWS = "windows"
    WSL = "wsl"
    UNIX = "unix"


ARCH_ALIASES = {
    "x86_64": "x64",
    "amd64": "x64",
    "x64": "x64",
    "i386": "ia32",
    "i686": "ia32",
    "x86": "ia32",
    "ia32": "ia32",
    "aarch64": "arm64",
    "arm64": "arm64",
}


@dataclass(frozen=True)
class PlatformInfo:
    system: str              # sys.platform style: "darwin" | "win32" | "linux" | ...
    arch: str                # normalized: "x64" | "ia32" | "arm64" | ...
    is_wsl: bool = False
    is_docker: bool = False
    is_frozen: bool = False  # PyInstaller / bundled runtime
    is_android: bool = False

    @property
    def kind(self) -> PlatformKind:
        if self.system == "darwin":
            return PlatformKind.MACOS
        if self.system == "win32":
            return PlatformKind.WINDOWS
        if self.is_wsl and not self.is_docker:
            return PlatformKind.WSL
        return PlatformKind.UNIX


def normalize_arch(machine: str) -> str:
    m = (machine or "").strip().lower()
    return ARCH_ALIASES.get(m, m)


def _read_text(path: str) -> str:
    return Path(path).read_text(encoding="utf-8", errors="ignore")


def is_docker(dockerenv_path: str = DOCKERENV_PATH, cgroup_path: str = CGROUP_PATH) -> bool:
    """True when running inside a Docker container."""
    if Path(dockerenv_path).exists():
        return True
    try:
        return "docker" in _read_text(cgroup_path)
    except OSError:
        return False


def is_wsl(
    system: str = sys.platform,
    release: str = "",
    proc_version_path: str = PROC_VERSION_PATH,
    in_docker: bool = False,
) -> bool:
    """True on Windows Subsystem for Linux (outside of a container)."""
    if not system.startswith("linux"):
        return False

    release = release or platform.release()
    if "microsoft" in release.lower():
        return not in_docker

    try:
        return "microsoft" in _read_text(proc_version_path).lower() and not in_docker
    except OSError:
        return False


def _is_android() -> bool:
    return sys.platform == "android" or hasattr(sys, "getandroidapilevel")


@functools.lru_cache(maxsize=None)
def detect_platform() -> PlatformInfo:
    """Return the PlatformInfo of the running interpreter (computed once)."""
    system = "linux" if sys.platform.startswith("linux") else sys.platform
    docker = is_docker() if system == "linux" else False
    return PlatformInfo(
        system=system,
        arch=normalize_arch(platform.machine()),
        is_wsl=is_wsl(system, in_docker=docker),
        is_docker=docker,
        is_frozen=bool(getattr(sys, "frozen", False)),
        is_android=_is_android(),
    )
