#===============================================================================
#  TokenView | apps.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Named application shortcuts (chrome / firefox / edge). Each resolves to the
#  platform- and architecture-specific executable name or path the first time
#  it is read, and is cached after that.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from functools import cached_property
from typing import Dict, List, Optional, Union

from .errors import UnsupportedPlatformError
from .platform_info import PlatformInfo, detect_platform

Binary = Union[str, List[str]]
ArchTable = Union[Binary, Dict[str, Binary]]

CHROME = {
    "darwin": "google chrome",
    "win32": "chrome",
    "linux": ["google-chrome", "google-chrome-stable", "chromium"],
}
CHROME_WSL = {
    "ia32": "/mnt/c/Program Files (x86)/Google/Chrome/Application/chrome.exe",
    "x64": [
        "/mnt/c/Program Files/Google/Chrome/Application/chrome.exe",
        "/mnt/c/Program Files (x86)/Google/Chrome/Application/chrome.exe",
    ],
}

FIREFOX = {
    "darwin": "firefox",
    "win32": "C:\\Program Files\\Mozilla Firefox\\firefox.exe",
    "linux": "firefox",
}
FIREFOX_WSL = "/mnt/c/Program Files/Mozilla Firefox/firefox.exe"

EDGE = {
    "darwin": "microsoft edge",
    "win32": "msedge",
    "linux": ["microsoft-edge", "microsoft-edge-dev"],
}
EDGE_WSL = "/mnt/c/Program Files (x86)/Microsoft/Edge/Application/msedge.exe"


def detect_arch_binary(binary: ArchTable, platform_info: PlatformInfo) -> Binary:
    if isinstance(binary, (str, list)):
        return binary
    arch_binary = binary.get(platform_info.arch)
    if not arch_binary:
        raise UnsupportedPlatformError(f"{platform_info.arch} is not supported")
    return arch_binary


def detect_platform_binary(
    table: Dict[str, ArchTable],
    wsl: Optional[ArchTable] = None,
    platform_info: Optional[PlatformInfo] = None,
) -> Binary:
    """Pick the binary for the current platform; WSL entry wins under WSL."""
    info = platform_info or detect_platform()
    if wsl and info.is_wsl:
        return detect_arch_binary(wsl, info)

    platform_binary = table.get(info.system)
    if not platform_binary:
        raise UnsupportedPlatformError(f"{info.system} is not supported")
    return detect_arch_binary(platform_binary, info)


class Apps:
    """Browser shortcuts, resolved lazily per platform."""

    NAMES = ("chrome", "firefox", "edge")

    def __init__(self, platform_info: Optional[PlatformInfo] = None) -> None:
        self._platform_info = platform_info

    @property
    def platform_info(self) -> PlatformInfo:
        return self._platform_info or detect_platform()

    @cached_property
    def chrome(self) -> Binary:
        return detect_platform_binary(CHROME, wsl=CHROME_WSL, platform_info=self.platform_info)

    @cached_property
    def firefox(self) -> Binary:
        return detect_platform_binary(FIREFOX, wsl=FIREFOX_WSL, platform_info=self.platform_info)

    @cached_property
    def edge(self) -> Binary:
        return detect_platform_binary(EDGE, wsl=EDGE_WSL, platform_info=self.platform_info)

    def resolve(self, name: str) -> Binary:
        """Map a shortcut name to its binary; any other name passes through."""
        key = (name or "").strip().lower()
        if key in self.NAMES:
            return getattr(self, key)
        return name


apps = Apps()


def resolve_app(name: str) -> Binary:
    return apps.resolve(name)
