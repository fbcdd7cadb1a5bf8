#===============================================================================
#  TokenView | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Central place for default paths, file names and opener command conventions.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from pathlib import Path

APP_TITLE = "TokenView"
CONFIG_FILE_NAME = "tokenview.json"
DEFAULT_OUTPUT_PATH = "./src/onchain.svg"
DEFAULT_LOG_DIR = ".tokenview/logs"
LOG_FILE_NAME = "tokenview.log"

HTTP_TIMEOUT = 20

# --- WSL ---
WSL_CONFIG_PATH = "/etc/wsl.conf"
WSL_DEFAULT_MOUNT_POINT = "/mnt/"
WSL_POWERSHELL_SUFFIX = "c/Windows/System32/WindowsPowerShell/v1.0/powershell.exe"

# --- Windows ---
DEFAULT_SYSTEMROOT = "C:\\Windows"
WINDOWS_POWERSHELL_SUFFIX = "\\System32\\WindowsPowerShell\\v1.0\\powershell"
POWERSHELL_FLAGS = [
    "-NoProfile",
    "-NonInteractive",
    "-ExecutionPolicy",
    "Bypass",
    "-EncodedCommand",
]

# --- Container detection ---
DOCKERENV_PATH = "/.dockerenv"
CGROUP_PATH = "/proc/self/cgroup"
PROC_VERSION_PATH = "/proc/version"

# Optional fallback opener script; not shipped, the system xdg-open is used when absent
LOCAL_XDG_OPEN_PATH = Path(__file__).parent / "xdg-open"
