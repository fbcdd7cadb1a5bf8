#===============================================================================
#  TokenView | launcher.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Opens a file / URL / app with the OS default handler. Picks the native
#  command for macOS (open), Windows and WSL (PowerShell Start) or other Unix
#  systems (xdg-open), spawns it and optionally waits for it to exit.
#
#  Notes
#  -----
#  - No xdg-open script ships with the package. The system xdg-open is used
#    unless an executable script is dropped in at tokenview/xdg-open.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import base64
import logging
import os
import subprocess
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, TypeVar, Union

from .constants import (
    DEFAULT_SYSTEMROOT,
    LOCAL_XDG_OPEN_PATH,
    POWERSHELL_FLAGS,
    WINDOWS_POWERSHELL_SUFFIX,
    WSL_DEFAULT_MOUNT_POINT,
    WSL_POWERSHELL_SUFFIX,
)
from .errors import OpenerError, ProcessExitError
from .models import AppSpec, LaunchCommand, OpenRequest
from .platform_info import PlatformInfo, PlatformKind, detect_platform
from .wsl import get_wsl_drives_mount_point

log = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

AppArg = Union[None, str, List[str], AppSpec, List[AppSpec]]


def try_each(items: Iterable[T], fn: Callable[[T], R]) -> R:
    """Call fn on each item in order; return the first success.

    If every item fails the last error is re-raised.
    """
    last_error: Optional[BaseException] = None
    for item in items:
        try:
            return fn(item)
        except (OSError, OpenerError) as e:
            log.info("Candidate %r failed: %s", item, e)
            last_error = e
    if last_error is None:
        raise OpenerError("No application candidates to try.")
    raise last_error


# --- command builders (pure) ---------------------------------------------------

def _app_parts(request: OpenRequest):
    app = request.app
    if app is None:
        return None, []
    return app.name, list(app.arguments)


def _macos_command(request: OpenRequest, info: PlatformInfo, mount_point: Optional[str]) -> LaunchCommand:
    app, app_args = _app_parts(request)
    args: List[str] = []
    if request.wait:
        args.append("--wait-apps")
    if request.background:
        args.append("--background")
    if request.new_instance:
        args.append("--new")
    if app:
        args += ["-a", app]
    if request.target:
        args.append(request.target)
    if app_args:
        args += ["--args", *app_args]
    return LaunchCommand("open", args)


def encode_powershell_command(request: OpenRequest) -> str:
    """Build the `Start ...` PowerShell command, UTF-16LE + base64 encoded.

    Encoding it keeps paths with quotes or spaces away from shell escaping.
    """
    app, app_args = _app_parts(request)
    parts = ["Start"]
    if request.wait:
        parts.append("-Wait")

    if app:
        parts += [f'"`"{app}`""', "-ArgumentList"]
        if request.target:
            app_args.insert(0, request.target)
    elif request.target:
        parts.append(f'"{request.target}"')

    if app_args:
        parts.append(",".join(f'"`"{a}`""' for a in app_args))

    return base64.b64encode(" ".join(parts).encode("utf-16-le")).decode("ascii")


def _windows_command(request: OpenRequest, info: PlatformInfo, mount_point: Optional[str]) -> LaunchCommand:
    if info.kind is PlatformKind.WSL:
        command = f"{mount_point or WSL_DEFAULT_MOUNT_POINT}{WSL_POWERSHELL_SUFFIX}"
        verbatim = False
    else:
        system_root = os.environ.get("SYSTEMROOT", DEFAULT_SYSTEMROOT)
        command = f"{system_root}{WINDOWS_POWERSHELL_SUFFIX}"
        verbatim = True
    args = [*POWERSHELL_FLAGS, encode_powershell_command(request)]
    return LaunchCommand(command, args, verbatim=verbatim)


def use_system_xdg_open(info: PlatformInfo, local_path: Path) -> bool:
    """Bundled runtimes, Android and a missing/non-executable local script use the system xdg-open."""
    if info.is_frozen or info.is_android:
        return True
    return not (local_path.is_file() and os.access(local_path, os.X_OK))


def _unix_command(request: OpenRequest, info: PlatformInfo, mount_point: Optional[str]) -> LaunchCommand:
    app, app_args = _app_parts(request)
    if app:
        command = app
    elif use_system_xdg_open(info, LOCAL_XDG_OPEN_PATH):
        command = "xdg-open"
    else:
        command = str(LOCAL_XDG_OPEN_PATH)

    args = list(app_args)
    if request.target:
        args.append(request.target)
    return LaunchCommand(command, args, detached=not request.wait)


COMMAND_BUILDERS = {
    PlatformKind.MACOS: _macos_command,
    PlatformKind.WINDOWS: _windows_command,
    PlatformKind.WSL: _windows_command,
    PlatformKind.UNIX: _unix_command,
}


def build_command(request: OpenRequest, info: PlatformInfo, mount_point: Optional[str] = None) -> LaunchCommand:
    return COMMAND_BUILDERS[info.kind](request, info, mount_point)


# --- spawning -------------------------------------------------------------------

def spawn(cmd: LaunchCommand, wait: bool = False, allow_nonzero_exit_code: bool = False) -> subprocess.Popen:
    kwargs = {}
    if cmd.detached:
        kwargs.update(
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )

    # Windows: a string is handed to CreateProcess as-is
    args = " ".join(cmd.argv()) if cmd.verbatim else cmd.argv()
    p = subprocess.Popen(args, **kwargs)

    if wait:
        rc = p.wait()
        if rc != 0 and not allow_nonzero_exit_code:
            raise ProcessExitError(rc)
    return p


def base_open(request: OpenRequest, platform_info: Optional[PlatformInfo] = None) -> subprocess.Popen:
    info = platform_info or detect_platform()

    if isinstance(request.app, list):
        return try_each(request.app, lambda app: base_open(request.with_app(app), info))

    app = request.app
    if app is not None and isinstance(app.name, list):
        return try_each(
            app.name,
            lambda name: base_open(request.with_app(AppSpec(name, list(app.arguments))), info),
        )

    mount_point = get_wsl_drives_mount_point() if info.kind is PlatformKind.WSL else None
    cmd = build_command(request, info, mount_point)
    log.debug("Launching %s", cmd.argv())
    return spawn(cmd, wait=request.wait, allow_nonzero_exit_code=request.allow_nonzero_exit_code)


def _coerce_app(app: AppArg, arguments: Optional[Sequence[str]]) -> Union[None, AppSpec, List[AppSpec]]:
    args = list(arguments or [])
    if app is None or isinstance(app, AppSpec):
        return app
    if isinstance(app, str):
        return AppSpec(app, args)
    if isinstance(app, list):
        if all(isinstance(a, AppSpec) for a in app):
            return list(app)
        if all(isinstance(a, str) for a in app):
            return AppSpec(list(app), args)
    raise TypeError("Expected `app` as a name, a list of names or AppSpec objects")


def open_target(
    target: str,
    app: AppArg = None,
    app_arguments: Optional[Sequence[str]] = None,
    wait: bool = False,
    background: bool = False,
    new_instance: bool = False,
    allow_nonzero_exit_code: bool = False,
    platform_info: Optional[PlatformInfo] = None,
) -> subprocess.Popen:
    """Open a path or URL, optionally with a specific app.

    Returns the spawned process. With wait=True it returns only after the
    process exits, raising ProcessExitError on a nonzero exit code unless
    allow_nonzero_exit_code is set.
    """
    if not isinstance(target, str):
        raise TypeError("Expected a `target`")
    request = OpenRequest(
        target=target,
        app=_coerce_app(app, app_arguments),
        wait=wait,
        background=background,
        new_instance=new_instance,
        allow_nonzero_exit_code=allow_nonzero_exit_code,
    )
    return base_open(request, platform_info)


def open_app(
    name: Union[str, List[str]],
    arguments: Optional[Sequence[str]] = None,
    wait: bool = False,
    background: bool = False,
    new_instance: bool = False,
    allow_nonzero_exit_code: bool = False,
    platform_info: Optional[PlatformInfo] = None,
) -> subprocess.Popen:
    """Launch an app (or the first working one of a list of names) without a target."""
    if not isinstance(name, (str, list)):
        raise TypeError("Expected a `name`")
    if arguments is not None and not isinstance(arguments, (list, tuple)):
        raise TypeError("Expected `arguments` as a list")
    request = OpenRequest(
        app=AppSpec(name, list(arguments or [])),
        wait=wait,
        background=background,
        new_instance=new_instance,
        allow_nonzero_exit_code=allow_nonzero_exit_code,
    )
    return base_open(request, platform_info)
