#===============================================================================
#  TokenView | cli.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Command line entry point. Takes a tokenURI output (data URI or URL), writes
#  the embedded SVG image to ./src/onchain.svg and opens it with the OS
#  default handler (or a chosen app).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .apps import Apps, resolve_app
from .config import load_config
from .constants import APP_TITLE, CONFIG_FILE_NAME
from .errors import OpenerError, PayloadError
from .launcher import open_target
from .logs import setup_logging
from .models import AppSpec
from .payload import extract_to_file
from .platform_info import PlatformInfo

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tokenview",
        description=f"{APP_TITLE}: decode a tokenURI output, save its SVG image and open it.",
    )
    parser.add_argument("source", help="Token metadata as a base64 data URI, or an http(s) URL")
    parser.add_argument("-o", "--output", default=None, help="Where to write the image (default ./src/onchain.svg)")
    parser.add_argument(
        "--app", action="append", default=None,
        help="App to open the image with; repeat to give fallbacks. Shortcuts: chrome, firefox, edge",
    )
    parser.add_argument(
        "--arg", action="append", default=None, dest="app_arguments",
        help="Argument passed to --app; write dash values as --arg=--flag",
    )
    parser.add_argument("--wait", action="store_true", help="Wait for the opened app to exit")
    parser.add_argument("--background", action="store_true", help="Do not bring the app to the foreground (macOS)")
    parser.add_argument("--new-instance", action="store_true", help="Open a new instance of the app (macOS)")
    parser.add_argument("--allow-nonzero-exit", action="store_true", help="With --wait, accept a nonzero exit code")
    parser.add_argument("--no-open", action="store_true", help="Only write the image")
    parser.add_argument("--config", default=CONFIG_FILE_NAME, help="Settings file (default ./tokenview.json)")
    parser.add_argument("--log-dir", default=None, help="Folder for tokenview.log")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def resolve_apps(
    names: Union[None, str, List[str]],
    arguments: Sequence[str],
    shortcuts: Optional[Apps] = None,
) -> Union[None, AppSpec, List[AppSpec]]:
    """Turn app names/shortcuts into AppSpecs; several names become an ordered fallback list."""
    if not names:
        return None
    if isinstance(names, str):
        names = [names]
    resolve = shortcuts.resolve if shortcuts is not None else resolve_app
    specs = [AppSpec(resolve(n), list(arguments)) for n in names]
    return specs[0] if len(specs) == 1 else specs


def main(argv: Optional[Sequence[str]] = None, platform_info: Optional[PlatformInfo] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = load_config(Path(args.config))
    setup_logging(args.log_dir or cfg.get("log_dir"), args.verbose)

    log.info(args.source)
    output = args.output or cfg["output_path"]
    try:
        out = extract_to_file(args.source, output)
    except PayloadError as e:
        log.error("Could not decode token URI: %s", e)
        return 1
    except OSError as e:
        log.error("Could not write %s: %s", output, e)
        return 1

    if args.no_open or not cfg.get("open", True):
        return 0

    shortcuts = None if platform_info is None else Apps(platform_info)
    try:
        app = resolve_apps(
            args.app or cfg.get("app"),
            args.app_arguments or cfg.get("app_arguments") or [],
            shortcuts,
        )
        open_target(
            str(out),
            app=app,
            wait=args.wait or bool(cfg.get("wait")),
            background=args.background or bool(cfg.get("background")),
            new_instance=args.new_instance or bool(cfg.get("new_instance")),
            allow_nonzero_exit_code=args.allow_nonzero_exit or bool(cfg.get("allow_nonzero_exit_code")),
            platform_info=platform_info,
        )
    except (OpenerError, OSError) as e:
        log.error("Could not open %s: %s", out, e)
        return 1

    return 0
