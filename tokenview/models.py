#===============================================================================
#  TokenView | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Shared data models used by the resource opener.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Optional, Union


@dataclass(frozen=True)
class AppSpec:
    """An application to launch: one name or an ordered list of candidate names."""
    name: Union[str, List[str]]
    arguments: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class OpenRequest:
    """A single open call. Built per invocation and discarded afterwards."""
    target: Optional[str] = None
    app: Union[None, AppSpec, List[AppSpec]] = None
    wait: bool = False
    background: bool = False
    new_instance: bool = False
    allow_nonzero_exit_code: bool = False

    def with_app(self, app: Optional[AppSpec]) -> "OpenRequest":
        return replace(self, app=app)


@dataclass(frozen=True)
class LaunchCommand:
    """Resolved OS command for an OpenRequest."""
    command: str
    arguments: List[str] = field(default_factory=list)
    detached: bool = False   # own session, stdio to devnull
    verbatim: bool = False   # pass as one command line (native Windows)

    def argv(self) -> List[str]:
        return [self.command, *self.arguments]
