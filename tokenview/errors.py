#===============================================================================
#  TokenView | errors.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Exception types raised by the payload extractor and the resource opener.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations


class TokenViewError(RuntimeError):
    """Base class for every error raised by tokenview."""


class PayloadError(TokenViewError, ValueError):
    """The token URI, its JSON document or its image could not be decoded."""


class OpenerError(TokenViewError):
    """The resource opener could not launch the target."""


class UnsupportedPlatformError(OpenerError):
    """A named app shortcut has no binary for this platform or architecture."""


class ProcessExitError(OpenerError):
    def __init__(self, exit_code: int) -> None:
        super().__init__(f"Exited with code {exit_code}")
        self.exit_code = exit_code
