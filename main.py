#===============================================================================
#  TokenView  |  tokenURI image viewer
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Test helper for contract tokenURI outputs. Takes the data URI a token
#  contract returns, decodes the JSON metadata inside it, writes the embedded
#  SVG image to ./src/onchain.svg and opens it with the OS default handler.
#
#  Usage
#  -----
#    python main.py "data:application/json;base64,eyJpbWFnZSI6..."
#    python main.py https://example.org/token/1 --app firefox --wait
#    python main.py "data:..." --app eog --arg=--fullscreen   (dash values need "=")
#
#  Copyright & License Notes
#  -------------------------
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#
#  This source code is provided "AS IS", without warranty of any kind, express
#  or implied, including but not limited to the warranties of merchantability,
#  fitness for a particular purpose, and noninfringement.
#
#  Permission Notice (Personal/Internal Use)
#  -----------------------------------------
#  You may use, copy, and modify this software for personal or internal use.
#  Redistribution or public release should include this header and credit the
#  author. If you plan to open-source this project, consider replacing this
#  section with an OSI-approved license (e.g., MIT) for clarity.
#
#  Third-Party Components
#  ----------------------
#  This project uses requests, which is licensed separately by its authors.
#  Ensure compliance with its license terms when distributing this software.
#===============================================================================

from tokenview.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
