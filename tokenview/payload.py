#===============================================================================
#  TokenView | payload.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Decodes token metadata (a base64 JSON data URI, or an http(s) URL), pulls
#  out its `image` field and writes the decoded image bytes to disk.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import base64
import binascii
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import requests

from .constants import HTTP_TIMEOUT
from .errors import PayloadError

log = logging.getLogger(__name__)


def is_http_url(value: str) -> bool:
    return value.strip().lower().startswith(("http://", "https://"))


def split_data_uri(uri: str) -> Tuple[str, str]:
    """Split `<metadata>,<payload>` into its two parts."""
    if not isinstance(uri, str) or "," not in uri:
        raise PayloadError("Not a data URI: expected '<metadata>,<base64>'.")
    metadata, payload = uri.split(",", 1)
    return metadata, payload


def decode_base64(text: str) -> bytes:
    """Decode base64, tolerating whitespace, missing padding and the URL-safe alphabet."""
    clean = "".join(text.split())
    pad_len = (-len(clean)) % 4
    if pad_len:
        clean += "=" * pad_len
    try:
        # altchars maps - and _ onto + and /, which stay valid as-is
        return base64.b64decode(clean, altchars=b"-_", validate=True)
    except (binascii.Error, ValueError) as e:
        raise PayloadError(f"Invalid base64 payload: {e}") from e


def decode_data_uri(uri: str) -> bytes:
    _, payload = split_data_uri(uri)
    return decode_base64(payload)


def _get(url: str, session: Optional[requests.Session]) -> requests.Response:
    getter = session or requests
    try:
        r = getter.get(url, timeout=HTTP_TIMEOUT)
        r.raise_for_status()
    except requests.RequestException as e:
        raise PayloadError(f"Could not fetch {url}: {e}") from e
    return r


def load_token_metadata(source: str, session: Optional[requests.Session] = None) -> Dict[str, Any]:
    """Return the token metadata JSON object from a data URI or an http(s) URL."""
    if is_http_url(source):
        raw = _get(source.strip(), session).content
    else:
        raw = decode_data_uri(source)

    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as e:
        raise PayloadError(f"Token metadata is not valid UTF-8 JSON: {e}") from e

    if not isinstance(data, dict):
        raise PayloadError("Token metadata must be a JSON object.")
    return data


def extract_image(metadata: Dict[str, Any], session: Optional[requests.Session] = None) -> bytes:
    image = metadata.get("image")
    if not isinstance(image, str) or not image:
        raise PayloadError("Token metadata has no 'image' field.")
    if is_http_url(image):
        return _get(image.strip(), session).content
    return decode_data_uri(image)


def write_image(data: bytes, path: Union[str, Path]) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_bytes(data)
    return p


def extract_to_file(
    source: str,
    output_path: Union[str, Path],
    session: Optional[requests.Session] = None,
) -> Path:
    """Decode the token metadata in `source` and write its image to output_path."""
    metadata = load_token_metadata(source, session)
    image = extract_image(metadata, session)
    out = write_image(image, output_path)
    log.info("Wrote %s (%d bytes)%s", out, len(image), f" for '{metadata['name']}'" if metadata.get("name") else "")
    return out
