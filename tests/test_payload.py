from __future__ import annotations

import base64
import json

import pytest
import requests

from conftest import SVG, b64, token_uri
from tokenview.errors import PayloadError
from tokenview.payload import (
    decode_base64,
    extract_image,
    extract_to_file,
    load_token_metadata,
    split_data_uri,
)


class FakeResponse:
    def __init__(self, content: bytes, status: int = 200):
        self.content = content
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


class FakeSession:
    def __init__(self, pages):
        self.pages = pages
        self.requested = []

    def get(self, url, timeout=None):
        self.requested.append((url, timeout))
        return self.pages.get(url, FakeResponse(b"", 404))


def test_extracts_exact_image_bytes(tmp_path):
    out = extract_to_file(token_uri(SVG, name="Token #1"), tmp_path / "src" / "onchain.svg")
    assert out.read_bytes() == SVG


def test_binary_image_bytes_are_preserved(tmp_path):
    blob = bytes(range(256))
    out = extract_to_file(token_uri(blob), tmp_path / "out.svg")
    assert out.read_bytes() == blob


def test_split_data_uri_keeps_commas_in_payload():
    assert split_data_uri("data:text/plain,a,b") == ("data:text/plain", "a,b")


def test_split_rejects_non_data_uri():
    with pytest.raises(PayloadError):
        split_data_uri("no comma here")


def test_decode_base64_tolerates_padding_whitespace_and_urlsafe():
    raw = b"\xfb\xff\xfe hello"
    std = base64.b64encode(raw).decode()
    assert decode_base64(std.rstrip("=")) == raw
    assert decode_base64(std[:4] + "\n " + std[4:]) == raw
    assert decode_base64(base64.urlsafe_b64encode(raw).decode()) == raw


def test_decode_base64_rejects_garbage():
    with pytest.raises(PayloadError):
        decode_base64("!!!not base64!!!")


def test_metadata_must_be_json_object():
    with pytest.raises(PayloadError):
        load_token_metadata("data:application/json;base64," + b64(b"not json"))
    with pytest.raises(PayloadError):
        load_token_metadata("data:application/json;base64," + b64(b"[1, 2, 3]"))


def test_missing_image_field():
    uri = "data:application/json;base64," + b64(json.dumps({"name": "x"}).encode())
    with pytest.raises(PayloadError, match="image"):
        extract_image(load_token_metadata(uri))


def test_metadata_and_image_over_http(tmp_path):
    doc = {"name": "remote", "image": "https://example.org/1.svg"}
    session = FakeSession({
        "https://example.org/1": FakeResponse(json.dumps(doc).encode()),
        "https://example.org/1.svg": FakeResponse(SVG),
    })
    out = extract_to_file("https://example.org/1", tmp_path / "remote.svg", session=session)
    assert out.read_bytes() == SVG
    assert [u for u, _ in session.requested] == ["https://example.org/1", "https://example.org/1.svg"]
    assert all(t for _, t in session.requested)


def test_http_error_becomes_payload_error():
    with pytest.raises(PayloadError, match="Could not fetch"):
        load_token_metadata("https://example.org/missing", session=FakeSession({}))
