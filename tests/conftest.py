from __future__ import annotations

import base64
import json

import pytest

from tokenview import launcher
from tokenview.platform_info import PlatformInfo

MACOS = PlatformInfo(system="darwin", arch="arm64")
WINDOWS = PlatformInfo(system="win32", arch="x64")
WSL = PlatformInfo(system="linux", arch="x64", is_wsl=True)
LINUX = PlatformInfo(system="linux", arch="x64")
FREEBSD = PlatformInfo(system="freebsd", arch="x64")


class FakeProcess:
    def __init__(self, args, exit_code=0, **kwargs):
        self.args = args
        self.kwargs = kwargs
        self._exit_code = exit_code
        self.returncode = None

    def wait(self, timeout=None):
        self.returncode = self._exit_code
        return self.returncode


class FakePopen:
    """Stands in for subprocess.Popen; records every spawn."""

    def __init__(self):
        self.calls = []
        self.exit_code = 0
        self.missing = set()   # commands that raise FileNotFoundError

    def __call__(self, args, **kwargs):
        command = args if isinstance(args, str) else args[0]
        self.calls.append((args, kwargs))
        if command in self.missing:
            raise FileNotFoundError(2, "No such file or directory", command)
        return FakeProcess(args, exit_code=self.exit_code, **kwargs)

    @property
    def commands(self):
        return [a if isinstance(a, str) else a[0] for a, _ in self.calls]


@pytest.fixture
def fake_popen(monkeypatch):
    fake = FakePopen()
    monkeypatch.setattr(launcher.subprocess, "Popen", fake)
    monkeypatch.setattr(launcher, "get_wsl_drives_mount_point", lambda: "/mnt/")
    return fake


def b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def token_uri(image_bytes: bytes, **extra) -> str:
    doc = {"image": f"data:image/svg+xml;base64,{b64(image_bytes)}", **extra}
    return "data:application/json;base64," + b64(json.dumps(doc).encode("utf-8"))


SVG = b'<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10"><rect width="10" height="10" fill="#0078D7"/></svg>'
