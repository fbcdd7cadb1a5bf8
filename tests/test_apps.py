from __future__ import annotations

import pytest

from conftest import FREEBSD, LINUX, MACOS, WINDOWS, WSL
from tokenview import apps as apps_module
from tokenview.apps import Apps, detect_arch_binary, detect_platform_binary
from tokenview.cli import resolve_apps
from tokenview.errors import UnsupportedPlatformError
from tokenview.models import AppSpec
from tokenview.platform_info import PlatformInfo


def test_chrome_per_platform():
    assert Apps(MACOS).chrome == "google chrome"
    assert Apps(WINDOWS).chrome == "chrome"
    assert Apps(LINUX).chrome == ["google-chrome", "google-chrome-stable", "chromium"]


def test_wsl_uses_arch_specific_paths():
    assert Apps(WSL).chrome == [
        "/mnt/c/Program Files/Google/Chrome/Application/chrome.exe",
        "/mnt/c/Program Files (x86)/Google/Chrome/Application/chrome.exe",
    ]
    ia32 = PlatformInfo(system="linux", arch="ia32", is_wsl=True)
    assert Apps(ia32).chrome == "/mnt/c/Program Files (x86)/Google/Chrome/Application/chrome.exe"
    assert Apps(WSL).firefox == "/mnt/c/Program Files/Mozilla Firefox/firefox.exe"


def test_unsupported_platform_raises():
    with pytest.raises(UnsupportedPlatformError, match="freebsd is not supported"):
        Apps(FREEBSD).chrome


def test_unsupported_arch_raises():
    arm_wsl = PlatformInfo(system="linux", arch="arm64", is_wsl=True)
    with pytest.raises(UnsupportedPlatformError, match="arm64 is not supported"):
        Apps(arm_wsl).chrome


def test_unsupported_shortcut_never_spawns(fake_popen):
    with pytest.raises(UnsupportedPlatformError):
        resolve_apps("chrome", [], Apps(FREEBSD))
    assert fake_popen.calls == []


def test_value_is_computed_once(monkeypatch):
    calls = []
    real = apps_module.detect_platform_binary

    def counting(*args, **kwargs):
        calls.append(1)
        return real(*args, **kwargs)

    monkeypatch.setattr(apps_module, "detect_platform_binary", counting)
    a = Apps(MACOS)
    assert a.edge == "microsoft edge"
    assert a.edge == "microsoft edge"
    assert len(calls) == 1


def test_resolve_passes_other_names_through():
    a = Apps(FREEBSD)
    assert a.resolve("eog") == "eog"
    assert Apps(LINUX).resolve("Firefox") == "firefox"


def test_detect_helpers():
    assert detect_arch_binary("x", LINUX) == "x"
    assert detect_arch_binary({"x64": "y"}, LINUX) == "y"
    assert detect_platform_binary({"linux": "z"}, wsl="w", platform_info=LINUX) == "z"
    assert detect_platform_binary({"linux": "z"}, wsl="w", platform_info=WSL) == "w"


def test_module_level_resolve_app(monkeypatch):
    monkeypatch.setattr(apps_module, "apps", Apps(MACOS))
    assert apps_module.resolve_app("chrome") == "google chrome"
    assert apps_module.resolve_app("eog") == "eog"
    assert resolve_apps(["chrome", "eog"], ["-x"]) == [
        AppSpec("google chrome", ["-x"]),
        AppSpec("eog", ["-x"]),
    ]
