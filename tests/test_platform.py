import sys

from mruby_build.directive import Toolchain, select_toolchain
from mruby_build.platform import PlatformDetector


def test_platform_id_from_machine_and_sys_platform(monkeypatch):
    monkeypatch.setattr("platform.machine", lambda: "AMD64")
    monkeypatch.setattr(sys, "platform", "freebsd13")

    platform_id = PlatformDetector().detect_platform_id()

    assert platform_id == "amd64-freebsd13"
    assert select_toolchain(platform_id) is Toolchain.CLANG


def test_platform_id_with_unknown_machine(monkeypatch):
    monkeypatch.setattr("platform.machine", lambda: "")
    monkeypatch.setattr(sys, "platform", "linux")

    assert PlatformDetector().detect_platform_id() == "unknown-linux"


def test_detect_reports_platform_id():
    info = PlatformDetector().detect()

    assert set(info) == {"os", "platform_id", "machine", "python_version"}
    assert info["platform_id"].endswith(sys.platform.lower())
