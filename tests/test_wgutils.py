import subprocess
import sys

import pytest

from wgtray import wgutils
from wgtray.models import TunnelItem, TunnelItems
from wgtray.wgerrors import WireGuardError


class FakeRun:
    def __init__(self, results):
        self.results = results
        self.calls = []

    def __call__(self, args, **kwargs):
        self.calls.append(list(args))
        returncode, output = self.results.get(tuple(args), (0, ""))
        return subprocess.CompletedProcess(args, returncode, stdout=output)


@pytest.fixture
def linux(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")


def install(monkeypatch, results):
    fake = FakeRun(results)
    monkeypatch.setattr(wgutils.subprocess, "run", fake)
    return fake


def test_interface_name_on_linux(linux):
    assert wgutils.get_interface_name("home") == "home"


def test_interface_name_on_darwin(monkeypatch, tmp_path):
    monkeypatch.setattr(sys, "platform", "darwin")
    monkeypatch.setattr(wgutils, "WG_RUNTIME_DIR", str(tmp_path))
    (tmp_path / "home.name").write_text("utun3\n")
    assert wgutils.get_interface_name("home") == "utun3"


def test_interface_name_on_darwin_missing(monkeypatch, tmp_path):
    monkeypatch.setattr(sys, "platform", "darwin")
    monkeypatch.setattr(wgutils, "WG_RUNTIME_DIR", str(tmp_path))
    with pytest.raises(FileNotFoundError):
        wgutils.get_interface_name("home")


def test_active_when_wg_show_prints(linux, monkeypatch):
    fake = install(monkeypatch, {("sudo", "wg", "show", "wg0"): (0, "interface: wg0\n")})
    assert wgutils.is_tunnel_active("wg0") is True
    assert fake.calls == [["sudo", "wg", "show", "wg0"]]


def test_inactive_when_wg_show_silent(linux, monkeypatch):
    install(monkeypatch, {("sudo", "wg", "show", "wg0"): (0, "")})
    assert wgutils.is_tunnel_active("wg0") is False


def test_inactive_when_wg_show_fails(linux, monkeypatch):
    install(
        monkeypatch,
        {
            ("sudo", "wg", "show", "wg0"): (
                1,
                "Unable to access interface: No such file or directory",
            )
        },
    )
    assert wgutils.is_tunnel_active("wg0") is False


def test_inactive_when_darwin_name_file_missing(monkeypatch, tmp_path):
    monkeypatch.setattr(sys, "platform", "darwin")
    monkeypatch.setattr(wgutils, "WG_RUNTIME_DIR", str(tmp_path))
    fake = install(monkeypatch, {})
    assert wgutils.is_tunnel_active("home") is False
    assert fake.calls == []


def test_activate_runs_wg_quick_up(monkeypatch):
    fake = install(monkeypatch, {})
    result = wgutils.activate_tunnel("home")
    assert result is None
    assert fake.calls == [["sudo", "wg-quick", "up", "home"]]


def test_activate_failure_raises(monkeypatch):
    install(
        monkeypatch,
        {("sudo", "wg-quick", "up", "home"): (1, "`wg0' already exists as `utun3'")},
    )
    with pytest.raises(WireGuardError, match="tunnel already active"):
        wgutils.activate_tunnel("home")


def test_deactivate_runs_wg_quick_down(monkeypatch):
    fake = install(monkeypatch, {})
    result = wgutils.deactivate_tunnel("home")
    assert result is None
    assert fake.calls == [["sudo", "wg-quick", "down", "home"]]


def test_deactivate_failure_raises(monkeypatch):
    install(
        monkeypatch,
        {("sudo", "wg-quick", "down", "home"): (1, "`home' is not a WireGueard interface")},
    )
    with pytest.raises(WireGuardError, match="tunnel is not up"):
        wgutils.deactivate_tunnel("home")


def test_missing_command_is_failure(monkeypatch):
    def missing(args, **kwargs):
        raise FileNotFoundError(args[0])

    monkeypatch.setattr(wgutils.subprocess, "run", missing)
    with pytest.raises(WireGuardError, match="unknown error"):
        wgutils.activate_tunnel("home")


def test_refresh_tunnels_updates_flags(linux, monkeypatch):
    install(
        monkeypatch,
        {
            ("sudo", "wg", "show", "a"): (0, "interface: a\n"),
            ("sudo", "wg", "show", "b"): (0, ""),
        },
    )
    items = TunnelItems([TunnelItem("a", False), TunnelItem("b", True)])
    wgutils.refresh_tunnels(items)
    assert items.active_names() == ["a"]
    assert items.inactive_names() == ["b"]