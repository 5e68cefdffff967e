"""Loading the tray configuration."""

from __future__ import annotations

import json
import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from wgtray.models import TunnelGroup, TunnelItem, TunnelItems
from wgtray.wgutils import is_tunnel_active

WG_CONFIG_PATH = "/etc/wireguard/"


@dataclass
class AppConfig:
    """Ungrouped tunnel names and tunnel groups to show in the tray."""

    tunnel_names: list[str] = field(default_factory=list)
    tunnel_groups: list[TunnelGroup] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> AppConfig:
        """Build a configuration from its JSON object form."""
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError("configuration must be a JSON object")
        names = data.get("tunnel_names")
        if names is None:
            names = []
        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            raise ValueError("'tunnel_names' must be a list of strings")
        groups = data.get("tunnel_groups")
        if groups is None:
            groups = []
        if not isinstance(groups, list):
            raise ValueError("'tunnel_groups' must be a list")
        return cls(
            tunnel_names=list(names),
            tunnel_groups=[TunnelGroup.from_dict(g) for g in groups],
        )

    def has_groups(self) -> bool:
        return len(self.tunnel_groups) > 0

    def all_tunnel_names(self) -> list[str]:
        """Every configured tunnel name once, ungrouped ones first."""
        names = list(self.tunnel_names)
        for group in self.tunnel_groups:
            names.extend(group.tunnel_names)
        return list(dict.fromkeys(names))

    def ungrouped_tunnel_names(self) -> list[str]:
        return list(self.tunnel_names)

    def to_tunnel_items(self) -> TunnelItems:
        """Tunnel items for every configured tunnel with their live state."""
        return TunnelItems(
            TunnelItem(name, is_tunnel_active(name)) for name in self.all_tunnel_names()
        )


def config_path() -> Path:
    """Locate the configuration file."""
    override = os.environ.get("WG_TRAY_CONFIG")
    if override:
        return Path(override)
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg, "wg-tray-go", "config.json")
    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        home = None
    if home is not None and str(home):
        return home / ".config" / "wg-tray-go" / "config.json"
    return Path(".config", "wg-tray-go", "config.json")


def tunnels_from_wg_config() -> AppConfig:
    """List the tunnels defined in the system WireGuard directory.

    Raises subprocess.CalledProcessError if the listing fails.
    """
    args = ["sudo", "ls", WG_CONFIG_PATH]
    result = subprocess.run(
        args,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        check=False,
    )
    if result.returncode != 0:
        raise subprocess.CalledProcessError(result.returncode, args, result.stdout)
    names = [
        entry.removesuffix(".conf")
        for entry in (result.stdout or "").strip().split("\n")
        if entry.endswith(".conf")
    ]
    return AppConfig(tunnel_names=names)


def load_config_from_file(path: str | os.PathLike[str]) -> AppConfig:
    """Read a configuration file, falling back to the system tunnels if absent."""
    try:
        raw = Path(path).read_bytes()
    except FileNotFoundError:
        return tunnels_from_wg_config()
    return AppConfig.from_dict(json.loads(raw))


def load_app_config() -> AppConfig:
    return load_config_from_file(config_path())