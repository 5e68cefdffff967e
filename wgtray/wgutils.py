"""Querying and switching WireGuard tunnels through wg and wg-quick."""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from collections.abc import Iterable

from wgtray.models import TunnelItem
from wgtray.wgerrors import parse_wg_error, parse_wg_quick_error

logger = logging.getLogger(__name__)

WG_RUNTIME_DIR = "/var/run/wireguard/"


def _run(args: list[str]) -> tuple[bool, str]:
    """Run a command, returning success and its combined output."""
    try:
        result = subprocess.run(
            args,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            check=False,
        )
    except OSError as exc:
        logger.debug("could not start %s: %s", args[0], exc)
        return False, ""
    return result.returncode == 0, result.stdout or ""


def get_interface_name(tunnel_name: str) -> str:
    """Return the network interface that backs a tunnel.

    On macOS wg-quick records it in the runtime directory; elsewhere the
    interface carries the tunnel's name. Raises OSError when unknown.
    """
    if sys.platform != "darwin":
        return tunnel_name
    path = os.path.join(WG_RUNTIME_DIR, tunnel_name + ".name")
    try:
        with open(path, encoding="utf-8") as handle:
            return handle.read().strip()
    except FileNotFoundError:
        raise
    except OSError as exc:
        logger.error("Error reading interface name file: %s", exc)
        raise


def is_tunnel_active(tunnel_name: str) -> bool:
    try:
        interface = get_interface_name(tunnel_name)
    except OSError:
        return False

    ok, output = _run(["sudo", "wg", "show", interface])
    logger.debug("wg show output: %s", output)
    if not ok:
        logger.error(
            "Error checking tunnel status: interface=%s error=%s",
            interface,
            parse_wg_error(output),
        )
        return False
    return len(output) > 0


def activate_tunnel(tunnel_name: str) -> None:
    """Bring a tunnel up; raises WireGuardError on failure."""
    ok, output = _run(["sudo", "wg-quick", "up", tunnel_name])
    logger.debug("wg-quick up output: %s", output)
    if not ok:
        raise parse_wg_quick_error(output)


def deactivate_tunnel(tunnel_name: str) -> None:
    """Take a tunnel down; raises WireGuardError on failure."""
    ok, output = _run(["sudo", "wg-quick", "down", tunnel_name])
    logger.debug("wg-quick down output: %s", output)
    if not ok:
        raise parse_wg_quick_error(output)


def refresh_tunnels(tunnels: Iterable[TunnelItem]) -> None:
    """Update each item's active flag from the live system state."""
    for tunnel in tunnels:
        tunnel.active = is_tunnel_active(tunnel.name)