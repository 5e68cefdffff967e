"""Command entry point: a text-mode tray menu for WireGuard tunnels."""

from __future__ import annotations

import argparse
import logging
import os
import subprocess
import sys
from collections.abc import Sequence
from typing import TextIO

from wgtray.config import load_app_config
from wgtray.tray import TrayManager
from wgtray.wgerrors import WireGuardError
from wgtray.wgutils import activate_tunnel, deactivate_tunnel

logger = logging.getLogger(__name__)


def handle_tunnel_toggle(name: str, active: bool) -> None:
    """Bring one tunnel up or down, logging any failure."""
    logger.info("Toggling tunnel: name=%s active=%s", name, active)
    if active:
        status = "enabled"
        try:
            activate_tunnel(name)
        except WireGuardError as exc:
            logger.error("Error activating tunnel: name=%s error=%s", name, exc)
    else:
        status = "disabled"
        try:
            deactivate_tunnel(name)
        except WireGuardError as exc:
            logger.error("Error deactivating tunnel: name=%s error=%s", name, exc)
    logger.info("Tunnel toggled: name=%s status=%s", name, status)


def handle_up_all(tunnels: Sequence[str]) -> None:
    logger.info("Activating all tunnels")
    for name in tunnels:
        try:
            activate_tunnel(name)
        except WireGuardError as exc:
            logger.error("Error activating tunnel: name=%s error=%s", name, exc)


def handle_down_all(tunnels: Sequence[str]) -> None:
    logger.info("Deactivating all tunnels")
    for name in tunnels:
        try:
            deactivate_tunnel(name)
        except WireGuardError as exc:
            logger.error("Error deactivating tunnel: name=%s error=%s", name, exc)


def log_level_from_env() -> int:
    """The logging level named by the LOGLEVEL variable, INFO by default."""
    value = os.environ.get("LOGLEVEL", "").strip().lower()
    if value == "debug":
        return logging.DEBUG
    if value in ("warn", "warning"):
        return logging.WARNING
    if value == "error":
        return logging.ERROR
    return logging.INFO


def _interact(manager: TrayManager, stdin: TextIO, stdout: TextIO) -> None:
    quitting = False

    def on_quit() -> None:
        nonlocal quitting
        quitting = True

    def on_refresh() -> None:
        logger.info("Refresh clicked")
        manager.refresh_tunnel_items()

    manager.quit_item.handlers.append(on_quit)
    manager.refresh_item.handlers.append(on_refresh)
    items = list(manager.menu)

    while not quitting:
        print(manager.menu.render(), file=stdout)
        print("Select an item: ", end="", file=stdout, flush=True)
        line = stdin.readline()
        if not line:
            print(file=stdout)
            return
        choice = line.strip()
        if not choice:
            continue
        try:
            index = int(choice)
        except ValueError:
            index = 0
        if not 1 <= index <= len(items):
            print(f"Not a menu entry: {choice}", file=stdout)
            continue
        items[index - 1].click()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="wg-tray", description="Switch WireGuard tunnels from a menu."
    )
    parser.parse_args(argv)

    logging.basicConfig(
        level=log_level_from_env(),
        stream=sys.stdout,
        format="time=%(asctime)s level=%(levelname)s msg=%(message)s",
        force=True,
    )
    logger.info("Starting wg-tray-go")

    try:
        app_config = load_app_config()
    except (OSError, ValueError, subprocess.CalledProcessError) as exc:
        logger.error("Error loading app config: %s", exc)
        return 1

    tunnels = app_config.to_tunnel_items()
    manager = TrayManager(
        app_config, tunnels, handle_tunnel_toggle, handle_up_all, handle_down_all
    )
    manager.create_tunnel_items()
    manager.create_control_items()

    try:
        _interact(manager, sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        logger.info("Received interrupt signal, quitting...")
    return 0


if __name__ == "__main__":
    sys.exit(main())