"""The tray menu and the manager that keeps it in step with tunnel state."""

from __future__ import annotations

import functools
import logging
import random
from collections.abc import Callable, Iterator, Sequence

from wgtray.config import AppConfig
from wgtray.models import TunnelGroup, TunnelItem, TunnelItems
from wgtray.wgutils import refresh_tunnels

logger = logging.getLogger(__name__)

SEPARATOR_LINE = "-" * 24

ToggleHandler = Callable[[str, bool], None]
BulkHandler = Callable[[Sequence[str]], None]


class MenuItem:
    """An entry of the tray menu, optionally a checkbox, optionally with children."""

    def __init__(
        self,
        title: str,
        tooltip: str = "",
        checkable: bool = False,
        checked: bool = False,
    ) -> None:
        self.title = title
        self.tooltip = tooltip
        self.checkable = checkable
        self.checked = checked
        self.children: list[MenuItem] = []
        self.handlers: list[Callable[[], None]] = []

    def __repr__(self) -> str:
        return f"MenuItem({self.title!r}, checked={self.checked!r})"

    @property
    def label(self) -> str:
        if not self.checkable:
            return self.title
        mark = "x" if self.checked else " "
        return f"[{mark}] {self.title}"

    def check(self) -> None:
        self.checked = True

    def uncheck(self) -> None:
        self.checked = False

    def click(self) -> None:
        """Run every handler attached to this item."""
        for handler in list(self.handlers):
            handler()

    def add_submenu_item(
        self,
        title: str,
        tooltip: str = "",
        checkable: bool = False,
        checked: bool = False,
    ) -> MenuItem:
        item = MenuItem(title, tooltip, checkable, checked)
        self.children.append(item)
        return item


class Menu:
    """The top level of the tray menu: items and separators in order."""

    def __init__(self) -> None:
        self.entries: list[MenuItem | None] = []

    def add_item(
        self,
        title: str,
        tooltip: str = "",
        checkable: bool = False,
        checked: bool = False,
    ) -> MenuItem:
        item = MenuItem(title, tooltip, checkable, checked)
        self.entries.append(item)
        return item

    def add_separator(self) -> None:
        self.entries.append(None)

    def _walk(self) -> Iterator[tuple[int, MenuItem | None]]:
        def walk_item(item: MenuItem, depth: int) -> Iterator[tuple[int, MenuItem]]:
            yield depth, item
            for child in item.children:
                yield from walk_item(child, depth + 1)

        for entry in self.entries:
            if entry is None:
                yield 0, None
            else:
                yield from walk_item(entry, 0)

    def __iter__(self) -> Iterator[MenuItem]:
        """Every item, depth first, in the order render() numbers them."""
        return (item for _, item in self._walk() if item is not None)

    def render(self) -> str:
        """The menu as numbered text lines, submenus indented."""
        lines = []
        number = 0
        for depth, item in self._walk():
            if item is None:
                lines.append(SEPARATOR_LINE)
                continue
            number += 1
            lines.append(f"{'    ' * depth}{number:>2}. {item.label}")
        return "\n".join(lines)


class TrayManager:
    """Builds the tunnel menu and reacts to clicks on it."""

    def __init__(
        self,
        app_config: AppConfig,
        tunnels: TunnelItems,
        on_tunnel_toggle: ToggleHandler | None = None,
        on_up_all: BulkHandler | None = None,
        on_down_all: BulkHandler | None = None,
        *,
        menu: Menu | None = None,
        refresh: Callable[[TunnelItems], None] = refresh_tunnels,
        rng: random.Random | None = None,
    ) -> None:
        self.app_config = app_config
        self.tunnels = tunnels
        self.on_tunnel_toggle = on_tunnel_toggle
        self.on_up_all = on_up_all
        self.on_down_all = on_down_all
        self.menu = menu if menu is not None else Menu()
        self._refresh = refresh
        self._rng = rng if rng is not None else random.Random()
        self._item_tunnels: dict[MenuItem, TunnelItem] = {}
        self.group_menus: dict[str, MenuItem] = {}
        self.up_all_item: MenuItem | None = None
        self.down_all_item: MenuItem | None = None
        self.refresh_item: MenuItem | None = None
        self.quit_item: MenuItem | None = None

    def _bind_tunnel(self, item: MenuItem, tunnel: TunnelItem) -> None:
        self._item_tunnels[item] = tunnel
        item.handlers.append(functools.partial(self._handle_tunnel_click, item, tunnel))

    def create_tunnel_items(self) -> None:
        """Add a checkbox per known tunnel, then a submenu per group."""
        for name in self.app_config.ungrouped_tunnel_names():
            tunnel = self.tunnels.get_by_name(name)
            if tunnel is None:
                continue
            item = self.menu.add_item(tunnel.name, "", True, tunnel.active)
            self._bind_tunnel(item, tunnel)

        if not self.app_config.has_groups():
            return

        self.menu.add_separator()
        for group in self.app_config.tunnel_groups:
            group_menu = self.menu.add_item(group.name, "")
            self.group_menus[group.name] = group_menu

            for name in group.tunnel_names:
                tunnel = self.tunnels.get_by_name(name)
                if tunnel is None:
                    continue
                item = group_menu.add_submenu_item(tunnel.name, "", True, tunnel.active)
                self._bind_tunnel(item, tunnel)

            up_text = "Up random in group" if group.pick_randomly else "Up all in group"
            self.menu.add_separator()
            up_item = group_menu.add_submenu_item(up_text, "")
            down_item = group_menu.add_submenu_item("Down all in group", "")
            up_item.handlers.append(functools.partial(self._handle_group_up, group))
            down_item.handlers.append(functools.partial(self._handle_group_down, group))

    def _handle_tunnel_click(self, item: MenuItem, tunnel: TunnelItem) -> None:
        tunnel.toggle_active()
        self._update_item(item, tunnel.active)
        if self.on_tunnel_toggle is not None:
            self.on_tunnel_toggle(tunnel.name, tunnel.active)
            self.refresh_tunnel_items()

    def _handle_group_up(self, group: TunnelGroup) -> None:
        self.refresh_tunnel_items()
        if group.pick_randomly:
            if self.tunnels.active_names_in_group(group):
                logger.warning(
                    "At least one tunnel in the group is already active; "
                    "skipping random selection: group=%s",
                    group.name,
                )
                return
            selected = self._rng.choice(group.tunnel_names)
            logger.info(
                "Randomly selected tunnel to activate: group=%s tunnel=%s",
                group.name,
                selected,
            )
            if self.on_tunnel_toggle is not None:
                self.on_tunnel_toggle(selected, True)
                self.refresh_tunnel_items()
            return
        if self.on_up_all is not None:
            self.on_up_all(list(group.tunnel_names))
        self.refresh_tunnel_items()

    def _handle_group_down(self, group: TunnelGroup) -> None:
        self.refresh_tunnel_items()
        if self.on_down_all is not None:
            self.on_down_all(self.tunnels.active_names_in_group(group))
        self.refresh_tunnel_items()

    @staticmethod
    def _update_item(item: MenuItem, active: bool) -> None:
        if active:
            item.check()
        else:
            item.uncheck()

    def refresh_tunnel_items(self) -> None:
        """Reload the live tunnel state and update every checkbox."""
        self._refresh(self.tunnels)
        for item, tunnel in self._item_tunnels.items():
            self._update_item(item, tunnel.active)

    def _handle_up_all(self) -> None:
        self.refresh_tunnel_items()
        if self.on_up_all is not None:
            self.on_up_all(self.tunnels.inactive_names())
        self.refresh_tunnel_items()

    def _handle_down_all(self) -> None:
        self.refresh_tunnel_items()
        if self.on_down_all is not None:
            self.on_down_all(self.tunnels.active_names())
        self.refresh_tunnel_items()

    def create_control_items(self) -> None:
        """Add the global up/down, refresh and quit entries."""
        self.menu.add_separator()
        self.up_all_item = self.menu.add_item("Up all interfaces", "")
        self.down_all_item = self.menu.add_item("Down all interfaces", "")
        self.menu.add_separator()
        self.refresh_item = self.menu.add_item("Refresh", "Refresh tunnel states")
        self.quit_item = self.menu.add_item("Quit", "Quit wg-tray-go")

        self.up_all_item.handlers.append(self._handle_up_all)
        self.down_all_item.handlers.append(self._handle_down_all)