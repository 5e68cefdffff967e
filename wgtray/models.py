"""Tunnel state and tunnel group definitions."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any


def _string_list(value: Any, key: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"{key!r} must be a list of strings")
    return list(value)


@dataclass
class TunnelGroup:
    """A named set of tunnels shown together in the menu."""

    name: str
    tunnel_names: list[str] = field(default_factory=list)
    pick_randomly: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TunnelGroup:
        """Build a group from its JSON object form."""
        if not isinstance(data, Mapping):
            raise ValueError("tunnel group must be an object")
        name = data.get("name") or ""
        if not isinstance(name, str):
            raise ValueError("'name' must be a string")
        pick_randomly = data.get("pick_randomly") or False
        if not isinstance(pick_randomly, bool):
            raise ValueError("'pick_randomly' must be a boolean")
        return cls(
            name=name,
            tunnel_names=_string_list(data.get("tunnel_names"), "tunnel_names"),
            pick_randomly=pick_randomly,
        )


@dataclass
class TunnelItem:
    """A tunnel and whether it is currently up."""

    name: str
    active: bool = False

    def toggle_active(self) -> None:
        self.active = not self.active

    def activate(self) -> None:
        self.active = True

    def deactivate(self) -> None:
        self.active = False


class TunnelItems(list):
    """An ordered collection of tunnel items."""

    def __init__(self, items: Iterable[TunnelItem] = ()) -> None:
        super().__init__(items)

    def activate_all(self) -> None:
        for item in self:
            item.active = True

    def deactivate_all(self) -> None:
        for item in self:
            item.active = False

    def get_by_name(self, name: str) -> TunnelItem | None:
        """Return the first item with this name, or None."""
        return next((item for item in self if item.name == name), None)

    def active_names(self) -> list[str]:
        return [item.name for item in self if item.active]

    def inactive_names(self) -> list[str]:
        return [item.name for item in self if not item.active]

    def _names_in_group(self, group: TunnelGroup, active: bool) -> list[str]:
        names = []
        for tunnel_name in group.tunnel_names:
            item = self.get_by_name(tunnel_name)
            if item is not None and item.active == active:
                names.append(item.name)
        return names

    def active_names_in_group(self, group: TunnelGroup) -> list[str]:
        """Names of the group's known tunnels that are up, in group order."""
        return self._names_in_group(group, True)

    def inactive_names_in_group(self, group: TunnelGroup) -> list[str]:
        """Names of the group's known tunnels that are down, in group order."""
        return self._names_in_group(group, False)