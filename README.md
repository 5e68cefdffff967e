# wgtray

A small terminal menu for switching WireGuard tunnels on and off. It lists
your tunnels as numbered checkbox entries (`[x]` for a tunnel that is up,
`[ ]` for one that is down) and offers "Up all interfaces", "Down all
interfaces", "Refresh" and "Quit" entries. Tunnels can be gathered into
groups; each group is shown with its tunnels indented beneath it, followed by
"Up all in group" (or "Up random in group") and "Down all in group".

Tunnels are driven through `sudo wg-quick up|down <name>`, and their state is
read with `sudo wg show <interface>`: a tunnel counts as up when that command
succeeds and prints something. On macOS the interface name is read from
`/var/run/wireguard/<name>.name`; elsewhere it is the tunnel name.

## Installation

```
pip install .
```

## Running

```
wgtray
```

The menu is printed with a number before every entry, submenu entries
included. Type a number and press Enter to select that entry:

- a tunnel entry toggles that tunnel, then the state of every tunnel is
  re-read;
- "Up all interfaces" brings up every tunnel that is down, "Down all
  interfaces" takes down every tunnel that is up;
- "Up all in group" brings up every tunnel of the group; "Up random in
  group" brings up one of the group's tunnels picked at random, and does
  nothing (logging a warning) if a tunnel of that group is already up;
- "Down all in group" takes down the group's tunnels that are up;
- "Refresh" re-reads the state of every tunnel;
- "Quit" exits.

Anything that is not an entry number is answered with `Not a menu entry`.
End of input or Ctrl-C also exits. Failures of `wg-quick` are logged and do
not stop the menu.

Log lines go to standard output. Set `LOGLEVEL` to `debug`, `warn`/`warning`
or `error` to change how much is logged; anything else means `info`. If the
configuration cannot be loaded, the error is logged and the command exits
with status 1.

## Configuration

The configuration file is looked up in this order:

1. the path in `WG_TRAY_CONFIG`;
2. `$XDG_CONFIG_HOME/wg-tray-go/config.json`;
3. `~/.config/wg-tray-go/config.json`.

If the file does not exist, the tunnels are taken from the `*.conf` files in
`/etc/wireguard/` (listed with `sudo ls`), with no groups.

An example:

```json
{
  "tunnel_names": ["home", "office"],
  "tunnel_groups": [
    {
      "name": "Exit nodes",
      "pick_randomly": true,
      "tunnel_names": ["exit-a", "exit-b", "exit-c"]
    }
  ]
}
```

Tunnels in `tunnel_names` are shown at the top level; each group gets its
own submenu. A configuration with values of the wrong type is rejected with
`ValueError`.

## Using the library

```python
from wgtray.config import load_app_config

config = load_app_config()
tunnels = config.to_tunnel_items()
print(tunnels.active_names())
```

- `wgtray.config`: `AppConfig`, `load_app_config()`, `load_config_from_file(path)`,
  `config_path()`, `tunnels_from_wg_config()`.
- `wgtray.models`: `TunnelGroup`, `TunnelItem`, `TunnelItems` (a list with
  `get_by_name`, `active_names`, `inactive_names`, `active_names_in_group`,
  `inactive_names_in_group`, `activate_all`, `deactivate_all`).
- `wgtray.wgutils`: `is_tunnel_active`, `activate_tunnel`, `deactivate_tunnel`,
  `refresh_tunnels`, `get_interface_name`.
- `wgtray.wgerrors`: `WireGuardError`, raised by `activate_tunnel` and
  `deactivate_tunnel`.
- `wgtray.tray`: `Menu`, `MenuItem` and `TrayManager`, which builds the menu
  and carries out what a selected entry does.

## What it does not do

There is no graphical system-tray icon or desktop menu: the menu is drawn as
text in the terminal and driven by typed entry numbers. The menu does not
update by itself; tunnel state is re-read only after an action or on
"Refresh".

## Tests

```
pip install ".[test]"
pytest
```