"""Terminal menu and library for switching WireGuard tunnels through wg and wg-quick."""

__version__ = "0.1.0"
__all__ = ["__version__"]