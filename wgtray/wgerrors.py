"""Translation of wg and wg-quick failure output into exceptions."""


class WireGuardError(Exception):
    """A wg or wg-quick command failed."""


def parse_wg_error(output: str) -> WireGuardError:
    """Return the error described by the output of a failed ``wg`` call."""
    if "Unable to access interface: No such file or directory" in output:
        return WireGuardError("interface not found")
    if "Permission denied" in output:
        return WireGuardError("permission denied")
    return WireGuardError(f"unknown error: {output}")


def parse_wg_quick_error(output: str) -> WireGuardError:
    """Return the error described by the output of a failed ``wg-quick`` call."""
    if "is not a WireGueard interface" in output:
        return WireGuardError("tunnel is not up")
    if "does not exist" in output:
        return WireGuardError("tunnel configuration not found")
    if "already exists as" in output:
        return WireGuardError("tunnel already active")
    if "Permission denied" in output:
        return WireGuardError("permission denied")
    return WireGuardError(f"unknown error: {output}")