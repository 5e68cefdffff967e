import pytest

from wgtray.wgerrors import WireGuardError, parse_wg_error, parse_wg_quick_error


@pytest.mark.parametrize(
    "output, message",
    [
        (
            "Unable to access interface: No such file or directory",
            "interface not found",
        ),
        ("wg: Permission denied", "permission denied"),
        ("something odd", "unknown error: something odd"),
    ],
)
def test_parse_wg_error(output, message):
    error = parse_wg_error(output)
    assert isinstance(error, WireGuardError)
    assert str(error) == message


@pytest.mark.parametrize(
    "output, message",
    [
        ("wg-quick: `wg0' is not a WireGueard interface", "tunnel is not up"),
        ("wg-quick: `/etc/wireguard/x.conf' does not exist", "tunnel configuration not found"),
        ("wg-quick: `wg0' already exists as `utun3'", "tunnel already active"),
        ("Permission denied", "permission denied"),
        ("boom", "unknown error: boom"),
    ],
)
def test_parse_wg_quick_error(output, message):
    assert str(parse_wg_quick_error(output)) == message


def test_wg_quick_checks_in_order():
    output = "x does not exist; Permission denied"
    assert str(parse_wg_quick_error(output)) == "tunnel configuration not found"


def test_error_can_be_raised():
    error = parse_wg_error("Permission denied")
    with pytest.raises(WireGuardError) as excinfo:
        raise error
    assert excinfo.value is error
    assert str(excinfo.value) == "permission denied"