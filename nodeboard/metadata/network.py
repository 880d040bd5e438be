"""Network identity collection (MAC and IPv4 address)."""

import ipaddress
import logging
import socket
from collections.abc import Callable

import psutil

from ..core.errors import IdentityErrorKind, IdentityNotFoundError, NetworkQueryError

logger = logging.getLogger(__name__)

IP_FAMILIES = (socket.AF_INET, socket.AF_INET6)


def _is_loopback_ip(address: str) -> bool:
    """Check whether an IP address string is a loopback address."""
    # IPv6 link-local addresses carry a zone suffix (fe80::1%eth0)
    try:
        return ipaddress.ip_address(address.split("%", 1)[0]).is_loopback
    except ValueError:
        return False


def _query(what: str, query: Callable[[], dict]) -> dict:
    """Run a psutil enumeration call.

    Args:
        what: Human-readable name of the queried list, for messages
        query: psutil function to call (net_if_addrs, net_if_stats)

    Raises:
        NetworkQueryError: If the OS query fails
    """
    try:
        return query()
    except (OSError, psutil.Error) as e:
        logger.debug("Enumerating %s failed: %s", what, e)
        raise NetworkQueryError(f"Failed getting system's {what}: {e}") from e


def _is_loopback_interface(stats, addrs: list) -> bool:
    """Tell whether an interface is a loopback interface.

    Uses the interface flags where the platform reports them, otherwise
    falls back to whether every IP address it holds is a loopback address.
    """
    flags = getattr(stats, "flags", "") or ""
    if "loopback" in flags.split(","):
        return True

    ips = [a.address for a in addrs if a.family in IP_FAMILIES]
    return bool(ips) and all(_is_loopback_ip(ip) for ip in ips)


def get_mac_address() -> str:
    """
    Return the hardware address of the first active, non-loopback interface.

    Interfaces are walked in OS order. The first one that is up, is not a
    loopback and holds at least one IP address wins.

    Returns:
        MAC address as lowercase, colon-separated hex (aa:bb:cc:dd:ee:ff)

    Raises:
        NetworkQueryError: If interfaces cannot be enumerated
        IdentityNotFoundError: If no interface qualifies (EMPTY_MAC_ADDRESS)
    """
    interfaces = _query("network interfaces", psutil.net_if_addrs)
    stats_by_name = _query("network interface status", psutil.net_if_stats)

    for name, addrs in interfaces.items():
        stats = stats_by_name.get(name)
        if stats is None or not stats.isup:
            logger.debug("Skipping %s: interface is down", name)
            continue
        if _is_loopback_interface(stats, addrs):
            logger.debug("Skipping %s: loopback interface", name)
            continue

        if not any(a.family in IP_FAMILIES for a in addrs):
            logger.debug("Skipping %s: no addresses assigned", name)
            continue

        hardware = [a.address for a in addrs if a.family == psutil.AF_LINK]
        if not hardware or not hardware[0]:
            logger.debug("Skipping %s: no hardware address", name)
            continue

        mac = hardware[0].lower().replace("-", ":")
        logger.debug("Using MAC address %s from %s", mac, name)
        return mac

    raise IdentityNotFoundError(IdentityErrorKind.EMPTY_MAC_ADDRESS)


def get_ip_address() -> str:
    """
    Return the first non-loopback IPv4 address on the host.

    Addresses are taken from the flat list of every interface's addresses;
    interface state does not matter here, only the address family.

    Returns:
        Dotted-decimal IPv4 address

    Raises:
        NetworkQueryError: If addresses cannot be enumerated
        IdentityNotFoundError: If no address qualifies (EMPTY_IP_ADDRESS)
    """
    interfaces = _query("unicast interface addresses", psutil.net_if_addrs)

    for addrs in interfaces.values():
        for addr in addrs:
            if addr.family != socket.AF_INET:
                continue
            if _is_loopback_ip(addr.address):
                continue
            logger.debug("Using IP address %s", addr.address)
            return addr.address

    raise IdentityNotFoundError(IdentityErrorKind.EMPTY_IP_ADDRESS)
