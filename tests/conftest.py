"""Pytest configuration and shared fixtures for nodeboard tests."""

import socket
from collections import namedtuple
from types import SimpleNamespace

import psutil
import pytest
import requests

# Shapes of psutil.net_if_addrs() / psutil.net_if_stats() entries
FakeAddr = namedtuple("FakeAddr", ["family", "address", "netmask", "broadcast", "ptp"])
FakeStats = namedtuple("FakeStats", ["isup", "duplex", "speed", "mtu", "flags"])


def link(mac):
    return FakeAddr(psutil.AF_LINK, mac, None, None, None)


def inet(ip):
    return FakeAddr(socket.AF_INET, ip, "255.255.255.0", None, None)


def inet6(ip):
    return FakeAddr(socket.AF_INET6, ip, "ffff:ffff:ffff:ffff::", None, None)


def up(flags="up,broadcast,running,multicast"):
    return FakeStats(True, 2, 1000, 1500, flags)


def down(flags="broadcast,multicast"):
    return FakeStats(False, 0, 0, 1500, flags)


LOOPBACK_ADDRS = [link("00:00:00:00:00:00"), inet("127.0.0.1"), inet6("::1")]
LOOPBACK_STATS = up("up,loopback,running")


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code=200):
        self.status_code = status_code
        self.closed = False

    def close(self):
        self.closed = True


@pytest.fixture
def nic():
    """
    Builders for fake psutil interface data.

    Provides link/inet/inet6 address builders, up/down status builders
    and a canned loopback interface (loopback_addrs, loopback_stats).
    """
    return SimpleNamespace(
        link=link,
        inet=inet,
        inet6=inet6,
        up=up,
        down=down,
        loopback_addrs=LOOPBACK_ADDRS,
        loopback_stats=LOOPBACK_STATS,
    )


@pytest.fixture
def fake_response():
    """Factory for minimal requests.Response stand-ins."""
    return FakeResponse


@pytest.fixture
def fake_interfaces(monkeypatch):
    """
    Replace psutil interface enumeration with canned data.

    Returns a function taking (addrs_by_name, stats_by_name).
    """

    def install(addrs, stats):
        monkeypatch.setattr(psutil, "net_if_addrs", lambda: dict(addrs))
        monkeypatch.setattr(psutil, "net_if_stats", lambda: dict(stats))

    return install


@pytest.fixture
def healthy_host(fake_interfaces):
    """A host with a loopback and one active ethernet interface."""
    fake_interfaces(
        {
            "lo": LOOPBACK_ADDRS,
            "eth0": [
                link("aa:bb:cc:dd:ee:ff"),
                inet("10.0.0.5"),
                inet6("fe80::a8bb:ccff:fedd:eeff%eth0"),
            ],
        },
        {"lo": LOOPBACK_STATS, "eth0": up()},
    )


@pytest.fixture
def post_calls(monkeypatch):
    """
    Record requests.post calls instead of hitting the network.

    Each entry is a dict of (url, data, headers, timeout).
    """
    calls = []

    def fake_post(url, data=None, headers=None, timeout=None, **kwargs):
        calls.append(
            {"url": url, "data": data, "headers": headers, "timeout": timeout}
        )
        return FakeResponse(200)

    monkeypatch.setattr(requests, "post", fake_post)
    return calls
