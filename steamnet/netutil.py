"""Network address and HTTP form helpers."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Tuple, Union
from urllib.parse import urlencode

import requests

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


@dataclass(frozen=True)
class PortAddr:
    """An IP address with a port, usable for both TCP and UDP."""

    ip: IPAddress
    port: int

    def to_tcp_addr(self) -> Tuple[str, int]:
        """Return a socket address for TCP."""
        return str(self.ip), self.port

    def to_udp_addr(self) -> Tuple[str, int]:
        """Return a socket address for UDP."""
        return str(self.ip), self.port

    def __str__(self) -> str:
        return f"{self.ip}:{self.port}"


def parse_port_addr(addr: str) -> Optional[PortAddr]:
    """Parse ``"ip:port"``; returns None if the string is not valid."""
    parts = addr.split(":")
    if len(parts) != 2:
        return None
    host, port_text = parts
    try:
        ip = ipaddress.ip_address(host)
    except ValueError:
        return None
    if not (port_text.isascii() and port_text.isdigit()):
        return None
    port = int(port_text)
    if port > 0xFFFF:
        return None
    return PortAddr(ip, port)


def new_post_form(
    url: str, data: Mapping[str, Union[str, Iterable[str]]]
) -> requests.PreparedRequest:
    """Build, without sending, a url-encoded form POST request."""
    pairs = []
    for key in sorted(data):
        values = data[key]
        if isinstance(values, str):
            values = [values]
        pairs.extend((key, value) for value in values)
    request = requests.Request(
        "POST",
        url,
        data=urlencode(pairs),
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    return request.prepare()


def to_url_values(mapping: Mapping[str, str]) -> dict:
    """Turn a flat mapping into form values with one entry per key."""
    return {key: [value] for key, value in mapping.items()}