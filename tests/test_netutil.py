import ipaddress
from urllib.parse import parse_qs

import pytest

from steamnet.netutil import PortAddr, new_post_form, parse_port_addr, to_url_values


def test_parse_port_addr():
    addr = parse_port_addr("209.197.29.196:27017")
    assert addr == PortAddr(ipaddress.ip_address("209.197.29.196"), 27017)
    assert str(addr) == "209.197.29.196:27017"


def test_socket_addresses():
    addr = parse_port_addr("209.197.29.196:27017")
    assert addr.to_tcp_addr() == ("209.197.29.196", 27017)
    assert addr.to_udp_addr() == addr.to_tcp_addr()


@pytest.mark.parametrize(
    "text",
    [
        "209.197.29.196",
        "a:b:c",
        "209.197.29.196:70000",
        "host:27017",
        "209.197.29.196:-1",
        "209.197.29.196:+1",
        "209.197.29.196:",
        "::1:80",
    ],
)
def test_parse_port_addr_invalid(text):
    assert parse_port_addr(text) is None


def test_parse_port_addr_max_port():
    addr = parse_port_addr("10.0.0.1:65535")
    assert addr.port == 65535


def test_new_post_form():
    request = new_post_form("https://example.com/form", {"b": "x y", "a": ["1", "2"]})
    assert request.method == "POST"
    assert request.url == "https://example.com/form"
    assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
    assert parse_qs(request.body) == {"a": ["1", "2"], "b": ["x y"]}
    assert request.body.split("&")[0].startswith("a=")


def test_new_post_form_invalid_url():
    with pytest.raises(ValueError):
        new_post_form("not a url", {})


def test_to_url_values():
    assert to_url_values({"k": "v", "n": "m"}) == {"k": ["v"], "n": ["m"]}
    assert to_url_values({}) == {}