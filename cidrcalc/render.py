# cidrcalc/render.py

from __future__ import annotations
from typing import Union

from cidrcalc.models import Cidr

AddressLike = Union[Cidr, int]


def _value(addr: AddressLike) -> int:
    return addr.address if isinstance(addr, Cidr) else addr


def _octets(addr: AddressLike) -> tuple[int, int, int, int]:
    if isinstance(addr, Cidr):
        return addr.octets
    return Cidr(addr).octets


def to_dotted(addr: AddressLike) -> str:
    """Dotted-decimal form, e.g. 192.168.1.0."""
    return ".".join(str(o) for o in _octets(addr))


def to_binary(addr: AddressLike) -> str:
    """Dotted-binary form, eight digits per octet."""
    return ".".join(f"{o:08b}" for o in _octets(addr))


def to_hex(addr: AddressLike) -> str:
    return f"{_value(addr):08x}"


def to_cidr_notation(cidr: Cidr) -> str:
    return f"{to_dotted(cidr)}/{cidr.prefix_len}"


def to_ip_subnet(cidr: Cidr) -> str:
    return f"{to_dotted(cidr)}/{to_dotted(cidr.netmask)}"


def reverse_dns(addr: AddressLike) -> str:
    """
    Reverse lookup name: octets in reverse order under in-addr.arpa.

    Examples
    --------
        reverse_dns(parse_cidr("192.168.1.0/24")) == "0.1.168.192.in-addr.arpa"
    """
    a, b, c, d = _octets(addr)
    return f"{d}.{c}.{b}.{a}.in-addr.arpa"
