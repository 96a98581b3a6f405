# cidrcalc/models.py
from __future__ import annotations

from dataclasses import dataclass

MASK32 = 0xFFFFFFFF


def prefix_to_netmask(prefix: int) -> int:
    # a shift by 32 clears every bit
    return (MASK32 << (32 - prefix)) & MASK32


@dataclass(frozen=True)
class Cidr:
    address: int        # packed a.b.c.d, octet A in the top byte
    netmask: int = 0    # contiguous ones then zeros

    def __post_init__(self) -> None:
        object.__setattr__(self, "address", self.address & MASK32)
        object.__setattr__(self, "netmask", self.netmask & MASK32)

    @classmethod
    def from_octets(cls, a: int, b: int, c: int, d: int, prefix: int) -> "Cidr":
        """
        Pack four octets and a prefix length into a Cidr.

        No range checks are done here; use parse_cidr() for untrusted input.
        """
        return cls(
            address=a << 24 | b << 16 | c << 8 | d,
            netmask=prefix_to_netmask(prefix),
        )

    @property
    def octets(self) -> tuple[int, int, int, int]:
        return (
            self.address >> 24 & 0xFF,
            self.address >> 16 & 0xFF,
            self.address >> 8 & 0xFF,
            self.address & 0xFF,
        )

    @property
    def prefix_len(self) -> int:
        """
        Number of leading one bits in the netmask.

        Counts trailing zeros from 32 downward, so it is only meaningful for
        a contiguous mask.
        """
        count = 32
        mask = self.netmask
        while count > 0 and mask & 1 == 0:
            mask >>= 1
            count -= 1
        return count

    def network(self) -> Cidr:
        return Cidr(self.address & self.netmask)

    def netmask_value(self) -> Cidr:
        return Cidr(self.netmask)

    def broadcast(self) -> Cidr:
        return Cidr(self.address | (~self.netmask & MASK32))

    def host_min(self) -> Cidr:
        return Cidr((self.network().address + 1) & MASK32)

    def host_max(self) -> Cidr:
        return Cidr((self.broadcast().address - 1) & MASK32)

    def num_hosts(self) -> int:
        """
        Usable host count as an unsigned 32-bit value.

        Wraps like native u32 arithmetic: /31 gives 0, /32 gives 2**32 - 1.
        """
        return (self.host_max().address - self.host_min().address + 1) & MASK32
