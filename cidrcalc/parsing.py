# cidrcalc/parsing.py

from __future__ import annotations
import re
from typing import Optional

from cidrcalc.models import Cidr
from cidrcalc.utils.logging import get_logger

log = get_logger(__name__)

# ASCII digits only; \d would also accept other Unicode decimal digits
CIDR_RE = re.compile(
    r"([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})/([0-9]{1,2})"
)

COMPONENTS = ("octet A", "octet B", "octet C", "octet D", "prefix")
LIMITS = (255, 255, 255, 255, 32)


class InvalidCidr(ValueError):
    """
    Base error for input that does not describe an IPv4 CIDR.

    str() is always "invalid cidr"; the details live on the attributes.
    """

    message = "invalid cidr"

    def __init__(self, text: str) -> None:
        super().__init__(self.message)
        self.text = text


class InvalidFormat(InvalidCidr):
    """The text does not match a.b.c.d/n structurally."""


class InvalidRange(InvalidCidr):
    """A component matched the grammar but exceeds its upper bound."""

    def __init__(self, text: str, component: str, value: int, limit: int) -> None:
        super().__init__(text)
        self.component = component
        self.value = value
        self.limit = limit


def parse_cidr(text: str) -> Cidr:
    """
    Parse a strict "a.b.c.d/n" string into a Cidr.

    Parameters
    ----------
    text : str
        Candidate CIDR. Anchored at both ends, no whitespace, 1-3 digits per
        octet and 1-2 digits of prefix; leading zeros are fine.

    Returns
    -------
    Cidr
        Packed address with the netmask built from the prefix.

    Raises
    ------
    InvalidFormat
        The string does not match the grammar.
    InvalidRange
        An octet is above 255 or the prefix above 32. The first offending
        component (A, B, C, D, prefix order) is reported.
    """
    match: Optional[re.Match] = CIDR_RE.fullmatch(text)
    if match is None:
        log.debug("Rejected %r: does not match a.b.c.d/n", text)
        raise InvalidFormat(text)

    values = []
    for name, limit, raw in zip(COMPONENTS, LIMITS, match.groups()):
        n = int(raw)
        if n > limit:
            log.debug("Rejected %r: %s=%d exceeds %d", text, name, n, limit)
            raise InvalidRange(text, name, n, limit)
        values.append(n)

    cidr = Cidr.from_octets(*values)
    log.debug("Parsed %r -> address=%#010x netmask=%#010x", text, cidr.address, cidr.netmask)
    return cidr
