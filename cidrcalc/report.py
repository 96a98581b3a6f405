# cidrcalc/report.py

from __future__ import annotations
import json

import pandas as pd

from cidrcalc.models import Cidr
from cidrcalc.render import to_binary, to_cidr_notation, to_dotted, to_hex, reverse_dns

SEPARATOR = "-" * 63
LABEL_WIDTH = 11
VALUE_WIDTH = 16

REPORT_COLUMNS = ["label", "dotted", "binary", "hex", "value"]


def _rows(cidr: Cidr) -> list[tuple[str, Cidr]]:
    """The address-shaped lines of the report, in print order."""
    return [
        ("Address", cidr),
        ("Netmask", cidr.netmask_value()),
        ("Network", cidr.network()),
        ("HostMin", cidr.host_min()),
        ("HostMax", cidr.host_max()),
        ("Broadcast", cidr.broadcast()),
    ]


def _line(label: str, value: str, tail: str) -> str:
    return f"{label + ':':<{LABEL_WIDTH}}{value:<{VALUE_WIDTH}} {tail}"


def report_lines(cidr: Cidr) -> list[str]:
    """
    Build the fixed-width text report for a parsed CIDR.

    The layout (labels, column widths, separator after Netmask) is what
    scripts parsing the tool's stdout rely on.
    """
    lines = []
    for label, addr in _rows(cidr):
        lines.append(_line(label, to_dotted(addr), to_binary(addr)))
        if label == "Netmask":
            lines.append(SEPARATOR)
    lines.append(_line("NumHosts", str(cidr.num_hosts()), f"rDNS: {reverse_dns(cidr)}"))
    return lines


def report_frame(cidr: Cidr) -> pd.DataFrame:
    """
    Same facts as report_lines(), one row per address line.

    Scalars that are not addresses (host count, rDNS name, the normalized
    CIDR string) are stored in DataFrame.attrs.
    """
    records = [
        {
            "label": label,
            "dotted": to_dotted(addr),
            "binary": to_binary(addr),
            "hex": to_hex(addr),
            "value": addr.address,
        }
        for label, addr in _rows(cidr)
    ]
    df = pd.DataFrame.from_records(records, columns=REPORT_COLUMNS)
    df["value"] = df["value"].astype("int64")
    df.attrs["cidr"] = to_cidr_notation(cidr)
    df.attrs["num_hosts"] = cidr.num_hosts()
    df.attrs["rdns"] = reverse_dns(cidr)
    return df


def frame_to_csv(df: pd.DataFrame) -> str:
    return df.to_csv(index=False)


def frame_to_json(df: pd.DataFrame) -> str:
    """
    JSON document with the scalar facts at the top level and the address
    rows under "rows".
    """
    payload = {
        "cidr": df.attrs.get("cidr"),
        "num_hosts": df.attrs.get("num_hosts"),
        "rdns": df.attrs.get("rdns"),
        "rows": json.loads(df.to_json(orient="records")),
    }
    return json.dumps(payload, indent=2)
