import json

import pandas as pd

from cidrcalc.parsing import parse_cidr
from cidrcalc.report import (
    REPORT_COLUMNS,
    SEPARATOR,
    frame_to_csv,
    frame_to_json,
    report_frame,
    report_lines,
)

EXPECTED_24 = [
    "Address:   192.168.1.0      11000000.10101000.00000001.00000000",
    "Netmask:   255.255.255.0    11111111.11111111.11111111.00000000",
    "---------------------------------------------------------------",
    "Network:   192.168.1.0      11000000.10101000.00000001.00000000",
    "HostMin:   192.168.1.1      11000000.10101000.00000001.00000001",
    "HostMax:   192.168.1.254    11000000.10101000.00000001.11111110",
    "Broadcast: 192.168.1.255    11000000.10101000.00000001.11111111",
    "NumHosts:  254              rDNS: 0.1.168.192.in-addr.arpa",
]


def test_report_lines_slash_24():
    assert report_lines(parse_cidr("192.168.1.0/24")) == EXPECTED_24


def test_separator_width():
    assert SEPARATOR == "-" * 63


def test_report_lines_slash_8():
    lines = report_lines(parse_cidr("10.0.0.0/8"))
    assert lines[1].startswith("Netmask:   255.0.0.0        ")
    assert lines[6].startswith("Broadcast: 10.255.255.255   ")
    assert lines[7] == "NumHosts:  16777214         rDNS: 0.0.0.10.in-addr.arpa"


def test_report_lines_slash_32_shows_wrapped_count():
    lines = report_lines(parse_cidr("8.8.8.8/32"))
    assert lines[3].startswith("Network:   8.8.8.8          ")
    assert lines[4].startswith("HostMin:   8.8.8.9          ")
    assert lines[5].startswith("HostMax:   8.8.8.7          ")
    assert lines[6].startswith("Broadcast: 8.8.8.8          ")
    assert lines[7] == "NumHosts:  4294967295       rDNS: 8.8.8.8.in-addr.arpa"


def test_long_values_are_not_truncated():
    lines = report_lines(parse_cidr("255.255.255.255/0"))
    assert lines[0] == "Address:   255.255.255.255  11111111.11111111.11111111.11111111"


def test_report_frame_rows():
    df = report_frame(parse_cidr("192.168.1.0/24"))
    assert isinstance(df, pd.DataFrame)
    assert list(df.columns) == REPORT_COLUMNS
    assert df["label"].tolist() == [
        "Address", "Netmask", "Network", "HostMin", "HostMax", "Broadcast",
    ]
    assert df["dotted"].tolist() == [
        "192.168.1.0", "255.255.255.0", "192.168.1.0",
        "192.168.1.1", "192.168.1.254", "192.168.1.255",
    ]
    assert df.loc[df["label"] == "Broadcast", "hex"].item() == "c0a801ff"
    assert df.loc[df["label"] == "Netmask", "value"].item() == 0xFFFFFF00


def test_report_frame_attrs():
    df = report_frame(parse_cidr("192.168.1.0/24"))
    assert df.attrs == {
        "cidr": "192.168.1.0/24",
        "num_hosts": 254,
        "rdns": "0.1.168.192.in-addr.arpa",
    }


def test_frame_to_csv():
    text = frame_to_csv(report_frame(parse_cidr("10.0.0.0/8")))
    lines = text.splitlines()
    assert lines[0] == "label,dotted,binary,hex,value"
    assert lines[2] == "Netmask,255.0.0.0,11111111.00000000.00000000.00000000,ff000000,4278190080"
    assert len(lines) == 7


def test_frame_to_json():
    payload = json.loads(frame_to_json(report_frame(parse_cidr("8.8.8.8/32"))))
    assert payload["cidr"] == "8.8.8.8/32"
    assert payload["num_hosts"] == 4294967295
    assert payload["rdns"] == "8.8.8.8.in-addr.arpa"
    assert [row["label"] for row in payload["rows"]][0] == "Address"
    assert payload["rows"][1]["value"] == 0xFFFFFFFF
