# cidrcalc/viz/heatmap.py

from __future__ import annotations
from typing import Optional

import plotly.graph_objects as go

from cidrcalc.models import Cidr
from cidrcalc.report import report_frame
from cidrcalc.utils.logging import get_logger

log = get_logger(__name__)

# bit 31 first, so columns read like the dotted-binary text
BIT_INDEXES = list(range(31, -1, -1))

COLORSCALE = [[0.0, "#f0f0f0"], [1.0, "#1f77b4"]]


def build_bits_heatmap(cidr: Cidr, title: Optional[str] = None) -> go.Figure:
    """
    Build a 6x32 heatmap of the bits of the report's address lines.

    Rows follow the report order (Address at the top, Broadcast at the
    bottom); each cell is one bit, MSB on the left, with dotted separators
    drawn between octets.
    """
    df = report_frame(cidr)
    labels = df["label"].tolist()

    z = []
    hover = []
    for label, value in zip(labels, df["value"].tolist()):
        bits = [(int(value) >> i) & 1 for i in BIT_INDEXES]
        z.append(bits)
        hover.append([
            f"{label}<br>bit {i} (octet {4 - i // 8})<br>value {b}"
            for i, b in zip(BIT_INDEXES, bits)
        ])

    fig = go.Figure(
        data=go.Heatmap(
            z=z,
            x=[str(i) for i in BIT_INDEXES],
            y=labels,
            text=hover,
            hoverinfo="text",
            colorscale=COLORSCALE,
            zmin=0,
            zmax=1,
            showscale=False,
            xgap=1,
            ygap=1,
        )
    )

    for boundary in (7.5, 15.5, 23.5):
        fig.add_vline(x=boundary, line_width=2, line_color="black")

    fig.update_layout(
        title=title or f"{df.attrs['cidr']} ({df.attrs['num_hosts']} hosts)",
        xaxis=dict(title="bit", type="category"),
        yaxis=dict(autorange="reversed"),
        width=1100,
        height=360,
        margin=dict(l=90, r=20, t=60, b=50),
    )
    log.debug("Built bit heatmap for %s", df.attrs["cidr"])
    return fig
