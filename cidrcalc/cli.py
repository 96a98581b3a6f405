from __future__ import annotations

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import List, Optional

import typer

from cidrcalc.parsing import InvalidCidr, parse_cidr
from cidrcalc.report import frame_to_csv, frame_to_json, report_frame, report_lines
from cidrcalc.utils.logging import configure_logging, get_logger

app = typer.Typer(
    help="IPv4 CIDR calculator (network, netmask, host range, broadcast, rDNS).",
    add_completion=False,
)

log = get_logger(__name__)

EXIT_INVALID_CIDR = 1
EXIT_USAGE = 2


class OutputFormat(str, Enum):
    text = "text"
    csv = "csv"
    json = "json"


def _usage(ctx: typer.Context) -> str:
    prog = ctx.find_root().info_name or "cidrcalc"
    return f"usage: {prog} <cidr>"


# dash-prefixed input is a bad CIDR, not an unknown option
@app.command(context_settings={"ignore_unknown_options": True})
def calc(
        ctx: typer.Context,
        args: Optional[List[str]] = typer.Argument(
            None,
            metavar="CIDR",
            help="IPv4 address with prefix length, e.g. 192.168.1.0/24",
            show_default=False,
        ),
        output_format: OutputFormat = typer.Option(
            OutputFormat.text,
            "--format",
            "-f",
            help="Output format: text (fixed-width report) | csv | json",
        ),
        plot: Optional[Path] = typer.Option(
            None,
            "--plot",
            help="Also write a bit-grid figure of the report (HTML, or PNG when the path ends in .png).",
        ),
        verbose: bool = typer.Option(
            False,
            "--verbose",
            "-V",
            help="Debug logging on stderr.",
        ),
):
    """
    Print the network facts for one IPv4 CIDR.

    Example:

        cidrcalc 192.168.1.0/24
        cidrcalc 10.0.0.0/8 --format json
        cidrcalc 172.16.5.9/20 --plot bits.html
    """
    configure_logging(logging.DEBUG if verbose else logging.WARNING)

    args = args or []
    if len(args) != 1:
        log.debug("Expected exactly one CIDR argument, got %d", len(args))
        typer.echo(_usage(ctx))
        raise typer.Exit(code=EXIT_USAGE)

    # 1) parse
    try:
        cidr = parse_cidr(args[0])
    except InvalidCidr as e:
        typer.echo(f"error: {e}")
        raise typer.Exit(code=EXIT_INVALID_CIDR)

    # 2) report
    if output_format == OutputFormat.text:
        for line in report_lines(cidr):
            typer.echo(line)
    else:
        df = report_frame(cidr)
        if output_format == OutputFormat.csv:
            typer.echo(frame_to_csv(df), nl=False)
        else:
            typer.echo(frame_to_json(df))

    # 3) optional figure
    if plot is not None:
        from cidrcalc.viz.heatmap import build_bits_heatmap
        from cidrcalc.viz.export import save_figure

        fig = build_bits_heatmap(cidr)
        out = save_figure(fig, plot)
        # stdout is reserved for the report
        typer.echo(f"Wrote visualization to {out}", err=True)


def main() -> None:
    """Entry point for console_scripts."""
    try:
        app()
    except KeyboardInterrupt:
        # Graceful Ctrl+C handling
        typer.echo("Interrupted by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
