"""CLI entrypoint: Typer app definition and command registration"""

import logging
from typing import Annotated

import typer

from linediff.cli.commands import diff_cmd, export_cmd, stats_cmd


app = typer.Typer(name="linediff", no_args_is_help=True, help="Line-based text comparison with patch/HTML/JSON export")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug details to stderr")] = False,
    ):
    """Compare text files line by line."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


app.command(name="diff")(diff_cmd)
app.command(name="stats")(stats_cmd)
app.command(name="export")(export_cmd)
