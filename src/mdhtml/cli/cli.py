"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdhtml.cli.commands import convert_cmd, render_cmd


app = typer.Typer(name="mdhtml", no_args_is_help=True, help="Convert lightweight markdown to minimal HTML")

app.command(name="convert")(convert_cmd)
app.command(name="render")(render_cmd)
