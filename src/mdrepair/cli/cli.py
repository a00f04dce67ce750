"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdrepair.cli.commands import export_cmd, render_cmd, repair_cmd


app = typer.Typer(name="mdrepair", no_args_is_help=True, help="Repair pasted report Markdown and export it")

app.command(name="repair")(repair_cmd)
app.command(name="export")(export_cmd)
app.command(name="render")(render_cmd)
