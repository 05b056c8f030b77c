"""CLI entrypoint: Typer app definition and command registration"""

import typer

from docstore.cli.commands import main_callback, search_cmd, show_cmd


app = typer.Typer(name="docstore", no_args_is_help=True, help="Query documents loaded into an in-memory store")

app.callback()(main_callback)
app.command(name="search")(search_cmd)
app.command(name="show")(show_cmd)
