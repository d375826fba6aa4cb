"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdindex.cli.commands import batch_cmd, check_cmd, convert_cmd


app = typer.Typer(name="mdindex", no_args_is_help=True, help="Frontmatter markdown/MDX to JSON index records")

app.command(name="convert")(convert_cmd)
app.command(name="batch")(batch_cmd)
app.command(name="check")(check_cmd)
