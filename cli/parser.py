"""CLI application and command routing."""

import logging
from pathlib import Path

import typer
from typing_extensions import Annotated

from cli import setup_logging
from cli.commands import config, events, export, serve, set_setting, url
from cli.context import CLIContext, set_context

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="diary-ics",
    help="Publish dated diary notes as a subscribable ICS calendar feed.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show info messages"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show errors"),
    ] = False,
    vault: Annotated[
        Path | None,
        typer.Option(
            "--vault",
            help="Vault directory (overrides DIARY_VAULT_DIR)",
            file_okay=False,
        ),
    ] = None,
) -> None:
    """Publish dated diary notes as a subscribable ICS calendar feed."""
    ctx = CLIContext(verbose=verbose, quiet=quiet, vault_dir=vault)
    setup_logging(verbose=verbose, quiet=quiet, config=ctx.config)
    set_context(ctx)


app.command("serve")(serve)
app.command("export")(export)
app.command("events")(events)
app.command("url")(url)
app.command("config")(config)
app.command("set")(set_setting)
