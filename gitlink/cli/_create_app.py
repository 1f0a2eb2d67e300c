"""Create the main Typer CLI app."""

import typer

from gitlink.cli._typer_app import DEFAULT_DISPLAY_FORMAT, DISPLAY_FORMATS, _exit_with_help, _typer_app
from gitlink.cli.config import config
from gitlink.cli.link import link


def _create_app() -> typer.Typer:
    """Build the ``gitlink`` app with its ``link`` and ``config`` groups."""
    app = _typer_app(help="Permalinks to lines of files in GitHub and Bitbucket repositories")

    app.add_typer(link(), name="link")
    app.add_typer(config(), name="config")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option(DEFAULT_DISPLAY_FORMAT, "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in DISPLAY_FORMATS:
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        # Commands read the format back through the context chain
        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        _exit_with_help(ctx)

    return app
