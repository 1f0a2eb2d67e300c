"""Typer app settings shared by every gitlink command group."""

import typer

DISPLAY_FORMATS = ("json", "yaml")
DEFAULT_DISPLAY_FORMAT = "yaml"


def _typer_app(help: str, name: str | None = None) -> typer.Typer:
    """New command group that prints its help when run without a subcommand."""
    return typer.Typer(
        name=name,
        help=help,
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )


def _exit_with_help(ctx: typer.Context) -> None:
    """Print help and stop when no subcommand was given."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()
