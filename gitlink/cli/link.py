"""Link Typer app factory."""

import typer

from gitlink.api.link.cmd_copy import cmd_copy
from gitlink.api.link.cmd_show import cmd_show
from gitlink.cli._handle_stage_result import _handle_stage_result
from gitlink.cli._typer_app import _exit_with_help, _typer_app

SELECTION_HELP = "Zero-based selection LINE[:CHAR][-LINE[:CHAR]]; repeatable, selections are unioned"


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = _typer_app(name="link", help="Build provider permalinks for lines of a file")

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        _exit_with_help(ctx)

    @app.command(name="copy")
    def copy_cmd(
        ctx: typer.Context,
        path: str = typer.Argument(..., help="File to link to"),
        selection: list[str] | None = typer.Option(None, "--selection", "-s", help=SELECTION_HELP),
        repo: str | None = typer.Option(None, "--repo", help="Search for the repository from this directory"),
    ) -> None:
        """Copy the permalink for the selected lines to the clipboard."""
        _handle_stage_result(cmd_copy)(ctx, path=path, selections=selection, repo=repo)

    @app.command(name="show")
    def show_cmd(
        ctx: typer.Context,
        path: str = typer.Argument(..., help="File to link to"),
        selection: list[str] | None = typer.Option(None, "--selection", "-s", help=SELECTION_HELP),
        repo: str | None = typer.Option(None, "--repo", help="Search for the repository from this directory"),
    ) -> None:
        """Print the permalink for the selected lines."""
        _handle_stage_result(cmd_show)(ctx, path=path, selections=selection, repo=repo)

    return app
