"""Config Typer app factory."""

import typer

from gitlink.api.config.cmd_show import cmd_show
from gitlink.api.config.cmd_version import cmd_version
from gitlink.cli._handle_stage_result import _handle_stage_result
from gitlink.cli._typer_app import _exit_with_help, _typer_app


def config() -> typer.Typer:
    """Build the ``config`` group: show settings and version."""
    app = _typer_app(name="config", help="Inspect gitlink configuration")

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        _exit_with_help(ctx)

    @app.command(name="show")
    def show_cmd(
        ctx: typer.Context,
        section: str = typer.Argument("", help="log, clipboard or git; omit to list sections"),
    ) -> None:
        """Show one configuration section, or list them."""
        _handle_stage_result(cmd_show)(ctx, section)

    @app.command(name="version")
    def version_cmd(ctx: typer.Context) -> None:
        """Show the installed gitlink version."""
        _handle_stage_result(cmd_version)(ctx)

    return app
