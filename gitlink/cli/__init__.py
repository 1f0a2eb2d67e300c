"""CLI - main entry point."""

import sys


def _configure_logging() -> None:
    """Configure logging from the config file, falling back to defaults."""
    from gitlink.api.config.GitLinkConfig import GitLinkConfig
    from gitlink.utils.logger import configure_logging

    try:
        log_config = GitLinkConfig.load().log
    except ValueError:
        # Commands report the broken config themselves
        configure_logging()
        return
    configure_logging(level=log_config.level, file_name=log_config.file)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import typer

    from gitlink.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    try:
        _configure_logging()
    except OSError as e:
        typer.echo(f"Warning: logging disabled: {e}", err=True)

    if "--version" in argv or "-v" in argv:
        from gitlink.api.config.cmd_version import cmd_version

        result = cmd_version()
        list(result.progress_callback(result))
        print(f"gitlink {result.output.get('full_version', 'unknown')}")
        return 0 if result.success else 1

    app = _create_app()
    try:
        app(argv, prog_name="gitlink")
        return 0
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
