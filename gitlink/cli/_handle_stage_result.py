"""Adapt ``cmd_*`` functions into Typer command bodies."""

import functools
from collections.abc import Callable

import typer

from ._run_single_execution import _run_single_execution
from ._typer_app import DEFAULT_DISPLAY_FORMAT, DISPLAY_FORMATS


def _extract_display_format(ctx: typer.Context) -> str:
    """Find ``--display`` in ``ctx`` or one of its parents.

    A sub-app invoked on its own never sees the root option and gets the
    default format.

    Raises:
        ValueError: If the stored format is not json or yaml
    """
    current = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and "display_format" in obj:
            value = obj["display_format"]
            if value not in DISPLAY_FORMATS:
                raise ValueError(f"Invalid display_format value: {value!r}")
            return value
        current = current.parent
    return DEFAULT_DISPLAY_FORMAT


def _handle_stage_result(func: Callable) -> Callable[..., None]:
    """Wrap ``func`` so calling it with the command's context runs it on the CLI display.

    The wrapper takes the ``typer.Context`` Typer passed to the command,
    followed by ``func``'s own arguments. Messages go to stderr and the output
    dict to stdout.
    """

    @functools.wraps(func)
    def wrapper(ctx: typer.Context, *args, **kwargs) -> None:
        from gitlink.cli.display.display_context import display_context

        display = display_context.get_display("cli")
        _run_single_execution(func, args, kwargs, display, _extract_display_format(ctx))

    return wrapper
