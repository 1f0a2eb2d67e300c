"""Run one command through its four stages and exit."""

import sys
from collections.abc import Callable
from datetime import datetime

from gitlink.api.StageResult import StageResult
from gitlink.api.validate_output import validate_output
from gitlink.cli.display.Display import Display
from gitlink.constants import DEFAULT_TIMESTAMP_FORMAT


def _report_result(display: Display, result: StageResult) -> None:
    """Stage 3: one line whose style follows success and warnings."""
    if not result.success:
        display.error(result.result)
    elif result.output.get("warnings"):
        display.warning(result.result)
    else:
        display.success(result.result)


def _run_single_execution(
    func: Callable[..., StageResult],
    args: tuple,
    kwargs: dict,
    display: Display,
    display_format: str,
) -> None:
    """Announce, drain progress, report, print the output, then ``sys.exit``.

    Exits 0 on success and 1 on failure. Commands report expected failures
    through their output; an output that fails its schema is a bug and raises.
    """
    result = func(*args, **kwargs)
    display.status(result.announce)

    for fraction, message in result.progress_callback(result):
        timestamp = datetime.now().strftime(DEFAULT_TIMESTAMP_FORMAT)
        display.info(f"[dim]{timestamp}[/dim] Progress: {message} ({fraction:.1%})")

    if not result.result or not result.output:
        raise ValueError(f"{func.__name__} finished without setting result and output")

    try:
        result.output = validate_output(func, result.output)
    except ValueError as e:
        raise ValueError(f"Output structure validation failed: {e}") from e

    _report_result(display, result)
    display.json_output(result.output, format=display_format)

    sys.exit(0 if result.success else 1)
