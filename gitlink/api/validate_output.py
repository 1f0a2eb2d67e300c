"""Check a command's output against its registered schema."""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from ._output_schemas import get_output_schema


def _command_key(func: Callable) -> tuple[str, str] | None:
    """``gitlink.api.<domain>.cmd_<name>`` -> ``(domain, name)``, else None."""
    module_parts = func.__module__.split(".")
    if module_parts[:2] != ["gitlink", "api"] or len(module_parts) < 3:
        return None
    if not func.__name__.startswith("cmd_"):
        return None
    return module_parts[2], func.__name__.removeprefix("cmd_")


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Validate ``output`` produced by ``func`` and return it with defaults filled in.

    Functions outside ``gitlink.api`` and commands without a registered schema
    pass through unchanged.

    Raises:
        ValueError: If the output does not match the schema
    """
    key = _command_key(func)
    if key is None:
        return output

    schema_class = get_output_schema(*key)
    if schema_class is None:
        return output

    domain, command_name = key
    try:
        return schema_class(**output).model_dump(mode="python")
    except ValidationError as e:
        raise ValueError(f"Output validation failed for {domain}.{command_name}: {e}\nGot output: {output}") from e
