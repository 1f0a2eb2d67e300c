"""Show configuration command.

CLI: gitlink config show [SECTION]
"""

from collections.abc import Iterator
from typing import Any

from .._output_schemas.config import ConfigShowOutput
from ..StageResult import StageResult
from .get_config_path import get_config_path
from .GitLinkConfig import GitLinkConfig


def _output(section: str, content: dict[str, Any], errors: list[str], warnings: list[str]) -> dict:
    return ConfigShowOutput(
        errors=errors,
        warnings=warnings,
        section=section,
        content=content,
        config_path=str(get_config_path()),
    ).model_dump(mode="python")


def cmd_show(section: str = "") -> StageResult:
    """Show one configuration section, or list the section names.

    Values come from config.json merged over the defaults. A missing file is
    not an error but adds a warning.

    Args:
        section: "log", "clipboard" or "git"; empty lists the sections.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        try:
            config = GitLinkConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = "Failed to load configuration"
            result_obj.output = _output(section, {}, [str(e)], [])
            result_obj.success = False
            return

        yield (0.6, "Reading sections...")
        sections = config.to_dict()
        warnings = [] if get_config_path().exists() else ["No configuration file found; showing defaults"]

        yield (1.0, "Complete")
        if not section:
            result_obj.result = f"Found {len(sections)} section(s)"
            result_obj.output = _output("", {"sections": list(sections)}, [], warnings)
            result_obj.success = True
        elif section not in sections:
            result_obj.result = f"Section '{section}' not found"
            result_obj.output = _output(section, {}, [f"Unknown section: {section}"], warnings)
            result_obj.success = False
        else:
            result_obj.result = f"Retrieved configuration for '{section}'"
            result_obj.output = _output(section, sections[section], [], warnings)
            result_obj.success = True

    announce = "Listing configuration sections..." if not section else f"Showing configuration for section '{section}'..."
    return StageResult(announce=announce, progress_callback=do_work)
