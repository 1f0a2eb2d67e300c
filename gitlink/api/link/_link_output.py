"""Build schema-conformant output for the link commands."""

from pydantic import BaseModel

from .ResolvedLink import ResolvedLink


def _link_output(
    output_cls: type[BaseModel],
    resolved: ResolvedLink | None,
    errors: list[str],
    warnings: list[str],
) -> dict:
    """Fill a Link*Output from a resolved link, or with empty values on failure."""
    if resolved is None:
        return output_cls(
            errors=errors,
            warnings=warnings,
            link="",
            remote_url="",
            provider="",
            owner="",
            project="",
            commit="",
            path="",
            start_line=0,
            end_line=0,
            dirty=False,
        ).model_dump(mode="python")

    request = resolved.request
    return output_cls(
        errors=errors,
        warnings=warnings,
        link=resolved.link,
        remote_url=request.remote_url,
        provider=resolved.remote.provider.value,
        owner=resolved.remote.owner,
        project=resolved.remote.project,
        commit=request.commit,
        path=request.path,
        start_line=request.range.start,
        end_line=request.range.end,
        dirty=resolved.dirty,
    ).model_dump(mode="python")
