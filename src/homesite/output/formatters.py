"""Human/JSON output helpers.

The CLI renders ServiceResult for humans (plain text, rendered HTML on
stdout) or machines (--json). The formatter layer adapts ServiceResult
to the requested output mode.
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from homesite.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """How a result should be printed."""

    json_output: bool = False
    quiet: bool = False


def _format_data_human(data: dict[str, Any]) -> str:
    """Format result data as indented key-value pairs."""
    lines: list[str] = []
    for key, value in data.items():
        if isinstance(value, (dict, list)):
            lines.append(f"  {key}: {_json.dumps(value, separators=(',', ':'))}")
        else:
            lines.append(f"  {key}: {value}")
    return "\n".join(lines)


def _format_item(item: dict[str, Any]) -> str:
    """One listing row: date, slug, name."""
    return f"  {item.get('created_at', '')}  {item.get('slug', '')}  {item.get('name', '')}"


def format_result(result: ServiceResult, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    Listings print one row per item; single documents print their HTML.
    With ``quiet``, listings print only slugs and documents only their HTML.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)

    if not result.ok:
        error_msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {error_msg}"

    data = result.data
    if "items" in data:
        if settings.quiet:
            return "\n".join(str(item.get("slug", "")) for item in data["items"])
        parts = [f"OK: {result.op} ({data.get('count', len(data['items']))})"]
        parts.extend(_format_item(item) for item in data["items"])
        return "\n".join(parts)

    if "html" in data:
        if settings.quiet:
            return str(data["html"])
        header = {key: value for key, value in data.items() if key != "html"}
        return "\n".join([f"OK: {result.op}", _format_data_human(header), "", data["html"]])

    if settings.quiet:
        return ""
    parts = [f"OK: {result.op}"]
    if data:
        parts.append(_format_data_human(data))
    return "\n".join(parts)
