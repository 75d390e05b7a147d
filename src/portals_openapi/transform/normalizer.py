"""Field-level normalization: descriptions, parameter locations, schemas."""

from collections.abc import Mapping
from typing import Any

from portals_openapi.parser.base import as_text, is_missing

NOTE_PREFIX = "**Note**: "


def merge_description(description: Any, remarks: Any) -> str:
    """Merge a description and its remarks into one Markdown string.

    Remarks become a ``**Note**:`` paragraph after the description, or the
    whole text when there is no description. Returns "" when both are missing.
    """
    merged = "" if is_missing(description) else as_text(description)

    if not is_missing(remarks):
        note = f"{NOTE_PREFIX}{as_text(remarks)}"
        merged = note if merged == "" else f"{merged}\n\n{note}"

    return merged


def infer_location(location: Any, name: str, endpoint: str) -> str:
    """Resolve a parameter's ``in`` value, guessing it when not declared."""
    if not is_missing(location):
        return as_text(location)
    if f"{{{name}}}" in endpoint:
        return "path"
    return "body"


def reduce_schema(type_descriptor: Any) -> dict[str, Any] | None:
    """Reduce a type descriptor to a minimal schema.

    Only object descriptors that carry ``properties`` are recognised; the
    properties themselves are not expanded. Anything else yields None.
    """
    if not isinstance(type_descriptor, Mapping):
        return None
    if type_descriptor.get("properties") is None:
        return None
    return {"type": "object"}
