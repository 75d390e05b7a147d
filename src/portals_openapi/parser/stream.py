"""Second pass: stream child records one at a time, in source order."""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import ijson

from portals_openapi.errors import SourceParseError
from portals_openapi.parser.index import CHILD_PREFIX, CHILDREN_PREFIX

CONTAINER_STARTS = {"start_map", "start_array"}
CONTAINER_ENDS = {"end_map", "end_array"}


def iter_child_records(source: Path) -> Iterator[Any]:
    """Yield every entry of every parent's ``apiMethods`` array.

    Entries are yielded as decoded JSON values; nothing about their shape is
    assumed here. Only events inside an ``apiMethods`` array are built, so
    dotted parent keys sharing the item prefix are ignored, as in the index.
    """
    try:
        with open(source, "rb") as fh:
            yield from _build_children(ijson.parse(fh, use_float=True))
    except OSError as e:
        raise SourceParseError(f"Failed to read {source}: {e}") from e
    except ijson.JSONError as e:
        raise SourceParseError(f"Failed to parse {source}: {e}") from e


def _build_children(events) -> Iterator[Any]:
    in_children = False
    builder = None

    for prefix, event, value in events:
        if prefix == CHILDREN_PREFIX:
            in_children = event == "start_array"
            continue
        if not in_children:
            continue

        if builder is None:
            if event not in CONTAINER_STARTS:
                yield value
                continue
            builder = ijson.ObjectBuilder()

        builder.event(event, value)
        if prefix == CHILD_PREFIX and event in CONTAINER_ENDS:
            yield builder.value
            builder = None
