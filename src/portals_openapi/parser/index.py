"""First pass: index parent groups without building their child records.

The source is a JSON array of parent objects, each with a ``path`` string
and an ``apiMethods`` array. Only the path and the length of that array are
kept; child records are counted from the ijson event stream and discarded.
"""

import logging
from pathlib import Path

import ijson

from portals_openapi.errors import SourceParseError
from portals_openapi.parser.base import ParentContext

logger = logging.getLogger(__name__)

PARENT_PREFIX = "item"
PATH_PREFIX = "item.path"
CHILDREN_PREFIX = "item.apiMethods"
CHILD_PREFIX = "item.apiMethods.item"

# Events that open a new value; closing events never start a child.
VALUE_EVENTS = {"start_map", "start_array", "string", "number", "boolean", "null"}


def extract_parents(source: Path) -> list[ParentContext]:
    """Stream the source once and return one ParentContext per parent group."""
    try:
        with open(source, "rb") as fh:
            parents = _index_events(ijson.parse(fh, use_float=True))
    except OSError as e:
        raise SourceParseError(f"Failed to read {source}: {e}") from e
    except ijson.JSONError as e:
        raise SourceParseError(f"Failed to parse {source}: {e}") from e

    logger.info(
        "indexed %d parents declaring %d records",
        len(parents),
        sum(p.remaining for p in parents),
    )
    return parents


def _index_events(events) -> list[ParentContext]:
    parents: list[ParentContext] = []
    path: str | None = None
    count: int | None = None
    in_children = False

    for prefix, event, value in events:
        if prefix == "":
            if event not in ("start_array", "end_array"):
                raise SourceParseError("Top level of the source must be an array of parent groups")
        elif prefix == PARENT_PREFIX:
            if event == "start_map":
                path, count = None, None
            elif event == "end_map":
                parents.append(_close_parent(len(parents), path, count))
            elif event != "map_key":
                raise SourceParseError(f"Parent {len(parents)} is not an object")
        elif prefix == PATH_PREFIX:
            if event != "string":
                raise SourceParseError(f"Parent {len(parents)} has a non-string path")
            path = value
        elif prefix == CHILDREN_PREFIX:
            if event == "start_array":
                count, in_children = 0, True
            elif event == "end_array":
                in_children = False
            else:
                raise SourceParseError(f"Parent {len(parents)} has a non-array apiMethods")
        elif prefix == CHILD_PREFIX and in_children and event in VALUE_EVENTS:
            # Dotted parent keys can share this prefix outside the array.
            count += 1

    return parents


def _close_parent(index: int, path: str | None, count: int | None) -> ParentContext:
    if path is None:
        raise SourceParseError(f"Parent {index} has no path")
    if count is None:
        raise SourceParseError(f"Parent {index} ({path}) has no apiMethods array")
    return ParentContext(path=path, remaining=count)
