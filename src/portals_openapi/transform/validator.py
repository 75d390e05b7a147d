"""Record and parameter validation.

A record is invalid when it is hidden or lacks any of its required strings;
the verdict is cumulative and every problem is logged before the caller
decides to drop it. Parameters are validated independently: a bad parameter
is dropped from its record but never invalidates the record itself.
"""

import logging
from typing import Any

from portals_openapi.parser.base import ChildRecord, Parameter, ParameterRecord, as_text, is_missing
from portals_openapi.transform.normalizer import infer_location, merge_description, reduce_schema

logger = logging.getLogger(__name__)

# attribute name -> source field name
REQUIRED_FIELDS = {
    "path": "path",
    "method": "method",
    "category": "category",
    "short_description": "shortDescription",
}


def validate_record(record: ChildRecord) -> tuple[ChildRecord, bool]:
    """Return a copy of the record with missing required strings set to "" and its invalid verdict."""
    invalid = False
    if record.is_visible is False:
        logger.warning("is not visible")
        invalid = True

    defaults = {}
    for attr, field in REQUIRED_FIELDS.items():
        if is_missing(getattr(record, attr)):
            defaults[attr] = ""
            logger.warning("%s is missing", field)
            invalid = True

    return record.model_copy(update=defaults), invalid


def validate_parameter(raw: Any, endpoint: str, index: int) -> Parameter | None:
    """Build an OpenAPI parameter from a raw entry, or None when it is dropped.

    Entries are dropped when invalid (hidden, unnamed, or without a usable
    schema) and when they resolve to a body parameter, which has no
    parameter-object form.
    """
    logger.info("processing parameter %d...", index)

    if not isinstance(raw, dict):
        logger.warning("parameter is not an object")
        logger.warning("failed to set parameter")
        return None
    param = ParameterRecord.model_validate(raw)

    invalid = False
    if param.is_visible is False:
        logger.warning("is not visible")
        invalid = True

    if is_missing(param.name):
        logger.warning("parameter name is missing")
        invalid = True
        name = ""
    else:
        name = as_text(param.name)

    location = infer_location(param.location, name, endpoint)
    description = merge_description(param.description, param.remarks)

    schema = reduce_schema(param.type_)
    if schema is None:
        logger.warning("type is missing")
        invalid = True

    if invalid:
        logger.warning("failed to set parameter")
        return None
    if location == "body":
        # Body parameters need a requestBody with a content type.
        logger.debug("parameter %s is a body parameter, leaving it out", name)
        return None

    return Parameter(
        name=name,
        location=location,
        description=description or None,
        schema_=schema,
    )
