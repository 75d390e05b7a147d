"""Turn one raw child record into an OpenAPI operation."""

import logging
from typing import Any

from pydantic import ValidationError

from portals_openapi.parser.base import ChildRecord, Operation, OperationObject, ParentContext, as_text
from portals_openapi.transform.normalizer import merge_description
from portals_openapi.transform.validator import validate_parameter, validate_record

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "/api/2.0"


class RecordTransformer:
    """Validates and normalizes child records under their parent's context."""

    def __init__(self, prefix: str = DEFAULT_PREFIX):
        self.prefix = prefix.rstrip("/")

    def transform(self, parent: ParentContext, raw: Any) -> Operation | None:
        """Return the operation for a record, or None when the record is rejected.

        Field values are untyped; scalars are rendered as text where they end
        up in the endpoint, tags or summary. Only shapes that cannot be used
        at all (a non-object record, a non-list ``parameters``, a non-string
        ``method``) are rejected as malformed.
        """
        if not isinstance(raw, dict):
            logger.warning("record is not an object")
            return None
        try:
            record = ChildRecord.model_validate(raw)
        except ValidationError as e:
            logger.warning("record is malformed: %s", summarize_error(e))
            return None

        record, invalid = validate_record(record)
        if not isinstance(record.method, str):
            logger.warning("record is malformed: method is not a string")
            return None

        method = record.method.lower()
        endpoint = f"{self.prefix}/{parent.path}/{as_text(record.path)}"
        operation = OperationObject()

        if record.category != "":
            operation.tags = [f"{parent.path}/{as_text(record.category)}"]
        if record.short_description != "":
            operation.summary = as_text(record.short_description)

        description = merge_description(record.description, record.remarks)
        if description != "":
            operation.description = description
        else:
            logger.warning("failed to set description")
            invalid = True

        parameters = []
        for i, raw_param in enumerate(record.parameters or []):
            param = validate_parameter(raw_param, endpoint, i)
            if param is not None:
                parameters.append(param)
        if parameters:
            operation.parameters = parameters

        if invalid:
            return None
        return Operation(endpoint=endpoint, method=method, operation=operation)


def summarize_error(e: ValidationError) -> str:
    """Describe the first problem of a pydantic validation error in one line."""
    err = e.errors()[0]
    field = ".".join(str(part) for part in err["loc"])
    return f"{field}: {err['msg']}"
