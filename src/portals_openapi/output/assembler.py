"""Assemble accepted operations into the OpenAPI path map and document."""

import logging
from typing import Any

from portals_openapi.parser.base import Operation

logger = logging.getLogger(__name__)

OPENAPI_VERSION = "3.0.1"


class PathMapAssembler:
    """Collects operations as ``endpoint -> method -> operation``.

    Endpoints and methods keep first-seen order. A later operation with the
    same endpoint and method replaces the earlier one.
    """

    def __init__(self):
        self.paths: dict[str, dict[str, dict[str, Any]]] = {}
        self.duplicates = 0

    def add(self, operation: Operation) -> None:
        methods = self.paths.setdefault(operation.endpoint, {})
        if operation.method in methods:
            logger.warning("overwriting %s %s", operation.method, operation.endpoint)
            self.duplicates += 1
        methods[operation.method] = operation.operation.to_dict()

    def document(self, title: str, version: str) -> dict[str, Any]:
        """Wrap the path map in a top-level OpenAPI document."""
        return {
            "openapi": OPENAPI_VERSION,
            "info": {
                "title": title,
                "version": version,
            },
            "paths": self.paths,
        }
