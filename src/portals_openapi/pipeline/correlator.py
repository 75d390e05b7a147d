"""Attribute streamed child records to their parents by position.

The first pass declares how many children each parent owns; the second pass
hands over children in the same order. The correlator gives the next
``remaining`` children to the queue's head parent, then moves on. No identity
is shared between the passes, so both must traverse the source identically.
"""

import logging
from collections.abc import Iterable
from typing import Any

from portals_openapi.errors import CorrelationError
from portals_openapi.output.assembler import PathMapAssembler
from portals_openapi.pipeline.queue import ParentQueue
from portals_openapi.transform.transformer import RecordTransformer

logger = logging.getLogger(__name__)


class ChildCorrelator:
    """Drives transformation and assembly for each child record."""

    def __init__(self, queue: ParentQueue, transformer: RecordTransformer, assembler: PathMapAssembler):
        self.queue = queue
        self.transformer = transformer
        self.assembler = assembler
        self.accepted = 0
        self.skipped = 0

    def process(self, records: Iterable[Any]) -> None:
        """Correlate, transform and assemble every record, in order."""
        i = 0
        for raw in records:
            parent = self.queue.head()

            logger.info("processing %d of %s...", i, parent.path)
            result = self.transformer.transform(parent, raw)
            if result is None:
                logger.warning("skipping %d of %s...", i, parent.path)
                self.skipped += 1
            else:
                logger.info("adding %d of %s...", i, parent.path)
                self.assembler.add(result)
                self.accepted += 1

            if self.queue.consume():
                i = 0
            else:
                i += 1

        if len(self.queue) > 0:
            raise CorrelationError(
                f"source ended with {self.queue.pending} declared records unprocessed "
                f"(next parent: {self.queue.head().path})"
            )
