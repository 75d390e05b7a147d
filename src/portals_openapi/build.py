"""Build orchestration: two streaming passes, then serialize and format."""

import json
import logging
import tempfile
from pathlib import Path

from pydantic import BaseModel

from portals_openapi.config import BuildConfig
from portals_openapi.output.assembler import PathMapAssembler
from portals_openapi.output.formatter import prettify_json
from portals_openapi.parser.index import extract_parents
from portals_openapi.parser.stream import iter_child_records
from portals_openapi.pipeline.correlator import ChildCorrelator
from portals_openapi.pipeline.queue import ParentQueue
from portals_openapi.transform.transformer import RecordTransformer

logger = logging.getLogger(__name__)


class BuildResult(BaseModel):
    """Outcome of a successful build."""

    target: Path
    parents: int
    accepted: int
    skipped: int
    duplicates: int

    @property
    def total(self) -> int:
        return self.accepted + self.skipped


def build(root: Path, dist: Path, config: BuildConfig | None = None) -> BuildResult:
    """Convert ``root/<source>`` into an OpenAPI document at ``dist/<target>``.

    The parent index must be complete before the first child is correlated,
    so the passes run strictly one after the other. Nothing is written to
    ``dist`` unless both passes succeed.
    """
    config = config or BuildConfig()
    source = root / config.source

    parents = extract_parents(source)
    queue = ParentQueue(parents)

    assembler = PathMapAssembler()
    correlator = ChildCorrelator(queue, RecordTransformer(prefix=config.prefix), assembler)
    correlator.process(iter_child_records(source))

    document = assembler.document(config.title, config.version)
    target = dist / config.target_name

    with tempfile.TemporaryDirectory(prefix="portals-openapi-") as tmpdir:
        serialized = Path(tmpdir) / config.target_name
        serialized.write_text(json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8")
        prettify_json(serialized, target, config.formatter)

    logger.info(
        "wrote %s: %d accepted, %d skipped, %d overwritten",
        target,
        correlator.accepted,
        correlator.skipped,
        assembler.duplicates,
    )
    return BuildResult(
        target=target,
        parents=len(parents),
        accepted=correlator.accepted,
        skipped=correlator.skipped,
        duplicates=assembler.duplicates,
    )
