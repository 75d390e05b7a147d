"""Pretty-print the generated document through an external JSON filter."""

import shutil
import subprocess
from pathlib import Path

from portals_openapi.errors import FormatterError

DEFAULT_FORMATTER = ["jq", "--monochrome-output", "."]


def prettify_json(source: Path, target: Path, command: list[str] | None = None) -> None:
    """Run the formatter on ``source`` and stream its stdout into ``target``.

    An empty command copies ``source`` unchanged. The target is removed when
    the formatter fails so no partial document is left behind.
    """
    if command is None:
        command = DEFAULT_FORMATTER
    if not command:
        shutil.copyfile(source, target)
        return

    try:
        with open(target, "wb") as out:
            result = subprocess.run(
                [*command, str(source)],
                stdout=out,
                stderr=subprocess.PIPE,
            )
    except FileNotFoundError as e:
        target.unlink(missing_ok=True)
        raise FormatterError(f"Formatter {command[0]!r} not found") from e

    if result.returncode != 0:
        target.unlink(missing_ok=True)
        stderr = result.stderr.decode("utf-8", errors="replace").strip()
        raise FormatterError(f"Formatter exited with code {result.returncode}: {stderr}")
