import subprocess
from unittest.mock import patch

import pytest

from portals_openapi.errors import FormatterError
from portals_openapi.output.formatter import prettify_json


@pytest.fixture
def serialized(tmp_path):
    path = tmp_path / "in.json"
    path.write_text('{"openapi": "3.0.1"}', encoding="utf-8")
    return path


class TestPrettifyJson:
    @patch("portals_openapi.output.formatter.subprocess.run")
    def test_runs_jq_into_target(self, mock_run, serialized, tmp_path):
        def fake_run(args, stdout, stderr):
            stdout.write(b'{\n  "openapi": "3.0.1"\n}\n')
            return subprocess.CompletedProcess(args, 0, stderr=b"")

        mock_run.side_effect = fake_run
        target = tmp_path / "out.json"

        prettify_json(serialized, target)

        args = mock_run.call_args[0][0]
        assert args == ["jq", "--monochrome-output", ".", str(serialized)]
        assert target.read_text(encoding="utf-8") == '{\n  "openapi": "3.0.1"\n}\n'

    def test_empty_command_copies(self, serialized, tmp_path):
        target = tmp_path / "out.json"
        prettify_json(serialized, target, [])
        assert target.read_text(encoding="utf-8") == '{"openapi": "3.0.1"}'

    @patch("portals_openapi.output.formatter.subprocess.run", side_effect=FileNotFoundError("jq"))
    def test_missing_formatter(self, mock_run, serialized, tmp_path):
        target = tmp_path / "out.json"
        with pytest.raises(FormatterError, match="not found"):
            prettify_json(serialized, target)
        assert not target.exists()

    @patch("portals_openapi.output.formatter.subprocess.run")
    def test_failing_formatter_removes_target(self, mock_run, serialized, tmp_path):
        mock_run.return_value = subprocess.CompletedProcess([], 2, stderr=b"jq: error: parse error")
        target = tmp_path / "out.json"
        with pytest.raises(FormatterError, match="code 2: jq: error: parse error"):
            prettify_json(serialized, target)
        assert not target.exists()
