import logging

from portals_openapi.report import close_report, open_report


class TestReport:
    def test_writes_prefixed_lines(self, tmp_path):
        path = tmp_path / "report.log"
        handler = open_report(path)
        try:
            logger = logging.getLogger("portals_openapi.pipeline.correlator")
            logger.info("processing %d of %s...", 0, "files")
            logger.warning("skipping %d of %s...", 0, "files")
            logger.debug("not written")
        finally:
            close_report(handler)

        assert path.read_text(encoding="utf-8").splitlines() == [
            "info: processing 0 of files...",
            "warn: skipping 0 of files...",
        ]

    def test_truncates_previous_report(self, tmp_path):
        path = tmp_path / "report.log"
        path.write_text("old\n", encoding="utf-8")
        handler = open_report(path)
        close_report(handler)
        assert path.read_text(encoding="utf-8") == ""

    def test_close_detaches_handler(self, tmp_path):
        handler = open_report(tmp_path / "report.log")
        close_report(handler)
        assert handler not in logging.getLogger("portals_openapi").handlers

    def test_close_restores_logger_level(self, tmp_path):
        logger = logging.getLogger("portals_openapi")
        previous = logger.level
        logger.setLevel(logging.WARNING)
        try:
            handler = open_report(tmp_path / "report.log")
            assert logger.level == logging.INFO
            close_report(handler)
            assert logger.level == logging.WARNING
        finally:
            logger.setLevel(previous)
