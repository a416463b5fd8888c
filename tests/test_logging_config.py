import logging

from app.logging_config import setup_logging


def _with_bare_root(func):
    """Run ``func`` with no root handlers, then put the original ones back."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers, root.level
    root.handlers = []
    try:
        func(root)
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)


class TestSetupLogging:
    def test_log_file_receives_records(self, tmp_path):
        log_path = tmp_path / "service.log"

        def run(root):
            setup_logging("DEBUG", str(log_path))
            assert len(root.handlers) == 2
            assert root.level == logging.DEBUG
            logging.getLogger("app.seed").info("Seeded %d transactions", 3)
            for handler in root.handlers:
                handler.flush()

        _with_bare_root(run)
        text = log_path.read_text(encoding="utf-8")
        assert "[INFO] app.seed: Seeded 3 transactions" in text

    def test_console_only_without_log_file(self):
        def run(root):
            setup_logging("warning")
            assert [type(h) for h in root.handlers] == [logging.StreamHandler]
            assert root.level == logging.WARNING

        _with_bare_root(run)

    def test_second_call_is_a_no_op(self, tmp_path):
        def run(root):
            setup_logging("INFO")
            setup_logging("DEBUG", str(tmp_path / "ignored.log"))
            assert len(root.handlers) == 1
            assert root.level == logging.INFO

        _with_bare_root(run)
        assert not (tmp_path / "ignored.log").exists()
