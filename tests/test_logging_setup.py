# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

from kask.logging_setup import setup_logging


def test_file_log_receives_debug(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        setup_logging(log_dir=tmp_path / "logs", console_level=logging.ERROR)
        logging.getLogger("kask.tests").debug("hello from test")
        for h in root.handlers:
            h.flush()
        text = (tmp_path / "logs" / "kask.log").read_text("utf-8")
        assert "DEBUG kask.tests: hello from test" in text
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)
