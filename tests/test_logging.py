from __future__ import annotations

import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from studentapp.core.logging import setup_logging  # noqa: E402


def test_setup_logging_applies_level_on_every_call():
    root = logging.getLogger()
    previous_level = root.level
    previous_handlers = list(root.handlers)
    try:
        setup_logging("WARNING")
        assert root.level == logging.WARNING
        logger = setup_logging("DEBUG")
        assert root.level == logging.DEBUG
        assert logger.name == "studentapp"
        assert logger.isEnabledFor(logging.DEBUG)
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
        for handler in previous_handlers:
            root.addHandler(handler)
        root.setLevel(previous_level)


def test_setup_logging_unknown_level_falls_back_to_info():
    root = logging.getLogger()
    previous_level = root.level
    previous_handlers = list(root.handlers)
    try:
        setup_logging("chatty")
        assert root.level == logging.INFO
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
        for handler in previous_handlers:
            root.addHandler(handler)
        root.setLevel(previous_level)
