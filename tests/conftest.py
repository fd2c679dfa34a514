from pathlib import Path
import logging
import sys

import pytest

# Allow running tests without installing the package in editable mode.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import logging_manager  # noqa: E402


@pytest.fixture(autouse=True)
def reset_logging_manager():
    root = logging.getLogger()
    saved_level = root.level
    yield
    logging_manager.shutdown()
    logging_manager._installed = None
    root.setLevel(saved_level)
