# tests/conftest.py
# Ensure the source root (src/) is on sys.path so `import payment_optimizer` works
# without installing the package.
import logging
import sys
from pathlib import Path

import pytest

SRC = Path(__file__).resolve().parents[1] / "src"
src_str = str(SRC)
if src_str not in sys.path:
    sys.path.insert(0, src_str)


@pytest.fixture(autouse=True)
def _clean_package_logger():
    # The CLI attaches a stream handler bound to the current sys.stderr;
    # drop it so later tests don't write into a closed capture stream.
    yield
    logger = logging.getLogger("payment_optimizer")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
