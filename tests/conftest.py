"""Global test configuration and lightweight fixtures.

Seeds RNGs for more deterministic behavior, restores the global precision
after every test, and auto-marks tests under tests/property.
"""

import os
import random
from pathlib import Path

import pytest

from fpmath.core import PrecisionConfig


def pytest_sessionstart(session: pytest.Session) -> None:
    """Seed common RNGs to improve test determinism."""
    seed = int(os.environ.get("FPMATH_TEST_SEED", "12345"))
    random.seed(seed)
    import numpy as np
    np.random.seed(seed)


@pytest.fixture(autouse=True)
def _restore_precision():
    """Tests that change the default precision must not leak it."""
    mode = PrecisionConfig.get_precision()
    yield
    PrecisionConfig.set_precision(mode)


def pytest_collection_modifyitems(session: pytest.Session, config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests under tests/property with the 'property' marker.

    CI selects property tests via `-m property`.
    """
    for item in items:
        p = Path(str(item.fspath))
        if "property" in p.parts and "tests" in p.parts:
            item.add_marker(pytest.mark.property)
