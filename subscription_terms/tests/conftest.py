import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1].parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def catalog():
    from subscription_terms.recurrence import build_catalog

    return build_catalog()
