import os
import tempfile
from decimal import Decimal

import pytest

# Must be set before lunch_tray.config is imported.
os.environ.setdefault("LUNCH_TRAY_LOG_PATH", os.path.join(tempfile.mkdtemp(prefix="lunch-tray-"), "debug.log"))

from lunch_tray.flow import OrderFlow  # noqa: E402
from lunch_tray.models import MenuCategory, MenuItem  # noqa: E402
from lunch_tray.order import OrderSession  # noqa: E402


@pytest.fixture
def session():
    return OrderSession(tax_rate=Decimal("0.08"))


@pytest.fixture
def flow(session):
    return OrderFlow(session=session)


@pytest.fixture
def entree_a():
    return MenuItem("Entree A", "test entree", Decimal("5.00"), "entree_a", MenuCategory.ENTREE)


@pytest.fixture
def side_b():
    return MenuItem("Side B", "test side", Decimal("2.00"), "side_b", MenuCategory.SIDE_DISH)


@pytest.fixture
def accompaniment_c():
    return MenuItem("Accompaniment C", "test accompaniment", Decimal("1.00"), "acc_c", MenuCategory.ACCOMPANIMENT)
