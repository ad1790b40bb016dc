from __future__ import annotations

from decimal import Decimal

import pytest

from lunchtray.data import MenuCatalog
from lunchtray.models import MenuItem
from lunchtray.order import OrderState


@pytest.fixture
def catalog() -> MenuCatalog:
    return MenuCatalog(
        [
            MenuItem("big", "Big Plate", "", "entree", Decimal("7.00")),
            MenuItem("small", "Small Plate", "", "entree", Decimal("5.00")),
            MenuItem("fries", "Fries", "", "side", Decimal("3.00")),
            MenuItem("slaw", "Slaw", "", "side", Decimal("1.25")),
            MenuItem("roll", "Roll", "", "accompaniment", Decimal("0.50")),
        ]
    )


@pytest.fixture
def order(catalog: MenuCatalog) -> OrderState:
    return OrderState(catalog)


@pytest.fixture(autouse=True)
def debug_log(tmp_path, monkeypatch):
    path = tmp_path / "debug.log"
    monkeypatch.setenv("LUNCH_TRAY_DEBUG_LOG", str(path))
    return path
