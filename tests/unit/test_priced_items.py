"""Unit tests for beverages and condiment wrappers."""
from decimal import Decimal

import pytest
from pydantic import ValidationError

from starbuzz.services.menu.base import (
    Beverage,
    BeverageKind,
    Condiment,
    CondimentKind,
    PricedItem,
)


def _espresso() -> Beverage:
    return Beverage(kind=BeverageKind.ESPRESSO, name="Espresso Coffee", price=Decimal("1.99"))


def _wrap(item, kind, suffix, increment) -> Condiment:
    return Condiment(kind=kind, suffix=suffix, increment=Decimal(increment), inner=item)


class TestBeverage:
    """Test base beverages."""

    def test_description_and_cost(self):
        """Test a bare beverage reports its own name and price."""
        espresso = _espresso()
        assert espresso.description() == "Espresso Coffee"
        assert espresso.cost() == Decimal("1.99")
        assert espresso.layers() == []

    def test_is_frozen(self):
        """Test beverages cannot be modified after construction."""
        espresso = _espresso()
        with pytest.raises(ValidationError):
            espresso.price = Decimal("0.01")

    def test_rejects_negative_price(self):
        """Test price must be non-negative."""
        with pytest.raises(ValidationError):
            Beverage(kind=BeverageKind.DECAF, name="Decaf Coffee", price=Decimal("-1"))

    def test_abstract_item_cannot_be_built(self):
        """Test the abstract priced item has no instances."""
        with pytest.raises(TypeError):
            PricedItem()

    def test_default_description(self):
        """Test subclasses that only price themselves get the fallback description."""
        class Mystery(PricedItem):
            def cost(self) -> Decimal:
                return Decimal("0")

        assert Mystery().description() == "Unknown Beverage"


class TestCondiment:
    """Test condiment wrappers."""

    def test_wraps_description_and_cost(self):
        """Test a wrapper appends its suffix and adds its increment."""
        item = _wrap(_espresso(), CondimentKind.MILK, ", Steamed Milk", "0.20")
        assert item.description() == "Espresso Coffee, Steamed Milk"
        assert item.cost() == Decimal("2.19")

    def test_nested_wrappers_keep_order(self):
        """Test suffixes appear innermost first."""
        item = _wrap(_espresso(), CondimentKind.MILK, ", Steamed Milk", "0.20")
        item = _wrap(item, CondimentKind.SOY, ", Soy", "0.15")
        assert item.description() == "Espresso Coffee, Steamed Milk, Soy"
        assert item.cost() == Decimal("2.34")
        assert item.layers() == [CondimentKind.MILK, CondimentKind.SOY]

    def test_wrapping_leaves_inner_unchanged(self):
        """Test wrapping builds a new item instead of mutating the old one."""
        espresso = _espresso()
        wrapped = _wrap(espresso, CondimentKind.MOCHA, ", Mocha", "0.20")
        assert espresso.description() == "Espresso Coffee"
        assert espresso.cost() == Decimal("1.99")
        assert wrapped.inner == espresso

    def test_requires_inner_item(self):
        """Test a wrapper cannot be built without an inner item."""
        with pytest.raises(ValidationError):
            Condiment(
                kind=CondimentKind.SOY,
                suffix=", Soy",
                increment=Decimal("0.15"),
                inner=None,
            )

    def test_inner_cannot_be_reassigned(self):
        """Test the inner reference is fixed once built."""
        item = _wrap(_espresso(), CondimentKind.SOY, ", Soy", "0.15")
        with pytest.raises(ValidationError):
            item.inner = _espresso()

    def test_long_chain_is_exact(self):
        """Test long chains keep exact cents and do not hit the recursion limit."""
        item = _espresso()
        for _ in range(2000):
            item = _wrap(item, CondimentKind.WHIPPED_CREAM, ", Whipped Cream", "0.10")

        assert item.cost() == Decimal("201.99")
        assert item.description().count(", Whipped Cream") == 2000
        assert len(item.layers()) == 2000
