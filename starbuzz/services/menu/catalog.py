"""Fixed beverage and condiment catalogs."""
from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from starbuzz.services.menu.base import (
    Beverage,
    BeverageKind,
    Condiment,
    CondimentKind,
    PricedItem,
)


class BeverageEntry(BaseModel):
    """Catalog row for a base beverage."""

    model_config = ConfigDict(frozen=True)

    token: str
    kind: BeverageKind
    name: str
    price: Decimal

    def build(self) -> Beverage:
        """Create a fresh beverage for an order."""
        return Beverage(kind=self.kind, name=self.name, price=self.price)

    def menu_line(self) -> str:
        return f"{self.token}. {self.name}"


class CondimentEntry(BaseModel):
    """Catalog row for a condiment."""

    model_config = ConfigDict(frozen=True)

    token: str
    kind: CondimentKind
    label: str
    suffix: str
    increment: Decimal

    def wrap(self, item: PricedItem) -> Condiment:
        """Layer this condiment on top of ``item``."""
        return Condiment(
            kind=self.kind,
            suffix=self.suffix,
            increment=self.increment,
            inner=item,
        )

    def menu_line(self) -> str:
        return f"{self.token}. {self.label} ({self.increment})"


BEVERAGES: List[BeverageEntry] = [
    BeverageEntry(
        token="1",
        kind=BeverageKind.HOUSE_BLEND,
        name="House Blend Coffee",
        price=Decimal("0.89"),
    ),
    BeverageEntry(
        token="2",
        kind=BeverageKind.DARK_ROAST,
        name="Dark Roast Coffee",
        price=Decimal("0.99"),
    ),
    BeverageEntry(
        token="3",
        kind=BeverageKind.DECAF,
        name="Decaf Coffee",
        price=Decimal("1.05"),
    ),
    BeverageEntry(
        token="4",
        kind=BeverageKind.ESPRESSO,
        name="Espresso Coffee",
        price=Decimal("1.99"),
    ),
]

CONDIMENTS: List[CondimentEntry] = [
    CondimentEntry(
        token="1",
        kind=CondimentKind.MILK,
        label="Milk",
        suffix=", Steamed Milk",
        increment=Decimal("0.20"),
    ),
    CondimentEntry(
        token="2",
        kind=CondimentKind.MOCHA,
        label="Mocha",
        suffix=", Mocha",
        increment=Decimal("0.20"),
    ),
    CondimentEntry(
        token="3",
        kind=CondimentKind.SOY,
        label="Soy",
        suffix=", Soy",
        increment=Decimal("0.15"),
    ),
    CondimentEntry(
        token="4",
        kind=CondimentKind.WHIPPED_CREAM,
        label="Whipped cream",
        suffix=", Whipped Cream",
        increment=Decimal("0.10"),
    ),
]


class Catalog:
    """Lookup over the fixed beverage and condiment tables."""

    def __init__(
        self,
        beverages: Optional[List[BeverageEntry]] = None,
        condiments: Optional[List[CondimentEntry]] = None,
    ):
        self.beverages = list(BEVERAGES if beverages is None else beverages)
        self.condiments = list(CONDIMENTS if condiments is None else condiments)
        self._beverages_by_token: Dict[str, BeverageEntry] = {
            entry.token: entry for entry in self.beverages
        }
        self._condiments_by_token: Dict[str, CondimentEntry] = {
            entry.token: entry for entry in self.condiments
        }

    def get_beverage(self, token: str) -> Optional[BeverageEntry]:
        """Get a beverage entry by selection token."""
        return self._beverages_by_token.get(token)

    def get_condiment(self, token: str) -> Optional[CondimentEntry]:
        """Get a condiment entry by selection token."""
        return self._condiments_by_token.get(token)

    def beverage_menu_lines(self) -> List[str]:
        return [entry.menu_line() for entry in self.beverages]

    def condiment_menu_lines(self) -> List[str]:
        return [entry.menu_line() for entry in self.condiments]
