"""Priced item models: base beverages and the condiments that wrap them."""
from abc import ABC, abstractmethod
from decimal import Decimal
from enum import Enum
from typing import List, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class BeverageKind(str, Enum):
    """Base beverages on the menu."""

    HOUSE_BLEND = "house_blend"
    DARK_ROAST = "dark_roast"
    DECAF = "decaf"
    ESPRESSO = "espresso"

    def __str__(self) -> str:
        return self.value


class CondimentKind(str, Enum):
    """Add-ons that can be layered on top of a beverage."""

    MILK = "milk"
    MOCHA = "mocha"
    SOY = "soy"
    WHIPPED_CREAM = "whipped_cream"

    def __str__(self) -> str:
        return self.value


class PricedItem(BaseModel, ABC):
    """Anything that can be described and priced.

    Items are frozen; adding a condiment builds a new item around the old one.
    """

    model_config = ConfigDict(frozen=True)

    def description(self) -> str:
        """Human-readable description of the item."""
        return "Unknown Beverage"

    @abstractmethod
    def cost(self) -> Decimal:
        """Total price of the item."""
        pass

    def layers(self) -> List[CondimentKind]:
        """Condiments applied to this item, innermost first."""
        return []


class Beverage(PricedItem):
    """A base beverage with a fixed name and price."""

    kind: BeverageKind
    name: str
    price: Decimal = Field(ge=0)

    def description(self) -> str:
        return self.name

    def cost(self) -> Decimal:
        return self.price


class Condiment(PricedItem):
    """A condiment layered on exactly one inner item."""

    kind: CondimentKind
    suffix: str
    increment: Decimal = Field(ge=0)
    inner: Union[Beverage, "Condiment"]

    def _unwind(self) -> Tuple[Beverage, List["Condiment"]]:
        # Walk down to the base so long chains don't recurse.
        wrappers: List[Condiment] = []
        item: Union[Beverage, Condiment] = self
        while isinstance(item, Condiment):
            wrappers.append(item)
            item = item.inner
        wrappers.reverse()
        return item, wrappers

    def description(self) -> str:
        base, wrappers = self._unwind()
        return base.description() + "".join(w.suffix for w in wrappers)

    def cost(self) -> Decimal:
        base, wrappers = self._unwind()
        return base.cost() + sum((w.increment for w in wrappers), Decimal("0"))

    def layers(self) -> List[CondimentKind]:
        _, wrappers = self._unwind()
        return [w.kind for w in wrappers]
