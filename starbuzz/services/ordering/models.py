"""Ordering session models."""
from decimal import Decimal
from typing import List, Optional, Union

from pydantic import BaseModel

from starbuzz.services.menu.base import Beverage, Condiment
from starbuzz.services.ordering.constants import ORDER_TEMPLATE, TOTAL_TEMPLATE
from starbuzz.services.ordering.stages import SessionStage


class OrderReceipt(BaseModel):
    """Final description and price of a completed order."""

    description: str
    cost: Decimal

    def lines(self) -> List[str]:
        return [
            ORDER_TEMPLATE.format(description=self.description),
            TOTAL_TEMPLATE.format(cost=self.cost),
        ]


class OrderState(BaseModel):
    """State of an ordering session."""

    stage: SessionStage = SessionStage.AWAITING_BASE
    item: Optional[Union[Beverage, Condiment]] = None  # Head of the condiment chain
    rejected_tokens: List[str] = []  # Condiment tokens that matched nothing
    receipt: Optional[OrderReceipt] = None
