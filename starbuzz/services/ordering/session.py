"""Ordering session: reads selections and builds the condiment chain."""
import logging
from typing import Callable, Optional

from starbuzz.services.menu.catalog import Catalog
from starbuzz.services.ordering.constants import (
    BEVERAGE_PROMPT,
    CONDIMENT_PROMPT,
    INVALID_BEVERAGE_MESSAGE,
    INVALID_CONDIMENT_TEMPLATE,
    INVALID_CONDIMENTS_MESSAGE,
    WELCOME_MESSAGE,
)
from starbuzz.services.ordering.models import OrderReceipt, OrderState
from starbuzz.services.ordering.parser import SelectionParser
from starbuzz.services.ordering.stages import TERMINAL_STAGES, SessionStage

logger = logging.getLogger(__name__)

LineReader = Callable[[], Optional[str]]
LineWriter = Callable[[str], None]


class OrderingSession:
    """Runs one order from welcome line to receipt."""

    def __init__(
        self,
        catalog: Catalog,
        read_line: LineReader,
        write_line: LineWriter = print,
    ):
        self.catalog = catalog
        self.parser = SelectionParser(catalog)
        self.read_line = read_line
        self.write_line = write_line
        self.state = OrderState()

    def run(self) -> OrderState:
        """
        Drive the session until it is finalized or aborted.

        Returns:
            The final OrderState
        """
        self.write_line(WELCOME_MESSAGE)

        while self.state.stage not in TERMINAL_STAGES:
            if self.state.stage == SessionStage.AWAITING_BASE:
                self._take_beverage()
            elif self.state.stage == SessionStage.AWAITING_CONDIMENTS:
                self._take_condiments()

        return self.state

    def _transition(self, stage: SessionStage) -> None:
        old_stage = self.state.stage
        self.state.stage = stage
        logger.info(f"[STAGE TRANSITION] Stage changed: {old_stage.value} -> {stage.value}")

    def _take_beverage(self) -> None:
        self.write_line(BEVERAGE_PROMPT)
        for line in self.catalog.beverage_menu_lines():
            self.write_line(line)

        entry = self.parser.parse_beverage_choice(self.read_line())
        if entry is None:
            self.write_line(INVALID_BEVERAGE_MESSAGE)
            self._transition(SessionStage.ABORTED)
            return

        self.state.item = entry.build()
        logger.debug(f"Started order with {entry.kind}")
        self._transition(SessionStage.AWAITING_CONDIMENTS)

    def _take_condiments(self) -> None:
        self.write_line(CONDIMENT_PROMPT)
        for line in self.catalog.condiment_menu_lines():
            self.write_line(line)

        line = self.read_line()
        if line is None:
            self.write_line(INVALID_CONDIMENTS_MESSAGE)
            self._transition(SessionStage.ABORTED)
            return

        for token in self.parser.split_condiment_tokens(line):
            entry = self.catalog.get_condiment(token)
            if entry is None:
                logger.info(f"Skipping unknown condiment token {token!r}")
                self.state.rejected_tokens.append(token)
                self.write_line(INVALID_CONDIMENT_TEMPLATE.format(token=token))
                continue
            self.state.item = entry.wrap(self.state.item)
            logger.debug(f"Wrapped order with {entry.kind}")

        self._transition(SessionStage.FINALIZED)
        self._finalize()

    def _finalize(self) -> None:
        item = self.state.item
        receipt = OrderReceipt(description=item.description(), cost=item.cost())
        self.state.receipt = receipt
        for line in receipt.lines():
            self.write_line(line)
