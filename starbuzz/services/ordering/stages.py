"""Ordering session stage enumeration."""
from enum import Enum


class SessionStage(str, Enum):
    """Stages of a single ordering session."""

    AWAITING_BASE = "awaiting_base"  # Waiting for the coffee selection
    AWAITING_CONDIMENTS = "awaiting_condiments"  # Waiting for the condiment list
    FINALIZED = "finalized"  # Order printed
    ABORTED = "aborted"  # Bad input, no order produced

    def __str__(self) -> str:
        """Return the string value of the stage."""
        return self.value


TERMINAL_STAGES = frozenset({SessionStage.FINALIZED, SessionStage.ABORTED})
