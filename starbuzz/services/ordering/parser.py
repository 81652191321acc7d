"""Selection parsing service."""
import re
from typing import List, Optional

from starbuzz.services.menu.catalog import Catalog, BeverageEntry
from starbuzz.services.ordering.constants import CONDIMENT_SEPARATOR

# Optional sign and ASCII digits only; no Unicode digits or underscores.
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class SelectionParser:
    """Service for turning raw input lines into catalog selections."""

    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def parse_beverage_choice(self, line: Optional[str]) -> Optional[BeverageEntry]:
        """
        Parse the coffee selection line.

        Args:
            line: Raw input line, or None when input has ended

        Returns:
            The selected BeverageEntry, or None if the line is missing,
            not an integer, or outside the menu
        """
        if line is None:
            return None

        text = line.strip()
        if not _INTEGER_PATTERN.fullmatch(text):
            return None

        return self.catalog.get_beverage(str(int(text)))

    def split_condiment_tokens(self, line: str) -> List[str]:
        """
        Split the condiment line into trimmed tokens.

        A blank line selects nothing. Otherwise empty parts are kept so the
        session can report them.
        """
        if not line.strip():
            return []
        return [part.strip() for part in line.split(CONDIMENT_SEPARATOR)]
