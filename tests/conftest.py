"""Shared test fixtures and configuration."""
from typing import Callable, List, Optional

import pytest

from starbuzz.services.menu.catalog import Catalog
from starbuzz.services.ordering.session import OrderingSession


class ScriptedInput:
    """Line reader that replays a fixed script, then reports end of input."""

    def __init__(self, lines: List[Optional[str]]):
        self._lines = list(lines)
        self.reads = 0

    def __call__(self) -> Optional[str]:
        self.reads += 1
        if not self._lines:
            return None
        return self._lines.pop(0)


@pytest.fixture
def catalog():
    """Default fixed catalog."""
    return Catalog()


@pytest.fixture
def transcript():
    """Collected output lines."""
    return []


@pytest.fixture
def make_session(catalog, transcript) -> Callable[..., OrderingSession]:
    """Build a session that reads scripted lines and records its output."""
    def _make_session(*lines: Optional[str]) -> OrderingSession:
        return OrderingSession(
            catalog=catalog,
            read_line=ScriptedInput(list(lines)),
            write_line=transcript.append,
        )
    return _make_session
