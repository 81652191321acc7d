"""Command-line entry point for the Starbuzz ordering session."""
import logging
import sys
from typing import Optional

from starbuzz.core.logging import setup_logging
from starbuzz.services.menu.catalog import Catalog
from starbuzz.services.ordering.session import OrderingSession

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INTERRUPTED = 130


def read_stdin_line() -> Optional[str]:
    """Read one line from stdin, or None once input has ended."""
    try:
        return input()
    except EOFError:
        return None


def main() -> int:
    setup_logging()
    session = OrderingSession(
        catalog=Catalog(),
        read_line=read_stdin_line,
    )

    try:
        state = session.run()
    except KeyboardInterrupt:
        logger.info("Session interrupted")
        return EXIT_INTERRUPTED

    logger.info(f"Session ended in stage {state.stage}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
