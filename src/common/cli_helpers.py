"""Common CLI helper utilities."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logging(debug: bool = True) -> None:
    """Configure standard logging format for CLI tools.

    Informational lines are only emitted with debug on; errors always are.
    """
    logging.basicConfig(
        level=logging.INFO if debug else logging.ERROR,
        format=LOG_FORMAT,
    )
    logging.getLogger().setLevel(logging.INFO if debug else logging.ERROR)
    # boto's own INFO chatter drowns out the check
    logging.getLogger("botocore").setLevel(logging.WARNING)
