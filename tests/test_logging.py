"""
Loguru setup and interception of standard library logging.
"""

import logging

from loguru import logger

from league_fixtures.logging.setup import setup_logging


def test_stdlib_logging_is_routed_to_loguru() -> None:
    setup_logging("DEBUG")
    messages = []
    sink_id = logger.add(messages.append, level="DEBUG", format="{level}:{message}")
    try:
        logging.getLogger("some.library").warning("kickoff feed lagging")
    finally:
        logger.remove(sink_id)
    assert any("WARNING:kickoff feed lagging" in str(m) for m in messages)
