"""Shared fixtures for license-auditor tests."""
import logging
from typing import Iterator

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_auditor_logger() -> Iterator[None]:
    """Drop handlers installed by configure_logging between tests."""
    yield
    logger = logging.getLogger("license_auditor")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
