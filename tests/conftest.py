import pytest

from fhir_introspection.infrastructure.logging import NullLogger
from fhir_introspection.logging_config import set_logger


@pytest.fixture(autouse=True)
def _silent_process_logger():
    """Keep the process-wide logger quiet during tests.

    The mapping core reports no-op generic closing through the process
    logger, which defaults to a ConsoleLogger printing to stdout. Tests that
    assert on log output install their own logger.
    """
    set_logger(NullLogger())
    yield
    set_logger(None)
