""" Configure the tests """

import pytest
from kv_service.services.extensions import PrintStatusSettings
from kv_service.services.tests import run_service


@pytest.fixture(scope="session", autouse=True)
def silence_print_status():
    """Suppress status-messages of extensions during tests."""
    PrintStatusSettings.silent = True
    yield
    PrintStatusSettings.silent = False
