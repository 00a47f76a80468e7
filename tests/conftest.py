import pytest

from src.utils.logger import set_log_level


@pytest.fixture(autouse=True)
def reset_log_level():
    """Undo log level changes made through the command line."""
    yield
    set_log_level("INFO")
