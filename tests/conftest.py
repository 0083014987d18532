import pytest

from infseq.config import set_debug_checks


@pytest.fixture
def debug_checks():
    """Enable precondition checks for the duration of one test."""
    previous = set_debug_checks(True)
    yield
    set_debug_checks(previous)


@pytest.fixture
def no_debug_checks():
    previous = set_debug_checks(False)
    yield
    set_debug_checks(previous)
