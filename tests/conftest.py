"""Pytest configuration and shared fixtures."""
import pytest

from stringtags.i18n import clear_catalogs, set_locale


@pytest.fixture(autouse=True)
def reset_catalogs():
    """Start every test with no catalogs and the default locale."""
    clear_catalogs()
    set_locale("en")
    yield
    clear_catalogs()
    set_locale("en")
