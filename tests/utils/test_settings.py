import pytest

from indexcursor import DEFAULT_PAGE_SIZE, configure, get_default_page_size, reset_settings
from indexcursor.utils.settings import SettingsResolver, resolve_page_size


def test_default_page_size():
    assert get_default_page_size() == DEFAULT_PAGE_SIZE == 10


def test_configure_and_reset():
    configure(page_size=25)
    assert get_default_page_size() == 25
    assert resolve_page_size() == 25
    reset_settings()
    assert get_default_page_size() == 10


@pytest.mark.parametrize("size", [0, -3, 2.5, True])
def test_configure_rejects_invalid(size):
    with pytest.raises(ValueError, match="page_size must be >= 1"):
        configure(page_size=size)


def test_explicit_size_wins():
    configure(page_size=25)
    assert resolve_page_size(5) == 5


def test_resolver_reads_inner_settings():
    class Table:
        class Settings:
            page_size = 15

    class Plain:
        pass

    assert SettingsResolver.get_page_size(Table) == 15
    assert SettingsResolver.get_page_size(Plain) is None
