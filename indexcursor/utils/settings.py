"""Page size configuration shared by every calculator call."""

from __future__ import annotations

DEFAULT_PAGE_SIZE = 10


class _PaginationSettings:
    """Global mutable state for pagination defaults."""

    def __init__(self) -> None:
        self.page_size: int = DEFAULT_PAGE_SIZE


_settings = _PaginationSettings()


def _validate_page_size(page_size: int) -> int:
    if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size < 1:
        raise ValueError("page_size must be >= 1")
    return page_size


def configure(*, page_size: int | None = None) -> None:
    """Set process-wide pagination defaults."""
    if page_size is not None:
        _settings.page_size = _validate_page_size(page_size)


def reset_settings() -> None:
    """Restore the built-in defaults."""
    _settings.page_size = DEFAULT_PAGE_SIZE


def get_default_page_size() -> int:
    """Return the configured default page size."""
    return _settings.page_size


def resolve_page_size(page_size: int | None = None) -> int:
    """Return ``page_size`` if given, else the configured default.

    Raises:
        ValueError: If the page size is not a positive integer
    """
    if page_size is None:
        return _settings.page_size
    return _validate_page_size(page_size)


class SettingsResolver:
    """Resolves pagination settings from an inner Settings class."""

    @staticmethod
    def get_page_size(cls: type) -> int | None:
        """Get page size from Settings, if the class declares one.

        Args:
            cls: Class carrying an optional inner ``Settings``

        Returns:
            Declared page size, or None to fall back to the default
        """
        settings = getattr(cls, "Settings", None)
        if settings and hasattr(settings, "page_size"):
            return _validate_page_size(settings.page_size)
        return None
