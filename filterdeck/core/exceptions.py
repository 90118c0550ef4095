"""Custom exceptions for FilterDeck."""


class FilterDeckError(Exception):
    """Base exception for FilterDeck.

    All custom exceptions in the package should inherit from this class
    to enable consistent exception handling.
    """


class ConfigurationError(FilterDeckError):
    """Raised when a filter configuration is invalid.

    This exception is raised at construction time so that a broken
    configuration never reaches an open filter panel.
    """


class DuplicateFieldKeyError(ConfigurationError):
    """Raised when two fields of one configuration share a key."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Duplicate filter field key '{key}'")
        self.key = key


class UnknownFieldError(FilterDeckError, KeyError):
    """Raised when a value is written for a key the active config lacks."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Field '{self.key}' is not part of the active filter config"


class PanelStateError(FilterDeckError):
    """Raised when a panel operation requires an open panel."""
