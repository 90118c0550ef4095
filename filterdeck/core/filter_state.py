"""Editable filter buffer for one open filter panel."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Mapping

from filterdeck.core.exceptions import PanelStateError, UnknownFieldError
from filterdeck.core.models import FilterConfig, FilterValues

logger = logging.getLogger(__name__)


class FilterStateStore:
    """Owns the in-progress filter values of a panel.

    The store reconciles two inputs it never mutates, the config defaults
    and the caller's applied filters, into a buffer holding exactly one
    string per field key. Values are opaque strings; validation is left
    to the caller.
    """

    def __init__(self) -> None:
        self._config: FilterConfig | None = None
        self._applied: Mapping[str, str] | None = None
        self._values: FilterValues = {}

    @property
    def config(self) -> FilterConfig | None:
        return self._config

    @property
    def is_initialized(self) -> bool:
        return self._config is not None

    @property
    def values(self) -> Mapping[str, str]:
        """Read-only view of the current buffer."""
        return MappingProxyType(self._values)

    def needs_reinitialize(
        self, config: FilterConfig, applied_filters: Mapping[str, str] | None
    ) -> bool:
        """True when the config or applied filters are different objects.

        The same panel is reused across entity screens, so identity rather
        than equality decides whether the buffer is stale.
        """
        return config is not self._config or applied_filters is not self._applied

    def initialize(
        self,
        config: FilterConfig,
        applied_filters: Mapping[str, str] | None = None,
    ) -> FilterValues:
        """Seed the buffer from applied filters, then defaults, then "".

        Args:
            config: Active filter configuration.
            applied_filters: Filters the caller currently has committed.

        Returns:
            Copy of the freshly seeded buffer.
        """
        applied = applied_filters if applied_filters is not None else {}
        values: FilterValues = {}
        for key in config.keys:
            if applied.get(key) is not None:
                values[key] = str(applied[key])
            elif key in config.defaults:
                values[key] = config.defaults[key]
            else:
                values[key] = ""

        self._config = config
        self._applied = applied_filters
        self._values = values
        logger.debug("Filter buffer initialized for '%s': %s", config.title, values)
        return dict(values)

    def set_value(self, key: str, value: str) -> None:
        """Overwrite one field's value without validation.

        Raises:
            PanelStateError: If the store has not been initialized.
            UnknownFieldError: If ``key`` is not a field of the active config.
        """
        if self._config is None:
            raise PanelStateError("Filter buffer is not initialized")
        if key not in self._values:
            raise UnknownFieldError(key)
        self._values[key] = value

    def apply(self) -> Mapping[str, str]:
        """Immutable snapshot of the current buffer."""
        if self._config is None:
            raise PanelStateError("Filter buffer is not initialized")
        return MappingProxyType(dict(self._values))

    def clear(self, on_clear: Callable[[], None] | None = None) -> None:
        """Blank every field and notify the caller.

        Clearing removes all constraints; it does not restore defaults.
        """
        if self._config is None:
            raise PanelStateError("Filter buffer is not initialized")
        self._values = {key: "" for key in self._config.keys}
        logger.debug("Filter buffer cleared for '%s'", self._config.title)
        if on_clear is not None:
            on_clear()

    def reset(self) -> None:
        """Discard the buffer."""
        self._config = None
        self._applied = None
        self._values = {}
