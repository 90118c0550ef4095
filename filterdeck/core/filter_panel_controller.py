"""Open/Apply/Cancel/Clear lifecycle of a filter panel."""

from __future__ import annotations

import logging
from typing import Callable, Mapping

from PyQt6.QtCore import QObject, pyqtSignal

from filterdeck.core.exceptions import PanelStateError
from filterdeck.core.filter_state import FilterStateStore
from filterdeck.core.models import FilterConfig, FilterFieldSchema
from filterdeck.core.row_layout import group_fields_by_row

logger = logging.getLogger(__name__)


class FilterPanelController(QObject):
    """State machine composing the filter buffer and row layout.

    States are Closed and Open. ``open()`` seeds a fresh buffer from the
    caller's applied filters; ``apply()``, ``cancel()`` and ``clear()`` each
    discard it and return to Closed.

    Attributes:
        applied: Emitted with the buffer (dict[str, str]) on Apply.
        cleared: Emitted on Clear, without payload.
        closed: Emitted on Apply and Cancel.
        opened: Emitted when the panel opens.
        value_changed: Emitted with (key, value) on every buffer write.
    """

    applied = pyqtSignal(dict)
    cleared = pyqtSignal()
    closed = pyqtSignal()
    opened = pyqtSignal()
    value_changed = pyqtSignal(str, str)

    def __init__(
        self,
        config: FilterConfig,
        applied_filters: Mapping[str, str] | None = None,
        on_apply: Callable[[dict], None] | None = None,
        on_clear: Callable[[], None] | None = None,
        on_close: Callable[[], None] | None = None,
        parent: QObject | None = None,
    ) -> None:
        """Initialize FilterPanelController.

        Args:
            config: Filter configuration to edit.
            applied_filters: Filters the caller currently uses.
            on_apply: Called with the applied values.
            on_clear: Called when the user clears all filters.
            on_close: Called when the panel closes via Apply or Cancel.
            parent: Parent QObject.
        """
        super().__init__(parent)
        self._config = config
        self._applied_filters = applied_filters
        self._store = FilterStateStore()
        self._is_open = False

        if on_apply is not None:
            self.applied.connect(on_apply)
        if on_clear is not None:
            self.cleared.connect(on_clear)
        if on_close is not None:
            self.closed.connect(on_close)

    @property
    def config(self) -> FilterConfig:
        return self._config

    @property
    def applied_filters(self) -> Mapping[str, str] | None:
        return self._applied_filters

    @property
    def is_open(self) -> bool:
        return self._is_open

    @property
    def values(self) -> Mapping[str, str]:
        """Read-only view of the buffer; empty while closed."""
        return self._store.values

    @property
    def rows(self) -> list[list[FilterFieldSchema]]:
        return group_fields_by_row(self._config.fields)

    def set_config(self, config: FilterConfig) -> None:
        """Switch the panel to another entity's configuration."""
        self._config = config
        self._reinitialize_if_stale()

    def set_applied_filters(self, applied_filters: Mapping[str, str] | None) -> None:
        """Replace the caller's committed filters."""
        self._applied_filters = applied_filters
        self._reinitialize_if_stale()

    def open(self) -> None:
        """Open the panel with a buffer seeded from the applied filters."""
        if self._is_open:
            return
        self._store.initialize(self._config, self._applied_filters)
        self._is_open = True
        logger.debug("Filter panel '%s' opened", self._config.title)
        self.opened.emit()

    def set_value(self, key: str, value: str) -> None:
        """Write one field of the open buffer."""
        self._require_open("edit")
        self._store.set_value(key, value)
        self.value_changed.emit(key, value)

    def apply(self) -> dict[str, str]:
        """Hand the buffer to the caller verbatim and close.

        Returns:
            The applied values.
        """
        self._require_open("apply")
        values = dict(self._store.apply())
        self._close()
        logger.debug("Filter panel '%s' applied: %s", self._config.title, values)
        self.applied.emit(values)
        self.closed.emit()
        return values

    def cancel(self) -> None:
        """Discard the buffer and close with only a close notification."""
        if not self._is_open:
            return
        self._close()
        logger.debug("Filter panel '%s' cancelled", self._config.title)
        self.closed.emit()

    def clear(self) -> None:
        """Blank the buffer, close and then notify the caller.

        Defaults are not restored: clearing removes every constraint.
        """
        self._require_open("clear")
        self._store.clear()
        self._close()
        logger.debug("Filter panel '%s' cleared", self._config.title)
        self.cleared.emit()

    def _close(self) -> None:
        self._store.reset()
        self._is_open = False

    def _require_open(self, action: str) -> None:
        if not self._is_open:
            raise PanelStateError(f"Cannot {action} a closed filter panel")

    def _reinitialize_if_stale(self) -> None:
        if self._is_open and self._store.needs_reinitialize(
            self._config, self._applied_filters
        ):
            self._store.initialize(self._config, self._applied_filters)
            logger.debug(
                "Filter panel '%s' re-initialized after input change",
                self._config.title,
            )
