"""Date picker state machine behind a date filter field."""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable

from PyQt6.QtCore import QObject, pyqtSignal

from filterdeck.core.config import FLYOUT_WIDTH, VIEWPORT_PADDING
from filterdeck.core.date_utils import (
    first_of_month,
    generate_calendar_grid,
    month_title,
    parse_date_input,
    shift_month,
    to_iso,
)
from filterdeck.core.listeners import DismissListenerScope, Subscriber
from filterdeck.core.models import CalendarDay, DateViewState, FlyoutPlacement, Rect
from filterdeck.core.positioning import place_flyout

logger = logging.getLogger(__name__)


class DatePickerModel(QObject):
    """State of one date field: committed date plus its calendar flyout.

    The committed date is owned by the field value and survives across
    opens. Everything else (displayed month, open flag) lives in a
    DateViewState that is recreated on every open and dropped on close.

    Attributes:
        value_changed: Emitted with the ISO date, or the raw text while the
            typed input does not resolve to a date.
        opened: Emitted when the flyout opens.
        closed: Emitted with the close reason when the flyout closes.
        month_changed: Emitted with the new month anchor.
    """

    value_changed = pyqtSignal(str)
    opened = pyqtSignal()
    closed = pyqtSignal(str)
    month_changed = pyqtSignal(object)  # date

    def __init__(
        self,
        subscribe: Subscriber | None = None,
        today: Callable[[], date] = date.today,
        flyout_width: int = FLYOUT_WIDTH,
        padding: int = VIEWPORT_PADDING,
        parent: QObject | None = None,
    ) -> None:
        """Initialize DatePickerModel.

        Args:
            subscribe: Registers global outside-click/Escape listeners and
                returns their remover.
            today: Clock returning the current date.
            flyout_width: Nominal calendar flyout width.
            padding: Viewport safety padding.
            parent: Parent QObject.
        """
        super().__init__(parent)
        self._today = today
        self._flyout_width = flyout_width
        self._padding = padding
        self._listeners = DismissListenerScope(subscribe)
        self._selected: date | None = None
        self._placement: FlyoutPlacement | None = None
        self._state = DateViewState(month_anchor=first_of_month(today()))

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def is_open(self) -> bool:
        return self._state.is_open

    @property
    def selected_date(self) -> date | None:
        return self._selected

    @property
    def iso_value(self) -> str:
        """ISO string of the committed date, empty when none."""
        return to_iso(self._selected) if self._selected is not None else ""

    @property
    def month_anchor(self) -> date:
        return self._state.month_anchor

    @property
    def month_title(self) -> str:
        return month_title(self._state.month_anchor)

    @property
    def placement(self) -> FlyoutPlacement | None:
        """Placement computed on the latest open, None while closed."""
        return self._placement

    @property
    def listeners_active(self) -> bool:
        return self._listeners.active

    @property
    def view_state(self) -> DateViewState:
        return self._state

    def calendar_days(self) -> list[CalendarDay]:
        """Six-week grid for the displayed month."""
        return generate_calendar_grid(
            self._state.month_anchor, self._selected, self._today()
        )

    # ------------------------------------------------------------------
    # Value synchronisation
    # ------------------------------------------------------------------

    def set_value(self, value: str | None) -> None:
        """Sync from the externally owned field value without emitting.

        Args:
            value: ISO date, display date, raw partial text or empty.
        """
        parsed = parse_date_input(value)
        self._set_selected(parsed)
        if parsed is not None:
            self._set_anchor(parsed)

    def type_text(self, text: str) -> None:
        """Handle free-text typed into the field.

        Resolvable text commits the date and emits its ISO form; anything
        else clears the committed date and passes the raw text through.
        """
        parsed = parse_date_input(text)
        self._set_selected(parsed)
        if parsed is None:
            self.value_changed.emit(text)
            return
        self._set_anchor(parsed)
        self.value_changed.emit(to_iso(parsed))

    # ------------------------------------------------------------------
    # Open / close
    # ------------------------------------------------------------------

    def focus(self, trigger: Rect, viewport_width: float) -> None:
        """Input received focus: open the flyout."""
        self._open(trigger, viewport_width)

    def toggle(self, trigger: Rect, viewport_width: float) -> None:
        """Calendar button clicked: open when closed, close when open."""
        if self._state.is_open:
            self._close("toggle")
        else:
            self._open(trigger, viewport_width)

    def handle_outside_click(self) -> None:
        """A mouse press landed outside both the input and the flyout."""
        self._close("outside_click")

    def handle_key(self, key: str) -> bool:
        """Global key handler active while the flyout is open.

        Args:
            key: Key name: ``Escape``, ``ArrowLeft`` or ``ArrowRight``.

        Returns:
            True when the key was consumed.
        """
        if not self._state.is_open:
            return False
        if key == "Escape":
            self._close("escape")
            return True
        if key == "ArrowLeft":
            self.previous_month()
            return True
        if key == "ArrowRight":
            self.next_month()
            return True
        return False

    def dismiss(self, reason: str = "dismiss") -> None:
        """Close on behalf of the owner (panel closing, widget teardown)."""
        self._close(reason)

    # ------------------------------------------------------------------
    # Calendar interaction
    # ------------------------------------------------------------------

    def previous_month(self) -> None:
        self._set_anchor(shift_month(self._state.month_anchor, -1))

    def next_month(self) -> None:
        self._set_anchor(shift_month(self._state.month_anchor, 1))

    def select_day(self, day: date) -> None:
        """Commit a day: set it, emit its ISO string and close in one step."""
        self._set_selected(day)
        self._set_anchor(day)
        self.value_changed.emit(to_iso(day))
        self._close("selection")

    def select_today(self) -> None:
        """Commit the real current date regardless of the displayed month."""
        self.select_day(self._today())

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _set_selected(self, value: date | None) -> None:
        self._selected = value
        self._state.selected_date = value

    def _set_anchor(self, value: date) -> None:
        anchor = first_of_month(value)
        if anchor == self._state.month_anchor:
            return
        self._state.month_anchor = anchor
        self.month_changed.emit(anchor)

    def _open(self, trigger: Rect, viewport_width: float) -> None:
        # Placement is recomputed on every open request, never cached
        self._placement = place_flyout(
            trigger, viewport_width, self._flyout_width, self._padding
        )
        if self._state.is_open:
            return

        anchor_source = self._selected or self._today()
        self._state = DateViewState(
            month_anchor=first_of_month(anchor_source),
            selected_date=self._selected,
            is_open=True,
        )
        self._listeners.acquire()
        logger.debug("Date flyout opened on %s", self.month_title)
        self.opened.emit()

    def _close(self, reason: str) -> None:
        self._listeners.release()
        if not self._state.is_open:
            return
        self._state = DateViewState(
            month_anchor=self._state.month_anchor,
            selected_date=self._selected,
            is_open=False,
        )
        self._placement = None
        logger.debug("Date flyout closed (%s)", reason)
        self.closed.emit(reason)
