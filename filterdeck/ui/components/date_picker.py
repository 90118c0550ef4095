"""DatePicker component: text input with a calendar flyout."""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable

from PyQt6.QtCore import QEvent, QObject, QPoint, QRect, Qt, pyqtSignal
from PyQt6.QtGui import QFocusEvent, QHideEvent, QKeyEvent, QMouseEvent
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from filterdeck.core.config import (
    CALENDAR_CELLS,
    DAYS_PER_WEEK,
    DISPLAY_DATE_PLACEHOLDER,
    FLYOUT_WIDTH,
)
from filterdeck.core.date_picker import DatePickerModel
from filterdeck.core.date_utils import WEEKDAY_HEADERS, display_text_for_value, format_display_date
from filterdeck.core.models import CalendarDay, Rect
from filterdeck.core.positioning import resolve_flyout_top
from filterdeck.ui.constants import Colors, FontSizes, Sizes, Spacing
from filterdeck.ui.theme import ghost_button_style

logger = logging.getLogger(__name__)

_KEY_NAMES = {
    Qt.Key.Key_Escape: "Escape",
    Qt.Key.Key_Left: "ArrowLeft",
    Qt.Key.Key_Right: "ArrowRight",
}

_OPENING_FOCUS_REASONS = (
    Qt.FocusReason.MouseFocusReason,
    Qt.FocusReason.TabFocusReason,
    Qt.FocusReason.BacktabFocusReason,
)

# Focus leaving with the window or to a popup is not a blur of the field
_KEEP_OPEN_FOCUS_REASONS = (
    Qt.FocusReason.ActiveWindowFocusReason,
    Qt.FocusReason.PopupFocusReason,
)


class CalendarFlyout(QFrame):
    """Floating month calendar rendered from a DatePickerModel.

    Shows a month header with previous/next buttons, weekday headers,
    a 6x7 grid of day buttons and a Today shortcut.
    """

    def __init__(self, model: DatePickerModel, parent: QWidget | None = None) -> None:
        """Initialize CalendarFlyout.

        Args:
            model: Picker state to render and drive.
            parent: Owning picker. The flyout is its own frameless window so
                dialogs and scroll areas never clip it.
        """
        super().__init__(parent, Qt.WindowType.Tool | Qt.WindowType.FramelessWindowHint)
        self.setAttribute(Qt.WidgetAttribute.WA_ShowWithoutActivating)
        self._model = model
        self._day_buttons: list[QPushButton] = []
        self._days: list[CalendarDay] = []
        self.setObjectName("CalendarFlyout")
        self._setup_ui()
        self._apply_style()
        self.hide()

    def _setup_ui(self) -> None:
        """Set up header, grid and footer."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(Spacing.LG, Spacing.LG, Spacing.LG, Spacing.LG)
        layout.setSpacing(Spacing.SM)

        # Month header
        header = QHBoxLayout()
        self._prev_btn = QPushButton("\u2039")  # ‹
        self._prev_btn.setToolTip("Previous month")
        self._prev_btn.setFixedSize(Sizes.ICON_BUTTON, Sizes.ICON_BUTTON)
        self._prev_btn.clicked.connect(self._model.previous_month)
        header.addWidget(self._prev_btn)

        self._title_label = QLabel()
        self._title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        header.addWidget(self._title_label, stretch=1)

        self._next_btn = QPushButton("\u203a")  # ›
        self._next_btn.setToolTip("Next month")
        self._next_btn.setFixedSize(Sizes.ICON_BUTTON, Sizes.ICON_BUTTON)
        self._next_btn.clicked.connect(self._model.next_month)
        header.addWidget(self._next_btn)
        layout.addLayout(header)

        # Weekday headers + day cells
        grid = QGridLayout()
        grid.setSpacing(Spacing.XS)
        for column, name in enumerate(WEEKDAY_HEADERS):
            label = QLabel(name)
            label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            label.setObjectName("WeekdayHeader")
            grid.addWidget(label, 0, column)

        for index in range(CALENDAR_CELLS):
            button = QPushButton()
            button.setFixedSize(Sizes.DAY_CELL, Sizes.DAY_CELL)
            button.setObjectName("DayCell")
            button.clicked.connect(lambda _checked=False, i=index: self._on_day_clicked(i))
            grid.addWidget(button, 1 + index // DAYS_PER_WEEK, index % DAYS_PER_WEEK)
            self._day_buttons.append(button)
        layout.addLayout(grid)

        # Today shortcut
        self._today_btn = QPushButton("Today")
        self._today_btn.setObjectName("TodayButton")
        self._today_btn.clicked.connect(self._model.select_today)
        layout.addWidget(self._today_btn)

        # Focus stays in the date input while the calendar is used
        for button in (self._prev_btn, self._next_btn, self._today_btn, *self._day_buttons):
            button.setFocusPolicy(Qt.FocusPolicy.NoFocus)

    def _apply_style(self) -> None:
        """Apply dark theme styling."""
        self.setStyleSheet(f"""
            #CalendarFlyout {{
                background-color: {Colors.BG_SURFACE};
                border: 2px solid {Colors.BG_BORDER};
                border-radius: 12px;
            }}
            QLabel {{
                color: {Colors.TEXT_PRIMARY};
                font-weight: bold;
            }}
            #WeekdayHeader {{
                color: {Colors.TEXT_SECONDARY};
                font-size: {FontSizes.CELL}px;
            }}
            #DayCell {{
                background: transparent;
                border: none;
                border-radius: 8px;
                font-size: {FontSizes.CELL}px;
            }}
            #DayCell:hover {{
                background-color: {Colors.BG_ELEVATED};
            }}
            #DayCell[outside="true"] {{
                color: {Colors.TEXT_DISABLED};
            }}
            #DayCell[highlighted="true"] {{
                background-color: {Colors.ACCENT};
                color: {Colors.BG_BASE};
                font-weight: bold;
            }}
            #TodayButton {{
                background: transparent;
                border: none;
                border-top: 1px solid {Colors.BG_BORDER};
                color: {Colors.ACCENT};
                padding: {Spacing.SM}px;
            }}
            #TodayButton:hover {{
                color: {Colors.TEXT_PRIMARY};
            }}
        """)
        self._prev_btn.setStyleSheet(ghost_button_style())
        self._next_btn.setStyleSheet(ghost_button_style())

    @property
    def days(self) -> list[CalendarDay]:
        """Grid currently rendered."""
        return list(self._days)

    def refresh(self) -> None:
        """Re-render title and day cells from the model."""
        self._title_label.setText(self._model.month_title)
        self._days = self._model.calendar_days()
        for button, day in zip(self._day_buttons, self._days):
            button.setText(str(day.date.day))
            button.setToolTip(format_display_date(day.date))
            button.setProperty("outside", not day.is_current_month)
            button.setProperty("highlighted", day.is_today or day.is_selected)
            # Re-polish so dynamic properties take effect
            button.style().unpolish(button)
            button.style().polish(button)

    def _on_day_clicked(self, index: int) -> None:
        """Commit the clicked day."""
        if 0 <= index < len(self._days):
            self._model.select_day(self._days[index].date)


class _DismissEventFilter(QObject):
    """Application-wide filter closing the flyout on outside click or key."""

    def __init__(self, picker: DatePicker) -> None:
        super().__init__(picker)
        self._picker = picker

    def eventFilter(self, obj: QObject | None, event: QEvent | None) -> bool:
        if event is None:
            return False
        if event.type() == QEvent.Type.MouseButtonPress and isinstance(event, QMouseEvent):
            if not self._picker.contains_global_point(event.globalPosition().toPoint()):
                self._picker.model.handle_outside_click()
            return False
        if event.type() == QEvent.Type.KeyPress and isinstance(event, QKeyEvent):
            key = _KEY_NAMES.get(Qt.Key(event.key()))
            if key is not None and self._picker.model.handle_key(key):
                return True
        return False


class DatePicker(QWidget):
    """Date input accepting typed MM/DD/YYYY or ISO text plus a calendar.

    The field value exchanged with callers is the ISO ``YYYY-MM-DD`` string
    once the input resolves to a date, or the raw text while it does not.

    Attributes:
        value_changed: Signal emitted with the new field value.
    """

    value_changed = pyqtSignal(str)

    def __init__(
        self,
        value: str = "",
        placeholder: str | None = None,
        today: Callable[[], date] = date.today,
        parent: QWidget | None = None,
    ) -> None:
        """Initialize DatePicker.

        Args:
            value: Initial field value.
            placeholder: Input hint; defaults to ``mm/dd/yyyy``.
            today: Clock returning the current date.
            parent: Parent widget.
        """
        super().__init__(parent)
        self._value = ""
        self._typing = False
        self._dismiss_filter = _DismissEventFilter(self)
        self.model = DatePickerModel(subscribe=self._subscribe, today=today, parent=self)
        self._flyout = CalendarFlyout(self.model, parent=self)
        self._setup_ui(placeholder)
        self._connect_signals()
        self.set_value(value)

    def _setup_ui(self, placeholder: str | None) -> None:
        """Set up the input row."""
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self._input = QLineEdit()
        self._input.setPlaceholderText(placeholder or DISPLAY_DATE_PLACEHOLDER)
        self._input.installEventFilter(self)
        layout.addWidget(self._input, stretch=1)

        self._toggle_btn = QPushButton("\u25a6")  # ▦
        self._toggle_btn.setToolTip("Open calendar")
        self._toggle_btn.setFixedSize(Sizes.ICON_BUTTON, Sizes.ICON_BUTTON)
        self._toggle_btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self._toggle_btn.setStyleSheet(ghost_button_style())
        layout.addWidget(self._toggle_btn)

    def _connect_signals(self) -> None:
        """Connect internal signals."""
        self._input.textEdited.connect(self._on_text_edited)
        self._toggle_btn.clicked.connect(self._on_toggle_clicked)
        self.model.value_changed.connect(self._on_model_value_changed)
        self.model.opened.connect(self._show_flyout)
        self.model.closed.connect(self._on_flyout_closed)
        self.model.month_changed.connect(self._on_month_changed)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def value(self) -> str:
        """Current field value (ISO date or raw text)."""
        return self._value

    def display_text(self) -> str:
        """Text currently shown in the input."""
        return self._input.text()

    def set_value(self, value: str | None) -> None:
        """Set the value from outside without emitting value_changed."""
        self._value = value or ""
        self.model.set_value(self._value)
        self._input.setText(display_text_for_value(self._value))
        if self.model.is_open:
            self._flyout.refresh()

    def dismiss(self, reason: str = "dismiss") -> None:
        """Close the flyout on behalf of the owner."""
        self.model.dismiss(reason)

    @property
    def flyout(self) -> CalendarFlyout:
        return self._flyout

    def available_area(self) -> QRect:
        """Screen area the flyout may occupy, in global coordinates."""
        screen = self.screen()
        if screen is None:
            return self.window().geometry()
        return screen.availableGeometry()

    def trigger_rect(self) -> Rect:
        """Bounding rectangle of the input row relative to the available area."""
        area = self.available_area()
        top_left = self.mapToGlobal(QPoint(0, 0)) - area.topLeft()
        return Rect(
            left=top_left.x(),
            top=top_left.y(),
            right=top_left.x() + self.width(),
            bottom=top_left.y() + self.height(),
        )

    def viewport_width(self) -> int:
        return self.available_area().width()

    def contains_global_point(self, point: QPoint) -> bool:
        """True when a screen point lies on the input row or the flyout."""
        if self.rect().contains(self.mapFromGlobal(point)):
            return True
        flyout = self._flyout
        return flyout.isVisible() and flyout.geometry().contains(point)

    def owns_widget(self, widget: QWidget | None) -> bool:
        """True when the widget is the picker, the flyout or inside either."""
        if widget is None:
            return False
        return (
            widget is self
            or self.isAncestorOf(widget)
            or widget is self._flyout
            or self._flyout.isAncestorOf(widget)
        )

    # ------------------------------------------------------------------
    # Qt overrides
    # ------------------------------------------------------------------

    def eventFilter(self, obj: QObject | None, event: QEvent | None) -> bool:
        """Open the flyout on user focus; close it when focus moves elsewhere."""
        if obj is self._input and isinstance(event, QFocusEvent):
            if (
                event.type() == QEvent.Type.FocusIn
                and event.reason() in _OPENING_FOCUS_REASONS
            ):
                self.model.focus(self.trigger_rect(), self.viewport_width())
            elif (
                event.type() == QEvent.Type.FocusOut
                and event.reason() not in _KEEP_OPEN_FOCUS_REASONS
                and not self.owns_widget(QApplication.focusWidget())
            ):
                self.model.dismiss("blur")
        return super().eventFilter(obj, event)

    def hideEvent(self, event: QHideEvent | None) -> None:
        """Release the flyout and its listeners when the picker goes away."""
        self.model.dismiss("unmount")
        super().hideEvent(event)

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _subscribe(self) -> Callable[[], None]:
        """Install the application-wide dismiss filter; return its remover."""
        app = QApplication.instance()
        if app is None:
            return lambda: None
        app.installEventFilter(self._dismiss_filter)
        return lambda: app.removeEventFilter(self._dismiss_filter)

    def _on_text_edited(self, text: str) -> None:
        self._typing = True
        try:
            self.model.type_text(text)
        finally:
            self._typing = False

    def _on_toggle_clicked(self) -> None:
        self.model.toggle(self.trigger_rect(), self.viewport_width())

    def _on_model_value_changed(self, value: str) -> None:
        self._value = value
        # Typed text stays as typed; picked dates are shown in display format
        if not self._typing:
            self._input.setText(display_text_for_value(value))
        self.value_changed.emit(value)

    def _on_month_changed(self, _anchor: date) -> None:
        if self.model.is_open:
            self._flyout.refresh()

    def _show_flyout(self) -> None:
        placement = self.model.placement
        area = self.available_area()
        trigger = self.trigger_rect()
        width = int(placement.width) if placement is not None else FLYOUT_WIDTH
        x = int(placement.x) if placement is not None else int(trigger.left)
        x = max(0, min(x, area.width() - width))

        self._flyout.setFixedWidth(width)
        self._flyout.refresh()
        self._flyout.adjustSize()
        y = int(resolve_flyout_top(trigger, self._flyout.height(), area.height(), Spacing.SM))
        self._flyout.move(area.x() + x, area.y() + y)
        self._flyout.show()
        self._flyout.raise_()
        logger.debug("Calendar flyout shown at (%d, %d), width %d", x, y, width)

    def _on_flyout_closed(self, reason: str) -> None:
        self._flyout.hide()
        if reason == "escape":
            self._input.setFocus(Qt.FocusReason.OtherFocusReason)
        elif reason == "selection":
            self._input.setText(display_text_for_value(self._value))
