"""FilterPanel dialog rendering a filter configuration."""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Mapping

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QKeyEvent
from PyQt6.QtWidgets import (
    QDialog,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from filterdeck.core.filter_panel_controller import FilterPanelController
from filterdeck.core.models import FieldType, FilterConfig, FilterFieldSchema
from filterdeck.core.row_layout import row_column_count
from filterdeck.ui.components.date_picker import DatePicker
from filterdeck.ui.components.no_scroll_widgets import NoScrollComboBox
from filterdeck.ui.constants import Colors, FontSizes, Sizes, Spacing
from filterdeck.ui.theme import (
    ghost_button_style,
    primary_button_style,
    secondary_button_style,
)

logger = logging.getLogger(__name__)


class FilterPanel(QDialog):
    """Modal panel editing one entity screen's filters.

    The panel owns a FilterPanelController; every field is rendered through
    a type dispatcher and writes straight into the controller's buffer.

    Attributes:
        filters_applied: Signal emitted with dict[str, str] on Apply.
        filters_cleared: Signal emitted on Clear All.
        panel_closed: Signal emitted when the panel closes via Apply or Cancel.
    """

    filters_applied = pyqtSignal(dict)
    filters_cleared = pyqtSignal()
    panel_closed = pyqtSignal()

    def __init__(
        self,
        config: FilterConfig,
        applied_filters: Mapping[str, str] | None = None,
        today: Callable[[], date] = date.today,
        parent: QWidget | None = None,
    ) -> None:
        """Initialize FilterPanel.

        Args:
            config: Filter configuration to render.
            applied_filters: Filters the caller currently uses.
            today: Clock used by the date pickers.
            parent: Parent widget.
        """
        super().__init__(parent)
        self._today = today
        self._editors: dict[str, QWidget] = {}
        self._date_pickers: list[DatePicker] = []
        self._result_code = QDialog.DialogCode.Rejected
        self._controller = FilterPanelController(config, applied_filters, parent=self)
        self._setup_ui()
        self._apply_style()
        self._connect_signals()

    def _setup_ui(self) -> None:
        """Set up title bar, field area and button row."""
        self.setModal(True)
        self.setMaximumWidth(Sizes.PANEL_MAX_WIDTH)
        self.setMinimumWidth(Sizes.PANEL_MAX_WIDTH // 2)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(Spacing.XL, Spacing.XL, Spacing.XL, Spacing.XL)
        layout.setSpacing(Spacing.XL)

        # Title bar
        title_row = QHBoxLayout()
        self._title_label = QLabel()
        self._title_label.setObjectName("PanelTitle")
        title_row.addWidget(self._title_label, stretch=1)

        self._close_btn = QPushButton("\u2715")  # ✕
        self._close_btn.setToolTip("Close")
        self._close_btn.setFixedSize(Sizes.ICON_BUTTON, Sizes.ICON_BUTTON)
        title_row.addWidget(self._close_btn)
        layout.addLayout(title_row)

        # Field rows, rebuilt on every open
        self._fields_frame = QFrame()
        self._fields_layout = QVBoxLayout(self._fields_frame)
        self._fields_layout.setContentsMargins(0, 0, 0, 0)
        self._fields_layout.setSpacing(Spacing.XL)
        layout.addWidget(self._fields_frame)

        # Divider + action buttons
        divider = QFrame()
        divider.setFrameShape(QFrame.Shape.HLine)
        divider.setObjectName("Divider")
        layout.addWidget(divider)

        btn_layout = QHBoxLayout()
        btn_layout.setSpacing(Spacing.MD)
        btn_layout.addStretch()

        self._clear_btn = QPushButton("Clear All")
        btn_layout.addWidget(self._clear_btn)

        self._cancel_btn = QPushButton("Cancel")
        btn_layout.addWidget(self._cancel_btn)

        self._apply_btn = QPushButton("Apply Filters")
        self._apply_btn.setDefault(True)
        btn_layout.addWidget(self._apply_btn)

        layout.addLayout(btn_layout)

    def _apply_style(self) -> None:
        """Apply dark theme styling."""
        self.setStyleSheet(f"""
            QDialog {{
                background-color: {Colors.BG_BASE};
                border: 1px solid {Colors.BG_BORDER};
            }}
            #PanelTitle {{
                color: {Colors.TEXT_PRIMARY};
                font-size: {FontSizes.TITLE}px;
                font-weight: bold;
            }}
            #FieldLabel {{
                color: {Colors.TEXT_PRIMARY};
                font-size: {FontSizes.LABEL}px;
                font-weight: 500;
            }}
            #Divider {{
                color: {Colors.BG_BORDER};
            }}
        """)
        self._apply_btn.setStyleSheet(primary_button_style())
        self._cancel_btn.setStyleSheet(secondary_button_style())
        self._clear_btn.setStyleSheet(ghost_button_style())
        self._close_btn.setStyleSheet(ghost_button_style())

    def _connect_signals(self) -> None:
        """Connect button and controller signals."""
        self._apply_btn.clicked.connect(self._controller.apply)
        self._clear_btn.clicked.connect(self._controller.clear)
        self._cancel_btn.clicked.connect(self.reject)
        self._close_btn.clicked.connect(self.reject)

        self._controller.applied.connect(self._on_applied)
        self._controller.cleared.connect(self._on_cleared)
        self._controller.closed.connect(self._on_closed)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def controller(self) -> FilterPanelController:
        return self._controller

    def set_config(self, config: FilterConfig) -> None:
        """Switch to another entity's configuration."""
        self._controller.set_config(config)
        if self._controller.is_open:
            self._build_fields()

    def set_applied_filters(self, applied_filters: Mapping[str, str] | None) -> None:
        """Replace the caller's committed filters."""
        self._controller.set_applied_filters(applied_filters)
        if self._controller.is_open:
            self._build_fields()

    def open_panel(self) -> None:
        """Open with a buffer seeded from the current applied filters."""
        self._controller.open()
        self._build_fields()
        self.show()
        self.raise_()

    def editor(self, key: str) -> QWidget:
        """Editor widget rendered for a field key."""
        return self._editors[key]

    def values(self) -> dict[str, str]:
        """Copy of the in-progress buffer."""
        return dict(self._controller.values)

    # ------------------------------------------------------------------
    # Field rendering
    # ------------------------------------------------------------------

    def _build_fields(self) -> None:
        """Render one grid per planned row."""
        self._dismiss_date_pickers("rebuild")
        while self._fields_layout.count():
            item = self._fields_layout.takeAt(0)
            widget = item.widget() if item is not None else None
            if widget is not None:
                widget.hide()
                widget.deleteLater()
        self._editors.clear()
        self._date_pickers.clear()

        config = self._controller.config
        self._title_label.setText(config.title)
        self.setWindowTitle(config.title)

        values = self._controller.values
        for row in self._controller.rows:
            row_widget = QWidget()
            grid = QGridLayout(row_widget)
            grid.setContentsMargins(0, 0, 0, 0)
            grid.setHorizontalSpacing(Spacing.LG)
            columns = row_column_count(row)
            for column in range(columns):
                grid.setColumnStretch(column, 1)

            for column, schema in enumerate(row):
                cell = self._create_field_cell(schema, values.get(schema.key, ""))
                grid.addWidget(cell, 0, column)
            self._fields_layout.addWidget(row_widget)

    def _create_field_cell(self, schema: FilterFieldSchema, value: str) -> QWidget:
        """Label plus editor for one field."""
        cell = QWidget()
        layout = QVBoxLayout(cell)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(Spacing.SM)

        label = QLabel(schema.label)
        label.setObjectName("FieldLabel")
        layout.addWidget(label)

        editor = self._create_editor(schema, value)
        layout.addWidget(editor)
        self._editors[schema.key] = editor
        return cell

    def _create_editor(self, schema: FilterFieldSchema, value: str) -> QWidget:
        """Dispatch on field type to build the editor widget.

        Args:
            schema: Field descriptor.
            value: Initial buffer value.

        Returns:
            Editor wired to write into the controller's buffer.
        """
        key = schema.key

        if schema.type is FieldType.SELECT:
            combo = NoScrollComboBox(schema.options)
            if not combo.set_current_value(value):
                logger.debug("Value %r of '%s' matches no option", value, key)
            combo.currentIndexChanged.connect(
                lambda _index: self._controller.set_value(key, combo.current_value())
            )
            return combo

        if schema.type is FieldType.DATE:
            picker = DatePicker(value=value, placeholder=schema.placeholder, today=self._today)
            picker.value_changed.connect(lambda text: self._controller.set_value(key, text))
            self._date_pickers.append(picker)
            return picker

        line_edit = QLineEdit()
        line_edit.setText(value)
        if schema.placeholder:
            line_edit.setPlaceholderText(schema.placeholder)
        if schema.type is FieldType.NUMBER:
            line_edit.setInputMethodHints(Qt.InputMethodHint.ImhFormattedNumbersOnly)
        line_edit.textEdited.connect(lambda text: self._controller.set_value(key, text))
        return line_edit

    # ------------------------------------------------------------------
    # Close paths
    # ------------------------------------------------------------------

    def reject(self) -> None:
        """Cancel, close button, window close and Escape all land here."""
        if self._controller.is_open:
            self._controller.cancel()
        else:
            super().reject()

    def keyPressEvent(self, event: QKeyEvent | None) -> None:
        """Keep Enter inside text fields from applying implicitly."""
        if event is None:
            return
        if event.key() in (Qt.Key.Key_Return, Qt.Key.Key_Enter) and not self._apply_btn.hasFocus():
            event.accept()
            return
        super().keyPressEvent(event)

    def _on_applied(self, values: dict) -> None:
        self._result_code = QDialog.DialogCode.Accepted
        self.filters_applied.emit(values)

    def _on_cleared(self) -> None:
        self.filters_cleared.emit()
        self._finish(QDialog.DialogCode.Rejected)

    def _on_closed(self) -> None:
        self._finish(self._result_code)
        self.panel_closed.emit()

    def _finish(self, code: QDialog.DialogCode) -> None:
        self._dismiss_date_pickers("panel_closed")
        self._result_code = QDialog.DialogCode.Rejected
        super().done(code.value)

    def _dismiss_date_pickers(self, reason: str) -> None:
        for picker in self._date_pickers:
            picker.dismiss(reason)
