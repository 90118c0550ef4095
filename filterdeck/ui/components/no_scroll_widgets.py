"""Select box that ignores scroll wheel events when not focused.

This prevents accidental filter changes when scrolling through a panel.
"""

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QWheelEvent
from PyQt6.QtWidgets import QComboBox, QWidget

from filterdeck.core.models import SelectOption
from filterdeck.ui.constants import Colors


class NoScrollComboBox(QComboBox):
    """QComboBox of SelectOptions that ignores wheel events when not focused.

    Each item's user data holds the option value written to the filter
    buffer; the item text is the option label.
    """

    def __init__(
        self,
        options: tuple[SelectOption, ...] = (),
        parent: QWidget | None = None,
    ) -> None:
        """Initialize with StrongFocus policy and the given options.

        Args:
            options: Choices in display order.
            parent: Parent widget.
        """
        super().__init__(parent)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        for option in options:
            self.addItem(option.label, option.value)

    def addItem(self, text: str, userData: object = None) -> None:
        """Add item with dark theme colors."""
        super().addItem(text, userData)
        index = self.count() - 1
        self.setItemData(index, QColor(Colors.TEXT_PRIMARY), Qt.ItemDataRole.ForegroundRole)
        self.setItemData(index, QColor(Colors.BG_SURFACE), Qt.ItemDataRole.BackgroundRole)

    def current_value(self) -> str:
        """Value of the selected option, empty when nothing is selected."""
        data = self.currentData()
        return "" if data is None else str(data)

    def set_current_value(self, value: str) -> bool:
        """Select the option carrying ``value``.

        Returns:
            False when no option has that value; the selection is then cleared.
        """
        index = self.findData(value)
        self.setCurrentIndex(index)
        return index >= 0

    def wheelEvent(self, event: QWheelEvent | None) -> None:
        """Ignore wheel events unless widget has focus.

        Args:
            event: Wheel event to handle.
        """
        if event is None:
            return
        if self.hasFocus():
            super().wheelEvent(event)
        else:
            event.ignore()
