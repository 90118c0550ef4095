"""Reusable UI components."""

from filterdeck.ui.components.date_picker import CalendarFlyout, DatePicker
from filterdeck.ui.components.filter_panel import FilterPanel
from filterdeck.ui.components.no_scroll_widgets import NoScrollComboBox

__all__ = [
    "CalendarFlyout",
    "DatePicker",
    "FilterPanel",
    "NoScrollComboBox",
]
