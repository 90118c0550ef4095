"""Core filtering logic, independent of any widget."""

from .date_picker import DatePickerModel
from .exceptions import (
    ConfigurationError,
    DuplicateFieldKeyError,
    FilterDeckError,
    PanelStateError,
    UnknownFieldError,
)
from .filter_configs import FILTER_CONFIGS, get_filter_config
from .filter_panel_controller import FilterPanelController
from .filter_state import FilterStateStore
from .models import (
    CalendarDay,
    DateViewState,
    FieldType,
    FilterConfig,
    FilterFieldSchema,
    FlyoutAlignment,
    FlyoutPlacement,
    Rect,
    SelectOption,
)
from .positioning import (
    clamp_flyout_width,
    place_flyout,
    resolve_flyout_top,
    resolve_position,
)
from .row_layout import group_fields_by_row

__all__ = [
    "CalendarDay",
    "ConfigurationError",
    "DatePickerModel",
    "DateViewState",
    "DuplicateFieldKeyError",
    "FieldType",
    "FILTER_CONFIGS",
    "FilterConfig",
    "FilterDeckError",
    "FilterFieldSchema",
    "FilterPanelController",
    "FilterStateStore",
    "FlyoutAlignment",
    "FlyoutPlacement",
    "PanelStateError",
    "Rect",
    "SelectOption",
    "UnknownFieldError",
    "clamp_flyout_width",
    "get_filter_config",
    "group_fields_by_row",
    "place_flyout",
    "resolve_flyout_top",
    "resolve_position",
]
