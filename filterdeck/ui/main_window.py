"""Main window for the FilterDeck demo application.

Acts as the external caller of the filter panel: it owns the applied
filters of every entity screen and reuses a single FilterPanel across them.
"""

import logging

from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from filterdeck.core.filter_configs import FILTER_CONFIGS
from filterdeck.core.models import SelectOption
from filterdeck.ui.components.filter_panel import FilterPanel
from filterdeck.ui.components.no_scroll_widgets import NoScrollComboBox
from filterdeck.ui.constants import Spacing

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Screen picker, Filter button and a summary of applied filters."""

    def __init__(self) -> None:
        """Initialize the main window."""
        super().__init__()
        self.setWindowTitle("FilterDeck")
        self.setMinimumSize(960, 640)

        self._applied: dict[str, dict[str, str]] = {name: {} for name in FILTER_CONFIGS}
        self._screen = next(iter(FILTER_CONFIGS))

        self._setup_ui()
        self._panel = FilterPanel(
            FILTER_CONFIGS[self._screen], self._applied[self._screen], parent=self
        )
        self._panel.filters_applied.connect(self._on_filters_applied)
        self._panel.filters_cleared.connect(self._on_filters_cleared)
        self._refresh_summary()
        logger.debug("MainWindow initialized")

    def _setup_ui(self) -> None:
        """Set up toolbar row and summary label."""
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(Spacing.XL, Spacing.XL, Spacing.XL, Spacing.XL)
        layout.setSpacing(Spacing.LG)

        toolbar = QHBoxLayout()
        self._screen_combo = NoScrollComboBox(
            tuple(SelectOption(name, name.capitalize()) for name in FILTER_CONFIGS)
        )
        self._screen_combo.currentIndexChanged.connect(self._on_screen_changed)
        toolbar.addWidget(self._screen_combo)

        self._filter_btn = QPushButton("Filter")
        self._filter_btn.clicked.connect(self._on_filter_clicked)
        toolbar.addWidget(self._filter_btn)
        toolbar.addStretch()
        layout.addLayout(toolbar)

        self._summary_label = QLabel()
        self._summary_label.setWordWrap(True)
        layout.addWidget(self._summary_label)
        layout.addStretch()

        self.setCentralWidget(central)

    def _on_screen_changed(self, _index: int) -> None:
        self._screen = self._screen_combo.current_value()
        self._panel.set_config(FILTER_CONFIGS[self._screen])
        self._panel.set_applied_filters(self._applied[self._screen])
        self._refresh_summary()

    def _on_filter_clicked(self) -> None:
        self._panel.set_config(FILTER_CONFIGS[self._screen])
        self._panel.set_applied_filters(self._applied[self._screen])
        self._panel.open_panel()

    def _on_filters_applied(self, values: dict) -> None:
        self._applied[self._screen] = dict(values)
        self._panel.set_applied_filters(self._applied[self._screen])
        logger.info("Applied %s filters: %s", self._screen, values)
        self._refresh_summary()

    def _on_filters_cleared(self) -> None:
        self._applied[self._screen] = {}
        self._panel.set_applied_filters(self._applied[self._screen])
        logger.info("Cleared %s filters", self._screen)
        self._refresh_summary()

    def _refresh_summary(self) -> None:
        active = {k: v for k, v in self._applied[self._screen].items() if v}
        if not active:
            self._summary_label.setText(f"No filters applied to {self._screen}.")
            return
        parts = ", ".join(f"{key} = {value}" for key, value in active.items())
        self._summary_label.setText(f"Active {self._screen} filters: {parts}")
