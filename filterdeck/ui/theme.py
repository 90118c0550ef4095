"""Theme management for FilterDeck.

Provides QSS stylesheet generation.
"""

from filterdeck.ui.constants import Colors, Fonts, FontSizes, Sizes, Spacing


def get_stylesheet() -> str:
    """Generate the application-wide QSS stylesheet.

    Returns:
        A string containing the complete QSS stylesheet.
    """
    return f"""
/* ========================================
   FilterDeck Theme
   ======================================== */

QWidget {{
    color: {Colors.TEXT_PRIMARY};
    font-family: "{Fonts.UI}";
    font-size: {FontSizes.BODY}px;
}}

QMainWindow, QDialog {{
    background-color: {Colors.BG_BASE};
}}

QLineEdit, QComboBox {{
    background-color: {Colors.BG_SURFACE};
    border: 1px solid {Colors.BG_BORDER};
    border-radius: 8px;
    min-height: {Sizes.INPUT_HEIGHT - 2 * Spacing.SM}px;
    padding: {Spacing.XS}px {Spacing.LG}px;
}}

QLineEdit:hover, QComboBox:hover {{
    border-color: {Colors.ACCENT};
}}

QLineEdit:focus, QComboBox:focus {{
    border: 2px solid {Colors.ACCENT};
}}

QComboBox QAbstractItemView {{
    background-color: {Colors.BG_SURFACE};
    selection-background-color: {Colors.BG_ELEVATED};
}}
"""


def primary_button_style() -> str:
    """Style of the primary (Apply) button."""
    return f"""
        QPushButton {{
            background-color: {Colors.ACCENT};
            color: {Colors.BG_BASE};
            border: none;
            border-radius: 16px;
            padding: {Spacing.SM}px {Spacing.LG}px;
            font-weight: bold;
        }}
        QPushButton:hover {{
            background-color: {Colors.ACCENT_HOVER};
        }}
    """


def secondary_button_style() -> str:
    """Style of secondary (Cancel) buttons."""
    return f"""
        QPushButton {{
            background-color: transparent;
            color: {Colors.TEXT_PRIMARY};
            border: 1px solid {Colors.BG_BORDER};
            border-radius: 16px;
            padding: {Spacing.SM}px {Spacing.LG}px;
        }}
        QPushButton:hover {{
            border-color: {Colors.TEXT_PRIMARY};
        }}
    """


def ghost_button_style() -> str:
    """Style of borderless buttons (Clear All, close, calendar toggle)."""
    return f"""
        QPushButton {{
            background-color: transparent;
            color: {Colors.TEXT_SECONDARY};
            border: none;
            border-radius: 6px;
            padding: {Spacing.XS}px {Spacing.SM}px;
        }}
        QPushButton:hover {{
            color: {Colors.TEXT_PRIMARY};
            background-color: {Colors.BG_ELEVATED};
        }}
    """
