"""UI constants for FilterDeck.

Contains theme colors, fonts, spacing and widget sizes.
"""


class Colors:
    """Dark palette used by the filter panel and date flyout."""

    # Backgrounds
    BG_BASE = "#000000"  # Panel background
    BG_SURFACE = "#121212"  # Inputs and flyout body
    BG_ELEVATED = "#1F1F1F"  # Hovered cells
    BG_BORDER = "#404040"  # Borders

    # Accent
    ACCENT = "#1DB954"  # Today, selection, primary button
    ACCENT_HOVER = "#1ED760"

    # Text
    TEXT_PRIMARY = "#FFFFFF"
    TEXT_SECONDARY = "#B3B3B3"
    TEXT_DISABLED = "#666666"  # Days outside the displayed month


class Fonts:
    """Font family definitions."""

    UI = "Inter"


class FontSizes:
    """Font size constants in pixels."""

    TITLE = 18
    BODY = 13
    LABEL = 12
    CELL = 11


class Spacing:
    """Spacing constants in pixels."""

    XS = 4
    SM = 8
    MD = 12
    LG = 16
    XL = 24


class Sizes:
    """Fixed widget sizes in pixels."""

    PANEL_MAX_WIDTH = 672
    INPUT_HEIGHT = 40
    DAY_CELL = 32
    ICON_BUTTON = 28
