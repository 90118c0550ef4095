"""Engine-level configuration constants."""

# Date formats
DISPLAY_DATE_FORMAT = "MM/DD/YYYY"
ISO_DATE_FORMAT = "YYYY-MM-DD"
DISPLAY_DATE_PLACEHOLDER = "mm/dd/yyyy"

# Calendar grid: six full weeks starting on Sunday
CALENDAR_WEEKS = 6
DAYS_PER_WEEK = 7
CALENDAR_CELLS = CALENDAR_WEEKS * DAYS_PER_WEEK

# Flyout geometry in pixels
FLYOUT_WIDTH = 320
VIEWPORT_PADDING = 16
