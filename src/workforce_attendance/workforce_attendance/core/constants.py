"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SELECTION_MARGIN_MINUTES = 4 * 60
DEFAULT_LONG_PAUSE_THRESHOLD_MINUTES = 4 * 60
DEFAULT_DAYS_UNTIL_LOCKED = 3

# Read-path query padding around the target day (covers 24h+ shifts).
LOOKBEHIND_DAYS = 1
LOOKAHEAD_DAYS = 2

DEFAULT_LOG_LEVEL = "INFO"
